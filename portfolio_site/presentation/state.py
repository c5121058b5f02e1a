import enum
from dataclasses import dataclass, field, replace
from typing import Optional

from portfolio_site.presentation.fallback import (
    FALLBACK_PROFILE, FALLBACK_PROJECTS, FALLBACK_SKILLS,
)

ALL_CATEGORIES = 'all'
STATUS_DISPLAY_SECONDS = 5.0

EMPTY_FIELDS_MESSAGE = 'Please fill out all fields'
SUCCESS_MESSAGE = 'Message sent successfully! I will get back to you soon.'
FAILURE_MESSAGE = 'Failed to send message. Please try again.'


class FormStatus(enum.Enum):
    IDLE = 'idle'
    SUBMITTING = 'submitting'
    SUCCESS = 'success'
    ERROR = 'error'


@dataclass(frozen=True)
class ContactForm:
    name: str = ''
    email: str = ''
    message: str = ''
    status: FormStatus = FormStatus.IDLE
    status_message: str = ''
    shown_at: Optional[float] = None

    @property
    def payload(self):
        return {'name': self.name, 'email': self.email, 'message': self.message}


@dataclass(frozen=True)
class AppState:
    profile: dict = field(default_factory=dict)
    skills: tuple = ()
    projects: tuple = ()
    active_category: str = ALL_CATEGORIES
    used_fallback: bool = False
    contact: ContactForm = field(default_factory=ContactForm)


def _as_tuple(items):
    return tuple(items) if isinstance(items, list) else ()


def data_loaded(state, profile, skills, projects):
    return replace(
        state,
        profile=profile if isinstance(profile, dict) else {},
        skills=_as_tuple(skills),
        projects=_as_tuple(projects),
        used_fallback=False,
    )


def fallback_loaded(state):
    return replace(
        state,
        profile=dict(FALLBACK_PROFILE),
        skills=tuple(FALLBACK_SKILLS),
        projects=tuple(FALLBACK_PROJECTS),
        used_fallback=True,
    )


def category_selected(state, category):
    return replace(state, active_category=category or ALL_CATEGORIES)


def contact_updated(state, form):
    return replace(state, contact=form)


# --- Contact form ---
def edit_field(form, **values):
    return replace(form, **values)


def submit(form, now):
    """Idle -> Submitting, or straight to Error when a field is empty."""
    if not form.name or not form.email or not form.message:
        return show_status(form, FormStatus.ERROR, EMPTY_FIELDS_MESSAGE, now)
    return replace(form, status=FormStatus.SUBMITTING, status_message='', shown_at=None)


def submission_succeeded(form, now):
    cleared = replace(form, name='', email='', message='')
    return show_status(cleared, FormStatus.SUCCESS, SUCCESS_MESSAGE, now)


def submission_failed(form, now, error=None):
    return show_status(form, FormStatus.ERROR, error or FAILURE_MESSAGE, now)


def show_status(form, status, message, now):
    return replace(form, status=status, status_message=message, shown_at=now)


def tick(form, now):
    """Hide a success or error message once it has been shown long enough."""
    if form.status not in (FormStatus.SUCCESS, FormStatus.ERROR):
        return form
    if form.shown_at is not None and now - form.shown_at < STATUS_DISPLAY_SECONDS:
        return form
    return replace(form, status=FormStatus.IDLE, status_message='', shown_at=None)
