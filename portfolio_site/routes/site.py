import logging

from flask import Blueprint, render_template, request

from portfolio_site import get_store
from portfolio_site.defaults import MESSAGES, PROFILE, PROJECTS, SKILLS, read_fallback
from portfolio_site.presentation.client import FetchError, load_state, submit_contact
from portfolio_site.presentation.state import (
    AppState, ContactForm, category_selected, contact_updated,
)
from portfolio_site.presentation.views import page_view

site_bp = Blueprint('site', __name__)
logger = logging.getLogger(__name__)


class StoreSource:
    """Serves the page's documents straight from the store, in place of the HTTP client."""

    def __init__(self, store):
        self.store = store

    def _fetch(self, resource):
        try:
            document = self.store.read(resource)
        except Exception as exc:
            raise FetchError(resource) from exc
        return read_fallback(resource) if document is None else document

    def fetch_profile(self):
        return self._fetch(PROFILE)

    def fetch_skills(self):
        return self._fetch(SKILLS)

    def fetch_projects(self):
        return self._fetch(PROJECTS)

    def send_contact(self, payload):
        try:
            stored = self.store.append(MESSAGES, payload)
        except Exception:
            logger.exception('Error saving message')
            stored = None
        if stored is None:
            return False, {'error': 'Failed to save message'}
        return True, {'success': True, 'message': 'Message sent successfully'}


def render_page(state):
    state = category_selected(state, request.args.get('category'))
    return render_template('index.html', page=page_view(state))


@site_bp.route('/', methods=['GET'])
def index():
    return render_page(load_state(StoreSource(get_store())))


@site_bp.route('/contact', methods=['POST'])
def contact():
    source = StoreSource(get_store())
    form = ContactForm(
        name=request.form.get('name', ''),
        email=request.form.get('email', ''),
        message=request.form.get('message', ''),
    )
    state = submit_contact(source, contact_updated(AppState(), form))
    return render_page(load_state(source, state))
