import logging
import time

import requests

from portfolio_site.presentation.state import (
    AppState, FormStatus, contact_updated, data_loaded, fallback_loaded,
    submission_failed, submission_succeeded, submit,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class FetchError(Exception):
    pass


class PortfolioClient:
    """Talks to the portfolio ``/api`` endpoints."""

    def __init__(self, base_url, session=None, timeout=DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def url(self, path):
        return f'{self.base_url}/api/{path}'

    def _get(self, path):
        response = self.session.get(self.url(path), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def fetch_profile(self):
        return self._get('profile')

    def fetch_skills(self):
        return self._get('skills')

    def fetch_projects(self):
        return self._get('projects')

    def send_contact(self, payload):
        """POST a contact message. Returns ``(ok, body)``."""
        response = self.session.post(self.url('contact'), json=payload, timeout=self.timeout)
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        return response.ok, body


def load_state(client, state=None):
    """Fetch all three documents; any failure swaps in the fallback dataset for all of them."""
    state = state or AppState()
    try:
        profile = client.fetch_profile()
        skills = client.fetch_skills()
        projects = client.fetch_projects()
    except (requests.RequestException, ValueError, FetchError):
        logger.exception('Error fetching data, using fallback data')
        return fallback_loaded(state)
    return data_loaded(state, profile, skills, projects)


def submit_contact(client, state, clock=time.monotonic):
    form = submit(state.contact, clock())
    if form.status is not FormStatus.SUBMITTING:
        return contact_updated(state, form)
    try:
        ok, body = client.send_contact(form.payload)
    except requests.RequestException:
        logger.exception('Error sending message')
        return contact_updated(state, submission_failed(form, clock()))
    if ok:
        return contact_updated(state, submission_succeeded(form, clock()))
    return contact_updated(state, submission_failed(form, clock(), body.get('error')))
