import json
from unittest import mock

import pytest
import requests

from portfolio_site.presentation.client import PortfolioClient, load_state, submit_contact
from portfolio_site.presentation.state import (
    FAILURE_MESSAGE, SUCCESS_MESSAGE, AppState, ContactForm, FormStatus, contact_updated,
)


def make_response(status_code=200, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = b'' if body is None else json.dumps(body).encode()
    response.url = 'http://portfolio.test'
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return PortfolioClient('http://portfolio.test/', session=session, timeout=3)


def serve(session, documents):
    def get(url, timeout):
        resource = url.rsplit('/', 1)[1]
        return documents[resource]
    session.get.side_effect = get


def test_load_state_uses_api_documents(api, session):
    serve(session, {
        'profile': make_response(body={'name': 'Jane'}),
        'skills': make_response(body=[{'name': 'Go', 'category': 'Backend', 'display_order': 1}]),
        'projects': make_response(body=[]),
    })
    state = load_state(api)
    assert state.profile == {'name': 'Jane'}
    assert state.skills[0]['name'] == 'Go'
    assert state.used_fallback is False
    session.get.assert_any_call('http://portfolio.test/api/profile', timeout=3)


def test_network_error_switches_everything_to_fallback(api, session):
    session.get.side_effect = requests.ConnectionError('down')
    state = load_state(api)
    assert state.used_fallback is True
    assert state.profile['name'] == 'Ahmed Aboelcode'
    assert len(state.skills) == 10
    assert len(state.projects) == 3


def test_non_ok_status_on_any_resource_switches_to_fallback(api, session):
    serve(session, {
        'profile': make_response(body={'name': 'Jane'}),
        'skills': make_response(500, {'error': 'Failed to fetch skills data'}),
        'projects': make_response(body=[]),
    })
    state = load_state(api)
    assert state.used_fallback is True
    assert state.profile['name'] == 'Ahmed Aboelcode'


def test_invalid_json_switches_to_fallback(api, session):
    response = make_response()
    response._content = b'<html>'
    session.get.return_value = response
    assert load_state(api).used_fallback is True


def test_submit_contact_success(api, session):
    session.post.return_value = make_response(201, {'success': True, 'message': 'Message sent successfully'})
    state = contact_updated(AppState(), ContactForm(name='Sam', email='s@e.com', message='Hi'))

    state = submit_contact(api, state, clock=lambda: 1.0)

    session.post.assert_called_once_with(
        'http://portfolio.test/api/contact',
        json={'name': 'Sam', 'email': 's@e.com', 'message': 'Hi'}, timeout=3)
    assert state.contact.status is FormStatus.SUCCESS
    assert state.contact.status_message == SUCCESS_MESSAGE
    assert state.contact.name == ''


def test_submit_contact_server_error_message(api, session):
    session.post.return_value = make_response(500, {'error': 'Failed to save message'})
    state = contact_updated(AppState(), ContactForm(name='Sam', email='s@e.com', message='Hi'))
    state = submit_contact(api, state, clock=lambda: 1.0)
    assert state.contact.status is FormStatus.ERROR
    assert state.contact.status_message == 'Failed to save message'
    assert state.contact.message == 'Hi'


def test_submit_contact_network_failure(api, session):
    session.post.side_effect = requests.Timeout('slow')
    state = contact_updated(AppState(), ContactForm(name='Sam', email='s@e.com', message='Hi'))
    state = submit_contact(api, state, clock=lambda: 1.0)
    assert state.contact.status is FormStatus.ERROR
    assert state.contact.status_message == FAILURE_MESSAGE


def test_submit_contact_with_empty_fields_never_sends(api, session):
    state = contact_updated(AppState(), ContactForm(name='Sam'))
    state = submit_contact(api, state, clock=lambda: 1.0)
    session.post.assert_not_called()
    assert state.contact.status is FormStatus.ERROR


def test_client_against_running_app(client):
    """The client's URLs line up with the API blueprint."""
    api = PortfolioClient('http://localhost')
    for path in ('profile', 'skills', 'projects'):
        url = api.url(path)
        assert client.get(url.replace('http://localhost', '')).status_code == 200
