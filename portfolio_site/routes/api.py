import logging
from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException
from werkzeug.security import check_password_hash

from portfolio_site import get_store
from portfolio_site.defaults import MESSAGES, PROFILE, PROJECTS, SKILLS, read_fallback

api_bp = Blueprint('api', __name__)
logger = logging.getLogger(__name__)


# --- Auth Helpers ---
def generate_token(username):
    secret_key = current_app.config['SECRET_KEY']
    payload = {
        'username': username,
        'exp': datetime.now(timezone.utc) + timedelta(hours=current_app.config['TOKEN_TTL_HOURS'])
    }
    return jwt.encode(payload, secret_key, algorithm='HS256')


def verify_token(token):
    secret_key = current_app.config['SECRET_KEY']
    try:
        payload = jwt.decode(token, secret_key, algorithms=['HS256'])
    except jwt.InvalidTokenError:
        return None
    return payload.get('username')


def admin_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        auth_header = request.headers.get('Authorization', None)
        if not auth_header or not auth_header.startswith('Bearer '):
            return jsonify({'error': 'Missing or invalid token'}), 401
        token = auth_header.split(' ', 1)[1]
        username = verify_token(token)
        if not username:
            return jsonify({'error': 'Invalid or expired token'}), 401
        if username != current_app.config['ADMIN_USERNAME']:
            return jsonify({'error': 'Unauthorized'}), 403
        return f(*args, **kwargs)
    return decorated


def parse_bool(val):
    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        return val.lower() == 'true'
    return False


def request_data():
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


# --- Errors ---
@api_bp.app_errorhandler(404)
@api_bp.app_errorhandler(405)
def api_http_error(e):
    if request.path.startswith('/api/'):
        return jsonify({'error': e.description}), e.code
    return e


@api_bp.errorhandler(HTTPException)
def http_error(e):
    return jsonify({'error': e.description}), e.code


@api_bp.errorhandler(Exception)
def unexpected_error(e):
    logger.exception('Unhandled error on %s %s', request.method, request.path)
    return jsonify({'error': 'Internal server error'}), 500


# --- Auth Route (login) ---
@api_bp.route('/admin/login', methods=['POST'])
def admin_login():
    data = request_data()
    username = data.get('username')
    password = data.get('password')
    password_hash = current_app.config.get('ADMIN_PASSWORD_HASH')
    if (not username or not password or not password_hash
            or username != current_app.config['ADMIN_USERNAME']
            or not check_password_hash(password_hash, password)):
        logger.warning('Failed admin login for %r', username)
        return jsonify({'error': 'Invalid credentials'}), 401
    token = generate_token(username)
    return jsonify({'token': token})


# --- Public documents ---
def serve_document(resource):
    try:
        document = get_store().read(resource)
    except Exception:
        logger.exception('Error fetching %s', resource)
        return jsonify({'error': f'Failed to fetch {resource} data'}), 500
    if document is None:
        logger.warning('No %s document, serving the default', resource)
        document = read_fallback(resource)
    return jsonify(document)


@api_bp.route('/profile', methods=['GET'])
def get_profile():
    return serve_document(PROFILE)


@api_bp.route('/skills', methods=['GET'])
def get_skills():
    return serve_document(SKILLS)


@api_bp.route('/projects', methods=['GET'])
def get_projects():
    return serve_document(PROJECTS)


# --- Contact ---
@api_bp.route('/contact', methods=['POST'])
def create_contact():
    data = request_data()
    name = data.get('name')
    email = data.get('email')
    message = data.get('message')
    if not name or not email or not message:
        return jsonify({'error': 'All fields are required'}), 400
    try:
        stored = get_store().append(MESSAGES, {'name': name, 'email': email, 'message': message})
    except Exception:
        logger.exception('Error saving message')
        stored = None
    if stored is None:
        return jsonify({'error': 'Failed to save message'}), 500
    return jsonify({'success': True, 'message': 'Message sent successfully'}), 201


# --- Messages inbox ---
def stored_messages(store):
    messages = store.read(MESSAGES)
    if not isinstance(messages, list):
        return []
    valid = [m for m in messages if isinstance(m, dict)]
    if len(valid) != len(messages):
        logger.warning('Skipping %d malformed message entries', len(messages) - len(valid))
    return valid


def message_sort_key(message):
    message_id = message.get('id')
    if not isinstance(message_id, int):
        message_id = 0
    return str(message.get('created_at') or ''), message_id


@api_bp.route('/messages', methods=['GET'])
@admin_required
def get_messages():
    messages = sorted(stored_messages(get_store()), key=message_sort_key, reverse=True)
    return jsonify(messages)


@api_bp.route('/messages/<int:message_id>', methods=['PUT'])
@admin_required
def mark_message_read(message_id):
    store = get_store()
    if not any(m.get('id') == message_id for m in stored_messages(store)):
        return jsonify({'error': 'Message not found'}), 404
    read = parse_bool(request_data().get('read', True))

    def mark(current):
        current = current if isinstance(current, list) else []
        return [
            dict(m, read=read) if isinstance(m, dict) and m.get('id') == message_id else m
            for m in current
        ]

    if store.update(MESSAGES, mark) is None:
        return jsonify({'error': 'Failed to update message'}), 500
    return jsonify({'message': 'Message marked as read' if read else 'Message marked as unread'})
