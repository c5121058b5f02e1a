from datetime import datetime, timezone

from portfolio_site import db


def utcnow():
    return datetime.now(timezone.utc)


class Document(db.Model):
    __tablename__ = 'documents'

    resource = db.Column(db.String(50), primary_key=True)
    body = db.Column(db.Text, nullable=False)  # JSON string
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)


def timestamp():
    """Current UTC time as an ISO-8601 string with millisecond precision and a Z suffix."""
    return utcnow().isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def next_message_id(messages):
    ids = [m.get('id') for m in messages if isinstance(m, dict)]
    ids = [i for i in ids if isinstance(i, int) and not isinstance(i, bool)]
    return max(ids) + 1 if ids else 1


def new_message(messages, record):
    """Build the stored form of a contact message appended after ``messages``."""
    message = {
        'id': next_message_id(messages),
        'name': record.get('name'),
        'email': record.get('email'),
        'message': record.get('message'),
        'read': False,
        'created_at': timestamp(),
    }
    return message
