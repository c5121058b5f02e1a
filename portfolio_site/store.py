import json
import logging
import os
import tempfile
import threading

from sqlalchemy.exc import SQLAlchemyError

from portfolio_site.defaults import RESOURCES
from portfolio_site.models import Document, new_message

logger = logging.getLogger(__name__)


class UnknownResource(KeyError):
    pass


class DocumentStore:
    resources = RESOURCES

    def __init__(self):
        self._lock = threading.RLock()

    def _check(self, resource):
        if resource not in self.resources:
            raise UnknownResource(resource)

    def read(self, resource):
        raise NotImplementedError

    def write(self, resource, document):
        raise NotImplementedError

    def exists(self, resource):
        raise NotImplementedError

    def update(self, resource, fn):
        """Replace a document with ``fn(current)`` while holding the writer lock.

        Returns the new document, or ``None`` if it could not be persisted.
        """
        self._check(resource)
        with self._lock:
            document = fn(self.read(resource))
            if not self.write(resource, document):
                return None
            return document

    def append(self, resource, record):
        """Store a contact message, assigning its id, read flag and timestamp."""
        stored = {}

        def push(messages):
            if messages is None:
                messages = []
            elif not isinstance(messages, list):
                logger.warning('%s document is not a list, starting a new one', resource)
                messages = []
            stored.update(new_message(messages, record))
            return messages + [stored]

        if self.update(resource, push) is None:
            return None
        logger.info('Stored message %s from %s', stored['id'], stored['email'])
        return stored

    def seed(self, defaults):
        """Write each default document whose resource does not exist yet."""
        created = []
        for resource, document in defaults.items():
            self._check(resource)
            with self._lock:
                if self.exists(resource):
                    continue
                if self.write(resource, document):
                    created.append(resource)
        if created:
            logger.info('Seeded default documents: %s', ', '.join(created))
        return created


class JsonFileStore(DocumentStore):
    def __init__(self, data_dir):
        super().__init__()
        self.data_dir = data_dir

    def path_for(self, resource):
        self._check(resource)
        return os.path.join(self.data_dir, f'{resource}.json')

    def exists(self, resource):
        return os.path.exists(self.path_for(resource))

    def read(self, resource):
        path = self.path_for(resource)
        if not os.path.exists(path):
            return None
        try:
            with open(path, encoding='utf-8') as fh:
                return json.load(fh)
        except (OSError, ValueError):
            logger.exception('Error reading file %s', path)
            return None

    def write(self, resource, document):
        path = self.path_for(resource)
        tmp_path = None
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with tempfile.NamedTemporaryFile(
                'w', encoding='utf-8', dir=os.path.dirname(path),
                prefix=f'.{resource}.', suffix='.tmp', delete=False,
            ) as fh:
                tmp_path = fh.name
                json.dump(document, fh, indent=2, ensure_ascii=False)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, path)
            return True
        except (OSError, TypeError, ValueError):
            logger.exception('Error writing file %s', path)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False


class SqlDocumentStore(DocumentStore):
    """Documents stored as JSON text keyed by resource name.

    Must be used inside an application context.
    """

    def __init__(self, db):
        super().__init__()
        self.db = db

    def exists(self, resource):
        self._check(resource)
        return self.db.session.get(Document, resource) is not None

    def read(self, resource):
        self._check(resource)
        row = self.db.session.get(Document, resource)
        if row is None:
            return None
        try:
            return json.loads(row.body)
        except ValueError:
            logger.exception('Error parsing stored %s document', resource)
            return None

    def write(self, resource, document):
        self._check(resource)
        try:
            self._put(resource, document)
            self.db.session.commit()
            return True
        except (SQLAlchemyError, TypeError, ValueError):
            self.db.session.rollback()
            logger.exception('Error writing %s document', resource)
            return False

    def _put(self, resource, document):
        body = json.dumps(document, indent=2, ensure_ascii=False)
        row = self.db.session.get(Document, resource)
        if row is None:
            self.db.session.add(Document(resource=resource, body=body))
        else:
            row.body = body

    def update(self, resource, fn):
        self._check(resource)
        with self._lock:
            try:
                row = self.db.session.get(Document, resource, with_for_update=True)
                current = None
                if row is not None:
                    try:
                        current = json.loads(row.body)
                    except ValueError:
                        logger.exception('Error parsing stored %s document', resource)
                document = fn(current)
                self._put(resource, document)
                self.db.session.commit()
                return document
            except (SQLAlchemyError, TypeError, ValueError):
                self.db.session.rollback()
                logger.exception('Error updating %s document', resource)
                return None


def create_store(app, db):
    backend = app.config.get('STORE_BACKEND', 'json')
    if backend == 'json':
        return JsonFileStore(app.config['DATA_DIR'])
    if backend == 'sql':
        return SqlDocumentStore(db)
    raise ValueError(f'Unknown STORE_BACKEND {backend!r}')

