import json

import pytest
from werkzeug.security import generate_password_hash

from portfolio_site import create_app
from portfolio_site.config import TestingConfig

ADMIN_PASSWORD = 's3cret'


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / 'data'


@pytest.fixture
def config(data_dir):
    class Config(TestingConfig):
        DATA_DIR = str(data_dir)
        ADMIN_PASSWORD_HASH = generate_password_hash(ADMIN_PASSWORD)
    return Config


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions['document_store']


@pytest.fixture
def write_doc(data_dir):
    def write(resource, document):
        data_dir.mkdir(parents=True, exist_ok=True)
        (data_dir / f'{resource}.json').write_text(json.dumps(document), encoding='utf-8')
    return write


@pytest.fixture
def read_doc(data_dir):
    def read(resource):
        return json.loads((data_dir / f'{resource}.json').read_text(encoding='utf-8'))
    return read


@pytest.fixture
def auth_headers(client):
    response = client.post('/api/admin/login', json={'username': 'admin', 'password': ADMIN_PASSWORD})
    return {'Authorization': f"Bearer {response.get_json()['token']}"}
