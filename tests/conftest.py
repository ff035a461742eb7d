"""
Pytest configuration and fixtures
"""
import mongomock
import pytest

import stayintouch
from stayintouch import create_app
from stayintouch.config import TestConfig


@pytest.fixture
def db():
    """In-memory Mongo database, dropped after each test"""
    client = mongomock.MongoClient()
    yield client['stayintouch-test']
    client.drop_database('stayintouch-test')


@pytest.fixture
def app(db):
    return create_app(TestConfig, db=db)


@pytest.fixture
def contact_service(app):
    return stayintouch.contact_service


@pytest.fixture
def user_service(app):
    return stayintouch.user_service


@pytest.fixture
def alice(user_service):
    return user_service.create_user(name='Alice', email='alice@example.com', password='alice-pw')


@pytest.fixture
def bob(user_service):
    return user_service.create_user(name='Bob', email='bob@example.com', password='bob-pw')


@pytest.fixture
def admin(user_service):
    return user_service.create_user(
        name='Admin', email='admin@example.com', password='admin-pw', is_admin=True
    )


def _logged_in_client(app, email, password):
    client = app.test_client()
    response = client.post('/auth/local', json={'email': email, 'password': password})
    assert response.status_code == 200
    return client


@pytest.fixture
def anonymous_client(app):
    return app.test_client()


@pytest.fixture
def alice_client(app, alice):
    return _logged_in_client(app, 'alice@example.com', 'alice-pw')


@pytest.fixture
def bob_client(app, bob):
    return _logged_in_client(app, 'bob@example.com', 'bob-pw')


@pytest.fixture
def admin_client(app, admin):
    return _logged_in_client(app, 'admin@example.com', 'admin-pw')
