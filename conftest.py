import pytest
from sqlalchemy import event

from wakeboard import create_app
from wakeboard.config import TestingConfig
from wakeboard.utils.db import db


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        event.listen(db.engine, 'connect', _enable_sqlite_foreign_keys)
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def users(client):
    for user_id, email, name in (('u1', 'u1@example.com', 'User One'), ('u2', 'u2@example.com', 'User Two')):
        response = client.post('/user/register', json={'userId': user_id, 'email': email, 'name': name})
        assert response.status_code == 200
    return ['u1', 'u2']
