import os

# Must be set before app.py builds its module-level instance
os.environ['FLASK_ENV'] = 'testing'

import pytest

from app import create_app
from extensions import db as _db
from utils.security import reset_rate_limits


@pytest.fixture
def app():
    """Fresh application with an empty in-memory database per test"""
    application = create_app('testing')
    yield application
    with application.app_context():
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess['is_admin'] = True
    return client


@pytest.fixture
def db(app):
    with app.app_context():
        yield _db


@pytest.fixture(autouse=True)
def clear_rate_limits():
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture(autouse=True)
def no_notifications(monkeypatch):
    """Record owner notifications instead of starting delivery threads"""
    sent = []
    monkeypatch.setattr('blueprints.api.routes.notify_contact_submission', sent.append)
    return sent
