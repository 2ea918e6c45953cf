import os
import sys
import pytest

# Ensure the backend root (containing the `tambola` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from tambola import create_app, get_coordinator, socketio

NAMESPACE = '/ws'


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    LOG_LEVEL = 'WARNING'
    CORS_ORIGINS = '*'
    SOCKETIO_NAMESPACE = NAMESPACE
    TICKET_MAX_ATTEMPTS = 50
    MAX_NAME_LENGTH = 0


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def coordinator(flask_app):
    return get_coordinator(flask_app)


def _connect(flask_app):
    return socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace=NAMESPACE
    )


@pytest.fixture()
def sio_client(flask_app):
    test_client = _connect(flask_app)
    yield test_client
    if test_client.is_connected(NAMESPACE):
        test_client.disconnect(namespace=NAMESPACE)


@pytest.fixture()
def other_client(flask_app):
    test_client = _connect(flask_app)
    yield test_client
    if test_client.is_connected(NAMESPACE):
        test_client.disconnect(namespace=NAMESPACE)
