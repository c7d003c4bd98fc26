import os
import sys
import pytest

# Ensure the backend root (containing the `rps_arena` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from rps_arena import create_app, socketio
from rps_arena.services.arena import Arena


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    LOG_LEVEL = 'WARNING'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def arena(flask_app):
    return flask_app.extensions['arena']


@pytest.fixture()
def connect_player(flask_app):
    """Factory for Socket.IO test clients; all are disconnected on teardown."""
    clients = []

    def _connect():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        if test_client.is_connected():
            test_client.disconnect()


@pytest.fixture()
def fresh_arena():
    """A standalone arena with predictable names and room ids."""
    names = iter(f"Player{i}" for i in range(1000))
    room_ids = iter(f"room_{i}" for i in range(1000))
    return Arena(name_factory=lambda: next(names), room_id_factory=lambda: next(room_ids))
