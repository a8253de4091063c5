import os
import random
import tempfile

import pytest

# Keep test logs out of the working tree; must be set before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='daily_wordle_logs_'))

from daily_wordle import create_app  # noqa: E402
from daily_wordle.config import TestingConfig  # noqa: E402
from daily_wordle.services import game_service as game_service_module  # noqa: E402

WORDS = ["CRANE", "APPLE", "TRACE", "SLATE", "GHOST"]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def service(rng):
    service = game_service_module.initialize_game_service(WORDS, rng)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def app(service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
