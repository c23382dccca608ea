import threading

import pytest
from fastapi.testclient import TestClient

from podprobe.app import create_app
from podprobe.config import Settings


class TerminateRecorder:
    """Stands in for os._exit so /crash never kills the test run."""

    def __init__(self):
        self.calls = []
        self.called = threading.Event()

    def __call__(self, code):
        self.calls.append(code)
        self.called.set()


@pytest.fixture
def settings():
    return Settings(_env_file=None, crash_delay_ms=10, fib_max_n=25, app_version="9.9.9")


@pytest.fixture
def terminate():
    return TerminateRecorder()


@pytest.fixture
def app(settings, terminate):
    application = create_app(settings)
    application.state.crash_scheduler.terminate = terminate
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
