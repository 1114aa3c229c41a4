"""Shared fixtures for the PassGate test suite.

Settings are read when ``app.config`` is imported, so the log directory is
pointed at a scratch location before the application module is loaded.
"""

import os
import tempfile

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="passgate-logs-"))

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_common_passwords
from app.main import app, limiter


@pytest.fixture
def client():
    """TestClient that runs the application lifespan (blocklist loading)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_app_state():
    limiter.reset()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def common_passwords():
    return frozenset({"securepass89!", "letmein"})


@pytest.fixture
def override_common_passwords(common_passwords):
    """Swap the loaded blocklist for the fixture set."""
    app.dependency_overrides[get_common_passwords] = lambda: common_passwords
    return common_passwords
