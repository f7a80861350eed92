import os

# Must be set before devops_demo.core.config is imported
os.environ["NODE_ENV"] = "test"
os.environ["APP_VERSION"] = "1.0.0-test"
os.environ["PORT"] = "3001"

import pytest
from fastapi.testclient import TestClient

from devops_demo.core.config import Settings
from devops_demo.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings for the test designation."""
    return Settings(NODE_ENV="test", APP_VERSION="1.0.0-test", PORT=3001)


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    """Create test client; lifespan runs inside the context manager."""
    with TestClient(app) as test_client:
        yield test_client
