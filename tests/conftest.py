"""
Shared fixtures: every test gets its own app, and therefore its own empty store.
"""
import pytest
from fastapi.testclient import TestClient

from config import Settings

TEST_API_URL = "http://api.example:5000"


@pytest.fixture()
def settings():
    return Settings(port=5055, api_url=TEST_API_URL, log_level="DEBUG")


@pytest.fixture()
def app(settings):
    from main import create_app
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c
