from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from devcamper.config import TestingSettings
from devcamper.factory import create_app

BOOTCAMPS_URL = "/api/v1/bootcamps"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Keep the host environment out of settings loading
    for name in (
        "APP_ENV",
        "APP_NAME",
        "DEBUG",
        "DATABASE_URL",
        "FILE_UPLOAD_PATH",
        "MAX_FILE_UPLOAD",
        "PAGINATION_STRICT",
        "PAGINATION_TOTAL_FILTERED",
        "LOG_LEVEL",
        "LOG_JSON_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def dummy_session():
    """Reusable async session mock for DB operations."""
    return AsyncMock()


@pytest.fixture
def settings(tmp_path):
    return TestingSettings(FILE_UPLOAD_PATH=str(tmp_path / "uploads"))


@pytest.fixture
def make_client():
    """Build a TestClient for an app with the given settings."""
    clients = []

    def _make(settings):
        client = TestClient(create_app(settings))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, settings):
    return make_client(settings)


def _bootcamp_payload(**overrides):
    payload = {
        "name": "Devworks Bootcamp",
        "description": "Full stack web development",
        "website": "https://devworks.com",
        "phone": "(111) 111-1111",
        "email": "enroll@devworks.com",
        "address": "233 Bay State Rd Boston MA 02215",
        "careers": ["Web Development", "UI/UX", "Business"],
        "averageCost": 10000,
        "averageRating": 8,
        "housing": True,
        "jobAssistance": True,
    }
    payload.update(overrides)
    return payload


SEED = [
    _bootcamp_payload(),
    _bootcamp_payload(
        name="ModernTech Bootcamp",
        careers=["Web Development", "Mobile Development"],
        averageCost=12000,
        averageRating=6,
        housing=False,
    ),
    _bootcamp_payload(
        name="Codemasters",
        careers=["Data Science"],
        averageCost=8000,
        averageRating=9,
        housing=False,
    ),
]


@pytest.fixture
def bootcamp_payload():
    """Factory for valid bootcamp create payloads."""
    return _bootcamp_payload


def _populate(client):
    created = {}
    for payload in SEED:
        response = client.post(BOOTCAMPS_URL, json=payload)
        assert response.status_code == 201, response.text
        document = response.json()["data"]
        created[document["name"]] = document
    return created


@pytest.fixture
def populate():
    """Create the sample bootcamps through a given client."""
    return _populate


@pytest.fixture
def seed(client):
    """Create the sample bootcamps and return their documents by name."""
    return _populate(client)
