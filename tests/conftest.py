"""
Notes API: Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── test_settings: Settings with defaults, independent of the environment
    ├── note_store: Empty NoteStore
    ├── note_service: NoteService wrapping note_store
    ├── test_app: FastAPI app from create_app(test_settings)
    └── test_client: HTTPX AsyncClient talking to test_app over ASGI
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Reduce noise during tests; must be set before notes_api.config is imported.
os.environ.setdefault("NOTES_LOG_LEVEL", "WARNING")

from notes_api.config import Settings  # noqa: E402
from notes_api.main import create_app  # noqa: E402
from notes_api.services.note_service import NoteService  # noqa: E402
from notes_api.storage.note_store import NoteStore  # noqa: E402


@pytest.fixture
def test_settings():
    """
    Settings built from explicit values.

    _env_file=None keeps a developer's local .env out of the tests.
    """
    return Settings(
        _env_file=None,
        host="127.0.0.1",
        port=8080,
        max_body_bytes=16 * 1024,
        id_start=1,
        log_level="WARNING",
        enable_docs=False,
    )


@pytest.fixture
def note_store():
    return NoteStore()


@pytest.fixture
def note_service(note_store):
    return NoteService(note_store)


@pytest.fixture
def test_app(test_settings):
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
