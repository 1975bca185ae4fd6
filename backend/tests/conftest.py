"""
Notes API Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the test suite.
How:   Every test gets its own NoteStore and its own app built around it, so
       notes created in one test never leak into another.

Fixtures:
    ├── store:        seeded NoteStore (example notes 1 and 2)
    ├── empty_store:  NoteStore with seeding disabled
    ├── fixed_clock:  deterministic creation timestamp
    ├── app:          FastAPI app serving `store`
    └── test_client:  HTTPX AsyncClient bound to `app` via ASGITransport
"""

import os
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Applied before `app.config` builds its settings singleton.
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("PORT", None)

from app.config import Settings  # noqa: E402
from app.main import create_app  # noqa: E402
from app.services.note_store import NoteStore  # noqa: E402

FIXED_CREATED_AT = datetime(2024, 1, 15, 12, 0, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return NoteStore()


@pytest.fixture
def empty_store():
    return NoteStore(seed=False)


@pytest.fixture
def fixed_clock():
    """Clock callable that always returns 2024-01-15T12:00:00.123Z."""
    return lambda: FIXED_CREATED_AT


@pytest.fixture
def app(store):
    return create_app(app_settings=Settings(), store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Async HTTP client talking to the app in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
