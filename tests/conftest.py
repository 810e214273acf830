"""Pytest configuration and fixtures."""

import tempfile
from contextlib import asynccontextmanager
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from workout_tracker.config import Settings
from workout_tracker.db import SqliteStore, StoreError, init_db
from workout_tracker.models.workout import WorkoutCreate
from workout_tracker.web import create_app


class FakeChatModel:
    """Chat model that replays scripted text chunks."""

    def __init__(self, chunks=(), error: Exception | None = None):
        self.chunks = list(chunks)
        self.error = error
        self.calls: list[list[dict]] = []

    async def open_stream(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return self._deltas()

    async def _deltas(self):
        for chunk in self.chunks:
            yield chunk


class FailingStore:
    """Store whose every operation is rejected."""

    def __init__(self, message: str = "connection refused"):
        self.message = message

    async def select(self, table, filters=(), order_by=None, descending=False, limit=None):
        raise StoreError(self.message)

    async def insert(self, table, rows):
        raise StoreError(self.message)

    async def delete(self, table, filters):
        raise StoreError(self.message)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest_asyncio.fixture
async def store(temp_db_path):
    """An initialized SQLite store."""
    await init_db(temp_db_path)
    return SqliteStore(temp_db_path)


@pytest.fixture
def fake_model():
    return FakeChatModel(["Hel", "lo"])


@pytest.fixture
def app(store, fake_model):
    return create_app(Settings(), store=store, model=fake_model)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sample_workout():
    """A workout as submitted from the form."""
    return WorkoutCreate(exercise="Bench Press", sets=3, reps=10, weight=135)


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def make_client(store):
    """Open a client against an app built with the given collaborators."""

    @asynccontextmanager
    async def _make(model=None, app_store=None):
        app = create_app(
            Settings(), store=app_store or store, model=model or FakeChatModel(["Hello"])
        )
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac

    return _make


@pytest.fixture
def model_factory():
    """Build scripted chat models inside a test."""
    return FakeChatModel
