"""Pytest configuration for tests against hosted services."""

import os

import pytest

from workout_tracker.config import Settings
from workout_tracker.db.supabase_store import SupabaseStore


def pytest_collection_modifyitems(items):
    """Mark everything collected here as an integration test."""
    for item in items:
        if "integration_tests" in str(item.path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def groq_api_key():
    key = os.getenv("GROQ_API_KEY")
    if not key:
        pytest.skip("GROQ_API_KEY not set")
    return key


@pytest.fixture
def supabase_store():
    """Store for the project named by SUPABASE_URL / SUPABASE_ANON_KEY."""
    settings = Settings.from_env()
    if not settings.uses_supabase:
        pytest.skip("SUPABASE_URL and SUPABASE_ANON_KEY not set")
    return SupabaseStore(settings.supabase_url, settings.supabase_anon_key)
