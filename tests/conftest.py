"""Shared pytest fixtures."""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from postgrest.exceptions import APIError

from crm_agent.api import scopes, diagnostics
from crm_agent.config import settings
from crm_agent.db import admin


TEST_SUPABASE_URL = "https://test-project.supabase.co"
TEST_SERVICE_ROLE_KEY = "service-role-key-for-tests"


def make_api_error(message="JSON object requested, multiple (or no) rows returned",
                   code="PGRST116", details="The result contains 0 rows", hint=None):
    """Build a PostgREST APIError like the query builder raises."""
    return APIError({"message": message, "code": code, "details": details, "hint": hint})


@pytest.fixture
def api_error():
    """Factory for PostgREST API errors."""
    return make_api_error


@pytest.fixture(autouse=True)
def reset_admin_client():
    """Every test starts without a cached admin client."""
    admin.reset_admin_client()
    yield
    admin.reset_admin_client()


@pytest.fixture
def supabase_settings(monkeypatch):
    """Provide Supabase credentials on the global settings."""
    monkeypatch.setattr(settings, "supabase_url", TEST_SUPABASE_URL)
    monkeypatch.setattr(settings, "supabase_service_role_key", TEST_SERVICE_ROLE_KEY)
    return settings


@pytest.fixture
def missing_supabase_settings(monkeypatch):
    """Remove Supabase credentials from the global settings."""
    monkeypatch.setattr(settings, "supabase_url", None)
    monkeypatch.setattr(settings, "supabase_service_role_key", None)
    return settings


@pytest.fixture
def mock_client(monkeypatch):
    """Install a mock Supabase client as the cached admin client."""
    client = MagicMock(name="supabase_admin_client")
    monkeypatch.setattr(admin, "_admin_client", client)
    return client


@pytest.fixture
async def client():
    """Create async HTTP client over a test app without lifespan."""
    test_app = FastAPI(title="CRM Agent Test")
    test_app.include_router(scopes.router)
    test_app.include_router(diagnostics.router)

    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
