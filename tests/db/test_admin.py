"""Tests for the Supabase admin client factory and insert helpers."""

from unittest.mock import MagicMock, patch

import pytest
from supabase import Client

from crm_agent.db import admin
from crm_agent.errors import ConfigurationError


DUMMY_SERVICE_ROLE_JWT = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJyb2xlIjoic2VydmljZV9yb2xlIiwiaXNzIjoic3VwYWJhc2UifQ"
    ".c2lnbmF0dXJlLW5vdC1jaGVja2Vk"
)


class TestGetAdminClient:
    """SUT: get_admin_client"""

    def test_builds_with_service_role(self, supabase_settings):
        """Client should be built from URL and service role key without sessions."""
        with patch("crm_agent.db.admin.create_client") as create_client:
            client = admin.get_admin_client()

        create_client.assert_called_once()
        args, kwargs = create_client.call_args
        assert args == ("https://test-project.supabase.co", "service-role-key-for-tests")
        options = kwargs["options"]
        assert options.auto_refresh_token is False
        assert options.persist_session is False
        assert client is create_client.return_value

    def test_real_client_accepts_options(self, monkeypatch, supabase_settings):
        """The real factory should accept the stateless client options."""
        # Header and payload are base64url JSON; no network is touched at build time
        monkeypatch.setattr(supabase_settings, "supabase_service_role_key", DUMMY_SERVICE_ROLE_JWT)

        client = admin.get_admin_client()

        assert isinstance(client, Client)
        assert client is admin.get_admin_client()
        assert client.options.auto_refresh_token is False
        assert client.options.persist_session is False

    def test_same_instance(self, supabase_settings):
        """Repeated calls should return the identical cached client."""
        with patch("crm_agent.db.admin.create_client") as create_client:
            first = admin.get_admin_client()
            clients = [admin.get_admin_client() for _ in range(5)]

        assert create_client.call_count == 1
        assert all(c is first for c in clients)

    def test_missing_configuration(self, missing_supabase_settings):
        """Missing settings should raise and cache nothing."""
        with patch("crm_agent.db.admin.create_client") as create_client:
            with pytest.raises(ConfigurationError):
                admin.get_admin_client()
            create_client.assert_not_called()
        assert admin._admin_client is None

    def test_reset(self, supabase_settings):
        """reset_admin_client should force a rebuild."""
        with patch("crm_agent.db.admin.create_client") as create_client:
            create_client.side_effect = [MagicMock(), MagicMock()]
            first = admin.get_admin_client()
            admin.reset_admin_client()
            second = admin.get_admin_client()

        assert first is not second
        assert create_client.call_count == 2


class TestAdminInsert:
    """SUT: admin_insert"""

    def test_returns_response_rows(self, mock_client):
        """Inserted rows from the service should be returned as data."""
        rows = [{"id": "m1", "content": "hi"}]
        mock_client.table.return_value.insert.return_value.execute.return_value.data = rows

        result = admin.admin_insert("messages", {"content": "hi"})

        assert result.ok is True
        assert result.data == rows
        mock_client.table.assert_called_once_with("messages")
        mock_client.table.return_value.insert.assert_called_once_with({"content": "hi"})

    def test_service_error(self, mock_client, api_error):
        """Service errors should come back in the result unchanged."""
        mock_client.table.return_value.insert.return_value.execute.side_effect = api_error(
            message='duplicate key value violates unique constraint "accounts_pkey"',
            code="23505",
            details="Key (id)=(a1) already exists.",
        )

        result = admin.admin_insert("accounts", {"id": "a1"})

        assert result.ok is False
        assert result.data is None
        assert result.error.code == "23505"
        assert result.error.details["details"] == "Key (id)=(a1) already exists."

    def test_transport_error_propagates(self, mock_client):
        """Non-service exceptions should reach the caller."""
        mock_client.table.return_value.insert.return_value.execute.side_effect = ConnectionError("down")

        with pytest.raises(ConnectionError):
            admin.admin_insert("accounts", {"account_name": "x"})

    def test_no_retry(self, mock_client, api_error):
        """A failed insert should be attempted exactly once."""
        execute = mock_client.table.return_value.insert.return_value.execute
        execute.side_effect = api_error(code="500", message="server error")

        admin.admin_insert("accounts", {"account_name": "x"})
        assert execute.call_count == 1


class TestAdminInsertAndSelect:
    """SUT: admin_insert_and_select"""

    def test_single_row(self, mock_client):
        """One returned row should be unwrapped."""
        row = {"id": "a1", "account_name": "Acme"}
        mock_client.table.return_value.insert.return_value.execute.return_value.data = [row]

        result = admin.admin_insert_and_select("accounts", {"account_name": "Acme"})

        assert result.ok is True
        assert result.data == row

    def test_no_rows(self, mock_client):
        """Zero returned rows should be an error."""
        mock_client.table.return_value.insert.return_value.execute.return_value.data = []

        result = admin.admin_insert_and_select("accounts", {"account_name": "Acme"})

        assert result.ok is False
        assert result.data is None
        assert result.error.code == "PGRST116"

    def test_multiple_rows(self, mock_client):
        """More than one returned row should be an error."""
        mock_client.table.return_value.insert.return_value.execute.return_value.data = [
            {"id": "a1"}, {"id": "a2"}
        ]

        result = admin.admin_insert_and_select("accounts", {"account_name": "Acme"})

        assert result.ok is False
        assert "2 rows" in result.error.details["details"]

    def test_insert_error_passed_through(self, mock_client, api_error):
        """Insert failures should be returned as they are."""
        mock_client.table.return_value.insert.return_value.execute.side_effect = api_error(
            message="permission denied for table accounts", code="42501"
        )

        result = admin.admin_insert_and_select("accounts", {"account_name": "Acme"})

        assert result.ok is False
        assert result.error.message == "permission denied for table accounts"
