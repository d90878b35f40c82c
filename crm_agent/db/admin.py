"""
Supabase admin client (service role, no session).

Use this for webhooks, background jobs and any other server-side operation
that has no user session and must bypass row level security. The client is
built once per process on first use and shared by every request afterwards.
"""

from typing import Any, Dict, List, Optional, Union

from postgrest.exceptions import APIError
from supabase import Client, ClientOptions, create_client

from ..config import settings
from ..errors import DatabaseError, QueryResult
from ..utils.logger import get_logger


Row = Dict[str, Any]

# Cached admin client, owned by get_admin_client()
_admin_client: Optional[Client] = None


def get_admin_client() -> Client:
    """
    Get the shared service-role Supabase client, building it on first use.

    Returns:
        Supabase client instance

    Raises:
        ConfigurationError: If the Supabase URL or service role key is missing
    """
    global _admin_client
    if _admin_client is not None:
        return _admin_client

    settings.validate_required()

    logger = get_logger("db.admin")
    logger.info(f"Creating Supabase admin client for {settings.supabase_url}")

    _admin_client = create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(
            auto_refresh_token=False,
            persist_session=False
        )
    )
    return _admin_client


def reset_admin_client() -> None:
    """Drop the cached admin client (useful for testing)."""
    global _admin_client
    _admin_client = None


def admin_insert(table: str, data: Union[Row, List[Row]]) -> QueryResult:
    """
    Insert rows into a table with the admin client.

    Args:
        table: Table name
        data: Row (or list of rows) to insert

    Returns:
        QueryResult holding the service response rows, or the service error
    """
    client = get_admin_client()
    try:
        response = client.table(table).insert(data).execute()
    except APIError as e:
        error = DatabaseError.from_api_error(e)
        get_logger("db.admin").error(f"Insert into {table} failed: {error.message}")
        return QueryResult(error=error)

    return QueryResult(data=response.data)


def admin_insert_and_select(table: str, data: Row) -> QueryResult:
    """
    Insert a row and return it as stored.

    Exactly one row must come back; anything else is reported as an error.

    Args:
        table: Table name
        data: Row to insert

    Returns:
        QueryResult holding the inserted row, or an error
    """
    result = admin_insert(table, data)
    if not result.ok:
        return result

    rows = result.data or []
    if len(rows) != 1:
        error = DatabaseError.not_single(len(rows))
        get_logger("db.admin").error(f"Insert into {table} returned {len(rows)} rows, expected 1")
        return QueryResult(error=error)

    return QueryResult(data=rows[0])
