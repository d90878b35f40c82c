"""Database package - admin client, models, and repositories."""

from .admin import (
    get_admin_client,
    reset_admin_client,
    admin_insert,
    admin_insert_and_select,
)
from .repositories.account import AccountRepository

__all__ = [
    "get_admin_client",
    "reset_admin_client",
    "admin_insert",
    "admin_insert_and_select",
    "AccountRepository",
]
