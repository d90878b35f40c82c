"""Repository layer for data access."""

from .account import AccountRepository

__all__ = ["AccountRepository"]
