"""Pydantic models for API request/response."""

from .envelope import ErrorResponse
from .scopes import ScopesResponse, ScopeInfo, ScopeSet, ScopeCatalogResponse
from .diagnostics import AccountLookupResponse

__all__ = [
    "ErrorResponse",
    "ScopesResponse",
    "ScopeInfo",
    "ScopeSet",
    "ScopeCatalogResponse",
    "AccountLookupResponse",
]
