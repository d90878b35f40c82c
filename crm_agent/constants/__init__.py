"""Static constants."""

from .scopes import (
    AVAILABLE_SCOPES,
    DEFAULT_SCOPES,
    CRM_SCOPES,
    COMMON_SCOPE_SETS,
    ScopeDefinition,
)

__all__ = [
    "AVAILABLE_SCOPES",
    "DEFAULT_SCOPES",
    "CRM_SCOPES",
    "COMMON_SCOPE_SETS",
    "ScopeDefinition",
]
