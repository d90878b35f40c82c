"""Diagnostic API models."""

from typing import Any, Dict
from pydantic import BaseModel


class AccountLookupResponse(BaseModel):
    """Response model for the database connectivity check."""

    success: bool = True
    account: Dict[str, Any]
