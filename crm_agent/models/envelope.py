"""Success/failure envelope models shared by every route."""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Failure envelope."""

    success: bool = False
    error: str = Field(description="Human readable error message")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Structured error detail")
