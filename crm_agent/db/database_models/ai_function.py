"""AI function database model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import RowModel


@dataclass
class AIFunctionDO(RowModel):
    """AI function data object - maps to ai_functions table."""

    TABLE = "ai_functions"

    id: str
    function_name: str
    display_name: str
    description: str
    category: Optional[str] = None
    # None for platform-wide functions
    account_id: Optional[str] = None
    is_platform_function: bool = False
    parameters: Dict[str, Any] = field(default_factory=dict)
    handler_type: str = "internal"
    handler_config: Dict[str, Any] = field(default_factory=dict)
    requires_auth: bool = False
    allowed_roles: Optional[List[str]] = None
    is_active: bool = True
    version: int = 1
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
