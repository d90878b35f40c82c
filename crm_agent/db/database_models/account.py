"""Account database model."""

from dataclasses import dataclass
from typing import Optional

from .base import RowModel


@dataclass
class AccountDO(RowModel):
    """Account data object - maps to accounts table."""

    TABLE = "accounts"

    id: str
    account_name: str
    ghl_location_id: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
