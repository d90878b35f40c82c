"""Conversation database model."""

from dataclasses import dataclass
from typing import Optional

from .base import RowModel


@dataclass
class ConversationDO(RowModel):
    """Conversation data object - maps to conversations table."""

    TABLE = "conversations"

    id: str
    account_id: str
    ghl_contact_id: str
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    conversation_title: Optional[str] = None
    last_message_at: Optional[str] = None
    message_count: int = 0
    preferred_ai_provider: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
