"""Message database model."""

from dataclasses import dataclass
from typing import Any, List, Optional

from .base import RowModel


@dataclass
class MessageDO(RowModel):
    """Message data object - maps to messages table."""

    TABLE = "messages"

    id: str
    conversation_id: str
    account_id: str
    role: str
    content: str
    message_type: str = "chat"
    precedes_user_reply: bool = False
    ghl_message_id: Optional[str] = None
    function_call: Any = None
    function_call_result: Any = None
    embedding: Optional[List[float]] = None
    channel: Optional[str] = None
    # inbound / outbound
    direction: Optional[str] = None
    source: Optional[str] = None
    tokens_used: Optional[int] = None
    model_used: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
