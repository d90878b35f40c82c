"""Account settings database model."""

from dataclasses import dataclass
from typing import Optional

from .base import RowModel


# Values for a freshly created settings row
DEFAULT_ACCOUNT_SETTINGS = {
    "context_window_days": 30,
    "context_window_messages": 60,
    "max_context_tokens": 8000,
    "enable_semantic_search": True,
    "semantic_search_limit": 10,
    "semantic_similarity_threshold": 0.7,
    "enable_rag": True,
    "rag_chunk_limit": 5,
    "rag_similarity_threshold": 0.75,
    "default_ai_provider": "openai",
    "openai_model": "gpt-4-turbo-preview",
    "anthropic_model": "claude-3-5-sonnet-20241022",
    "enable_function_calling": True,
    "max_function_calls_per_message": 10,
}


@dataclass
class AccountSettingsDO(RowModel):
    """Account settings data object - maps to account_settings table."""

    TABLE = "account_settings"

    id: str
    account_id: str

    context_window_days: int = 30
    context_window_messages: int = 60
    max_context_tokens: int = 8000

    enable_semantic_search: bool = True
    semantic_search_limit: int = 10
    semantic_similarity_threshold: float = 0.7

    enable_rag: bool = True
    rag_chunk_limit: int = 5
    rag_similarity_threshold: float = 0.75

    default_ai_provider: str = "openai"
    openai_model: str = "gpt-4-turbo-preview"
    anthropic_model: str = "claude-3-5-sonnet-20241022"

    enable_function_calling: bool = True
    max_function_calls_per_message: int = 10

    created_at: Optional[str] = None
    updated_at: Optional[str] = None
