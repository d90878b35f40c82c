"""Database models (Data Objects) - map to database tables."""

from .account import AccountDO
from .account_settings import AccountSettingsDO, DEFAULT_ACCOUNT_SETTINGS
from .conversation import ConversationDO
from .message import MessageDO
from .ai_function import AIFunctionDO

__all__ = [
    "AccountDO",
    "AccountSettingsDO",
    "DEFAULT_ACCOUNT_SETTINGS",
    "ConversationDO",
    "MessageDO",
    "AIFunctionDO",
]
