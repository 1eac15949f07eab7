"""Conversation, message, and agent storage."""

from src.storage.base import Storage
from src.storage.memory import DEFAULT_AGENTS, MemoryStorage
from src.storage.models import (
    Agent,
    Conversation,
    InsertAgent,
    InsertConversation,
    InsertMessage,
    Message,
)

__all__ = [
    "Agent",
    "Conversation",
    "DEFAULT_AGENTS",
    "InsertAgent",
    "InsertConversation",
    "InsertMessage",
    "MemoryStorage",
    "Message",
    "Storage",
]
