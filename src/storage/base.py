"""Storage interface for conversations, messages, and agents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from src.storage.models import (
    Agent,
    Conversation,
    InsertAgent,
    InsertConversation,
    InsertMessage,
    Message,
)


class Storage(ABC):
    """Abstract repository consumed by the transport layer.

    Lookups of unknown IDs return ``None`` (or ``False`` for deletes); no
    operation raises for a missing entity.
    """

    # -- Conversations ---------------------------------------------------------

    @abstractmethod
    async def list_conversations(self) -> list[Conversation]:
        """Return all conversations, most recently active first."""

    @abstractmethod
    async def get_conversation(self, conversation_id: str) -> Conversation | None: ...

    @abstractmethod
    async def create_conversation(self, data: InsertConversation) -> Conversation: ...

    @abstractmethod
    async def update_conversation(
        self, conversation_id: str, updates: Mapping[str, Any]
    ) -> Conversation | None:
        """Merge *updates* and refresh ``updated_at``."""

    @abstractmethod
    async def touch_conversation(self, conversation_id: str) -> Conversation | None:
        """Refresh ``updated_at`` without changing any other field."""

    @abstractmethod
    async def delete_conversation(self, conversation_id: str) -> bool:
        """Delete a conversation together with all of its messages."""

    # -- Messages --------------------------------------------------------------

    @abstractmethod
    async def list_messages(self, conversation_id: str) -> list[Message]:
        """Return a conversation's messages, oldest first."""

    @abstractmethod
    async def get_message(self, message_id: str) -> Message | None: ...

    @abstractmethod
    async def create_message(self, data: InsertMessage) -> Message: ...

    @abstractmethod
    async def delete_message(self, message_id: str) -> bool: ...

    # -- Agents ----------------------------------------------------------------

    @abstractmethod
    async def list_agents(self) -> list[Agent]: ...

    @abstractmethod
    async def list_active_agents(self) -> list[Agent]: ...

    @abstractmethod
    async def get_agent(self, agent_id: str) -> Agent | None: ...

    @abstractmethod
    async def create_agent(self, data: InsertAgent) -> Agent: ...

    @abstractmethod
    async def update_agent(self, agent_id: str, updates: Mapping[str, Any]) -> Agent | None: ...
