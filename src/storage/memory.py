"""MemoryStorage: in-process maps for conversations, messages, and agents."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from src.storage.base import Storage
from src.storage.ids import Clock, IdFactory, make_id, utc_now
from src.storage.models import (
    Agent,
    Conversation,
    InsertAgent,
    InsertConversation,
    InsertMessage,
    Message,
)

logger = logging.getLogger(__name__)

DEFAULT_AGENTS: tuple[InsertAgent, ...] = (
    InsertAgent(
        name="Reasoning Agent",
        type="reasoning",
        description="Analyzes complex problems and provides logical reasoning",
    ),
    InsertAgent(
        name="Search Agent",
        type="search",
        description="Performs web searches and factual lookups via DuckDuckGo",
    ),
    InsertAgent(
        name="Creative Agent",
        type="creative",
        description="Generates creative content and innovative solutions",
    ),
)

_CONVERSATION_READONLY = frozenset({"id", "created_at", "updated_at"})
_AGENT_READONLY = frozenset({"id"})


class MemoryStorage(Storage):
    """Keeps every entity in a dict keyed by ID for the life of the process.

    Construct one instance at startup and hand it to whatever needs it.
    Pass *id_factory* and *clock* to make IDs and timestamps deterministic
    in tests.

    A single re-entrant lock guards all three maps, so compound operations
    (cascading deletes, message insert plus parent touch) are never seen
    half-done by another thread.
    """

    def __init__(
        self,
        id_factory: IdFactory = make_id,
        clock: Clock = utc_now,
    ) -> None:
        self._make_id = id_factory
        self._now = clock
        self._lock = threading.RLock()
        self._conversations: dict[str, Conversation] = {}
        self._messages: dict[str, Message] = {}
        self._agents: dict[str, Agent] = {}
        self._seed_agents()

    def _seed_agents(self) -> None:
        for data in DEFAULT_AGENTS:
            agent = self._insert_agent(data)
            logger.debug("Seeded agent: %s (%s)", agent.name, agent.id)

    # -- Conversations ---------------------------------------------------------

    async def list_conversations(self) -> list[Conversation]:
        with self._lock:
            return sorted(
                self._conversations.values(), key=lambda c: c.updated_at, reverse=True
            )

    async def get_conversation(self, conversation_id: str) -> Conversation | None:
        with self._lock:
            return self._conversations.get(conversation_id)

    async def create_conversation(self, data: InsertConversation) -> Conversation:
        with self._lock:
            now = self._now()
            conversation = Conversation(
                id=self._make_id(),
                title=data.title,
                created_at=now,
                updated_at=now,
            )
            self._conversations[conversation.id] = conversation
        logger.info("Created conversation: %s (%s)", conversation.title, conversation.id)
        return conversation

    async def update_conversation(
        self, conversation_id: str, updates: Mapping[str, Any]
    ) -> Conversation | None:
        changes = Conversation.field_updates(updates)
        with self._lock:
            current = self._conversations.get(conversation_id)
            if current is None:
                logger.debug("Update skipped, no conversation %s", conversation_id)
                return None
            fields = {k: v for k, v in changes.items() if k not in _CONVERSATION_READONLY}
            updated = Conversation.model_validate(
                {**current.model_dump(), **fields, "updated_at": self._now()}
            )
            self._conversations[conversation_id] = updated
            return updated

    async def touch_conversation(self, conversation_id: str) -> Conversation | None:
        with self._lock:
            return self._touch(conversation_id, self._now())

    def _touch(self, conversation_id: str, now: datetime) -> Conversation | None:
        current = self._conversations.get(conversation_id)
        if current is None:
            return None
        touched = current.model_copy(update={"updated_at": now})
        self._conversations[conversation_id] = touched
        return touched

    async def delete_conversation(self, conversation_id: str) -> bool:
        with self._lock:
            doomed = [
                m.id for m in self._messages.values() if m.conversation_id == conversation_id
            ]
            for message_id in doomed:
                del self._messages[message_id]
            existed = self._conversations.pop(conversation_id, None) is not None
        if existed:
            logger.info(
                "Deleted conversation %s and %d message(s)", conversation_id, len(doomed)
            )
        return existed

    # -- Messages --------------------------------------------------------------

    async def list_messages(self, conversation_id: str) -> list[Message]:
        with self._lock:
            messages = [
                m for m in self._messages.values() if m.conversation_id == conversation_id
            ]
        return sorted(messages, key=lambda m: m.created_at)

    async def get_message(self, message_id: str) -> Message | None:
        with self._lock:
            return self._messages.get(message_id)

    async def create_message(self, data: InsertMessage) -> Message:
        with self._lock:
            message = Message(
                id=self._make_id(),
                conversation_id=data.conversation_id,
                role=data.role,
                content=data.content,
                metadata=data.metadata,
                created_at=self._now(),
            )
            self._messages[message.id] = message
            # Same instant as the message so the parent never lags behind it
            if self._touch(data.conversation_id, message.created_at) is None:
                logger.debug(
                    "Message %s references unknown conversation %s",
                    message.id,
                    data.conversation_id,
                )
        return message

    async def delete_message(self, message_id: str) -> bool:
        with self._lock:
            return self._messages.pop(message_id, None) is not None

    # -- Agents ----------------------------------------------------------------

    async def list_agents(self) -> list[Agent]:
        with self._lock:
            return list(self._agents.values())

    async def list_active_agents(self) -> list[Agent]:
        with self._lock:
            return [a for a in self._agents.values() if a.is_active]

    async def get_agent(self, agent_id: str) -> Agent | None:
        with self._lock:
            return self._agents.get(agent_id)

    async def create_agent(self, data: InsertAgent) -> Agent:
        agent = self._insert_agent(data)
        logger.info("Created agent: %s (%s)", agent.name, agent.id)
        return agent

    def _insert_agent(self, data: InsertAgent) -> Agent:
        with self._lock:
            agent = Agent(
                id=self._make_id(),
                name=data.name,
                type=data.type,
                description=data.description,
                is_active=True if data.is_active is None else data.is_active,
            )
            self._agents[agent.id] = agent
            return agent

    async def update_agent(self, agent_id: str, updates: Mapping[str, Any]) -> Agent | None:
        changes = Agent.field_updates(updates)
        with self._lock:
            current = self._agents.get(agent_id)
            if current is None:
                logger.debug("Update skipped, no agent %s", agent_id)
                return None
            fields = {k: v for k, v in changes.items() if k not in _AGENT_READONLY}
            updated = Agent.model_validate({**current.model_dump(), **fields})
            self._agents[agent_id] = updated
            return updated
