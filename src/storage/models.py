"""Data models for conversations, messages, and agents.

Stored entities are frozen so that callers holding a returned object cannot
change store state behind its lock. Every model accepts and emits the
camelCase wire names (``createdAt``, ``conversationId``, ``isActive``) through
field aliases; use ``model_dump(by_alias=True)`` at the transport boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MessageRole = Literal["user", "assistant"]
AgentType = Literal["reasoning", "search", "creative"]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _Entity(_WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @classmethod
    def field_updates(cls, updates: Mapping[str, Any]) -> dict[str, Any]:
        """Map a partial update keyed by field name or alias onto field names.

        Keys that name no field are dropped.
        """
        by_alias = {info.alias: name for name, info in cls.model_fields.items() if info.alias}
        result: dict[str, Any] = {}
        for key, value in updates.items():
            name = key if key in cls.model_fields else by_alias.get(key)
            if name is not None:
                result[name] = value
        return result


# -- Stored entities -----------------------------------------------------------


class Conversation(_Entity):
    """A chat thread. ``updated_at`` moves whenever a message is added."""

    id: str
    title: str
    created_at: datetime
    updated_at: datetime


class Message(_Entity):
    """A single conversation message. Never modified after creation."""

    id: str
    conversation_id: str
    role: MessageRole
    content: str
    metadata: Any = None  # agent info, search results, etc.
    created_at: datetime


class Agent(_Entity):
    """A named assistant persona."""

    id: str
    name: str
    type: AgentType
    description: str
    is_active: bool = True


# -- Insert shapes (validated input for create operations) --------------------


class InsertConversation(_WireModel):
    title: str


class InsertMessage(_WireModel):
    conversation_id: str
    role: MessageRole
    content: str
    metadata: Any = None


class InsertAgent(_WireModel):
    name: str
    type: AgentType
    description: str
    is_active: bool | None = Field(default=None)
