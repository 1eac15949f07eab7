"""Tests for storage data models and insert shapes."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from src.storage.models import Agent, Conversation, InsertAgent, InsertMessage, Message


def test_conversation_dumps_wire_names() -> None:
    now = datetime(2025, 6, 1, 9, 0, tzinfo=UTC)
    conv = Conversation(id="c1", title="Hello", created_at=now, updated_at=now)
    dumped = conv.model_dump(mode="json", by_alias=True)
    assert set(dumped) == {"id", "title", "createdAt", "updatedAt"}


def test_message_accepts_wire_names() -> None:
    msg = Message.model_validate(
        {
            "id": "m1",
            "conversationId": "c1",
            "role": "assistant",
            "content": "Hi",
            "createdAt": "2025-06-01T09:00:00Z",
        }
    )
    assert msg.conversation_id == "c1"
    assert msg.metadata is None


def test_insert_message_from_wire_payload() -> None:
    data = InsertMessage.model_validate(
        {"conversationId": "c1", "role": "user", "content": "x", "metadata": {"k": 1}}
    )
    assert data.conversation_id == "c1"
    assert data.metadata == {"k": 1}


def test_insert_agent_rejects_unknown_type() -> None:
    with pytest.raises(ValidationError):
        InsertAgent(name="Bot", type="planner", description="nope")


def test_insert_agent_active_unspecified() -> None:
    assert InsertAgent(name="Bot", type="search", description="d").is_active is None


class TestFieldUpdates:
    def test_maps_aliases_and_drops_unknown(self) -> None:
        assert Agent.field_updates({"isActive": False, "name": "n", "nope": 1}) == {
            "is_active": False,
            "name": "n",
        }

    def test_field_names_pass_through(self) -> None:
        assert Conversation.field_updates({"title": "t"}) == {"title": "t"}
