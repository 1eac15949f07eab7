"""Identifier and clock factories used by the stores."""

import uuid
from collections.abc import Callable
from datetime import UTC, datetime

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


def make_id() -> str:
    """Generate a new random entity ID (UUID4 string)."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)
