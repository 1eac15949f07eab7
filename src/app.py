"""Process-wide service wiring.

Build one ``Services`` at startup and pass it (or its members) to whatever
needs storage or search. Nothing here is a module-level global.
"""

from dataclasses import dataclass, field

from src.search.client import SearchClient
from src.storage.base import Storage
from src.storage.memory import MemoryStorage


@dataclass
class Services:
    storage: Storage = field(default_factory=MemoryStorage)
    search: SearchClient = field(default_factory=SearchClient)


def create_services() -> Services:
    """Construct the storage and search services for this process."""
    return Services()
