"""Web search via the DuckDuckGo Instant Answer API."""

from src.search.client import InstantAnswer, SearchClient, SearchResult

__all__ = ["InstantAnswer", "SearchClient", "SearchResult"]
