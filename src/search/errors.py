"""Faults raised while talking to the search API.

These never leave the search package; ``SearchClient`` converts them into
failed results.
"""

from pydantic import ValidationError


class SearchError(Exception):
    """Base class for search faults."""


class UpstreamStatusError(SearchError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"DuckDuckGo API error: {status_code}")
        self.status_code = status_code


class SearchTransportError(SearchError):
    """No response was obtained (connection refused, timeout, bad URL)."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Failed to search: {describe(cause)}")
        self.cause = cause


class SearchDecodeError(SearchError):
    """The body was not JSON, or not shaped like an instant answer."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Failed to search: {describe(cause)}")
        self.cause = cause


def describe(exc: BaseException) -> str:
    """Return a one-line description of *exc*.

    Validation errors are reduced to their first problem, without pydantic's
    multi-line report.
    """
    if isinstance(exc, ValidationError):
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first["loc"])
        return f"{loc}: {first['msg']}" if loc else first["msg"]
    return str(exc).splitlines()[0] if str(exc) else type(exc).__name__
