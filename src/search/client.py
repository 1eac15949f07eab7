"""DuckDuckGo Instant Answer client: web search for the search agent."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from src.config import settings
from src.search.errors import (
    SearchDecodeError,
    SearchError,
    SearchTransportError,
    UpstreamStatusError,
    describe,
)
from src.search.models import InstantAnswerResponse
from src.search.normalize import extract_sources, extract_summary

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 20
NO_INSTANT_ANSWER = "No instant answer available"

# Characters encodeURIComponent leaves alone, besides letters, digits and "-_."
_URI_COMPONENT_SAFE = "!~*'()"


@dataclass
class SearchResult:
    """Outcome of ``SearchClient.search``.

    On success ``summary``/``sources``/``raw_data`` are filled in; on failure
    only ``error`` is. Callers branch on ``success`` and never need a
    try/except.
    """

    summary: str = ""
    sources: list[str] = field(default_factory=list)
    raw_data: dict[str, Any] | None = None
    error: str | None = None
    response: InstantAnswerResponse | None = field(default=None, repr=False)
    fault: SearchError | None = field(default=None, repr=False)

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"success": False, "error": self.error}
        return {
            "success": True,
            "summary": self.summary,
            "sources": list(self.sources),
            "data": self.raw_data,
        }


@dataclass
class InstantAnswer:
    """Outcome of ``SearchClient.get_instant_answer``."""

    answer: str | None = None
    type: str | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"success": False, "error": self.error}
        return {"success": True, "answer": self.answer, "type": self.type}


def build_search_url(base_url: str, query: str) -> str:
    """Build the GET URL; the query is encoded like ``encodeURIComponent``."""
    encoded = quote(query, safe=_URI_COMPONENT_SAFE)
    return f"{base_url}?q={encoded}&format=json&no_html=1&skip_disambig=1"


class SearchClient:
    """Stateless wrapper around the instant-answer endpoint.

    Safe to share between concurrent tasks: each call opens its own HTTP
    client. There are no retries and no caching.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self._base_url = base_url or settings.search_api_url

    async def search(self, query: str) -> SearchResult:
        """Run *query* and normalize the response into summary and sources."""
        try:
            raw, data = await self._fetch(query)
        except UpstreamStatusError as exc:
            logger.warning("Search for %r rejected: HTTP %s", query, exc.status_code)
            return SearchResult(error=str(exc), fault=exc)
        except SearchError as exc:
            logger.warning("Search for %r failed: %s", query, exc)
            return SearchResult(error=str(exc), fault=exc)
        except Exception as exc:
            logger.exception("Unexpected search failure")
            fault = SearchTransportError(exc)
            return SearchResult(error=str(fault), fault=fault)

        return SearchResult(
            summary=extract_summary(data),
            sources=extract_sources(data),
            raw_data=raw,
            response=data,
        )

    async def get_instant_answer(self, query: str) -> InstantAnswer:
        """Return the direct answer (or abstract) for *query*, if there is one."""
        result = await self.search(query)

        if not result.success:
            fault = result.fault
            if isinstance(fault, SearchTransportError):
                return InstantAnswer(
                    error=f"Failed to get instant answer: {describe(fault.cause)}"
                )
            return InstantAnswer(error=result.error)

        data = result.response
        if data.Answer:
            return InstantAnswer(answer=data.Answer, type=data.AnswerType or "instant")
        if data.AbstractText:
            return InstantAnswer(answer=data.AbstractText, type="abstract")

        return InstantAnswer(error=NO_INSTANT_ANSWER)

    # -- Helpers ---------------------------------------------------------------

    async def _fetch(self, query: str) -> tuple[Any, InstantAnswerResponse]:
        """GET the endpoint and validate the body.

        Raises:
            SearchTransportError: No response could be obtained.
            UpstreamStatusError: The API returned a non-2xx status.
            SearchDecodeError: The body is not an instant-answer JSON object.
        """
        url = build_search_url(self._base_url, query)
        try:
            async with httpx.AsyncClient(
                timeout=REQUEST_TIMEOUT,
                follow_redirects=True,
                headers={"User-Agent": settings.search_user_agent},
            ) as client:
                resp = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise SearchTransportError(exc) from exc

        if not resp.is_success:
            raise UpstreamStatusError(resp.status_code)

        try:
            raw = resp.json()
            data = InstantAnswerResponse.model_validate(raw)
        except (ValueError, ValidationError) as exc:
            raise SearchDecodeError(exc) from exc

        logger.debug("Search for %r returned type=%s", query, data.Type)
        return raw, data
