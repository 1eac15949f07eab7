"""Response model for the DuckDuckGo Instant Answer API.

Every field is optional and unknown keys are ignored. The API is loose about
types, so text fields accept numbers (converted to ``str``) and treat any
other non-string value as absent, and a ``null`` or non-list topic array is
read as empty. Grouped related topics (``{"Name": ..., "Topics": [...]}``)
validate as entries with no text or URL and so contribute nothing to
summaries or sources.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, int | float):
        return str(value)
    return None


def _as_topics(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


LooseText = Annotated[str | None, BeforeValidator(_as_text)]


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Topic(_Upstream):
    """An entry of ``RelatedTopics`` or ``Results``."""

    Result: LooseText = None
    FirstURL: LooseText = None
    Text: LooseText = None


Topics = Annotated[list[Topic], BeforeValidator(_as_topics)]


class InstantAnswerResponse(_Upstream):
    Abstract: LooseText = None
    AbstractText: LooseText = None
    AbstractSource: LooseText = None
    AbstractURL: LooseText = None
    Answer: LooseText = None
    AnswerType: LooseText = None
    Definition: LooseText = None
    DefinitionSource: LooseText = None
    DefinitionURL: LooseText = None
    Heading: LooseText = None
    Image: LooseText = None
    ImageIsLogo: Any = None
    Infobox: Any = None
    Redirect: LooseText = None
    RelatedTopics: Topics = []
    Results: Topics = []
    Type: LooseText = None
