"""Reduce an instant-answer response to a summary and a source list."""

from src.search.models import InstantAnswerResponse

NO_RESULTS_SUMMARY = "No specific information found from search results."
MAX_SOURCES = 5


def extract_summary(data: InstantAnswerResponse) -> str:
    """Pick the most direct piece of text the response offers."""
    for text in (data.Answer, data.AbstractText, data.Definition):
        if text:
            return text

    # Only the first related topic / result is considered
    if data.RelatedTopics and data.RelatedTopics[0].Text:
        return data.RelatedTopics[0].Text
    if data.Results and data.Results[0].Text:
        return data.Results[0].Text

    return NO_RESULTS_SUMMARY


def extract_sources(data: InstantAnswerResponse) -> list[str]:
    """Collect source names and URLs, deduplicated, at most ``MAX_SOURCES``."""
    candidates = [
        data.AbstractSource,
        data.DefinitionSource,
        data.AbstractURL,
        data.DefinitionURL,
        *(topic.FirstURL for topic in data.RelatedTopics),
        *(result.FirstURL for result in data.Results),
    ]

    sources: list[str] = []
    for candidate in candidates:
        if candidate and candidate not in sources:
            sources.append(candidate)
    return sources[:MAX_SOURCES]
