"""Tests for summary and source extraction from instant-answer responses."""

from src.search.models import InstantAnswerResponse
from src.search.normalize import NO_RESULTS_SUMMARY, extract_sources, extract_summary


def _response(**fields) -> InstantAnswerResponse:
    return InstantAnswerResponse.model_validate(fields)


# ---------------------------------------------------------------------------
# extract_summary
# ---------------------------------------------------------------------------


class TestExtractSummary:
    def test_answer_wins(self) -> None:
        data = _response(Answer="42", AbstractText="abstract", Definition="def")
        assert extract_summary(data) == "42"

    def test_abstract_before_definition(self) -> None:
        data = _response(AbstractText="abstract", Definition="def")
        assert extract_summary(data) == "abstract"

    def test_definition(self) -> None:
        assert extract_summary(_response(Answer="", Definition="def")) == "def"

    def test_first_related_topic_text(self) -> None:
        data = _response(RelatedTopics=[{"Text": "x"}, {"Text": "y"}])
        assert extract_summary(data) == "x"

    def test_first_result_text(self) -> None:
        data = _response(RelatedTopics=[{"FirstURL": "u"}], Results=[{"Text": "r"}])
        assert extract_summary(data) == "r"

    def test_only_first_topic_is_considered(self) -> None:
        data = _response(RelatedTopics=[{"FirstURL": "u"}, {"Text": "second"}])
        assert extract_summary(data) == NO_RESULTS_SUMMARY

    def test_fallback(self) -> None:
        assert extract_summary(_response()) == (
            "No specific information found from search results."
        )


# ---------------------------------------------------------------------------
# extract_sources
# ---------------------------------------------------------------------------


class TestExtractSources:
    def test_dedupe_preserves_order(self) -> None:
        data = _response(
            AbstractSource="wiki",
            RelatedTopics=[{"FirstURL": "a"}, {"FirstURL": "a"}, {"FirstURL": "b"}],
        )
        assert extract_sources(data) == ["wiki", "a", "b"]

    def test_field_order(self) -> None:
        data = _response(
            Results=[{"FirstURL": "result"}],
            RelatedTopics=[{"FirstURL": "topic"}],
            DefinitionURL="def-url",
            AbstractURL="abs-url",
            DefinitionSource="def-src",
            AbstractSource="abs-src",
        )
        assert extract_sources(data) == ["abs-src", "def-src", "abs-url", "def-url", "topic"]

    def test_truncates_after_dedupe(self) -> None:
        topics = [{"FirstURL": u} for u in ["a", "a", "b", "c", "d", "e", "f"]]
        assert extract_sources(_response(RelatedTopics=topics)) == ["a", "b", "c", "d", "e"]

    def test_skips_empty_fields(self) -> None:
        data = _response(AbstractSource="", AbstractURL=None, Results=[{"Text": "no url"}])
        assert extract_sources(data) == []

    def test_grouped_topics_contribute_nothing(self) -> None:
        data = _response(
            RelatedTopics=[
                {"Name": "Group", "Topics": [{"FirstURL": "nested", "Text": "t"}]},
                {"FirstURL": "top"},
            ]
        )
        assert extract_sources(data) == ["top"]


# ---------------------------------------------------------------------------
# Loose upstream typing
# ---------------------------------------------------------------------------


class TestLooseResponses:
    def test_null_topic_arrays_read_as_empty(self) -> None:
        data = _response(AbstractText="hello", RelatedTopics=None, Results=None)
        assert data.RelatedTopics == []
        assert data.Results == []
        assert extract_summary(data) == "hello"
        assert extract_sources(data) == []

    def test_numeric_answer_becomes_text(self) -> None:
        data = _response(Answer=42, AnswerType="calc")
        assert extract_summary(data) == "42"

    def test_object_answer_falls_through(self) -> None:
        data = _response(Answer={"from": "x", "result": "y"}, AbstractText="a")
        assert data.Answer is None
        assert extract_summary(data) == "a"

    def test_non_object_topics_skipped(self) -> None:
        data = _response(RelatedTopics=["junk", {"FirstURL": "u", "Text": "t"}])
        assert extract_summary(data) == "t"
        assert extract_sources(data) == ["u"]
