"""Unit tests for the reply extraction chain."""

import logging

import pytest
import pytest_check as check

from velaris.chat.extraction import (
    EXTRACTORS,
    extract_reply,
    field_extractor,
    select_payload,
    serialized_extractor,
)


class TestExtractReplyObjects:
    """Bare-object response bodies."""

    def test_prefers_saida_over_output(self) -> None:
        """saída wins when both keys are present."""
        assert extract_reply({"saída": "primeiro", "output": "segundo"}) == "primeiro"

    def test_uses_output_when_saida_missing(self) -> None:
        """output is used when saída is absent."""
        assert extract_reply({"output": "Oi!"}) == "Oi!"

    def test_empty_saida_falls_through_to_output(self) -> None:
        """An empty saída does not stop the chain."""
        assert extract_reply({"saída": "", "output": "Oi!"}) == "Oi!"

    def test_null_output_falls_through_to_serialization(self) -> None:
        """null reply fields fall back to the raw body."""
        assert extract_reply({"output": None, "id": 7}) == '{"output":null,"id":7}'

    def test_serializes_body_without_reply_keys(self) -> None:
        """Unknown shapes are displayed as compact JSON."""
        assert extract_reply({"resposta": "olá"}) == '{"resposta":"olá"}'

    def test_non_string_reply_is_serialized(self) -> None:
        """Numbers or nested objects under a reply key are serialized."""
        check.equal(extract_reply({"output": 42}), "42")
        check.equal(extract_reply({"output": {"text": "oi"}}), '{"text":"oi"}')

    def test_whitespace_reply_is_kept(self) -> None:
        """Whitespace is text; only the empty string counts as empty."""
        assert extract_reply({"output": "  "}) == "  "


class TestExtractReplyArrays:
    """Array-shaped response bodies."""

    def test_reads_first_element(self) -> None:
        """Only the first element of an array is considered."""
        body = [{"output": "um"}, {"output": "dois"}]
        assert extract_reply(body) == "um"

    def test_first_element_without_keys_is_serialized(self) -> None:
        """The fallback serializes the first element, not the whole array."""
        assert extract_reply([{"x": 1}, {"output": "dois"}]) == '{"x":1}'

    def test_primitive_first_element_is_serialized(self) -> None:
        """A string element is serialized like JSON.stringify would."""
        assert extract_reply(["olá"]) == '"olá"'


class TestExtractReplyEmpty:
    """Bodies that yield no reply text."""

    @pytest.mark.parametrize("body", [{}, [], None, [{}], [None]])
    def test_empty_bodies_yield_empty_string(self, body: object) -> None:
        """Empty containers and null serialize to nothing."""
        assert extract_reply(body) == ""

    def test_empty_output_with_other_fields_is_not_empty(self) -> None:
        """A body with an empty output still has a serialization to show."""
        assert extract_reply({"output": ""}) == '{"output":""}'


class TestExtractorChain:
    """The chain itself and its building blocks."""

    def test_default_chain_order(self) -> None:
        """saída, then output, then raw serialization."""
        names = [e.__name__ for e in EXTRACTORS]
        assert names == ["extract_saída", "extract_output", "serialized_extractor"]

    def test_custom_chain_is_respected(self) -> None:
        """Callers can pass their own chain."""
        chain = [field_extractor("reply")]
        check.equal(extract_reply({"reply": "oi", "output": "x"}, chain), "oi")
        check.equal(extract_reply({"output": "x"}, chain), "")

    def test_field_extractor_ignores_non_objects(self) -> None:
        """Key lookups only apply to objects."""
        assert field_extractor("output")(["output"]) is None

    def test_select_payload(self) -> None:
        """Non-empty arrays contribute their head, everything else passes through."""
        check.equal(select_payload([1, 2]), 1)
        check.equal(select_payload([]), [])
        check.equal(select_payload({"a": 1}), {"a": 1})

    def test_raw_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Displaying a raw body is flagged in the logs."""
        with caplog.at_level(logging.WARNING, logger="velaris.chat.extraction"):
            serialized_extractor({"unexpected": True})

        assert "no saída/output field" in caplog.text
