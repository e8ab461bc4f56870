"""Tests for fence stripping and JSON parsing of model output."""

import pytest

from app.core.exceptions import StructuredOutputError
from app.services.ai.output_parser import strip_code_fences, parse_json_output


class TestStripCodeFences:
    """Tests for strip_code_fences."""

    def test_removes_json_fence(self):
        assert strip_code_fences('```json\n{"questions": []}\n```') == '{"questions": []}'

    def test_removes_plain_fence(self):
        assert strip_code_fences("```\n[1, 2]\n```") == "[1, 2]"

    def test_removes_markers_anywhere(self):
        """Markers in the middle of the text are removed too."""
        assert strip_code_fences('Here you go ```json [1] ``` enjoy') == "Here you go  [1]  enjoy"

    def test_unfenced_text_is_only_trimmed(self):
        assert strip_code_fences("  [1]\n") == "[1]"


class TestParseJsonOutput:
    """Tests for parse_json_output."""

    def test_parses_fenced_object(self):
        assert parse_json_output('```json\n{"questions":[]}\n```') == {"questions": []}

    def test_parses_array(self):
        raw = '[{"question":"5 + 3 =","answer":8}]'
        assert parse_json_output(raw) == [{"question": "5 + 3 =", "answer": 8}]

    def test_non_json_raises(self):
        with pytest.raises(StructuredOutputError):
            parse_json_output("Sorry, I cannot help with that.")

    def test_empty_output_raises(self):
        with pytest.raises(StructuredOutputError):
            parse_json_output("```json\n```")

    def test_validator_result_is_returned(self):
        assert parse_json_output("[3, 1, 2]", validator=sorted) == [1, 2, 3]

    def test_validator_failure_raises(self):
        def reject(value):
            raise ValueError("wrong shape")

        with pytest.raises(StructuredOutputError, match="wrong shape"):
            parse_json_output("{}", validator=reject)
