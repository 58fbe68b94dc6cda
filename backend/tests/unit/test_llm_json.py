"""
Unit tests for JSON extraction from free-text LLM replies.
"""

import pytest

from cinematic_mirror.utils.llm_json import (
    JSONExtractionError,
    extract_json_object,
    find_json_object_span,
)


class TestFindJsonObjectSpan:
    def test_greedy_first_to_last_brace(self):
        text = 'prefix {"a": {"b": 1}} middle {"c": 2} suffix'
        assert find_json_object_span(text) == '{"a": {"b": 1}} middle {"c": 2}'

    def test_spans_newlines(self):
        text = 'Here you go:\n```json\n{\n  "title": "x"\n}\n```'
        assert find_json_object_span(text) == '{\n  "title": "x"\n}'

    def test_no_braces(self):
        assert find_json_object_span("no json here") is None

    def test_empty(self):
        assert find_json_object_span("") is None


class TestExtractJsonObject:
    def test_parses_embedded_object(self):
        text = '好的，这是档案：{"title": "夜行者", "angles": []} 希望你喜欢'
        assert extract_json_object(text) == {"title": "夜行者", "angles": []}

    def test_missing_object_raises(self):
        with pytest.raises(JSONExtractionError):
            extract_json_object("I cannot produce a profile today.")

    def test_invalid_json_raises(self):
        with pytest.raises(JSONExtractionError):
            extract_json_object("{title: unquoted}")

    def test_greedy_span_over_two_objects_is_invalid(self):
        with pytest.raises(JSONExtractionError):
            extract_json_object('{"a": 1} and {"b": 2}')
