"""
Tests for query_composer.py
Logic testing: Decision/Branch, Boundary Value
"""
import pytest

from fetch_ask.core.query_composer import compose_query, serialize, with_query


class TestSerialize:
    """Tests for serialize function."""

    # Path: values percent-encoded, keys untouched
    def test_encodes_values_only(self):
        assert serialize({"q": "a b&c", "x": 1}) == "q=a%20b%26c&x=1"

    # Decision: None values skipped
    def test_skips_none(self):
        assert serialize({"a": None, "b": "2"}) == "b=2"

    # Boundary: empty mapping
    def test_empty(self):
        assert serialize({}) == ""

    # Decision: booleans lower-cased like JSON
    def test_booleans_lowercase(self):
        assert serialize({"active": True, "deleted": False}) == "active=true&deleted=false"


class TestComposeQuery:
    """Tests for compose_query function."""

    # Path: fragments keep accumulation order
    def test_order_preserved(self):
        assert compose_query([{"a": "1"}, {"b": "2"}]) == "a=1&b=2"

    # Path: literal strings pass through unchanged
    def test_mixed_string_and_mapping(self):
        assert compose_query(["x=%20y", {"a": "1"}]) == "x=%20y&a=1"

    # Decision: empty fragments skipped
    def test_empty_fragments_skipped(self):
        assert compose_query([{}, "", {"a": "1"}]) == "a=1"

    # Error Path: unsupported fragment type
    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            compose_query([42])


class TestWithQuery:
    """Tests for with_query function."""

    # Decision: URL without query gets '?'
    def test_question_mark(self):
        assert with_query("http://h", "a=1") == "http://h?a=1"

    # Decision: URL with query gets '&'
    def test_ampersand(self):
        assert with_query("http://h?x=1", "a=1") == "http://h?x=1&a=1"

    # Boundary: URL ending in '?'
    def test_trailing_question_mark(self):
        assert with_query("http://h?", "a=1") == "http://h?a=1"

    # Boundary: empty query leaves URL alone
    def test_empty_query(self):
        assert with_query("http://h", "") == "http://h"
