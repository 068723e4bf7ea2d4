"""JSON helper tests with property-based testing."""

import json

import pytest
from hypothesis import given, strategies as st

from formcraft.core import (
    JSONParseError,
    parse_json_object,
    safe_json_dumps,
    validate_json_depth,
    validate_json_size,
)


def test_parse_json_object_clean():
    """Test parsing a clean object."""
    text = '{"title": "Test", "count": 42}'
    assert parse_json_object(text) == {"title": "Test", "count": 42}


def test_parse_json_object_whitespace():
    assert parse_json_object('  \n{"a": [1, 2]}\n ') == {"a": [1, 2]}


def test_parse_json_object_invalid():
    """Test error on invalid JSON."""
    with pytest.raises(JSONParseError) as exc_info:
        parse_json_object("{not json", repair=False)
    assert exc_info.value.original is not None


def test_parse_json_object_empty():
    with pytest.raises(JSONParseError):
        parse_json_object("   ")


@pytest.mark.parametrize("text", ["[]", "42", '"text"', "null", "true"])
def test_parse_json_object_rejects_non_objects(text):
    with pytest.raises(JSONParseError, match="Expected object"):
        parse_json_object(text)


def test_parse_json_object_repair():
    """Trailing commas and single quotes are fixed when repair is on."""
    text = "{'title': 'Test', 'items': [1, 2,],}"
    assert parse_json_object(text, repair=True) == {"title": "Test", "items": [1, 2]}


def test_safe_json_dumps():
    """Test JSON serialization."""
    obj = {"title": "Test", "items": [1, 2, 3]}
    assert json.loads(safe_json_dumps(obj)) == obj


def test_safe_json_dumps_with_indent():
    """Test JSON serialization with indentation."""
    obj = {"title": "Test"}
    result = safe_json_dumps(obj, indent=2)
    assert json.loads(result) == obj
    assert "\n" in result


def test_safe_json_dumps_unrepresentable_values():
    """Values outside JSON are written as their string form."""
    marker = object()
    assert json.loads(safe_json_dumps({"file": marker})) == {"file": str(marker)}


def test_safe_json_dumps_big_int():
    """Integers outside the 64-bit range still encode."""
    assert json.loads(safe_json_dumps({"n": 2**70})) == {"n": 2**70}


def test_validate_json_size():
    validate_json_size('{"a": 1}', max_size=8)
    with pytest.raises(JSONParseError, match="exceeds maximum"):
        validate_json_size('{"a": 12}', max_size=8)


def test_validate_json_size_counts_bytes():
    """Multi-byte characters count by encoded size."""
    with pytest.raises(JSONParseError):
        validate_json_size('"ééé"', max_size=5)


def test_validate_json_size_rejects_lone_surrogate():
    with pytest.raises(JSONParseError, match="not valid UTF-8"):
        validate_json_size('"\ud800"', max_size=64)


def test_parse_json_object_rejects_lone_surrogate():
    with pytest.raises(JSONParseError, match="not valid UTF-8"):
        parse_json_object('{"a": "\udfff"}')


def test_parse_json_object_runaway_nesting():
    text = '{"a": ' + "[" * 200000 + "]" * 200000 + "}"
    with pytest.raises(JSONParseError, match="too deep"):
        parse_json_object(text)


def test_validate_json_depth():
    nested = {"a": {"b": [{"c": 1}]}}
    validate_json_depth(nested, max_depth=4)
    with pytest.raises(JSONParseError, match="nesting depth"):
        validate_json_depth(nested, max_depth=2)


@given(st.dictionaries(st.text(min_size=1), st.integers(min_value=-(2**63), max_value=2**63 - 1)))
def test_json_roundtrip(data):
    """Property test: JSON serialization roundtrip."""
    assert parse_json_object(safe_json_dumps(data)) == data
