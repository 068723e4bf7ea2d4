"""Fast JSON parsing and encoding with multiple backends."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def parse_json_object(text: str, repair: bool = False) -> dict[str, Any]:
    """
    Parse text that must hold a single JSON object.

    Args:
        text: JSON text
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If parsing fails or the top level is not an object
    """
    text = text.strip()
    if not text:
        raise JSONParseError("Empty JSON text")

    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise JSONParseError(f"Text is not valid UTF-8: {e.reason}", e) from e

    # Try msgspec first (fastest)
    try:
        result = msgspec.json.decode(data)
    except RecursionError as e:
        raise JSONParseError("JSON nesting too deep to decode", e) from e
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e
        result = _repair(text)

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected object, got {type(result).__name__}")
    return result


def _repair(text: str) -> Any:
    try:
        repaired = repair_json(text)
        return json.loads(repaired)
    except (ValueError, TypeError, RecursionError) as repair_error:
        raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Values JSON cannot represent (uploaded file handles, dates) are written
    as their ``str()``.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    # Use orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj, default=str).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    # Use stdlib for pretty-printed output or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None, default=str)


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Validate encoded JSON size.

    Args:
        data: JSON string to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        JSONParseError: If size exceeds limit or the text is not encodable
    """
    try:
        size = len(data.encode("utf-8"))
    except UnicodeEncodeError as e:
        raise JSONParseError(f"{name} is not valid UTF-8: {e.reason}", e) from e
    if size > max_size:
        raise JSONParseError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 64, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth to prevent runaway recursion in tree walks.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        JSONParseError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise JSONParseError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)
