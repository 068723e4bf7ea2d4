"""Error taxonomy and input validation."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValidationError(Exception):
    """Validation failed."""

    pass


class Recovery(str, Enum):
    """Non-fatal conditions the engine recovers from locally.

    None of these ever escapes to the host as an exception; they show up in
    logs (as the ``recovery`` field) and, for decode, as a ``Failure`` value.
    """

    MALFORMED_INPUT = "malformed_input"
    UNKNOWN_COMPONENT_TYPE = "unknown_component_type"
    DANGLING_REFERENCE = "dangling_reference"
    INVALID_CONTAINER_TARGET = "invalid_container_target"


@dataclass(frozen=True)
class MalformedInput:
    """Decode diagnostic (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None

    @property
    def recovery(self) -> Recovery:
        return Recovery.MALFORMED_INPUT


def ensure_list(value: Any, field: str) -> list[Any]:
    """Return ``value`` if it is a list, otherwise raise ValidationError."""
    if not isinstance(value, list):
        raise ValidationError(f"'{field}' must be a list, got {type(value).__name__}")
    return value


def ensure_object(value: Any, field: str) -> dict[str, Any]:
    """Return ``value`` if it is a JSON object, otherwise raise ValidationError."""
    if not isinstance(value, dict):
        raise ValidationError(f"'{field}' must be an object, got {type(value).__name__}")
    return value
