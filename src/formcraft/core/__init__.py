"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    Recovery,
    MalformedInput,
    ensure_list,
    ensure_object,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    parse_json_object,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "Recovery",
    "MalformedInput",
    "ensure_list",
    "ensure_object",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "parse_json_object",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
    # DI
    "create_container",
]
