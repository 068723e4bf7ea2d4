"""
Plain value fields
Text-like inputs that bind one scalar value by key.
"""

from typing import TYPE_CHECKING

from ..types import FieldFamily, FieldType, ValueKind

if TYPE_CHECKING:
    from ..registry import TypeRegistry


def register_value_fields(registry: "TypeRegistry") -> None:
    """Register text, number, date and other single-value inputs."""

    # =============================================================================
    # BASIC INPUT
    # =============================================================================

    for tag, label, input_type in (
        ("textfield", "Text Field", "text"),
        ("number", "Number", "number"),
        ("password", "Password", "password"),
        ("email", "Email", "email"),
        ("url", "URL", "url"),
        ("date", "Date / Time", "date"),
        ("time", "Time", "time"),
    ):
        registry.register(FieldType(
            tag=tag,
            label=label,
            category="Basic Input",
            family=FieldFamily.VALUE,
            widget="input",
            input_type=input_type,
            value_kind=ValueKind.TEXT,
        ))

    registry.register(FieldType(
        tag="textarea",
        label="Text Area",
        category="Basic Input",
        family=FieldFamily.VALUE,
        widget="textarea",
        value_kind=ValueKind.TEXT,
    ))

    # =============================================================================
    # ADVANCED
    # =============================================================================

    registry.register(FieldType(
        tag="file",
        label="File",
        category="Advanced",
        family=FieldFamily.VALUE,
        widget="input",
        input_type="file",
        value_kind=ValueKind.FILE,
    ))

    registry.register(FieldType(
        tag="hidden",
        label="Hidden",
        category="Advanced",
        family=FieldFamily.VALUE,
        widget="hidden",
        input_type="hidden",
        value_kind=ValueKind.TEXT,
    ))
