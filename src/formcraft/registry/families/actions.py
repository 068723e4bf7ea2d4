"""
Action fields
Buttons. They never bind a value.
"""

from typing import TYPE_CHECKING

from ..types import FieldFamily, FieldType

if TYPE_CHECKING:
    from ..registry import TypeRegistry


def register_action_fields(registry: "TypeRegistry") -> None:
    """Register button, submit and reset."""

    for tag, label in (("button", "Button"), ("submit", "Submit"), ("reset", "Reset")):
        registry.register(FieldType(
            tag=tag,
            label=label,
            category="Actions",
            family=FieldFamily.ACTION,
            widget="button",
            input_type=tag,
            has_placeholder=False,
        ))
