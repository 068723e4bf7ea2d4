"""
Choice fields
Fields whose value is picked from an options list.
"""

from typing import TYPE_CHECKING

from ..types import FieldFamily, FieldType, ValueKind

if TYPE_CHECKING:
    from ..registry import TypeRegistry

DEFAULT_OPTIONS = ["Option 1", "Option 2"]


def register_choice_fields(registry: "TypeRegistry") -> None:
    """Register select, radio, selectboxes and checkbox."""

    registry.register(FieldType(
        tag="select",
        label="Select",
        category="Selection",
        family=FieldFamily.CHOICE,
        widget="select",
        value_kind=ValueKind.TEXT,
        default_options=DEFAULT_OPTIONS,
    ))

    registry.register(FieldType(
        tag="radio",
        label="Radio",
        category="Selection",
        family=FieldFamily.CHOICE,
        widget="radio",
        value_kind=ValueKind.TEXT,
        default_options=DEFAULT_OPTIONS,
    ))

    # Multiple selection: the value is an ordered list of picked options
    registry.register(FieldType(
        tag="selectboxes",
        label="Select Boxes",
        category="Selection",
        family=FieldFamily.CHOICE,
        widget="selectboxes",
        value_kind=ValueKind.MULTI,
        default_options=DEFAULT_OPTIONS,
    ))

    # Single boolean toggle, no options list
    registry.register(FieldType(
        tag="checkbox",
        label="Checkbox",
        category="Selection",
        family=FieldFamily.CHOICE,
        widget="checkbox",
        input_type="checkbox",
        value_kind=ValueKind.BOOLEAN,
    ))
