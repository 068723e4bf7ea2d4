"""
Layout containers
Structural types that hold nested components in ``children``.
"""

from typing import TYPE_CHECKING

from ..types import FieldFamily, FieldType

if TYPE_CHECKING:
    from ..registry import TypeRegistry


def register_layout_fields(registry: "TypeRegistry") -> None:
    """Register panel, columns, fieldset, well, tabs and the internal column/row."""

    for tag, label in (
        ("panel", "Panel"),
        ("columns", "Columns"),
        ("fieldset", "Field Set"),
        ("well", "Well"),
        ("tabs", "Tabs"),
    ):
        registry.register(FieldType(
            tag=tag,
            label=label,
            category="Layout",
            family=FieldFamily.CONTAINER,
            widget="container",
            has_placeholder=False,
        ))

    # Produced when decoding legacy ``columns``/``rows`` nesting; not in the palette
    for tag, label in (("column", "Column"), ("row", "Row")):
        registry.register(FieldType(
            tag=tag,
            label=label,
            family=FieldFamily.CONTAINER,
            widget="container",
            has_placeholder=False,
        ))
