"""
Content fields
Static display blocks with no bound value.
"""

from typing import TYPE_CHECKING

from ..types import FieldFamily, FieldType

if TYPE_CHECKING:
    from ..registry import TypeRegistry


def register_content_fields(registry: "TypeRegistry") -> None:
    """Register content and htmlelement."""

    for tag, label in (("htmlelement", "HTML Element"), ("content", "Content")):
        registry.register(FieldType(
            tag=tag,
            label=label,
            category="Advanced",
            family=FieldFamily.CONTENT,
            widget="content",
            has_placeholder=False,
        ))
