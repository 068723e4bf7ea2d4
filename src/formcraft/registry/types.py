"""
Field Type Definitions
Capability descriptors the registry hands out per type tag.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ..models import FormComponent


class FieldFamily(str, Enum):
    """Families of field types"""
    VALUE = "value"
    CHOICE = "choice"
    ACTION = "action"
    CONTAINER = "container"
    CONTENT = "content"


class ValueKind(str, Enum):
    """Shape of the value a field binds in the value map"""
    TEXT = "text"
    BOOLEAN = "boolean"
    MULTI = "multi"
    FILE = "file"

    def default(self) -> Any:
        """Value a field of this kind shows before the user touches it."""
        if self is ValueKind.BOOLEAN:
            return False
        if self is ValueKind.MULTI:
            return []
        if self is ValueKind.FILE:
            return None
        return ""


class FieldType(BaseModel):
    """Rendering/editing contract for one type tag."""
    tag: str = Field(..., description="Type tag stored in FormComponent.type")
    label: str = Field(..., description="Human-readable name for the palette")
    category: str | None = Field(default=None, description="Palette group; None hides the type")
    family: FieldFamily
    widget: str = Field(..., description="Widget the renderer emits (input, select, button, ...)")
    input_type: str | None = Field(default=None, description="Input flavour (text, email, submit, ...)")
    value_kind: ValueKind | None = Field(default=None, description="None for non-value-bearing types")
    default_options: list[str] | None = None
    has_placeholder: bool = True

    @property
    def is_container(self) -> bool:
        return self.family is FieldFamily.CONTAINER

    @property
    def binds_value(self) -> bool:
        return self.value_kind is not None

    def default_shape(self, component_id: str, key: str) -> FormComponent:
        """Build a freshly created component of this type."""
        return FormComponent(
            id=component_id,
            type=self.tag,
            label=f"New {self.tag}",
            key=key,
            required=False,
            position="top",
            placeholder=f"Enter {self.tag}" if self.has_placeholder else None,
            options=list(self.default_options) if self.default_options is not None else None,
            **({"children": []} if self.is_container else {}),
        )


def generic_shape(tag: str, component_id: str, key: str) -> FormComponent:
    """Shape for a tag nobody registered; renders as a placeholder."""
    return FormComponent(
        id=component_id,
        type=tag,
        label=f"New {tag}",
        key=key,
        required=False,
        position="top",
        placeholder=f"Enter {tag}",
    )
