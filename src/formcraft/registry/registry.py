"""Type Registry - tag -> capability descriptor."""

from typing import Dict, List, Optional

from ..core import get_logger
from ..core.id import new_component_id, new_field_key
from ..models import FormComponent
from .types import FieldType, generic_shape
from .families import (
    register_value_fields,
    register_choice_fields,
    register_action_fields,
    register_layout_fields,
    register_content_fields,
)

logger = get_logger(__name__)


class TypeRegistry:
    """
    Authoritative mapping from type tag to FieldType.
    New field types are added by registering a descriptor, never by
    editing traversal or rendering code.
    """

    def __init__(self, builtins: bool = True):
        self.types: Dict[str, FieldType] = {}
        if builtins:
            self._initialize_builtin_types()

    def _initialize_builtin_types(self):
        """Register the built-in field families."""
        register_value_fields(self)
        register_content_fields(self)
        register_choice_fields(self)
        register_layout_fields(self)
        register_action_fields(self)

        logger.debug("registry_initialized", types=len(self.types), categories=len(self.categories()))

    def register(self, field_type: FieldType) -> None:
        """Register a field type, replacing any previous descriptor for its tag."""
        if field_type.tag in self.types:
            logger.info("field_type_replaced", tag=field_type.tag)
        self.types[field_type.tag] = field_type

    def unregister(self, tag: str) -> None:
        """Remove a field type; nodes of that tag render as placeholders afterwards."""
        self.types.pop(tag, None)

    def get(self, tag: str) -> Optional[FieldType]:
        """Get descriptor by tag."""
        return self.types.get(tag)

    def is_known(self, tag: str) -> bool:
        return tag in self.types

    def is_container(self, tag: str) -> bool:
        """Unknown tags are leaves."""
        field_type = self.types.get(tag)
        return field_type is not None and field_type.is_container

    def binds_value(self, tag: str) -> bool:
        field_type = self.types.get(tag)
        return field_type is not None and field_type.binds_value

    def list_types(self, category: Optional[str] = None) -> List[FieldType]:
        """List all types, optionally filtered by palette category."""
        types = list(self.types.values())
        if category:
            types = [t for t in types if t.category == category]
        return types

    def categories(self) -> List[str]:
        """Palette categories in first-registration order."""
        seen: List[str] = []
        for field_type in self.types.values():
            if field_type.category and field_type.category not in seen:
                seen.append(field_type.category)
        return seen

    def palette(self) -> Dict[str, List[FieldType]]:
        """Addable types grouped by category; internal types are left out."""
        return {category: self.list_types(category) for category in self.categories()}

    def create_component(self, tag: str) -> FormComponent:
        """Create a component of ``tag`` with a fresh id and key."""
        component_id = new_component_id()
        key = new_field_key()
        field_type = self.types.get(tag)
        if field_type is None:
            logger.warning("unregistered_type_created", tag=tag)
            return generic_shape(tag, component_id, key)
        return field_type.default_shape(component_id, key)


__all__ = [
    "TypeRegistry",
]
