"""
Field Families
Built-in field types grouped by family. Each module registers its
descriptors on a TypeRegistry.
"""

from .inputs import register_value_fields
from .choices import register_choice_fields
from .actions import register_action_fields
from .layout import register_layout_fields
from .content import register_content_fields

__all__ = [
    "register_value_fields",
    "register_choice_fields",
    "register_action_fields",
    "register_layout_fields",
    "register_content_fields",
]
