"""Field type registry."""

from .types import FieldFamily, FieldType, ValueKind, generic_shape
from .registry import TypeRegistry

__all__ = [
    "FieldFamily",
    "FieldType",
    "ValueKind",
    "generic_shape",
    "TypeRegistry",
]
