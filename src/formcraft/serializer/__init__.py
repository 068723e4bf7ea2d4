"""
Serializer
Converts FormDocument to and from host JSON
"""

from .codec import (
    DocumentPatch,
    encode,
    decode,
    decode_document,
    apply_patch,
    clamp_step_index,
)
from .legacy import NestingNormalizer, normalize_nesting

__all__ = [
    'DocumentPatch',
    'encode',
    'decode',
    'decode_document',
    'apply_patch',
    'clamp_step_index',
    'NestingNormalizer',
    'normalize_nesting',
]
