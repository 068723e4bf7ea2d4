"""
Tree Mutator
Structural edits over the component tree.
"""

from .mutator import (
    add_component,
    update_component,
    delete_component,
    add_step,
    update_step,
    delete_step,
)

__all__ = [
    "add_component",
    "update_component",
    "delete_component",
    "add_step",
    "update_step",
    "delete_step",
]
