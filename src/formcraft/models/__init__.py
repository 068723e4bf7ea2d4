"""Form schema data model."""

from .schema import (
    Conditional,
    FormComponent,
    WizardStep,
    FormDocument,
    NodeIndices,
    NodePath,
    iter_components,
    iter_document,
    locate,
    node_at,
    find_component,
    collect_ids,
)

__all__ = [
    "Conditional",
    "FormComponent",
    "WizardStep",
    "FormDocument",
    "NodeIndices",
    "NodePath",
    "iter_components",
    "iter_document",
    "locate",
    "node_at",
    "find_component",
    "collect_ids",
]
