"""
Tree Mutator
Pure add/update/delete transforms over a FormDocument.

Every function returns a new document and never touches its input. A request
that matches nothing returns the input document object itself, so callers
detect no-ops with ``is``. Edits copy only the ancestor spine of the edited
node; all other subtrees are shared with the input.
"""

from collections.abc import Callable, Mapping
from typing import Any

import pydantic

from ..core import get_logger, Recovery
from ..core.id import new_step_id
from ..models import (
    FormComponent,
    FormDocument,
    NodeIndices,
    WizardStep,
    locate,
    node_at,
)
from ..registry import TypeRegistry

logger = get_logger(__name__)

Edit = Callable[[FormComponent], list[FormComponent]]

# Structure and identity only change through add/delete
PROTECTED_COMPONENT_FIELDS = frozenset({"id", "children", "components"})
# Folded into children on decode when list-valued; a column count stays patchable
LIST_NESTING_FIELDS = frozenset({"columns", "rows"})
PROTECTED_STEP_FIELDS = frozenset({"id", "components"})


# ============================================================================
# Spine rebuilding
# ============================================================================


def _rebuild(nodes: list[FormComponent], indices: NodeIndices, edit: Edit) -> list[FormComponent]:
    """Apply ``edit`` to the node at ``indices`` and copy its ancestors."""
    head, rest = indices[0], indices[1:]
    target = nodes[head]
    if rest:
        replacement = [target.model_copy(update={"children": _rebuild(target.children, rest, edit)})]
    else:
        replacement = edit(target)
    return nodes[:head] + replacement + nodes[head + 1:]


def _with_step_components(
    document: FormDocument, step_index: int, components: list[FormComponent]
) -> FormDocument:
    steps = list(document.wizard_steps)
    steps[step_index] = steps[step_index].model_copy(update={"components": components})
    return document.model_copy(update={"wizard_steps": steps})


def _edit_at(document: FormDocument, path: tuple[int, NodeIndices], edit: Edit) -> FormDocument:
    step_index, indices = path
    components = _rebuild(document.wizard_steps[step_index].components, indices, edit)
    return _with_step_components(document, step_index, components)


def _wire_patch(
    model: type[pydantic.BaseModel],
    patch: Mapping[str, Any],
    protected: frozenset[str],
    list_nesting: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Translate patch keys to wire aliases and drop protected fields."""
    aliases = {name: field.alias or name for name, field in model.model_fields.items()}
    wire: dict[str, Any] = {}
    for key, value in patch.items():
        if key in protected or (key in list_nesting and isinstance(value, list)):
            logger.debug("patch_field_ignored", field=key)
            continue
        wire[aliases.get(key, key)] = value
    return wire


def _merge(node: pydantic.BaseModel, wire_patch: dict[str, Any]) -> pydantic.BaseModel:
    """Shallow merge: named fields are replaced wholesale."""
    data = node.model_dump(by_alias=True, exclude_unset=True)
    data.update(wire_patch)
    return type(node).model_validate(data)


# ============================================================================
# Components
# ============================================================================


def add_component(
    document: FormDocument,
    registry: TypeRegistry,
    component_type: str,
    parent_id: str | None = None,
) -> tuple[FormDocument, FormComponent | None]:
    """
    Create a component of ``component_type`` and insert it.

    Args:
        document: Current document
        registry: Source of the default shape and container classification
        component_type: Type tag of the new component
        parent_id: Container to append into; None appends to the current
            step's root sequence

    Returns:
        (new document, created component); the component is None when the
        request was a no-op
    """
    if parent_id is None:
        if document.current_step is None:
            document = add_step(document)
        component = registry.create_component(component_type)
        step_index = document.current_step_index
        components = document.wizard_steps[step_index].components + [component]
        logger.info("component_added", id=component.id, type=component_type, step=step_index)
        return _with_step_components(document, step_index, components), component

    path = locate(document, parent_id, step_index=document.current_step_index)
    if path is None:
        logger.debug("add_skipped", parent_id=parent_id, recovery=Recovery.DANGLING_REFERENCE.value)
        return document, None

    parent = node_at(document, path)
    if not registry.is_container(parent.type):
        logger.debug(
            "add_skipped",
            parent_id=parent_id,
            parent_type=parent.type,
            recovery=Recovery.INVALID_CONTAINER_TARGET.value,
        )
        return document, None

    component = registry.create_component(component_type)

    def append(node: FormComponent) -> list[FormComponent]:
        return [node.model_copy(update={"children": node.children + [component]})]

    logger.info("component_added", id=component.id, type=component_type, parent_id=parent_id)
    return _edit_at(document, path, append), component


def update_component(
    document: FormDocument,
    component_id: str,
    patch: Mapping[str, Any],
    registry: TypeRegistry | None = None,
) -> FormDocument:
    """
    Shallow-merge ``patch`` into the component with ``component_id``.

    Patch keys may be wire names (``minLength``) or attribute names
    (``min_length``). ``id``, ``children`` and nesting keys (``components``,
    list-valued ``columns`` / ``rows``) are never patched. With a registry, a
    ``type`` change that would leave children under a leaf type is refused.
    """
    path = locate(document, component_id)
    if path is None:
        logger.debug("update_skipped", id=component_id, recovery=Recovery.DANGLING_REFERENCE.value)
        return document

    wire_patch = _wire_patch(FormComponent, patch, PROTECTED_COMPONENT_FIELDS, LIST_NESTING_FIELDS)
    if not wire_patch:
        return document

    try:
        merged = _merge(node_at(document, path), wire_patch)
    except pydantic.ValidationError as e:
        logger.warning("update_rejected", id=component_id, error=str(e))
        return document

    if registry is not None and merged.children and not registry.is_container(merged.type):
        logger.debug(
            "update_skipped",
            id=component_id,
            type=merged.type,
            recovery=Recovery.INVALID_CONTAINER_TARGET.value,
        )
        return document

    logger.info("component_updated", id=component_id, fields=sorted(wire_patch))
    return _edit_at(document, path, lambda node: [merged])


def delete_component(document: FormDocument, component_id: str) -> FormDocument:
    """Remove the component with ``component_id`` and its whole subtree."""
    path = locate(document, component_id)
    if path is None:
        logger.debug("delete_skipped", id=component_id, recovery=Recovery.DANGLING_REFERENCE.value)
        return document

    logger.info("component_deleted", id=component_id, step=path[0], depth=len(path[1]))
    return _edit_at(document, path, lambda node: [])


# ============================================================================
# Steps
# ============================================================================


def add_step(document: FormDocument, title: str | None = None) -> FormDocument:
    """Append a new empty step and make it the current one."""
    steps = list(document.wizard_steps)
    step = WizardStep(
        id=new_step_id(),
        title=title or f"Step {len(steps) + 1}",
        description="",
        components=[],
    )
    steps.append(step)
    logger.info("step_added", id=step.id, index=len(steps) - 1)
    return document.model_copy(update={"wizard_steps": steps, "current_step_index": len(steps) - 1})


def _step_index(document: FormDocument, step_id: str) -> int | None:
    for index, step in enumerate(document.wizard_steps):
        if step.id == step_id:
            return index
    return None


def update_step(document: FormDocument, step_id: str, patch: Mapping[str, Any]) -> FormDocument:
    """Shallow-merge ``patch`` (title, description, ...) into a step."""
    index = _step_index(document, step_id)
    if index is None:
        logger.debug("step_update_skipped", id=step_id, recovery=Recovery.DANGLING_REFERENCE.value)
        return document

    wire_patch = _wire_patch(WizardStep, patch, PROTECTED_STEP_FIELDS)
    if not wire_patch:
        return document

    try:
        merged = _merge(document.wizard_steps[index], wire_patch)
    except pydantic.ValidationError as e:
        logger.warning("step_update_rejected", id=step_id, error=str(e))
        return document

    steps = list(document.wizard_steps)
    steps[index] = merged
    logger.info("step_updated", id=step_id, fields=sorted(wire_patch))
    return document.model_copy(update={"wizard_steps": steps})


def delete_step(document: FormDocument, step_id: str) -> FormDocument:
    """Remove a step; the current index is clamped into the remaining range."""
    index = _step_index(document, step_id)
    if index is None:
        logger.debug("step_delete_skipped", id=step_id, recovery=Recovery.DANGLING_REFERENCE.value)
        return document

    steps = document.wizard_steps[:index] + document.wizard_steps[index + 1:]
    current = document.current_step_index
    if current >= len(steps):
        current = max(0, len(steps) - 1)
    logger.info("step_deleted", id=step_id, remaining=len(steps))
    return document.model_copy(update={"wizard_steps": steps, "current_step_index": current})
