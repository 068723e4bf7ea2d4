"""Form Schema Models."""

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


NodeIndices = tuple[int, ...]
"""Child positions from a step's root sequence down to one component."""

NodePath = tuple[int, NodeIndices]
"""(step index, child positions) locating one component in a document."""


class SchemaModel(BaseModel):
    """Base for wire models: camelCase aliases, unknown attributes preserved."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Conditional(SchemaModel):
    """Visibility rule: show the node only when ``values[when] == eq``."""

    show: bool = False
    when: str = ""
    eq: Any = ""


class FormComponent(SchemaModel):
    """One schema node: a form field or a container of fields."""

    id: str = Field(..., description="Unique across the document")
    type: str = Field(..., description="TypeRegistry tag")
    key: str = Field(default="", description="Value-map binding name")

    label: str = ""
    description: str | None = None
    tooltip: str | None = None
    placeholder: str | None = None
    help_text: str | None = Field(default=None, alias="helpText")
    position: str | None = None
    custom_class: str | None = Field(default=None, alias="customClass")

    required: bool = False
    hidden: bool = False
    hidden_label: bool = Field(default=False, alias="hiddenLabel")
    disabled: bool = False

    min_length: int | None = Field(default=None, alias="minLength")
    max_length: int | None = Field(default=None, alias="maxLength")
    custom_error_message: str | None = Field(default=None, alias="customErrorMessage")

    conditional: Conditional | None = None
    options: list[str] | None = None
    default_value: Any = Field(default=None, alias="defaultValue")
    width: int | None = None

    children: list["FormComponent"] = Field(default_factory=list)


class WizardStep(SchemaModel):
    """One page of a multi-step form."""

    id: str
    title: str = ""
    description: str | None = None
    components: list[FormComponent] = Field(default_factory=list)


class FormDocument(BaseModel):
    """Complete state: steps, value map and the active step."""

    model_config = ConfigDict(populate_by_name=True)

    wizard_steps: list[WizardStep] = Field(default_factory=list, alias="wizardSteps")
    form_values: dict[str, Any] = Field(default_factory=dict, alias="formValues")
    current_step_index: int = Field(default=0, alias="currentStepIndex")

    @property
    def current_step(self) -> WizardStep | None:
        if 0 <= self.current_step_index < len(self.wizard_steps):
            return self.wizard_steps[self.current_step_index]
        return None

    @property
    def last_step_index(self) -> int:
        return max(len(self.wizard_steps) - 1, 0)


FormComponent.model_rebuild()


# ============================================================================
# Traversal
# ============================================================================


def iter_components(
    nodes: list[FormComponent], prefix: NodeIndices = ()
) -> Iterator[tuple[NodeIndices, FormComponent]]:
    """Walk a component sequence in pre-order, yielding (indices, node)."""
    for index, node in enumerate(nodes):
        indices = prefix + (index,)
        yield indices, node
        if node.children:
            yield from iter_components(node.children, indices)


def iter_document(document: FormDocument) -> Iterator[tuple[NodePath, FormComponent]]:
    """Walk every step's tree in pre-order, steps in order."""
    for step_index, step in enumerate(document.wizard_steps):
        for indices, node in iter_components(step.components):
            yield (step_index, indices), node


def locate(document: FormDocument, component_id: str, step_index: int | None = None) -> NodePath | None:
    """Find the path of the first node with ``component_id``.

    Args:
        document: Document to search
        component_id: Id to match
        step_index: Restrict the search to one step

    Returns:
        NodePath or None if no node matches
    """
    if step_index is not None:
        if not 0 <= step_index < len(document.wizard_steps):
            return None
        for indices, node in iter_components(document.wizard_steps[step_index].components):
            if node.id == component_id:
                return step_index, indices
        return None

    for path, node in iter_document(document):
        if node.id == component_id:
            return path
    return None


def node_at(document: FormDocument, path: NodePath) -> FormComponent:
    """Resolve a NodePath produced by ``locate``."""
    step_index, indices = path
    nodes = document.wizard_steps[step_index].components
    node = nodes[indices[0]]
    for index in indices[1:]:
        node = node.children[index]
    return node


def find_component(document: FormDocument, component_id: str) -> FormComponent | None:
    """Return the node with ``component_id`` or None."""
    path = locate(document, component_id)
    return node_at(document, path) if path is not None else None


def collect_ids(document: FormDocument) -> list[str]:
    """All component ids in pre-order."""
    return [node.id for _, node in iter_document(document)]
