"""Builder canvas: the editing-mode view of the current step."""

from dataclasses import dataclass

from ..models import FormComponent, FormDocument
from ..registry import TypeRegistry
from .nodes import StepSummary


@dataclass(frozen=True)
class OutlineNode:
    """A component as the builder canvas shows it."""

    id: str
    type: str
    label: str
    known: bool = True
    is_container: bool = False
    required: bool = False
    hidden: bool = False
    placeholder: str | None = None
    description: str | None = None
    children: tuple["OutlineNode", ...] = ()

    @property
    def drop_target(self) -> bool:
        """Empty containers show a "drop components here" zone."""
        return self.is_container and not self.children


@dataclass(frozen=True)
class BuilderCanvas:
    steps: tuple[StepSummary, ...] = ()
    step_index: int = 0
    title: str = ""
    nodes: tuple[OutlineNode, ...] = ()

    @property
    def has_steps(self) -> bool:
        return bool(self.steps)

    @property
    def is_empty(self) -> bool:
        return not self.nodes


def outline_component(component: FormComponent, registry: TypeRegistry) -> OutlineNode:
    return OutlineNode(
        id=component.id,
        type=component.type,
        label=component.label,
        known=registry.is_known(component.type),
        is_container=registry.is_container(component.type),
        required=component.required,
        hidden=component.hidden,
        placeholder=component.placeholder,
        description=component.description,
        children=tuple(outline_component(child, registry) for child in component.children),
    )


def outline(document: FormDocument, registry: TypeRegistry) -> BuilderCanvas:
    """Build the canvas for the current step; conditionals are not applied."""
    steps = tuple(
        StepSummary(
            id=step.id,
            title=step.title,
            index=index,
            component_count=len(step.components),
            active=index == document.current_step_index,
        )
        for index, step in enumerate(document.wizard_steps)
    )
    step = document.current_step
    if step is None:
        return BuilderCanvas(steps=steps)
    return BuilderCanvas(
        steps=steps,
        step_index=document.current_step_index,
        title=step.title,
        nodes=tuple(outline_component(component, registry) for component in step.components),
    )
