"""
Renderer
Projects (tree, values, step index) into bound RenderNode trees.

Rendering is pure: it reads the document and never mutates it. Writes happen
later, through the ValueBinding attached to each value-bearing node.
"""

from typing import Any, Mapping

from ..core import get_logger, Recovery
from ..models import FormComponent, FormDocument
from ..registry import FieldFamily, FieldType, TypeRegistry
from ..wizard.state import navigation_state
from .nodes import NodeKind, RenderNode, RenderedForm, StepSummary, ValueBinding, ValueSink
from .values import is_visible, read_value

logger = get_logger(__name__)

_WIDGETS = {kind.value: kind for kind in NodeKind if kind is not NodeKind.PLACEHOLDER}


class Renderer:
    """Dispatches schema nodes to widgets through the TypeRegistry."""

    def __init__(self, registry: TypeRegistry) -> None:
        self.registry = registry

    def render(
        self,
        document: FormDocument,
        sink: ValueSink | None = None,
        readonly: bool = False,
        preview: bool = False,
    ) -> RenderedForm:
        """
        Render the current step.

        Args:
            document: Document to project
            sink: Target of value bindings; None renders without bindings
            readonly: Disable every field and attach no bindings
            preview: Mark the output as a builder preview

        Returns:
            RenderedForm (``RenderedForm.empty()`` when there are no steps)
        """
        step = document.current_step
        if step is None:
            return RenderedForm.empty(preview=preview)

        nodes = self.render_components(step.components, document.form_values, sink, readonly)
        steps = tuple(
            StepSummary(
                id=s.id,
                title=s.title,
                index=index,
                component_count=len(s.components),
                active=index == document.current_step_index,
            )
            for index, s in enumerate(document.wizard_steps)
        )
        return RenderedForm(
            step_id=step.id,
            title=step.title,
            description=step.description,
            nodes=nodes,
            navigation=navigation_state(document),
            steps=steps,
            preview=preview,
        )

    def render_components(
        self,
        components: list[FormComponent],
        values: Mapping[str, Any],
        sink: ValueSink | None = None,
        readonly: bool = False,
    ) -> tuple[RenderNode, ...]:
        """Render a sibling sequence, skipping nodes hidden by their conditional."""
        return tuple(
            self.render_component(component, values, sink, readonly)
            for component in components
            if is_visible(component, values)
        )

    def render_component(
        self,
        component: FormComponent,
        values: Mapping[str, Any],
        sink: ValueSink | None = None,
        readonly: bool = False,
    ) -> RenderNode:
        """Render one node; unknown tags and widgets become inert placeholders."""
        field_type = self.registry.get(component.type)
        if field_type is None:
            return _placeholder(component, f'Component type "{component.type}" not implemented')

        kind = _WIDGETS.get(field_type.widget)
        if kind is None:
            return _placeholder(component, f'Widget "{field_type.widget}" not implemented')

        disabled = readonly or component.disabled
        common: dict[str, Any] = {
            "id": component.id,
            "type": component.type,
            "kind": kind,
            "label": component.label,
            "description": component.description,
            "required": component.required,
            "disabled": disabled,
            "hidden": component.hidden,
            "input_type": field_type.input_type,
        }

        if field_type.is_container:
            children = self.render_components(component.children, values, sink, readonly)
            return RenderNode(**common, children=children, empty=not component.children)

        if field_type.family is FieldFamily.ACTION:
            common["label"] = component.label or field_type.label
            return RenderNode(**common)

        if field_type.family is FieldFamily.CONTENT:
            return RenderNode(**common, content=self._content(component))

        return self._render_field(component, field_type, common, values, sink, disabled)

    def _render_field(
        self,
        component: FormComponent,
        field_type: FieldType,
        common: dict[str, Any],
        values: Mapping[str, Any],
        sink: ValueSink | None,
        disabled: bool,
    ) -> RenderNode:
        kind = field_type.value_kind
        if kind is None:
            return RenderNode(**common)

        value = read_value(
            kind,
            values.get(component.key),
            component.default_value if field_type.widget == "hidden" else None,
        )
        binding = None
        if sink is not None and not disabled:
            binding = ValueBinding(key=component.key, kind=kind, sink=sink)

        return RenderNode(
            **common,
            key=component.key,
            value=value,
            placeholder=component.placeholder,
            options=tuple(component.options or ()),
            binding=binding,
        )

    @staticmethod
    def _content(component: FormComponent) -> str:
        extra = component.model_extra or {}
        return extra.get("content") or extra.get("html") or component.label or "HTML Content"


def _placeholder(component: FormComponent, label: str) -> RenderNode:
    logger.debug(
        "placeholder_rendered",
        id=component.id,
        type=component.type,
        recovery=Recovery.UNKNOWN_COMPONENT_TYPE.value,
    )
    return RenderNode(id=component.id, type=component.type, kind=NodeKind.PLACEHOLDER, label=label)
