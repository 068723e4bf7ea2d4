"""Render output types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from ..registry import ValueKind
from ..wizard.state import NavigationState
from .values import toggle_option


class NodeKind(str, Enum):
    """Widget a rendered node asks the presentation layer for."""

    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    SELECTBOXES = "selectboxes"
    HIDDEN = "hidden"
    BUTTON = "button"
    CONTAINER = "container"
    CONTENT = "content"
    PLACEHOLDER = "placeholder"


class ValueSink(Protocol):
    """Where bound fields read and write the value map."""

    def get_value(self, key: str) -> Any: ...

    def set_value(self, key: str, value: Any) -> None: ...


@dataclass(frozen=True)
class ValueBinding:
    """Edit affordance of a value-bearing field."""

    key: str
    kind: ValueKind
    sink: ValueSink = field(repr=False, compare=False)

    def set(self, value: Any) -> None:
        """Write ``{key: value}`` into the value map."""
        self.sink.set_value(self.key, value)

    def toggle(self, option: str, checked: bool | None = None) -> None:
        """Add/remove one option of a multiple-selection field."""
        self.sink.set_value(self.key, toggle_option(self.sink.get_value(self.key), option, checked))


@dataclass(frozen=True)
class RenderNode:
    """One bound field, container or placeholder of the rendered step."""

    id: str
    type: str
    kind: NodeKind
    label: str = ""
    key: str | None = None
    value: Any = None
    input_type: str | None = None
    placeholder: str | None = None
    description: str | None = None
    required: bool = False
    disabled: bool = False
    hidden: bool = False
    options: tuple[str, ...] = ()
    children: tuple["RenderNode", ...] = ()
    empty: bool = False
    content: str | None = None
    binding: ValueBinding | None = field(default=None, repr=False, compare=False)

    def walk(self):
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class StepSummary:
    """Entry of the step menu."""

    id: str
    title: str
    index: int
    component_count: int
    active: bool = False


@dataclass(frozen=True)
class RenderedForm:
    """Projection of the current step for the renderer/preview modes."""

    step_id: str | None = None
    title: str = ""
    description: str | None = None
    nodes: tuple[RenderNode, ...] = ()
    navigation: NavigationState = field(default_factory=NavigationState)
    steps: tuple[StepSummary, ...] = ()
    preview: bool = False

    @classmethod
    def empty(cls, preview: bool = False) -> "RenderedForm":
        """The "no content" state of a document without steps."""
        return cls(preview=preview)

    @property
    def has_content(self) -> bool:
        return self.step_id is not None

    @property
    def step_index(self) -> int:
        return self.navigation.index

    @property
    def step_count(self) -> int:
        return self.navigation.count

    def find(self, component_id: str) -> RenderNode | None:
        for root in self.nodes:
            for node in root.walk():
                if node.id == component_id:
                    return node
        return None
