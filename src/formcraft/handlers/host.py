"""Host Handler - the boundary a host application embeds."""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from returns.pipeline import is_successful
from returns.result import Result

from ..core import Settings, get_settings, get_logger, LogContext, MalformedInput
from ..models import FormComponent, FormDocument, WizardStep
from ..registry import TypeRegistry
from ..render import BuilderCanvas, RenderedForm, Renderer, outline
from ..store import SchemaStore
from ..wizard import NavigationState, WizardController

logger = get_logger(__name__)

DataChangeCallback = Callable[[str], None]
SubmitCallback = Callable[[dict[str, Any]], None]


class Mode(str, Enum):
    BUILDER = "builder"
    RENDERER = "renderer"
    PREVIEW = "preview"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class HostOptions(BaseModel):
    """Host-facing controls."""

    model_config = ConfigDict(frozen=True)

    mode: Mode = Mode.RENDERER
    readonly: bool = False
    theme: Theme = Theme.LIGHT

    @classmethod
    def from_settings(cls, settings: Settings) -> "HostOptions":
        return cls(
            mode=Mode(settings.default_mode),
            readonly=settings.readonly,
            theme=Theme(settings.default_theme),
        )


class FormHost:
    """
    Wires store, wizard and renderer behind the host controls.

    Outbound signals:
    - ``on_data_change(text)`` after every structural or value mutation
    - ``on_submit(values)`` when the final step is submitted

    In readonly mode every mutation, value write and step move is ignored.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        renderer: Renderer,
        options: HostOptions | None = None,
        settings: Settings | None = None,
        data: str | None = None,
        on_data_change: DataChangeCallback | None = None,
        on_submit: SubmitCallback | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.options = options or HostOptions.from_settings(self.settings)
        self.registry = registry
        self.renderer = renderer
        self.store = SchemaStore(registry, document=_starter_document(), settings=self.settings)
        self.wizard = WizardController(self.store)
        self.on_submit = on_submit

        if on_data_change is not None:
            self.store.subscribe(on_data_change)
        if data:
            self.set_data(data)

        logger.info("host_initialized", mode=self.options.mode.value, readonly=self.options.readonly)

    @property
    def document(self) -> FormDocument:
        return self.store.document

    @property
    def readonly(self) -> bool:
        return self.options.readonly

    def _blocked(self, action: str) -> bool:
        if self.options.readonly:
            logger.debug("readonly_ignored", action=action)
            return True
        return False

    # ------------------------------------------------------------------
    # Host controls
    # ------------------------------------------------------------------

    def set_data(self, text: str) -> Result[FormDocument, MalformedInput]:
        """Load host data; the push replaces local edits (last write wins)."""
        with LogContext(mode=self.options.mode.value):
            result = self.store.load(text)
        if not is_successful(result):
            logger.warning("host_data_rejected", error=result.failure().message)
        return result

    def set_options(self, **changes: Any) -> HostOptions:
        """Change mode / readonly / theme."""
        self.options = HostOptions.model_validate({**self.options.model_dump(), **changes})
        logger.info("host_options_changed", **{k: str(v) for k, v in changes.items()})
        return self.options

    def view(self) -> BuilderCanvas | RenderedForm:
        """Builder canvas in builder mode, the rendered step otherwise."""
        if self.options.mode is Mode.BUILDER:
            return outline(self.store.document, self.registry)
        return self.renderer.render(
            self.store.document,
            sink=self.store,
            readonly=self.options.readonly,
            preview=self.options.mode is Mode.PREVIEW,
        )

    # ------------------------------------------------------------------
    # Builder path
    # ------------------------------------------------------------------

    def add_component(self, component_type: str, parent_id: str | None = None) -> FormComponent | None:
        if self._blocked("add_component"):
            return None
        return self.store.add_component(component_type, parent_id)

    def update_component(self, component_id: str, patch: Mapping[str, Any]) -> bool:
        if self._blocked("update_component"):
            return False
        return self.store.update_component(component_id, patch)

    def delete_component(self, component_id: str) -> bool:
        if self._blocked("delete_component"):
            return False
        return self.store.delete_component(component_id)

    def add_step(self, title: str | None = None) -> WizardStep | None:
        if self._blocked("add_step"):
            return None
        return self.store.add_step(title)

    def update_step(self, step_id: str, patch: Mapping[str, Any]) -> bool:
        if self._blocked("update_step"):
            return False
        return self.store.update_step(step_id, patch)

    def delete_step(self, step_id: str) -> bool:
        if self._blocked("delete_step"):
            return False
        return self.store.delete_step(step_id)

    # ------------------------------------------------------------------
    # Renderer path
    # ------------------------------------------------------------------

    def set_value(self, key: str, value: Any) -> None:
        if self._blocked("set_value"):
            return
        self.store.set_value(key, value)

    def toggle_option(self, key: str, option: str, checked: bool | None = None) -> None:
        if self._blocked("toggle_option"):
            return
        self.store.toggle_option(key, option, checked)

    @property
    def navigation(self) -> NavigationState:
        return self.wizard.state

    def next(self) -> int:
        if self._blocked("next"):
            return self.wizard.index
        return self.wizard.next()

    def previous(self) -> int:
        if self._blocked("previous"):
            return self.wizard.index
        return self.wizard.previous()

    def jump_to(self, index: int) -> int:
        if self._blocked("jump_to"):
            return self.wizard.index
        return self.wizard.jump_to(index)

    def submit(self) -> dict[str, Any] | None:
        """Submit from the final step and fire ``on_submit`` with all values."""
        if self._blocked("submit"):
            return None
        values = self.wizard.submit()
        if values is not None and self.on_submit is not None:
            self.on_submit(values)
        return values


def _starter_document() -> FormDocument:
    """A fresh host starts with one empty step, like a blank builder."""
    return FormDocument(wizard_steps=[WizardStep(id="step_1", title="Step 1", description="", components=[])])


def create_host(
    data: str | None = None,
    options: HostOptions | None = None,
    on_data_change: DataChangeCallback | None = None,
    on_submit: SubmitCallback | None = None,
    settings: Settings | None = None,
) -> FormHost:
    """
    Build a FormHost from the dependency container.

    Args:
        data: Initial host JSON
        options: Mode / readonly / theme (defaults from settings)
        on_data_change: Data-changed signal
        on_submit: Submit signal
        settings: Settings override

    Returns:
        Configured FormHost
    """
    from ..core import create_container

    container = create_container(settings)
    return FormHost(
        registry=container.get(TypeRegistry),
        renderer=container.get(Renderer),
        options=options,
        settings=container.get(Settings),
        data=data,
        on_data_change=on_data_change,
        on_submit=on_submit,
    )
