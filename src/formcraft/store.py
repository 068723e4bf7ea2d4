"""
Schema Store
Owns the canonical FormDocument and funnels every change through it.
"""

from collections.abc import Callable, Mapping
from typing import Any

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from .core import Settings, get_settings, get_logger, MalformedInput
from .models import FormComponent, FormDocument, WizardStep
from .registry import TypeRegistry
from .render.values import toggle_option
from .serializer import apply_patch, decode, encode, clamp_step_index
from . import tree

logger = get_logger(__name__)

DataListener = Callable[[str], None]


class SchemaStore:
    """
    Holds (steps, values, step index) and notifies listeners with freshly
    encoded JSON after every structural or value mutation.

    No-op mutations notify nobody. Step-index moves and host loads are not
    mutations and do not notify either.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        document: FormDocument | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.registry = registry
        self.settings = settings or get_settings()
        self._document = clamp_step_index(document) if document is not None else FormDocument()
        self._listeners: list[DataListener] = []

    @property
    def document(self) -> FormDocument:
        return self._document

    @property
    def current_step_index(self) -> int:
        return self._document.current_step_index

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: DataListener) -> Callable[[], None]:
        """Register a data-changed listener; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, document: FormDocument) -> bool:
        if document is self._document:
            return False
        self._document = document
        if self._listeners:
            text = encode(document)
            for listener in list(self._listeners):
                listener(text)
        return True

    # ------------------------------------------------------------------
    # Host boundary
    # ------------------------------------------------------------------

    def load(self, text: str) -> Result[FormDocument, MalformedInput]:
        """
        Apply a host-pushed document. The push always wins over local state;
        on malformed input the current document is kept.
        """
        result = decode(text, self.settings)
        if not is_successful(result):
            return Failure(result.failure())
        self._document = apply_patch(self._document, result.unwrap())
        logger.info(
            "document_loaded",
            steps=len(self._document.wizard_steps),
            values=len(self._document.form_values),
            step_index=self._document.current_step_index,
        )
        return Success(self._document)

    def dump(self, indent: int = 0) -> str:
        return encode(self._document, indent=indent)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def add_component(self, component_type: str, parent_id: str | None = None) -> FormComponent | None:
        """Add a component; returns it so the editing surface can select it."""
        document, component = tree.add_component(self._document, self.registry, component_type, parent_id)
        self._commit(document)
        return component

    def update_component(self, component_id: str, patch: Mapping[str, Any]) -> bool:
        return self._commit(tree.update_component(self._document, component_id, patch, self.registry))

    def delete_component(self, component_id: str) -> bool:
        return self._commit(tree.delete_component(self._document, component_id))

    def add_step(self, title: str | None = None) -> WizardStep:
        self._commit(tree.add_step(self._document, title))
        return self._document.wizard_steps[-1]

    def update_step(self, step_id: str, patch: Mapping[str, Any]) -> bool:
        return self._commit(tree.update_step(self._document, step_id, patch))

    def delete_step(self, step_id: str) -> bool:
        return self._commit(tree.delete_step(self._document, step_id))

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def get_value(self, key: str) -> Any:
        return self._document.form_values.get(key)

    def set_value(self, key: str, value: Any) -> None:
        """Write one value-map entry. Keys accrete; nothing is pruned."""
        values = {**self._document.form_values, key: value}
        logger.debug("value_set", key=key)
        self._commit(self._document.model_copy(update={"form_values": values}))

    def toggle_option(self, key: str, option: str, checked: bool | None = None) -> list[Any]:
        """Toggle one option of a multiple-selection value; returns the new list."""
        selected = toggle_option(self.get_value(key), option, checked)
        self.set_value(key, selected)
        return selected

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def set_step_index(self, index: int) -> int:
        """Move to ``index`` clamped into range; returns the resulting index."""
        document = clamp_step_index(self._document.model_copy(update={"current_step_index": index}))
        if document.current_step_index != self._document.current_step_index:
            self._document = document
            logger.debug("step_changed", index=document.current_step_index)
        return self._document.current_step_index
