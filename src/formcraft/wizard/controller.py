"""Wizard Controller - step transitions and submit gating."""

from typing import TYPE_CHECKING, Any

from ..core import get_logger
from .state import NavigationState, navigation_state

if TYPE_CHECKING:
    from ..store import SchemaStore

logger = get_logger(__name__)


class WizardController:
    """
    Moves the current step index of a SchemaStore.

    Steps are never gated on field completeness; ``jump_to`` is always
    permitted. Only the final step offers submit, and submit hands out the
    whole value map, not just the current step's fields.
    """

    def __init__(self, store: "SchemaStore") -> None:
        self.store = store

    @property
    def state(self) -> NavigationState:
        return navigation_state(self.store.document)

    @property
    def index(self) -> int:
        return self.store.current_step_index

    def next(self) -> int:
        """Advance one step; a no-op on the last step."""
        return self._move(self.index + 1)

    def previous(self) -> int:
        """Go back one step; a no-op on the first step."""
        return self._move(self.index - 1)

    def jump_to(self, index: int) -> int:
        """Go to ``index`` clamped into ``[0, last]``."""
        return self._move(index)

    def _move(self, index: int) -> int:
        state = self.state
        if state.is_empty:
            return 0
        return self.store.set_step_index(state.clamp(index))

    def submit(self) -> dict[str, Any] | None:
        """
        Collect the submission.

        Returns:
            Copy of the entire value map on the last step, None elsewhere
        """
        state = self.state
        if not state.can_submit:
            logger.debug("submit_unavailable", index=state.index, count=state.count)
            return None
        values = dict(self.store.document.form_values)
        logger.info("form_submitted", fields=len(values))
        return values
