"""Navigation state derived from a document."""

from dataclasses import dataclass
from typing import Any

from ..models import FormDocument


@dataclass(frozen=True)
class NavigationState:
    """Where the wizard is and which transitions are offered."""

    index: int = 0
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def last_index(self) -> int:
        return max(self.count - 1, 0)

    @property
    def can_go_back(self) -> bool:
        return self.index > 0

    @property
    def can_go_forward(self) -> bool:
        return self.index < self.last_index

    @property
    def can_submit(self) -> bool:
        """Submit is offered on the last step only."""
        return not self.is_empty and self.index == self.last_index

    def clamp(self, index: int) -> int:
        return min(max(index, 0), self.last_index)

    def to_dict(self) -> dict[str, Any]:
        """Export as dictionary."""
        return {
            "index": self.index,
            "count": self.count,
            "can_go_back": self.can_go_back,
            "can_go_forward": self.can_go_forward,
            "can_submit": self.can_submit,
        }


def navigation_state(document: FormDocument) -> NavigationState:
    return NavigationState(index=document.current_step_index, count=len(document.wizard_steps))
