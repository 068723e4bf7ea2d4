"""Multi-step navigation."""

from .state import NavigationState, navigation_state
from .controller import WizardController

__all__ = ["NavigationState", "navigation_state", "WizardController"]
