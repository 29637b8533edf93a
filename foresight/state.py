"""Per-controller mutable state"""

from typing import Optional

from .scheduler import DelayedAction
from .signals import SignalRegistry


class ControllerState:
    """State owned by one controller for one enable/disable cycle

    owns_overview_visibility is True only between a controller-initiated
    show() and the next ``hidden`` event from the overview.
    """

    def __init__(self, current_workspace):
        self.owns_overview_visibility = False
        self.current_workspace = current_workspace
        self.pending_close: Optional[DelayedAction] = None
        self.signals = SignalRegistry()
