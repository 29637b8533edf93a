"""Decides when the overview is shown or hidden"""

import logging

from .classifier import is_countable_window
from .state import ControllerState

logger = logging.getLogger(__name__)


class OverviewReconciler:
    """Drives the overview from workspace population and the ownership flag"""

    def __init__(self, state: ControllerState, overview, settings):
        """Initialize reconciler

        Args:
            state: Shared controller state
            overview: Overview surface (show/hide/visible/show_apps_checked)
            settings: Settings store used by the window classifier
        """
        self.state = state
        self.overview = overview
        self.settings = settings

    def count_windows(self, workspace=None) -> int:
        """Count countable windows on workspace (default: current workspace)

        Transient windows are counted like any other window.
        """
        if workspace is None:
            workspace = self.state.current_workspace
        return sum(1 for window in workspace.list_windows()
                   if is_countable_window(window, self.settings))

    def show_if_empty(self):
        if self.count_windows() != 0:
            logger.debug("Workspace not empty, overview left alone")
            return

        logger.debug("Workspace empty - showing overview")
        self.overview.show()
        self.state.owns_overview_visibility = True

    def hide_if_owned(self):
        # The flag is cleared by the overview's hidden signal, not here
        if self.state.owns_overview_visibility:
            logger.debug("Hiding overview shown by foresight")
            self.overview.hide()

    def on_workspace_changed(self, population: int, show_apps_checked: bool):
        """React to a new active workspace

        Args:
            population: Countable windows on the new workspace
            show_apps_checked: State of the dash "show apps" toggle
        """
        if population > 0 and not show_apps_checked:
            self.hide_if_owned()
        elif not self.overview.visible:
            self.show_if_empty()

    def on_overview_hidden(self, *args):
        """Handle the overview's hidden signal, whoever hid it"""
        logger.debug("Overview hidden - releasing ownership")
        self.state.owns_overview_visibility = False
