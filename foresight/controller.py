"""Workspace tracking state machine"""

import logging

from .classifier import is_countable_window, is_transient_window
from .reconciler import OverviewReconciler
from .scheduler import close_animation_duration_ms, schedule_after
from .signals import SignalName
from .state import ControllerState

logger = logging.getLogger(__name__)


class ForesightController:
    """Shows the overview on empty workspaces and hides it when windows appear

    The controller is always bound to the workspace manager's active
    workspace: window-added/window-removed are connected on exactly the
    workspace stored in ``state.current_workspace``.
    """

    def __init__(self, workspace_manager, overview, settings, animation_settings):
        """Initialize controller and bind to the active workspace

        Args:
            workspace_manager: Emits workspace-switched, has get_active_workspace()
            overview: Overview surface, emits hidden
            settings: Settings store with get_boolean()
            animation_settings: Provider with an animations_enabled property
        """
        self.workspace_manager = workspace_manager
        self.overview = overview
        self.settings = settings
        self.animation_settings = animation_settings
        self.destroyed = False

        self.state = ControllerState(workspace_manager.get_active_workspace())
        self.reconciler = OverviewReconciler(self.state, overview, settings)

        self._connect_signals()
        logger.info("Foresight controller started")

    # --- Signal management ---

    def _connect_signals(self):
        self._connect_workspace_signals()

        signals = self.state.signals
        signals.connect(SignalName.WORKSPACE_SWITCHED, self.workspace_manager,
                        'workspace-switched', self.on_workspace_switched)
        signals.connect(SignalName.OVERVIEW_HIDDEN, self.overview,
                        'hidden', self.reconciler.on_overview_hidden)

    def _connect_workspace_signals(self):
        signals = self.state.signals
        workspace = self.state.current_workspace
        signals.connect(SignalName.WINDOW_REMOVED, workspace,
                        'window-removed', self.on_window_removed)
        signals.connect(SignalName.WINDOW_ADDED, workspace,
                        'window-added', self.on_window_added)

    def _disconnect_workspace_signals(self):
        self.state.signals.disconnect(SignalName.WINDOW_REMOVED)
        self.state.signals.disconnect(SignalName.WINDOW_ADDED)

    def _check_alive(self):
        if self.destroyed:
            raise RuntimeError("controller destroyed")

    # --- Window handlers ---

    def on_window_added(self, workspace, window):
        self._check_alive()
        if (workspace != self.state.current_workspace or
                not is_countable_window(window, self.settings, was_just_added=True) or
                is_transient_window(window) or
                not self.overview.visible):
            return

        logger.debug(f"Window added: {window.title!r}")
        self.reconciler.hide_if_owned()

    def on_window_removed(self, workspace, window):
        """Defer show_if_empty() until the window's close animation is over"""
        self._check_alive()
        if (workspace != self.state.current_workspace or
                not is_countable_window(window, self.settings) or
                is_transient_window(window)):
            return

        if self.state.pending_close is not None:
            self.state.pending_close.cancel()

        duration = close_animation_duration_ms(window, self.animation_settings)
        logger.debug(f"Window removed: {window.title!r}, checking workspace in {duration}ms")
        self.state.pending_close = schedule_after(duration).then(self._on_close_animation_done)

    def _on_close_animation_done(self):
        self.state.pending_close = None
        self.reconciler.show_if_empty()

    # --- Workspace handlers ---

    def on_workspace_switched(self, *args):
        self._check_alive()
        self._disconnect_workspace_signals()

        self.state.current_workspace = self.workspace_manager.get_active_workspace()
        self._connect_workspace_signals()
        logger.debug("Workspace switched")

        self.reconciler.on_workspace_changed(self.reconciler.count_windows(),
                                             self.overview.show_apps_checked)

    # --- Lifecycle ---

    def destroy(self):
        """Disconnect everything and cancel the pending close"""
        self._check_alive()

        if self.state.pending_close is not None:
            self.state.pending_close.cancel()
            self.state.pending_close = None

        self.state.signals.disconnect_all()
        self.state.current_workspace = None
        self.state.owns_overview_visibility = False
        self.destroyed = True
        logger.info("Foresight controller destroyed")
