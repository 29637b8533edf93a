"""Workspace manager backed by Wnck"""

import logging
from typing import Dict, List, Optional

import gi

gi.require_version("Gtk", "3.0")
gi.require_version("Wnck", "3.0")
from gi.repository import Wnck

from .geometry import get_primary_monitor, get_monitor_geometry, is_rect_on_monitor
from .sandbox import read_sandboxed_app_id
from .shell import Workspace, WorkspaceManager, WindowType

logger = logging.getLogger(__name__)

_WINDOW_TYPES = {
    Wnck.WindowType.NORMAL: WindowType.NORMAL,
    Wnck.WindowType.DIALOG: WindowType.DIALOG,
    Wnck.WindowType.DESKTOP: WindowType.DESKTOP,
    Wnck.WindowType.DOCK: WindowType.DOCK,
    Wnck.WindowType.TOOLBAR: WindowType.TOOLBAR,
    Wnck.WindowType.MENU: WindowType.MENU,
    Wnck.WindowType.UTILITY: WindowType.UTILITY,
    Wnck.WindowType.SPLASHSCREEN: WindowType.SPLASHSCREEN,
}

_UNSET = object()


class WnckWindow:
    """Host window view of a Wnck.Window"""

    def __init__(self, window):
        self._window = window
        self._app_id = _UNSET

    def __eq__(self, other):
        return isinstance(other, WnckWindow) and other.xid == self.xid

    def __hash__(self):
        return hash(self.xid)

    def __repr__(self):
        return f"WnckWindow({self.xid}, {self.title!r})"

    @property
    def xid(self) -> int:
        return self._window.get_xid()

    @property
    def window_type(self) -> WindowType:
        window_type = _WINDOW_TYPES.get(self._window.get_window_type(), WindowType.OTHER)
        # Wnck has no modal type; a dialog with a parent is the closest match
        if window_type == WindowType.DIALOG and self._window.get_transient() is not None:
            return WindowType.MODAL_DIALOG
        return window_type

    @property
    def title(self) -> Optional[str]:
        return self._window.get_name()

    @property
    def wm_class(self) -> Optional[str]:
        return self._window.get_class_group_name() or None

    def is_hidden(self) -> bool:
        return self._window.is_minimized()

    def is_on_primary_monitor(self) -> bool:
        monitor = get_primary_monitor()
        if monitor is None:
            return True
        x, y, width, height = self._window.get_geometry()
        return is_rect_on_monitor(x, y, width, height, get_monitor_geometry(monitor))

    def sandboxed_app_id(self) -> Optional[str]:
        if self._app_id is _UNSET:
            self._app_id = read_sandboxed_app_id(self._window.get_pid())
        return self._app_id


class WnckWorkspace(Workspace):
    """Workspace view of a Wnck.Workspace"""

    def __init__(self, screen, workspace):
        super().__init__()
        self._screen = screen
        self.workspace = workspace

    def __repr__(self):
        return f"WnckWorkspace({self.workspace.get_number()})"

    def list_windows(self) -> List[WnckWindow]:
        return [WnckWindow(window) for window in self._screen.get_windows() or []
                if window.is_on_workspace(self.workspace)]


class WnckWorkspaceManager(WorkspaceManager):
    """Turns Wnck screen signals into per-workspace window-added/window-removed

    Wnck only reports windows opening and closing on the whole screen, so the
    workspaces each window was last seen on are remembered by XID. A closing
    window is reported on those workspaces even after Wnck has forgotten them.
    """

    def __init__(self, screen=None):
        super().__init__()
        if screen is None:
            Wnck.set_client_type(Wnck.ClientType.PAGER)
            screen = Wnck.Screen.get_default()
        self.screen = screen
        self.screen.force_update()

        self._workspaces: Dict[object, WnckWorkspace] = {}
        self._window_workspaces: Dict[int, List[WnckWorkspace]] = {}
        self._window_handlers: Dict[int, tuple] = {}
        self._active: Optional[WnckWorkspace] = None

        for window in self.screen.get_windows() or []:
            self._track_window(window)

        self._screen_handlers = [
            self.screen.connect("active-workspace-changed", self._on_active_workspace_changed),
            self.screen.connect("window-opened", self._on_window_opened),
            self.screen.connect("window-closed", self._on_window_closed),
            self.screen.connect("workspace-created", self._on_workspace_created),
            self.screen.connect("workspace-destroyed", self._on_workspace_destroyed),
        ]
        logger.info("Wnck workspace manager initialized")

    def _wrap(self, workspace) -> WnckWorkspace:
        wrapped = self._workspaces.get(workspace)
        if wrapped is None:
            wrapped = WnckWorkspace(self.screen, workspace)
            self._workspaces[workspace] = wrapped
        return wrapped

    def _workspaces_of(self, window) -> List[WnckWorkspace]:
        return [self._wrap(workspace) for workspace in self.screen.get_workspaces() or []
                if window.is_on_workspace(workspace)]

    def get_active_workspace(self) -> WnckWorkspace:
        workspace = self.screen.get_active_workspace()
        if workspace is None:
            # Only happens while the window manager is (re)starting
            self.screen.force_update()
            workspace = self.screen.get_active_workspace()
        if workspace is None:
            if self._active is None:
                raise RuntimeError("Wnck reports no active workspace")
            logger.warning("No active workspace, keeping the previous one")
            return self._active
        self._active = self._wrap(workspace)
        return self._active

    def list_all_windows(self) -> List[WnckWindow]:
        return [WnckWindow(window) for window in self.screen.get_windows() or []]

    # --- Wnck signal handlers ---

    def _track_window(self, window):
        xid = window.get_xid()
        self._window_workspaces[xid] = self._workspaces_of(window)
        handler_id = window.connect("workspace-changed", self._on_window_workspace_changed)
        self._window_handlers[xid] = (window, handler_id)

    def _on_active_workspace_changed(self, screen, previous_workspace):
        if screen.get_active_workspace() is None:
            logger.debug("Active workspace changed to none, ignoring")
            return
        self.emit('workspace-switched')

    def _on_window_opened(self, screen, window):
        self._track_window(window)
        wrapped = WnckWindow(window)
        for workspace in self._window_workspaces[window.get_xid()]:
            workspace.emit('window-added', wrapped)

    def _on_window_closed(self, screen, window):
        xid = window.get_xid()
        workspaces = self._window_workspaces.pop(xid, [])
        self._window_handlers.pop(xid, None)

        wrapped = WnckWindow(window)
        for workspace in workspaces:
            workspace.emit('window-removed', wrapped)

    def _on_window_workspace_changed(self, window):
        xid = window.get_xid()
        old = self._window_workspaces.get(xid, [])
        new = self._workspaces_of(window)
        self._window_workspaces[xid] = new

        wrapped = WnckWindow(window)
        for workspace in old:
            if workspace not in new:
                workspace.emit('window-removed', wrapped)
        for workspace in new:
            if workspace not in old:
                workspace.emit('window-added', wrapped)

    def _on_workspace_created(self, screen, workspace):
        # Pinned windows do not emit workspace-changed for new workspaces
        for xid, (window, handler_id) in self._window_handlers.items():
            self._window_workspaces[xid] = self._workspaces_of(window)

    def _on_workspace_destroyed(self, screen, workspace):
        wrapped = self._workspaces.pop(workspace, None)
        if wrapped is None:
            return
        if wrapped is self._active:
            self._active = None
        for xid, workspaces in self._window_workspaces.items():
            if wrapped in workspaces:
                workspaces.remove(wrapped)

    def destroy(self):
        for handler_id in self._screen_handlers:
            self.screen.disconnect(handler_id)
        self._screen_handlers = []

        for window, handler_id in self._window_handlers.values():
            try:
                window.disconnect(handler_id)
            except Exception as e:
                logger.debug(f"Error disconnecting window handler: {e}")
        self._window_handlers.clear()
        self._window_workspaces.clear()
        self._workspaces.clear()
        self._active = None
