"""Host shell contracts: window types and signal-bearing workspace/overview objects"""

from enum import Enum

from gi.repository import GObject


class WindowType(Enum):
    """Window types the host shell reports (subset of Meta.WindowType)"""
    NORMAL = "normal"
    DIALOG = "dialog"
    MODAL_DIALOG = "modal_dialog"
    DESKTOP = "desktop"
    DOCK = "dock"
    TOOLBAR = "toolbar"
    MENU = "menu"
    UTILITY = "utility"
    SPLASHSCREEN = "splashscreen"
    OTHER = "other"


class Workspace(GObject.Object):
    """A workspace that reports windows entering and leaving it.

    Handlers receive ``(workspace, window)``. Windows are plain Python objects
    exposing ``window_type``, ``title``, ``wm_class``, ``is_hidden()``,
    ``is_on_primary_monitor()`` and ``sandboxed_app_id()``.
    """

    __gsignals__ = {
        'window-added': (GObject.SignalFlags.RUN_FIRST, None, (object,)),
        'window-removed': (GObject.SignalFlags.RUN_FIRST, None, (object,)),
    }

    def list_windows(self) -> list:
        raise NotImplementedError


class WorkspaceManager(GObject.Object):
    """Source of the active workspace; emits ``workspace-switched``"""

    __gsignals__ = {
        'workspace-switched': (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    def get_active_workspace(self) -> Workspace:
        raise NotImplementedError


class Overview(GObject.Object):
    """The shell overview surface; emits ``hidden`` once it is fully hidden"""

    __gsignals__ = {
        'hidden': (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    @property
    def visible(self) -> bool:
        raise NotImplementedError

    @property
    def show_apps_checked(self) -> bool:
        """Whether the dash "show apps" toggle is checked"""
        raise NotImplementedError

    def show(self):
        raise NotImplementedError

    def hide(self):
        raise NotImplementedError
