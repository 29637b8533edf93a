"""In-memory host shell, settings and GLib timer doubles for the unit tests"""

from foresight.constants import WORKSPACES_ONLY_ON_PRIMARY_KEY
from foresight.shell import Overview, Workspace, WorkspaceManager, WindowType


class FakeWindow:
    def __init__(self, title='Terminal', wm_class='gnome-terminal',
                 window_type=WindowType.NORMAL, hidden=False, primary=True, app_id=None):
        self.title = title
        self.wm_class = wm_class
        self.window_type = window_type
        self.hidden = hidden
        self.primary = primary
        self.app_id = app_id

    def is_hidden(self):
        return self.hidden

    def is_on_primary_monitor(self):
        return self.primary

    def sandboxed_app_id(self):
        return self.app_id


class FakeWorkspace(Workspace):
    def __init__(self, name, windows=()):
        super().__init__()
        self.name = name
        self.windows = list(windows)

    def __repr__(self):
        return f"FakeWorkspace({self.name!r})"

    def list_windows(self):
        return list(self.windows)

    def add_window(self, window):
        self.windows.append(window)
        self.emit('window-added', window)

    def remove_window(self, window):
        self.windows.remove(window)
        self.emit('window-removed', window)


class FakeWorkspaceManager(WorkspaceManager):
    def __init__(self, *workspaces):
        super().__init__()
        self.workspaces = list(workspaces)
        self.active = self.workspaces[0]

    def get_active_workspace(self):
        return self.active

    def switch_to(self, workspace):
        self.active = workspace
        self.emit('workspace-switched')


class FakeOverview(Overview):
    """hide() only starts hiding; finish_hide() completes it and emits hidden"""

    def __init__(self, visible=False, show_apps_checked=False):
        super().__init__()
        self._visible = visible
        self._show_apps_checked = show_apps_checked
        self.show_calls = 0
        self.hide_calls = 0

    @property
    def visible(self):
        return self._visible

    @property
    def show_apps_checked(self):
        return self._show_apps_checked

    def set_show_apps_checked(self, checked):
        self._show_apps_checked = checked

    def show(self):
        self.show_calls += 1
        self._visible = True

    def hide(self):
        self.hide_calls += 1

    def finish_hide(self):
        self._visible = False
        self.emit('hidden')

    def user_show(self):
        self._visible = True


class FakeSettings:
    def __init__(self, primary_only=False):
        self.values = {WORKSPACES_ONLY_ON_PRIMARY_KEY: primary_only}

    def get_boolean(self, key):
        return self.values[key]


class FakeAnimationSettings:
    def __init__(self, enabled=True):
        self.animations_enabled = enabled


class FakeGLib:
    """Stands in for GLib.timeout_add/source_remove with a manual clock"""

    def __init__(self):
        self.now = 0
        self._next_id = 1
        self._sources = {}

    @property
    def pending(self):
        return len(self._sources)

    def timeout_add(self, interval, callback, *args):
        source_id = self._next_id
        self._next_id += 1
        self._sources[source_id] = (self.now + interval, callback, args)
        return source_id

    def source_remove(self, source_id):
        if source_id not in self._sources:
            raise ValueError(f"Source ID {source_id} was not found")
        del self._sources[source_id]
        return True

    def advance(self, ms):
        target = self.now + ms
        while True:
            due = sorted((due_at, source_id) for source_id, (due_at, _, _) in self._sources.items()
                         if due_at <= target)
            if not due:
                break
            due_at, source_id = due[0]
            self.now = due_at
            _, callback, args = self._sources.pop(source_id)
            callback(*args)
        self.now = target
