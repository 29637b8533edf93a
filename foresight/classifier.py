"""Window classification: which windows count as real, which are splash screens"""

import re
from typing import NamedTuple, Optional

from .constants import WORKSPACES_ONLY_ON_PRIMARY_KEY
from .shell import WindowType

COUNTABLE_WINDOW_TYPES = frozenset({
    WindowType.NORMAL,
    WindowType.DIALOG,
    WindowType.MODAL_DIALOG,
})


class TransientWindowRule(NamedTuple):
    """Match rule for a short-lived helper window of a specific application"""
    title: str
    wm_class: Optional[str]
    sandboxed_app_id: str


# LibreOffice puts its version in the splash title, so it is matched by pattern
LIBREOFFICE_TITLE = re.compile(r'LibreOffice [0-9]+\.[0-9]+')
LIBREOFFICE_WM_CLASS = 'soffice'
LIBREOFFICE_APP_ID = 'org.libreoffice.LibreOffice'

TRANSIENT_WINDOW_RULES = (
    TransientWindowRule('Progress Information', 'DBeaver', 'io.dbeaver.DBeaver.Community'),
    TransientWindowRule('DBeaver', 'java', 'io.dbeaver.DBeaver.Community'),
    TransientWindowRule('Steam', None, 'com.valvesoftware.Steam'),
    TransientWindowRule('Sign in to Steam', 'steam', 'com.valvesoftware.Steam'),
    TransientWindowRule('Launching...', 'steam', 'com.valvesoftware.Steam'),
    TransientWindowRule('Discord Updater', 'discord', 'com.discordapp.Discord'),
)


def is_countable_window(window, settings, was_just_added: bool = False) -> bool:
    """Check if window counts toward "workspace has real windows"

    Args:
        window: Host window object
        settings: Settings store with get_boolean()
        was_just_added: True when called for a window-added event

    Returns:
        True if the window is a real, visible window on a tracked monitor
    """
    if window.window_type not in COUNTABLE_WINDOW_TYPES:
        return False

    if (not window.is_on_primary_monitor() and
            settings.get_boolean(WORKSPACES_ONLY_ON_PRIMARY_KEY)):
        return False

    # Windows opened via a keyboard shortcut report hidden while being added
    if not was_just_added and window.is_hidden():
        return False

    return True


def matches_rule(window, rule: TransientWindowRule) -> bool:
    app_id = window.sandboxed_app_id()
    return (window.title == rule.title and
            window.wm_class == rule.wm_class and
            (app_id is None or app_id == rule.sandboxed_app_id))


def is_libreoffice_splash(window) -> bool:
    app_id = window.sandboxed_app_id()
    return (window.title is not None and
            LIBREOFFICE_TITLE.fullmatch(window.title) is not None and
            window.wm_class == LIBREOFFICE_WM_CLASS and
            (app_id is None or app_id == LIBREOFFICE_APP_ID))


def is_transient_window(window) -> bool:
    """Check if window is a known splash/progress window that must be ignored"""
    if is_libreoffice_splash(window):
        return True

    return any(matches_rule(window, rule) for rule in TRANSIENT_WINDOW_RULES)
