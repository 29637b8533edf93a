"""GNOME Shell overview over D-Bus"""

import logging

from pydbus import SessionBus

from .constants import SHELL_BUS_NAME, SHELL_OBJECT_PATH, SHELL_INTERFACE, OVERVIEW_ACTIVE_PROPERTY
from .shell import Overview

logger = logging.getLogger(__name__)


class ShellOverview(Overview):
    """Overview surface backed by the org.gnome.Shell OverviewActive property

    ``visible`` turns True as soon as show() is requested and stays True until
    the shell reports the overview inactive, at which point ``hidden`` is
    emitted. The dash "show apps" toggle is not exported over D-Bus, so
    ``show_apps_checked`` is always False.
    """

    def __init__(self, bus=None):
        super().__init__()
        self._bus = bus if bus is not None else SessionBus()
        self._shell = self._bus.get(SHELL_BUS_NAME, SHELL_OBJECT_PATH)
        self._visible = bool(getattr(self._shell, OVERVIEW_ACTIVE_PROPERTY))
        self._subscription = self._shell.PropertiesChanged.connect(self._on_properties_changed)
        logger.info(f"Connected to {SHELL_BUS_NAME} (overview visible: {self._visible})")

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def show_apps_checked(self) -> bool:
        return False

    def show(self):
        setattr(self._shell, OVERVIEW_ACTIVE_PROPERTY, True)
        self._visible = True

    def hide(self):
        setattr(self._shell, OVERVIEW_ACTIVE_PROPERTY, False)

    def _on_properties_changed(self, interface, changed, invalidated):
        """Handle org.freedesktop.DBus.Properties.PropertiesChanged"""
        if interface != SHELL_INTERFACE or OVERVIEW_ACTIVE_PROPERTY not in changed:
            return

        was_visible, self._visible = self._visible, bool(changed[OVERVIEW_ACTIVE_PROPERTY])
        logger.debug(f"OverviewActive changed: {was_visible} -> {self._visible}")
        if was_visible and not self._visible:
            self.emit('hidden')

    def destroy(self):
        if self._subscription is not None:
            self._subscription.disconnect()
            self._subscription = None
