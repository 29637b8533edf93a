"""Cancellable delayed actions on the GLib main loop"""

import logging
from typing import Callable, Optional

from gi.repository import GLib

from .constants import DESTROY_WINDOW_ANIMATION_TIME, DIALOG_DESTROY_WINDOW_ANIMATION_TIME
from .shell import WindowType

logger = logging.getLogger(__name__)


class DelayedAction:
    """A single continuation that runs after a delay unless cancelled first"""

    def __init__(self, duration_ms: int):
        """Initialize and arm the timer

        Args:
            duration_ms: Delay in milliseconds (0 runs on the next loop iteration)
        """
        self.duration_ms = duration_ms
        self._callback: Optional[Callable] = None
        self._source_id = GLib.timeout_add(duration_ms, self._on_timeout)

    @property
    def active(self) -> bool:
        """True until the action fires or is cancelled"""
        return self._source_id is not None

    def then(self, callback: Callable) -> 'DelayedAction':
        """Attach the continuation to run when the delay elapses"""
        if self._callback is not None:
            raise RuntimeError("continuation already attached")
        self._callback = callback
        return self

    def cancel(self):
        """Clear the timer; the continuation will never run"""
        if self._source_id is not None:
            GLib.source_remove(self._source_id)
            self._source_id = None
            logger.debug(f"Cancelled delayed action ({self.duration_ms}ms)")
        self._callback = None

    def _on_timeout(self) -> bool:
        """GLib callback

        Returns:
            False (don't repeat)
        """
        self._source_id = None
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()
        return False


def schedule_after(duration_ms: int) -> DelayedAction:
    logger.debug(f"Scheduling delayed action in {duration_ms}ms")
    return DelayedAction(duration_ms)


def close_animation_duration_ms(window, animation_settings) -> int:
    """Get the host shell's close animation time for window

    Args:
        window: Host window object
        animation_settings: Provider with an animations_enabled property

    Returns:
        Duration in milliseconds, 0 when animations are disabled
    """
    if not animation_settings.animations_enabled:
        return 0

    if window.window_type == WindowType.NORMAL:
        return DESTROY_WINDOW_ANIMATION_TIME
    return DIALOG_DESTROY_WINDOW_ANIMATION_TIME
