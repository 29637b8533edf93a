"""Signal subscription bookkeeping"""

import logging
from enum import Enum
from typing import Callable, Dict, NamedTuple

logger = logging.getLogger(__name__)


class SignalName(Enum):
    """Logical names of the subscriptions the controller holds"""
    WORKSPACE_SWITCHED = "workspace-switched"
    OVERVIEW_HIDDEN = "overview-hidden"
    WINDOW_ADDED = "window-added"
    WINDOW_REMOVED = "window-removed"


class Subscription(NamedTuple):
    emitter: object
    handler_id: int


class SignalRegistry:
    """Tracks connected handlers so each one is disconnected exactly once"""

    def __init__(self):
        self._subscriptions: Dict[SignalName, Subscription] = {}

    def __contains__(self, name: SignalName) -> bool:
        return name in self._subscriptions

    def __len__(self) -> int:
        return len(self._subscriptions)

    def connect(self, name: SignalName, emitter, signal: str, callback: Callable) -> int:
        """Connect callback to a signal on emitter and remember it under name

        Args:
            name: Logical subscription name
            emitter: Object with GObject-style connect()/disconnect()
            signal: Detailed signal name on the emitter
            callback: Signal handler

        Returns:
            Handler id returned by the emitter
        """
        if name in self._subscriptions:
            # A live handler would otherwise leak
            self.disconnect(name)

        handler_id = emitter.connect(signal, callback)
        self._subscriptions[name] = Subscription(emitter, handler_id)
        logger.debug(f"Connected {name.value} (handler {handler_id})")
        return handler_id

    def disconnect(self, name: SignalName) -> bool:
        """Disconnect the handler stored under name

        Returns:
            True if a handler was disconnected, False if none was bound
        """
        subscription = self._subscriptions.pop(name, None)
        if subscription is None:
            logger.debug(f"No {name.value} subscription to disconnect")
            return False

        subscription.emitter.disconnect(subscription.handler_id)
        logger.debug(f"Disconnected {name.value} (handler {subscription.handler_id})")
        return True

    def disconnect_all(self):
        for name in list(self._subscriptions):
            self.disconnect(name)
