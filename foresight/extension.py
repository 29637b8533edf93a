"""Enable/disable lifecycle"""

import logging
from typing import Optional

from .controller import ForesightController

logger = logging.getLogger(__name__)


class ForesightExtension:
    """Creates a controller on enable() and destroys it on disable()"""

    def __init__(self, workspace_manager, overview, settings, animation_settings):
        self.workspace_manager = workspace_manager
        self.overview = overview
        self.settings = settings
        self.animation_settings = animation_settings
        self.controller: Optional[ForesightController] = None

    @property
    def enabled(self) -> bool:
        return self.controller is not None

    def enable(self):
        if self.controller is not None:
            logger.warning("Foresight already enabled")
            return

        self.controller = ForesightController(
            self.workspace_manager,
            self.overview,
            self.settings,
            self.animation_settings
        )

    def disable(self):
        if self.controller is None:
            logger.warning("Foresight not enabled - nothing to disable")
            return

        self.controller.destroy()
        self.controller = None
