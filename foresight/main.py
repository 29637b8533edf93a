#!/usr/bin/env python3

"""Foresight - Main application"""

import os
os.environ['NO_AT_BRIDGE'] = '1'

import logging
import sys
import signal
import gi

gi.require_version("Gtk", "3.0")
from gi.repository import Gtk

from .classifier import is_countable_window, is_transient_window
from .config import parse_arguments, args_to_config
from .constants import LOG_FORMAT
from .extension import ForesightExtension
from .overview import ShellOverview
from .settings import MutterSettings, AnimationSettings
from .wnck_backend import WnckWorkspaceManager

logger = logging.getLogger(__name__)


class ForesightApp:
    """Hosts the extension lifecycle on the GTK main loop"""

    def __init__(self, config: dict):
        """Initialize application

        Args:
            config: Configuration dictionary
        """
        self.config = config

        # Wnck and Gdk need an initialized display
        Gtk.init()

        self.workspace_manager = WnckWorkspaceManager()
        self.settings = MutterSettings.from_config(config)
        self.animation_settings = AnimationSettings.from_config(config)
        self.overview = None
        self.extension = None

    def _connect_overview(self):
        self.overview = ShellOverview()
        self.extension = ForesightExtension(
            self.workspace_manager,
            self.overview,
            self.settings,
            self.animation_settings
        )

    def list_windows(self):
        """List windows on the active workspace (for --list option)"""
        windows = self.workspace_manager.get_active_workspace().list_windows()

        if not windows:
            print("\nNo windows on the active workspace.")
            return

        print("\nActive Workspace Windows:")
        print("-" * 96)
        print(f"{'Title':<40} {'Class':<16} {'Type':<14} {'Countable':<10} {'Transient':<10}")
        print("-" * 96)

        for window in windows:
            title = (window.title or 'Unknown')[:39]
            wm_class = (window.wm_class or '-')[:15]
            countable = 'yes' if is_countable_window(window, self.settings) else 'no'
            transient = 'yes' if is_transient_window(window) else 'no'
            print(f"{title:<40} {wm_class:<16} {window.window_type.value:<14} {countable:<10} {transient:<10}")

        print("-" * 96)
        print(f"Total: {len(windows)} window(s)\n")

    def run(self):
        """Run the application"""
        try:
            self._connect_overview()
            self.extension.enable()

            logger.info("Entering main loop")
            Gtk.main()

        except KeyboardInterrupt:
            logger.info("Interrupted")
            self.cleanup()
            sys.exit(0)
        except Exception as e:
            logger.error(f"Error in main loop: {e}", exc_info=True)
            raise

    def quit(self):
        self.cleanup()
        Gtk.main_quit()

    def cleanup(self):
        """Clean up resources"""
        logger.info("Cleaning up...")

        if self.extension is not None and self.extension.enabled:
            self.extension.disable()

        if self.overview is not None:
            self.overview.destroy()
            self.overview = None

        self.workspace_manager.destroy()
        logger.info("Cleanup complete")


def main():
    """Main entry point"""
    args = parse_arguments()

    # Configure logging
    if args.debug or args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    config = args_to_config(args)

    # Handle --list
    if config['list']:
        app = ForesightApp(config)
        app.list_windows()
        sys.exit(0)

    logger.info("Starting Foresight")
    if config['animations'] is False:
        logger.info("Close animations ignored")
    if config['primary_only'] is not None:
        logger.info(f"Primary monitor only: {config['primary_only']}")

    try:
        app = ForesightApp(config)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)

    # Handle signals
    def signal_handler(signum, frame):
        logger.info(f"Received signal {signum}")
        app.quit()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        app.run()
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
