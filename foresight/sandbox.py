"""Sandboxed application id lookup"""

import logging
import os
from typing import Optional

from gi.repository import GLib

from .constants import FLATPAK_INFO_PATH, FLATPAK_APPLICATION_GROUP, FLATPAK_NAME_KEY

logger = logging.getLogger(__name__)


def flatpak_info_path(pid: int, proc_root: str = '/proc') -> str:
    return os.path.join(proc_root, str(pid), 'root', FLATPAK_INFO_PATH)


def read_sandboxed_app_id(pid: Optional[int], proc_root: str = '/proc') -> Optional[str]:
    """Read the Flatpak application id of a process

    Args:
        pid: Process id (0 or None when the window has no known pid)
        proc_root: procfs mount point

    Returns:
        Application id, or None if the process is not sandboxed or unreadable
    """
    if not pid:
        return None

    path = flatpak_info_path(pid, proc_root)
    if not os.path.exists(path):
        return None

    key_file = GLib.KeyFile()
    try:
        key_file.load_from_file(path, GLib.KeyFileFlags.NONE)
        return key_file.get_string(FLATPAK_APPLICATION_GROUP, FLATPAK_NAME_KEY)
    except GLib.Error as e:
        logger.debug(f"Could not read {path}: {e}")
        return None
