"""Monitor geometry utilities"""

import logging
from typing import Dict, Optional, Tuple

import gi

gi.require_version("Gdk", "3.0")
from gi.repository import Gdk

logger = logging.getLogger(__name__)


def get_primary_monitor() -> Optional[Gdk.Monitor]:
    """Get the primary monitor, falling back to the first one

    Returns:
        Monitor object or None
    """
    try:
        display = Gdk.Display.get_default()
        if not display:
            return None
        monitor = display.get_primary_monitor()
        if monitor is None and display.get_n_monitors() > 0:
            monitor = display.get_monitor(0)
        return monitor
    except Exception as e:
        logger.debug(f"Error getting primary monitor: {e}")
        return None


def get_monitor_geometry(monitor: Gdk.Monitor) -> Dict[str, int]:
    """Get monitor geometry as dictionary

    Args:
        monitor: Monitor object

    Returns:
        Dictionary with x, y, width, height
    """
    geometry = monitor.get_geometry()
    return {
        'x': geometry.x,
        'y': geometry.y,
        'width': geometry.width,
        'height': geometry.height,
    }


def rect_center(x: int, y: int, width: int, height: int) -> Tuple[int, int]:
    return (x + width // 2, y + height // 2)


def point_in_geometry(x: int, y: int, geometry: Dict[str, int]) -> bool:
    """Check if point lies inside geometry (right/bottom edges exclusive)"""
    return (geometry['x'] <= x < geometry['x'] + geometry['width'] and
            geometry['y'] <= y < geometry['y'] + geometry['height'])


def is_rect_on_monitor(x: int, y: int, width: int, height: int,
                       monitor_geometry: Dict[str, int]) -> bool:
    """A rectangle belongs to the monitor containing its center, like mutter does"""
    center_x, center_y = rect_center(x, y, width, height)
    return point_in_geometry(center_x, center_y, monitor_geometry)
