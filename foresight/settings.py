"""GSettings-backed settings store and animation settings"""

import logging
from typing import Dict, Optional

from gi.repository import Gio

from .constants import (
    MUTTER_SCHEMA,
    WORKSPACES_ONLY_ON_PRIMARY_KEY,
    INTERFACE_SCHEMA,
    ENABLE_ANIMATIONS_KEY,
)

logger = logging.getLogger(__name__)


def load_settings(schema_id: str) -> Optional[Gio.Settings]:
    """Create Gio.Settings for schema_id if the schema is installed

    Gio.Settings.new() aborts the process on a missing schema, so look it up first.
    """
    source = Gio.SettingsSchemaSource.get_default()
    if source is None or source.lookup(schema_id, True) is None:
        logger.warning(f"GSettings schema {schema_id} not installed")
        return None
    return Gio.Settings.new(schema_id)


class MutterSettings:
    """Boolean keys of org.gnome.mutter, with optional overrides"""

    def __init__(self, overrides: Optional[Dict[str, bool]] = None, settings=None):
        self._overrides = dict(overrides or {})
        self._settings = settings if settings is not None else load_settings(MUTTER_SCHEMA)

    @classmethod
    def from_config(cls, config: Dict) -> 'MutterSettings':
        overrides = {}
        if config.get('primary_only') is not None:
            overrides[WORKSPACES_ONLY_ON_PRIMARY_KEY] = config['primary_only']
        return cls(overrides)

    def get_boolean(self, key: str) -> bool:
        if key in self._overrides:
            return self._overrides[key]
        if self._settings is None:
            return False
        return self._settings.get_boolean(key)


class AnimationSettings:
    """Global animations-enabled flag (org.gnome.desktop.interface)"""

    def __init__(self, override: Optional[bool] = None, settings=None):
        self._override = override
        self._settings = settings if settings is not None else load_settings(INTERFACE_SCHEMA)

    @classmethod
    def from_config(cls, config: Dict) -> 'AnimationSettings':
        return cls(config.get('animations'))

    @property
    def animations_enabled(self) -> bool:
        if self._override is not None:
            return self._override
        if self._settings is None:
            return True
        return self._settings.get_boolean(ENABLE_ANIMATIONS_KEY)
