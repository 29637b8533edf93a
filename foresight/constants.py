"""Constants and default values"""

# Mirrors gnome-shell js/ui/windowManager.js so the overview never opens mid-animation
DESTROY_WINDOW_ANIMATION_TIME = 150         # milliseconds, NORMAL windows
DIALOG_DESTROY_WINDOW_ANIMATION_TIME = 100  # milliseconds, dialogs

# GSettings
MUTTER_SCHEMA = 'org.gnome.mutter'
WORKSPACES_ONLY_ON_PRIMARY_KEY = 'workspaces-only-on-primary'
INTERFACE_SCHEMA = 'org.gnome.desktop.interface'
ENABLE_ANIMATIONS_KEY = 'enable-animations'

# GNOME Shell D-Bus
SHELL_BUS_NAME = 'org.gnome.Shell'
SHELL_OBJECT_PATH = '/org/gnome/Shell'
SHELL_INTERFACE = 'org.gnome.Shell'
OVERVIEW_ACTIVE_PROPERTY = 'OverviewActive'

# Flatpak sandbox metadata, relative to /proc/<pid>/root
FLATPAK_INFO_PATH = '.flatpak-info'
FLATPAK_APPLICATION_GROUP = 'Application'
FLATPAK_NAME_KEY = 'name'

# Default configuration
DEFAULT_CONFIG = {
    'debug': False,
    'verbose': False,
    'list': False,
    'animations': None,     # None = follow GSettings
    'primary_only': None,   # None = follow GSettings
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
