"""Global constants for the launcher host."""

import os
import platform
from pathlib import Path

# Directory paths
LAUNCHER_ROOT = Path(__file__).resolve().parent.parent

# Data directory (supports LAUNCHER_HOME env var, relative paths resolve against LAUNCHER_ROOT)
_launcher_home_env = os.getenv("LAUNCHER_HOME", "")
if _launcher_home_env:
    _launcher_home_path = Path(_launcher_home_env)
    DATA_DIR = _launcher_home_path if _launcher_home_path.is_absolute() else (LAUNCHER_ROOT / _launcher_home_path).resolve()
else:
    DATA_DIR = LAUNCHER_ROOT / "data"

BUNDLED_PLUGINS_DIR = LAUNCHER_ROOT / "plugins" / "bundled"
INSTALLED_PLUGINS_DIR = DATA_DIR / "plugins"
PLUGIN_CONFIG_FILE = DATA_DIR / "plugin_config.json"
PLUGIN_STORE_FILE = Path(os.getenv("PLUGIN_STORE_FILE", str(LAUNCHER_ROOT / "plugins" / "store.json")))

BUNDLED_THEMES_DIR = LAUNCHER_ROOT / "themes" / "bundled"
INSTALLED_THEMES_DIR = DATA_DIR / "themes"
UI_SETTINGS_FILE = DATA_DIR / "ui_settings.json"
DEFAULT_THEME_ID = os.getenv("DEFAULT_THEME_ID", "dark")

# Platform identifier matched against a plugin's supportedOS ("windows", "linux", "darwin")
CURRENT_PLATFORM = platform.system().lower()
