"""Dependency injection container for services."""

import logging
import os
from pathlib import Path

from launcher.plugins.manager import PluginManager
from launcher.ui.theme_manager import ThemeManager

logger = logging.getLogger(__name__)

# ============================================================================
# Global service instances (Singleton pattern, but exposed via functions for easier testing/mocking)
# ============================================================================

_plugin_manager_instance = None
_theme_manager_instance = None


def get_plugin_manager() -> PluginManager:
    """Get plugin manager (singleton)."""
    global _plugin_manager_instance
    if _plugin_manager_instance is None:
        from launcher.constants import (
            BUNDLED_PLUGINS_DIR,
            CURRENT_PLATFORM,
            INSTALLED_PLUGINS_DIR,
            PLUGIN_CONFIG_FILE,
            PLUGIN_STORE_FILE,
        )

        # Parse extra plugin paths from environment
        extra_paths = None
        plugin_paths_env = os.getenv("PLUGIN_PATHS", "")
        if plugin_paths_env:
            extra_paths = [Path(p.strip()) for p in plugin_paths_env.split(":") if p.strip()]

        _plugin_manager_instance = PluginManager(
            bundled_dir=BUNDLED_PLUGINS_DIR,
            installed_dir=INSTALLED_PLUGINS_DIR,
            config_file=PLUGIN_CONFIG_FILE,
            store_file=PLUGIN_STORE_FILE,
            extra_paths=extra_paths,
            platform=CURRENT_PLATFORM,
        )
        _plugin_manager_instance.load_all()
        logger.info("Created PluginManager instance")
    return _plugin_manager_instance


def get_theme_manager() -> ThemeManager:
    """Get theme manager (singleton)."""
    global _theme_manager_instance
    if _theme_manager_instance is None:
        from launcher.constants import (
            BUNDLED_THEMES_DIR,
            DEFAULT_THEME_ID,
            INSTALLED_THEMES_DIR,
            UI_SETTINGS_FILE,
        )

        _theme_manager_instance = ThemeManager(
            bundled_dir=BUNDLED_THEMES_DIR,
            installed_dir=INSTALLED_THEMES_DIR,
            settings_file=UI_SETTINGS_FILE,
            default_theme_id=DEFAULT_THEME_ID,
        )
        _theme_manager_instance.load_all()
        logger.info("Created ThemeManager instance")
    return _theme_manager_instance


# Test utility function (for unit testing - resets all singletons)
def reset_services():
    """Reset all service instances (only for testing)."""
    global _plugin_manager_instance, _theme_manager_instance

    _plugin_manager_instance = None
    _theme_manager_instance = None
    logger.info("Reset all service instances")
