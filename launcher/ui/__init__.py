"""Records exposed to the launcher UI and the services producing them."""

from .dto import InstalledPluginState, PluginDto
from .theme import Theme
from .theme_loader import ThemeEntry, ThemeLoader, ThemeLoadError
from .theme_manager import ThemeManager

__all__ = [
    "InstalledPluginState",
    "PluginDto",
    "Theme",
    "ThemeEntry",
    "ThemeLoader",
    "ThemeLoadError",
    "ThemeManager",
]
