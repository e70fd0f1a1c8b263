"""Plugin registry - tracks all installed plugins."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from launcher.plugins.manifest import PluginMetadata

logger = logging.getLogger(__name__)


@dataclass
class PluginInstance:
    """An installed plugin: its manifest and where it was found."""

    manifest: PluginMetadata
    path: Optional[Path]  # None for system plugins
    source: str  # "system" | "bundled" | "installed" | "external"

    @property
    def id(self) -> str:
        return self.manifest.id

    @property
    def is_system(self) -> bool:
        return self.source == "system"

    @property
    def removable(self) -> bool:
        """Only plugins the user installed can be uninstalled."""
        return self.source == "installed"


class PluginRegistry:
    """Central registry for all installed plugins."""

    def __init__(self):
        self._plugins: Dict[str, PluginInstance] = {}

    def register(self, instance: PluginInstance) -> None:
        """Register a plugin instance."""
        if instance.id in self._plugins:
            logger.warning(f"Plugin '{instance.id}' already registered, overwriting")
        self._plugins[instance.id] = instance
        logger.info(f"Registered plugin: {instance.id} ({instance.source})")

    def get(self, plugin_id: str) -> Optional[PluginInstance]:
        """Get a plugin by ID."""
        return self._plugins.get(plugin_id)

    def get_all(self) -> list[PluginInstance]:
        """Get all registered plugins, in registration order."""
        return list(self._plugins.values())

    def remove(self, plugin_id: str) -> Optional[PluginInstance]:
        """Remove a plugin from the registry."""
        return self._plugins.pop(plugin_id, None)

    def has(self, plugin_id: str) -> bool:
        """Check if a plugin is registered."""
        return plugin_id in self._plugins

    def count(self) -> int:
        """Get total number of registered plugins."""
        return len(self._plugins)

    def clear(self) -> None:
        self._plugins.clear()
