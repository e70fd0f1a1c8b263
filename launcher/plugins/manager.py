"""Plugin manager - top-level orchestrator for the plugin system."""

import logging
import shutil
from pathlib import Path
from typing import Dict, List, Optional

from launcher.plugins.config import PluginSettingStore
from launcher.plugins.discovery import PluginDiscovery
from launcher.plugins.registry import PluginInstance, PluginRegistry
from launcher.plugins.setting import default_settings
from launcher.plugins.store import PluginStore
from launcher.plugins.system import SYSTEM_PLUGINS
from launcher.ui.dto import InstalledPluginState, PluginDto

logger = logging.getLogger(__name__)


class PluginManager:
    """Top-level plugin system orchestrator.

    Coordinates discovery, the store catalog and persisted settings, and
    builds the PluginDto snapshots handed to the UI. A fresh snapshot is
    built on every query.
    """

    def __init__(
        self,
        bundled_dir: Path,
        installed_dir: Path,
        config_file: Path,
        store_file: Optional[Path] = None,
        extra_paths: Optional[List[Path]] = None,
        platform: Optional[str] = None,
    ):
        self.bundled_dir = bundled_dir
        self.installed_dir = installed_dir
        self.platform = platform

        self.registry = PluginRegistry()
        self.config_service = PluginSettingStore(config_file)
        self.store = PluginStore(store_file)

        # Build search paths: (path, source_label)
        search_paths = [
            (bundled_dir, "bundled"),
            (installed_dir, "installed"),
        ]
        # Add extra paths from PLUGIN_PATHS env var
        if extra_paths:
            for p in extra_paths:
                search_paths.append((p, "external"))

        self.discovery = PluginDiscovery(search_paths)

    def load_all(self) -> None:
        """Register system plugins, then every discovered plugin."""
        self.registry.clear()
        self.store.reload()

        for metadata in SYSTEM_PLUGINS:
            self.registry.register(PluginInstance(manifest=metadata, path=None, source="system"))

        for instance in self.discovery.discover_all():
            if self.registry.has(instance.id):
                logger.error(f"Plugin '{instance.id}' at {instance.path} clashes with a system plugin, skipping")
                continue
            if self.platform and not instance.manifest.supports(self.platform):
                logger.info(f"Plugin '{instance.id}' does not support {self.platform}, skipping")
                continue
            self.registry.register(instance)

        logger.info(
            f"Plugin system initialized, {self.registry.count()} plugin(s) installed, "
            f"{len(self.store.list_entries())} in store catalog"
        )

    def build_dto(self, instance: PluginInstance) -> PluginDto:
        """Build the UI snapshot of an installed plugin."""
        metadata = instance.manifest
        icon = metadata.icon.resolve(instance.path) if instance.path else metadata.icon

        settings = default_settings(metadata.setting_definitions)
        settings.update(self.config_service.get_settings(instance.id))

        installed = InstalledPluginState(
            setting_definitions=metadata.setting_definitions,
            setting=settings,
            is_disable=self.config_service.is_disabled(instance.id),
        )
        return PluginDto.build(
            metadata,
            is_system=instance.is_system,
            installed=installed,
            trigger_keywords=self._trigger_keywords(instance),
            icon=icon,
        )

    def list_plugins(self, installed: Optional[bool] = None) -> List[PluginDto]:
        """List installed plugins followed by store plugins not installed yet.

        Args:
            installed: Only installed (True) or only not installed (False) plugins
        """
        plugins = []
        if installed is not False:
            plugins.extend(self.build_dto(p) for p in self.registry.get_all())
        if installed is not True:
            plugins.extend(
                PluginDto.build(entry)
                for entry in self.store.list_entries()
                if not self.registry.has(entry.id)
            )
        return plugins

    def get_plugin(self, plugin_id: str) -> Optional[PluginDto]:
        """Get a snapshot of an installed plugin, or of a store entry."""
        instance = self.registry.get(plugin_id)
        if instance:
            return self.build_dto(instance)
        entry = self.store.get(plugin_id)
        if entry:
            return PluginDto.build(entry)
        return None

    def enable_plugin(self, plugin_id: str) -> Optional[PluginDto]:
        return self._set_disabled(plugin_id, False)

    def disable_plugin(self, plugin_id: str) -> Optional[PluginDto]:
        return self._set_disabled(plugin_id, True)

    def update_plugin_settings(self, plugin_id: str, values: Dict[str, str]) -> Optional[PluginDto]:
        """Merge new setting values for an installed plugin."""
        instance = self._get_installed(plugin_id)
        if not instance:
            return None

        self.config_service.update_settings(plugin_id, values)
        return self.build_dto(instance)

    def add_trigger_keyword(self, plugin_id: str, keyword: str) -> Optional[PluginDto]:
        """Append a trigger keyword."""
        instance = self._get_installed(plugin_id)
        if not instance:
            return None

        keywords = self._trigger_keywords(instance)
        keywords.append(keyword)
        self.config_service.set_trigger_keywords(plugin_id, keywords)
        return self.build_dto(instance)

    def update_trigger_keyword(self, plugin_id: str, old: str, new: str) -> Optional[PluginDto]:
        """Replace a trigger keyword in place, keeping its position."""
        instance = self._get_installed(plugin_id)
        if not instance:
            return None

        keywords = self._trigger_keywords(instance)
        if old not in keywords:
            logger.error(f"Plugin '{plugin_id}' has no trigger keyword '{old}'")
            return None

        keywords[keywords.index(old)] = new
        self.config_service.set_trigger_keywords(plugin_id, keywords)
        return self.build_dto(instance)

    def delete_trigger_keyword(self, plugin_id: str, keyword: str) -> Optional[PluginDto]:
        """Remove a trigger keyword."""
        instance = self._get_installed(plugin_id)
        if not instance:
            return None

        keywords = self._trigger_keywords(instance)
        if keyword not in keywords:
            logger.error(f"Plugin '{plugin_id}' has no trigger keyword '{keyword}'")
            return None

        keywords.remove(keyword)
        self.config_service.set_trigger_keywords(plugin_id, keywords)
        return self.build_dto(instance)

    def install_plugin(self, source_path: Path) -> Optional[PluginDto]:
        """Install a plugin from a local path.

        Copies the plugin directory to installed_dir.

        Args:
            source_path: Path to the plugin directory

        Returns:
            PluginDto if successful, None otherwise
        """
        # Discover the plugin first
        instance = self.discovery.discover_single(source_path, "installed")
        if not instance:
            logger.error(f"Invalid plugin at {source_path}")
            return None

        # Check for conflicts
        if self.registry.has(instance.id):
            logger.error(f"Plugin '{instance.id}' already exists")
            return None

        # Copy to installed directory
        dest = self.installed_dir / instance.id
        if not self._inside_installed_dir(dest):
            logger.error(f"Plugin id '{instance.id}' points outside {self.installed_dir}")
            return None
        if dest.exists():
            logger.error(f"Plugin directory already exists: {dest}")
            return None

        self.installed_dir.mkdir(parents=True, exist_ok=True)
        shutil.copytree(source_path, dest)
        logger.info(f"Installed plugin '{instance.id}' to {dest}")

        # Re-discover from installed location
        instance = self.discovery.discover_single(dest, "installed")
        if not instance:
            return None

        self.registry.register(instance)
        return self.build_dto(instance)

    def uninstall_plugin(self, plugin_id: str) -> bool:
        """Uninstall a plugin installed by the user and forget its settings."""
        instance = self._get_installed(plugin_id)
        if not instance:
            return False
        if not instance.removable:
            logger.error(f"Plugin '{plugin_id}' is {instance.source} and cannot be uninstalled")
            return False
        if not self._inside_installed_dir(instance.path):
            logger.error(f"Plugin '{plugin_id}' at {instance.path} is outside {self.installed_dir}")
            return False

        shutil.rmtree(instance.path, ignore_errors=True)
        self.registry.remove(plugin_id)
        self.config_service.remove(plugin_id)
        logger.info(f"Uninstalled plugin: {plugin_id}")
        return True

    def _inside_installed_dir(self, path: Path) -> bool:
        return path.resolve().parent == self.installed_dir.resolve()

    def _get_installed(self, plugin_id: str) -> Optional[PluginInstance]:
        instance = self.registry.get(plugin_id)
        if not instance:
            logger.error(f"Plugin not installed: {plugin_id}")
        return instance

    def _set_disabled(self, plugin_id: str, disabled: bool) -> Optional[PluginDto]:
        instance = self._get_installed(plugin_id)
        if not instance:
            return None

        self.config_service.set_disabled(plugin_id, disabled)
        return self.build_dto(instance)

    def _trigger_keywords(self, instance: PluginInstance) -> List[str]:
        keywords = self.config_service.get_trigger_keywords(instance.id)
        if keywords is None:
            keywords = list(instance.manifest.trigger_keywords)
        return keywords
