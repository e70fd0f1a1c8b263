"""Plugin settings store - manages the persisted per-plugin state."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class PluginSettingStore:
    """Manages the plugin_config.json file.

    Config format:
    {
        "disabled": ["clipboard"],
        "plugins": {
            "clipboard": {
                "settings": {"max_history": "50"},
                "trigger_keywords": ["cb", "clip"]
            }
        }
    }

    ``trigger_keywords`` is only present once the user edited them.
    """

    def __init__(self, config_file: Path):
        self.config_file = config_file
        self._config: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        """Load config from file, using defaults if missing or unreadable."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    config = json.load(f)
                if isinstance(config, dict):
                    return config
                logger.error(f"Plugin config {self.config_file} is not a JSON object, ignoring")
            except (json.JSONDecodeError, IOError) as e:
                logger.error(f"Error loading plugin config: {e}")

        return {"disabled": [], "plugins": {}}

    def _save(self) -> None:
        """Save config to file."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)
        logger.debug(f"Saved plugin config to {self.config_file}")

    def _plugin_entry(self, plugin_id: str) -> Dict[str, Any]:
        return self._config.setdefault("plugins", {}).setdefault(plugin_id, {})

    def is_disabled(self, plugin_id: str) -> bool:
        """Check if a plugin is disabled."""
        return plugin_id in self._config.get("disabled", [])

    def get_disabled_list(self) -> List[str]:
        """Get list of disabled plugin IDs."""
        return list(self._config.get("disabled", []))

    def set_disabled(self, plugin_id: str, disabled: bool) -> None:
        """Disable or re-enable a plugin."""
        disabled_ids = self._config.setdefault("disabled", [])
        if disabled and plugin_id not in disabled_ids:
            disabled_ids.append(plugin_id)
        elif not disabled and plugin_id in disabled_ids:
            disabled_ids.remove(plugin_id)
        else:
            return
        self._save()
        logger.info(f"{'Disabled' if disabled else 'Enabled'} plugin: {plugin_id}")

    def get_settings(self, plugin_id: str) -> Dict[str, str]:
        """Get the saved setting values of a plugin."""
        plugin = self._config.get("plugins", {}).get(plugin_id, {})
        return dict(plugin.get("settings", {}))

    def update_settings(self, plugin_id: str, values: Dict[str, str]) -> None:
        """Merge new setting values into the saved ones."""
        settings = self._plugin_entry(plugin_id).setdefault("settings", {})
        settings.update(values)
        self._save()
        logger.info(f"Updated settings for plugin: {plugin_id} ({', '.join(values)})")

    def get_trigger_keywords(self, plugin_id: str) -> Optional[List[str]]:
        """Get user-edited trigger keywords, None if never edited."""
        plugin = self._config.get("plugins", {}).get(plugin_id, {})
        keywords = plugin.get("trigger_keywords")
        return list(keywords) if keywords is not None else None

    def set_trigger_keywords(self, plugin_id: str, keywords: List[str]) -> None:
        """Replace the trigger keywords of a plugin."""
        self._plugin_entry(plugin_id)["trigger_keywords"] = list(keywords)
        self._save()
        logger.info(f"Updated trigger keywords for plugin: {plugin_id} -> {keywords}")

    def remove(self, plugin_id: str) -> None:
        """Forget everything saved for a plugin."""
        changed = self._config.get("plugins", {}).pop(plugin_id, None) is not None
        disabled_ids = self._config.get("disabled", [])
        if plugin_id in disabled_ids:
            disabled_ids.remove(plugin_id)
            changed = True
        if changed:
            self._save()
            logger.info(f"Removed saved state for plugin: {plugin_id}")

    def reload(self) -> None:
        """Reload config from disk."""
        self._config = self._load()
