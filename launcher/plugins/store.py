"""Plugin store catalog - plugins that can be installed but are not yet."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from launcher.plugins.manifest import PluginMetadata

logger = logging.getLogger(__name__)


class PluginStore:
    """Reads a local catalog file of installable plugin manifests.

    Catalog format::

        {"plugins": [{"id": "...", "name": "...", ...}, ...]}
    """

    def __init__(self, catalog_file: Optional[Path]):
        self.catalog_file = catalog_file
        self._entries: List[PluginMetadata] = self._load()

    def _load(self) -> List[PluginMetadata]:
        if self.catalog_file is None or not self.catalog_file.exists():
            logger.debug(f"Plugin store catalog not found: {self.catalog_file}")
            return []

        try:
            with open(self.catalog_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.error(f"Error loading plugin store catalog: {e}")
            return []

        entries = []
        for raw in data.get("plugins", []) if isinstance(data, dict) else []:
            try:
                entries.append(PluginMetadata.from_wire(raw))
            except ValidationError as e:
                logger.error(f"Invalid store entry in {self.catalog_file}: {e}")
        logger.info(f"Loaded {len(entries)} plugin(s) from store catalog")
        return entries

    def list_entries(self) -> List[PluginMetadata]:
        return list(self._entries)

    def get(self, plugin_id: str) -> Optional[PluginMetadata]:
        return next((e for e in self._entries if e.id == plugin_id), None)

    def reload(self) -> None:
        self._entries = self._load()
