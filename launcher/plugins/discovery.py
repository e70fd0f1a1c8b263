"""Plugin discovery - finds plugin directories and reads their plugin.json."""

import json
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import ValidationError

from launcher.plugins.manifest import PluginMetadata
from launcher.plugins.registry import PluginInstance

logger = logging.getLogger(__name__)


class ManifestError(ValueError):
    """Raised when a plugin.json cannot be turned into PluginMetadata."""


def load_manifest(manifest_file: Path) -> PluginMetadata:
    """Read and validate one plugin.json.

    Manifests without trigger keywords or with an unknown runtime are
    rejected along with unreadable and malformed files.

    Raises:
        ManifestError: if the manifest cannot be used
    """
    try:
        with open(manifest_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ManifestError(f"Cannot read {manifest_file}: {e}") from e

    try:
        return PluginMetadata.from_wire(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest {manifest_file}: {e}") from e


class PluginDiscovery:
    """Scans ``(path, source)`` search paths for plugin directories.

    Every subdirectory holding a plugin.json is a plugin candidate. Search
    paths are visited in order, so an id found in an earlier path shadows
    the same id in a later one.
    """

    MANIFEST_FILE = "plugin.json"

    def __init__(self, search_paths: List[Tuple[Path, str]]):
        self.search_paths = search_paths

    def discover_all(self) -> List[PluginInstance]:
        found: Dict[str, PluginInstance] = {}

        for plugin_dir, source in self._candidates():
            instance = self._load(plugin_dir, source)
            if instance is None:
                continue
            if instance.id in found:
                logger.warning(
                    f"Plugin '{instance.id}' at {plugin_dir} is shadowed by "
                    f"{found[instance.id].path}, skipping"
                )
                continue
            found[instance.id] = instance

        logger.info(f"Discovered {len(found)} plugin(s)")
        return list(found.values())

    def discover_single(self, plugin_path: Path, source: str = "external") -> Optional[PluginInstance]:
        """Read the plugin in ``plugin_path``, None if it is not a valid plugin."""
        if not (plugin_path / self.MANIFEST_FILE).is_file():
            logger.error(f"No {self.MANIFEST_FILE} found at {plugin_path}")
            return None
        return self._load(plugin_path, source)

    def _candidates(self) -> Iterator[Tuple[Path, str]]:
        for search_path, source in self.search_paths:
            if not search_path.is_dir():
                logger.debug(f"Plugin search path does not exist: {search_path}")
                continue

            for item in sorted(p for p in search_path.iterdir() if p.is_dir()):
                if not (item / self.MANIFEST_FILE).is_file():
                    logger.error(f"Didn't find plugin config file in {item}")
                    continue
                yield item, source

    def _load(self, plugin_dir: Path, source: str) -> Optional[PluginInstance]:
        try:
            manifest = load_manifest(plugin_dir / self.MANIFEST_FILE)
        except ManifestError as e:
            logger.error(str(e))
            return None

        logger.debug(f"Found plugin {manifest.id} ({source}) at {plugin_dir}")
        return PluginInstance(manifest=manifest, path=plugin_dir, source=source)
