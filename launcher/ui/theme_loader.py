"""Theme loader - reads theme files and rejects invalid ones."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from pydantic import ValidationError

from launcher.ui.theme import Theme

logger = logging.getLogger(__name__)


class ThemeLoadError(ValueError):
    """Raised when a theme file cannot be turned into a Theme."""


@dataclass(frozen=True)
class ThemeEntry:
    """A loaded theme and where it came from."""

    theme: Theme
    path: Path
    source: str  # "bundled" | "installed"

    @property
    def id(self) -> str:
        return self.theme.theme_id


class ThemeLoader:
    """Discovers themes by scanning directories for ``*.json`` theme files."""

    THEME_SUFFIX = ".json"

    def __init__(self, search_paths: List[Tuple[Path, str]]):
        """Initialize loader with (path, source_label) pairs, searched in order."""
        self.search_paths = search_paths

    def load_file(self, theme_file: Path) -> Theme:
        """Load and validate a single theme file.

        Raises:
            ThemeLoadError: if the file is unreadable, not JSON, or misses or
                has an invalid field
        """
        try:
            with open(theme_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ThemeLoadError(f"Cannot read theme {theme_file}: {e}") from e

        if not isinstance(data, dict):
            raise ThemeLoadError(f"Theme {theme_file} must be a JSON object")

        try:
            return Theme.from_wire(data)
        except ValidationError as e:
            raise ThemeLoadError(f"Invalid theme {theme_file}: {e}") from e

    def discover_all(self) -> List[ThemeEntry]:
        """Load every valid theme from the search paths.

        Invalid files are logged and skipped. On duplicate theme ids the first
        one found wins.
        """
        discovered = []
        seen_ids = set()

        for search_path, source in self.search_paths:
            if not search_path.exists():
                logger.debug(f"Theme search path does not exist: {search_path}")
                continue

            for theme_file in sorted(search_path.glob(f"*{self.THEME_SUFFIX}")):
                try:
                    theme = self.load_file(theme_file)
                except ThemeLoadError as e:
                    logger.error(str(e))
                    continue

                if theme.theme_id in seen_ids:
                    logger.warning(
                        f"Duplicate theme ID '{theme.theme_id}' found at {theme_file}, "
                        f"skipping (first-found wins)"
                    )
                    continue
                seen_ids.add(theme.theme_id)
                discovered.append(ThemeEntry(theme=theme, path=theme_file, source=source))
                logger.debug(f"Discovered theme: {theme.theme_id} at {theme_file}")

        logger.info(f"Discovered {len(discovered)} theme(s)")
        return discovered
