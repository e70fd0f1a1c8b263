"""Theme manager - keeps the loaded themes and the user's active selection."""

import json
import logging
import shutil
from pathlib import Path
from typing import Dict, List, Optional

from launcher.ui.theme import Theme
from launcher.ui.theme_loader import ThemeEntry, ThemeLoader, ThemeLoadError

logger = logging.getLogger(__name__)


class ThemeManager:
    """Holds the available themes and persists which one is active.

    Selection is stored in a small settings file::

        {"theme_id": "dark"}
    """

    def __init__(
        self,
        bundled_dir: Path,
        installed_dir: Path,
        settings_file: Path,
        default_theme_id: str,
    ):
        self.installed_dir = installed_dir
        self.settings_file = settings_file
        self.default_theme_id = default_theme_id
        self.loader = ThemeLoader([
            (bundled_dir, "bundled"),
            (installed_dir, "installed"),
        ])
        self._themes: Dict[str, ThemeEntry] = {}
        self._selected_id: Optional[str] = self._load_selection()

    def _load_selection(self) -> Optional[str]:
        if self.settings_file.exists():
            try:
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    return json.load(f).get("theme_id")
            except (json.JSONDecodeError, IOError, AttributeError) as e:
                logger.error(f"Error loading UI settings: {e}")
        return None

    def _save_selection(self) -> None:
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w", encoding="utf-8") as f:
            json.dump({"theme_id": self._selected_id}, f, indent=2, ensure_ascii=False)
        logger.debug(f"Saved UI settings to {self.settings_file}")

    def load_all(self) -> None:
        """(Re)load all themes from disk."""
        self._themes = {entry.id: entry for entry in self.loader.discover_all()}
        if self._selected_id and self._selected_id not in self._themes:
            logger.warning(
                f"Selected theme '{self._selected_id}' is not available, "
                f"falling back to '{self.default_theme_id}'"
            )

    def list_themes(self) -> List[Theme]:
        return [entry.theme for entry in self._themes.values()]

    def get_entry(self, theme_id: str) -> Optional[ThemeEntry]:
        return self._themes.get(theme_id)

    def get_theme(self, theme_id: str) -> Optional[Theme]:
        entry = self._themes.get(theme_id)
        return entry.theme if entry else None

    def current_theme(self) -> Optional[Theme]:
        """Return the selected theme, else the default one, else the first loaded."""
        for theme_id in (self._selected_id, self.default_theme_id):
            if theme_id and theme_id in self._themes:
                return self._themes[theme_id].theme
        if self._themes:
            return next(iter(self._themes.values())).theme
        return None

    def switch_theme(self, theme_id: str) -> Optional[Theme]:
        """Make a theme the active one and persist the choice."""
        entry = self._themes.get(theme_id)
        if not entry:
            logger.error(f"Theme not found: {theme_id}")
            return None

        self._selected_id = theme_id
        self._save_selection()
        logger.info(f"Switched theme to: {theme_id}")
        return entry.theme

    def install_theme(self, theme_file: Path) -> Optional[Theme]:
        """Validate a theme file and copy it into the installed themes directory."""
        try:
            theme = self.loader.load_file(theme_file)
        except ThemeLoadError as e:
            logger.error(str(e))
            return None

        if theme.theme_id in self._themes:
            logger.error(f"Theme '{theme.theme_id}' already exists")
            return None

        dest = self.installed_dir / f"{theme.theme_id}{ThemeLoader.THEME_SUFFIX}"
        if dest.resolve().parent != self.installed_dir.resolve():
            logger.error(f"Theme id '{theme.theme_id}' cannot be used as a file name in {self.installed_dir}")
            return None
        if dest.exists():
            logger.error(f"Theme file already exists: {dest}")
            return None

        self.installed_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(theme_file, dest)
        self._themes[theme.theme_id] = ThemeEntry(theme=theme, path=dest, source="installed")
        logger.info(f"Installed theme '{theme.theme_id}' to {dest}")
        return theme

    def uninstall_theme(self, theme_id: str) -> bool:
        """Remove an installed theme. Bundled themes cannot be removed."""
        entry = self._themes.get(theme_id)
        if not entry:
            logger.error(f"Theme not found: {theme_id}")
            return False
        if entry.source != "installed":
            logger.error(f"Theme '{theme_id}' is {entry.source} and cannot be uninstalled")
            return False

        entry.path.unlink(missing_ok=True)
        del self._themes[theme_id]
        if self._selected_id == theme_id:
            self._selected_id = None
            self._save_selection()
        logger.info(f"Uninstalled theme: {theme_id}")
        return True

    @property
    def current_theme_id(self) -> Optional[str]:
        theme = self.current_theme()
        return theme.theme_id if theme else None
