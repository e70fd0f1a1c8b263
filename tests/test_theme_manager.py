"""Tests for theme loading and the theme manager."""

import json

import pytest

from launcher.ui.theme_loader import ThemeLoader, ThemeLoadError
from launcher.ui.theme_manager import ThemeManager


class TestThemeLoader:
    def test_load_file(self, tmp_path, write_theme):
        theme_file = write_theme(tmp_path, "t.json")

        theme = ThemeLoader([]).load_file(theme_file)

        assert theme.theme_id == "dark-1"

    def test_load_file_missing_field(self, tmp_path, write_theme, theme_data):
        data = theme_data()
        del data["queryBoxBorderRadius"]
        theme_file = tmp_path / "t.json"
        theme_file.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ThemeLoadError, match="Invalid theme"):
            ThemeLoader([]).load_file(theme_file)

    def test_load_file_not_json(self, tmp_path):
        theme_file = tmp_path / "t.json"
        theme_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ThemeLoadError, match="Cannot read"):
            ThemeLoader([]).load_file(theme_file)

    def test_load_file_not_an_object(self, tmp_path):
        theme_file = tmp_path / "t.json"
        theme_file.write_text("[]", encoding="utf-8")

        with pytest.raises(ThemeLoadError, match="JSON object"):
            ThemeLoader([]).load_file(theme_file)

    def test_load_file_missing(self, tmp_path):
        with pytest.raises(ThemeLoadError):
            ThemeLoader([]).load_file(tmp_path / "nope.json")

    def test_discover_skips_invalid_and_duplicates(self, tmp_path, write_theme):
        bundled = tmp_path / "bundled"
        installed = tmp_path / "installed"
        write_theme(bundled, "a.json", themeId="a")
        write_theme(bundled, "broken.json", themeId="b", appPaddingTop=-3)
        write_theme(installed, "a-copy.json", themeId="a", themeName="Copy")
        write_theme(installed, "c.json", themeId="c")
        (installed / "notes.txt").write_text("ignored", encoding="utf-8")

        entries = ThemeLoader([(bundled, "bundled"), (installed, "installed")]).discover_all()

        assert [(e.id, e.source) for e in entries] == [("a", "bundled"), ("c", "installed")]
        assert entries[0].theme.theme_name == "Dark One"

    def test_discover_missing_directory(self, tmp_path):
        assert ThemeLoader([(tmp_path / "missing", "bundled")]).discover_all() == []


class TestThemeManager:
    def test_list_themes(self, theme_manager):
        assert [t.theme_id for t in theme_manager.list_themes()] == ["dark", "light"]

    def test_default_theme_is_current(self, theme_manager):
        assert theme_manager.current_theme().theme_id == "dark"
        assert theme_manager.current_theme_id == "dark"

    def test_switch_theme_persisted(self, tmp_path, theme_manager):
        theme = theme_manager.switch_theme("light")

        assert theme.theme_id == "light"
        assert theme_manager.current_theme_id == "light"
        saved = json.loads((tmp_path / "ui_settings.json").read_text(encoding="utf-8"))
        assert saved == {"theme_id": "light"}

        fresh = ThemeManager(
            bundled_dir=tmp_path / "themes" / "bundled",
            installed_dir=tmp_path / "themes" / "installed",
            settings_file=tmp_path / "ui_settings.json",
            default_theme_id="dark",
        )
        fresh.load_all()
        assert fresh.current_theme_id == "light"

    def test_switch_to_unknown_theme(self, theme_manager):
        assert theme_manager.switch_theme("nope") is None
        assert theme_manager.current_theme_id == "dark"

    def test_missing_default_falls_back_to_first(self, tmp_path, write_theme):
        bundled = tmp_path / "bundled"
        write_theme(bundled, "only.json", themeId="only")
        manager = ThemeManager(bundled, tmp_path / "installed", tmp_path / "ui.json", default_theme_id="dark")
        manager.load_all()

        assert manager.current_theme_id == "only"

    def test_no_themes(self, tmp_path):
        manager = ThemeManager(tmp_path / "b", tmp_path / "i", tmp_path / "ui.json", default_theme_id="dark")
        manager.load_all()

        assert manager.current_theme() is None
        assert manager.current_theme_id is None

    def test_corrupt_settings_ignored(self, tmp_path, write_theme):
        settings = tmp_path / "ui.json"
        settings.write_text("[1, 2]", encoding="utf-8")
        write_theme(tmp_path / "b", "dark.json", themeId="dark")
        manager = ThemeManager(tmp_path / "b", tmp_path / "i", settings, default_theme_id="dark")
        manager.load_all()

        assert manager.current_theme_id == "dark"

    def test_install_and_uninstall(self, tmp_path, theme_manager, write_theme):
        source = write_theme(tmp_path / "downloads", "whatever.json", themeId="solar")

        theme = theme_manager.install_theme(source)

        installed_file = tmp_path / "themes" / "installed" / "solar.json"
        assert theme.theme_id == "solar"
        assert installed_file.exists()
        assert theme_manager.get_entry("solar").source == "installed"

        theme_manager.switch_theme("solar")
        assert theme_manager.uninstall_theme("solar") is True

        assert not installed_file.exists()
        assert theme_manager.get_theme("solar") is None
        assert theme_manager.current_theme_id == "dark"

    def test_install_duplicate_refused(self, tmp_path, theme_manager, write_theme):
        source = write_theme(tmp_path / "downloads", "d.json", themeId="dark")

        assert theme_manager.install_theme(source) is None

    def test_install_invalid_refused(self, tmp_path, theme_manager, write_theme):
        source = write_theme(tmp_path / "downloads", "bad.json", themeId="bad", appBackgroundColor="nope!")

        assert theme_manager.install_theme(source) is None
        assert theme_manager.get_theme("bad") is None

    def test_bundled_theme_not_removable(self, theme_manager):
        assert theme_manager.uninstall_theme("dark") is False
        assert theme_manager.uninstall_theme("nope") is False
        assert theme_manager.get_theme("dark") is not None

    @pytest.mark.parametrize("theme_id", ["../../escaped", "team/nested"])
    def test_install_refuses_id_that_is_not_a_file_name(self, tmp_path, theme_manager, write_theme, theme_id):
        source = write_theme(tmp_path / "downloads", "t.json", themeId=theme_id)

        assert theme_manager.install_theme(source) is None

        assert theme_manager.get_theme(theme_id) is None
        assert not (tmp_path / "escaped.json").exists()
        assert not (tmp_path / "themes" / "installed" / "team").exists()
