"""Shared fixtures for launcher tests."""

import json
from pathlib import Path

import pytest

from launcher.plugins.manager import PluginManager
from launcher.ui.theme_manager import ThemeManager

BASE_THEME = {
    "themeId": "dark-1",
    "themeName": "Dark One",
    "themeAuthor": "tester",
    "themeUrl": "https://example.com/themes/dark-1",
    "appBackgroundColor": "#1f1f1f",
    "appPaddingLeft": 8,
    "appPaddingTop": 8,
    "appPaddingRight": 8,
    "appPaddingBottom": 8,
    "resultContainerPaddingLeft": 8,
    "resultContainerPaddingTop": 8,
    "resultContainerPaddingRight": 8,
    "resultContainerPaddingBottom": 8,
    "resultItemBorderRadius": 4,
    "resultItemPaddingLeft": 8,
    "resultItemPaddingTop": 8,
    "resultItemPaddingRight": 8,
    "resultItemPaddingBottom": 8,
    "resultItemActiveBackgroundColor": "#333333",
    "queryBoxFontColor": "#eeeeee",
    "queryBoxBackgroundColor": "#2a2a2a",
    "queryBoxBorderRadius": 4,
    "actionContainerBackgroundColor": "#262626",
    "actionContainerHeaderFontColor": "#999999",
    "actionContainerPaddingLeft": 8,
    "actionContainerPaddingTop": 8,
    "actionContainerPaddingRight": 8,
    "actionContainerPaddingBottom": 8,
    "actionItemActiveBackgroundColor": "#333333",
    "actionQueryBoxFontColor": "#eeeeee",
    "actionQueryBoxBackgroundColor": "#2a2a2a",
    "actionQueryBoxBorderRadius": 4,
}


def _make_theme_data(**overrides) -> dict:
    data = dict(BASE_THEME)
    data.update(overrides)
    return data


def _write_theme(root: Path, file_name: str, **overrides) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    theme_file = root / file_name
    theme_file.write_text(json.dumps(_make_theme_data(**overrides)), encoding="utf-8")
    return theme_file


def _make_manifest(plugin_id: str, **overrides) -> dict:
    data = {
        "id": plugin_id,
        "name": plugin_id.replace("-", " ").title(),
        "author": "tester",
        "version": "1.0.0",
        "runtime": "PYTHON",
        "description": f"{plugin_id} plugin",
        "icon": "relative:images/icon.png",
        "entry": "main.py",
        "triggerKeywords": [plugin_id[:3]],
    }
    data.update(overrides)
    return data


def _write_plugin(root: Path, plugin_id: str, **overrides) -> Path:
    plugin_dir = root / plugin_id
    plugin_dir.mkdir(parents=True)
    manifest = _make_manifest(plugin_id, **overrides)
    (plugin_dir / "plugin.json").write_text(json.dumps(manifest), encoding="utf-8")
    return plugin_dir


@pytest.fixture
def theme_data():
    """Factory for a complete theme dict in wire form."""
    return _make_theme_data


@pytest.fixture
def write_theme():
    """Factory writing a theme JSON file: write_theme(dir, "name.json", **overrides)."""
    return _write_theme


@pytest.fixture
def make_manifest():
    return _make_manifest


@pytest.fixture
def write_plugin():
    """Factory creating a plugin directory: write_plugin(root, plugin_id, **manifest_overrides)."""
    return _write_plugin


@pytest.fixture
def plugin_dirs(tmp_path):
    bundled = tmp_path / "bundled"
    installed = tmp_path / "installed"
    bundled.mkdir()
    installed.mkdir()
    return bundled, installed


@pytest.fixture
def store_file(tmp_path):
    catalog = tmp_path / "store.json"
    catalog.write_text(
        json.dumps({
            "plugins": [
                _make_manifest("store-only", icon="emoji:📦", triggerKeywords=["so"]),
            ]
        }),
        encoding="utf-8",
    )
    return catalog


@pytest.fixture
def plugin_manager(tmp_path, plugin_dirs, store_file):
    """PluginManager over empty temp directories (call load_all() after writing plugins)."""
    bundled, installed = plugin_dirs
    return PluginManager(
        bundled_dir=bundled,
        installed_dir=installed,
        config_file=tmp_path / "plugin_config.json",
        store_file=store_file,
    )


@pytest.fixture
def theme_manager(tmp_path):
    """ThemeManager with bundled themes 'dark' and 'light', already loaded."""
    bundled = tmp_path / "themes" / "bundled"
    _write_theme(bundled, "dark.json", themeId="dark", themeName="Dark")
    _write_theme(bundled, "light.json", themeId="light", themeName="Light", appBackgroundColor="white")
    manager = ThemeManager(
        bundled_dir=bundled,
        installed_dir=tmp_path / "themes" / "installed",
        settings_file=tmp_path / "ui_settings.json",
        default_theme_id="dark",
    )
    manager.load_all()
    return manager
