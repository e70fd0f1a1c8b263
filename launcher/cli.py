"""Plugin and theme management CLI tool."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from launcher.dependencies import get_plugin_manager, get_theme_manager
from launcher.ui.theme_loader import ThemeLoader, ThemeLoadError

console = Console(highlight=False)


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    sys.exit(1)


def cmd_list(args):
    """List installed and store plugins."""
    manager = get_plugin_manager()
    installed = {"installed": True, "store": False}.get(args.filter)
    plugins = manager.list_plugins(installed=installed)

    if not plugins:
        console.print("No plugins found.")
        return

    table = Table(title="Plugins")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Runtime")
    table.add_column("Installed")
    table.add_column("Enabled")
    table.add_column("Keywords")
    table.add_column("Version")

    for p in plugins:
        enabled = "-" if not p.is_installed else ("No" if p.is_disable else "Yes")
        table.add_row(
            p.id,
            p.name,
            p.runtime.value,
            "system" if p.is_system else ("Yes" if p.is_installed else "No"),
            enabled,
            ", ".join(p.trigger_keywords),
            p.version,
        )
    console.print(table)


def cmd_info(args):
    """Show the full descriptor of a plugin."""
    manager = get_plugin_manager()
    plugin = manager.get_plugin(args.plugin_id)
    if not plugin:
        _fail(f"Plugin '{args.plugin_id}' not found.")

    console.print_json(json.dumps(plugin.to_wire(), ensure_ascii=False))


def cmd_enable(args):
    manager = get_plugin_manager()
    if not manager.enable_plugin(args.plugin_id):
        _fail(f"Plugin '{args.plugin_id}' not installed.")
    console.print(f"Plugin '{args.plugin_id}' enabled.")


def cmd_disable(args):
    manager = get_plugin_manager()
    if not manager.disable_plugin(args.plugin_id):
        _fail(f"Plugin '{args.plugin_id}' not installed.")
    console.print(f"Plugin '{args.plugin_id}' disabled.")


def cmd_install(args):
    """Install a plugin from a local path."""
    source = Path(args.path).resolve()
    if not source.is_dir():
        _fail(f"Path is not a directory: {source}")

    manager = get_plugin_manager()
    plugin = manager.install_plugin(source)
    if not plugin:
        _fail(f"Failed to install plugin from {source}. Check logs for details.")
    console.print(f"Plugin '{plugin.id}' installed.")


def cmd_uninstall(args):
    manager = get_plugin_manager()
    if not manager.uninstall_plugin(args.plugin_id):
        _fail(f"Plugin '{args.plugin_id}' cannot be uninstalled.")
    console.print(f"Plugin '{args.plugin_id}' uninstalled.")


def cmd_keyword_add(args):
    manager = get_plugin_manager()
    plugin = manager.add_trigger_keyword(args.plugin_id, args.keyword)
    if not plugin:
        _fail(f"Plugin '{args.plugin_id}' not installed.")
    console.print(f"Trigger keywords: {', '.join(plugin.trigger_keywords)}")


def cmd_keyword_remove(args):
    manager = get_plugin_manager()
    plugin = manager.delete_trigger_keyword(args.plugin_id, args.keyword)
    if not plugin:
        _fail(f"Could not remove '{args.keyword}' from plugin '{args.plugin_id}'.")
    console.print(f"Trigger keywords: {', '.join(plugin.trigger_keywords) or '(none)'}")


def cmd_themes(args):
    """List available themes."""
    manager = get_theme_manager()
    current = manager.current_theme_id

    table = Table(title="Themes")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Author")
    table.add_column("Source")
    table.add_column("Active")
    for theme in manager.list_themes():
        entry = manager.get_entry(theme.theme_id)
        table.add_row(
            theme.theme_id,
            theme.theme_name,
            theme.theme_author,
            entry.source,
            "*" if theme.theme_id == current else "",
        )
    console.print(table)


def cmd_theme_use(args):
    manager = get_theme_manager()
    if not manager.switch_theme(args.theme_id):
        _fail(f"Theme '{args.theme_id}' not found.")
    console.print(f"Theme '{args.theme_id}' applied.")


def cmd_theme_check(args):
    """Validate a theme file without installing it."""
    try:
        theme = ThemeLoader([]).load_file(Path(args.path))
    except ThemeLoadError as e:
        _fail(str(e))
    console.print(f"Theme '{theme.theme_id}' ({theme.theme_name}) is valid.")


def cmd_doctor(args):
    """Run health checks on plugins and themes."""
    from launcher.constants import (
        BUNDLED_THEMES_DIR,
        DEFAULT_THEME_ID,
        INSTALLED_PLUGINS_DIR,
        PLUGIN_CONFIG_FILE,
    )

    issues = []

    if not BUNDLED_THEMES_DIR.exists():
        issues.append(f"Bundled themes directory missing: {BUNDLED_THEMES_DIR}")
    if not INSTALLED_PLUGINS_DIR.exists():
        issues.append(f"Installed plugins directory missing: {INSTALLED_PLUGINS_DIR}")

    if PLUGIN_CONFIG_FILE.exists():
        try:
            with open(PLUGIN_CONFIG_FILE) as f:
                json.load(f)
        except json.JSONDecodeError as e:
            issues.append(f"Plugin config file has invalid JSON: {e}")

    manager = get_plugin_manager()
    installed_ids = {p.id for p in manager.registry.get_all()}
    for disabled_id in manager.config_service.get_disabled_list():
        if disabled_id not in installed_ids:
            issues.append(f"Disabled plugin '{disabled_id}' is not installed")

    for p in manager.registry.get_all():
        if p.path is None or not p.manifest.entry:
            continue
        entry_file = p.path / p.manifest.entry
        if not entry_file.exists():
            issues.append(f"Plugin '{p.id}': entry file missing: {entry_file}")

    theme_manager = get_theme_manager()
    if not theme_manager.get_theme(DEFAULT_THEME_ID):
        issues.append(f"Default theme '{DEFAULT_THEME_ID}' not found")

    if issues:
        console.print(f"Found {len(issues)} issue(s):")
        for i, issue in enumerate(issues, 1):
            console.print(f"  {i}. {issue}")
        sys.exit(1)
    else:
        console.print(
            f"All checks passed. {len(installed_ids)} plugin(s) installed, "
            f"{len(theme_manager.list_themes())} theme(s) available."
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Launcher plugin and theme manager")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List plugins")
    list_parser.add_argument("--filter", choices=["all", "installed", "store"], default="all")

    info_parser = subparsers.add_parser("info", help="Show plugin descriptor")
    info_parser.add_argument("plugin_id", help="Plugin ID")

    enable_parser = subparsers.add_parser("enable", help="Enable a plugin")
    enable_parser.add_argument("plugin_id", help="Plugin ID")

    disable_parser = subparsers.add_parser("disable", help="Disable a plugin")
    disable_parser.add_argument("plugin_id", help="Plugin ID")

    install_parser = subparsers.add_parser("install", help="Install a plugin from local path")
    install_parser.add_argument("path", help="Path to plugin directory")

    uninstall_parser = subparsers.add_parser("uninstall", help="Uninstall a plugin")
    uninstall_parser.add_argument("plugin_id", help="Plugin ID")

    kw_add_parser = subparsers.add_parser("keyword-add", help="Add a trigger keyword")
    kw_add_parser.add_argument("plugin_id", help="Plugin ID")
    kw_add_parser.add_argument("keyword", help="Trigger keyword")

    kw_rm_parser = subparsers.add_parser("keyword-remove", help="Remove a trigger keyword")
    kw_rm_parser.add_argument("plugin_id", help="Plugin ID")
    kw_rm_parser.add_argument("keyword", help="Trigger keyword")

    subparsers.add_parser("themes", help="List themes")

    use_parser = subparsers.add_parser("theme-use", help="Switch the active theme")
    use_parser.add_argument("theme_id", help="Theme ID")

    check_parser = subparsers.add_parser("theme-check", help="Validate a theme file")
    check_parser.add_argument("path", help="Path to theme JSON file")

    subparsers.add_parser("doctor", help="Run health checks")

    return parser


def main(argv=None):
    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "enable": cmd_enable,
        "disable": cmd_disable,
        "install": cmd_install,
        "uninstall": cmd_uninstall,
        "keyword-add": cmd_keyword_add,
        "keyword-remove": cmd_keyword_remove,
        "themes": cmd_themes,
        "theme-use": cmd_theme_use,
        "theme-check": cmd_theme_check,
        "doctor": cmd_doctor,
    }

    commands[args.command](args)


if __name__ == "__main__":
    main()
