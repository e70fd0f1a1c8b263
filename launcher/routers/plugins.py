"""Plugin REST API endpoints consumed by the launcher UI."""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException

from launcher.dependencies import get_plugin_manager
from launcher.models.requests import (
    InstallRequest,
    PluginSettingsUpdate,
    TriggerKeywordAdd,
    TriggerKeywordUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/plugins", tags=["plugins"])


def _require_installed(plugin_id: str):
    manager = get_plugin_manager()
    if not manager.registry.has(plugin_id):
        raise HTTPException(status_code=404, detail=f"Plugin '{plugin_id}' not installed")
    return manager


@router.get("/")
async def list_plugins(installed: Optional[bool] = None):
    """List installed plugins and store plugins.

    ``settingDefinitions``, ``setting`` and ``isDisable`` are only meaningful
    when ``isInstalled`` is true.
    """
    manager = get_plugin_manager()
    return {"plugins": [p.to_wire() for p in manager.list_plugins(installed=installed)]}


@router.get("/{plugin_id}")
async def get_plugin(plugin_id: str):
    """Get the descriptor of a specific plugin."""
    manager = get_plugin_manager()
    plugin = manager.get_plugin(plugin_id)
    if not plugin:
        raise HTTPException(status_code=404, detail=f"Plugin '{plugin_id}' not found")
    return plugin.to_wire()


@router.post("/{plugin_id}/enable")
async def enable_plugin(plugin_id: str):
    """Enable an installed plugin."""
    manager = _require_installed(plugin_id)
    plugin = manager.enable_plugin(plugin_id)
    return {"message": f"Plugin '{plugin_id}' enabled", "plugin": plugin.to_wire()}


@router.post("/{plugin_id}/disable")
async def disable_plugin(plugin_id: str):
    """Disable an installed plugin."""
    manager = _require_installed(plugin_id)
    plugin = manager.disable_plugin(plugin_id)
    return {"message": f"Plugin '{plugin_id}' disabled", "plugin": plugin.to_wire()}


@router.put("/{plugin_id}/settings")
async def update_plugin_settings(plugin_id: str, body: PluginSettingsUpdate):
    """Update setting values of an installed plugin."""
    manager = _require_installed(plugin_id)
    plugin = manager.update_plugin_settings(plugin_id, body.settings)
    return {"message": f"Settings updated for plugin '{plugin_id}'", "plugin": plugin.to_wire()}


@router.post("/{plugin_id}/trigger-keywords")
async def add_trigger_keyword(plugin_id: str, body: TriggerKeywordAdd):
    """Add a trigger keyword to an installed plugin."""
    manager = _require_installed(plugin_id)
    plugin = manager.add_trigger_keyword(plugin_id, body.keyword)
    return {"plugin": plugin.to_wire()}


@router.put("/{plugin_id}/trigger-keywords")
async def update_trigger_keyword(plugin_id: str, body: TriggerKeywordUpdate):
    """Replace one trigger keyword of an installed plugin."""
    manager = _require_installed(plugin_id)
    plugin = manager.update_trigger_keyword(plugin_id, body.old, body.new)
    if not plugin:
        raise HTTPException(status_code=400, detail=f"Plugin '{plugin_id}' has no trigger keyword '{body.old}'")
    return {"plugin": plugin.to_wire()}


@router.delete("/{plugin_id}/trigger-keywords/{keyword:path}")
async def delete_trigger_keyword(plugin_id: str, keyword: str):
    """Delete a trigger keyword of an installed plugin."""
    manager = _require_installed(plugin_id)
    plugin = manager.delete_trigger_keyword(plugin_id, keyword)
    if not plugin:
        raise HTTPException(status_code=400, detail=f"Plugin '{plugin_id}' has no trigger keyword '{keyword}'")
    return {"plugin": plugin.to_wire()}


@router.post("/install")
async def install_plugin(body: InstallRequest):
    """Install a plugin from a local path."""
    source_path = Path(body.path)
    if not source_path.exists():
        raise HTTPException(status_code=400, detail=f"Path does not exist: {body.path}")
    if not source_path.is_dir():
        raise HTTPException(status_code=400, detail=f"Path is not a directory: {body.path}")

    manager = get_plugin_manager()
    plugin = manager.install_plugin(source_path)
    if not plugin:
        raise HTTPException(
            status_code=400,
            detail="Failed to install plugin. Check logs for details.",
        )
    return {"message": f"Plugin '{plugin.id}' installed", "plugin": plugin.to_wire()}


@router.delete("/{plugin_id}")
async def uninstall_plugin(plugin_id: str):
    """Uninstall a plugin installed by the user."""
    manager = _require_installed(plugin_id)
    if not manager.uninstall_plugin(plugin_id):
        raise HTTPException(status_code=400, detail=f"Plugin '{plugin_id}' cannot be uninstalled")
    return {"message": f"Plugin '{plugin_id}' uninstalled"}
