"""Theme REST API endpoints consumed by the launcher UI."""

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException

from launcher.dependencies import get_theme_manager
from launcher.models.requests import InstallRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/themes", tags=["themes"])


@router.get("/")
async def list_themes():
    """List all available themes and the active one."""
    manager = get_theme_manager()
    return {
        "themes": [t.to_wire() for t in manager.list_themes()],
        "currentThemeId": manager.current_theme_id,
    }


@router.get("/current")
async def get_current_theme():
    """Get the theme the UI should render with."""
    manager = get_theme_manager()
    theme = manager.current_theme()
    if not theme:
        raise HTTPException(status_code=404, detail="No theme available")
    return theme.to_wire()


@router.get("/{theme_id}")
async def get_theme(theme_id: str):
    manager = get_theme_manager()
    theme = manager.get_theme(theme_id)
    if not theme:
        raise HTTPException(status_code=404, detail=f"Theme '{theme_id}' not found")
    return theme.to_wire()


@router.post("/{theme_id}/apply")
async def apply_theme(theme_id: str):
    """Make a theme the active one."""
    manager = get_theme_manager()
    theme = manager.switch_theme(theme_id)
    if not theme:
        raise HTTPException(status_code=404, detail=f"Theme '{theme_id}' not found")
    return {"message": f"Theme '{theme_id}' applied", "theme": theme.to_wire()}


@router.post("/install")
async def install_theme(body: InstallRequest):
    """Install a theme from a local JSON file."""
    source_path = Path(body.path)
    if not source_path.is_file():
        raise HTTPException(status_code=400, detail=f"Path is not a file: {body.path}")

    manager = get_theme_manager()
    theme = manager.install_theme(source_path)
    if not theme:
        raise HTTPException(
            status_code=400,
            detail="Failed to install theme. Check logs for details.",
        )
    return {"message": f"Theme '{theme.theme_id}' installed", "theme": theme.to_wire()}


@router.delete("/{theme_id}")
async def uninstall_theme(theme_id: str):
    """Uninstall a theme installed by the user."""
    manager = get_theme_manager()
    if not manager.get_theme(theme_id):
        raise HTTPException(status_code=404, detail=f"Theme '{theme_id}' not found")
    if not manager.uninstall_theme(theme_id):
        raise HTTPException(status_code=400, detail=f"Theme '{theme_id}' cannot be uninstalled")
    return {"message": f"Theme '{theme_id}' uninstalled"}
