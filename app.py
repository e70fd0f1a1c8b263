"""Main FastAPI application for the launcher UI host."""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv('.env')

# Configure logging BEFORE importing any modules that use logger
log_level = os.getenv('LOG_LEVEL', 'INFO')
logging.basicConfig(
    level=getattr(logging, log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Import after logging is configured
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from launcher import __version__
from launcher.routers import plugins_router, themes_router

# Create FastAPI app
app = FastAPI(
    title="Launcher UI Host",
    description="Plugin descriptors and themes for the launcher UI",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # UI runs from a local webview origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(plugins_router)  # /api/plugins endpoints
app.include_router(themes_router)  # /api/themes endpoints


@app.get("/")
async def root():
    return {"message": "Launcher UI Host API", "docs": "/docs"}


@app.on_event("startup")
async def startup_event():
    """Application startup event."""
    from launcher.dependencies import get_plugin_manager, get_theme_manager

    logger.info("Starting Launcher UI Host")
    logger.info(f"Working directory: {Path.cwd()}")

    plugin_manager = get_plugin_manager()
    theme_manager = get_theme_manager()
    logger.info(f"Installed plugins: {plugin_manager.registry.count()}")
    logger.info(f"Active theme: {theme_manager.current_theme_id or 'None'}")


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event."""
    logger.info("Shutting down Launcher UI Host")


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", "9090"))
    uvicorn.run("app:app", host="127.0.0.1", port=port, reload=True)
