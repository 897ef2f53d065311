"""
version-app - Main Application
FastAPI app reporting version, host and database status
"""
import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from starlette.routing import Route

from version_app import __version__
from version_app.config import Settings, get_settings
from version_app.routes.health import health_check
from version_app.routes.root import root
from version_app.routes.db_check import db_check
from version_app.logging_config import init_logging

logger = logging.getLogger(__name__)


def attach_debugger():
    """Optional debugpy attach (controlled by env vars)"""
    if os.getenv("ENABLE_DEBUGPY", "0") != "1":
        return
    try:
        import debugpy

        debug_port = int(os.getenv("DEBUGPY_PORT", "5678"))
        print(f"🔧 [version-app] Waiting for debugger attach on 0.0.0.0:{debug_port}...")
        debugpy.listen(("0.0.0.0", debug_port))
        print("✅ [version-app] Debugger listening!")
    except Exception as e:
        print(f"⚠️ [version-app] Failed to start debugpy: {e}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app and register its routes"""
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Version: %s", settings.VERSION)
        logger.info("Database: %s@%s", settings.DB_USER, settings.db_target)  # Hide password
        yield

    app = FastAPI(
        title="version-app",
        description="Reports the deployed version, host and database status",
        version=__version__,
        docs_url="/docs",
        lifespan=lifespan,
    )

    # Handlers read configuration from app.state
    app.state.settings = settings

    # Register routes; no method filter, every verb reaches the handler
    app.router.routes.extend([
        Route("/", root),
        Route("/health", health_check),
        Route("/db-check", db_check),
    ])

    return app


settings = get_settings()
init_logging(settings.SERVICE_NAME, settings.LOG_LEVEL)
attach_debugger()

app = create_app(settings)


def run():
    """Serve the app until the process is terminated"""
    logger.info("Starting version-app %s on port %s", settings.VERSION, settings.PORT)
    try:
        port = int(settings.PORT)
    except ValueError:
        logger.error("Invalid PORT %r", settings.PORT)
        raise SystemExit(1)

    # uvicorn logs a failed bind and exits with status 1
    uvicorn.run(app, host="0.0.0.0", port=port, log_config=None)


if __name__ == "__main__":
    run()
