"""
Player Data Manager - Main FastAPI Application

This module contains the main FastAPI application. It reads and edits a
single Roblox Open Cloud Data Store entry per player, with ETag-protected
writes confined to the entry's Data subtree.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from datetime import datetime
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from exceptions import ConfigurationError
from http_client import OpenCloudHttpClient
from managers import ConfigManager
from models.infrastructure import AppConfig


def ConfigureLogging(level: str = "INFO", logs_dir: Path = Path("logs")):
    """
    Configure logging to write to both console and a rotating file

    Args:
        level: Root log level name
        logs_dir: Directory for log files (created if missing)
    """
    # Already configured (by main(), or by a host process that owns the root logger)
    if logging.getLogger().handlers:
        return

    logs_dir.mkdir(exist_ok=True)

    # Create log filename with timestamp
    log_filename = logs_dir / f"player-data-manager-{datetime.now().strftime('%Y-%m-%d')}.log"

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            # Console handler
            logging.StreamHandler(),
            # File handler with rotation (max 10MB per file, keep 10 backup files)
            RotatingFileHandler(
                log_filename,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=10,
                encoding='utf-8'
            )
        ]
    )


logger = logging.getLogger(__name__)


# ==================== Application Factory ====================

def CreateApp(config: Optional[AppConfig] = None,
              http_client: Optional[OpenCloudHttpClient] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        config: Configuration to use (loaded from the environment at startup if None)
        http_client: Outbound HTTP client (built from the configuration if None)

    Returns:
        FastAPI: Application with all routers included
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        FastAPI lifespan event handler for startup and shutdown
        Loads configuration and owns the outbound HTTP client
        """
        app_config = config if config is not None else ConfigManager().LoadConfig()
        ConfigureLogging(app_config.log_level)

        client = http_client if http_client is not None else OpenCloudHttpClient(
            api_key=app_config.api_key,
            timeout_seconds=app_config.request_timeout_seconds,
            max_retries=app_config.max_retries,
            backoff_base_seconds=app_config.backoff_base_seconds
        )

        logger.info("Player Data Manager starting up...")

        app.state.config = app_config
        app.state.http_client = client

        if not app_config.AdminGateEnabled():
            logger.warning("ADMIN_TOKEN not set - write endpoints are unprotected")

        logger.info(f"Server startup complete (data store '{app_config.datastore_id}', scope '{app_config.scope}')")

        yield

        # Shutdown
        logger.info("Player Data Manager shutting down...")
        client.Close()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="Player Data Manager",
        description="Read and edit Roblox Open Cloud Data Store player entries",
        version="1.0.0",
        lifespan=lifespan
    )

    # ==================== CORS Middleware ====================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # ==================== Include Routers ====================

    from routes import status, player

    app.include_router(status.router)
    app.include_router(player.router)

    return app


# Module-level application for `uvicorn server:app`; configuration is loaded at startup
app = CreateApp()


# ==================== Main Entry Point ====================

def main():
    """
    Load configuration and run the server using uvicorn
    """
    try:
        config = ConfigManager().LoadConfig()
    except ConfigurationError as e:
        sys.exit(f"ERROR: {e}")

    ConfigureLogging(config.log_level)

    logger.info(f"Starting Player Data Manager on http://localhost:{config.port}")

    uvicorn.run(
        CreateApp(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
