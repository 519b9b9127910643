"""
Player Data Manager - Configuration Manager

Handles loading server configuration from environment variables,
optionally seeded from a .env file next to the working directory.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values

from exceptions import ConfigurationError
from models.infrastructure import AppConfig

# Configure logging
logger = logging.getLogger(__name__)


# Default configuration values (keys are environment variable names)
DEFAULT_CONFIG = {
    "SCOPE": "global",
    "HOST": "0.0.0.0",
    "PORT": "3000",
    "ADMIN_TOKEN": "",  # Empty disables the write gate
    "REQUEST_TIMEOUT_SECONDS": "10",
    "MAX_RETRIES": "2",
    "LOG_LEVEL": "INFO"
}

REQUIRED_KEYS = ["ROBLOX_API_KEY", "UNIVERSE_ID", "DATASTORE_ID"]

# Marker left in the sample .env file
PLACEHOLDER_MARKER = "PASTE"


class ConfigManager:
    """
    Manages server configuration.

    Responsibilities:
    - Merge defaults, the .env file and the process environment (in that order)
    - Validate required keys and numeric values
    - Produce the immutable AppConfig used by the rest of the server
    """

    def __init__(self, env_file: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration manager.

        Args:
            env_file: Path to .env file (defaults to .env in the working directory)
            environ: Environment mapping (defaults to os.environ)
        """
        self.env_file = env_file if env_file is not None else Path.cwd() / ".env"
        self.environ = environ if environ is not None else os.environ
        self.config: Dict[str, Any] = {}

    def LoadValues(self) -> Dict[str, Any]:
        """
        Load raw configuration values.

        Returns:
            Configuration dictionary keyed by environment variable name
        """
        self.config = DEFAULT_CONFIG.copy()

        if self.env_file.exists():
            logger.debug(f"Loading environment file {self.env_file}")
            for key, value in dotenv_values(self.env_file).items():
                if value is not None:
                    self.config[key] = value
        else:
            logger.debug(f"No environment file at {self.env_file}")

        # Real environment variables win over the .env file
        for key in list(DEFAULT_CONFIG) + REQUIRED_KEYS:
            if key in self.environ:
                self.config[key] = self.environ[key]

        return self.config

    def Get(self, key: str, default=None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)

    def LoadConfig(self) -> AppConfig:
        """
        Load and validate configuration.

        Returns:
            AppConfig instance

        Raises:
            ConfigurationError: If a required value is missing or a numeric value is invalid
        """
        self.LoadValues()

        api_key = (self.Get("ROBLOX_API_KEY") or "").strip()
        if not api_key or PLACEHOLDER_MARKER in api_key:
            raise ConfigurationError("Set ROBLOX_API_KEY in .env")

        universe_id = (self.Get("UNIVERSE_ID") or "").strip()
        datastore_id = (self.Get("DATASTORE_ID") or "").strip()
        if not universe_id or not datastore_id:
            raise ConfigurationError("Set UNIVERSE_ID and DATASTORE_ID in .env")

        config = AppConfig(
            api_key=api_key,
            universe_id=universe_id,
            datastore_id=datastore_id,
            scope=self.Get("SCOPE") or DEFAULT_CONFIG["SCOPE"],
            admin_token=self.Get("ADMIN_TOKEN") or "",
            host=self.Get("HOST") or DEFAULT_CONFIG["HOST"],
            port=self._ParseNumber("PORT", int),
            request_timeout_seconds=self._ParseNumber("REQUEST_TIMEOUT_SECONDS", float),
            max_retries=self._ParseNumber("MAX_RETRIES", int),
            log_level=(self.Get("LOG_LEVEL") or DEFAULT_CONFIG["LOG_LEVEL"]).upper()
        )

        if config.max_retries < 0:
            raise ConfigurationError("MAX_RETRIES must not be negative")

        logger.info(f"Configuration loaded: {config!r}")
        return config

    def _ParseNumber(self, key: str, cast):
        raw = self.Get(key) or DEFAULT_CONFIG[key]
        try:
            return cast(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{key} must be a number, got {raw!r}")
