"""
Player Data Manager - Application Configuration Model

Immutable configuration built once at startup and passed explicitly
to the HTTP client, entry locator and admin gate.
"""

from dataclasses import dataclass


DEFAULT_CLOUD_BASE_URL = "https://apis.roblox.com/cloud/v2"
DEFAULT_USERS_BASE_URL = "https://users.roblox.com"


@dataclass(frozen=True)
class AppConfig:
    """
    Application configuration

    The API key and admin token are excluded from repr so they never
    end up in log output.
    """
    api_key: str
    universe_id: str
    datastore_id: str
    scope: str = "global"
    admin_token: str = ""
    host: str = "0.0.0.0"
    port: int = 3000
    request_timeout_seconds: float = 10.0
    max_retries: int = 2
    backoff_base_seconds: float = 0.25
    log_level: str = "INFO"
    cloud_base_url: str = DEFAULT_CLOUD_BASE_URL
    users_base_url: str = DEFAULT_USERS_BASE_URL

    def __repr__(self) -> str:
        return (
            f"AppConfig(universe_id={self.universe_id!r}, datastore_id={self.datastore_id!r}, "
            f"scope={self.scope!r}, admin_gate={'on' if self.AdminGateEnabled() else 'off'}, "
            f"port={self.port})"
        )

    def AdminGateEnabled(self) -> bool:
        """Check if write endpoints require an admin token"""
        return bool(self.admin_token)
