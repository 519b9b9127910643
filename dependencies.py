"""
Player Data Manager - Request Dependencies

FastAPI dependencies that hand the configuration and the outbound HTTP
client built in the lifespan handler to route functions.
"""

from fastapi import Request

from http_client import OpenCloudHttpClient
from models.infrastructure import AppConfig


def GetAppConfig(request: Request) -> AppConfig:
    """Dependency returning the application configuration"""
    return request.app.state.config


def GetHttpClient(request: Request) -> OpenCloudHttpClient:
    """Dependency returning the shared outbound HTTP client"""
    return request.app.state.http_client
