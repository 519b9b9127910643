"""
Shared fixtures for Player Data Manager tests
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from http_client import OpenCloudHttpClient
from models.infrastructure import AppConfig
from fakes import FakeSession


@pytest.fixture
def config():
    return AppConfig(
        api_key="test-api-key",
        universe_id="1234",
        datastore_id="PlayerData",
        scope="global"
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def sleeps():
    """Delays requested by the HTTP client between attempts"""
    return []


@pytest.fixture
def http_client(session, sleeps):
    return OpenCloudHttpClient(
        api_key="test-api-key",
        timeout_seconds=10,
        max_retries=2,
        backoff_base_seconds=0.25,
        session=session,
        sleep=sleeps.append
    )
