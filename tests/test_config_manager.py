"""
Tests for configuration loading
"""

import pytest

from exceptions import ConfigurationError
from managers import ConfigManager

REQUIRED = {
    "ROBLOX_API_KEY": "key-123",
    "UNIVERSE_ID": "1234",
    "DATASTORE_ID": "PlayerData"
}


def test_defaults(tmp_path):
    """Test optional values fall back to defaults"""
    config = ConfigManager(env_file=tmp_path / ".env", environ=REQUIRED).LoadConfig()

    assert config.api_key == "key-123"
    assert config.universe_id == "1234"
    assert config.datastore_id == "PlayerData"
    assert config.scope == "global"
    assert config.port == 3000
    assert config.admin_token == ""
    assert not config.AdminGateEnabled()
    assert config.request_timeout_seconds == 10.0
    assert config.max_retries == 2
    assert config.log_level == "INFO"


def test_env_file_values(tmp_path):
    """Test values are read from the .env file"""
    env_file = tmp_path / ".env"
    env_file.write_text(
        "ROBLOX_API_KEY=file-key\n"
        "UNIVERSE_ID=99\n"
        "DATASTORE_ID=Saves\n"
        "SCOPE=beta\n"
        "PORT=8080\n"
        "ADMIN_TOKEN=s3cret\n"
    )

    config = ConfigManager(env_file=env_file, environ={}).LoadConfig()

    assert config.api_key == "file-key"
    assert config.universe_id == "99"
    assert config.datastore_id == "Saves"
    assert config.scope == "beta"
    assert config.port == 8080
    assert config.AdminGateEnabled()


def test_environment_overrides_env_file(tmp_path):
    """Test process environment variables win over the .env file"""
    env_file = tmp_path / ".env"
    env_file.write_text("ROBLOX_API_KEY=file-key\nUNIVERSE_ID=99\nDATASTORE_ID=Saves\nSCOPE=beta\n")

    config = ConfigManager(env_file=env_file, environ={"SCOPE": "global", "ROBLOX_API_KEY": "env-key"}).LoadConfig()

    assert config.scope == "global"
    assert config.api_key == "env-key"


@pytest.mark.parametrize("api_key", ["", "PASTE_YOUR_KEY_HERE"])
def test_missing_api_key(tmp_path, api_key):
    """Test a missing or placeholder API key is fatal"""
    environ = dict(REQUIRED, ROBLOX_API_KEY=api_key)

    with pytest.raises(ConfigurationError, match="ROBLOX_API_KEY"):
        ConfigManager(env_file=tmp_path / ".env", environ=environ).LoadConfig()


@pytest.mark.parametrize("missing", ["UNIVERSE_ID", "DATASTORE_ID"])
def test_missing_namespace(tmp_path, missing):
    """Test a missing universe or data store id is fatal"""
    environ = {key: value for key, value in REQUIRED.items() if key != missing}

    with pytest.raises(ConfigurationError, match="UNIVERSE_ID and DATASTORE_ID"):
        ConfigManager(env_file=tmp_path / ".env", environ=environ).LoadConfig()


def test_invalid_number(tmp_path):
    """Test non-numeric numeric settings are rejected"""
    environ = dict(REQUIRED, PORT="eighty")

    with pytest.raises(ConfigurationError, match="PORT"):
        ConfigManager(env_file=tmp_path / ".env", environ=environ).LoadConfig()


def test_negative_retries(tmp_path):
    """Test a negative retry budget is rejected"""
    environ = dict(REQUIRED, MAX_RETRIES="-1")

    with pytest.raises(ConfigurationError, match="MAX_RETRIES"):
        ConfigManager(env_file=tmp_path / ".env", environ=environ).LoadConfig()


def test_repr_hides_secrets(tmp_path):
    """Test the API key and admin token never appear in repr"""
    environ = dict(REQUIRED, ADMIN_TOKEN="s3cret")
    config = ConfigManager(env_file=tmp_path / ".env", environ=environ).LoadConfig()

    assert "key-123" not in repr(config)
    assert "s3cret" not in repr(config)
