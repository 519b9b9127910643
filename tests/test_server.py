"""
Tests for application startup and logging configuration
"""

import logging

from fastapi.testclient import TestClient

import server
from server import ConfigureLogging, CreateApp


def test_lifespan_configures_logging(config, http_client, monkeypatch):
    """Test startup configures logging with the configured level"""
    levels = []
    monkeypatch.setattr(server, "ConfigureLogging", levels.append)

    with TestClient(CreateApp(config, http_client)):
        pass

    assert levels == ["INFO"]


def test_configure_logging_adds_handlers(tmp_path, monkeypatch):
    """Test console and rotating file handlers are installed on a bare root logger"""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    ConfigureLogging("WARNING", logs_dir=tmp_path / "logs")

    try:
        handler_types = [type(handler).__name__ for handler in root.handlers]
        assert handler_types == ["StreamHandler", "RotatingFileHandler"]
        assert root.level == logging.WARNING
        assert len(list((tmp_path / "logs").glob("player-data-manager-*.log"))) == 1
    finally:
        for handler in root.handlers:
            handler.close()


def test_configure_logging_keeps_existing_setup(tmp_path, monkeypatch):
    """Test an already configured root logger is left alone"""
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])

    ConfigureLogging("DEBUG", logs_dir=tmp_path / "logs")

    assert root.handlers == [existing]
    assert not (tmp_path / "logs").exists()
