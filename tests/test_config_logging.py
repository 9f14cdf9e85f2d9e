"""Tests for settings, logging setup and alert headers."""

import json
import logging

import pytest

from app.core import headers
from app.core.config import Settings
from app.core.logging import JsonFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    app_logger = logging.getLogger("app")
    saved_app_level = app_logger.level
    yield root
    app_logger.setLevel(saved_app_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("APPLICATION_NAME", raising=False)
    monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.APPLICATION_NAME == "propertyApp"
    assert settings.DEFAULT_PAGE_SIZE == 20
    assert settings.MAX_PAGE_SIZE == 2000


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("APPLICATION_NAME", "estateApp")
    monkeypatch.setenv("MAX_PAGE_SIZE", "50")
    settings = Settings(_env_file=None)
    assert settings.APPLICATION_NAME == "estateApp"
    assert settings.MAX_PAGE_SIZE == 50


def test_setup_logging_standard(restore_root_logger):
    setup_logging("DEBUG")
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_setup_logging_json(restore_root_logger):
    setup_logging("warning", format_type="json")
    assert restore_root_logger.level == logging.WARNING
    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)


def test_json_formatter_output():
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "saved %s", ("x",), None)
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "INFO"
    assert data["logger"] == "app.test"
    assert data["message"] == "saved x"


def test_failure_alert_headers():
    assert headers.create_failure_alert("propertyMoney", "idnull") == {
        "X-propertyApp-error": "error.idnull",
        "X-propertyApp-params": "propertyMoney",
    }
