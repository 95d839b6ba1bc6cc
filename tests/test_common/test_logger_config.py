"""Tests for logging configuration, settings and exceptions."""

import logging

import pytest
from rich.logging import RichHandler

from resource_attributes.common.config.settings import Settings, settings
from resource_attributes.common.exceptions.custom_exceptions import ApplicationError, AttributeValidationError
from resource_attributes.common.logger_config import setup_logging


@pytest.fixture
def restore_root_logger():
    """Restores the root logger handlers and level after a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers = handlers
    root_logger.setLevel(level)


def test_setup_logging_installs_single_rich_handler(restore_root_logger) -> None:
    setup_logging()
    setup_logging()

    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], RichHandler)
    assert restore_root_logger.level == logging.DEBUG  # from the autouse settings fixture


def test_setup_logging_unknown_level_falls_back_to_info(mocker, restore_root_logger) -> None:
    mocker.patch.object(settings, "LOG_LEVEL", "chatty")
    setup_logging()
    assert restore_root_logger.level == logging.INFO


def test_settings_read_log_level_from_environment() -> None:
    assert isinstance(Settings.LOG_LEVEL, str)


def test_application_error_str_includes_original() -> None:
    original = ValueError("boom")
    error = ApplicationError("Something failed", original_exception=original)

    assert str(error) == "Something failed (Original error: boom)"
    assert str(ApplicationError()) == "An application error occurred"


def test_attribute_validation_error_carries_reason() -> None:
    error = AttributeValidationError("no attribute value set", reason=AttributeValidationError.NO_VALUE)

    assert error.reason == "no_value"
    assert error.message == "no attribute value set"
    assert isinstance(error, ApplicationError)
