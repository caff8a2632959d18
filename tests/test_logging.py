"""Tests for logging setup"""
import logging

import pytest

from catalog.logging import configure_logging, get_logger, sanitize_id_for_logging


@pytest.mark.parametrize("value,expected", [
    (None, "N/A"),
    ("", "N/A"),
    ("0b9c2f4e-1d7a-4c55-9a3e-2f6d1c8b7a90", "0b9c2f4e"),
    ("ab\ncd\x00ef", "ab\\ncdef"),
    (583231, "583231"),
])
def test_sanitize_id(value, expected):
    """Test ids are cut short and kept on one line"""
    assert sanitize_id_for_logging(value) == expected


def test_get_logger_is_cached():
    """Test the same logger object is returned per name"""
    assert get_logger("catalog.test") is get_logger("catalog.test")
    assert get_logger("catalog.test").name == "catalog.test"


def test_configure_logging_idempotent():
    """Test repeated configuration does not stack handlers"""
    before = list(logging.getLogger().handlers)

    configure_logging("DEBUG")

    assert logging.getLogger().handlers == before


def test_http_client_loggers_quiet():
    """Test request-level client logging is suppressed"""
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
