"""Tests for stdlib logging setup."""

import logging

from roster.config import Settings
from roster.util.logging import setup_logging


def test_http_client_loggers_are_quieted():
    setup_logging(Settings(debug=True))

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
    assert logging.getLogger("roster").level == logging.DEBUG


def test_default_level_is_info():
    setup_logging(Settings(debug=False))

    assert logging.getLogger("roster").level == logging.INFO
