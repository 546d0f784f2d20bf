"""
Tests for logging setup.
"""

import logging

from rich.logging import RichHandler

from shared.log import configure_logging


def test_configure_logging_installs_rich_handler():
    configure_logging("debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, RichHandler) for handler in root.handlers)

    configure_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING
