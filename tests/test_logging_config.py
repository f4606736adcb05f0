"""Tests for shortstring.logging_config."""
import logging

import pytest

from shortstring.logging_config import HANDLER_NAME, configure_logging


@pytest.fixture
def root_handler():
    handler = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(handler)
    yield handler
    root.removeHandler(handler)
    logging.getLogger("shortstring").handlers.clear()


class TestConfigureLogging:
    """Test handler setup."""

    def test_root_handlers_are_kept(self, root_handler):
        configure_logging(logging.DEBUG)
        assert root_handler in logging.getLogger().handlers

    def test_repeated_calls_keep_one_handler(self, root_handler):
        configure_logging(logging.DEBUG)
        logger = configure_logging(logging.INFO)
        names = [h.get_name() for h in logger.handlers]
        assert names.count(HANDLER_NAME) == 1
        assert logger.level == logging.INFO

    def test_debug_goes_to_stdout(self, root_handler, capsys):
        configure_logging("DEBUG")
        logging.getLogger("shortstring.alphanumeric.blocks").debug("rejected %r", "7XIZYK")
        out = capsys.readouterr().out
        assert "| DEBUG | shortstring.alphanumeric.blocks | rejected '7XIZYK'" in out
