"""Tests for md2html.utils module."""

import logging

from md2html.utils import VERSION, logger, setup_logging


class TestSetupLogging:

    def test_default_level_info(self):
        setup_logging()
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_verbose_level_debug(self):
        setup_logging(verbose=True)
        assert logger.level == logging.DEBUG

    def test_no_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logger.handlers) == 1


def test_version_is_string():
    assert isinstance(VERSION, str) and VERSION
