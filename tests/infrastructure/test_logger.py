"""Tests for the logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from grocery.infrastructure.logger import setup_logger


@pytest.fixture
def logger_name(request):
    name = f"grocery.test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSetupLogger:

    def test_console_handler_only(self, logger_name):
        logger = setup_logger(logger_name, logging.INFO)
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert not isinstance(logger.handlers[0], RotatingFileHandler)

    def test_second_call_adds_no_handlers(self, logger_name):
        setup_logger(logger_name, logging.INFO)
        logger = setup_logger(logger_name, "DEBUG")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_file_handler_when_log_file_given(self, logger_name, tmp_path):
        log_file = tmp_path / "logs" / "grocery.log"
        logger = setup_logger(logger_name, logging.INFO, log_file)

        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(logger.handlers) == 2
        assert len(file_handlers) == 1

        logger.info("Added product P1")
        file_handlers[0].flush()
        text = log_file.read_text(encoding="utf-8")
        assert "INFO - Added product P1" in text
        assert logger_name in text
