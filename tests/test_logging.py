"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from src.po2csv.config import ConverterConfig
from src.po2csv.utils.logging import setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def test_rich_console_handler():
    setup_logging(level="DEBUG")

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], RichHandler)


def test_plain_handler_and_unknown_level():
    setup_logging(level="chatty", use_rich=False)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO
    assert not isinstance(root_logger.handlers[0], RichHandler)


def test_from_config_writes_log_file(tmp_path):
    log_path = tmp_path / "logs" / "po2csv.log"
    config = ConverterConfig(log_level="WARNING", log_file=str(log_path))

    setup_logging_from_config(config)
    logging.getLogger("po2csv.test").warning("converted nothing")
    logging.getLogger("po2csv.test").info("not written")

    for handler in logging.getLogger().handlers:
        handler.flush()
    text = log_path.read_text(encoding="utf-8")
    assert "converted nothing" in text
    assert "not written" not in text


def test_from_config_level_override():
    setup_logging_from_config(ConverterConfig(log_level="WARNING"), level="DEBUG")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
