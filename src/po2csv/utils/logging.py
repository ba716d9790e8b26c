"""Logging setup for the po2csv CLI and server."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.logging import RichHandler

from .config_loader import get_project_root

if TYPE_CHECKING:
    from ..config import ConverterConfig

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers that are too chatty at INFO while converting
QUIET_LOGGERS = ("uvicorn.access", "httpx")


def _console_handler(use_rich: bool) -> logging.Handler:
    """Log handler writing to stderr, so CSV previews on stdout stay clean."""
    if use_rich:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def _log_file_path(log_file: str | Path) -> Path:
    """Relative log files go under <project root>/logs."""
    log_path = Path(log_file)
    if not log_path.is_absolute():
        log_path = get_project_root() / "logs" / log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return log_path


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str | Path] = None,
    use_rich: bool = True,
) -> None:
    """Configure the root logger, replacing any handlers already installed.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional log file, relative to the logs directory
        use_rich: Whether to use rich formatting for console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    handlers = [_console_handler(use_rich)]
    if log_file:
        file_handler = logging.FileHandler(_log_file_path(log_file), encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def setup_logging_from_config(
    config: "ConverterConfig",
    level: Optional[str] = None,
) -> None:
    """Configure logging from the logging section of a converter config.

    Args:
        config: Loaded converter configuration
        level: Level override, e.g. from a --log-level option
    """
    setup_logging(level=level or config.log_level, log_file=config.log_file)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (typically __name__)."""
    return logging.getLogger(name)
