"""Utility modules for po2csv."""

from .config_loader import load_config, get_project_root
from .logging import setup_logging, setup_logging_from_config, get_logger

__all__ = [
    "load_config",
    "get_project_root",
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
]
