"""Utility helpers (logging setup)."""

from .logger import configure_logging, get_logger
from .rich_logger import setup_logging

__all__ = ["configure_logging", "get_logger", "setup_logging"]
