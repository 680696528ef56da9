"""
Rich console logging for interactive use (scripts, notebooks, local debugging).
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .logger import _level


def create_rich_handler(console: Optional[Console] = None) -> RichHandler:
    """Create a RichHandler with reportpdf's formatting."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(level: str = "INFO", console: Optional[Console] = None) -> logging.Logger:
    """
    Route root logging through rich.

    Args:
        level: Log level
        console: Optional rich Console (default: stderr)

    Returns:
        The configured root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_level(level))
    root_logger.handlers.clear()
    root_logger.addHandler(create_rich_handler(console))
    return root_logger
