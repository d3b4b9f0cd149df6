"""
Logging setup for the terminal front-end.

Modules log through logging.getLogger(__name__); the CLI calls
setup_logging() once so records are rendered by rich on stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "calview"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a RichHandler to the package logger (idempotent).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
