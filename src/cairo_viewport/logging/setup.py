from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "cairo_viewport"


def configure_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Send package log records to a rich console and, optionally, a file.

    The file handler always records at DEBUG level. Calling this again
    replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, "_cairo_viewport", False)]:
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(console=console, show_path=False)
    rich_handler.setLevel(level)
    rich_handler._cairo_viewport = True
    logger.addHandler(rich_handler)

    logger.setLevel(level)
    if log_file is not None:
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s [%(name)s]\n%(message)s\n"))
        fh._cairo_viewport = True
        logger.addHandler(fh)
        logger.setLevel(logging.DEBUG)

    return logger
