"""
Logging setup for the nescheck front end.

Library modules only create loggers (logging.getLogger(__name__)); handlers
are attached here, once, by whoever owns the process.

Console goes through rich (colour, rich tracebacks for crashed
implementations). An optional log file captures everything at DEBUG:

    2026-10-19 12:00:00 | DEBUG   | nes_conformance.runner | run_isolated:71 | ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "nes_conformance"

FILE_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    name: str = LOGGER_NAME,
    console_level: int = logging.WARNING,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configure and return the package logger.

    Calling it again replaces the handlers it installed before, so the CLI
    can be driven repeatedly from one process (tests do this).
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)

    # ── Console handler ──
    console = RichHandler(
        level=console_level,
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    console.setLevel(console_level)
    logger.addHandler(console)

    # ── File handler: captures everything (DEBUG+) ──
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(fh)
        logger.debug("Log file: %s", log_path)

    return logger
