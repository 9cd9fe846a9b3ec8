"""Opt-in logging for the engine.

The package disables its own loguru records on import; applications that
want search and game-flow traces call ``setup_logging`` (or
``logger.enable("checkers_engine")`` with their own sinks).
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Union

from loguru import logger

PACKAGE = "checkers_engine"

CONSOLE_FORMAT = "<dim>{time:HH:mm:ss.SSS}</dim> <level>{level: <7}</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <7} {name} {message}"


def setup_logging(level: str = "INFO", log_file: Union[str, Path, None] = None) -> None:
    """Route engine records to stderr, and to ``log_file`` when given.

    Only records emitted from this package pass the sinks added here.
    """
    logger.remove()
    logger.enable(PACKAGE)

    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, filter=PACKAGE)
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(path, level=level, format=FILE_FORMAT, filter=PACKAGE)

    logger.debug(f"Engine logging enabled at {level}")
