"""
Basic logging configuration for the users API.

``setup_logging`` attaches a console handler (and optionally a file handler)
to the root logger. Calling it again is a no-op, so ``create_app`` can run
several times in one process (tests do this).
"""

import logging
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: str = "INFO", logfile: Optional[Union[str, Path]] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``). Case insensitive;
        unknown names fall back to ``INFO``.
    logfile : Optional[Union[str, Path]]
        Path of a file to also write log records to.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
