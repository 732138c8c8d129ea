"""Logging setup for interactive sessions.

The terminal belongs to the game, so the stderr sink only shows warnings
unless asked for more. A log file, when configured, records everything
from DEBUG up, including each tag written into a saved game.
"""

import sys
from pathlib import Path

from loguru import logger

STDERR_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    *,
    file_level: str = "DEBUG",
    rotation: str = "1 MB",
    retention: int = 5,
) -> None:
    """Route loguru output for a pinata session.

    Args:
        level: Minimum level shown on stderr.
        log_file: Optional log file. Parent directories are created.
        file_level: Minimum level written to the log file.
        rotation: Size at which the log file is rotated.
        retention: Number of rotated files to keep.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=STDERR_FORMAT, colorize=True)

    if not log_file:
        return

    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        path,
        level=file_level,
        format=FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
    )
    logger.debug(f"Logging to {path}")
