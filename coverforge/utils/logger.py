"""
Logger setup shared by the API server and the CLI.

Console output always; a file sink is added when a log directory is given.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config import LOG_DIR, LOG_LEVEL

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    level: str = LOG_LEVEL,
) -> Optional[Path]:
    """
    Configure loguru for one entry point ("api", "cli").

    Args:
        context_name: Used as the log file name
        log_dir: Directory for the file sink; falls back to LOG_DIR, none if unset
        level: Console level

    Returns:
        Path to the log file, or None when only the console is used
    """
    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    log_dir = log_dir or (Path(LOG_DIR) if LOG_DIR else None)
    if log_dir is None:
        return None

    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"
    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )
    logger.debug(f"[{context_name}] Command: {' '.join(sys.argv)}")
    return log_file
