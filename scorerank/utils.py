"""
Shared utilities for the score ranking tool.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import shutil
import tempfile
from pathlib import Path

from scorerank.config import FILE_ENCODING, MIN_RANK_LIMIT


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int | None = None) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Handlers write to stderr so that stdout only ever carries the leaderboard.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: leave the current level untouched)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)
    return logger


def set_log_level(level: int) -> None:
    """Set the package logger level; module loggers inherit it."""
    logging.getLogger("scorerank").setLevel(level)


# --- File Operations ---
def atomic_write_text(text: str, path: Path) -> None:
    """
    Write text to a file atomically using a temporary file.

    This prevents a truncated leaderboard if the write is interrupted.

    Args:
        text: Content to write
        path: Destination path
    """
    logger = setup_logging(__name__)
    path = Path(path)

    # Ensure parent directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding=FILE_ENCODING,
            newline='',
            delete=False,
            suffix=path.suffix or '.tmp',
            dir=path.parent  # Same filesystem for atomic move
        ) as tmp:
            tmp.write(text)
            tmp_path = Path(tmp.name)

        shutil.move(str(tmp_path), str(path))
        logger.debug(f"Atomically wrote {len(text)} characters to {path}")

    except Exception:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


# --- Validation ---
def validate_rank_limit(limit: int) -> None:
    """
    Validate that a rank limit allows at least one rank position.

    Args:
        limit: Number of distinct rank positions to emit

    Raises:
        ValueError: If limit is not an integer >= MIN_RANK_LIMIT
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValueError(f"Invalid rank limit: {limit!r}. Must be an integer")
    if limit < MIN_RANK_LIMIT:
        raise ValueError(
            f"Invalid rank limit: {limit}. "
            f"Must be at least {MIN_RANK_LIMIT}"
        )


__all__ = [
    # Logging
    'setup_logging',
    'set_log_level',
    # File operations
    'atomic_write_text',
    # Validation
    'validate_rank_limit',
]
