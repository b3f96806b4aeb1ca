"""Logging initialization utilities using loguru."""

from __future__ import annotations

from pathlib import Path
import sys

from loguru import logger


def get_log_directory() -> str:
    """Get the default log directory path."""
    return str(Path.home() / ".photo-prefixer" / "logs")


def init_logging(log_dir: str | None = None, level: str = "INFO", verbose: bool = False) -> None:
    """Initialize rotating file logging under the given directory.

    With `verbose`, DEBUG records are also written to stderr.
    """
    if log_dir is None:
        log_dir = get_log_directory()
    log_path = Path(log_dir).expanduser()
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        str(log_path / "app_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        backtrace=False,
        diagnose=False,
        level=level.upper(),
    )
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format="{level: <8} | {message}")
