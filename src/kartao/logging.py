"""Logging configuration for kartao."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# uvicorn is started with log_config=None, so its loggers share our handlers.
LOGGER_NAMES = ("kartao", "uvicorn")


def _level_for(verbose: int) -> int:
    """Map a -v count to a level; a log file alone logs at INFO."""
    return logging.DEBUG if verbose >= 2 else logging.INFO


def _build_handlers(verbose: int, log_file: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    return handlers


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Send kartao and server logs to stderr and/or a file.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    handlers = _build_handlers(verbose, log_file)
    if not handlers:
        return

    level = _level_for(verbose)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in handlers:
            logger.addHandler(handler)

    started = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logging.getLogger("kartao").info(
        "kartao starting | %s | level=%s", started, logging.getLevelName(level)
    )
