"""Logging setup for web log analytics.

Console output plus an optional log file, all in one
``time | logger | level | message`` layout.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from src.utils.config import LoggingConfig

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "INFO",
) -> logging.Logger:
    """Create and configure a logger.

    Args:
        name: Logger name, typically the package name ``"src"`` so every
            module logger inherits the handlers.
        log_file: Optional path to a log file. Parent directories are
            created if missing.
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Returns:
        Configured logging.Logger instance. Loggers that already have
        handlers are returned unchanged.
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def configure_logging(config: LoggingConfig, name: str = "src") -> logging.Logger:
    """Set up the package logger from a LoggingConfig section."""
    return setup_logger(name, log_file=config.file, level=config.level)
