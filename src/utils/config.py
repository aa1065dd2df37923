"""Configuration management for web log analytics.

Loads YAML configuration for the aggregation engine, the log file source
and application logging.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_DAY_BUCKET_COUNT = 28


@dataclass
class AnalyzerConfig:
    """Configuration for the access aggregator.

    ``day_bucket_count`` bounds valid days to ``1..day_bucket_count``;
    entries for later days are rejected as out of range.
    """

    day_bucket_count: int = DEFAULT_DAY_BUCKET_COUNT


@dataclass
class LogfileConfig:
    """Location of the access log."""

    path: str = "weblog.txt"
    encoding: str = "utf-8"


@dataclass
class LoggingConfig:
    """Configuration for application logging."""

    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    logfile: LogfileConfig = field(default_factory=LogfileConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: str) -> AppConfig:
    """Load application configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Populated AppConfig instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If ``analyzer.day_bucket_count`` is smaller than 1.
        yaml.YAMLError: If the file contains invalid YAML.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        logger.warning("Empty config file, using defaults")
        return AppConfig()

    config = AppConfig(
        analyzer=AnalyzerConfig(**(raw.get("analyzer") or {})),
        logfile=LogfileConfig(**(raw.get("logfile") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )

    day_count = config.analyzer.day_bucket_count
    if isinstance(day_count, bool) or not isinstance(day_count, int) or day_count < 1:
        raise ValueError(
            f"analyzer.day_bucket_count must be a positive integer, got {day_count!r}"
        )

    logger.info("Configuration loaded from %s", config_path)
    return config
