"""Hourly, daily and monthly access statistics.

Drains an entry source once into three count buckets and answers every
query from those buckets. The source is never read again for a query.
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional

import numpy as np

from src.analytics.count_bucket import CountBucket
from src.analytics.errors import OutOfRangeError, SourceAlreadyConsumedError
from src.ingest.log_entry import LogEntry
from src.ingest.logfile_reader import LogfileReader
from src.utils.config import DEFAULT_DAY_BUCKET_COUNT, AnalyzerConfig, AppConfig
from src.utils.logger import configure_logging

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24
MONTHS_PER_YEAR = 12


class AccessAggregator:
    """Aggregates access log entries into hour, day and month counts.

    A pass either completes and replaces all three buckets at once, or
    fails and leaves them exactly as they were. Sources that expose
    ``reset()`` can be aggregated again; any other source supports one
    pass only. Sources are read with Python iteration, so a cursor needs
    ``__iter__``; ``has_next()``/``next()`` alone are not enough.

    Args:
        source: Iterable of entries exposing ``hour``, ``day`` and ``month``.
        day_bucket_count: Number of day-of-month buckets. Days outside
            ``1..day_bucket_count`` are rejected.
    """

    def __init__(
        self,
        source: Iterable[LogEntry],
        day_bucket_count: int = DEFAULT_DAY_BUCKET_COUNT,
    ) -> None:
        self.source = source
        self.day_bucket_count = day_bucket_count
        self.hour_bucket, self.day_bucket, self.month_bucket = self._new_buckets()
        self._source_consumed = False

    @classmethod
    def from_logfile(
        cls,
        path: str,
        config: Optional[AnalyzerConfig] = None,
        encoding: Optional[str] = "utf-8",
    ) -> "AccessAggregator":
        """Create an aggregator reading from a log file.

        Args:
            path: Path to the access log.
            config: Optional analyzer settings; defaults apply when omitted.
            encoding: Text encoding of the log file.

        Returns:
            Aggregator with a rewindable LogfileReader source.
        """
        config = config or AnalyzerConfig()
        reader = LogfileReader.from_file(path, encoding=encoding)
        return cls(reader, day_bucket_count=config.day_bucket_count)

    @classmethod
    def from_config(cls, config: AppConfig) -> "AccessAggregator":
        """Create an aggregator from a full application config.

        Sets up the ``src`` package logger from the logging section, then
        reads the configured log file.

        Args:
            config: Loaded application configuration.

        Returns:
            Aggregator over ``config.logfile.path``.
        """
        configure_logging(config.logging)
        logger.info("Reading access log %s", config.logfile.path)
        return cls.from_logfile(
            config.logfile.path,
            config=config.analyzer,
            encoding=config.logfile.encoding,
        )

    def _new_buckets(self) -> tuple[CountBucket, CountBucket, CountBucket]:
        return (
            CountBucket("hour", HOURS_PER_DAY, offset=0),
            CountBucket("day", self.day_bucket_count, offset=1),
            CountBucket("month", MONTHS_PER_YEAR, offset=1),
        )

    def run_aggregation_pass(self) -> int:
        """Consume the source and rebuild all counts.

        Returns:
            Number of entries processed.

        Raises:
            SourceAlreadyConsumedError: If a previous pass drained a source
                that has no ``reset()``.
            OutOfRangeError: If an entry's hour, day or month is outside its
                bucket. Counts from before the pass are kept.
        """
        if self._source_consumed:
            reset = getattr(self.source, "reset", None)
            if not callable(reset):
                raise SourceAlreadyConsumedError(
                    "Entry source was consumed by an earlier pass and cannot be reset"
                )
            logger.debug("Resetting entry source for a new pass")
            reset()

        hours, days, months = self._new_buckets()
        self._source_consumed = True
        processed = 0
        logger.info("Starting aggregation pass")

        for entry in self.source:
            try:
                indexes = (
                    hours.index_for(entry.hour),
                    days.index_for(entry.day),
                    months.index_for(entry.month),
                )
            except OutOfRangeError as exc:
                logger.error("Aggregation failed at entry %d: %s", processed + 1, exc)
                raise
            hours.increment(indexes[0])
            days.increment(indexes[1])
            months.increment(indexes[2])
            processed += 1

        self.hour_bucket, self.day_bucket, self.month_bucket = hours, days, months
        logger.info("Aggregation pass complete: %d entries", processed)
        return processed

    def total_entries_processed(self) -> int:
        return self.hour_bucket.total()

    def extreme_hour(self, select_max: bool) -> int:
        return self.hour_bucket.extremum(select_max)

    def busiest_hour(self) -> int:
        """Return the hour (0-23) with the most accesses."""
        return self.extreme_hour(True)

    def quietest_hour(self) -> int:
        """Return the hour (0-23) with the fewest accesses."""
        return self.extreme_hour(False)

    def busiest_two_hour_window(self) -> int:
        """Return the starting hour (0-22) of the busiest two-hour period."""
        return self.hour_bucket.busiest_window(2)

    def extreme_day(self, select_max: bool) -> int:
        return self.day_bucket.extremum(select_max)

    def busiest_day(self) -> int:
        """Return the day of the month with the most accesses."""
        return self.extreme_day(True)

    def quietest_day(self) -> int:
        """Return the day of the month with the fewest accesses."""
        return self.extreme_day(False)

    def extreme_month(self, select_max: bool) -> int:
        return self.month_bucket.extremum(select_max)

    def busiest_month(self) -> int:
        """Return the month (1-12) with the most accesses."""
        return self.extreme_month(True)

    def quietest_month(self) -> int:
        """Return the month (1-12) with the fewest accesses."""
        return self.extreme_month(False)

    def hourly_counts(self) -> np.ndarray:
        return self.hour_bucket.counts

    def daily_counts(self) -> np.ndarray:
        return self.day_bucket.counts

    def monthly_totals(self) -> np.ndarray:
        """Return the read-only access counts for months 1-12."""
        return self.month_bucket.counts

    def average_accesses_per_month(self) -> float:
        """Return the mean accesses per calendar month.

        Always divides by 12, including months with no accesses.
        """
        return self.month_bucket.total() / len(self.month_bucket)

    def summary(self) -> dict[str, Any]:
        """Collect every statistic into a JSON-serializable dictionary."""
        return {
            "total_entries": self.total_entries_processed(),
            "hourly_counts": self.hourly_counts().tolist(),
            "daily_counts": self.daily_counts().tolist(),
            "monthly_totals": self.monthly_totals().tolist(),
            "busiest_hour": self.busiest_hour(),
            "quietest_hour": self.quietest_hour(),
            "busiest_two_hour_window": self.busiest_two_hour_window(),
            "busiest_day": self.busiest_day(),
            "quietest_day": self.quietest_day(),
            "busiest_month": self.busiest_month(),
            "quietest_month": self.quietest_month(),
            "average_accesses_per_month": self.average_accesses_per_month(),
        }
