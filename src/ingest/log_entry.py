"""Parsed web server access log entries.

Each log line records one access as whitespace-separated integers:
``year month day hour minute``. Additional trailing fields are ignored.
"""

from dataclasses import dataclass

FIELD_NAMES = ("year", "month", "day", "hour", "minute")


@dataclass(frozen=True, order=True)
class LogEntry:
    """A single access record.

    Field order makes entries sort chronologically.

    Attributes:
        year: Calendar year of the access.
        month: Month of the year, 1-based.
        day: Day of the month, 1-based.
        hour: Hour of the day, 0-23.
        minute: Minute of the hour, 0-59.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int

    @classmethod
    def from_line(cls, line: str) -> "LogEntry":
        """Parse a log line into an entry.

        Args:
            line: Raw log line, e.g. ``"2015 06 14 09 41"``.

        Returns:
            The parsed LogEntry.

        Raises:
            ValueError: If the line has fewer than five fields or a field
                is not an integer.
        """
        tokens = line.split()
        if len(tokens) < len(FIELD_NAMES):
            raise ValueError(
                f"Expected {len(FIELD_NAMES)} fields, got {len(tokens)}: {line!r}"
            )
        try:
            values = [int(token) for token in tokens[: len(FIELD_NAMES)]]
        except ValueError as exc:
            raise ValueError(f"Non-integer field in log line: {line!r}") from exc
        return cls(*values)

    def to_line(self) -> str:
        """Format the entry in the log line layout."""
        return (
            f"{self.year} {self.month:02d} {self.day:02d} "
            f"{self.hour:02d} {self.minute:02d}"
        )
