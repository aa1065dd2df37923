"""Sequential, rewindable reader over access log entries.

Loads a whole log file up front, drops lines that do not parse, and hands
the entries out one at a time in chronological order.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from src.ingest.log_entry import LogEntry

logger = logging.getLogger(__name__)


class LogfileReader:
    """Cursor over the entries of an access log.

    Args:
        lines: Raw log lines.
        source_name: Label used in log messages.
    """

    def __init__(self, lines: Iterable[str], source_name: str = "<lines>") -> None:
        self.source_name = source_name
        self.skipped_lines = 0
        entries: list[LogEntry] = []
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                entries.append(LogEntry.from_line(line))
            except ValueError as exc:
                self.skipped_lines += 1
                logger.warning("Skipping %s line %d: %s", source_name, line_no, exc)
        entries.sort()
        self._entries = entries
        self._position = 0
        logger.debug(
            "Loaded %d entries from %s (%d skipped)",
            len(entries),
            source_name,
            self.skipped_lines,
        )

    @classmethod
    def from_file(cls, path: str, encoding: Optional[str] = "utf-8") -> "LogfileReader":
        """Read entries from a log file.

        Args:
            path: Path to the log file.
            encoding: Text encoding of the file.

        Returns:
            Reader positioned at the first entry.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        log_path = Path(path)
        if not log_path.exists():
            raise FileNotFoundError(f"Log file not found: {path}")
        with open(log_path, encoding=encoding) as f:
            return cls(f, source_name=str(log_path))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LogfileReader":
        return cls(lines)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> "LogfileReader":
        return self

    def __next__(self) -> LogEntry:
        if not self.has_next():
            raise StopIteration
        entry = self._entries[self._position]
        self._position += 1
        return entry

    def has_next(self) -> bool:
        return self._position < len(self._entries)

    def next(self) -> LogEntry:
        """Return the next entry.

        Raises:
            StopIteration: If every entry has been read.
        """
        return self.__next__()

    def reset(self) -> None:
        """Rewind to the first entry."""
        self._position = 0

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)
