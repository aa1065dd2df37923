"""Fixed-size count buckets with extremum scans.

A bucket holds one counter per discrete time unit (hour of day, day of
month, month of year) and answers the busiest/quietest queries shared by
all three.
"""

import logging
from numbers import Integral

import numpy as np

from src.analytics.errors import OutOfRangeError

logger = logging.getLogger(__name__)


class CountBucket:
    """Fixed-length array of non-negative counts indexed by a time unit.

    Unit values map to slots by subtracting ``offset``: hours use offset 0,
    days and months use offset 1.

    Args:
        name: Unit name used in error messages.
        size: Number of slots.
        offset: Unit value stored in slot 0.

    Raises:
        ValueError: If ``size`` is smaller than 1.
    """

    def __init__(self, name: str, size: int, offset: int = 0) -> None:
        if size < 1:
            raise ValueError(f"{name} bucket size must be at least 1, got {size}")
        self.name = name
        self.size = size
        self.offset = offset
        self._counts = np.zeros(size, dtype=np.int64)

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return (
            f"CountBucket(name={self.name!r}, size={self.size}, total={self.total()})"
        )

    @property
    def lower(self) -> int:
        return self.offset

    @property
    def upper(self) -> int:
        return self.offset + self.size - 1

    @property
    def counts(self) -> np.ndarray:
        """Read-only snapshot of the slot counts.

        The snapshot does not share memory with the bucket.
        """
        snapshot = self._counts.copy()
        snapshot.flags.writeable = False
        return snapshot

    def index_for(self, value: int) -> int:
        """Map a unit value to its slot index.

        Args:
            value: Hour, day or month value as reported by a log entry.

        Returns:
            Zero-based slot index.

        Raises:
            OutOfRangeError: If the value is not an integer within
                ``lower..upper``.
        """
        if (
            isinstance(value, bool)
            or not isinstance(value, Integral)
            or not self.lower <= value <= self.upper
        ):
            raise OutOfRangeError(self.name, value, self.lower, self.upper)
        return int(value) - self.offset

    def increment(self, index: int) -> None:
        self._counts[index] += 1

    def total(self) -> int:
        return int(self._counts.sum())

    def extremum_index(self, select_max: bool = True) -> int:
        """Return the slot holding the largest (or smallest) count.

        Ties resolve to the lowest index, so an all-equal bucket yields 0.

        Args:
            select_max: Search for the maximum when True, the minimum otherwise.

        Returns:
            Zero-based slot index.
        """
        # argmax/argmin return the first occurrence
        if select_max:
            return int(np.argmax(self._counts))
        return int(np.argmin(self._counts))

    def extremum(self, select_max: bool = True) -> int:
        """Return the unit value of the busiest (or quietest) slot."""
        return self.extremum_index(select_max) + self.offset

    def busiest_window(self, width: int) -> int:
        """Return the unit value starting the busiest run of ``width`` slots.

        Args:
            width: Number of contiguous slots per window.

        Returns:
            Unit value of the first slot of the window with the largest sum.
            Ties resolve to the earliest window.

        Raises:
            ValueError: If ``width`` is not within ``1..size``.
        """
        if not 1 <= width <= self.size:
            raise ValueError(
                f"Window width must be between 1 and {self.size}, got {width}"
            )
        sums = np.convolve(self._counts, np.ones(width, dtype=np.int64), mode="valid")
        return int(np.argmax(sums)) + self.offset
