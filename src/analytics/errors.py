"""Exceptions raised by the access aggregation engine."""


class AggregationError(Exception):
    """Base class for aggregation failures."""


class OutOfRangeError(AggregationError, ValueError):
    """An entry value falls outside the domain of its count bucket.

    Args:
        field: Name of the offending field (``hour``, ``day`` or ``month``).
        value: The rejected value.
        lower: Smallest valid value.
        upper: Largest valid value.
    """

    def __init__(self, field: str, value: object, lower: int, upper: int) -> None:
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f"{field} {value!r} outside valid range {lower}..{upper}")


class SourceAlreadyConsumedError(AggregationError, RuntimeError):
    """A second pass was requested over a source that cannot be rewound."""
