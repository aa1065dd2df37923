"""Generate a synthetic access log for testing and demonstration.

Writes random accesses in the ``year month day hour minute`` line format,
sorted chronologically.
"""

from pathlib import Path

import numpy as np

from src.ingest.log_entry import LogEntry


def generate_entries(
    num_entries: int = 100,
    year: int = 2015,
    day_count: int = 28,
    seed: int = 42,
) -> list[LogEntry]:
    """Create random log entries within a single year.

    Args:
        num_entries: Number of entries to create.
        year: Year stamped on every entry.
        day_count: Days are drawn from ``1..day_count``.
        seed: Seed for the random generator.

    Returns:
        Entries in chronological order.
    """
    rng = np.random.RandomState(seed)
    months = rng.randint(1, 13, size=num_entries)
    days = rng.randint(1, day_count + 1, size=num_entries)
    hours = rng.randint(0, 24, size=num_entries)
    minutes = rng.randint(0, 60, size=num_entries)
    entries = [
        LogEntry(year, int(m), int(d), int(h), int(mi))
        for m, d, h, mi in zip(months, days, hours, minutes)
    ]
    return sorted(entries)


def generate_sample_log(
    output_path: str = "data/sample/weblog.txt",
    num_entries: int = 100,
    year: int = 2015,
    day_count: int = 28,
    seed: int = 42,
) -> str:
    """Write a synthetic access log file.

    Args:
        output_path: Path for the output log file.
        num_entries: Number of lines to write.
        year: Year stamped on every entry.
        day_count: Days are drawn from ``1..day_count``.
        seed: Seed for the random generator.

    Returns:
        Path to the generated log file.
    """
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    entries = generate_entries(num_entries, year=year, day_count=day_count, seed=seed)
    with open(output_path, "w") as f:
        for entry in entries:
            f.write(entry.to_line() + "\n")
    return output_path


if __name__ == "__main__":
    path = generate_sample_log()
    print(f"Sample log generated: {path}")
