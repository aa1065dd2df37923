"""Tests for the sample log generator."""

from pathlib import Path

import pytest

from scripts.generate_sample_log import generate_entries, generate_sample_log
from src.analytics.access_aggregator import AccessAggregator
from src.ingest.logfile_reader import LogfileReader


class TestGenerateEntries:
    """Tests for random entry generation."""

    def test_count_and_order(self) -> None:
        """The requested number of entries comes back sorted."""
        entries = generate_entries(50)
        assert len(entries) == 50
        assert entries == sorted(entries)

    def test_values_within_domains(self) -> None:
        """Generated values stay inside the bucket domains."""
        entries = generate_entries(500, day_count=28)
        assert all(0 <= e.hour <= 23 for e in entries)
        assert all(1 <= e.day <= 28 for e in entries)
        assert all(1 <= e.month <= 12 for e in entries)
        assert all(0 <= e.minute <= 59 for e in entries)

    def test_seeded(self) -> None:
        """The same seed yields the same entries."""
        assert generate_entries(20, seed=7) == generate_entries(20, seed=7)


@pytest.mark.integration
class TestGenerateSampleLog:
    """Tests for writing and aggregating a generated log."""

    def test_round_trip_through_aggregator(self, tmp_path: Path) -> None:
        """A generated file aggregates with consistent totals."""
        output = tmp_path / "sample" / "weblog.txt"
        path = generate_sample_log(str(output), num_entries=200)
        assert Path(path).exists()

        reader = LogfileReader.from_file(path)
        assert reader.skipped_lines == 0
        aggregator = AccessAggregator(reader)
        assert aggregator.run_aggregation_pass() == 200
        assert int(aggregator.daily_counts().sum()) == 200
        assert aggregator.average_accesses_per_month() == 200 / 12.0
