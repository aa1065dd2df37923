"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
import yaml

from src.utils.config import (
    AnalyzerConfig,
    AppConfig,
    LogfileConfig,
    load_config,
)

ROOT = Path(__file__).parent.parent


@pytest.fixture
def valid_config_file(tmp_path: Path) -> Path:
    """Create a temporary valid config YAML file."""
    config = {
        "analyzer": {"day_bucket_count": 31},
        "logfile": {"path": "data/access.log", "encoding": "latin-1"},
        "logging": {"level": "DEBUG", "file": "logs/app.log"},
    }
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump(config))
    return config_path


class TestLoadConfig:
    """Tests for the load_config function."""

    def test_load_valid_config(self, valid_config_file: Path) -> None:
        """Valid YAML config loads correctly into AppConfig."""
        config = load_config(str(valid_config_file))
        assert isinstance(config, AppConfig)
        assert config.analyzer.day_bucket_count == 31
        assert config.logfile.path == "data/access.log"
        assert config.logfile.encoding == "latin-1"
        assert config.logging.level == "DEBUG"
        assert config.logging.file == "logs/app.log"

    def test_load_config_defaults(self, tmp_path: Path) -> None:
        """Empty YAML file produces default AppConfig values."""
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")
        config = load_config(str(config_path))
        assert config.analyzer.day_bucket_count == 28
        assert config.logfile.path == "weblog.txt"
        assert config.logging.file is None

    def test_load_config_missing_file(self) -> None:
        """Missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_load_config_partial(self, tmp_path: Path) -> None:
        """Config with only some sections uses defaults for the rest."""
        config_path = tmp_path / "partial.yaml"
        config_path.write_text(yaml.dump({"analyzer": {"day_bucket_count": 30}}))
        config = load_config(str(config_path))
        assert config.analyzer.day_bucket_count == 30
        assert config.logging.level == "INFO"

    @pytest.mark.parametrize("value", [0, -3, "many"])
    def test_invalid_day_bucket_count(self, tmp_path: Path, value: object) -> None:
        """Non-positive or non-integer day counts are rejected."""
        config_path = tmp_path / "bad.yaml"
        config_path.write_text(yaml.dump({"analyzer": {"day_bucket_count": value}}))
        with pytest.raises(ValueError, match="day_bucket_count"):
            load_config(str(config_path))

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        """Unknown keys in a section raise TypeError."""
        config_path = tmp_path / "typo.yaml"
        config_path.write_text(yaml.dump({"analyzer": {"days": 30}}))
        with pytest.raises(TypeError):
            load_config(str(config_path))

    def test_sample_config_matches_defaults(self) -> None:
        """The shipped sample config loads to the default values."""
        config = load_config(str(ROOT / "configs" / "config.yaml"))
        assert config == AppConfig()

    def test_default_dataclasses(self) -> None:
        """Section dataclass defaults are correct."""
        assert AnalyzerConfig().day_bucket_count == 28
        assert LogfileConfig().encoding == "utf-8"
