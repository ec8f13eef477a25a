"""
Unit tests for generator configuration.
"""

import pytest

from gen_kit.config import GenConfig, get_config, reset_config
from gen_kit.utilities.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_SIZE,
    InvalidArgumentError,
)


class TestGenConfig:
    """Test cases for GenConfig."""

    def test_defaults(self):
        """Test default values."""
        config = GenConfig()
        assert config.default_size == DEFAULT_SIZE
        assert config.sample_count == DEFAULT_SAMPLE_COUNT
        assert config.max_retries == DEFAULT_MAX_RETRIES
        assert config.seed is None
        assert config.log_level == "WARNING"

    def test_validation(self):
        """Test invalid values are rejected."""
        with pytest.raises(InvalidArgumentError):
            GenConfig(default_size=-1)
        with pytest.raises(InvalidArgumentError):
            GenConfig(max_retries=0)
        with pytest.raises(InvalidArgumentError):
            GenConfig(seed="abc")
        with pytest.raises(InvalidArgumentError):
            GenConfig(log_level="LOUD")

    def test_log_level_normalized(self):
        """Test log levels are upper-cased."""
        assert GenConfig(log_level="debug").log_level == "DEBUG"

    def test_from_environment(self):
        """Test GEN_KIT_* variables override defaults."""
        config = GenConfig.from_environment(
            {
                "GEN_KIT_DEFAULT_SIZE": "20",
                "GEN_KIT_SAMPLE_COUNT": "3",
                "GEN_KIT_MAX_RETRIES": "50",
                "GEN_KIT_SEED": "0x2a",
                "GEN_KIT_LOG_LEVEL": "info",
            }
        )
        assert config.to_dict() == {
            "default_size": 20,
            "sample_count": 3,
            "max_retries": 50,
            "seed": 42,
            "log_level": "INFO",
        }

    def test_from_environment_ignores_blank(self):
        """Test blank variables keep the defaults."""
        assert GenConfig.from_environment({"GEN_KIT_SEED": "  "}) == GenConfig()

    def test_from_environment_malformed(self):
        """Test malformed integers are reported by name."""
        with pytest.raises(InvalidArgumentError, match="GEN_KIT_SAMPLE_COUNT"):
            GenConfig.from_environment({"GEN_KIT_SAMPLE_COUNT": "many"})

    def test_with_overrides(self):
        """Test None overrides are ignored."""
        config = GenConfig().with_overrides(default_size=5, seed=None)
        assert config.default_size == 5
        assert config.seed is None
        with pytest.raises(InvalidArgumentError):
            GenConfig().with_overrides(sample_count=-2)


class TestGetConfig:
    """Test cases for the cached configuration."""

    def test_cached(self):
        """Test get_config returns the same object until reset."""
        assert get_config() is get_config()

    def test_reset_reloads_environment(self, monkeypatch):
        """Test reset_config picks up new variables."""
        assert get_config().seed is None
        monkeypatch.setenv("GEN_KIT_SEED", "9")
        assert get_config().seed is None
        reset_config()
        assert get_config().seed == 9
