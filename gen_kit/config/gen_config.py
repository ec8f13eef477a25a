"""
Generator configuration.

Holds the defaults used when a caller does not pass an explicit size, sample
count, retry bound or seed, and loads overrides from GEN_KIT_* environment
variables.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Any

from ..utilities.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_SIZE,
    InvalidArgumentError,
)
from ..utilities.validators import validate_non_negative, validate_positive_number

logger = logging.getLogger(__name__)

ENV_PREFIX = "GEN_KIT_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GenConfig:
    """
    Immutable generator configuration.

    Attributes:
        default_size: Size used by sampling when none is given
        sample_count: Number of values sampled when none is given
        max_retries: Attempt bound for the bounded filter variants
        seed: Fixed seed for sampling, or None to seed from the clock
        log_level: Level name applied by the command line
    """

    default_size: int = DEFAULT_SIZE
    sample_count: int = DEFAULT_SAMPLE_COUNT
    max_retries: int = DEFAULT_MAX_RETRIES
    seed: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        validate_non_negative(self.default_size, "default_size")
        validate_non_negative(self.sample_count, "sample_count")
        validate_positive_number(self.max_retries, "max_retries")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidArgumentError(f"seed must be an integer, got {type(self.seed).__name__}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidArgumentError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level}"
            )
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_environment(cls, environ: dict[str, str] | None = None) -> "GenConfig":
        """
        Build configuration from GEN_KIT_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            InvalidArgumentError: If a variable holds a malformed value
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        for field_name in ("default_size", "sample_count", "max_retries", "seed"):
            raw = env.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is None or not raw.strip():
                continue
            try:
                overrides[field_name] = int(raw.strip(), 0)
            except ValueError as e:
                raise InvalidArgumentError(
                    f"{ENV_PREFIX}{field_name.upper()} must be an integer, got {raw!r}"
                ) from e

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level and log_level.strip():
            overrides["log_level"] = log_level.strip()

        if overrides:
            logger.debug(f"Configuration overrides from environment: {sorted(overrides)}")
        return cls(**overrides)

    def with_overrides(self, **changes: Any) -> "GenConfig":
        """Return a copy with the given non-None fields replaced."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return {
            "default_size": self.default_size,
            "sample_count": self.sample_count,
            "max_retries": self.max_retries,
            "seed": self.seed,
            "log_level": self.log_level,
        }


_config: GenConfig | None = None


def get_config() -> GenConfig:
    """Get the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = GenConfig.from_environment()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
