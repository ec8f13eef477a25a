"""
Constants, defaults and the error taxonomy for gen-kit.

Everything that would otherwise be a magic number in the generator core lives
here, together with the exception classes raised at combinator boundaries.
"""

# Size / sampling defaults
DEFAULT_SIZE = 100
DEFAULT_SAMPLE_COUNT = 10
DEFAULT_MAX_RETRIES = 1000

# Filter retry logging is throttled to one DEBUG line per this many attempts
RETRY_LOG_INTERVAL = 100

# or_null: (weight of the value, weight of None)
OR_NULL_WEIGHTS = (7, 1)

# SplitMix64 constants
MASK_64 = (1 << 64) - 1
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
DOUBLE_UNIT = 1.0 / (1 << 53)

# Characters drawn by the stock character generator
PRINTABLE_CHARACTERS = "".join(chr(code) for code in range(32, 127))

# Console output
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_INFO = "ℹ️"


class GenKitError(Exception):
    """Base exception for all gen-kit errors."""


class InvalidArgumentError(GenKitError, ValueError):
    """A combinator was called with a missing callable or an invalid number."""


class EmptyChoiceSetError(InvalidArgumentError):
    """A choice combinator was given no candidates."""


class InvalidWeightError(InvalidArgumentError):
    """A weighted choice entry carries a non-positive weight."""


class ExhaustedRetriesError(GenKitError):
    """A bounded filter ran out of attempts without satisfying its predicate."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"No value satisfied the predicate after {attempts} attempts")
