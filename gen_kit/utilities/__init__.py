"""
Utilities package for gen-kit.

Constants and the error taxonomy, call-boundary validators, and console and
formatting helpers for the command line.
"""

from .console import print_error, print_info, print_section_header, print_success
from .constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_SIZE,
    OR_NULL_WEIGHTS,
    EmptyChoiceSetError,
    ExhaustedRetriesError,
    GenKitError,
    InvalidArgumentError,
    InvalidWeightError,
)
from .formatters import format_grid, format_sample, format_value
from .validators import (
    validate_callable,
    validate_choices,
    validate_integer,
    validate_non_negative,
    validate_positive_number,
    validate_weight,
)

__all__ = [
    # Constants
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_SAMPLE_COUNT",
    "DEFAULT_SIZE",
    "OR_NULL_WEIGHTS",
    # Errors
    "EmptyChoiceSetError",
    "ExhaustedRetriesError",
    "GenKitError",
    "InvalidArgumentError",
    "InvalidWeightError",
    # Console utilities
    "print_error",
    "print_info",
    "print_section_header",
    "print_success",
    # Formatting utilities
    "format_grid",
    "format_sample",
    "format_value",
    # Validation utilities
    "validate_callable",
    "validate_choices",
    "validate_integer",
    "validate_non_negative",
    "validate_positive_number",
    "validate_weight",
]
