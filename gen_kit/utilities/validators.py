"""
Call-boundary validation utilities.

Every combinator that accepts a callable, a length or a weight validates it
here before a generator is built, so bad input fails immediately instead of
surfacing in the middle of a draw.
"""

from collections.abc import Iterable
from typing import Any

from .constants import EmptyChoiceSetError, InvalidArgumentError, InvalidWeightError


def validate_callable(value: Any, name: str) -> None:
    """Validate that a required function argument is present and callable."""
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None")
    if not callable(value):
        raise InvalidArgumentError(f"{name} must be callable, got {type(value).__name__}")


def validate_integer(value: Any, name: str) -> None:
    """Validate that a bound or number is an int. bool is rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")


def validate_non_negative(value: int, name: str) -> None:
    """Validate that a length, dimension, size or count is a non-negative int."""
    validate_integer(value, name)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")


def validate_positive_number(value: int, name: str) -> None:
    """Validate that a count is a positive int."""
    validate_non_negative(value, name)
    if value == 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")


def validate_choices(choices: Iterable[Any], name: str) -> list[Any]:
    """Materialize a candidate collection and ensure it is not empty."""
    if choices is None:
        raise InvalidArgumentError(f"{name} cannot be None")
    materialized = list(choices)
    if not materialized:
        raise EmptyChoiceSetError(f"{name} must contain at least one candidate")
    return materialized


def validate_weight(weight: Any, index: int) -> None:
    """Validate a single frequency weight."""
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidWeightError(
            f"Weight at position {index} must be an integer, got {type(weight).__name__}"
        )
    if weight <= 0:
        raise InvalidWeightError(f"Weight at position {index} must be positive, got {weight}")
