"""
Stock Arbitrary instances for common Python types.
"""

from typing import TypeVar

from ..core import combinators
from .arbitrary import Arbitrary, from_gen_shrink
from .shrinkers import shrink_bool, shrink_int, shrink_list, shrink_text

T = TypeVar("T")


def int_arbitrary() -> Arbitrary[int]:
    """Integers in [-size, size], shrinking towards zero."""
    return from_gen_shrink(combinators.integers(), shrink_int)


def bool_arbitrary() -> Arbitrary[bool]:
    """Booleans, shrinking True to False."""
    return from_gen_shrink(combinators.booleans(), shrink_bool)


def text_arbitrary() -> Arbitrary[str]:
    """Printable strings up to `size` characters, shrinking by length first."""
    return from_gen_shrink(combinators.text(), shrink_text)


def list_arbitrary(element: Arbitrary[T]) -> Arbitrary[list[T]]:
    """Lists of `element` values, shrinking the list and then its elements."""
    return from_gen_shrink(
        combinators.list_of(element.generator),
        lambda items: shrink_list(items, element.shrinker),
    )
