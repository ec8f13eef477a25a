"""
Stock shrinkers.

Each shrinker is a pure function from a value to a lazy iterator of smaller
candidates, simplest first.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, TypeVar

from ..utilities.constants import InvalidArgumentError
from ..utilities.validators import validate_callable

T = TypeVar("T")

# Ordered from simplest to least simple
SIMPLE_CHARACTERS = "abcABC123 "


def shrink_int(value: int) -> Iterator[int]:
    """
    Shrink an integer towards zero.

    Yields the positive mirror of a negative number first, then zero, then
    values closing in on `value` by halving the distance.
    """
    if value == 0:
        return
    seen = set()
    if value < 0:
        seen.add(-value)
        yield -value

    step = abs(value)
    while step > 0:
        candidate = value - step if value > 0 else value + step
        if candidate not in seen:
            seen.add(candidate)
            yield candidate
        step //= 2


def shrink_bool(value: bool) -> Iterator[bool]:
    """Shrink True to False."""
    if value:
        yield False


def shrink_char(value: str) -> Iterator[str]:
    """Shrink a character to the simpler entries of SIMPLE_CHARACTERS."""
    rank = SIMPLE_CHARACTERS.find(value)
    limit = len(SIMPLE_CHARACTERS) if rank < 0 else rank
    yield from SIMPLE_CHARACTERS[:limit]


def _removes(items: Sequence[T], chunk: int) -> Iterator[list[T]]:
    """Every way of deleting one aligned run of `chunk` items."""
    for start in range(0, len(items) - chunk + 1, chunk):
        yield list(items[:start]) + list(items[start + chunk :])


def _shrink_list(items: Sequence[T], shrink_element: Callable[[T], Iterable[T]] | None) -> Iterator[list[T]]:
    chunk = len(items)
    while chunk > 0:
        yield from _removes(items, chunk)
        chunk //= 2

    if shrink_element is None:
        return
    for index, item in enumerate(items):
        for candidate in shrink_element(item):
            shrunk = list(items)
            shrunk[index] = candidate
            yield shrunk


def shrink_list(
    items: Sequence[T], shrink_element: Callable[[T], Iterable[T]] | None = None
) -> Iterator[list[T]]:
    """
    Shrink a list.

    First tries removing chunks of halving size, then shrinks one element at
    a time with `shrink_element` when it is given.
    """
    if shrink_element is not None:
        validate_callable(shrink_element, "shrink_element")
    return _shrink_list(items, shrink_element)


def shrink_text(value: str) -> Iterator[str]:
    """Shrink a string by dropping characters, then simplifying them."""
    return ("".join(chars) for chars in shrink_list(list(value), shrink_char))


def shrink_tuple(
    value: tuple[Any, ...], shrinkers: Sequence[Callable[[Any], Iterable[Any]]]
) -> Iterator[tuple[Any, ...]]:
    """Shrink one component of a tuple at a time with the matching shrinker."""
    if len(value) != len(shrinkers):
        raise InvalidArgumentError(f"Expected {len(value)} shrinkers, got {len(shrinkers)}")
    return (
        value[:index] + (candidate,) + value[index + 1 :]
        for index, shrinker in enumerate(shrinkers)
        for candidate in shrinker(value[index])
    )
