"""
Arbitrary value object: a generator paired with a shrinker.

The shrinker is stored for an external counterexample search; nothing in
gen-kit ever calls it during generation.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..core.gen import Gen, map_gen, validate_generator, where
from ..utilities.validators import validate_callable

T = TypeVar("T")
U = TypeVar("U")


def no_shrink(value: object) -> Iterator:
    """Shrinker that never proposes candidates."""
    return iter(())


@dataclass(frozen=True)
class Arbitrary(Generic[T]):
    """
    Immutable pairing of a Gen with a shrinker.

    The shrinker maps a value to a lazy sequence of smaller candidates.
    Calling it again on the same value starts the sequence over.
    """

    generator: Gen[T]
    shrinker: Callable[[T], Iterable[T]] = no_shrink

    def __post_init__(self) -> None:
        """Validate generator and shrinker."""
        validate_generator(self.generator, "generator")
        validate_callable(self.shrinker, "shrinker")

    def shrink(self, value: T) -> Iterator[T]:
        """Lazily yield the shrink candidates for `value`."""
        return iter(self.shrinker(value))

    def filter(self, predicate: Callable[[T], bool]) -> "Arbitrary[T]":
        """Restrict both generated values and shrink candidates to `predicate`."""
        validate_callable(predicate, "predicate")
        shrinker = self.shrinker

        def filtered_shrinker(value: T) -> Iterator[T]:
            return (candidate for candidate in shrinker(value) if predicate(candidate))

        return Arbitrary(where(predicate, self.generator), filtered_shrinker)

    def convert(self, to: Callable[[T], U], back: Callable[[U], T]) -> "Arbitrary[U]":
        """
        Map this Arbitrary through a pair of inverse functions.

        Args:
            to: Converts generated values to the new type
            back: Converts a value of the new type back so it can be shrunk
        """
        validate_callable(to, "to")
        validate_callable(back, "back")
        shrinker = self.shrinker

        def converted_shrinker(value: U) -> Iterator[U]:
            return (to(candidate) for candidate in shrinker(back(value)))

        return Arbitrary(map_gen(to, self.generator), converted_shrinker)


def from_gen(generator: Gen[T]) -> Arbitrary[T]:
    """Construct an Arbitrary without shrinking support."""
    return Arbitrary(generator)


def from_gen_shrink(generator: Gen[T], shrinker: Callable[[T], Iterable[T]]) -> Arbitrary[T]:
    """Construct an Arbitrary from a generator and a shrinker, used verbatim."""
    validate_callable(shrinker, "shrinker")
    return Arbitrary(generator, shrinker)
