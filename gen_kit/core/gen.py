"""
Gen core: sized, seeded generators.

A Gen wraps a pure function of (size, Rnd). Composition never shares random
state between sub-draws: every operation that draws more than once splits
the incoming Rnd first. This module holds the monadic core (constant, map,
bind, resize, sized), filtering, and the eval/sample drivers. The rest of the
combinator library is built on top of it in combinators.py.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..config import get_config
from ..utilities.constants import RETRY_LOG_INTERVAL, ExhaustedRetriesError, InvalidArgumentError
from ..utilities.validators import (
    validate_callable,
    validate_non_negative,
    validate_positive_number,
)
from .random import Rnd

if TYPE_CHECKING:
    from ..domain.arbitrary import Arbitrary

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
W = TypeVar("W")

_NOT_FOUND = object()


@dataclass(frozen=True, eq=False)
class Gen(Generic[T]):
    """
    Immutable generator of values of type T.

    The wrapped function receives the size and an Rnd, and must be pure:
    given the same arguments it returns the same value.
    """

    run_fn: Callable[[int, Rnd], T]

    def __post_init__(self) -> None:
        """Validate the wrapped function."""
        validate_callable(self.run_fn, "run_fn")

    def run(self, size: int, rnd: Rnd) -> T:
        """Draw a value without argument checks. Used by combinators."""
        return self.run_fn(size, rnd)

    # Evaluation

    def eval(self, size: int, rnd: Rnd) -> T:
        """Generate one value of the given size."""
        return eval_gen(size, rnd, self)

    def sample(self, size: int | None = None, count: int | None = None, rnd: Rnd | None = None) -> list[T]:
        """Generate `count` independent values with sizes spread up to `size`."""
        config = get_config()
        return sample(
            config.default_size if size is None else size,
            config.sample_count if count is None else count,
            self,
            rnd,
        )

    # Core combinators

    def map(self, f: Callable[[T], U]) -> "Gen[U]":
        """Apply a pure function to every generated value."""
        return map_gen(f, self)

    def bind(self, f: Callable[[T], "Gen[U]"]) -> "Gen[U]":
        """Feed every generated value to a function returning the next generator."""
        return bind(self, f)

    def bind_project(
        self, f: Callable[[T], "Gen[U]"], project: Callable[[T, U], V]
    ) -> "Gen[V]":
        """Bind, then combine the first and second values with `project`."""
        return bind_project(self, f, project)

    def where(self, predicate: Callable[[T], bool]) -> "Gen[T]":
        """
        Generate values satisfying `predicate`, retrying without bound.

        Each failed attempt retries with the size increased by one. A predicate
        that is almost never satisfied makes generation hang; prefer
        where_bounded() when that is possible.
        """
        return where(predicate, self)

    def where_bounded(self, predicate: Callable[[T], bool], max_tries: int | None = None) -> "Gen[T]":
        """Like where(), but raise ExhaustedRetriesError after `max_tries` failures."""
        return where_bounded(predicate, self, max_tries)

    def try_where(self, predicate: Callable[[T], bool], max_tries: int | None = None) -> "Gen[T | None]":
        """Like where(), but produce None after `max_tries` failures."""
        return try_where(predicate, self, max_tries)

    def resize(self, new_size: int) -> "Gen[T]":
        """Override the size passed to this generator."""
        return resize(new_size, self)

    # Library combinators, see combinators.py

    def list_of(self, length: int | None = None) -> "Gen[list[T]]":
        """Generate lists of exactly `length` values, or of length in [0, size]."""
        from . import combinators

        if length is None:
            return combinators.list_of(self)
        return combinators.list_of_length(length, self)

    def non_empty_list_of(self) -> "Gen[list[T]]":
        """Generate lists of length in [1, size + 1]."""
        from . import combinators

        return combinators.non_empty_list_of(self)

    def array_of(self, length: int | None = None) -> "Gen[tuple[T, ...]]":
        """Generate arrays of exactly `length` values, or of length in [0, size]."""
        from . import combinators

        if length is None:
            return combinators.array_of(self)
        return combinators.array_of_length(length, self)

    def array2d_of(self, rows: int | None = None, cols: int | None = None) -> "Gen[tuple[tuple[T, ...], ...]]":
        """Generate a rows x cols grid, or one sized by the square root of size."""
        from . import combinators

        if rows is None and cols is None:
            return combinators.array2d_of(self)
        if rows is None or cols is None:
            raise InvalidArgumentError("rows and cols must be given together")
        return combinators.array2d_of_dim(rows, cols, self)

    def apply(self, gen_of_function: "Gen[Callable[[T], U]]") -> "Gen[U]":
        """Apply generated functions to values of this generator."""
        from . import combinators

        return combinators.apply(gen_of_function, self)

    def two(self) -> "Gen[tuple[T, T]]":
        """Generate pairs of independent values."""
        from . import combinators

        return combinators.two(self)

    def three(self) -> "Gen[tuple[T, T, T]]":
        """Generate triples of independent values."""
        from . import combinators

        return combinators.three(self)

    def four(self) -> "Gen[tuple[T, T, T, T]]":
        """Generate 4-tuples of independent values."""
        from . import combinators

        return combinators.four(self)

    def zip(self, other: "Gen[U]", combiner: Callable[[T, U], V] | None = None) -> "Gen[Any]":
        """Pair this generator with another, optionally combining the pair."""
        from . import combinators

        return combinators.zip(self, other, combiner)

    def zip3(
        self,
        second: "Gen[U]",
        third: "Gen[V]",
        combiner: Callable[[T, U, V], W] | None = None,
    ) -> "Gen[Any]":
        """Combine with two more generators, optionally combining the triple."""
        from . import combinators

        return combinators.zip3(self, second, third, combiner)

    def or_(self, other: "Gen[T]") -> "Gen[T]":
        """Draw from this generator or `other` with equal probability."""
        from . import combinators

        return combinators.oneof([self, other])

    def or_null(self) -> "Gen[T | None]":
        """Draw from this generator, or None one time in eight."""
        from . import combinators

        return combinators.or_null(self)

    def to_arbitrary(self, shrinker: Callable[[T], Iterable[T]] | None = None) -> "Arbitrary[T]":
        """Pair this generator with a shrinker, or with none."""
        from ..domain.arbitrary import from_gen, from_gen_shrink

        if shrinker is None:
            return from_gen(self)
        return from_gen_shrink(self, shrinker)

    def __repr__(self) -> str:
        """Representation for debugging."""
        name = getattr(self.run_fn, "__qualname__", type(self.run_fn).__name__)
        return f"Gen({name})"


def validate_generator(value: Any, name: str) -> None:
    """Validate that an argument is a Gen."""
    if not isinstance(value, Gen):
        raise InvalidArgumentError(f"{name} must be a Gen, got {type(value).__name__}")


def constant(value: T) -> Gen[T]:
    """Generator that always produces `value`."""
    return Gen(lambda size, rnd: value)


pure = constant


def sized(f: Callable[[int], Gen[T]]) -> Gen[T]:
    """Build a generator from the current size."""
    validate_callable(f, "f")
    return Gen(lambda size, rnd: f(size).run(size, rnd))


def map_gen(f: Callable[[T], U], generator: Gen[T]) -> Gen[U]:
    """Apply a pure function to every value drawn from `generator`."""
    validate_callable(f, "f")
    validate_generator(generator, "generator")
    return Gen(lambda size, rnd: f(generator.run(size, rnd)))


def bind(generator: Gen[T], f: Callable[[T], Gen[U]]) -> Gen[U]:
    """
    Monadic bind.

    The first value and the generator returned by `f` are drawn from the two
    halves of a split, so they never share random state.

    Raises:
        InvalidArgumentError: At draw time, if `f` returns something other
            than a Gen
    """
    validate_generator(generator, "generator")
    validate_callable(f, "f")

    def run(size: int, rnd: Rnd) -> U:
        first, second = rnd.split()
        next_gen = f(generator.run(size, first))
        validate_generator(next_gen, "f(value)")
        return next_gen.run(size, second)

    return Gen(run)


def bind_project(generator: Gen[T], f: Callable[[T], Gen[U]], project: Callable[[T, U], V]) -> Gen[V]:
    """Bind, then project the outer and inner values into a single result."""
    validate_generator(generator, "generator")
    validate_callable(f, "f")
    validate_callable(project, "project")
    return bind(generator, lambda a: map_gen(lambda b: project(a, b), f(a)))


def resize(new_size: int, generator: Gen[T]) -> Gen[T]:
    """Run `generator` with a fixed size, ignoring the ambient one."""
    validate_non_negative(new_size, "new_size")
    validate_generator(generator, "generator")
    return Gen(lambda size, rnd: generator.run(new_size, rnd))


def _search(
    predicate: Callable[[T], bool],
    generator: Gen[T],
    size: int,
    rnd: Rnd,
    max_tries: int | None,
) -> Any:
    """Draw until `predicate` holds; each retry grows the size by one."""
    attempt = 0
    while max_tries is None or attempt < max_tries:
        rnd, current = rnd.split()
        value = generator.run(size + attempt, current)
        if predicate(value):
            return value
        attempt += 1
        if attempt % RETRY_LOG_INTERVAL == 0:
            logger.debug(f"Filter still searching after {attempt} rejected values")
    return _NOT_FOUND


def where(predicate: Callable[[T], bool], generator: Gen[T]) -> Gen[T]:
    """
    Generate values of `generator` that satisfy `predicate`.

    Retries forever, increasing the size by one on every rejection. Make sure
    the predicate is satisfied with a reasonably high probability.
    """
    validate_callable(predicate, "predicate")
    validate_generator(generator, "generator")
    return Gen(lambda size, rnd: _search(predicate, generator, size, rnd, None))


def _resolve_max_tries(max_tries: int | None) -> int:
    if max_tries is None:
        return get_config().max_retries
    validate_positive_number(max_tries, "max_tries")
    return max_tries


def where_bounded(predicate: Callable[[T], bool], generator: Gen[T], max_tries: int | None = None) -> Gen[T]:
    """
    Filter with a bound on the number of attempts.

    Raises:
        ExhaustedRetriesError: At draw time, when `max_tries` values in a row
            fail the predicate
    """
    validate_callable(predicate, "predicate")
    validate_generator(generator, "generator")
    tries = _resolve_max_tries(max_tries)

    def run(size: int, rnd: Rnd) -> T:
        value = _search(predicate, generator, size, rnd, tries)
        if value is _NOT_FOUND:
            logger.warning(f"Bounded filter gave up after {tries} attempts at size {size}")
            raise ExhaustedRetriesError(tries)
        return value

    return Gen(run)


def try_where(predicate: Callable[[T], bool], generator: Gen[T], max_tries: int | None = None) -> Gen[T | None]:
    """Filter with a bound on the number of attempts, yielding None when exhausted."""
    validate_callable(predicate, "predicate")
    validate_generator(generator, "generator")
    tries = _resolve_max_tries(max_tries)

    def run(size: int, rnd: Rnd) -> T | None:
        value = _search(predicate, generator, size, rnd, tries)
        return None if value is _NOT_FOUND else value

    return Gen(run)


def eval_gen(size: int, rnd: Rnd, generator: Gen[T]) -> T:
    """Generate a single value. Identical (size, rnd) give identical values."""
    validate_non_negative(size, "size")
    if not isinstance(rnd, Rnd):
        raise InvalidArgumentError(f"rnd must be an Rnd, got {type(rnd).__name__}")
    validate_generator(generator, "generator")
    return generator.run(size, rnd)


def _spread_sizes(size: int, count: int) -> list[int]:
    """Sizes evenly spaced over [0, size], ending at exactly `size`."""
    if count == 1:
        return [size]
    return [size * index // (count - 1) for index in range(count)]


def sample(size: int, count: int, generator: Gen[T], rnd: Rnd | None = None) -> list[T]:
    """
    Generate `count` independent values.

    Each value gets its own split of `rnd` and sizes are spread evenly across
    [0, size]. Without `rnd`, the configured seed is used, or the clock when
    no seed is configured.
    """
    validate_non_negative(size, "size")
    validate_non_negative(count, "count")
    validate_generator(generator, "generator")
    if rnd is None:
        seed = get_config().seed
        rnd = Rnd.create() if seed is None else Rnd.from_seed(seed)
    elif not isinstance(rnd, Rnd):
        raise InvalidArgumentError(f"rnd must be an Rnd, got {type(rnd).__name__}")

    logger.debug(f"Sampling {count} values up to size {size} from {rnd!r}")
    states = rnd.split_n(count)
    sizes = _spread_sizes(size, count)
    return [generator.run(sizes[index], states[index]) for index in range(count)]
