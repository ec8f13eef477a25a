"""
Combinator library built on the Gen core.

Choice, collection, grid, tuple and applicative combinators, plus a handful
of primitive generators. Every combinator that performs more than one draw
splits its Rnd into one substream per draw.
"""

import builtins
import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from ..utilities.constants import OR_NULL_WEIGHTS, PRINTABLE_CHARACTERS, InvalidArgumentError
from ..utilities.validators import (
    validate_callable,
    validate_choices,
    validate_integer,
    validate_non_negative,
    validate_weight,
)
from .gen import Gen, constant, map_gen, sized, validate_generator
from .random import Rnd

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
W = TypeVar("W")


def _draw_each(generators: Sequence[Gen[Any]], size: int, rnd: Rnd) -> list[Any]:
    """Run each generator on its own substream."""
    states = rnd.split_n(len(generators))
    return [generator.run(size, states[index]) for index, generator in enumerate(generators)]


def _draw_many(count: int, generator: Gen[T], size: int, rnd: Rnd) -> list[T]:
    """Run one generator `count` times, each on its own substream."""
    return [generator.run(size, state) for state in rnd.split_n(count)]


# Primitives


def choose(low: int, high: int) -> Gen[int]:
    """Generate integers uniformly from the inclusive range [low, high]."""
    validate_integer(low, "low")
    validate_integer(high, "high")
    if low > high:
        raise InvalidArgumentError(f"choose requires low <= high, got {low} > {high}")
    return Gen(lambda size, rnd: rnd.range(low, high)[0])


def elements(choices: Iterable[T]) -> Gen[T]:
    """Pick one of the given values uniformly."""
    values = validate_choices(choices, "choices")
    return Gen(lambda size, rnd: values[rnd.range(0, len(values) - 1)[0]])


def growing_elements(choices: Iterable[T]) -> Gen[T]:
    """Pick from a prefix of the values whose length grows with the size."""
    values = validate_choices(choices, "choices")

    def run(size: int, rnd: Rnd) -> T:
        bound = max(1, min(size, len(values)))
        return values[rnd.range(0, bound - 1)[0]]

    return Gen(run)


def booleans() -> Gen[bool]:
    """Generate True or False with equal probability."""
    return Gen(lambda size, rnd: rnd.range(0, 1)[0] == 1)


def integers() -> Gen[int]:
    """Generate integers in [-size, size]."""
    return sized(lambda size: choose(-size, size))


def floats() -> Gen[float]:
    """Generate floats in [-size, size)."""

    def run(size: int, rnd: Rnd) -> float:
        fraction, _ = rnd.next_float()
        return -size + 2 * size * fraction

    return Gen(run)


def characters() -> Gen[str]:
    """Generate printable ASCII characters."""
    return elements(PRINTABLE_CHARACTERS)


def text() -> Gen[str]:
    """Generate strings of printable characters with length in [0, size]."""
    return map_gen("".join, list_of(characters()))


def sequence(generators: Iterable[Gen[T]]) -> Gen[list[T]]:
    """Run each generator once, collecting the values in order."""
    gens = list(generators)
    for index, generator in enumerate(gens):
        validate_generator(generator, f"generators[{index}]")
    return Gen(lambda size, rnd: _draw_each(gens, size, rnd))


def shuffle(values: Iterable[T]) -> Gen[list[T]]:
    """Generate random permutations of the given values."""
    items = list(values)

    def run(size: int, rnd: Rnd) -> list[T]:
        result = list(items)
        for index in range(len(result) - 1, 0, -1):
            other, rnd = rnd.range(0, index)
            result[index], result[other] = result[other], result[index]
        return result

    return Gen(run)


def sub_list_of(values: Iterable[T]) -> Gen[list[T]]:
    """Generate sublists of the given values, keeping their order."""
    items = list(values)

    def run(size: int, rnd: Rnd) -> list[T]:
        keep = _draw_many(len(items), booleans(), size, rnd)
        return [item for item, kept in builtins.zip(items, keep) if kept]

    return Gen(run)


# Choice


def oneof(generators: Iterable[Gen[T]]) -> Gen[T]:
    """
    Pick one generator uniformly and draw from it.

    Raises:
        EmptyChoiceSetError: If no generators are given
    """
    gens = validate_choices(generators, "generators")
    for index, generator in enumerate(gens):
        validate_generator(generator, f"generators[{index}]")

    def run(size: int, rnd: Rnd) -> T:
        pick, draw = rnd.split()
        index, _ = pick.range(0, len(gens) - 1)
        return gens[index].run(size, draw)

    return Gen(run)


def frequency(entries: Iterable[tuple[int, Gen[T]]]) -> Gen[T]:
    """
    Pick a generator with probability proportional to its weight.

    Raises:
        EmptyChoiceSetError: If no entries are given
        InvalidWeightError: If a weight is not a positive integer
    """
    weighted = validate_choices(entries, "entries")
    for index, entry in enumerate(weighted):
        if not isinstance(entry, tuple) or len(entry) != 2:
            raise InvalidArgumentError(f"entries[{index}] must be a (weight, generator) pair")
        validate_weight(entry[0], index)
        validate_generator(entry[1], f"entries[{index}]")
    total = sum(weight for weight, _ in weighted)

    def run(size: int, rnd: Rnd) -> T:
        pick, draw = rnd.split()
        point, _ = pick.range(1, total)
        for weight, generator in weighted:
            if point <= weight:
                return generator.run(size, draw)
            point -= weight
        raise AssertionError("frequency selection fell through the weight table")

    return Gen(run)


def or_null(generator: Gen[T]) -> Gen[T | None]:
    """Draw from `generator` seven times in eight and None otherwise."""
    validate_generator(generator, "generator")
    value_weight, null_weight = OR_NULL_WEIGHTS
    return frequency([(value_weight, generator), (null_weight, constant(None))])


# Collections


def list_of_length(length: int, generator: Gen[T]) -> Gen[list[T]]:
    """Generate lists of exactly `length` independent values."""
    validate_non_negative(length, "length")
    validate_generator(generator, "generator")
    return Gen(lambda size, rnd: _draw_many(length, generator, size, rnd))


def _bounded_list(generator: Gen[T], minimum: int) -> Gen[list[T]]:
    def run(size: int, rnd: Rnd) -> list[T]:
        pick, draw = rnd.split()
        length, _ = pick.range(0, size)
        return _draw_many(minimum + length, generator, size, draw)

    return Gen(run)


def list_of(generator: Gen[T]) -> Gen[list[T]]:
    """Generate lists whose length is drawn uniformly from [0, size]."""
    validate_generator(generator, "generator")
    return _bounded_list(generator, 0)


def non_empty_list_of(generator: Gen[T]) -> Gen[list[T]]:
    """Generate lists whose length is drawn uniformly from [1, size + 1]."""
    validate_generator(generator, "generator")
    return _bounded_list(generator, 1)


def array_of_length(length: int, generator: Gen[T]) -> Gen[tuple[T, ...]]:
    """Generate immutable arrays of exactly `length` values."""
    return map_gen(tuple, list_of_length(length, generator))


def array_of(generator: Gen[T]) -> Gen[tuple[T, ...]]:
    """Generate immutable arrays whose length is drawn from [0, size]."""
    return map_gen(tuple, list_of(generator))


def _grid(rows: int, cols: int, generator: Gen[T], size: int, rnd: Rnd) -> tuple[tuple[T, ...], ...]:
    cells = _draw_many(rows * cols, generator, size, rnd)
    return tuple(tuple(cells[row * cols : (row + 1) * cols]) for row in range(rows))


def array2d_of_dim(rows: int, cols: int, generator: Gen[T]) -> Gen[tuple[tuple[T, ...], ...]]:
    """Generate `rows` x `cols` grids of independent values."""
    validate_non_negative(rows, "rows")
    validate_non_negative(cols, "cols")
    validate_generator(generator, "generator")
    return Gen(lambda size, rnd: _grid(rows, cols, generator, size, rnd))


def array2d_of(generator: Gen[T]) -> Gen[tuple[tuple[T, ...], ...]]:
    """Generate grids with each dimension drawn from [0, isqrt(size)]."""
    validate_generator(generator, "generator")

    def run(size: int, rnd: Rnd) -> tuple[tuple[T, ...], ...]:
        bound = math.isqrt(size)
        dims, draw = rnd.split()
        rows, dims = dims.range(0, bound)
        cols, _ = dims.range(0, bound)
        return _grid(rows, cols, generator, size, draw)

    return Gen(run)


# Tuples and combination


def two(generator: Gen[T]) -> Gen[tuple[T, T]]:
    """Generate pairs of independent draws from `generator`."""
    validate_generator(generator, "generator")
    return Gen(lambda size, rnd: tuple(_draw_many(2, generator, size, rnd)))


def three(generator: Gen[T]) -> Gen[tuple[T, T, T]]:
    """Generate triples of independent draws from `generator`."""
    validate_generator(generator, "generator")
    return Gen(lambda size, rnd: tuple(_draw_many(3, generator, size, rnd)))


def four(generator: Gen[T]) -> Gen[tuple[T, T, T, T]]:
    """Generate 4-tuples of independent draws from `generator`."""
    validate_generator(generator, "generator")
    return Gen(lambda size, rnd: tuple(_draw_many(4, generator, size, rnd)))


def zip(first: Gen[T], second: Gen[U], combiner: Callable[[T, U], V] | None = None) -> Gen[Any]:
    """
    Draw from two generators independently, as a pair or through `combiner`.

    Passing combiner=None, explicitly or by omission, yields plain
    (first, second) tuples. Any other non-callable combiner is rejected.
    """
    validate_generator(first, "first")
    validate_generator(second, "second")
    pairs = Gen(lambda size, rnd: tuple(_draw_each((first, second), size, rnd)))
    if combiner is None:
        return pairs
    validate_callable(combiner, "combiner")
    return map_gen(lambda pair: combiner(*pair), pairs)


def zip3(
    first: Gen[T],
    second: Gen[U],
    third: Gen[V],
    combiner: Callable[[T, U, V], W] | None = None,
) -> Gen[Any]:
    """
    Draw from three generators independently, as a triple or through `combiner`.

    combiner=None yields plain (first, second, third) tuples, as in zip().
    """
    validate_generator(first, "first")
    validate_generator(second, "second")
    validate_generator(third, "third")
    triples = Gen(lambda size, rnd: tuple(_draw_each((first, second, third), size, rnd)))
    if combiner is None:
        return triples
    validate_callable(combiner, "combiner")
    return map_gen(lambda triple: combiner(*triple), triples)


def apply(gen_of_function: Gen[Callable[[T], U]], generator: Gen[T]) -> Gen[U]:
    """Draw a function and an argument independently and apply one to the other."""
    validate_generator(gen_of_function, "gen_of_function")
    validate_generator(generator, "generator")

    def run(size: int, rnd: Rnd) -> U:
        function_rnd, argument_rnd = rnd.split()
        f = gen_of_function.run(size, function_rnd)
        return f(generator.run(size, argument_rnd))

    return Gen(run)
