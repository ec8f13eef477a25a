"""
Unit tests for call-boundary validation.

Every callable-taking or length-taking operation must reject bad input when
it is called, before any value is drawn.
"""

import pytest

from gen_kit.core import (
    array2d_of_dim,
    bind,
    bind_project,
    choose,
    list_of_length,
    map_gen,
    sized,
    try_where,
    where,
    where_bounded,
    zip,
    zip3,
)
from gen_kit.core.gen import constant, validate_generator
from gen_kit.utilities.constants import (
    EmptyChoiceSetError,
    GenKitError,
    InvalidArgumentError,
    InvalidWeightError,
)
from gen_kit.utilities.validators import (
    validate_callable,
    validate_choices,
    validate_integer,
    validate_non_negative,
    validate_positive_number,
    validate_weight,
)

from ..mocks import create_draw_counter


@pytest.fixture
def counter():
    """Draw counter wrapping a constant generator."""
    return create_draw_counter(constant(1))


MISSING_CALLABLE_CALLS = {
    "map": lambda g: g.map(None),
    "map_gen": lambda g: map_gen(None, g),
    "where": lambda g: g.where(None),
    "where_function": lambda g: where(None, g),
    "where_bounded": lambda g: where_bounded(None, g, 3),
    "try_where": lambda g: try_where(None, g, 3),
    "bind": lambda g: g.bind(None),
    "bind_function": lambda g: bind(g, None),
    "bind_project_binder": lambda g: g.bind_project(None, lambda a, b: a),
    "bind_project_projector": lambda g: bind_project(g, lambda a: g, None),
    "zip_combiner": lambda g: g.zip(g, "not callable"),
    "zip_function": lambda g: zip(g, g, 5),
    "zip3_combiner": lambda g: g.zip3(g, g, "not callable"),
    "zip3_function": lambda g: zip3(g, g, g, 5),
    "sized": lambda g: sized(None),
    "to_arbitrary": lambda g: g.to_arbitrary("not callable"),
}

NEGATIVE_LENGTH_CALLS = {
    "list_of": lambda g: g.list_of(-1),
    "list_of_length": lambda g: list_of_length(-3, g),
    "array_of": lambda g: g.array_of(-1),
    "array2d_rows": lambda g: g.array2d_of(-1, 2),
    "array2d_cols": lambda g: array2d_of_dim(2, -1, g),
    "resize": lambda g: g.resize(-5),
    "sample_size": lambda g: g.sample(-1, 3),
    "sample_count": lambda g: g.sample(3, -1),
}

NON_INTEGER_BOUND_CALLS = {
    "float_high": lambda: choose(0, 9.0),
    "float_low": lambda: choose(0.5, 9),
    "string_bounds": lambda: choose("a", "z"),
    "bool_bound": lambda: choose(False, 1),
    "none_bound": lambda: choose(None, 3),
}


class TestFailFast:
    """Validation happens before any draw."""

    @pytest.mark.parametrize("name", sorted(MISSING_CALLABLE_CALLS))
    def test_missing_callable(self, counter, name):
        """Test missing callables raise without drawing."""
        with pytest.raises(InvalidArgumentError):
            MISSING_CALLABLE_CALLS[name](counter.generator)
        assert counter.draws == 0

    @pytest.mark.parametrize("name", sorted(NEGATIVE_LENGTH_CALLS))
    def test_negative_length(self, counter, name):
        """Test negative lengths raise without drawing."""
        with pytest.raises(InvalidArgumentError):
            NEGATIVE_LENGTH_CALLS[name](counter.generator)
        assert counter.draws == 0

    @pytest.mark.parametrize("name", sorted(NON_INTEGER_BOUND_CALLS))
    def test_non_integer_bounds(self, counter, name):
        """Test choose rejects non-int bounds when it is called."""
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            NON_INTEGER_BOUND_CALLS[name]()
        assert counter.draws == 0

    def test_non_integer_bound_inside_bind(self, counter, rnd):
        """Test a bad bound built inside bind fails before the inner draw."""
        gen = counter.generator.bind(lambda value: choose(value, 9.0))
        with pytest.raises(InvalidArgumentError):
            gen.eval(5, rnd)
        assert counter.draws == 1

    def test_non_generator_arguments(self, counter):
        """Test generator arguments are type checked."""
        with pytest.raises(InvalidArgumentError):
            counter.generator.zip("not a generator")
        with pytest.raises(InvalidArgumentError):
            counter.generator.apply(lambda x: x)
        assert counter.draws == 0

    def test_errors_share_base_class(self):
        """Test the error taxonomy."""
        assert issubclass(InvalidArgumentError, GenKitError)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(EmptyChoiceSetError, InvalidArgumentError)
        assert issubclass(InvalidWeightError, InvalidArgumentError)


class TestValidators:
    """Test cases for the validator helpers."""

    def test_validate_callable(self):
        """Test callables pass and other values fail."""
        validate_callable(len, "f")
        with pytest.raises(InvalidArgumentError, match="f cannot be None"):
            validate_callable(None, "f")
        with pytest.raises(InvalidArgumentError, match="must be callable"):
            validate_callable(3, "f")

    def test_validate_integer(self):
        """Test ints pass, negatives included, and other types fail."""
        validate_integer(-7, "bound")
        validate_integer(2**70, "bound")
        with pytest.raises(InvalidArgumentError, match="bound must be an integer, got float"):
            validate_integer(9.0, "bound")
        with pytest.raises(InvalidArgumentError):
            validate_integer(True, "bound")

    def test_validate_non_negative(self):
        """Test non-negative ints pass and others fail."""
        validate_non_negative(0, "n")
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            validate_non_negative(-1, "n")
        with pytest.raises(InvalidArgumentError, match="integer"):
            validate_non_negative(1.0, "n")
        with pytest.raises(InvalidArgumentError):
            validate_non_negative(True, "n")

    def test_validate_positive_number(self):
        """Test zero is rejected."""
        validate_positive_number(1, "n")
        with pytest.raises(InvalidArgumentError, match="positive"):
            validate_positive_number(0, "n")

    def test_validate_generator(self):
        """Test only Gen values pass."""
        validate_generator(constant(1), "g")
        with pytest.raises(InvalidArgumentError):
            validate_generator(lambda size, rnd: 1, "g")

    def test_validate_choices(self):
        """Test choices are materialized and must be non-empty."""
        assert validate_choices(iter([1, 2]), "c") == [1, 2]
        with pytest.raises(EmptyChoiceSetError):
            validate_choices([], "c")
        with pytest.raises(InvalidArgumentError):
            validate_choices(None, "c")

    def test_validate_weight(self):
        """Test weights must be positive ints."""
        validate_weight(1, 0)
        with pytest.raises(InvalidWeightError, match="position 2"):
            validate_weight(0, 2)
