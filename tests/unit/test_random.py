"""
Unit tests for the splittable random state.

Tests determinism, range bounds, and the independence of split states.
"""

import pytest

from gen_kit.core.random import Rnd
from gen_kit.utilities.constants import GOLDEN_GAMMA, MASK_64, InvalidArgumentError


class TestRndCreation:
    """Test cases for constructing random states."""

    def test_from_seed_uses_golden_gamma(self):
        """Test seeds start on the default stream."""
        rnd = Rnd.from_seed(7)
        assert rnd.seed == 7
        assert rnd.gamma == GOLDEN_GAMMA

    def test_seed_is_masked_to_64_bits(self):
        """Test negative and oversized seeds are normalized."""
        assert Rnd.from_seed(-1).seed == MASK_64
        assert Rnd.from_seed(1 << 70).seed == 0

    def test_even_gamma_rejected(self):
        """Test gammas must be odd."""
        with pytest.raises(InvalidArgumentError):
            Rnd(1, 2)

    def test_non_integer_seed_rejected(self):
        """Test seeds must be integers."""
        with pytest.raises(InvalidArgumentError):
            Rnd("seed")
        with pytest.raises(InvalidArgumentError):
            Rnd(True)

    def test_create_returns_state(self):
        """Test clock seeding produces a usable state."""
        value, _ = Rnd.create().range(0, 10)
        assert 0 <= value <= 10

    def test_immutable(self):
        """Test random states cannot be mutated."""
        rnd = Rnd.from_seed(1)
        with pytest.raises(AttributeError):
            rnd.seed = 2

    def test_repr(self):
        """Test hex representation."""
        assert repr(Rnd.from_seed(1)) == "Rnd(seed=0x0000000000000001, gamma=0x9e3779b97f4a7c15)"


class TestRndDraws:
    """Test cases for drawing numbers."""

    def test_next_int64_deterministic(self, rnd):
        """Test the same state draws the same number and successor."""
        assert rnd.next_int64() == rnd.next_int64()

    def test_next_int64_advances(self, rnd):
        """Test successive draws differ."""
        first, nxt = rnd.next_int64()
        second, _ = nxt.next_int64()
        assert first != second
        assert nxt != rnd

    def test_next_int64_range(self, many_rnds):
        """Test draws are unsigned 64-bit values."""
        for state in many_rnds:
            value, _ = state.next_int64()
            assert 0 <= value <= MASK_64

    def test_next_float_unit_interval(self, many_rnds):
        """Test floats lie in [0, 1)."""
        for state in many_rnds:
            value, _ = state.next_float()
            assert 0.0 <= value < 1.0

    def test_range_inclusive_bounds(self, many_rnds):
        """Test range results stay inside [low, high] and reach both ends."""
        seen = set()
        for state in many_rnds:
            value, _ = state.range(-2, 2)
            assert -2 <= value <= 2
            seen.add(value)
        assert seen == {-2, -1, 0, 1, 2}

    def test_range_single_value(self, rnd):
        """Test a one-value range needs no draw."""
        assert rnd.range(5, 5) == (5, rnd)

    def test_range_wider_than_64_bits(self, many_rnds):
        """Test spans beyond 64 bits are supported."""
        high = 1 << 100
        values = {state.range(0, high)[0] for state in many_rnds}
        assert all(0 <= value <= high for value in values)
        assert any(value > MASK_64 for value in values)

    def test_range_empty_rejected(self, rnd):
        """Test low greater than high is invalid."""
        with pytest.raises(InvalidArgumentError):
            rnd.range(3, 2)


class TestRndSplit:
    """Test cases for splitting."""

    def test_split_deterministic(self, rnd):
        """Test the same parent always splits into the same children."""
        assert rnd.split() == rnd.split()

    def test_split_children_distinct(self, rnd):
        """Test children differ from each other and from the parent."""
        left, right = rnd.split()
        assert left != right
        assert rnd not in (left, right)
        assert left.next_int64()[0] != right.next_int64()[0]

    def test_split_gamma_odd(self, many_rnds):
        """Test split streams get valid gammas."""
        for state in many_rnds:
            _, child = state.split()
            assert child.gamma & 1 == 1

    def test_split_n_count(self, rnd):
        """Test split_n returns the requested number of states."""
        assert rnd.split_n(0) == []
        assert len(rnd.split_n(5)) == 5

    def test_split_n_distinct_streams(self, rnd):
        """Test no two split states produce the same first draw."""
        states = rnd.split_n(500)
        first_draws = {state.next_int64()[0] for state in states}
        assert len(first_draws) == 500

    def test_split_n_negative_rejected(self, rnd):
        """Test negative split counts are invalid."""
        with pytest.raises(InvalidArgumentError):
            rnd.split_n(-1)
