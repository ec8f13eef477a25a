"""
Splittable random state for generators.

Rnd is an immutable SplitMix64 state. Drawing a number returns the number
together with the successor state, and split() derives two independent child
states. Nothing here mutates, so a Rnd handed to two sub-draws can never be
advanced behind either one's back.
"""

import time
from dataclasses import dataclass

from ..utilities.constants import DOUBLE_UNIT, GOLDEN_GAMMA, MASK_64, InvalidArgumentError


def _mix64(z: int) -> int:
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK_64
    return z ^ (z >> 31)


def _mix_gamma(z: int) -> int:
    z = ((z ^ (z >> 33)) * 0xFF51AFD7ED558CCD) & MASK_64
    z = ((z ^ (z >> 33)) * 0xC4CEB9FE1A85EC53) & MASK_64
    z = (z ^ (z >> 33)) | 1
    # Gammas with too few bit transitions make poor streams
    if (z ^ (z >> 1)).bit_count() < 24:
        z ^= 0xAAAAAAAAAAAAAAAA
    return z


@dataclass(frozen=True)
class Rnd:
    """
    Immutable SplitMix64 random state.

    Every operation is a pure function of (seed, gamma): the same Rnd always
    produces the same numbers and the same children.
    """

    seed: int
    gamma: int = GOLDEN_GAMMA

    def __post_init__(self) -> None:
        """Normalize to 64-bit words and check the gamma."""
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise InvalidArgumentError(f"Seed must be an integer, got: {type(self.seed).__name__}")
        if self.gamma & 1 == 0:
            raise InvalidArgumentError(f"Gamma must be odd, got: {self.gamma}")
        object.__setattr__(self, "seed", self.seed & MASK_64)
        object.__setattr__(self, "gamma", self.gamma & MASK_64)

    @classmethod
    def from_seed(cls, seed: int) -> "Rnd":
        """Create a state from any integer seed."""
        return cls(seed)

    @classmethod
    def create(cls) -> "Rnd":
        """Create a state seeded from the clock."""
        return cls(_mix64(time.time_ns() & MASK_64))

    def _advance(self) -> "Rnd":
        return Rnd((self.seed + self.gamma) & MASK_64, self.gamma)

    def next_int64(self) -> tuple[int, "Rnd"]:
        """Draw an unsigned 64-bit integer."""
        nxt = self._advance()
        return _mix64(nxt.seed), nxt

    def next_float(self) -> tuple[float, "Rnd"]:
        """Draw a float uniformly from [0.0, 1.0)."""
        bits, nxt = self.next_int64()
        return (bits >> 11) * DOUBLE_UNIT, nxt

    def range(self, low: int, high: int) -> tuple[int, "Rnd"]:
        """
        Draw an integer uniformly from the inclusive range [low, high].

        Uses rejection sampling so the result is unbiased for every span,
        including spans wider than 64 bits.
        """
        if low > high:
            raise InvalidArgumentError(f"Empty range: low {low} is greater than high {high}")
        span = high - low + 1
        if span == 1:
            return low, self

        words = (span.bit_length() + 63) // 64
        total = 1 << (64 * words)
        limit = total - (total % span)
        rnd = self
        while True:
            value = 0
            for _ in range(words):
                bits, rnd = rnd.next_int64()
                value = (value << 64) | bits
            if value < limit:
                return low + value % span, rnd

    def split(self) -> tuple["Rnd", "Rnd"]:
        """Split into two independent states."""
        first = self._advance()
        second = first._advance()
        return Rnd(second.seed, self.gamma), Rnd(_mix64(first.seed), _mix_gamma(second.seed))

    def split_n(self, count: int) -> list["Rnd"]:
        """Split into `count` independent states, one per sub-draw."""
        if count < 0:
            raise InvalidArgumentError(f"Split count must be non-negative, got: {count}")
        states = []
        rnd = self
        for _ in range(count):
            rnd, child = rnd.split()
            states.append(child)
        return states

    def __repr__(self) -> str:
        """Representation for debugging."""
        return f"Rnd(seed=0x{self.seed:016x}, gamma=0x{self.gamma:016x})"
