"""Splittable splitmix64 engine (Steele, Lea & Flood, 2014)."""

from __future__ import annotations

from collections.abc import Sequence

from crand.engines.base import MASK64, BitEngine
from crand.engines.mixing import GOLDEN_GAMMA
from crand.utils.exceptions import StateError

# Output mix
_M3 = 0xBF58476D1CE4E5B9
_M4 = 0x94D049BB133111EB
_S, _T, _U = 30, 27, 31

# Gamma derivation mix used by split()
_M1 = 0xFF51AFD7ED558CCD
_M2 = 0xC4CEB9FE1A85EC53
_P, _Q, _R = 33, 33, 33

_ALTERNATING_BITS = 0xAAAAAAAAAAAAAAAA
_MIN_GAMMA_TRANSITIONS = 24


def mix_gamma(z: int) -> int:
    """Turn a 64-bit value into an odd increment with enough bit transitions."""
    z ^= z >> _P
    z = (z * _M1) & MASK64
    z ^= z >> _Q
    z = (z * _M2) & MASK64
    z ^= z >> _R
    z |= 1
    if (z ^ (z >> 1)).bit_count() < _MIN_GAMMA_TRANSITIONS:
        z ^= _ALTERNATING_BITS
    return z


class Splitmix64Engine(BitEngine):
    """Weyl-sequence counter followed by a fixed 64-bit mix.

    The output of a call is the mix of the counter *before* it is incremented
    by ``gamma``, which makes ``discard`` constant time.
    """

    word_bits = 64
    default_seed = 0xBAD0FF1CED15EA5E
    default_gamma = GOLDEN_GAMMA

    def __init__(self, seed: int | None = None, gamma: int | None = None) -> None:
        self._state = (self.default_seed if seed is None else seed) & MASK64
        self._gamma = (self.default_gamma if gamma is None else gamma) & MASK64

    def seed(self, value: int | None = None) -> None:
        """Reset the counter; ``gamma`` is kept."""
        self._state = (self.default_seed if value is None else value) & MASK64

    @property
    def gamma(self) -> int:
        return self._gamma

    @property
    def state(self) -> tuple[int, ...]:
        return (self._state, self._gamma)

    @classmethod
    def from_state(cls, words: Sequence[int]) -> Splitmix64Engine:
        """Rebuild an engine from ``(counter, gamma)``.

        Raises:
            StateError: If the vector does not hold two 64-bit words.
        """
        if len(words) != 2:
            raise StateError(f"{cls.__name__} state has 2 words, got {len(words)}")
        state, gamma = (int(w) for w in words)
        for word in (state, gamma):
            if not 0 <= word <= MASK64:
                raise StateError(f"{cls.__name__} state word out of 64-bit range: {word}")
        return cls(state, gamma)

    def __call__(self) -> int:
        x = self._state
        self._state = (self._state + self._gamma) & MASK64
        x ^= x >> _S
        x = (x * _M3) & MASK64
        x ^= x >> _T
        x = (x * _M4) & MASK64
        x ^= x >> _U
        return x

    def discard(self, z: int) -> None:
        """Advance the state by ``z`` steps in constant time."""
        assert z >= 0, f"cannot discard a negative number of steps: {z}"
        self._state = (self._state + z * self._gamma) & MASK64

    def split(self) -> Splitmix64Engine:
        """Fork a second, independent-looking engine off this one.

        Consumes one output as the child's seed, derives the child's gamma
        from the advanced counter, then steps this engine once more.
        """
        seed = self()
        gamma = mix_gamma(self._state)
        self._state = (self._state + self._gamma) & MASK64
        return Splitmix64Engine(seed, gamma)
