"""Marsaglia xorshift engines."""

from __future__ import annotations

from collections.abc import Sequence

from crand.engines.base import BitEngine
from crand.engines.mixing import splitmix64_mix
from crand.utils.exceptions import StateError


def xorshift_seed(value: int, word_bits: int) -> int:
    """Derive a non-zero starting word from a raw seed.

    The seed is mixed with splitmix64 and folded down to ``word_bits``. The
    all-zero word is the fixed point of the xorshift transition, so a zero
    result is replaced by the all-ones word.
    """
    mask = (1 << word_bits) - 1
    mixed = splitmix64_mix(value)
    if word_bits < 64:
        mixed ^= mixed >> word_bits
    return (mixed & mask) or mask


class XorshiftEngine(BitEngine):
    """Xorshift engine with a single state word.

    Subclasses pick the word width and the (a, b, c) shift triple. Period is
    ``2**word_bits - 1``.
    """

    word_bits: int = 64
    shifts: tuple[int, int, int] = (13, 7, 17)
    default_seed: int = 1

    def __init__(self, seed: int | None = None) -> None:
        self._state = 0
        self.seed(self.default_seed if seed is None else seed)

    def seed(self, value: int | None = None) -> None:
        """Re-seed the engine in place."""
        if value is None:
            value = self.default_seed
        self._state = xorshift_seed(value, self.word_bits)

    @property
    def state(self) -> tuple[int, ...]:
        return (self._state,)

    @classmethod
    def from_state(cls, words: Sequence[int]) -> XorshiftEngine:
        """Rebuild an engine from its raw state word.

        Raises:
            StateError: If the vector is not one non-zero word of the right width.
        """
        if len(words) != 1:
            raise StateError(f"{cls.__name__} state has 1 word, got {len(words)}")
        word = int(words[0])
        if not 0 < word <= cls.max():
            raise StateError(f"{cls.__name__} state word must be in [1, {cls.max()}], got {word}")
        engine = cls.__new__(cls)
        engine._state = word
        return engine

    def __call__(self) -> int:
        a, b, c = self.shifts
        mask = self.max()
        x = self._state
        x ^= (x << a) & mask
        x ^= x >> b
        x ^= (x << c) & mask
        self._state = x
        return x


class Xorshift32(XorshiftEngine):
    """32-bit xorshift with the (13, 17, 5) triple from Marsaglia (2003)."""

    word_bits = 32
    shifts = (13, 17, 5)


class Xorshift64(XorshiftEngine):
    """64-bit xorshift with the (13, 7, 17) triple from Marsaglia (2003)."""

    word_bits = 64
    shifts = (13, 7, 17)
