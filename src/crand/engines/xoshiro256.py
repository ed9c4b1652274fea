"""xoshiro256** engine (Blackman & Vigna) with jump-ahead support."""

from __future__ import annotations

from collections.abc import Sequence

from crand.engines.base import MASK64, BitEngine
from crand.engines.mixing import rotl64, splitmix64_next
from crand.utils.exceptions import StateError

# Jump polynomials for 2**128 and 2**192 steps
JUMP_2_TO_THE_128: tuple[int, int, int, int] = (
    0x180EC6D33CFD0ABA,
    0xD5A61266F0C9392C,
    0xA9582618E03FC9AA,
    0x39ABDC4529B1661C,
)
JUMP_2_TO_THE_192: tuple[int, int, int, int] = (
    0x76E15D3EFEFDCBBF,
    0xC5004E441C522FB3,
    0x77710069854EE241,
    0x39109BB02ACBE635,
)


def seed_state(value: int) -> list[int]:
    """Spread a 64-bit seed over four state words via splitmix64."""
    s = value & MASK64
    words = []
    for _ in range(4):
        s, out = splitmix64_next(s)
        words.append(out)
    return words


def advance_state(s: list[int]) -> int:
    """Step the four-word state in place and return the scrambled output."""
    result = (rotl64((s[1] * 5) & MASK64, 7) * 9) & MASK64
    t = (s[1] << 17) & MASK64

    s[2] ^= s[0]
    s[3] ^= s[1]
    s[1] ^= s[2]
    s[0] ^= s[3]

    s[2] ^= t
    s[3] = rotl64(s[3], 45)

    return result


def jump_state(s: list[int], polynomial: Sequence[int]) -> list[int]:
    """Return the state reached after the jump encoded by ``polynomial``.

    ``s`` is advanced 256 times as a side effect; the returned vector is the
    XOR of the states visited at every set bit of the polynomial.
    """
    acc = [0, 0, 0, 0]
    for magic in polynomial:
        for shift in range(64):
            if magic & (1 << shift):
                acc = [x ^ y for x, y in zip(acc, s)]
            advance_state(s)
    return acc


class Xoshiro256StarStar(BitEngine):
    """xoshiro256** with four 64-bit words of state.

    Seeding spreads a single 64-bit value over the whole state with four
    splitmix64 steps.
    """

    word_bits = 64
    default_seed = 1

    def __init__(self, seed: int | None = None) -> None:
        self._s = seed_state(self.default_seed if seed is None else seed)

    def seed(self, value: int | None = None) -> None:
        """Re-seed the engine in place."""
        self._s = seed_state(self.default_seed if value is None else value)

    @property
    def state(self) -> tuple[int, ...]:
        return tuple(self._s)

    @classmethod
    def from_state(cls, words: Sequence[int]) -> Xoshiro256StarStar:
        """Rebuild an engine from four raw state words.

        Raises:
            StateError: On a wrong word count, an out-of-range word, or the
                all-zero state.
        """
        if len(words) != 4:
            raise StateError(f"{cls.__name__} state has 4 words, got {len(words)}")
        s = [int(w) for w in words]
        if any(not 0 <= w <= MASK64 for w in s):
            raise StateError(f"{cls.__name__} state words must fit in 64 bits")
        if not any(s):
            raise StateError(f"{cls.__name__} state must not be all zero")
        engine = cls.__new__(cls)
        engine._s = s
        return engine

    def __call__(self) -> int:
        return advance_state(self._s)

    def discard(self, z: int) -> None:
        """Advance the state by ``z`` steps (linear in ``z``)."""
        assert z >= 0, f"cannot discard a negative number of steps: {z}"
        for _ in range(z):
            advance_state(self._s)

    def discard_2_to_the_128(self) -> None:
        """Advance the state by 2**128 steps in constant time."""
        self._s = jump_state(self._s, JUMP_2_TO_THE_128)

    def discard_2_to_the_192(self) -> None:
        """Advance the state by 2**192 steps in constant time."""
        self._s = jump_state(self._s, JUMP_2_TO_THE_192)
