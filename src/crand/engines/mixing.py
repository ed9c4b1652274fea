"""Stateless bit-mixing helpers shared by the engines."""

from __future__ import annotations

from crand.engines.base import MASK64

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


def rotl64(x: int, k: int) -> int:
    """Rotate a 64-bit unsigned integer left by ``k`` bits."""
    return ((x << k) | (x >> (64 - k))) & MASK64


def splitmix64_next(state: int) -> tuple[int, int]:
    """Advance a splitmix64 counter by one step.

    Used to spread a short seed over wider engine state.

    Args:
        state: Current 64-bit counter.

    Returns:
        Tuple of (new counter, mixed 64-bit output).
    """
    state = (state + GOLDEN_GAMMA) & MASK64
    z = state
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return state, z ^ (z >> 31)


def splitmix64_mix(value: int) -> int:
    """Mix a single 64-bit value (one splitmix64 step from ``value``)."""
    return splitmix64_next(value & MASK64)[1]
