"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest
from scipy.stats import chisquare

from crand.engines.base import BitEngine
from crand.engines.xoshiro256 import Xoshiro256StarStar

UNIFORMITY_DRAWS = 256 * 200


@pytest.fixture
def engine() -> Xoshiro256StarStar:
    """Default-seeded engine for tests."""
    return Xoshiro256StarStar()


@pytest.fixture
def byte_uniformity() -> Callable[[BitEngine], float]:
    """Chi-square p-value of the byte frequencies of an engine's output."""

    def pvalue(engine: BitEngine) -> float:
        raw = engine.random_raw(UNIFORMITY_DRAWS)
        counts = np.bincount(raw.view(np.uint8), minlength=256)
        return float(chisquare(counts).pvalue)

    return pvalue
