"""Pydantic v2 configuration models for crand."""

from __future__ import annotations

import math
from typing import Literal

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

UINT64_MAX = (1 << 64) - 1

EngineKind = Literal["xorshift32", "xorshift64", "splitmix64", "xoshiro256**"]
DistributionKind = Literal["uniform_int", "uniform_real", "bernoulli", "normal"]


class EngineConfig(BaseModel):
    """Which engine to build and how to seed it."""

    model_config = ConfigDict(extra="forbid")

    kind: EngineKind = "xoshiro256**"
    seed: int | None = Field(
        default=None,
        ge=0,
        le=UINT64_MAX,
        description="Seed value; the engine's default seed when omitted",
    )
    gamma: int | None = Field(
        default=None,
        ge=1,
        le=UINT64_MAX,
        description="Odd Weyl increment (splitmix64 only)",
    )

    @model_validator(mode="after")
    def _validate_gamma(self) -> EngineConfig:
        if self.gamma is not None:
            if self.kind != "splitmix64":
                raise ValueError("gamma is only valid for the splitmix64 engine")
            if self.gamma % 2 == 0:
                raise ValueError(f"gamma must be odd, got {self.gamma:#x}")
        return self


class BoundConfig(BaseModel):
    """One end of a distribution range."""

    model_config = ConfigDict(extra="forbid")

    value: int | float
    inclusive: bool = True


class DistributionConfig(BaseModel):
    """Distribution parameters.

    ``a``/``b`` are used by the uniform distributions, ``p`` by bernoulli and
    ``mean``/``stddev`` by normal. ``dtype`` selects the floating point type of
    the real-valued distributions.
    """

    model_config = ConfigDict(extra="forbid")

    kind: DistributionKind = "uniform_real"
    a: BoundConfig = Field(
        default_factory=lambda: BoundConfig(value=0.0),
        description="Lower bound",
    )
    b: BoundConfig = Field(
        default_factory=lambda: BoundConfig(value=1.0, inclusive=False),
        description="Upper bound",
    )
    p: float = Field(default=0.5, ge=0, le=1, description="Probability of True")
    mean: float = Field(default=0.0, description="Mean of the normal distribution")
    stddev: float = Field(default=1.0, gt=0, description="Standard deviation")
    dtype: Literal["float32", "float64"] = "float64"

    @model_validator(mode="after")
    def _validate_range(self) -> DistributionConfig:
        if self.kind not in ("uniform_int", "uniform_real"):
            return self

        if self.kind == "uniform_int":
            for bound in (self.a, self.b):
                if isinstance(bound.value, float) and not bound.value.is_integer():
                    raise ValueError(f"uniform_int bounds must be integers, got {bound.value}")
            lo = int(self.a.value) + (0 if self.a.inclusive else 1)
            hi = int(self.b.value) - (0 if self.b.inclusive else 1)
            if lo > hi:
                raise ValueError(f"uniform_int range is empty: [{lo}, {hi}]")
            return self

        dtype = np.dtype(self.dtype)
        try:
            a = float(self.a.value)
            b = float(self.b.value)
        except OverflowError as exc:
            raise ValueError(f"uniform_real bounds must be finite {self.dtype} values") from exc
        limit = float(np.finfo(dtype).max)
        if not (math.isfinite(a) and math.isfinite(b)) or max(abs(a), abs(b)) > limit:
            raise ValueError(f"uniform_real bounds must be finite {self.dtype} values")
        if b - a > limit:
            raise ValueError(f"uniform_real range width overflows {self.dtype}")
        both_closed = self.a.inclusive and self.b.inclusive
        if (a > b) if both_closed else (a >= b):
            raise ValueError(f"uniform_real range is empty: a={a}, b={b}")
        if not self.a.inclusive and not self.b.inclusive:
            fa = dtype.type(a)
            fb = dtype.type(b)
            if np.nextafter(fa, fb) == fb:
                raise ValueError("open uniform_real range holds no representable value")
        return self


class SamplingConfig(BaseModel):
    """An engine, a distribution and how many values to draw."""

    model_config = ConfigDict(extra="forbid")

    engine: EngineConfig = Field(default_factory=EngineConfig)
    distribution: DistributionConfig = Field(default_factory=DistributionConfig)
    count: int = Field(default=10, ge=1, le=10_000_000)
