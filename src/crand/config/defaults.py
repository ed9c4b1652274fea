"""Default configuration values for crand."""

from __future__ import annotations

from crand.config.schema import (
    BoundConfig,
    DistributionConfig,
    EngineConfig,
    SamplingConfig,
)

DEFAULT_ENGINE = "xoshiro256**"
DEFAULT_SAMPLE_COUNT = 10


def default_engine_config() -> EngineConfig:
    """xoshiro256** with its default seed."""
    return EngineConfig(kind=DEFAULT_ENGINE)


def default_distribution_config() -> DistributionConfig:
    """Uniform reals over [0, 1) in double precision."""
    return DistributionConfig(
        kind="uniform_real",
        a=BoundConfig(value=0.0, inclusive=True),
        b=BoundConfig(value=1.0, inclusive=False),
        dtype="float64",
    )


def default_sampling_config() -> SamplingConfig:
    return SamplingConfig(
        engine=default_engine_config(),
        distribution=default_distribution_config(),
        count=DEFAULT_SAMPLE_COUNT,
    )
