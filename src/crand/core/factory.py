"""Build engines and distributions from configuration."""

from __future__ import annotations

from crand.config.schema import DistributionConfig, EngineConfig
from crand.distributions.bernoulli import BernoulliDistribution
from crand.distributions.limits import Exclusive, Inclusive
from crand.distributions.normal import NormalDistribution
from crand.distributions.uniform_int import UniformIntDistribution
from crand.distributions.uniform_real import UniformRealDistribution
from crand.engines.base import BitEngine
from crand.engines.splitmix64 import Splitmix64Engine
from crand.engines.xorshift import Xorshift32, Xorshift64
from crand.engines.xoshiro256 import Xoshiro256StarStar

ENGINE_TYPES: dict[str, type[BitEngine]] = {
    "xorshift32": Xorshift32,
    "xorshift64": Xorshift64,
    "splitmix64": Splitmix64Engine,
    "xoshiro256**": Xoshiro256StarStar,
}

Distribution = (
    UniformIntDistribution | UniformRealDistribution | BernoulliDistribution | NormalDistribution
)


def engine_kind(engine: BitEngine) -> str:
    """Config name of an engine instance's type."""
    for kind, cls in ENGINE_TYPES.items():
        if type(engine) is cls:
            return kind
    raise KeyError(f"unregistered engine type {type(engine).__name__}")


def make_engine(config: EngineConfig) -> BitEngine:
    """Create a seeded engine as described by ``config``."""
    if config.kind == "splitmix64":
        return Splitmix64Engine(config.seed, config.gamma)
    return ENGINE_TYPES[config.kind](config.seed)  # type: ignore[call-arg]


def make_rng(seed: int) -> Xoshiro256StarStar:
    """Create a deterministic general purpose engine from a seed."""
    return Xoshiro256StarStar(seed)


def make_distribution(config: DistributionConfig) -> Distribution:
    """Create the distribution described by ``config``."""
    if config.kind == "bernoulli":
        return BernoulliDistribution(config.p)
    if config.kind == "normal":
        return NormalDistribution(config.mean, config.stddev, dtype=config.dtype)

    a_cls = Inclusive if config.a.inclusive else Exclusive
    b_cls = Inclusive if config.b.inclusive else Exclusive
    if config.kind == "uniform_int":
        return UniformIntDistribution(a_cls(int(config.a.value)), b_cls(int(config.b.value)))
    return UniformRealDistribution(
        a_cls(float(config.a.value)),
        b_cls(float(config.b.value)),
        dtype=config.dtype,
    )
