"""crand — deterministic, portable random engines and distributions."""

__version__ = "0.1.0"

from crand.config.defaults import default_distribution_config as default_distribution_config
from crand.config.defaults import default_engine_config as default_engine_config
from crand.config.defaults import default_sampling_config as default_sampling_config
from crand.config.schema import BoundConfig as BoundConfig
from crand.config.schema import DistributionConfig as DistributionConfig
from crand.config.schema import EngineConfig as EngineConfig
from crand.config.schema import SamplingConfig as SamplingConfig
from crand.core.factory import make_distribution as make_distribution
from crand.core.factory import make_engine as make_engine
from crand.core.factory import make_rng as make_rng
from crand.distributions.bernoulli import BernoulliDistribution as BernoulliDistribution
from crand.distributions.limits import Exclusive as Exclusive
from crand.distributions.limits import Inclusive as Inclusive
from crand.distributions.normal import NormalDistribution as NormalDistribution
from crand.distributions.uniform_int import UniformIntDistribution as UniformIntDistribution
from crand.distributions.uniform_real import UniformRealDistribution as UniformRealDistribution
from crand.engines.base import UniformRandomBitGenerator as UniformRandomBitGenerator
from crand.engines.base import (
    check_uniform_random_bit_generator as check_uniform_random_bit_generator,
)
from crand.engines.splitmix64 import Splitmix64Engine as Splitmix64Engine
from crand.engines.xorshift import Xorshift32 as Xorshift32
from crand.engines.xorshift import Xorshift64 as Xorshift64
from crand.engines.xoshiro256 import Xoshiro256StarStar as Xoshiro256StarStar
