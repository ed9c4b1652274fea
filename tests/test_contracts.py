"""Tests for the generator and distribution protocols."""

from __future__ import annotations

import pytest

from crand.distributions.base import RandomNumberDistribution
from crand.distributions.bernoulli import BernoulliDistribution
from crand.distributions.normal import NormalDistribution
from crand.distributions.uniform_int import UniformIntDistribution
from crand.distributions.uniform_real import UniformRealDistribution
from crand.engines.base import (
    UniformRandomBitGenerator,
    check_uniform_random_bit_generator,
    engine_bit_width,
)
from crand.engines.splitmix64 import Splitmix64Engine
from crand.engines.xorshift import Xorshift32, Xorshift64
from crand.engines.xoshiro256 import Xoshiro256StarStar
from crand.utils.exceptions import ContractError, CrandError


class ScriptedByteGenerator:
    """Replays a fixed list of byte-wide outputs offset by ``base``."""

    base = 0

    def __init__(self, values: list[int]) -> None:
        self._values = iter(values)
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return self.base + next(self._values)

    @classmethod
    def min(cls) -> int:
        return cls.base

    @classmethod
    def max(cls) -> int:
        return cls.base + 255


class OffsetByteGenerator(ScriptedByteGenerator):
    base = 16


class DecimalGenerator:
    def __call__(self) -> int:
        return 0

    @classmethod
    def min(cls) -> int:
        return 0

    @classmethod
    def max(cls) -> int:
        return 9


class EmptyRangeGenerator(DecimalGenerator):
    @classmethod
    def max(cls) -> int:
        return 0


class SignedGenerator(DecimalGenerator):
    @classmethod
    def min(cls) -> int:
        return -1

    @classmethod
    def max(cls) -> int:
        return 0


class TestEngineContract:
    @pytest.mark.parametrize(
        "engine",
        [Xorshift32(), Xorshift64(), Splitmix64Engine(), Xoshiro256StarStar()],
    )
    def test_engines_satisfy_contract(self, engine) -> None:
        assert isinstance(engine, UniformRandomBitGenerator)
        check_uniform_random_bit_generator(engine)

    def test_custom_generator_satisfies_contract(self) -> None:
        check_uniform_random_bit_generator(ScriptedByteGenerator([]))
        check_uniform_random_bit_generator(OffsetByteGenerator([]))

    def test_plain_callable_rejected(self) -> None:
        with pytest.raises(ContractError):
            check_uniform_random_bit_generator(lambda: 4)

    @pytest.mark.parametrize("bad", [DecimalGenerator(), EmptyRangeGenerator(), SignedGenerator()])
    def test_bad_ranges_rejected(self, bad) -> None:
        with pytest.raises(ContractError):
            check_uniform_random_bit_generator(bad)

    def test_contract_error_is_type_error(self) -> None:
        assert issubclass(ContractError, TypeError)
        assert issubclass(ContractError, CrandError)

    def test_bit_widths(self) -> None:
        assert engine_bit_width(Xorshift32()) == 32
        assert engine_bit_width(Xoshiro256StarStar()) == 64
        assert engine_bit_width(OffsetByteGenerator([])) == 8


class TestDistributionContract:
    @pytest.mark.parametrize(
        "dist",
        [
            UniformIntDistribution(0, 9),
            UniformRealDistribution(0.0, 1.0),
            BernoulliDistribution(),
            NormalDistribution(),
        ],
    )
    def test_distributions_satisfy_protocol(self, dist) -> None:
        assert isinstance(dist, RandomNumberDistribution)
        assert dist.min() <= dist.max()
        assert dist.copy() == dist

    def test_sample_checks_generator(self) -> None:
        with pytest.raises(ContractError):
            UniformIntDistribution(0, 9).sample(DecimalGenerator(), 5)


class TestNarrowGenerators:
    def test_outputs_concatenate_high_first(self) -> None:
        g = ScriptedByteGenerator([0x12, 0x34])
        assert UniformIntDistribution(0, 0xFFFF)(g) == 0x1234
        assert g.calls == 2

    def test_excess_low_bits_dropped_and_rejected(self) -> None:
        g = ScriptedByteGenerator([0xFF, 0x40])
        # 0xFF >> 5 == 7 is out of range, 0x40 >> 5 == 2 is accepted
        assert UniformIntDistribution(0, 4)(g) == 2
        assert g.calls == 2

    def test_generator_minimum_is_subtracted(self) -> None:
        g = OffsetByteGenerator([0xAB])
        assert UniformIntDistribution(100, 355)(g) == 100 + 0xAB
