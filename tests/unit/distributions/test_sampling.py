from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_statslib.distributions.sampling import ArraySample
from pysatl_statslib.distributions.strategies import DefaultSamplingUnivariateStrategy
from pysatl_statslib.families.configuration import configure_families_register
from pysatl_statslib.types import FamilyName
from tests.unit.distributions.test_basic import DistributionTestBase


class TestSampling(DistributionTestBase):
    def test_sample_uniform_ppf_only_shape_bounds_and_mean(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        n = 1000
        sample = distr.sample(n)

        assert sample.shape == (n, 1)
        arr = sample.array
        assert np.isfinite(arr).all()
        assert ((arr >= 0.0) & (arr <= 1.0)).all()

        mean = float(arr.mean())
        assert mean == pytest.approx(0.5, abs=0.1)

    def test_seed_makes_sampling_reproducible(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        first = distr.sample(16, seed=42).array
        second = distr.sample(16, seed=42).array
        np.testing.assert_array_equal(first, second)

    def test_explicit_generator_is_used(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        sample = distr.sample(8, rng=np.random.default_rng(3))
        expected = np.random.default_rng(3).random(8).reshape(8, 1)
        np.testing.assert_array_equal(sample.array, expected)

    def test_negative_size_raises(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        with pytest.raises(ValueError, match="non-negative"):
            DefaultSamplingUnivariateStrategy().sample(-1, distr)

    def test_empty_sample(self) -> None:
        sample = self.make_uniform_ppf_distribution().sample(0)
        assert len(sample) == 0
        assert sample.shape == (0, 1)


class TestArraySample:
    def test_requires_two_dimensional_data(self) -> None:
        with pytest.raises(ValueError, match="2D"):
            ArraySample(np.zeros(3))

    def test_exposes_draws_and_shape(self) -> None:
        draws = np.arange(3, dtype=float).reshape(3, 1)
        sample = ArraySample(draws)

        assert len(sample) == 3
        assert sample.shape == (3, 1)
        assert sample.array is draws


class TestFamilySampling:
    @pytest.mark.parametrize(
        "family_name, parameters, lower, upper",
        [
            (FamilyName.GAMMA, {"shape": 2.0, "scale": 3.0}, 0.0, np.inf),
            (FamilyName.BETA, {"a": 2.0, "b": 5.0}, 0.0, 1.0),
            (FamilyName.WEIBULL, {"shape": 1.5, "scale": 2.0}, 0.0, np.inf),
            (FamilyName.CONTINUOUS_UNIFORM, {"a": -1.0, "b": 3.0}, -1.0, 3.0),
            (FamilyName.BERNOULLI, {"prob": 0.3}, 0.0, 1.0),
        ],
    )
    def test_draws_lie_in_support(self, family_name, parameters, lower, upper) -> None:
        family = configure_families_register().get(family_name)
        distr = family(**parameters)

        arr = distr.sample(500, seed=11).array
        assert arr.shape == (500, 1)
        assert ((arr >= lower) & (arr <= upper)).all()
        assert distr.support is not None
        assert all(distr.support.contains(float(v)) for v in arr.ravel())

    def test_bernoulli_draws_are_zero_or_one_with_expected_frequency(self) -> None:
        bernoulli = configure_families_register().get(FamilyName.BERNOULLI)
        arr = bernoulli(prob=0.3).sample(4000, seed=5).array

        assert set(np.unique(arr)) <= {0.0, 1.0}
        assert float(arr.mean()) == pytest.approx(0.3, abs=0.05)

    def test_normal_sample_moments(self) -> None:
        normal = configure_families_register().get(FamilyName.NORMAL)
        arr = normal(mu=2.0, sigma=0.5).sample(5000, seed=1).array

        assert float(arr.mean()) == pytest.approx(2.0, abs=0.05)
        assert float(arr.std()) == pytest.approx(0.5, abs=0.05)
