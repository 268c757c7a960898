"""
Tests for the Gaussian distribution in precision parameterisation.

[T2] Herbrich, Minka & Graepel (2007): products and ratios of Gaussians
reduce to sums and differences of natural parameters.
"""

import math

import numpy as np
import pytest

from option_valuation.statistics.gaussians import (
    LOG_SQRT_2PI,
    Gaussian,
    RandomSampler,
)


class TestConstruction:
    """Tests for the alternate constructors and derived moments."""

    def test_from_mean_and_variance(self):
        g = Gaussian.from_mean_and_variance(3.0, 4.0)
        assert g.precision == pytest.approx(0.25)
        assert g.precision_mean == pytest.approx(0.75)
        assert g.mean == pytest.approx(3.0)
        assert g.variance == pytest.approx(4.0)

    def test_from_mean_and_deviation(self):
        g = Gaussian.from_mean_and_deviation(-1.5, 2.0)
        assert g.mean == pytest.approx(-1.5)
        assert g.standard_deviation == pytest.approx(2.0)

    def test_aliases(self):
        g = Gaussian.from_mean_and_deviation(25.0, 25.0 / 3.0)
        assert g.mu == g.mean
        assert g.sigma == g.standard_deviation

    def test_frozen(self):
        g = Gaussian(1.0, 1.0)
        with pytest.raises(AttributeError):
            g.precision = 2.0

    def test_str(self):
        assert str(Gaussian.from_mean_and_variance(2.0, 0.5)) == "2.0;0.5"


class TestAlgebra:
    """Tests for multiplication, division and distance."""

    def test_product_adds_natural_parameters(self):
        a = Gaussian(1.0, 2.0)
        b = Gaussian(0.5, 3.0)
        product = a * b
        assert product.precision_mean == pytest.approx(1.5)
        assert product.precision == pytest.approx(5.0)

    def test_product_mean_is_precision_weighted(self):
        a = Gaussian.from_mean_and_variance(0.0, 1.0)
        b = Gaussian.from_mean_and_variance(4.0, 1.0)
        assert (a * b).mean == pytest.approx(2.0)
        assert (a * b).variance == pytest.approx(0.5)

    def test_ratio_undoes_product(self):
        a = Gaussian.from_mean_and_variance(1.2, 0.7)
        b = Gaussian.from_mean_and_variance(-0.3, 2.5)
        recovered = (a * b) / b
        assert recovered.precision_mean == pytest.approx(a.precision_mean)
        assert recovered.precision == pytest.approx(a.precision)

    def test_absolute_difference(self):
        a = Gaussian(1.0, 5.0)
        b = Gaussian(0.5, 1.0)
        # max(|1.0 - 0.5|, sqrt(|5 - 1|)) = max(0.5, 2.0)
        assert Gaussian.absolute_difference(a, b) == pytest.approx(2.0)

    def test_subtraction_is_absolute_difference(self):
        a = Gaussian(3.0, 1.0)
        b = Gaussian(0.0, 1.0)
        assert a - b == pytest.approx(3.0)
        assert b - a == pytest.approx(3.0)

    def test_difference_to_self_is_zero(self):
        g = Gaussian(0.3, 0.9)
        assert g - g == 0.0


class TestNormalisation:
    """Tests for the log-normalisation constants."""

    def test_product_normalisation_formula(self):
        a = Gaussian.from_mean_and_variance(1.0, 2.0)
        b = Gaussian.from_mean_and_variance(3.0, 0.5)
        expected = -LOG_SQRT_2PI - math.log(2.5) / 2.0 - 4.0 / (2.0 * 2.5)
        assert Gaussian.log_product_normalisation(a, b) == pytest.approx(expected)

    def test_product_normalisation_is_normal_density(self):
        """[T1] ∫ N(x; μa, va) N(x; μb, vb) dx = N(μa; μb, va + vb)."""
        a = Gaussian.from_mean_and_variance(0.5, 1.0)
        b = Gaussian.from_mean_and_variance(-0.5, 3.0)
        density = math.exp(-1.0 / 8.0) / math.sqrt(2.0 * math.pi * 4.0)
        assert math.exp(Gaussian.log_product_normalisation(a, b)) == pytest.approx(density)

    def test_ratio_normalisation_formula(self):
        a = Gaussian.from_mean_and_variance(0.0, 1.0)
        b = Gaussian.from_mean_and_variance(1.0, 3.0)
        expected = math.log(3.0) + LOG_SQRT_2PI - math.log(2.0) / 2.0 + 1.0 / 4.0
        assert Gaussian.log_ratio_normalisation(a, b) == pytest.approx(expected)

    def test_improper_factors_give_zero(self):
        uniform = Gaussian(0.0, 0.0)
        g = Gaussian.from_mean_and_variance(1.0, 1.0)
        assert Gaussian.log_product_normalisation(uniform, g) == 0.0
        assert Gaussian.log_ratio_normalisation(g, uniform) == 0.0

    def test_equal_variance_ratio_gives_zero(self):
        a = Gaussian.from_mean_and_variance(0.0, 2.0)
        b = Gaussian.from_mean_and_variance(1.0, 2.0)
        assert Gaussian.log_ratio_normalisation(a, b) == 0.0


class TestSampling:
    """Tests for sampling through an explicit sampler."""

    def test_sample_scales_standard_normal(self):
        g = Gaussian.from_mean_and_deviation(10.0, 2.0)
        expected = 10.0 + 2.0 * RandomSampler(99).sample()
        assert g.sample(RandomSampler(99)) == pytest.approx(expected)

    def test_sample_moments(self):
        g = Gaussian.from_mean_and_deviation(5.0, 0.5)
        sampler = RandomSampler(1)
        draws = np.array([g.sample(sampler) for _ in range(10000)])
        assert draws.mean() == pytest.approx(5.0, abs=0.02)
        assert draws.std() == pytest.approx(0.5, abs=0.02)

    def test_same_seed_same_draws(self):
        g = Gaussian.from_mean_and_variance(0.0, 1.0)
        a = [g.sample(RandomSampler(8)) for _ in range(3)]
        assert a[0] == a[1] == a[2]
