"""
Tests for closed-form geometric Asian options.

[T1] Kemna & Vorst (1990): the geometric average of a GBM is lognormal
with volatility σ/√3 and carry b = (r - σ²/6)/2.
"""

import math

import pytest

from option_valuation.options.pricing.asian_geometric import (
    _geometric_terms,
    asian_geometric_call,
    asian_geometric_put,
)
from option_valuation.options.pricing.black_scholes import european_call


class TestGeometricTerms:
    """Tests for the adjusted Black-Scholes terms."""

    def test_atm_terms(self, market_params):
        d1, d2, carry, discount = _geometric_terms(*market_params.as_args())
        sigma_g = 0.2 / math.sqrt(3.0)
        b = 0.5 * (0.01 - 0.5 * sigma_g**2)
        assert d1 == pytest.approx((b + 0.5 * sigma_g**2) / sigma_g)
        assert d1 - d2 == pytest.approx(sigma_g)
        assert carry == pytest.approx(math.exp(b - 0.01))
        assert discount == pytest.approx(math.exp(-0.01))


class TestGeometricAsianPricing:
    """Tests for call and put prices."""

    def test_atm_call_reference(self, market_params):
        assert asian_geometric_call(*market_params.as_args()) == pytest.approx(4.645, abs=0.01)

    def test_call_below_european(self, market_params):
        """Averaging reduces volatility, so the Asian call is cheaper."""
        assert asian_geometric_call(*market_params.as_args()) < european_call(
            *market_params.as_args()
        )

    @pytest.mark.parametrize(
        "spot,strike,rate,vol,T",
        [
            (100.0, 100.0, 0.01, 0.2, 1.0),
            (651.3, 650.0, 0.01, 0.1, 0.5),
            (90.0, 110.0, 0.05, 0.4, 2.0),
        ],
    )
    def test_parity(self, spot, strike, rate, vol, T):
        """C - P = S·e^{(b-r)T} - K·e^{-rT}."""
        _, _, carry, discount = _geometric_terms(spot, strike, rate, vol, T)
        call = asian_geometric_call(spot, strike, rate, vol, T)
        put = asian_geometric_put(spot, strike, rate, vol, T)
        assert call - put == pytest.approx(spot * carry - strike * discount, abs=1e-10)

    def test_put_non_negative(self):
        for strike in (60.0, 100.0, 140.0):
            assert asian_geometric_put(100.0, strike, 0.01, 0.2, 1.0) >= -1e-10

    def test_deep_itm_call_is_forward_like(self):
        """With K -> 0 the call tends to S·e^{(b-r)T}."""
        _, _, carry, _ = _geometric_terms(100.0, 1e-8, 0.01, 0.2, 1.0)
        assert asian_geometric_call(100.0, 1e-8, 0.01, 0.2, 1.0) == pytest.approx(
            100.0 * carry, rel=1e-6
        )
