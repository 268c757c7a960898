"""
Tests for Tolerance Framework and Settings - config/.

Verifies tolerance values and the frozen default settings.
"""

import dataclasses

import pytest

from option_valuation.config.settings import SETTINGS, ConfigKeys, ValuationConfig
from option_valuation.config.tolerances import (
    ANTI_PATTERN_TOLERANCE,
    ERFC_ABSOLUTE_TOLERANCE,
    ERFC_INVERSE_ROUNDTRIP_TOLERANCE,
    MC_CONVERGENCE_RELATIVE_TOLERANCE,
    PUT_CALL_PARITY_TOLERANCE,
)


class TestTolerances:
    """Tests for the tolerance tiers."""

    def test_tiers_are_ordered(self) -> None:
        """Analytical < approximation < stochastic."""
        assert ANTI_PATTERN_TOLERANCE < ERFC_ABSOLUTE_TOLERANCE
        assert ERFC_ABSOLUTE_TOLERANCE < ERFC_INVERSE_ROUNDTRIP_TOLERANCE
        assert PUT_CALL_PARITY_TOLERANCE < MC_CONVERGENCE_RELATIVE_TOLERANCE

    def test_mc_convergence_is_two_percent(self) -> None:
        """[T1] 20,000 paths of 250 steps land within 2% of Black-Scholes."""
        assert MC_CONVERGENCE_RELATIVE_TOLERANCE == 0.02


class TestSettings:
    """Tests for the frozen defaults."""

    def test_monte_carlo_defaults(self) -> None:
        assert SETTINGS.monte_carlo.runs == 100
        assert SETTINGS.monte_carlo.steps == 10_000
        assert SETTINGS.monte_carlo.prefer is False
        assert SETTINGS.monte_carlo.seed == 12345

    def test_valuation_defaults(self) -> None:
        assert SETTINGS.valuation.days_per_year == 365.25
        assert set(SETTINGS.valuation.known_currencies) == {"EUR", "USD", "PLN"}
        assert SETTINGS.valuation.default_rate == 0.0

    def test_valuation_fields(self) -> None:
        """Only defaults read during valuation live on ValuationConfig."""
        names = {field.name for field in dataclasses.fields(ValuationConfig)}
        assert names == {"known_currencies", "days_per_year", "default_rate"}

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SETTINGS.monte_carlo.runs = 5

    def test_key_helpers(self) -> None:
        keys = ConfigKeys()
        assert keys.volatility_override("NASDAQ::TSLA") == "NASDAQ::TSLA::SG"
        assert keys.fx_rate("USD", "PLN") == "FX::USDPLN"
