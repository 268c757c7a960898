"""
Centralized pytest fixtures for the option-valuation test suite.

Fixture Categories:
1. Market Parameters - Standard market conditions for option pricing
2. Hull Examples - Textbook examples for validation
3. Configuration - Market data and calculation parameter mappings
4. Trades - Sample option trades
"""

from dataclasses import dataclass
from datetime import datetime

import numpy as np
import pytest

from option_valuation.valuation import ContractType, OptionTrade, SimulationSettings


# =============================================================================
# MARKET PARAMETERS
# =============================================================================

@dataclass(frozen=True)
class MarketParams:
    """Standard market parameters for option pricing tests."""

    spot: float = 100.0
    strike: float = 100.0
    rate: float = 0.01
    volatility: float = 0.20
    time_to_expiry: float = 1.0

    def as_args(self) -> tuple[float, float, float, float, float]:
        """(spot, strike, rate, volatility, time_to_expiry) positional tuple."""
        return (self.spot, self.strike, self.rate, self.volatility, self.time_to_expiry)


@pytest.fixture
def market_params() -> MarketParams:
    """Standard ATM market parameters."""
    return MarketParams()


# =============================================================================
# HULL TEXTBOOK EXAMPLES
# =============================================================================

@dataclass(frozen=True)
class HullExample:
    """A textbook example from Hull, Options, Futures, and Other Derivatives."""

    name: str
    spot: float
    strike: float
    rate: float
    volatility: float
    time_to_expiry: float
    expected_call: float
    expected_put: float


# Hull Chapter 15, Example 15.6
HULL_EXAMPLE_15_6 = HullExample(
    name="Hull Example 15.6",
    spot=42.0,
    strike=40.0,
    rate=0.10,
    volatility=0.20,
    time_to_expiry=0.5,
    expected_call=4.76,
    expected_put=0.81,
)


@pytest.fixture
def hull_example_15_6() -> HullExample:
    """Hull Chapter 15 Example 15.6: European options on a non-dividend stock."""
    return HULL_EXAMPLE_15_6


# =============================================================================
# CONFIGURATION
# =============================================================================

@pytest.fixture
def market_data() -> dict[str, str]:
    """Market data configuration as shipped with the desktop application."""
    return {
        "FX::USDPLN": "3.76",
        "FX::USDEUR": "0.87",
        "FX::EURGBP": "0.90",
        "CFG::R": "0.01",
        "CFG::SIGMA": "0.10",
        "NASDAQ::TSLA": "651.30",
        "NASDAQ::TSLA::SG": "0.1",
        "NASDAQ::AAPL": "150.00",
    }


@pytest.fixture
def calculation_parameters() -> dict[str, str]:
    """Calculation parameters with a small Monte Carlo budget."""
    return {
        "monteCarlo::runs": "200",
        "monteCarlo::steps": "20",
        "monteCarlo::prefer": "NO",
        "random::seed": "12345",
        "valuation::baseCurrency": "USD",
        "valuation::knownCurrencies": "USD PLN EUR GBP",
    }


@pytest.fixture
def fast_simulation() -> SimulationSettings:
    """Small Monte Carlo budget for routing tests."""
    return SimulationSettings(runs=200, steps=20, seed=12345, prefer_monte_carlo=False)


# =============================================================================
# TRADES
# =============================================================================

AS_OF = datetime(2024, 1, 15, 12, 0, 0)


@pytest.fixture
def as_of() -> datetime:
    """Fixed valuation timestamp."""
    return AS_OF


@pytest.fixture
def tsla_call() -> OptionTrade:
    """One-year European call on TSLA, in USD."""
    return OptionTrade(
        name="Option0001",
        contract_type=ContractType.EUROPEAN_CALL,
        underlying="NASDAQ::TSLA",
        expiry=datetime(2025, 1, 14, 18, 0, 0),  # 365.25 days after AS_OF
        currency="USD",
        strike=650.0,
        amount=10.0,
    )


# =============================================================================
# NUMPY RANDOM GENERATOR
# =============================================================================

@pytest.fixture
def reproducible_rng():
    """Provide a reproducible numpy random generator."""
    return np.random.default_rng(seed=42)
