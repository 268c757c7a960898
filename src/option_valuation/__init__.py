"""
option-valuation: Black-Scholes and Monte Carlo valuation of derivative contracts.

Quick Start
-----------
>>> from option_valuation import ContractType, ValuationInputs, value_contract
>>> inputs = ValuationInputs(spot=100.0, strike=100.0, rate=0.01, volatility=0.2, time_to_expiry=1.0)
>>> result = value_contract(ContractType.EUROPEAN_CALL, inputs)

Version: 0.1.0
"""

__version__ = "0.1.0"

# =============================================================================
# Valuation - Primary API
# =============================================================================
from option_valuation.valuation import (
    ContractType,
    Money,
    OptionPrice,
    OptionTrade,
    SimulationSettings,
    ValuationInputs,
    value_contract,
    value_trade,
)

# =============================================================================
# Analytic Pricing
# =============================================================================
from option_valuation.options.pricing import (
    asian_geometric_call,
    asian_geometric_put,
    delta_european_call,
    delta_european_put,
    european_call,
    european_put,
    futures_long,
    futures_short,
)

# =============================================================================
# Monte Carlo Pricing
# =============================================================================
from option_valuation.options.simulation import (
    MonteCarloEngine,
    price_american_call,
    price_american_put,
    price_asian_arithmetic_call,
    price_asian_arithmetic_put,
    price_european_call,
    price_european_put,
)

# =============================================================================
# Configuration
# =============================================================================
from option_valuation.config.settings import SETTINGS

__all__ = [
    # Version
    "__version__",
    # Valuation
    "ContractType",
    "Money",
    "OptionPrice",
    "OptionTrade",
    "SimulationSettings",
    "ValuationInputs",
    "value_contract",
    "value_trade",
    # Analytic
    "asian_geometric_call",
    "asian_geometric_put",
    "delta_european_call",
    "delta_european_put",
    "european_call",
    "european_put",
    "futures_long",
    "futures_short",
    # Monte Carlo
    "MonteCarloEngine",
    "price_american_call",
    "price_american_put",
    "price_asian_arithmetic_call",
    "price_asian_arithmetic_put",
    "price_european_call",
    "price_european_put",
    # Config
    "SETTINGS",
]
