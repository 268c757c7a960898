"""
Contract valuation.

Provides:
- ContractType enumeration
- Dispatcher choosing Monte Carlo or analytic pricing per contract
- Resolution of trades and configuration into valuation inputs
"""

from option_valuation.valuation.contracts import ContractType, available_labels
from option_valuation.valuation.dispatcher import (
    Money,
    OptionPrice,
    SimulationSettings,
    ValuationInputs,
    contract_delta,
    unit_price,
    uses_monte_carlo,
    value_contract,
)
from option_valuation.valuation.inputs import (
    OptionTrade,
    resolve_simulation_settings,
    resolve_valuation_inputs,
    value_trade,
)

__all__ = [
    "ContractType",
    "Money",
    "OptionPrice",
    "OptionTrade",
    "SimulationSettings",
    "ValuationInputs",
    "available_labels",
    "contract_delta",
    "resolve_simulation_settings",
    "resolve_valuation_inputs",
    "unit_price",
    "uses_monte_carlo",
    "value_contract",
    "value_trade",
]
