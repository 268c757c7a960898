"""
Valuation dispatcher.

Chooses, per contract type, between the Monte Carlo and the analytic
pricers and packages the result with its currency and delta.

Routing:
- European call/put: Monte Carlo when preferred, otherwise Black-Scholes
- American and arithmetic Asian: always Monte Carlo (no closed form here)
- Geometric Asian and futures: always analytic
- Unknown: price 0, delta undefined

Only European contracts carry a delta; it always comes from the
analytic formulas, whichever pricer produced the price.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from option_valuation.config.settings import SETTINGS
from option_valuation.options.pricing.asian_geometric import (
    asian_geometric_call,
    asian_geometric_put,
)
from option_valuation.options.pricing.black_scholes import (
    delta_european_call,
    delta_european_put,
    european_call,
    european_put,
)
from option_valuation.options.pricing.futures import futures_long, futures_short
from option_valuation.options.simulation.monte_carlo import MCResult, MonteCarloEngine
from option_valuation.valuation.contracts import ContractType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Money:
    """Amount tagged with a currency code."""

    value: float
    currency: str


@dataclass(frozen=True)
class OptionPrice:
    """
    Valuation result.

    Attributes
    ----------
    money : Money
        Position value in the result currency
    delta : float, optional
        Per-unit delta; None where no closed-form delta exists
    """

    money: Money
    delta: Optional[float]

    @property
    def value(self) -> float:
        return self.money.value

    @property
    def currency(self) -> str:
        return self.money.currency


@dataclass(frozen=True)
class ValuationInputs:
    """
    Fully resolved scalar inputs of one valuation.

    Attributes
    ----------
    spot : float
        Underlying price S0
    strike : float
        Strike K
    rate : float
        Risk-free rate r
    volatility : float
        Volatility σ
    time_to_expiry : float
        Years to expiry T; <= 0 means expired
    amount : float
        Number of units held
    currency : str
        Currency of the result
    fx_rate : float
        Divisor converting the trade currency into the result currency
    """

    spot: float
    strike: float
    rate: float
    volatility: float
    time_to_expiry: float
    amount: float = 1.0
    currency: str = "USD"
    fx_rate: float = 1.0


@dataclass(frozen=True)
class SimulationSettings:
    """Monte Carlo knobs of one valuation."""

    runs: int = SETTINGS.monte_carlo.runs
    steps: int = SETTINGS.monte_carlo.steps
    seed: int = SETTINGS.monte_carlo.seed
    prefer_monte_carlo: bool = SETTINGS.monte_carlo.prefer


_MONTE_CARLO: dict[ContractType, Callable[..., MCResult]] = {
    ContractType.EUROPEAN_CALL: MonteCarloEngine.price_european_call,
    ContractType.EUROPEAN_PUT: MonteCarloEngine.price_european_put,
    ContractType.AMERICAN_CALL: MonteCarloEngine.price_american_call,
    ContractType.AMERICAN_PUT: MonteCarloEngine.price_american_put,
    ContractType.ASIAN_CALL: MonteCarloEngine.price_asian_arithmetic_call,
    ContractType.ASIAN_PUT: MonteCarloEngine.price_asian_arithmetic_put,
}

_ANALYTIC: dict[ContractType, Callable[[ValuationInputs], float]] = {
    ContractType.EUROPEAN_CALL: lambda i: european_call(
        i.spot, i.strike, i.rate, i.volatility, i.time_to_expiry
    ),
    ContractType.EUROPEAN_PUT: lambda i: european_put(
        i.spot, i.strike, i.rate, i.volatility, i.time_to_expiry
    ),
    ContractType.ASIAN_GEO_CALL: lambda i: asian_geometric_call(
        i.spot, i.strike, i.rate, i.volatility, i.time_to_expiry
    ),
    ContractType.ASIAN_GEO_PUT: lambda i: asian_geometric_put(
        i.spot, i.strike, i.rate, i.volatility, i.time_to_expiry
    ),
    ContractType.FUTURES_LONG: lambda i: futures_long(
        i.spot, i.strike, i.rate, i.time_to_expiry
    ),
    ContractType.FUTURES_SHORT: lambda i: futures_short(
        i.spot, i.strike, i.rate, i.time_to_expiry
    ),
}

_DELTA: dict[ContractType, Callable[..., float]] = {
    ContractType.EUROPEAN_CALL: delta_european_call,
    ContractType.EUROPEAN_PUT: delta_european_put,
}


def uses_monte_carlo(contract_type: ContractType, prefer_monte_carlo: bool) -> bool:
    """Whether the contract type is routed to the simulator."""
    if contract_type.is_european:
        return prefer_monte_carlo
    return contract_type in _MONTE_CARLO


def unit_price(
    contract_type: ContractType,
    inputs: ValuationInputs,
    simulation: SimulationSettings,
) -> float:
    """
    Price one unit of the contract, ignoring amount, FX and expiry.

    Returns 0.0 for UNKNOWN.
    """
    if uses_monte_carlo(contract_type, simulation.prefer_monte_carlo):
        logger.debug(
            "Pricing %s by Monte Carlo (runs=%d, steps=%d, seed=%d)",
            contract_type.value,
            simulation.runs,
            simulation.steps,
            simulation.seed,
        )
        engine = MonteCarloEngine(simulation.runs, simulation.steps, simulation.seed)
        result = _MONTE_CARLO[contract_type](
            engine,
            inputs.spot,
            inputs.strike,
            inputs.rate,
            inputs.volatility,
            inputs.time_to_expiry,
        )
        return result.price

    if contract_type in _ANALYTIC:
        logger.debug("Pricing %s analytically", contract_type.value)
        return _ANALYTIC[contract_type](inputs)

    logger.warning("No pricer for contract type %s; valuing at 0", contract_type.value)
    return 0.0


def contract_delta(contract_type: ContractType, inputs: ValuationInputs) -> Optional[float]:
    """Analytic delta for European contracts, None otherwise."""
    delta_func = _DELTA.get(contract_type)
    if delta_func is None:
        return None
    return delta_func(inputs.spot, inputs.strike, inputs.rate, inputs.volatility, inputs.time_to_expiry)


def value_contract(
    contract_type: ContractType,
    inputs: ValuationInputs,
    simulation: Optional[SimulationSettings] = None,
) -> OptionPrice:
    """
    Value a position in one contract.

    Parameters
    ----------
    contract_type : ContractType
        Instrument to value
    inputs : ValuationInputs
        Resolved market and position inputs
    simulation : SimulationSettings, optional
        Monte Carlo knobs; defaults from SETTINGS

    Returns
    -------
    OptionPrice
        value = unit price * amount / fx_rate in inputs.currency,
        with the per-unit delta (None where undefined)

    Examples
    --------
    >>> inputs = ValuationInputs(spot=100.0, strike=100.0, rate=0.01, volatility=0.2, time_to_expiry=1.0)
    >>> result = value_contract(ContractType.EUROPEAN_CALL, inputs)
    >>> round(result.value, 2), round(result.delta, 4)
    (8.43, 0.5596)
    """
    if simulation is None:
        simulation = SimulationSettings()

    if inputs.time_to_expiry <= 0:
        logger.info(
            "Contract %s expired (T=%s); valuing at 0",
            contract_type.value,
            inputs.time_to_expiry,
        )
        return OptionPrice(money=Money(0.0, inputs.currency), delta=0.0)

    price = unit_price(contract_type, inputs, simulation)
    value = price * inputs.amount / inputs.fx_rate

    return OptionPrice(
        money=Money(value, inputs.currency),
        delta=contract_delta(contract_type, inputs),
    )
