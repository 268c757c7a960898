"""
Resolution of trade records into valuation inputs.

Turns an OptionTrade plus the market data and calculation parameter
configurations into the flat scalars the pricers consume:

- spot        <- data[underlying]
- rate        <- data["CFG::R"] (default 0)
- volatility  <- data["<underlying>::SG"], else data["CFG::SIGMA"]
- T           <- (expiry - as_of) in days / 365.25
- currency    <- parameters["valuation::baseCurrency"] when an FX rate
                 data["FX::<base><trade ccy>"] exists, else the trade currency
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from option_valuation.config.settings import SETTINGS
from option_valuation.data.configuration import (
    Configuration,
    ConfigurationError,
    get_bool,
    get_float,
    get_int,
)
from option_valuation.valuation.contracts import ContractType
from option_valuation.valuation.dispatcher import (
    Money,
    OptionPrice,
    SimulationSettings,
    ValuationInputs,
    value_contract,
)

logger = logging.getLogger(__name__)

KEYS = SETTINGS.keys


@dataclass(frozen=True)
class OptionTrade:
    """
    One option position.

    Attributes
    ----------
    name : str
        Trade identifier
    contract_type : ContractType
        Instrument
    underlying : str
        Market data key of the underlying, e.g. "NASDAQ::TSLA"
    expiry : datetime
        Expiry date
    currency : str
        Trade currency
    strike : float
        Strike price
    amount : float
        Number of units
    """

    name: str
    contract_type: ContractType
    underlying: str
    expiry: datetime
    currency: str
    strike: float
    amount: float = 1.0


def resolve_volatility(underlying: str, data: Configuration) -> float:
    """Per-instrument volatility override, else the global CFG::SIGMA."""
    override = KEYS.volatility_override(underlying)
    if override in data:
        return get_float(data, override)
    return get_float(data, KEYS.sigma)


def resolve_currency(
    trade_currency: str,
    data: Configuration,
    parameters: Configuration,
) -> tuple[str, float]:
    """
    Resolve the result currency and FX divisor.

    Returns
    -------
    tuple[str, float]
        (currency, fx_rate); (trade_currency, 1.0) when no base currency is
        configured or its FX rate is unavailable
    """
    target = parameters.get(KEYS.base_currency, trade_currency)
    if target == trade_currency:
        return trade_currency, 1.0

    fx_key = KEYS.fx_rate(target, trade_currency)
    if fx_key not in data:
        logger.warning("FX rate %s not available; reporting in %s", fx_key, trade_currency)
        return trade_currency, 1.0
    return target, get_float(data, fx_key)


def is_accepted_currency(currency: str, parameters: Configuration) -> bool:
    """Whether the currency is among valuation::knownCurrencies (or the defaults)."""
    if KEYS.known_currencies in parameters:
        known = parameters[KEYS.known_currencies].split()
    else:
        known = SETTINGS.valuation.known_currencies
    return currency in known


def year_fraction(expiry: datetime, as_of: datetime) -> float:
    """Years between as_of and expiry; negative once expired."""
    return (expiry - as_of).total_seconds() / 86400.0 / SETTINGS.valuation.days_per_year


def resolve_valuation_inputs(
    trade: OptionTrade,
    data: Configuration,
    parameters: Configuration,
    as_of: Optional[datetime] = None,
) -> ValuationInputs:
    """
    Resolve a trade into scalar valuation inputs.

    Raises
    ------
    ConfigurationError
        If the underlying's spot or the volatility is missing, or a value is malformed
    """
    if as_of is None:
        as_of = datetime.now()

    if trade.underlying not in data:
        raise ConfigurationError(
            f"CRITICAL: no spot price for underlying '{trade.underlying}'"
        )

    currency, fx_rate = resolve_currency(trade.currency, data, parameters)

    return ValuationInputs(
        spot=get_float(data, trade.underlying),
        strike=trade.strike,
        rate=get_float(data, KEYS.rate, SETTINGS.valuation.default_rate),
        volatility=resolve_volatility(trade.underlying, data),
        time_to_expiry=year_fraction(trade.expiry, as_of),
        amount=trade.amount,
        currency=currency,
        fx_rate=fx_rate,
    )


def resolve_simulation_settings(parameters: Configuration) -> SimulationSettings:
    """Read Monte Carlo knobs, falling back to SETTINGS.monte_carlo."""
    defaults = SETTINGS.monte_carlo
    return SimulationSettings(
        runs=get_int(parameters, KEYS.mc_runs, defaults.runs),
        steps=get_int(parameters, KEYS.mc_steps, defaults.steps),
        seed=get_int(parameters, KEYS.random_seed, defaults.seed),
        prefer_monte_carlo=get_bool(parameters, KEYS.mc_prefer, defaults.prefer),
    )


def value_trade(
    trade: OptionTrade,
    data: Configuration,
    parameters: Configuration,
    as_of: Optional[datetime] = None,
) -> OptionPrice:
    """
    Value a trade against the given configurations.

    Trades in a currency outside the accepted set are valued at 0 with
    delta 0, the same as expired trades.

    Examples
    --------
    >>> trade = OptionTrade("Option0001", ContractType.EUROPEAN_CALL, "NASDAQ::TSLA",
    ...                     datetime(2030, 1, 1), "USD", strike=650.0)
    >>> data = {"NASDAQ::TSLA": "651.30", "CFG::R": "0.01", "CFG::SIGMA": "0.10"}
    >>> result = value_trade(trade, data, {})
    """
    if not is_accepted_currency(trade.currency, parameters):
        logger.warning(
            "Trade %s in unaccepted currency %s; valuing at 0", trade.name, trade.currency
        )
        return OptionPrice(money=Money(0.0, trade.currency), delta=0.0)

    inputs = resolve_valuation_inputs(trade, data, parameters, as_of)
    simulation = resolve_simulation_settings(parameters)
    return value_contract(trade.contract_type, inputs, simulation)
