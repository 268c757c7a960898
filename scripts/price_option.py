#!/usr/bin/env python3
"""
price_option.py - Value one contract from the command line.

Usage:
    python scripts/price_option.py "European Call" --spot 100 --strike 100 \
        --rate 0.01 --volatility 0.2 --expiry 1.0
    python scripts/price_option.py "Asian Put" --strike 650 --underlying NASDAQ::TSLA \
        --data market.csv --parameters calc.csv --expiry 0.5

Market inputs given as flags override the ones resolved from --data.
Configuration files are Key,Value CSVs (see option_valuation.data.configuration).

Exit codes:
    0 = Valued
    1 = Configuration or domain error
"""

import argparse
import logging
import sys

from option_valuation.data.configuration import (
    ConfigurationError,
    get_float,
    load_configuration,
)
from option_valuation.valuation import (
    ContractType,
    ValuationInputs,
    available_labels,
    resolve_simulation_settings,
    value_contract,
)
from option_valuation.valuation.inputs import KEYS, resolve_volatility

logger = logging.getLogger("price_option")


def build_inputs(args: argparse.Namespace, data: dict[str, str]) -> ValuationInputs:
    """Combine flags with values looked up in the market data."""
    spot = args.spot
    if spot is None:
        if args.underlying is None:
            raise ConfigurationError("CRITICAL: give --spot or --underlying with --data")
        spot = get_float(data, args.underlying)

    volatility = args.volatility
    if volatility is None:
        volatility = resolve_volatility(args.underlying or "", data)

    rate = args.rate if args.rate is not None else get_float(data, KEYS.rate, 0.0)

    return ValuationInputs(
        spot=spot,
        strike=args.strike,
        rate=rate,
        volatility=volatility,
        time_to_expiry=args.expiry,
        amount=args.amount,
        currency=args.currency,
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Value a derivative contract")
    parser.add_argument("contract", help=f"Contract type, one of: {', '.join(available_labels())}")
    parser.add_argument("--strike", type=float, required=True, help="Strike price")
    parser.add_argument("--expiry", type=float, required=True, help="Time to expiry in years")
    parser.add_argument("--spot", type=float, help="Spot price (else looked up from --data)")
    parser.add_argument("--underlying", help="Market data key of the underlying, e.g. NASDAQ::TSLA")
    parser.add_argument("--rate", type=float, help="Risk-free rate (else CFG::R)")
    parser.add_argument("--volatility", type=float, help="Volatility (else <underlying>::SG or CFG::SIGMA)")
    parser.add_argument("--amount", type=float, default=1.0, help="Number of units")
    parser.add_argument("--currency", default="USD", help="Currency label of the result")
    parser.add_argument("--data", help="Market data Key,Value CSV")
    parser.add_argument("--parameters", help="Calculation parameters Key,Value CSV")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log routing decisions")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    contract_type = ContractType.from_label(args.contract)
    if contract_type is ContractType.UNKNOWN:
        logger.warning("Unknown contract type %r", args.contract)

    try:
        data = load_configuration(args.data) if args.data else {}
        parameters = load_configuration(args.parameters) if args.parameters else {}
        inputs = build_inputs(args, data)
        simulation = resolve_simulation_settings(parameters)
    except (ConfigurationError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    result = value_contract(contract_type, inputs, simulation)

    delta = "N/A" if result.delta is None else f"{result.delta:.6f}"
    print(f"{contract_type.value}: {result.value:.6f} {result.currency}  delta={delta}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
