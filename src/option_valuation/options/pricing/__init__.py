"""
Analytic option pricing.

Provides:
- Black-Scholes European call/put prices and deltas
- Geometric-average Asian call/put closed forms
- Futures long/short fair values
"""

from option_valuation.options.pricing.asian_geometric import (
    asian_geometric_call,
    asian_geometric_put,
)
from option_valuation.options.pricing.black_scholes import (
    delta_european_call,
    delta_european_put,
    european_call,
    european_put,
    put_call_parity_check,
)
from option_valuation.options.pricing.futures import futures_long, futures_short

__all__ = [
    # Black-Scholes
    "delta_european_call",
    "delta_european_put",
    "european_call",
    "european_put",
    "put_call_parity_check",
    # Asian
    "asian_geometric_call",
    "asian_geometric_put",
    # Futures
    "futures_long",
    "futures_short",
]
