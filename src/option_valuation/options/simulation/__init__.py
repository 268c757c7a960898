"""
Monte Carlo simulation for option pricing.

Provides:
- Sequential GBM path generation from one seeded generator
- Path statistics and payoff averaging
- Monte Carlo pricing engine
"""

from option_valuation.options.simulation.paths import (
    GBMParams,
    box_muller_normal,
    generate_path,
    generate_path_set,
)
from option_valuation.options.simulation.monte_carlo import (
    MCResult,
    MonteCarloEngine,
    convergence_analysis,
    mean_of_path_averages,
    mean_of_path_maxima,
    mean_of_path_minima,
    path_averages,
    path_maxima,
    path_minima,
    price_american_call,
    price_american_put,
    price_asian_arithmetic_call,
    price_asian_arithmetic_put,
    price_european_call,
    price_european_put,
    terminal_prices,
)

__all__ = [
    # Paths
    "GBMParams",
    "box_muller_normal",
    "generate_path",
    "generate_path_set",
    # Monte Carlo
    "MCResult",
    "MonteCarloEngine",
    "convergence_analysis",
    "mean_of_path_averages",
    "mean_of_path_maxima",
    "mean_of_path_minima",
    "path_averages",
    "path_maxima",
    "path_minima",
    "price_american_call",
    "price_american_put",
    "price_asian_arithmetic_call",
    "price_asian_arithmetic_put",
    "price_european_call",
    "price_european_put",
    "terminal_prices",
]
