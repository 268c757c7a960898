"""
Monte Carlo option pricing engine.

Implements Monte Carlo valuation over sequentially generated GBM path-sets:
- European options on the terminal price
- American options approximated by the running maximum/minimum of each path
- Arithmetic-average Asian options on the average of each path

Prices are the plain average of the per-path payoffs; no discounting and no
delta is applied here.

The American values are NOT optimal-exercise prices: paying off on the
best price seen along the path is a crude proxy that overstates the
early-exercise premium. They are kept because existing results depend on them.

[T1] MC converges to the expectation at rate 1/√N

See: Glasserman (2003) "Monte Carlo Methods in Financial Engineering"
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

import numpy as np

from option_valuation.options.simulation.paths import generate_path_set

Path = Sequence[float]


# =============================================================================
# Path statistics
# =============================================================================


def _per_path(path_set: Iterable[Path], statistic: Callable[[Path], float]) -> np.ndarray:
    return np.array([statistic(path) for path in path_set], dtype=float)


def path_averages(path_set: Iterable[Path]) -> np.ndarray:
    """Average price of each path (all n+1 observations)."""
    return _per_path(path_set, lambda path: sum(path) / len(path))


def path_maxima(path_set: Iterable[Path]) -> np.ndarray:
    """Maximum price of each path."""
    return _per_path(path_set, max)


def path_minima(path_set: Iterable[Path]) -> np.ndarray:
    """Minimum price of each path."""
    return _per_path(path_set, min)


def terminal_prices(path_set: Iterable[Path]) -> np.ndarray:
    """Chronologically last price of each path."""
    return _per_path(path_set, lambda path: path[-1])


def mean_of_path_averages(path_set: Iterable[Path]) -> float:
    """Average across paths of each path's own average."""
    return float(path_averages(path_set).mean())


def mean_of_path_maxima(path_set: Iterable[Path]) -> float:
    """Average across paths of each path's maximum."""
    return float(path_maxima(path_set).mean())


def mean_of_path_minima(path_set: Iterable[Path]) -> float:
    """Average across paths of each path's minimum."""
    return float(path_minima(path_set).mean())


# =============================================================================
# Payoffs
# =============================================================================


def call_payoff(statistic: np.ndarray, strike: float) -> np.ndarray:
    """[T1] Call payoff: max(stat - K, 0). NaN statistics stay NaN."""
    return np.maximum(statistic - strike, 0.0)


def put_payoff(statistic: np.ndarray, strike: float) -> np.ndarray:
    """[T1] Put payoff: max(K - stat, 0). NaN statistics stay NaN."""
    return np.maximum(strike - statistic, 0.0)


# =============================================================================
# Engine
# =============================================================================


@dataclass(frozen=True)
class MCResult:
    """
    Monte Carlo pricing result.

    Attributes
    ----------
    price : float
        Average payoff across paths
    standard_error : float
        Standard error of the estimate (NaN for a single path)
    confidence_interval : tuple[float, float]
        95% confidence interval
    n_paths : int
        Number of paths used
    payoffs : np.ndarray
        Individual path payoffs
    """

    price: float
    standard_error: float
    confidence_interval: tuple[float, float]
    n_paths: int
    payoffs: np.ndarray

    @property
    def relative_error(self) -> float:
        """Relative standard error (SE / price)."""
        if abs(self.price) < 1e-10:
            return float("inf")
        return self.standard_error / abs(self.price)


class MonteCarloEngine:
    """
    Monte Carlo pricing engine over sequential path-sets.

    Every pricing call builds a fresh generator from ``seed``, so repeated
    calls with the same inputs are bit-identical.

    Parameters
    ----------
    n_paths : int
        Number of simulated paths (N)
    n_steps : int
        Discretization steps per path (n)
    seed : int
        Seed of the generator shared by the path-set

    Examples
    --------
    >>> engine = MonteCarloEngine(n_paths=20000, n_steps=250, seed=42)
    >>> result = engine.price_european_call(100.0, 100.0, 0.01, 0.20, 1.0)
    >>> print(f"Price: {result.price:.4f} ± {result.standard_error:.4f}")
    """

    def __init__(self, n_paths: int, n_steps: int, seed: int):
        if n_paths <= 0:
            raise ValueError(f"CRITICAL: n_paths must be > 0, got {n_paths}")
        if n_steps <= 0:
            raise ValueError(f"CRITICAL: n_steps must be > 0, got {n_steps}")

        self.n_paths = n_paths
        self.n_steps = n_steps
        self.seed = seed

    def _path_set(self, spot: float, rate: float, volatility: float, time_to_expiry: float):
        return generate_path_set(
            self.n_paths, self.n_steps, spot, rate, volatility, time_to_expiry, self.seed
        )

    def price_european_call(
        self, spot: float, strike: float, rate: float, volatility: float, time_to_expiry: float
    ) -> MCResult:
        """[T1] European call: mean of max(S(T) - K, 0)."""
        terminal = terminal_prices(self._path_set(spot, rate, volatility, time_to_expiry))
        return self._compute_result(call_payoff(terminal, strike))

    def price_european_put(
        self, spot: float, strike: float, rate: float, volatility: float, time_to_expiry: float
    ) -> MCResult:
        """[T1] European put: mean of max(K - S(T), 0)."""
        terminal = terminal_prices(self._path_set(spot, rate, volatility, time_to_expiry))
        return self._compute_result(put_payoff(terminal, strike))

    def price_american_call(
        self, spot: float, strike: float, rate: float, volatility: float, time_to_expiry: float
    ) -> MCResult:
        """Approximate American call: mean of max(max_t S(t) - K, 0)."""
        maxima = path_maxima(self._path_set(spot, rate, volatility, time_to_expiry))
        return self._compute_result(call_payoff(maxima, strike))

    def price_american_put(
        self, spot: float, strike: float, rate: float, volatility: float, time_to_expiry: float
    ) -> MCResult:
        """Approximate American put: mean of max(K - min_t S(t), 0)."""
        minima = path_minima(self._path_set(spot, rate, volatility, time_to_expiry))
        return self._compute_result(put_payoff(minima, strike))

    def price_asian_arithmetic_call(
        self, spot: float, strike: float, rate: float, volatility: float, time_to_expiry: float
    ) -> MCResult:
        """Arithmetic Asian call: mean of max(A - K, 0), A the path average."""
        averages = path_averages(self._path_set(spot, rate, volatility, time_to_expiry))
        return self._compute_result(call_payoff(averages, strike))

    def price_asian_arithmetic_put(
        self, spot: float, strike: float, rate: float, volatility: float, time_to_expiry: float
    ) -> MCResult:
        """Arithmetic Asian put: mean of max(K - A, 0), A the path average."""
        averages = path_averages(self._path_set(spot, rate, volatility, time_to_expiry))
        return self._compute_result(put_payoff(averages, strike))

    def _compute_result(self, payoffs: np.ndarray) -> MCResult:
        price = float(payoffs.mean())

        if len(payoffs) > 1:
            se = float(payoffs.std(ddof=1) / np.sqrt(len(payoffs)))
        else:
            se = float("nan")

        # 95% confidence interval (z = 1.96)
        return MCResult(
            price=price,
            standard_error=se,
            confidence_interval=(price - 1.96 * se, price + 1.96 * se),
            n_paths=len(payoffs),
            payoffs=payoffs,
        )


# =============================================================================
# Functional interface
# =============================================================================


def price_european_call(
    n_paths: int,
    n_steps: int,
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    seed: int,
) -> float:
    """
    Price a European call by simulation.

    Parameters
    ----------
    n_paths : int
        Number of paths (N)
    n_steps : int
        Steps per path (n)
    spot : float
        Initial price S0
    strike : float
        Strike K
    rate : float
        Risk-free rate r
    volatility : float
        Volatility σ
    time_to_expiry : float
        Horizon T in years
    seed : int
        Generator seed

    Returns
    -------
    float
        Average terminal call payoff

    Examples
    --------
    >>> price = price_european_call(20000, 250, 100.0, 100.0, 0.01, 0.20, 1.0, seed=42)
    """
    engine = MonteCarloEngine(n_paths, n_steps, seed)
    return engine.price_european_call(spot, strike, rate, volatility, time_to_expiry).price


def price_european_put(
    n_paths: int,
    n_steps: int,
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    seed: int,
) -> float:
    """Price a European put by simulation (see price_european_call)."""
    engine = MonteCarloEngine(n_paths, n_steps, seed)
    return engine.price_european_put(spot, strike, rate, volatility, time_to_expiry).price


def price_american_call(
    n_paths: int,
    n_steps: int,
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    seed: int,
) -> float:
    """Approximate American call from path maxima."""
    engine = MonteCarloEngine(n_paths, n_steps, seed)
    return engine.price_american_call(spot, strike, rate, volatility, time_to_expiry).price


def price_american_put(
    n_paths: int,
    n_steps: int,
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    seed: int,
) -> float:
    """Approximate American put from path minima."""
    engine = MonteCarloEngine(n_paths, n_steps, seed)
    return engine.price_american_put(spot, strike, rate, volatility, time_to_expiry).price


def price_asian_arithmetic_call(
    n_paths: int,
    n_steps: int,
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    seed: int,
) -> float:
    """Arithmetic-average Asian call from path averages."""
    engine = MonteCarloEngine(n_paths, n_steps, seed)
    return engine.price_asian_arithmetic_call(spot, strike, rate, volatility, time_to_expiry).price


def price_asian_arithmetic_put(
    n_paths: int,
    n_steps: int,
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    seed: int,
) -> float:
    """Arithmetic-average Asian put from path averages."""
    engine = MonteCarloEngine(n_paths, n_steps, seed)
    return engine.price_asian_arithmetic_put(spot, strike, rate, volatility, time_to_expiry).price


def convergence_analysis(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    reference_price: float,
    n_steps: int = 1,
    path_counts: Sequence[int] = (1000, 5000, 10000, 50000),
    seed: int = 42,
) -> dict:
    """
    Analyze MC convergence of the European call to a reference price.

    The simulated price is an undiscounted expectation, so the reference
    must be on the same footing (e.g. a Black-Scholes price times e^{rT}).

    Returns
    -------
    dict
        Per-run-count errors and the fitted log-log convergence rate
    """
    results = []

    for n in path_counts:
        engine = MonteCarloEngine(n_paths=n, n_steps=n_steps, seed=seed)
        mc_result = engine.price_european_call(spot, strike, rate, volatility, time_to_expiry)

        error = abs(mc_result.price - reference_price)
        rel_error = error / reference_price if reference_price > 0 else float("inf")

        results.append(
            {
                "n_paths": n,
                "mc_price": mc_result.price,
                "reference_price": reference_price,
                "absolute_error": error,
                "relative_error": rel_error,
                "standard_error": mc_result.standard_error,
                "within_ci": mc_result.confidence_interval[0]
                <= reference_price
                <= mc_result.confidence_interval[1],
            }
        )

    return {
        "results": results,
        "convergence_rate": _estimate_convergence_rate(results),
    }


def _estimate_convergence_rate(results: list[dict]) -> float:
    """
    Estimate convergence rate from results.

    [T1] Theory predicts rate = -0.5 (error ~ 1/√N).
    """
    log_n = np.log([r["n_paths"] for r in results])
    log_error = np.log([r["absolute_error"] + 1e-10 for r in results])

    slope, _ = np.polyfit(log_n, log_error, 1)
    return float(slope)
