"""
Geometric Brownian Motion (GBM) path generation.

Implements the sequential path simulator behind the Monte Carlo pricer:
- Box-Muller normal variates from two fresh uniform draws per step
- Lazy, single-pass price streams truncated to n+1 observations
- Path-sets drawn in sequence from ONE seeded generator

[T1] GBM SDE: dS = rS dt + σS dW
[T1] Exact step: S(t+dt) = S(t) * exp((r - σ²/2)dt + σ√dt * Z)

Reproducibility is defined for a whole path-set: path k+1 continues the
generator state left by path k, so a single path cannot be regenerated
in isolation.

See: Glasserman (2003) "Monte Carlo Methods in Financial Engineering"
"""

import math
from dataclasses import dataclass
from itertools import islice
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class GBMParams:
    """
    Parameters for GBM simulation.

    No validation is performed on rate, volatility or time: degenerate
    inputs (σ = 0, T <= 0) are allowed and produce non-finite or flat paths.

    Attributes
    ----------
    spot : float
        Initial spot price
    rate : float
        Risk-free rate (annualized, decimal)
    volatility : float
        Volatility (annualized, decimal)
    time_to_expiry : float
        Time to expiry in years
    """

    spot: float
    rate: float
    volatility: float
    time_to_expiry: float

    def step_drift(self, n_steps: int) -> float:
        """Deterministic log-increment per step: (r - σ²/2)·T/n."""
        return (self.rate - self.volatility * self.volatility / 2.0) * self.time_to_expiry / n_steps

    def step_diffusion(self, n_steps: int) -> float:
        """Diffusion scale per step: σ·√(T/n); NaN when T < 0."""
        with np.errstate(invalid="ignore"):
            return float(self.volatility * np.sqrt(np.float64(self.time_to_expiry) / n_steps))


def box_muller_normal(rng: np.random.Generator) -> float:
    """
    Draw one standard normal variate from two fresh uniforms.

    [T1] Z = √(-2 ln u1) · sin(2π u2)

    Unlike RandomSampler, nothing is buffered: every call consumes exactly
    two uniforms. u1 is taken as 1 - U so it lies in (0, 1].
    """
    u1 = 1.0 - rng.random()
    u2 = rng.random()
    return math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2)


def next_price(price: float, drift: float, diffusion: float, rng: np.random.Generator) -> float:
    """Advance a price by one lognormal step."""
    return price * math.exp(drift + diffusion * box_muller_normal(rng))


def price_stream(
    params: GBMParams,
    n_steps: int,
    rng: np.random.Generator,
) -> Iterator[float]:
    """
    Infinite lazy stream of prices unfolded from the spot.

    The step size is fixed by n_steps; the stream itself never ends.
    """
    drift = params.step_drift(n_steps)
    diffusion = params.step_diffusion(n_steps)
    price = params.spot
    while True:
        yield price
        price = next_price(price, drift, diffusion, rng)


def generate_path(
    spot: float,
    n_steps: int,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    rng: np.random.Generator,
) -> Iterator[float]:
    """
    Generate one GBM path lazily.

    Parameters
    ----------
    spot : float
        Initial price
    n_steps : int
        Number of steps; the path holds n_steps + 1 prices
    rate : float
        Risk-free rate
    volatility : float
        Volatility
    time_to_expiry : float
        Horizon in years
    rng : numpy.random.Generator
        Uniform source; advanced by two draws per step as the path is consumed

    Returns
    -------
    Iterator[float]
        Single-pass iterator over n_steps + 1 prices starting at spot
    """
    if n_steps <= 0:
        raise ValueError(f"CRITICAL: n_steps must be > 0, got {n_steps}")
    params = GBMParams(spot=spot, rate=rate, volatility=volatility, time_to_expiry=time_to_expiry)
    return islice(price_stream(params, n_steps, rng), n_steps + 1)


def generate_path_set(
    n_paths: int,
    n_steps: int,
    spot: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
    seed: int,
) -> Iterator[tuple[float, ...]]:
    """
    Generate N paths sequentially from a single seeded generator.

    Each path is fully drawn before the next one starts, so the random
    draws of consecutive paths are disjoint, consecutive substreams.

    Parameters
    ----------
    n_paths : int
        Number of paths (N)
    n_steps : int
        Steps per path (n)
    spot, rate, volatility, time_to_expiry : float
        GBM parameters
    seed : int
        Seed of the one generator shared by all paths

    Yields
    ------
    tuple[float, ...]
        One path of n_steps + 1 prices

    Examples
    --------
    >>> paths = list(generate_path_set(10, 252, 100.0, 0.01, 0.2, 1.0, seed=42))
    >>> len(paths), len(paths[0])
    (10, 253)
    """
    if n_paths <= 0:
        raise ValueError(f"CRITICAL: n_paths must be > 0, got {n_paths}")
    if n_steps <= 0:
        raise ValueError(f"CRITICAL: n_steps must be > 0, got {n_steps}")

    rng = np.random.default_rng(seed)
    for _ in range(n_paths):
        yield tuple(generate_path(spot, n_steps, rate, volatility, time_to_expiry, rng))
