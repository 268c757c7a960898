"""
Closed-form pricing of geometric-average Asian options.

Under GBM the continuously sampled geometric average is itself lognormal,
so the option is a Black-Scholes option on an asset with reduced
volatility and drift:

[T1] σ_g = σ/√3
[T1] b = (r - σ_g²/2) / 2
[T1] C = S*e^((b-r)T)*N(d1) - K*e^(-rT)*N(d2)
[T1] P = K*e^(-rT)*N(-d2) - S*e^((b-r)T)*N(-d1)
with d1 = (ln(S/K) + (b + σ_g²/2)T) / (σ_g√T), d2 = d1 - σ_g√T

References
----------
[T1] Kemna, A., & Vorst, A. (1990). A pricing method for options based on average asset values.
[T1] Haug, E. G. (2007). The Complete Guide to Option Pricing Formulas, Section 4.20.
"""

import numpy as np

from option_valuation.statistics.gaussians import normal_cdf


def _geometric_terms(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
) -> tuple[float, float, float, float]:
    """Return (d1, d2, carry factor e^((b-r)T), discount e^(-rT))."""
    with np.errstate(divide="ignore", invalid="ignore"):
        sigma_g = volatility / np.sqrt(3.0)
        b = 0.5 * (rate - 0.5 * sigma_g**2)

        vol_sqrt_t = sigma_g * np.sqrt(np.float64(time_to_expiry))
        d1 = (np.log(np.float64(spot) / strike) + (b + 0.5 * sigma_g**2) * time_to_expiry) / vol_sqrt_t
        d2 = d1 - vol_sqrt_t

        carry = np.exp((b - rate) * time_to_expiry)
        discount = np.exp(-rate * np.float64(time_to_expiry))

    return float(d1), float(d2), float(carry), float(discount)


def asian_geometric_call(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
) -> float:
    """
    Price a geometric-average Asian call.

    Parameters
    ----------
    spot : float
        Current spot price
    strike : float
        Strike price
    rate : float
        Risk-free rate (decimal)
    volatility : float
        Volatility of the underlying (decimal)
    time_to_expiry : float
        Time to expiry (years)

    Returns
    -------
    float
        Call price; always below the European call for σ > 0
    """
    d1, d2, carry, discount = _geometric_terms(spot, strike, rate, volatility, time_to_expiry)
    return spot * carry * normal_cdf(d1) - strike * discount * normal_cdf(d2)


def asian_geometric_put(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_expiry: float,
) -> float:
    """Price a geometric-average Asian put (see asian_geometric_call)."""
    d1, d2, carry, discount = _geometric_terms(spot, strike, rate, volatility, time_to_expiry)
    return strike * discount * normal_cdf(-d2) - spot * carry * normal_cdf(-d1)
