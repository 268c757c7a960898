"""
Centralized tolerance framework for option valuation.

Tolerance Tiers:
    Tier 1 (Analytical): closed-form results, machine precision achievable
    Tier 2 (Approximation): bounded by the rational approximations used in
        the Gaussian statistics library
    Tier 3 (Stochastic): Monte Carlo estimates

References:
    [T1] Press et al. (2007) "Numerical Recipes", Section 6.2 (erfc)
    [T1] Glasserman (2003) Ch. 3-4 - Monte Carlo error bounds
"""

from typing import Final

# =============================================================================
# Tier 1: Analytical Tolerances
# =============================================================================

#: No-arbitrage bounds and exact identities (e.g. futures short == -long)
ANTI_PATTERN_TOLERANCE: Final[float] = 1e-10

#: Put-call parity: C - P = S - K*exp(-rT)
#: Looser than machine precision because Φ carries the erfc approximation error
PUT_CALL_PARITY_TOLERANCE: Final[float] = 1e-5


# =============================================================================
# Tier 2: Approximation Tolerances
# =============================================================================

#: Absolute error bound of the Chebyshev erfc approximation
ERFC_ABSOLUTE_TOLERANCE: Final[float] = 1.2e-7

#: erfc_inverse(erfc(x)) round trip
ERFC_INVERSE_ROUNDTRIP_TOLERANCE: Final[float] = 1e-6

#: Analytic prices computed with the approximate Φ vs an exact-Φ oracle
ANALYTIC_ORACLE_TOLERANCE: Final[float] = 1e-4


# =============================================================================
# Tier 3: Stochastic Tolerances
# =============================================================================

#: MC vs Black-Scholes for vanilla options at 20,000 paths of 250 steps
MC_CONVERGENCE_RELATIVE_TOLERANCE: Final[float] = 0.02
