"""
Gaussian statistics primitives.

Provides:
- erfc / erfc_inverse and the standard normal CDF, PDF and quantile
- Truncated Gaussian corrections (single- and double-sided)
- RandomSampler (buffered Box-Muller) and the Gaussian distribution type
"""

from option_valuation.statistics.gaussians import (
    DomainError,
    Gaussian,
    RandomSampler,
    additive_correction,
    additive_correction_double,
    erfc,
    erfc_inverse,
    multiplicative_correction,
    multiplicative_correction_double,
    normal_cdf,
    normal_pdf,
    normal_quantile,
)

__all__ = [
    "DomainError",
    "Gaussian",
    "RandomSampler",
    "additive_correction",
    "additive_correction_double",
    "erfc",
    "erfc_inverse",
    "multiplicative_correction",
    "multiplicative_correction_double",
    "normal_cdf",
    "normal_pdf",
    "normal_quantile",
]
