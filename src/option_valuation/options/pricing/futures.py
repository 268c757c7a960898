"""
Fair value of futures-style positions.

[T1] Long = S - K*e^(-rT): receive the asset, pay K at expiry.
[T1] Short = -Long.

No delta is defined for these positions.
"""

import numpy as np


def futures_long(spot: float, strike: float, rate: float, time_to_expiry: float) -> float:
    """
    Value a long futures position.

    Examples
    --------
    >>> round(futures_long(100.0, 90.0, 0.05, 1.0), 2)
    14.39
    """
    return float(spot - strike * np.exp(-rate * np.float64(time_to_expiry)))


def futures_short(spot: float, strike: float, rate: float, time_to_expiry: float) -> float:
    """Value a short futures position: the exact negation of the long."""
    return -futures_long(spot, strike, rate, time_to_expiry)
