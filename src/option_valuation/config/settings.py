"""
Frozen configuration settings for option valuation.

All configuration is immutable (frozen dataclasses) to ensure reproducibility.
Values here are defaults only: a configuration store (see
option_valuation.data.configuration) overrides them per valuation run.
"""

from dataclasses import dataclass


# =============================================================================
# Configuration Keys
# =============================================================================

@dataclass(frozen=True)
class ConfigKeys:
    """
    String keys understood by the configuration store.

    Market data keys (rate, sigma, FX) live in the data configuration;
    Monte Carlo and valuation keys live in the calculation parameters.
    """

    rate: str = "CFG::R"
    sigma: str = "CFG::SIGMA"
    sigma_suffix: str = "::SG"
    fx_prefix: str = "FX::"

    mc_runs: str = "monteCarlo::runs"
    mc_steps: str = "monteCarlo::steps"
    mc_prefer: str = "monteCarlo::prefer"
    random_seed: str = "random::seed"

    base_currency: str = "valuation::baseCurrency"
    known_currencies: str = "valuation::knownCurrencies"

    def volatility_override(self, underlying: str) -> str:
        """Per-instrument volatility key, e.g. NASDAQ::TSLA::SG."""
        return f"{underlying}{self.sigma_suffix}"

    def fx_rate(self, target: str, source: str) -> str:
        """FX rate key, e.g. FX::USDPLN for PLN amounts quoted in USD."""
        return f"{self.fx_prefix}{target}{source}"


# =============================================================================
# Monte Carlo Configuration
# =============================================================================

@dataclass(frozen=True)
class MonteCarloConfig:
    """
    Immutable Monte Carlo defaults.

    Attributes
    ----------
    runs : int
        Number of simulated paths
    steps : int
        Discretization steps per path
    prefer : bool
        Route European contracts to simulation instead of Black-Scholes
    seed : int
        Seed of the single generator shared by a path-set
    """

    runs: int = 100
    steps: int = 10_000
    prefer: bool = False
    seed: int = 12345

    # Values accepted as "yes" for monteCarlo::prefer
    truthy_values: tuple[str, ...] = ("yes", "true", "1", "y")


# =============================================================================
# Valuation Configuration
# =============================================================================

@dataclass(frozen=True)
class ValuationConfig:
    """
    Immutable valuation defaults.

    Attributes
    ----------
    known_currencies : tuple[str, ...]
        Currencies accepted when valuation::knownCurrencies is not configured
    days_per_year : float
        Day count used to convert expiry dates into year fractions
    default_rate : float
        Risk-free rate used when CFG::R is missing
    """

    known_currencies: tuple[str, ...] = ("EUR", "USD", "PLN")
    days_per_year: float = 365.25
    default_rate: float = 0.0


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Master frozen configuration combining all sub-configs.

    Usage
    -----
    >>> from option_valuation.config.settings import SETTINGS
    >>> SETTINGS.monte_carlo.seed
    12345
    """

    keys: ConfigKeys = ConfigKeys()
    monte_carlo: MonteCarloConfig = MonteCarloConfig()
    valuation: ValuationConfig = ValuationConfig()


# Singleton instance - import this
SETTINGS = Settings()
