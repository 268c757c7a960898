"""
String-keyed configuration store.

Market data ("CFG::R", "NASDAQ::TSLA", "FX::USDPLN", ...) and calculation
parameters ("monteCarlo::runs", "random::seed", ...) are plain
key -> string mappings. This module reads them from two-column Key,Value
CSV files and converts values on lookup.

NEVER fails silently - a missing or malformed required value raises
ConfigurationError naming the key.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

import pandas as pd

from option_valuation.config.settings import SETTINGS

logger = logging.getLogger(__name__)

Configuration = Mapping[str, str]

REQUIRED_COLUMNS = ("Key", "Value")


class ConfigurationError(KeyError):
    """Raised when a configuration value is missing or cannot be parsed."""

    pass


def configuration_from_frame(frame: pd.DataFrame) -> dict[str, str]:
    """
    Build a configuration mapping from a Key/Value DataFrame.

    Rows with an empty key are dropped; for duplicated keys the last row wins.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise ConfigurationError(
            f"CRITICAL: configuration requires columns {REQUIRED_COLUMNS}, missing {missing}"
        )

    rows = frame.loc[:, list(REQUIRED_COLUMNS)].dropna(subset=["Key"])
    rows = rows.assign(
        Key=rows["Key"].astype(str).str.strip(),
        Value=rows["Value"].fillna("").astype(str).str.strip(),
    )
    rows = rows[rows["Key"] != ""]

    duplicated = rows["Key"][rows["Key"].duplicated()].unique()
    if len(duplicated) > 0:
        logger.warning("Duplicated configuration keys, last value wins: %s", list(duplicated))

    return dict(zip(rows["Key"], rows["Value"]))


def load_configuration(path: Union[str, Path]) -> dict[str, str]:
    """
    Load a configuration from a Key,Value CSV file.

    Parameters
    ----------
    path : str or Path
        CSV file with a header row containing Key and Value

    Returns
    -------
    dict[str, str]
        Configuration mapping

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ConfigurationError
        If the Key/Value columns are missing
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CRITICAL: configuration file not found: {path}")

    frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    config = configuration_from_frame(frame)
    logger.info("Loaded %d configuration entries from %s", len(config), path)
    return config


def get_float(config: Configuration, key: str, default: Optional[float] = None) -> float:
    """
    Look up a float value.

    Raises
    ------
    ConfigurationError
        If the key is missing and no default is given, or the value is not a number
    """
    if key not in config:
        if default is None:
            raise ConfigurationError(f"CRITICAL: missing configuration key '{key}'")
        return default
    try:
        return float(config[key])
    except ValueError as e:
        raise ConfigurationError(
            f"CRITICAL: configuration key '{key}' is not a number: {config[key]!r}"
        ) from e


def get_int(config: Configuration, key: str, default: int) -> int:
    """Look up an integer value, falling back to default when absent."""
    if key not in config:
        return default
    try:
        return int(config[key])
    except ValueError as e:
        raise ConfigurationError(
            f"CRITICAL: configuration key '{key}' is not an integer: {config[key]!r}"
        ) from e


def get_bool(config: Configuration, key: str, default: bool) -> bool:
    """Look up a YES/NO style flag, falling back to default when absent."""
    if key not in config:
        return default
    return config[key].strip().lower() in SETTINGS.monte_carlo.truthy_values
