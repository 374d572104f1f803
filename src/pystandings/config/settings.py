"""Runtime settings resolved from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_SOURCE_ENV = "PYSTANDINGS_SOURCE"
_FETCH_TIMEOUT_ENV = "PYSTANDINGS_FETCH_TIMEOUT"
_TOP_N_ENV = "PYSTANDINGS_TOP_N"
_STRICT_ENV = "PYSTANDINGS_STRICT_NUMERIC"
_EXPORT_FILENAME_ENV = "PYSTANDINGS_EXPORT_FILENAME"

_SOURCE_DEFAULT = "data/final_standings.csv"
_FETCH_TIMEOUT_DEFAULT = 10.0
_TOP_N_DEFAULT = 10
_EXPORT_FILENAME_DEFAULT = "tournament_results.csv"


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    text = raw.strip().lower()
    if text in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if text in {"0", "false", "f", "no", "n", "off", ""}:
        return False
    logger.warning("Invalid flag for %s: %s; using default %s", name, raw, default)
    return default


@dataclass(frozen=True)
class Settings:
    source: str = _SOURCE_DEFAULT
    fetch_timeout: float = _FETCH_TIMEOUT_DEFAULT
    top_n: int = _TOP_N_DEFAULT
    strict_numeric: bool = False
    export_filename: str = _EXPORT_FILENAME_DEFAULT


def load_settings() -> Settings:
    """Build settings from ``PYSTANDINGS_*`` variables, falling back to defaults."""

    return Settings(
        source=os.getenv(_SOURCE_ENV) or _SOURCE_DEFAULT,
        fetch_timeout=_env_float(_FETCH_TIMEOUT_ENV, _FETCH_TIMEOUT_DEFAULT, clamp_min=0.1),
        top_n=_env_int(_TOP_N_ENV, _TOP_N_DEFAULT, min_value=1),
        strict_numeric=_env_flag(_STRICT_ENV, False),
        export_filename=os.getenv(_EXPORT_FILENAME_ENV) or _EXPORT_FILENAME_DEFAULT,
    )
