"""Runtime configuration loaded from environment variables."""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from .instruments import DEFAULT_INSTRUMENT, get_instrument

DEFAULT_STOP_LOSS = "10"
DEFAULT_RISK = "100"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class AppConfig:
    instrument: str
    stop_loss: str
    risk: str
    log_level: int


def _log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"LOTSIZE_LOG_LEVEL: unknown level {raw!r}")
    return level


def _numeric_text(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip()
    try:
        float(raw)
    except ValueError:
        raise ValueError(f"{name}: expected a number, got {raw!r}") from None
    return raw


def load_config() -> AppConfig:
    """Load start-up defaults from the environment; bad values fail fast."""
    instrument = os.getenv("LOTSIZE_INSTRUMENT", DEFAULT_INSTRUMENT).strip().upper()
    get_instrument(instrument)
    return AppConfig(
        instrument=instrument,
        stop_loss=_numeric_text("LOTSIZE_STOP_LOSS", DEFAULT_STOP_LOSS),
        risk=_numeric_text("LOTSIZE_RISK", DEFAULT_RISK),
        log_level=_log_level(os.getenv("LOTSIZE_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
