"""Position sizing: risk budget + stop distance -> contract counts.

`compute_sizing` is the only entry point the UI needs. It is pure and total:
raw field text goes in, a fully populated `SizingResult` comes out, and no
input text can make it raise. Only an unknown instrument key raises, since
the UI never offers one.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from .instruments import get_instrument

logger = logging.getLogger(__name__)

_LEADING_NUMBER_RE = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


@dataclass(frozen=True)
class SizingResult:
    raw_contracts: float = 0.0
    floor_contracts: int = 0
    floor_risk: float = 0.0
    ceil_contracts: int = 0
    ceil_risk: float = 0.0
    risk_per_contract: float = 0.0

    @property
    def has_size(self) -> bool:
        """True when the inputs produced a sizing recommendation at all."""
        return self.raw_contracts > 0


def parse_number(text: str | None) -> float:
    """Read the leading number of a field's text; anything unreadable is 0.

    Mirrors a lenient numeric field: "12abc" reads as 12, "" and "abc" read
    as 0, and "Infinity" is accepted.
    """
    if not text:
        return 0.0
    match = _LEADING_NUMBER_RE.match(str(text))
    if match is None:
        return 0.0
    try:
        value = float(match.group(1))
    except ValueError:
        return 0.0
    if math.isnan(value):
        return 0.0
    return value


def format_number_text(value: float) -> str:
    """Render a number back into field text ("50" rather than "50.0")."""
    if math.isnan(value):
        return "0"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def _finite_or_zero(value: float) -> float:
    if math.isnan(value) or not math.isfinite(value):
        return 0.0
    return float(value)


def compute_sizing(instrument_key: str, stop_loss_text: str, risk_budget_text: str) -> SizingResult:
    stop_loss = parse_number(stop_loss_text)
    risk_budget = parse_number(risk_budget_text)
    spec = get_instrument(instrument_key)

    risk_per_contract = (
        stop_loss * spec.ticks_per_point * spec.tick_value if stop_loss > 0 else 0.0
    )
    if stop_loss <= 0 or risk_budget <= 0:
        result = SizingResult(risk_per_contract=risk_per_contract)
        logger.debug(
            "sizing %s stop=%r risk=%r: no size, 1 contract risks %.2f",
            spec.symbol,
            stop_loss,
            risk_budget,
            risk_per_contract,
        )
        return result

    raw = _finite_or_zero(risk_budget / risk_per_contract) if risk_per_contract > 0 else 0.0
    # floor/ceil of inf raise, so counts come from the normalized raw value.
    floor_contracts = math.floor(raw)
    ceil_contracts = math.ceil(raw)
    result = SizingResult(
        raw_contracts=raw,
        floor_contracts=floor_contracts,
        floor_risk=_finite_or_zero(floor_contracts * risk_per_contract),
        ceil_contracts=ceil_contracts,
        ceil_risk=_finite_or_zero(ceil_contracts * risk_per_contract),
        risk_per_contract=risk_per_contract,
    )
    logger.debug(
        "sizing %s stop=%r risk=%r: raw=%.4f floor=%d ceil=%d",
        spec.symbol,
        stop_loss,
        risk_budget,
        raw,
        floor_contracts,
        ceil_contracts,
    )
    return result
