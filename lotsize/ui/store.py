"""In-memory calculator inputs + the half/full risk toggle.

Kept under `lotsize.ui` because it is UI-owned state: raw field text, the
selected instrument and the toggle flag. Sizing itself lives in
`lotsize.sizing` and is recomputed from this record on demand.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import DEFAULT_RISK, DEFAULT_STOP_LOSS, AppConfig
from ..instruments import DEFAULT_INSTRUMENT, InstrumentSpec, get_instrument
from ..sizing import SizingResult, compute_sizing, format_number_text, parse_number

logger = logging.getLogger(__name__)


@dataclass
class SizingInput:
    instrument: str = DEFAULT_INSTRUMENT
    stop_loss_text: str = DEFAULT_STOP_LOSS
    risk_text: str = DEFAULT_RISK
    half_risk: bool = False
    full_risk_text: str | None = None

    def __post_init__(self) -> None:
        get_instrument(self.instrument)
        if self.full_risk_text is None:
            self.full_risk_text = self.risk_text

    @classmethod
    def from_config(cls, config: AppConfig) -> SizingInput:
        return cls(
            instrument=config.instrument,
            stop_loss_text=config.stop_loss,
            risk_text=config.risk,
        )

    @property
    def spec(self) -> InstrumentSpec:
        return get_instrument(self.instrument)

    def result(self) -> SizingResult:
        return compute_sizing(self.instrument, self.stop_loss_text, self.risk_text)

    def select_instrument(self, symbol: str) -> None:
        # Resolve first so an unknown key leaves the selection untouched.
        spec = get_instrument(symbol)
        self.instrument = spec.symbol

    def set_stop_loss_text(self, text: str) -> None:
        self.stop_loss_text = text

    def set_risk_text(self, text: str) -> None:
        self.risk_text = text
        if not self.half_risk:
            self.full_risk_text = text

    def halve_risk(self) -> bool:
        if self.half_risk:
            logger.debug("halve ignored: already at half risk")
            return False
        self.full_risk_text = self.risk_text
        self.risk_text = format_number_text(parse_number(self.risk_text) / 2)
        self.half_risk = True
        logger.debug("risk halved %r -> %r", self.full_risk_text, self.risk_text)
        return True

    def restore_full_risk(self) -> bool:
        if not self.half_risk:
            logger.debug("restore ignored: already at full risk")
            return False
        self.risk_text = str(self.full_risk_text)
        self.half_risk = False
        logger.debug("risk restored to %r", self.risk_text)
        return True

    def toggle_risk(self) -> bool:
        if self.half_risk:
            return self.restore_full_risk()
        return self.halve_risk()
