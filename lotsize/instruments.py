"""Static contract economics for the supported futures.

The table is built once at import and exposed read-only. Keys are kept in
display order: full-size contract first, then its micro.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class UnknownInstrumentError(KeyError):
    """Raised for a symbol that is not in the registry."""


@dataclass(frozen=True)
class InstrumentSpec:
    symbol: str
    tick_value: float  # Dollars per minimum price increment
    ticks_per_point: int  # Increments per whole price point

    def __post_init__(self) -> None:
        if not self.tick_value > 0:
            raise ValueError(f"{self.symbol}: tick_value must be positive, got {self.tick_value!r}")
        if int(self.ticks_per_point) != self.ticks_per_point or self.ticks_per_point <= 0:
            raise ValueError(
                f"{self.symbol}: ticks_per_point must be a positive integer, got {self.ticks_per_point!r}"
            )

    @property
    def point_value(self) -> float:
        """Dollars risked per contract over one full point of adverse movement."""
        return float(self.tick_value) * int(self.ticks_per_point)


NQ = InstrumentSpec("NQ", 5.0, 4)
MNQ = InstrumentSpec("MNQ", 0.5, 4)
ES = InstrumentSpec("ES", 12.5, 4)
MES = InstrumentSpec("MES", 1.25, 4)
GC = InstrumentSpec("GC", 10.0, 10)
MGC = InstrumentSpec("MGC", 1.0, 10)

INSTRUMENTS: Mapping[str, InstrumentSpec] = MappingProxyType(
    {spec.symbol: spec for spec in (NQ, MNQ, ES, MES, GC, MGC)}
)

DEFAULT_INSTRUMENT = next(iter(INSTRUMENTS))


def instrument_symbols() -> tuple[str, ...]:
    return tuple(INSTRUMENTS)


def get_instrument(symbol: str) -> InstrumentSpec:
    """Get instrument spec by symbol. Raises UnknownInstrumentError if not found."""
    try:
        return INSTRUMENTS[symbol]
    except KeyError:
        raise UnknownInstrumentError(
            f"Unknown instrument {symbol!r}. Available: {list(INSTRUMENTS)}"
        ) from None
