"""Shared UI helpers.

Pure formatting helpers for the calculator screen.
Keep it dependency-light: rich only, no Textual widgets.
"""

from __future__ import annotations

from rich.text import Text

from ..instruments import InstrumentSpec
from ..sizing import SizingResult

# region Formatting Helpers
def _fmt_money(value: float) -> str:
    return f"${value:,.2f}"


def _fmt_contracts(value: float, decimals: int = 0) -> str:
    return f"{value:.{decimals}f} contracts"
# endregion


def _append_digit(value: str, char: str, allow_decimal: bool) -> str:
    if char == "." and not allow_decimal:
        return value
    if char == "." and "." in value:
        return value
    if char == "." and not value:
        return "0."
    return value + char


def _result_rows(result: SizingResult) -> list[tuple[str, str, str]]:
    """(label, value, style) rows for the results panel.

    Floor rows appear only once at least one whole contract fits the budget;
    the ceil rows are added when rounding up changes the count. Otherwise the
    panel falls back to the risk of the smallest possible position.
    """
    rows = [("Real Contract Size", _fmt_contracts(result.raw_contracts, 2), "bold #5fafff")]
    if result.floor_contracts > 0:
        rows.append(("Fixed Size (Floor)", _fmt_contracts(result.floor_contracts), "bold green"))
        rows.append(
            (
                f"Risk for {result.floor_contracts} contract(s)",
                _fmt_money(result.floor_risk),
                "bold yellow",
            )
        )
        if result.floor_contracts < result.ceil_contracts:
            rows.append(("Fixed Size (Ceil)", _fmt_contracts(result.ceil_contracts), "bold #5fd7d7"))
            rows.append(
                (
                    f"Risk for {result.ceil_contracts} contract(s)",
                    _fmt_money(result.ceil_risk),
                    "bold #ff8700",
                )
            )
    else:
        rows.append(("Min. Risk for 1 Contract", _fmt_money(result.risk_per_contract), "bold red"))
    return rows


def _instrument_info_line(spec: InstrumentSpec) -> Text:
    return Text(
        f"Tick Value: {_fmt_money(spec.tick_value)} | Ticks per Point: {spec.ticks_per_point}",
        style="grey58",
    )


def _clip(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) > width:
        if width <= 1:
            return "…"
        return text[: width - 1] + "…"
    return text.ljust(width)
