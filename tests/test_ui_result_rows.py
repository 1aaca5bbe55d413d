from __future__ import annotations

import pytest

from lotsize.instruments import get_instrument
from lotsize.sizing import SizingResult, compute_sizing
from lotsize.ui.common import _append_digit, _instrument_info_line, _result_rows


def _labels(result: SizingResult) -> list[str]:
    return [label for label, _value, _style in _result_rows(result)]


def test_under_one_contract_shows_min_risk_row() -> None:
    rows = _result_rows(compute_sizing("NQ", "10", "100"))

    assert [(label, value) for label, value, _ in rows] == [
        ("Real Contract Size", "0.50 contracts"),
        ("Min. Risk for 1 Contract", "$200.00"),
    ]


def test_fractional_size_shows_floor_and_ceil_rows() -> None:
    rows = _result_rows(compute_sizing("NQ", "10", "500"))

    assert [(label, value) for label, value, _ in rows] == [
        ("Real Contract Size", "2.50 contracts"),
        ("Fixed Size (Floor)", "2 contracts"),
        ("Risk for 2 contract(s)", "$400.00"),
        ("Fixed Size (Ceil)", "3 contracts"),
        ("Risk for 3 contract(s)", "$600.00"),
    ]


def test_whole_size_hides_ceil_rows() -> None:
    labels = _labels(compute_sizing("MES", "10", "150"))

    assert "Fixed Size (Floor)" in labels
    assert "Fixed Size (Ceil)" not in labels


def test_zero_stop_shows_zero_min_risk() -> None:
    rows = _result_rows(compute_sizing("NQ", "", "100"))

    assert rows[-1][:2] == ("Min. Risk for 1 Contract", "$0.00")


def test_money_uses_thousands_separator() -> None:
    rows = _result_rows(compute_sizing("GC", "20", "1500"))

    assert rows[-1][:2] == ("Min. Risk for 1 Contract", "$2,000.00")


@pytest.mark.parametrize(
    ("symbol", "expected"),
    [("NQ", "Tick Value: $5.00 | Ticks per Point: 4"), ("MGC", "Tick Value: $1.00 | Ticks per Point: 10")],
)
def test_instrument_info_line(symbol: str, expected: str) -> None:
    assert _instrument_info_line(get_instrument(symbol)).plain == expected


def test_append_digit_accepts_single_decimal_point() -> None:
    assert _append_digit("", ".", allow_decimal=True) == "0."
    assert _append_digit("1.5", ".", allow_decimal=True) == "1.5"
    assert _append_digit("15", ".", allow_decimal=False) == "15"
    assert _append_digit("15", "0", allow_decimal=True) == "150"
