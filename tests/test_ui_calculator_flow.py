from __future__ import annotations

import asyncio

from lotsize.config import AppConfig
from lotsize.ui.app import LotSizeApp


def _ensure_event_loop() -> None:
    try:
        asyncio.get_event_loop()
    except RuntimeError:
        asyncio.set_event_loop(asyncio.new_event_loop())


def _app(**overrides: object) -> LotSizeApp:
    _ensure_event_loop()
    values: dict[str, object] = {"instrument": "NQ", "stop_loss": "10", "risk": "100", "log_level": 30}
    values.update(overrides)
    return LotSizeApp(AppConfig(**values))  # type: ignore[arg-type]


def _type(app: LotSizeApp, chars: str) -> None:
    for char in chars:
        app._handle_digit(char)


def test_bindings_include_risk_toggle_hotkey_h() -> None:
    assert ("h", "toggle_risk", "Half/Full R") in LotSizeApp.BINDINGS


def test_initial_render_shows_min_risk_for_default_inputs() -> None:
    app = _app()

    plain = app._render_body().plain

    assert "Real Contract Size" in plain
    assert "0.50 contracts" in plain
    assert "Min. Risk for 1 Contract" in plain
    assert "$200.00" in plain
    assert "Half R" in plain


def test_typing_into_risk_field_recomputes_and_tracks_snapshot() -> None:
    app = _app()

    for _ in range(3):
        app._handle_backspace()
    _type(app, "500")

    assert app._sizing.risk_text == "500"
    assert app._sizing.full_risk_text == "500"
    plain = app._render_body().plain
    assert "Fixed Size (Floor)" in plain
    assert "Risk for 2 contract(s)" in plain
    assert "Fixed Size (Ceil)" in plain
    assert "$600.00" in plain


def test_stop_field_is_edited_after_moving_down() -> None:
    app = _app()

    app.action_field_next()
    app.action_clear_field()
    _type(app, "2.5")

    assert app._sizing.stop_loss_text == "2.5"
    assert app._sizing.risk_text == "100"
    assert app._sizing.result().risk_per_contract == 50.0


def test_decimal_point_on_empty_field_gets_leading_zero() -> None:
    app = _app()

    app.action_clear_field()
    _type(app, ".5.")

    assert app._sizing.risk_text == "0.5"


def test_toggle_action_halves_and_restores_risk() -> None:
    app = _app(risk="300")

    app.action_toggle_risk()
    assert app._sizing.risk_text == "150"
    assert "Full R" in app._render_body().plain

    app.action_toggle_risk()
    assert app._sizing.risk_text == "300"
    assert "Half R" in app._render_body().plain


def test_edit_while_halved_does_not_move_full_risk() -> None:
    app = _app(risk="300")
    app.action_toggle_risk()

    app.action_clear_field()
    _type(app, "90")
    app.action_toggle_risk()

    assert app._sizing.risk_text == "300"


def test_instrument_cycling_wraps_both_ways() -> None:
    app = _app()

    app.action_instrument_prev()
    assert app._sizing.instrument == "MGC"
    app.action_instrument_next()
    app.action_instrument_next()
    assert app._sizing.instrument == "MNQ"
    assert "5.00 contracts" in app._render_body().plain


def test_empty_inputs_render_zeroes() -> None:
    app = _app()

    app.action_clear_field()
    app.action_field_next()
    app.action_clear_field()

    plain = app._render_body().plain
    assert "0.00 contracts" in plain
    assert "$0.00" in plain
