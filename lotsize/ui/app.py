"""Lot size calculator TUI."""

from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from ..config import AppConfig, load_config
from ..instruments import instrument_symbols
from .common import _append_digit, _clip, _instrument_info_line, _result_rows
from .store import SizingInput

logger = logging.getLogger(__name__)

_FIELDS = ("risk", "stop")
_FIELD_LABELS = {"risk": "Risk per Trade (R)", "stop": "Stop Loss (Points)"}


# region Calculator UI
class LotSizeApp(App):
    TITLE = "Futures Lot Size Calculator"
    SUB_TITLE = "For NQ, ES, GC and their Micros"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("h", "toggle_risk", "Half/Full R"),
        ("left", "instrument_prev", "Prev Instrument"),
        ("right", "instrument_next", "Next Instrument"),
        ("up", "field_prev", "Field Up"),
        ("down", "field_next", "Field Down"),
        ("k", "field_prev", "Field Up"),
        ("j", "field_next", "Field Down"),
        ("delete", "clear_field", "Clear"),
    ]

    CSS = """
    Screen {
        layout: vertical;
        align: center middle;
    }

    #calc-body {
        width: 52;
        height: auto;
        padding: 1 2;
        border: solid #26567a;
    }

    #calc-info {
        width: 52;
        height: 1;
        content-align: center middle;
    }
    """

    _PANEL_WIDTH = 44
    _LABEL_WIDTH = 28
    _SELECTED_STYLE = "bold #f8fbff on #26567a"
    _UNSELECTED_STYLE = "#c0c0c0 on #232834"

    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__()
        self._config = config or load_config()
        self._sizing = SizingInput.from_config(self._config)
        self._active_field = _FIELDS[0]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="calc-body")
        yield Static("", id="calc-info")
        yield Footer()

    def on_mount(self) -> None:
        self._calc_body = self.query_one("#calc-body", Static)
        self._calc_info = self.query_one("#calc-info", Static)
        self._render_view()

    def on_key(self, event: events.Key) -> None:
        if event.key == "backspace":
            self._handle_backspace()
            event.stop()
            return
        if event.character and event.character in "0123456789.":
            self._handle_digit(event.character)
            event.stop()

    def action_toggle_risk(self) -> None:
        self._sizing.toggle_risk()
        self._render_view_if_mounted()

    def action_instrument_prev(self) -> None:
        self._cycle_instrument(-1)

    def action_instrument_next(self) -> None:
        self._cycle_instrument(1)

    def action_field_prev(self) -> None:
        self._cycle_field(-1)

    def action_field_next(self) -> None:
        self._cycle_field(1)

    def action_clear_field(self) -> None:
        self._set_field_text("")
        self._render_view_if_mounted()

    def _cycle_instrument(self, direction: int) -> None:
        symbols = instrument_symbols()
        idx = symbols.index(self._sizing.instrument)
        self._sizing.select_instrument(symbols[(idx + direction) % len(symbols)])
        logger.debug("instrument -> %s", self._sizing.instrument)
        self._render_view_if_mounted()

    def _cycle_field(self, direction: int) -> None:
        idx = _FIELDS.index(self._active_field)
        self._active_field = _FIELDS[(idx + direction) % len(_FIELDS)]
        self._render_view_if_mounted()

    def _field_text(self, field: str | None = None) -> str:
        field = field or self._active_field
        if field == "risk":
            return self._sizing.risk_text
        return self._sizing.stop_loss_text

    def _set_field_text(self, text: str) -> None:
        if self._active_field == "risk":
            self._sizing.set_risk_text(text)
        else:
            self._sizing.set_stop_loss_text(text)

    def _handle_digit(self, char: str) -> None:
        self._set_field_text(_append_digit(self._field_text(), char, allow_decimal=True))
        self._render_view_if_mounted()

    def _handle_backspace(self) -> None:
        self._set_field_text(self._field_text()[:-1])
        self._render_view_if_mounted()

    def _render_view_if_mounted(self) -> None:
        widget = getattr(self, "_calc_body", None)
        if widget is None or not bool(getattr(widget, "is_mounted", False)):
            return
        self._render_view()

    def _render_view(self) -> None:
        self._calc_body.update(self._render_body())
        self._calc_info.update(_instrument_info_line(self._sizing.spec))

    def _toggle_label(self) -> str:
        return "Full R" if self._sizing.half_risk else "Half R"

    def _instrument_row(self) -> Text:
        row = Text("Instrument  ", style="grey70")
        for symbol in instrument_symbols():
            style = self._SELECTED_STYLE if symbol == self._sizing.instrument else self._UNSELECTED_STYLE
            row.append(f" {symbol} ", style=style)
            row.append(" ")
        return row

    def _field_row(self, field: str) -> Text:
        active = field == self._active_field
        marker = "▶ " if active else "  "
        row = Text(marker, style="bold #2c82c9")
        row.append(_clip(_FIELD_LABELS[field], self._LABEL_WIDTH - 2), style="grey70")
        value = self._field_text(field)
        row.append(value, style="bold" if active else "")
        if active:
            row.append("▏", style="blink #2c82c9")
        if field == "risk":
            style = "bold black on green" if self._sizing.half_risk else "bold black on yellow"
            row.append("  ")
            row.append(f" {self._toggle_label()} ", style=style)
        return row

    def _render_body(self) -> Text:
        lines: list[Text] = [self._instrument_row(), Text("")]
        for field in _FIELDS:
            lines.append(self._field_row(field))
        lines.append(Text(""))
        lines.append(Text(" Calculation Results ".center(self._PANEL_WIDTH, "─"), style="bold"))
        for label, value, style in _result_rows(self._sizing.result()):
            row = Text(_clip(label, self._LABEL_WIDTH), style="grey85")
            row.append(value.rjust(self._PANEL_WIDTH - self._LABEL_WIDTH), style=style)
            lines.append(row)
        return Text("\n").join(lines)
# endregion
