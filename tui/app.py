"""Main Textual application for the surebet stake calculator."""

import logging
import sys
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Checkbox, Footer, Input, Label, Select, Static

import config
from calculator import accepts_suggestion
from formatting import fmt2
from models import FocusState, Position, RecalcResult
from tui.session import CalculatorSession
from tui.widgets.header_bar import HeaderBar
from tui.widgets.outcome_row import OutcomeRowEditor, field_index
from tui.widgets.outcome_table import OutcomeTable
from tui.widgets.recalc_log import RecalcLog
from tui.widgets.sidebar import Sidebar


HELP_TEXT = f"""
[bold #00ff00]⚖ Surebet Calculator: Help[/]

[bold #00aa00]What This Does[/]
Splits a bankroll across every outcome of an event so the
profit lands where you want it, and tells you whether the
odds form an arbitrage (Σ 1/odds < 1).

[bold #00aa00]Columns[/]
[#00cc00]R[/]       Outcome shares the profit. R outcomes all win the
        same amount, the others break even.
[#00cc00]F[/]       Outcome stake is pinned. Everything else is
        derived from it (F needs R).
[#00cc00]Stake[/]   Typing a stake makes it manual (✎); it is kept
        until you edit the bankroll or pick a new F.
[#00cc00]Bankroll[/] Shows the real total staked when not being edited.

[bold #00aa00]Keys[/]
[#00cc00]Tab[/]     Next field      [#00cc00]F1[/]  Toggle help
[#00cc00]Ctrl+L[/]  Clear log       [#00cc00]Ctrl+Q[/]  Quit

Amounts are in {config.CURRENCY}.
"""


class HelpPanel(Static):
    """Overlay help panel."""

    def render(self):
        return HELP_TEXT


class SurebetCalculator(App):
    """Terminal front end for the stake calculator."""

    class ResultUpdated(Message):
        """Posted after every recompute pass."""

        def __init__(self, result: RecalcResult):
            super().__init__()
            self.result = result

    CSS_PATH = str(Path(__file__).parent / "styles.tcss")
    TITLE = "Surebet Calculator"
    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("f1", "toggle_help", "Help"),
        ("ctrl+l", "clear_log", "Clear log"),
    ]

    def __init__(self, position: Optional[Position] = None):
        super().__init__()
        # Remove console handlers to prevent log output from corrupting TUI display
        for handler in logging.root.handlers[:]:
            if isinstance(handler, logging.StreamHandler) and handler.stream in (sys.stdout, sys.stderr):
                logging.root.removeHandler(handler)
        self.session = CalculatorSession(position)
        self.session.set_update_callback(self._on_result)
        self._help_visible = False

    def _row_editors(self) -> list[OutcomeRowEditor]:
        position = self.session.position
        return [
            OutcomeRowEditor(i, row, fixed=position.fixed_index == i)
            for i, row in enumerate(position.rows)
        ]

    def compose(self) -> ComposeResult:
        position = self.session.position
        choices = sorted(set(config.ROW_COUNT_CHOICES) | {position.n})
        yield HeaderBar(id="header")
        with Horizontal(id="main-container"):
            yield Sidebar(self.session, id="sidebar")
            with Vertical(id="main-area"):
                with Horizontal(id="controls"):
                    yield Label(f"Bankroll ({config.CURRENCY})", classes="control-label")
                    yield Input(value=fmt2(position.bankroll), id="bankroll")
                    yield Label("Outcomes", classes="control-label")
                    yield Select(
                        [(str(n), n) for n in choices],
                        value=position.n,
                        allow_blank=False,
                        id="row-count",
                    )
                with Vertical(id="rows"):
                    yield from self._row_editors()
                yield OutcomeTable(id="outcome-table")
                yield RecalcLog(id="recalc-log", markup=False, auto_scroll=True)
                yield HelpPanel(id="help-panel")
        yield Footer()

    def on_mount(self):
        self.query_one("#help-panel").display = False
        log: RecalcLog = self.query_one("#recalc-log", RecalcLog)
        log.log_line("Ready. Type odds and a bankroll; F1 for help.", style="bold #00ff00")
        self.recalculate()

    # Focus is the "user is typing here" signal for the core

    def focus_state(self) -> FocusState:
        focused = self.focused
        if not isinstance(focused, Input) or not focused.id:
            return FocusState()
        if focused.id == "bankroll":
            return FocusState(bankroll=True)
        if focused.id.startswith("stake-"):
            return FocusState(stake_rows=frozenset({field_index(focused.id)[1]}))
        return FocusState()

    def recalculate(self) -> RecalcResult:
        return self.session.recalculate(self.focus_state())

    def _on_result(self, result: RecalcResult):
        """Called from the session after each pass. Post message to UI."""
        self.post_message(self.ResultUpdated(result))

    def on_surebet_calculator_result_updated(self, message: ResultUpdated):
        self._paint(message.result)

    def _paint(self, result: RecalcResult):
        position = self.session.position
        if len(self.query(OutcomeRowEditor)) != position.n:
            # Rows are being rebuilt; the pass after the rebuild repaints
            return
        focus = self.focus_state()

        with self.prevent(Input.Changed, Checkbox.Changed):
            for i, row in enumerate(position.rows):
                if accepts_suggestion(position, i, focus):
                    self.query_one(f"#stake-{i}", Input).value = fmt2(row.stake)
                self.query_one(f"#recipient-{i}", Checkbox).value = row.recipient
                self.query_one(f"#fixed-{i}", Checkbox).value = position.fixed_index == i
                errors = result.row_errors[i]
                text = "  ".join(e for e in (errors.odds_error, errors.stake_error) if e)
                self.query_one(f"#errors-{i}", Static).update(text)
            if not focus.bankroll:
                self.query_one("#bankroll", Input).value = fmt2(result.bankroll_display)

        self.query_one("#header", HeaderBar).show_result(result, position)
        self.query_one("#outcome-table", OutcomeTable).update_outcomes(position, result)
        self.query_one("#sidebar", Sidebar).refresh()

    def _log_edit(self):
        log: RecalcLog = self.query_one("#recalc-log", RecalcLog)
        if self.session.last_edit:
            log.log_edit(self.session.last_edit)
        if self.session.result:
            log.log_result(self.session.result)

    # Edits

    def on_input_changed(self, event: Input.Changed):
        # Only keystrokes count as edits; programmatic updates are ignored
        if not event.input.has_focus or not event.input.id:
            return
        widget_id = event.input.id
        if widget_id == "bankroll":
            self.session.edit_bankroll(event.value)
        elif widget_id.startswith("odds-"):
            self.session.edit_odds(field_index(widget_id)[1], event.value)
        elif widget_id.startswith("stake-"):
            self.session.edit_stake(field_index(widget_id)[1], event.value)
        else:
            return
        self.recalculate()
        self._log_edit()

    def on_checkbox_changed(self, event: Checkbox.Changed):
        if not event.checkbox.has_focus or not event.checkbox.id:
            return
        name, index = field_index(event.checkbox.id)
        if name == "recipient":
            self.session.toggle_recipient(index, event.value)
        elif name == "fixed":
            self.session.toggle_fixed(index, event.value)
        else:
            return
        self.recalculate()
        self._log_edit()

    async def on_select_changed(self, event: Select.Changed):
        if event.select.id != "row-count" or event.value == self.session.position.n:
            return
        self.session.set_row_count(int(event.value))
        rows = self.query_one("#rows", Vertical)
        await rows.remove_children()
        await rows.mount_all(self._row_editors())
        self.recalculate()
        self._log_edit()

    # Actions

    def action_toggle_help(self):
        """Toggle the help panel."""
        help_panel = self.query_one("#help-panel")
        self._help_visible = not self._help_visible
        help_panel.display = self._help_visible
        self.query_one("#outcome-table").display = not self._help_visible

    def action_clear_log(self):
        self.query_one("#recalc-log", RecalcLog).clear()
