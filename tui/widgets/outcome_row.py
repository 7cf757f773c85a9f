"""Editable inputs for a single outcome."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Checkbox, Input, Label, Static

from formatting import fmt2
from models import OutcomeRow


def field_index(widget_id: str) -> tuple[str, int]:
    """Split an id like "stake-2" into ("stake", 2)."""
    name, _, index = widget_id.rpartition("-")
    return name, int(index)


class OutcomeRowEditor(Vertical):
    """Odds, stake, R and F controls plus the row's error line."""

    def __init__(self, index: int, row: OutcomeRow, fixed: bool = False, **kwargs):
        super().__init__(classes="outcome-row", **kwargs)
        self.index = index
        self.row = row
        self.fixed = fixed

    def compose(self) -> ComposeResult:
        i = self.index
        with Horizontal(classes="outcome-inputs"):
            yield Label(f"#{i + 1}", classes="outcome-label")
            yield Input(value=f"{self.row.odds}", placeholder="odds", id=f"odds-{i}", classes="odds-input")
            yield Input(value=fmt2(self.row.stake), placeholder="stake", id=f"stake-{i}", classes="stake-input")
            yield Checkbox("R", self.row.recipient, id=f"recipient-{i}")
            yield Checkbox("F", self.fixed, id=f"fixed-{i}")
        yield Static("", id=f"errors-{i}", classes="outcome-errors")
