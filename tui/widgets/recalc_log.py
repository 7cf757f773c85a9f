"""Scrolling log of edits and recompute passes."""

from datetime import datetime

from textual.widgets import RichLog
from rich.text import Text

from formatting import fmt2, roi_label


class RecalcLog(RichLog):
    """One line per edit, followed by the headline numbers it produced."""

    def log_line(self, message: str, style: str = "#00cc00"):
        ts = datetime.now().strftime("%H:%M:%S")
        line = Text()
        line.append(f" {ts}  ", style="#006600")
        line.append(message, style=style)
        self.write(line)

    def log_edit(self, record):
        where = f" #{record.row + 1}" if record.row is not None else ""
        value = record.value
        if isinstance(value, float):
            value = fmt2(value) if record.kind in ("stake", "bankroll") else value
        self.log_line(f"{record.kind}{where} → {value}", style="#00aa00")

    def log_result(self, result):
        if not result.valid:
            self.log_line(f"  └ check input ({len(result.issues)} problem(s))", style="#ffff00")
            return
        arb = "arb" if result.arbitrage.is_arb else "no arb"
        self.log_line(
            f"  └ total {fmt2(result.total)}  {arb}  {roi_label(result.roi)}",
            style="#007700",
        )
