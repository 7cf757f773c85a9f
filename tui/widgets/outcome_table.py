"""DataTable showing the payout and profit of every outcome."""

from textual.widgets import DataTable
from rich.text import Text

from formatting import fmt2
from models import Position, RecalcResult


class OutcomeTable(DataTable):
    """One line per outcome; money columns show "-" while the input is invalid."""

    def on_mount(self):
        self.add_columns("#", "Odds", "R", "F", "Stake", "Payout", "Profit")
        self.cursor_type = "row"
        self.zebra_stripes = True
        self.show_header = True

    def update_outcomes(self, position: Position, result: RecalcResult):
        self.clear()
        for i, row in enumerate(position.rows):
            payout = result.payouts[i] if result.payouts is not None else None
            profit = result.profits[i] if result.profits is not None else None

            if profit is None:
                profit_cell = Text("-", style="#555555")
            elif profit > 0:
                profit_cell = Text(fmt2(profit), style="bold #00ff00")
            elif profit < 0:
                profit_cell = Text(fmt2(profit), style="#ff5555")
            else:
                profit_cell = Text(fmt2(profit), style="#888888")

            stake = fmt2(result.stakes[i])
            if row.manual:
                stake += " ✎"

            self.add_row(
                str(i + 1),
                f"{row.odds}",
                "●" if row.recipient else "",
                "📌" if position.fixed_index == i else "",
                stake,
                fmt2(payout) if payout is not None else "-",
                profit_cell,
            )
