"""Left sidebar with totals and position status."""

from textual.widgets import Static
from rich.text import Text

from formatting import fmt_inv_sum, fmt_money
from metrics import implied_margin


def _row(t: Text, label: str, value: str, val_style: str = "#00ff00"):
    """Append a label: value row."""
    t.append(f" {label:<15}", style="#007700")
    t.append(f"{value}\n", style=val_style)


def _heading(t: Text, title: str):
    t.append(f"── {title} ", style="bold #00aa00")
    t.append("─" * max(0, 18 - len(title)) + "\n", style="#003300")


class Sidebar(Static):
    """Totals, market margin and input problems for the current position."""

    def __init__(self, session, **kwargs):
        super().__init__(**kwargs)
        self.session = session

    def render(self) -> Text:
        position = self.session.position
        result = self.session.result
        t = Text()

        _heading(t, "POSITION")
        _row(t, "Outcomes", str(position.n))
        _row(t, "R rows", str(sum(1 for r in position.rows if r.recipient)))
        fixed = position.fixed_index
        _row(t, "Fixed row", f"#{fixed + 1}" if fixed is not None else "none")
        manual = [str(i + 1) for i, r in enumerate(position.rows) if r.manual]
        _row(t, "Manual", ", ".join(manual) if manual else "none", "#ffaa00" if manual else "#555555")

        _heading(t, "MONEY")
        if result is None:
            t.append(" Waiting...\n", style="#555555")
            return t
        _row(t, "Bankroll", fmt_money(position.bankroll))
        _row(t, "Total staked", fmt_money(result.total))
        _row(t, "Solver", result.solver_mode)

        _heading(t, "MARKET")
        if result.arbitrage is not None:
            inv = result.arbitrage.inverse_odds_sum
            margin = implied_margin(inv) * 100
            _row(t, "Σ 1/odds", fmt_inv_sum(inv))
            _row(t, "Margin", f"{margin:+.2f}%", "#00ff00" if margin > 0 else "#ff5555")
        else:
            t.append(" Unavailable\n", style="#555555")

        if not result.valid:
            _heading(t, "CHECK INPUT")
            for issue in result.issues:
                where = f"#{issue.row_index + 1} " if issue.row_index is not None else ""
                t.append(f" {where}{issue.code.message}\n", style="#ff5555")

        return t
