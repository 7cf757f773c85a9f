"""Top header bar showing allocation mode, arbitrage verdict and ROI."""

from textual.reactive import reactive
from textual.widgets import Static
from rich.text import Text

from formatting import arbitrage_label, roi_label
from models import Position, RecalcResult


MODE_BADGES = {
    "bankroll": (" BANKROLL ", "bold #000000 on #00aaff"),
    "fixed": (" FIXED #{row} ", "bold #000000 on #ffaa00"),
}


class HeaderBar(Static):
    """Single-line header with mode badge and the two status pills."""

    mode = reactive("bankroll")
    fixed_row = reactive(0)
    valid = reactive(True)
    is_arb = reactive(False)
    arb_text = reactive("")
    roi_text = reactive("-")
    roi_positive = reactive(True)

    def show_result(self, result: RecalcResult, position: Position):
        self.mode = position.mode
        self.fixed_row = (position.fixed_index or 0) + 1
        self.valid = result.valid
        self.arb_text = arbitrage_label(result.arbitrage)
        self.roi_text = roi_label(result.roi)
        if result.valid:
            self.is_arb = result.arbitrage.is_arb
            self.roi_positive = result.roi.value >= 0

    def render(self) -> Text:
        t = Text()
        t.append(" ⚖ SUREBET CALCULATOR", style="bold #00ff00")

        badge_template, badge_style = MODE_BADGES.get(self.mode, MODE_BADGES["bankroll"])
        t.append(f"  {badge_template.format(row=self.fixed_row)}", style=badge_style)
        t.append("  ", style="")

        if not self.valid:
            t.append(f" {self.arb_text} ", style="bold #000000 on #ffff00")
            return t

        arb_style = "bold #000000 on #00ff00" if self.is_arb else "bold #ffffff on #aa0000"
        t.append(f" {self.arb_text} ", style=arb_style)
        t.append("  ", style="")
        roi_style = "#00ff00" if self.roi_positive else "#ff5555"
        t.append(self.roi_text, style=roi_style)
        return t
