"""Display strings shared by the terminal UI and the command line."""

from typing import Optional

import config
from metrics import is_number, round2
from models import ArbitrageStatus, RecalcResult, RoiStatus

UNAVAILABLE = "-"


def fmt2(x) -> str:
    return f"{round2(x):.2f}" if is_number(x) else UNAVAILABLE


def fmt_money(x) -> str:
    return f"{fmt2(x)} {config.CURRENCY}" if is_number(x) else UNAVAILABLE


def fmt_inv_sum(x) -> str:
    return f"{x:.6f}" if is_number(x) else UNAVAILABLE


def arbitrage_label(arb: Optional[ArbitrageStatus]) -> str:
    if arb is None:
        return "CHECK INPUT"
    verdict = "yes" if arb.is_arb else "no"
    return f"ARB: {verdict}  Σ1/o = {fmt_inv_sum(arb.inverse_odds_sum)}"


def roi_label(roi: Optional[RoiStatus]) -> str:
    if roi is None:
        return UNAVAILABLE
    tag = "F" if roi.mode == "fixed" else "R"
    return f"ROI {roi.value * 100:.2f}% by {tag} ({roi.ref_row_index + 1})"


def result_to_dict(result: RecalcResult) -> dict:
    """Plain-dict view of a pass, shaped like the core's output contract."""
    return {
        "valid": result.valid,
        "rowErrors": [
            {"oddsError": e.odds_error, "stakeError": e.stake_error} for e in result.row_errors
        ],
        "issues": [
            {"code": i.code.name, "row": i.row_index} for i in result.issues
        ],
        "stakes": result.stakes,
        "payouts": result.payouts,
        "profits": result.profits,
        "total": result.total,
        "bankroll": result.bankroll_display,
        "arbitrage": None if result.arbitrage is None else {
            "isArb": result.arbitrage.is_arb,
            "inverseOddsSum": result.arbitrage.inverse_odds_sum,
        },
        "roi": None if result.roi is None else {
            "value": result.roi.value,
            "refRowIndex": result.roi.ref_row_index,
            "mode": result.roi.mode,
        },
        "solverMode": result.solver_mode,
    }
