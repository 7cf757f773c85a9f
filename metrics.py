"""Money arithmetic for a betting position: totals, payouts, profit, arbitrage, ROI."""

import math
import sys
from typing import Callable, Optional, Sequence

from models import ArbitrageStatus, OutcomeRow, RoiStatus


def is_number(x) -> bool:
    return isinstance(x, (int, float)) and math.isfinite(x)


def round2(x: float) -> float:
    """Round half-up to cents. NaN, inf and values too large to scale pass through."""
    if not is_number(x):
        return x
    scaled = (x + sys.float_info.epsilon) * 100 + 0.5
    if not math.isfinite(scaled):
        return x
    return math.floor(scaled) / 100


def non_negative(x: float) -> float:
    """max(0, x) that keeps NaN as NaN instead of hiding it."""
    if math.isnan(x):
        return x
    return max(0.0, x)


def inverse_odds(odds: float) -> float:
    # Zero, negative and NaN odds poison the sum on purpose
    return 1 / odds if odds > 0 else math.inf


def total_staked(rows: Sequence[OutcomeRow]) -> float:
    """Sum of stakes with negative and non-numeric stakes counted as 0."""
    return round2(sum(max(0.0, r.stake) if is_number(r.stake) else 0.0 for r in rows))


def inverse_odds_sum(
    rows: Sequence[OutcomeRow],
    predicate: Optional[Callable[[OutcomeRow], bool]] = None,
) -> float:
    """Sum of 1/odds over rows matching predicate (all rows when None).

    Returns inf if any counted row has odds <= 0.
    """
    return sum(inverse_odds(r.odds) for r in rows if predicate is None or predicate(r))


def payout(row: OutcomeRow, total: float = 0.0) -> float:
    """What the row returns if its outcome wins. total is unused."""
    return round2(max(0.0, row.stake) * row.odds)


def profit(row: OutcomeRow, total: float) -> float:
    return round2(payout(row) - total)


def first_recipient(rows: Sequence[OutcomeRow]) -> Optional[int]:
    """Index of the first R row, or None when no row is marked R."""
    return next((i for i, r in enumerate(rows) if r.recipient), None)


def implied_margin(inverse_sum: float) -> float:
    """Guaranteed margin as a fraction of the total staked (negative = bookmaker edge)."""
    return 1 - inverse_sum


def arbitrage_status(rows: Sequence[OutcomeRow]) -> ArbitrageStatus:
    s = inverse_odds_sum(rows)
    return ArbitrageStatus(is_arb=s < 1, inverse_odds_sum=s)


def roi_status(
    rows: Sequence[OutcomeRow],
    payouts: Sequence[float],
    total: float,
    fixed_index: Optional[int] = None,
) -> RoiStatus:
    """ROI measured on the fixed row, else the first R row, else row 0."""
    if fixed_index is not None:
        ref, mode = fixed_index, "fixed"
    else:
        ref = first_recipient(rows)
        if ref is None:
            ref = 0
        mode = "recipient"

    win = payouts[ref] if ref < len(payouts) else 0.0
    value = (win - total) / total if total > 0 else 0.0
    return RoiStatus(value=value, ref_row_index=ref, mode=mode)
