"""Stake allocation under the R profit-distribution rule.

Let T be the total staked and K the profit every R row receives.
Rows without R must break even, rows with R must win exactly K:

    non-R row i:  s_i * o_i = T        ->  s_i = T / o_i
    R row i:      s_i * o_i = T + K    ->  s_i = (T + K) / o_i

With A = sum(1/o) over all rows and AR = sum(1/o) over R rows, requiring
the stakes to add up to T gives

    bankroll mode (T known):      K = T * (1 - A) / AR
    fixed row j (s_j known):      T = s_j * o_j * AR / (1 - A + AR),  K = s_j * o_j - T
"""

import logging
import math
from typing import Optional, Sequence

from metrics import first_recipient, inverse_odds_sum, is_number, non_negative, round2
from models import OutcomeRow

logger = logging.getLogger(__name__)

SINGULAR_EPS = 1e-12


def _amount(x: float) -> float:
    """Treat a missing/NaN amount as 0, clamp negatives to 0."""
    if x is None or math.isnan(x):
        return 0.0
    return max(0.0, x)


def _stakes_for(rows: Sequence[OutcomeRow], total: float, k: float) -> list[float]:
    stakes = []
    for r in rows:
        if r.odds <= 0:
            stakes.append(0.0)
        elif r.recipient:
            stakes.append((total + k) / r.odds)
        else:
            stakes.append(total / r.odds)
    return [round2(non_negative(s)) for s in stakes]


def suggest_from_bankroll(bankroll: float, rows: Sequence[OutcomeRow]) -> list[float]:
    """Split a bankroll across all rows.

    Rounding slack is pushed into the first R row so the stakes add up to
    the bankroll to the cent.
    """
    a = inverse_odds_sum(rows)
    ar = inverse_odds_sum(rows, lambda r: r.recipient)
    total = _amount(bankroll)
    k = total * (1 - a) / ar if ar > 0 else 0.0

    stakes = _stakes_for(rows, total, k)

    rounded_total = round2(sum(stakes))
    delta = round2(total - rounded_total)
    if is_number(delta) and abs(delta) >= 0.01:
        first_r = first_recipient(rows)
        if first_r is not None:
            stakes[first_r] = round2(non_negative(stakes[first_r] + delta))
    return stakes


def suggest_from_fixed_row(fixed_index: int, rows: Sequence[OutcomeRow]) -> Optional[list[float]]:
    """Derive every stake from the pinned stake on rows[fixed_index].

    Returns None when the fixed row is not an R row: a pinned stake on a
    break-even row has no solution.
    """
    if not 0 <= fixed_index < len(rows) or not rows[fixed_index].recipient:
        return None

    fixed = rows[fixed_index]
    a = inverse_odds_sum(rows)
    ar = inverse_odds_sum(rows, lambda r: r.recipient)
    sj = _amount(fixed.stake)
    oj = fixed.odds

    denom = 1 - a + ar
    if abs(denom) < SINGULAR_EPS:
        # Non-R rows only approximately break even here
        logger.warning(f"Near-singular fixed-row system (denom={denom:.3e}), using T = s*o")
        total, k = sj * oj, 0.0
    else:
        total = sj * oj * ar / denom
        k = sj * oj - total

    stakes = _stakes_for(rows, total, k)
    stakes[fixed_index] = round2(sj)
    return stakes
