"""One recompute pass over a position, plus the field edits that trigger it."""

import logging
import math
from typing import Optional

from metrics import (
    arbitrage_status,
    is_number,
    payout,
    profit,
    roi_status,
    total_staked,
)
from models import FocusState, Position, RecalcResult
from solver import suggest_from_bankroll, suggest_from_fixed_row
from validator import validate_position

logger = logging.getLogger(__name__)


def parse_number(text) -> float:
    """Turn raw field text into a float the way a browser number input does.

    Blank text is 0, anything unparsable is NaN. Never raises.
    """
    if isinstance(text, (int, float)):
        return float(text)
    s = str(text or "").strip().replace(",", ".")
    if not s:
        return 0.0
    try:
        return float(s)
    except ValueError:
        return math.nan


def accepts_suggestion(position: Position, index: int, focus: FocusState) -> bool:
    """Whether the solver may overwrite the stake of rows[index] on this pass."""
    if position.fixed_index == index:
        return False
    if position.rows[index].manual:
        return False
    if focus.stake_focused(index):
        return False
    return True


def recalculate(position: Position, focus: Optional[FocusState] = None) -> RecalcResult:
    """Run one full pass: validate, solve, merge stakes, derive metrics.

    The position is updated in place (auto stakes only). Running the pass
    twice with nothing focused and no edits in between gives the same result.
    """
    focus = focus or FocusState()

    # 1. Normalize row count
    position.ensure_rows(position.n)

    # 2-3. Validate against the bankroll the user entered
    validation = validate_position(position)

    # 4. Solve
    suggested = None
    solver_mode = "bankroll"
    if position.fixed_index is not None:
        suggested = suggest_from_fixed_row(position.fixed_index, position.rows)
        if suggested is None:
            logger.warning(
                f"Fixed row {position.fixed_index} is not an R row, falling back to bankroll allocation"
            )
        else:
            solver_mode = "fixed"
    if suggested is None:
        suggested = suggest_from_bankroll(position.bankroll, position.rows)

    # 5. Merge suggestions into eligible rows
    for i, row in enumerate(position.rows):
        if accepts_suggestion(position, i, focus) and is_number(suggested[i]):
            row.stake = suggested[i]

    # 6. Total from the merged stakes, not from the solver output
    total = total_staked(position.rows)

    # 7. Bankroll field shows the actual total unless the user is typing in it
    bankroll_display = position.bankroll if focus.bankroll else total

    result = RecalcResult(
        valid=validation.valid,
        row_errors=validation.row_errors,
        issues=validation.issues,
        stakes=[r.stake for r in position.rows],
        suggested=suggested,
        total=total,
        bankroll_display=bankroll_display,
        solver_mode=solver_mode,
    )

    # 8-10. Derived figures, only meaningful for a valid position
    if validation.valid:
        payouts = [payout(r, total) for r in position.rows]
        result.payouts = payouts
        result.profits = [profit(r, total) for r in position.rows]
        result.arbitrage = arbitrage_status(position.rows)
        result.roi = roi_status(position.rows, payouts, total, position.fixed_index)

    logger.debug(
        f"Recalc mode={solver_mode} valid={validation.valid} total={total:.2f} stakes={result.stakes}"
    )
    return result


def set_odds(position: Position, index: int, value: float):
    position.rows[index].odds = value
    logger.info(f"Odds #{index + 1} -> {value}")


def set_stake(position: Position, index: int, value: float):
    """A typed stake is manual until the bankroll is edited or a new F row is picked."""
    row = position.rows[index]
    row.stake = value
    row.manual = True
    logger.info(f"Stake #{index + 1} -> {value} (manual)")


def set_recipient(position: Position, index: int, flag: bool):
    position.rows[index].recipient = flag
    if not flag and position.fixed_index == index:
        position.fixed_index = None
        logger.info(f"Row #{index + 1} lost R, fixed row cleared")
    logger.info(f"R #{index + 1} -> {flag}")


def set_fixed(position: Position, index: int, flag: bool):
    """Pin (or unpin) rows[index] as the fixed row."""
    if not 0 <= index < position.n:
        raise IndexError(f"row {index} out of range")
    if flag:
        position.fixed_index = index
        for i, row in enumerate(position.rows):
            if i != index:
                row.manual = False
        logger.info(f"Fixed row -> #{index + 1}")
    elif position.fixed_index == index:
        position.fixed_index = None
        logger.info("Fixed row cleared")


def set_bankroll(position: Position, value: float):
    """Bankroll edits hand every non-fixed row back to the solver."""
    position.bankroll = value
    for i, row in enumerate(position.rows):
        if i != position.fixed_index:
            row.manual = False
    logger.info(f"Bankroll -> {value}")


def set_row_count(position: Position, n: int):
    if n < 1:
        logger.warning(f"Row count {n} < 1, using 1")
    position.ensure_rows(n)
    logger.info(f"Row count -> {position.n}")
