"""Well-formedness checks for a position."""

import logging
from typing import Optional

from metrics import is_number
from models import ErrorCode, Issue, Position, RowErrors, ValidationResult

logger = logging.getLogger(__name__)

MIN_ODDS = 1  # exclusive
MAX_ODDS = 100000  # exclusive


def check_odds(odds) -> Optional[ErrorCode]:
    if not is_number(odds):
        return ErrorCode.ODDS_NOT_A_NUMBER
    if odds <= MIN_ODDS or odds >= MAX_ODDS:
        return ErrorCode.ODDS_OUT_OF_RANGE
    return None


def check_stake(stake) -> Optional[ErrorCode]:
    if not is_number(stake):
        return ErrorCode.STAKE_NOT_A_NUMBER
    if stake < 0:
        return ErrorCode.STAKE_NEGATIVE
    return None


def validate_position(position: Position) -> ValidationResult:
    """Check every rule without stopping at the first failure.

    Args:
        position: Rows, optional fixed row and bankroll to check.

    Returns:
        ValidationResult with per-row odds/stake messages and the full issue
        list. valid is True only when no rule failed.
    """
    row_errors = [RowErrors() for _ in position.rows]
    issues: list[Issue] = []

    if not is_number(position.bankroll) or position.bankroll < 0:
        issues.append(Issue(ErrorCode.BANKROLL_INVALID))

    if not any(r.recipient for r in position.rows):
        issues.append(Issue(ErrorCode.NO_RECIPIENT_ROW))

    for i, row in enumerate(position.rows):
        odds_code = check_odds(row.odds)
        if odds_code:
            row_errors[i].odds_error = odds_code.message
            issues.append(Issue(odds_code, i))
        stake_code = check_stake(row.stake)
        if stake_code:
            row_errors[i].stake_error = stake_code.message
            issues.append(Issue(stake_code, i))

    j = position.fixed_index
    if j is not None and 0 <= j < len(position.rows):
        fixed = position.rows[j]
        if not fixed.recipient:
            issues.append(Issue(ErrorCode.FIXED_ROW_NOT_RECIPIENT, j))
        if not is_number(fixed.stake) or fixed.stake <= 0:
            issues.append(Issue(ErrorCode.FIXED_STAKE_INVALID, j))
            if not row_errors[j].stake_error:
                row_errors[j].stake_error = ErrorCode.FIXED_STAKE_INVALID.message

    valid = not issues
    if not valid:
        logger.debug(f"Position invalid: {[(i.code.name, i.row_index) for i in issues]}")
    return ValidationResult(valid=valid, row_errors=row_errors, issues=issues)
