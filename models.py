from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import config

DEFAULT_ODDS = 2.0


class ErrorCode(Enum):
    ODDS_OUT_OF_RANGE = "Odds must be > 1 and < 100000."
    ODDS_NOT_A_NUMBER = "Odds must be a number."
    STAKE_NEGATIVE = "Stake must be >= 0."
    STAKE_NOT_A_NUMBER = "Stake must be a number."
    BANKROLL_INVALID = "Bankroll must be a number >= 0."
    NO_RECIPIENT_ROW = "At least one outcome must be marked R."
    FIXED_ROW_NOT_RECIPIENT = "The fixed outcome must also be marked R."
    FIXED_STAKE_INVALID = "The fixed stake must be > 0."

    @property
    def message(self) -> str:
        return self.value


@dataclass
class OutcomeRow:
    """One wagering outcome."""
    odds: float = DEFAULT_ODDS
    stake: float = 0.0
    recipient: bool = True  # shares in the distributed profit ("R")
    manual: bool = False  # stake typed by the user, never auto-overwritten


@dataclass
class Position:
    """All outcomes of one calculation plus the allocation inputs."""
    rows: list[OutcomeRow] = field(default_factory=list)
    fixed_index: Optional[int] = None
    bankroll: float = config.DEFAULT_BANKROLL

    @classmethod
    def default(cls, n: Optional[int] = None) -> "Position":
        position = cls()
        position.ensure_rows(config.DEFAULT_ROW_COUNT if n is None else n)
        return position

    @property
    def n(self) -> int:
        return len(self.rows)

    @property
    def mode(self) -> str:
        return "fixed" if self.fixed_index is not None else "bankroll"

    def ensure_rows(self, n: int):
        """Pad or truncate to n rows, keeping existing rows by index."""
        n = max(1, int(n))
        while len(self.rows) < n:
            self.rows.append(OutcomeRow())
        del self.rows[n:]
        if self.fixed_index is not None and not 0 <= self.fixed_index < n:
            self.fixed_index = None


@dataclass(frozen=True)
class FocusState:
    """Fields the user is typing into right now, sampled once per pass."""
    stake_rows: frozenset = frozenset()
    bankroll: bool = False

    def stake_focused(self, index: int) -> bool:
        return index in self.stake_rows


@dataclass
class RowErrors:
    odds_error: str = ""
    stake_error: str = ""

    @property
    def ok(self) -> bool:
        return not self.odds_error and not self.stake_error


@dataclass(frozen=True)
class Issue:
    code: ErrorCode
    row_index: Optional[int] = None  # None for position-wide rules


@dataclass
class ValidationResult:
    valid: bool
    row_errors: list[RowErrors]
    issues: list[Issue] = field(default_factory=list)

    def codes(self) -> set:
        return {issue.code for issue in self.issues}


@dataclass(frozen=True)
class ArbitrageStatus:
    is_arb: bool
    inverse_odds_sum: float


@dataclass(frozen=True)
class RoiStatus:
    value: float
    ref_row_index: int
    mode: str  # "fixed" or "recipient"


@dataclass
class RecalcResult:
    """Everything the view layer paints after one recompute pass.

    payouts, profits, arbitrage and roi are None when the position is
    invalid; stakes, totals and errors are always filled in.

    bankroll_display is the total to show in the bankroll field. The typed
    bankroll on the position is left alone, so a later bankroll-mode pass
    starts from what the user entered.
    """
    valid: bool
    row_errors: list[RowErrors]
    issues: list[Issue]
    stakes: list[float]
    suggested: list[float]
    total: float
    bankroll_display: float
    solver_mode: str  # "fixed" or "bankroll", the allocation actually used
    payouts: Optional[list[float]] = None
    profits: Optional[list[float]] = None
    arbitrage: Optional[ArbitrageStatus] = None
    roi: Optional[RoiStatus] = None
