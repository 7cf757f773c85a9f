"""Calculator state shared between the input widgets and the result widgets."""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import calculator
from models import FocusState, Position, RecalcResult


@dataclass
class EditRecord:
    """One user edit, kept for the recalc log."""
    kind: str        # "odds", "stake", "recipient", "fixed", "bankroll", "rows"
    row: Optional[int]
    value: object
    timestamp: float = field(default_factory=time.time)


class CalculatorSession:
    """Owns the position and the latest pass result for one UI session."""

    MAX_HISTORY = 100

    def __init__(self, position: Optional[Position] = None):
        self.position: Position = position or Position.default()
        self.result: Optional[RecalcResult] = None
        self.history: list[EditRecord] = []
        self.passes: int = 0
        self._on_update: Optional[Callable[[RecalcResult], None]] = None

    def set_update_callback(self, callback: Callable[[RecalcResult], None]):
        self._on_update = callback

    def _record(self, kind: str, row: Optional[int], value):
        self.history.append(EditRecord(kind, row, value))
        if len(self.history) > self.MAX_HISTORY:
            self.history = self.history[-self.MAX_HISTORY:]

    def recalculate(self, focus: Optional[FocusState] = None) -> RecalcResult:
        self.result = calculator.recalculate(self.position, focus)
        self.passes += 1
        if self._on_update:
            self._on_update(self.result)
        return self.result

    # Edits. Each one is followed by recalculate() from the caller so the
    # focus signal can be sampled at that moment.

    def edit_odds(self, index: int, text: str):
        value = calculator.parse_number(text)
        calculator.set_odds(self.position, index, value)
        self._record("odds", index, value)

    def edit_stake(self, index: int, text: str):
        value = calculator.parse_number(text)
        calculator.set_stake(self.position, index, value)
        self._record("stake", index, value)

    def toggle_recipient(self, index: int, flag: bool):
        calculator.set_recipient(self.position, index, flag)
        self._record("recipient", index, flag)

    def toggle_fixed(self, index: int, flag: bool):
        calculator.set_fixed(self.position, index, flag)
        self._record("fixed", index, flag)

    def edit_bankroll(self, text: str):
        value = calculator.parse_number(text)
        calculator.set_bankroll(self.position, value)
        self._record("bankroll", None, value)

    def set_row_count(self, n: int):
        calculator.set_row_count(self.position, n)
        self._record("rows", None, self.position.n)

    @property
    def last_edit(self) -> Optional[EditRecord]:
        return self.history[-1] if self.history else None
