import math

import pytest

from models import ErrorCode, OutcomeRow, Position
from validator import validate_position


def _position(rows, fixed_index=None, bankroll=1000.0):
    return Position(rows=rows, fixed_index=fixed_index, bankroll=bankroll)


def test_default_position_is_valid():
    result = validate_position(Position.default())
    assert result.valid
    assert result.issues == []
    assert all(e.ok for e in result.row_errors)


def test_no_recipient_row_invalidates_position():
    result = validate_position(_position([OutcomeRow(recipient=False), OutcomeRow(recipient=False)]))
    assert not result.valid
    assert result.codes() == {ErrorCode.NO_RECIPIENT_ROW}
    # position-wide problem, rows themselves are fine
    assert all(e.ok for e in result.row_errors)


@pytest.mark.parametrize("odds", [1.0, 0.5, 0.0, -3.0, 100000.0, 250000.0])
def test_odds_out_of_range(odds):
    result = validate_position(_position([OutcomeRow(odds=odds), OutcomeRow()]))
    assert not result.valid
    assert result.codes() == {ErrorCode.ODDS_OUT_OF_RANGE}
    assert result.row_errors[0].odds_error == ErrorCode.ODDS_OUT_OF_RANGE.message
    assert result.row_errors[1].ok


@pytest.mark.parametrize("odds", [1.0001, 99999.99])
def test_odds_bounds_are_exclusive(odds):
    assert validate_position(_position([OutcomeRow(odds=odds), OutcomeRow()])).valid


@pytest.mark.parametrize("odds", [math.nan, math.inf, -math.inf])
def test_odds_not_a_number(odds):
    result = validate_position(_position([OutcomeRow(odds=odds), OutcomeRow()]))
    assert result.codes() == {ErrorCode.ODDS_NOT_A_NUMBER}


def test_stake_errors():
    rows = [OutcomeRow(stake=-1.0), OutcomeRow(stake=math.nan)]
    result = validate_position(_position(rows))
    assert result.row_errors[0].stake_error == ErrorCode.STAKE_NEGATIVE.message
    assert result.row_errors[1].stake_error == ErrorCode.STAKE_NOT_A_NUMBER.message


@pytest.mark.parametrize("bankroll", [-1.0, math.nan, math.inf])
def test_bankroll_invalid(bankroll):
    result = validate_position(_position([OutcomeRow(), OutcomeRow()], bankroll=bankroll))
    assert not result.valid
    assert result.codes() == {ErrorCode.BANKROLL_INVALID}


def test_every_row_gets_feedback():
    rows = [OutcomeRow(odds=0.9), OutcomeRow(stake=-2.0), OutcomeRow(odds=math.nan, stake=math.nan)]
    result = validate_position(_position(rows, bankroll=-5.0))
    assert result.row_errors[0].odds_error
    assert result.row_errors[1].stake_error
    assert result.row_errors[2].odds_error and result.row_errors[2].stake_error
    assert [(i.code, i.row_index) for i in result.issues] == [
        (ErrorCode.BANKROLL_INVALID, None),
        (ErrorCode.ODDS_OUT_OF_RANGE, 0),
        (ErrorCode.STAKE_NEGATIVE, 1),
        (ErrorCode.ODDS_NOT_A_NUMBER, 2),
        (ErrorCode.STAKE_NOT_A_NUMBER, 2),
    ]


def test_fixed_row_must_be_recipient():
    rows = [OutcomeRow(stake=100.0, recipient=False), OutcomeRow()]
    result = validate_position(_position(rows, fixed_index=0))
    assert result.codes() == {ErrorCode.FIXED_ROW_NOT_RECIPIENT}


def test_fixed_row_needs_positive_stake():
    result = validate_position(_position([OutcomeRow(stake=0.0), OutcomeRow()], fixed_index=0))
    assert result.codes() == {ErrorCode.FIXED_STAKE_INVALID}
    assert result.row_errors[0].stake_error == ErrorCode.FIXED_STAKE_INVALID.message


def test_fixed_row_negative_stake_keeps_specific_message():
    result = validate_position(_position([OutcomeRow(stake=-1.0), OutcomeRow()], fixed_index=0))
    assert result.codes() == {ErrorCode.STAKE_NEGATIVE, ErrorCode.FIXED_STAKE_INVALID}
    assert result.row_errors[0].stake_error == ErrorCode.STAKE_NEGATIVE.message
