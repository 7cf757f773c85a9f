"""Smoke tests for the Textual front end, driven through App.run_test()."""
import asyncio

from textual.widgets import Checkbox, Input, Select

from tui.app import SurebetCalculator
from tui.widgets.header_bar import HeaderBar
from tui.widgets.outcome_row import OutcomeRowEditor, field_index
from tui.widgets.outcome_table import OutcomeTable


async def _settle(pilot, times: int = 3):
    for _ in range(times):
        await pilot.pause()


def test_field_index():
    assert field_index("stake-0") == ("stake", 0)
    assert field_index("recipient-12") == ("recipient", 12)


def test_initial_stakes_are_painted():
    async def scenario():
        app = SurebetCalculator()
        async with app.run_test() as pilot:
            await _settle(pilot)
            assert app.session.result.stakes == [500.0, 500.0]
            assert app.query_one("#stake-0", Input).value == "500.00"
            assert app.query_one("#outcome-table", OutcomeTable).row_count == 2

    asyncio.run(scenario())


def test_bankroll_edit_resplits_stakes():
    async def scenario():
        app = SurebetCalculator()
        async with app.run_test() as pilot:
            await _settle(pilot)
            bankroll = app.query_one("#bankroll", Input)
            bankroll.focus()
            await _settle(pilot)
            bankroll.value = "2000"
            await _settle(pilot)
            assert app.session.position.bankroll == 2000.0
            assert app.session.result.stakes == [1000.0, 1000.0]
            assert app.query_one("#stake-1", Input).value == "1000.00"

    asyncio.run(scenario())


def test_typed_stake_becomes_manual():
    async def scenario():
        app = SurebetCalculator()
        async with app.run_test() as pilot:
            await _settle(pilot)
            stake = app.query_one("#stake-0", Input)
            stake.focus()
            await _settle(pilot)
            stake.value = "300"
            await _settle(pilot)
            row = app.session.position.rows[0]
            assert row.manual
            assert row.stake == 300.0
            assert app.session.result.total == 800.0
            # focused field is left exactly as typed
            assert stake.value == "300"
            assert app.query_one("#bankroll", Input).value == "800.00"
            assert app.session.position.bankroll == 1000.0

    asyncio.run(scenario())


def test_row_count_change_rebuilds_rows():
    async def scenario():
        app = SurebetCalculator()
        async with app.run_test() as pilot:
            await _settle(pilot)
            app.query_one("#row-count", Select).value = 3
            await _settle(pilot, 5)
            assert app.session.position.n == 3
            assert len(app.query(OutcomeRowEditor)) == 3
            assert app.session.result.stakes == [333.34, 333.33, 333.33]

    asyncio.run(scenario())


def test_header_shows_fixed_mode():
    async def scenario():
        app = SurebetCalculator()
        async with app.run_test() as pilot:
            await _settle(pilot)
            header = app.query_one("#header", HeaderBar)
            assert header.mode == "bankroll"
            fixed = app.query_one("#fixed-1", Checkbox)
            fixed.focus()
            await _settle(pilot)
            fixed.value = True
            await _settle(pilot)
            assert app.session.position.fixed_index == 1
            assert header.mode == "fixed"
            assert header.fixed_row == 2

    asyncio.run(scenario())
