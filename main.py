#!/usr/bin/env python3
"""One-shot stake calculation from the command line.

Usage:
    python3 main.py --odds 2.10 2.10 --bankroll 1000
    python3 main.py --odds 2 3 --recipients 0 --fixed 0 --stake 0=600
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

import config
from calculator import (
    parse_number,
    recalculate,
    set_bankroll,
    set_fixed,
    set_odds,
    set_recipient,
    set_stake,
)
from formatting import arbitrage_label, fmt2, fmt_money, result_to_dict, roi_label
from models import Position, RecalcResult

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=config.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def _stake_arg(text: str) -> tuple[int, float]:
    idx, sep, amount = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected INDEX=AMOUNT, got {text!r}")
    try:
        return int(idx), parse_number(amount)
    except ValueError:
        raise argparse.ArgumentTypeError(f"bad row index in {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Split a bankroll across outcomes under the R profit rule.")
    parser.add_argument("--odds", nargs="+", type=parse_number, required=True, help="Decimal odds, one per outcome")
    parser.add_argument("--bankroll", type=parse_number, default=config.DEFAULT_BANKROLL, help="Total to stake")
    parser.add_argument(
        "--recipients", nargs="*", type=int, default=None,
        help="Row indexes (0-based) that share the profit; default all",
    )
    parser.add_argument("--fixed", type=int, default=None, help="Row index whose stake is pinned")
    parser.add_argument(
        "--stake", action="append", type=_stake_arg, default=[], metavar="INDEX=AMOUNT",
        help="Manual stake for a row (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def build_position(args, parser: argparse.ArgumentParser) -> Position:
    n = len(args.odds)
    position = Position.default(n)
    set_bankroll(position, args.bankroll)
    for i, odds in enumerate(args.odds):
        set_odds(position, i, odds)

    if args.recipients is not None:
        for i in args.recipients:
            if not 0 <= i < n:
                parser.error(f"--recipients index {i} out of range for {n} outcomes")
        for i in range(n):
            set_recipient(position, i, i in args.recipients)

    if args.fixed is not None:
        if not 0 <= args.fixed < n:
            parser.error(f"--fixed index {args.fixed} out of range for {n} outcomes")
        set_fixed(position, args.fixed, True)

    # Manual stakes go in after F so picking F does not reset them
    for i, amount in args.stake:
        if not 0 <= i < n:
            parser.error(f"--stake index {i} out of range for {n} outcomes")
        set_stake(position, i, amount)

    return position


def render(console: Console, position: Position, result: RecalcResult):
    table = Table(title="Stake allocation", show_lines=False)
    for col in ("#", "Odds", "R", "F", "Stake", "Payout", "Profit", "Errors"):
        table.add_column(col, justify="right" if col not in ("R", "F", "Errors") else "left")

    for i, row in enumerate(position.rows):
        errors = " ".join(e for e in (result.row_errors[i].odds_error, result.row_errors[i].stake_error) if e)
        table.add_row(
            str(i + 1),
            f"{row.odds}",
            "✓" if row.recipient else "",
            "✓" if position.fixed_index == i else "",
            fmt2(result.stakes[i]) + (" *" if row.manual else ""),
            fmt2(result.payouts[i]) if result.payouts else "-",
            fmt2(result.profits[i]) if result.profits else "-",
            errors,
        )
    console.print(table)
    console.print(f"Total staked: [bold]{fmt_money(result.total)}[/]  (mode: {result.solver_mode})")

    if result.valid:
        style = "bold green" if result.arbitrage.is_arb else "bold red"
        console.print(arbitrage_label(result.arbitrage), style=style)
        console.print(roi_label(result.roi), style="green" if result.roi.value >= 0 else "red")
    else:
        console.print("CHECK INPUT", style="bold yellow")
        for issue in result.issues:
            if issue.row_index is None:
                console.print(f"  • {issue.code.message}", style="yellow")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    position = build_position(args, parser)
    result = recalculate(position)

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        render(Console(), position, result)
    return 0 if result.valid else 1


if __name__ == "__main__":
    sys.exit(main())
