#!/usr/bin/env python3
"""Interactive entry point for the surebet calculator.

Usage:
    python3 dashboard.py                    # Terminal mode
    python3 dashboard.py --web              # Browser mode (http://localhost:8000)
    python3 dashboard.py --web --port 9000
"""

import argparse
import logging
import sys
from pathlib import Path

import config

# Log to file; stdout belongs to the TUI
log_path = Path(__file__).parent / config.LOG_FILE
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=config.LOG_FORMAT,
    filename=str(log_path),
    filemode="a",
    force=True,
)

from tui.app import SurebetCalculator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive surebet stake calculator.")
    parser.add_argument("--web", action="store_true", help="Serve the calculator in a browser instead of the terminal.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.web:
        from textual_serve.server import Server
        command = f"{sys.executable} {Path(__file__).resolve()}"
        server = Server(command, host=args.host, port=args.port)
        print(f"Serving calculator at http://{args.host}:{args.port}")
        server.serve()
    else:
        SurebetCalculator().run()


if __name__ == "__main__":
    main()
