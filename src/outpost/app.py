"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from outpost.cli import LOG_LEVELS
from outpost.ui.settings import AppSettings
from outpost.ui.styles.theme import THEME_NAMES


def _delay_ms(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="outpost-gui", description="Show square influence over a chessboard."
    )
    parser.add_argument("fen", nargs="?", help="position to open (FEN)")
    parser.add_argument("--flip", action="store_true", help="view from black's side")
    parser.add_argument("--theme", default="Classic", choices=THEME_NAMES)
    parser.add_argument(
        "--refresh-delay",
        type=_delay_ms,
        default=100,
        metavar="MS",
        help="settle time before recomputing after an edit",
    )
    parser.add_argument(
        "--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS
    )
    # Qt consumes its own flags (e.g. -platform); leave them alone.
    args, _unknown = parser.parse_known_args(argv)
    return args


def main() -> None:
    """Launch the Outpost application."""
    from outpost.ui.bootstrap import run_application

    args = _parse_args(sys.argv[1:])
    logging.basicConfig(level=args.log_level)
    settings = AppSettings(
        board_theme=args.theme,
        flipped=args.flip,
        refresh_delay_ms=args.refresh_delay,
    )
    sys.exit(run_application(fen=args.fen, settings=settings))


if __name__ == "__main__":
    main()
