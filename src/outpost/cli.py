"""Text report of square influence for one position.

Usage:
    outpost [FEN] [--square SQ ...] [--json] [--log-level LEVEL]

Without a FEN the standard starting position is used.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from outpost.core.classifier import classify
from outpost.core.enums import Color
from outpost.core.fen import STARTING_FEN, snapshot_from_fen
from outpost.core.influence import InfluenceMap, compute_influence, influence_at
from outpost.core.types import ParseError, coords_to_square, square_to_coords

_LOGGER = logging.getLogger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def format_grid(influence: InfluenceMap, *, orientation: Color = Color.WHITE) -> str:
    """8×8 grid of ``white:black`` counts; empty squares show ``.``."""
    ranks = range(7, -1, -1) if orientation == Color.WHITE else range(8)
    files = range(8) if orientation == Color.WHITE else range(7, -1, -1)

    rows: list[str] = []
    for rank in ranks:
        cells = []
        for file in files:
            sq = coords_to_square(file, rank)
            assert sq is not None
            counts = influence.get(sq)
            cells.append(f"{counts.white}:{counts.black}" if counts else ".")
        rows.append(f"{rank + 1} " + " ".join(f"{c:>5}" for c in cells))
    rows.append("  " + " ".join(f"{chr(ord('a') + f):>5}" for f in files))
    return "\n".join(rows)


def format_totals(influence: InfluenceMap) -> str:
    white = sum(1 for c in influence.values() if c.white > c.black)
    black = sum(1 for c in influence.values() if c.black > c.white)
    contested = sum(1 for c in influence.values() if c.white == c.black and c.white)
    return f"white controls {white}, black controls {black}, contested {contested}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="outpost", description="Count attackers per square for a position."
    )
    parser.add_argument("fen", nargs="?", default=STARTING_FEN, help="position (FEN)")
    parser.add_argument(
        "--square",
        action="append",
        default=[],
        metavar="SQ",
        help="report a single square (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="print the map as JSON")
    parser.add_argument("--flip", action="store_true", help="print from black's side")
    parser.add_argument(
        "--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        pieces = snapshot_from_fen(args.fen)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    influence = compute_influence(pieces)
    _LOGGER.debug("%d pieces, %d influenced squares", len(pieces), len(influence))

    if args.square:
        status = 0
        for sq in args.square:
            try:
                square_to_coords(sq)
            except ParseError as exc:
                print(f"error: {exc}", file=sys.stderr)
                status = 2
                continue
            counts = influence_at(influence, sq)
            shade = classify(counts)
            print(
                f"{sq}: white {counts.white}, black {counts.black}, "
                f"{shade.dominance.value} ({shade.intensity:.1f})"
            )
        return status

    if args.json:
        payload = {
            sq: {"white": counts.white, "black": counts.black}
            for sq, counts in sorted(influence.items())
        }
        print(json.dumps(payload, indent=2))
        return 0

    orientation = Color.BLACK if args.flip else Color.WHITE
    print(format_grid(influence, orientation=orientation))
    print(format_totals(influence))
    return 0


if __name__ == "__main__":
    sys.exit(main())
