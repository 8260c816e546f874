"""ASCII demo for the rolling-block engine.

Run with: `python -m rollblock --rolls LLDU`

Replays the given roll letters (``L``, ``R``, ``U``, ``D``) from the starting
position and prints the floor with the block's footprint, followed by the
block's final pose.  Pass ``--play`` to open the pygame window instead.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from . import GameState, RollScheduler, format_grid, run_rolls
from .orientation import Direction


def parse_rolls(text: str) -> List[Direction]:
    """Return the directions spelled by ``text``, ignoring spaces and commas.

    Raises:
        ValueError: If ``text`` contains anything other than roll letters.
    """

    return [Direction.from_letter(ch) for ch in text if ch not in " ,"]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rollblock", description=__doc__)
    parser.add_argument("--rolls", default="", help="Roll letters to replay, e.g. 'LLDU'.")
    parser.add_argument(
        "--bounds",
        action="store_true",
        help="Refuse rolls that would leave the grid.",
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Open the interactive pygame window.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    scheduler = RollScheduler(enforce_bounds=args.bounds)
    if args.play:
        from .run_pygame import main as play

        play(scheduler)
        return

    try:
        directions = parse_rolls(args.rolls)
    except ValueError as exc:
        raise SystemExit(f"rollblock: {exc}")

    gs = GameState()
    run_rolls(gs, directions, scheduler)
    print(format_grid(gs.grid, gs.block))
    block = gs.block
    print(f"{block.orientation.value} at ({block.cell_x}, {block.cell_z})")


if __name__ == "__main__":
    main()
