"""Utility helpers for the rolling-block engine."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from .game_state import BlockState
from .grid import Grid
from .orientation import Direction, footprint_cells
from .transitions import resting_after, ROLL_DEGREES


# Default cadence: 2 degrees per frame at 60 Hz.
DEGREES_PER_FRAME = 2.0
SOURCE_FPS = 60
DEGREES_PER_SECOND = DEGREES_PER_FRAME * SOURCE_FPS

# Characters used by :func:`format_grid`.
EMPTY_CHAR = " "
TILE_CHAR = "."
BLOCK_CHAR = "#"

# Value :func:`render_grid` stores in cells covered by the block.  Markers are
# unsigned bytes, so it never collides with one.
BLOCK_CELL = -1


def roll_step_degrees(elapsed_seconds: float, step_per_second: float = DEGREES_PER_SECOND) -> float:
    """Return how far a roll advances in ``elapsed_seconds``.

    The result is never negative and never more than a full roll, so a long
    stall (e.g. a dragged window) finishes the current roll but cannot skip
    into the next one.
    """

    if elapsed_seconds <= 0:
        return 0.0
    return min(ROLL_DEGREES, step_per_second * elapsed_seconds)


def can_roll(grid: Grid, block: BlockState, direction: Direction) -> bool:
    """Return ``True`` if rolling ``block`` towards ``direction`` keeps it on ``grid``.

    Only the resting footprint after the roll is checked; the block is free to
    swing over the edge mid-roll.
    """

    orientation, cell_x, cell_z = resting_after(
        block.orientation, block.cell_x, block.cell_z, direction
    )
    return grid.contains_all(footprint_cells(orientation, cell_x, cell_z))


def render_grid(grid: Grid, block: Optional[BlockState] = None) -> List[List[int]]:
    """Return a copy of the marker grid with the block overlaid.

    Rows run along ``z`` from the far edge (highest ``cell_z``) to the near
    edge so that printing the rows top to bottom matches the camera view.
    Cells covered by the block receive ``BLOCK_CELL``.  Parts of the block that have
    rolled off the grid are not shown.
    """

    cells = grid.markers.astype(np.int16)
    if block is not None:
        for x, z in block.cells():
            if grid.contains(x, z):
                cells[x, z] = BLOCK_CELL
    return [[int(cells[x, z]) for x in range(grid.width)] for z in reversed(range(grid.depth))]


def format_grid(grid: Grid, block: Optional[BlockState] = None) -> str:
    """Return :func:`render_grid` as printable text."""

    def char(value: int) -> str:
        if value == BLOCK_CELL:
            return BLOCK_CHAR
        return TILE_CHAR if value else EMPTY_CHAR

    return "\n".join("".join(char(v) for v in row) for row in render_grid(grid, block))
