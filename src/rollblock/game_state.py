"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .grid import Grid
from .latch import InputLatch
from .orientation import Direction, Orientation, footprint_cells
from .transitions import Transition, Vector3


START_CELL = (5, 5)


@dataclass
class BlockState:
    """Resting position and pose of the block.

    ``cell_x`` and ``cell_z`` locate the block's anchor cell.  They describe
    where the block lies between rolls; while a roll animates they still hold
    the position the roll started from.
    """

    cell_x: int = START_CELL[0]
    cell_z: int = START_CELL[1]
    orientation: Orientation = Orientation.STANDING

    def cells(self) -> List[Tuple[int, int]]:
        """Return the grid cells the block covers."""

        return footprint_cells(self.orientation, self.cell_x, self.cell_z)


@dataclass
class RollInProgress:
    """A roll currently being animated.

    The transition is looked up once when the roll starts and frozen until it
    is committed.
    """

    direction: Direction
    transition: Transition
    angle_degrees: float = 0.0

    @property
    def axis(self) -> Vector3:
        return self.transition.axis

    @property
    def pivot_offset(self) -> Vector3:
        return self.transition.pivot_offset


@dataclass
class GameState:
    """Mutable state for a rolling-block session.

    Only :class:`~rollblock.scheduler.RollScheduler` mutates ``block`` and
    ``roll``; renderers read them.
    """

    grid: Grid = field(default_factory=Grid)
    block: BlockState = field(default_factory=BlockState)
    roll: Optional[RollInProgress] = None
    latch: InputLatch = field(default_factory=InputLatch)
    rolls_completed: int = 0

    @property
    def rolling(self) -> bool:
        return self.roll is not None

    def reset_game(self) -> None:
        """Reset the entire game state to the starting position."""

        self.grid = Grid()
        self.block = BlockState()
        self.roll = None
        self.latch.reset()
        self.rolls_completed = 0
