"""Rolling-block puzzle engine: transitions, roll animation and poses."""

from .grid import Grid
from .orientation import Direction, Orientation, footprint, footprint_cells
from .transitions import Transition, TRANSITIONS, lookup_transition
from .latch import InputLatch
from .game_state import BlockState, GameState, RollInProgress
from .scheduler import RollScheduler, run_rolls
from .pose import block_transform, tile_transforms, view_projection
from .utils import can_roll, format_grid, render_grid

__all__ = [
    "Grid",
    "Direction",
    "Orientation",
    "Transition",
    "TRANSITIONS",
    "InputLatch",
    "BlockState",
    "GameState",
    "RollInProgress",
    "RollScheduler",
    "run_rolls",
    "lookup_transition",
    "footprint",
    "footprint_cells",
    "block_transform",
    "tile_transforms",
    "view_projection",
    "can_roll",
    "format_grid",
    "render_grid",
]
