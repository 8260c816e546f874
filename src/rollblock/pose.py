"""World transforms for the block and the floor.

The projector is stateless: everything it needs is read from the
:class:`GameState` passed in, and nothing is written back.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .game_state import GameState
from .grid import TILE_HEIGHT, Grid, cell_origin
from .meshes import Mesh, block_mesh
from .transforms import Matrix, look_at, perspective, rotation, translation


WINDOW_SIZE = (900, 600)

# Fixed camera looking down at the floor from above and in front.
CAMERA_EYE = (0.0, 15.0, 9.0)
CAMERA_TARGET = (0.0, 0.0, 0.0)
CAMERA_UP = (0.0, 1.0, 0.0)
FOV_DEGREES = 45.0
NEAR_PLANE = 0.1
FAR_PLANE = 500.0


def view_projection(width: int = WINDOW_SIZE[0], height: int = WINDOW_SIZE[1]) -> Matrix:
    """Return the fixed camera's projection @ view matrix for a ``width`` x ``height`` viewport."""

    aspect = width / height if height else 1.0
    proj = perspective(FOV_DEGREES, aspect, NEAR_PLANE, FAR_PLANE)
    return proj @ look_at(CAMERA_EYE, CAMERA_TARGET, CAMERA_UP)


def block_transform(state: GameState) -> Matrix:
    """Return the block's model matrix for the current tick.

    The block is moved to its anchor cell, resting on top of the tiles.  While
    a roll animates, the rotation is applied about the roll's pivot edge:
    ``T(cell) @ T(-pivot) @ R(angle, axis) @ T(pivot)``.  At rest the rotation
    is the identity.
    """

    block = state.block
    model = translation(cell_origin(block.cell_x, block.cell_z, TILE_HEIGHT))
    roll = state.roll
    if roll is None:
        return model
    pivot = np.asarray(roll.pivot_offset, dtype=np.float32)
    return model @ translation(-pivot) @ rotation(roll.angle_degrees, roll.axis) @ translation(pivot)


def current_block_mesh(state: GameState) -> Mesh:
    """Return the mesh matching the block's current orientation."""

    return block_mesh(state.block.orientation)


def tile_transform(cell_x: int, cell_z: int) -> Matrix:
    return translation(cell_origin(cell_x, cell_z))


def tile_transforms(grid: Grid) -> List[Tuple[Tuple[int, int], Matrix]]:
    """Return ``((cell_x, cell_z), model)`` for every tile on ``grid``."""

    return [(cell, tile_transform(*cell)) for cell in grid.tile_cells()]


def model_view_projection(model: Matrix, vp: Matrix) -> Matrix:
    """Combine a model matrix with the camera's view-projection."""

    return vp @ model
