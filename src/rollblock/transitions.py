"""Roll transition table.

Rolling the block tips it 90 degrees over one of its bottom edges.  Which
edge, which axis and where the block ends up depend on both the direction and
the pose the block is in when the roll starts, so the rules are kept here as
one explicit table keyed by ``(Orientation, Direction)``.

Rolling left and rolling right are not mirror images.  Every mesh is anchored
at its minimum corner, so a roll towards -X pivots about the anchor edge
(no offset) while a roll towards +X pivots about the far edge, which has to be
moved onto the rotation axis first.  The same holds for Up (-Z world) and
Down (+Z world).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .orientation import Direction, Orientation

Vector3 = Tuple[float, float, float]

# Every roll turns the block by exactly a quarter turn.
ROLL_DEGREES = 90.0

AXIS_POS_X: Vector3 = (1.0, 0.0, 0.0)
AXIS_NEG_X: Vector3 = (-1.0, 0.0, 0.0)
AXIS_POS_Z: Vector3 = (0.0, 0.0, 1.0)
AXIS_NEG_Z: Vector3 = (0.0, 0.0, -1.0)

NO_OFFSET: Vector3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Transition:
    """Geometry and outcome of a single roll."""

    axis: Vector3
    pivot_offset: Vector3
    target: Orientation
    delta: Tuple[int, int]  # (dx, dz) in grid cells


_S = Orientation.STANDING
_LX = Orientation.LYING_X
_LZ = Orientation.LYING_Z

TRANSITIONS: Dict[Tuple[Orientation, Direction], Transition] = {
    (_S, Direction.LEFT): Transition(AXIS_POS_Z, NO_OFFSET, _LX, (-2, 0)),
    (_LX, Direction.LEFT): Transition(AXIS_POS_Z, NO_OFFSET, _S, (-1, 0)),
    (_LZ, Direction.LEFT): Transition(AXIS_POS_Z, NO_OFFSET, _LZ, (-1, 0)),
    (_S, Direction.RIGHT): Transition(AXIS_NEG_Z, (-1.0, 0.0, 0.0), _LX, (1, 0)),
    (_LX, Direction.RIGHT): Transition(AXIS_NEG_Z, (-2.0, 0.0, 0.0), _S, (2, 0)),
    (_LZ, Direction.RIGHT): Transition(AXIS_NEG_Z, (-1.0, 0.0, 0.0), _LZ, (1, 0)),
    (_S, Direction.UP): Transition(AXIS_NEG_X, NO_OFFSET, _LZ, (0, 2)),
    (_LX, Direction.UP): Transition(AXIS_NEG_X, NO_OFFSET, _LX, (0, 1)),
    (_LZ, Direction.UP): Transition(AXIS_NEG_X, NO_OFFSET, _S, (0, 1)),
    (_S, Direction.DOWN): Transition(AXIS_POS_X, (0.0, 0.0, -1.0), _LZ, (0, -1)),
    (_LX, Direction.DOWN): Transition(AXIS_POS_X, (0.0, 0.0, -1.0), _LX, (0, -1)),
    (_LZ, Direction.DOWN): Transition(AXIS_POS_X, (0.0, 0.0, -2.0), _S, (0, -2)),
}


def lookup_transition(orientation: Orientation, direction: Direction) -> Transition:
    """Return the transition for rolling a block in ``orientation`` towards ``direction``.

    The table covers every pair so the lookup never fails for valid enum
    members.
    """

    return TRANSITIONS[(Orientation(orientation), Direction(direction))]


def resting_after(
    orientation: Orientation, cell_x: int, cell_z: int, direction: Direction
) -> Tuple[Orientation, int, int]:
    """Return ``(orientation, cell_x, cell_z)`` after a completed roll."""

    transition = lookup_transition(orientation, direction)
    dx, dz = transition.delta
    return transition.target, cell_x + dx, cell_z + dz
