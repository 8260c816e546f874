from __future__ import annotations

import pytest

from rollblock.orientation import Direction, Orientation
from rollblock.transitions import TRANSITIONS, lookup_transition, resting_after

S = Orientation.STANDING
LX = Orientation.LYING_X
LZ = Orientation.LYING_Z


@pytest.mark.parametrize(
    "orientation, direction, axis, pivot, target, delta",
    [
        (S, Direction.LEFT, (0, 0, 1), (0, 0, 0), LX, (-2, 0)),
        (LX, Direction.LEFT, (0, 0, 1), (0, 0, 0), S, (-1, 0)),
        (LZ, Direction.LEFT, (0, 0, 1), (0, 0, 0), LZ, (-1, 0)),
        (S, Direction.RIGHT, (0, 0, -1), (-1, 0, 0), LX, (1, 0)),
        (LX, Direction.RIGHT, (0, 0, -1), (-2, 0, 0), S, (2, 0)),
        (LZ, Direction.RIGHT, (0, 0, -1), (-1, 0, 0), LZ, (1, 0)),
        (S, Direction.UP, (-1, 0, 0), (0, 0, 0), LZ, (0, 2)),
        (LX, Direction.UP, (-1, 0, 0), (0, 0, 0), LX, (0, 1)),
        (LZ, Direction.UP, (-1, 0, 0), (0, 0, 0), S, (0, 1)),
        (S, Direction.DOWN, (1, 0, 0), (0, 0, -1), LZ, (0, -1)),
        (LX, Direction.DOWN, (1, 0, 0), (0, 0, -1), LX, (0, -1)),
        (LZ, Direction.DOWN, (1, 0, 0), (0, 0, -2), S, (0, -2)),
    ],
)
def test_table_rows(orientation, direction, axis, pivot, target, delta) -> None:
    transition = lookup_transition(orientation, direction)
    assert transition.axis == pytest.approx(axis)
    assert transition.pivot_offset == pytest.approx(pivot)
    assert transition.target is target
    assert transition.delta == delta


def test_table_is_total() -> None:
    assert len(TRANSITIONS) == len(Orientation) * len(Direction)
    for orientation in Orientation:
        for direction in Direction:
            assert (orientation, direction) in TRANSITIONS


def test_lying_along_z_rolls_left_along_its_side() -> None:
    assert resting_after(LZ, 5, 5, Direction.LEFT) == (LZ, 4, 5)


def test_lookup_accepts_enum_values() -> None:
    assert lookup_transition("standing", "left") is TRANSITIONS[(S, Direction.LEFT)]
