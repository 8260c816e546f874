from __future__ import annotations

import numpy as np
import pytest

from rollblock.game_state import BlockState, GameState, RollInProgress
from rollblock.grid import TILE_HEIGHT, cell_origin
from rollblock.meshes import block_mesh
from rollblock.orientation import Direction, Orientation
from rollblock.pose import block_transform, current_block_mesh, tile_transforms, view_projection
from rollblock.transforms import rotation, transform_points, translation
from rollblock.transitions import TRANSITIONS


def _corners(model, orientation):
    points = transform_points(model, block_mesh(orientation).corners)[:, :3]
    return sorted(tuple(float(v) + 0.0 for v in row) for row in np.round(points.astype(np.float64), 4))


def test_rest_transform_is_translation() -> None:
    gs = GameState()
    model = block_transform(gs)
    assert model[:3, 3] == pytest.approx([-2.5, TILE_HEIGHT, 0.0])
    assert model[:3, :3] == pytest.approx(np.eye(3))


def test_roll_start_matches_rest_pose() -> None:
    gs = GameState()
    rest = block_transform(gs)
    for direction in Direction:
        transition = TRANSITIONS[(gs.block.orientation, direction)]
        gs.roll = RollInProgress(direction, transition, angle_degrees=0.0)
        assert block_transform(gs) == pytest.approx(rest)


@pytest.mark.parametrize("key", list(TRANSITIONS))
def test_end_of_roll_matches_committed_pose(key) -> None:
    orientation, direction = key
    transition = TRANSITIONS[key]
    gs = GameState()
    gs.block = BlockState(5, 5, orientation)
    gs.roll = RollInProgress(direction, transition, angle_degrees=90.0)
    rolled = _corners(block_transform(gs), orientation)

    dx, dz = transition.delta
    landed = translation(cell_origin(5 + dx, 5 + dz, TILE_HEIGHT))
    assert rolled == _corners(landed, transition.target)


def test_mid_roll_keeps_pivot_edge_fixed() -> None:
    gs = GameState()
    transition = TRANSITIONS[(Orientation.STANDING, Direction.RIGHT)]
    gs.roll = RollInProgress(Direction.RIGHT, transition, angle_degrees=37.0)
    model = block_transform(gs)
    # The pivot edge of a right roll is the block's x = 1, y = 0 edge.
    edge = transform_points(model, np.array([[1.0, 0.0, 0.0], [1.0, 0.0, 1.0]]))[:, :3]
    rest = transform_points(translation(cell_origin(5, 5, TILE_HEIGHT)), np.array([[1.0, 0.0, 0.0], [1.0, 0.0, 1.0]]))[:, :3]
    assert edge == pytest.approx(rest, abs=1e-5)


def test_mesh_follows_orientation() -> None:
    gs = GameState()
    assert current_block_mesh(gs) is block_mesh(Orientation.STANDING)
    gs.block.orientation = Orientation.LYING_Z
    assert current_block_mesh(gs).corners.max(axis=0) == pytest.approx([1.0, 1.0, 2.0])


def test_tile_transforms_cover_grid() -> None:
    gs = GameState()
    tiles = tile_transforms(gs.grid)
    assert len(tiles) == 150
    cells = dict(tiles)
    assert cells[(14, 9)][:3, 3] == pytest.approx([6.5, 0.0, -4.0])


def test_camera_centres_origin() -> None:
    clip = view_projection(900, 600) @ np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float32)
    assert clip[3] > 0
    assert clip[0] / clip[3] == pytest.approx(0.0, abs=1e-6)
    assert clip[1] / clip[3] == pytest.approx(0.0, abs=1e-6)


def test_rotation_quarter_turn_about_z() -> None:
    point = rotation(90.0, (0.0, 0.0, 1.0)) @ np.array([0.0, 2.0, 0.0, 1.0])
    assert point[:3] == pytest.approx([-2.0, 0.0, 0.0], abs=1e-6)
    with pytest.raises(ValueError):
        rotation(90.0, (0.0, 0.0, 0.0))
