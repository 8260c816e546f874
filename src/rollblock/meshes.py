"""Box meshes for the block poses and the floor tiles.

Every mesh is an axis-aligned box with one corner at the local origin and
extending along +X, +Y and +Z.  Faces are quads given as indices into the
corner array, wound counter-clockwise when seen from outside the box.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np
from numpy.typing import NDArray

from .grid import TILE_HEIGHT
from .orientation import BLOCK_EXTENTS, Orientation

Color = Tuple[int, int, int]

BLOCK_COLOR: Color = (77, 51, 26)
TILE_COLOR: Color = (153, 153, 153)

# Corner ``i`` has x set if bit 0 is set, y if bit 1 and z if bit 2.
BOX_FACES: Tuple[Tuple[int, int, int, int], ...] = (
    (0, 2, 3, 1),  # back (z = 0)
    (4, 5, 7, 6),  # front (z = d)
    (0, 4, 6, 2),  # left (x = 0)
    (1, 3, 7, 5),  # right (x = w)
    (0, 1, 5, 4),  # bottom (y = 0)
    (2, 6, 7, 3),  # top (y = h)
)

# Per-face brightness so the box reads as a solid without lighting.
FACE_SHADES: Tuple[float, ...] = (0.7, 0.85, 0.6, 0.75, 0.4, 1.0)


@dataclass(frozen=True)
class Mesh:
    """Corner positions and quad faces of a box."""

    corners: NDArray[np.float32]
    faces: Tuple[Tuple[int, int, int, int], ...]
    color: Color

    def face_colors(self) -> list[Color]:
        """Return the shaded colour of each face."""

        return [
            tuple(min(255, int(channel * shade)) for channel in self.color)  # type: ignore[misc]
            for shade in FACE_SHADES
        ]


def box_corners(width: float, height: float, depth: float) -> NDArray[np.float32]:
    """Return the eight corners of a box spanning ``[0, width] x [0, height] x [0, depth]``."""

    return np.array(
        [
            ((i & 1) * width, ((i >> 1) & 1) * height, ((i >> 2) & 1) * depth)
            for i in range(8)
        ],
        dtype=np.float32,
    )


def box_mesh(extents: Tuple[float, float, float], color: Color) -> Mesh:
    return Mesh(corners=box_corners(*extents), faces=BOX_FACES, color=color)


BLOCK_MESHES: Dict[Orientation, Mesh] = {
    orientation: box_mesh(extents, BLOCK_COLOR)
    for orientation, extents in BLOCK_EXTENTS.items()
}

TILE_MESH = box_mesh((1.0, TILE_HEIGHT, 1.0), TILE_COLOR)


def block_mesh(orientation: Orientation) -> Mesh:
    """Return the precomputed mesh to draw for a block in ``orientation``."""

    return BLOCK_MESHES[Orientation(orientation)]
