"""Grid representation for the tile floor."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np
from numpy.typing import NDArray


# Dimensions of the floor in cells.  ``x`` runs along the width and ``z``
# along the depth.
WIDTH = 15
DEPTH = 10

# Value stored in a cell that holds a tile.  ``0`` represents a missing tile.
TILE = 1

# World-space position of cell (0, 0).  Increasing ``cell_x`` moves towards
# world +X, increasing ``cell_z`` moves towards world -Z.
ORIGIN_X = -7.5
ORIGIN_Z = 5.0
TILE_HEIGHT = 0.2

Markers = NDArray[np.uint8]


def create_markers() -> Markers:
    """Return a new marker array with a tile in every cell."""

    return np.full((WIDTH, DEPTH), TILE, dtype=np.uint8)


def cell_origin(cell_x: float, cell_z: float, y: float = 0.0) -> Tuple[float, float, float]:
    """Return the world-space corner of the cell at ``(cell_x, cell_z)``."""

    return (ORIGIN_X + cell_x, y, ORIGIN_Z - cell_z)


class Grid:
    """Fixed floor of tiles the block rolls across."""

    width: int = WIDTH
    depth: int = DEPTH

    def __init__(self) -> None:
        self.markers: Markers = create_markers()

    def get_marker(self, cell_x: int, cell_z: int) -> int:
        """Return the marker stored at ``(cell_x, cell_z)``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        if self.contains(cell_x, cell_z):
            return int(self.markers[cell_x, cell_z])
        raise IndexError("Cell out of bounds")

    def set_marker(self, cell_x: int, cell_z: int, value: int) -> None:
        """Store ``value`` at ``(cell_x, cell_z)``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        if self.contains(cell_x, cell_z):
            self.markers[cell_x, cell_z] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def contains(self, cell_x: int, cell_z: int) -> bool:
        """Return ``True`` if ``(cell_x, cell_z)`` lies on the grid."""

        return 0 <= cell_x < self.width and 0 <= cell_z < self.depth

    def contains_all(self, cells: Iterable[Tuple[int, int]]) -> bool:
        """Return ``True`` if every cell in ``cells`` lies on the grid."""

        return all(self.contains(x, z) for x, z in cells)

    def tile_cells(self) -> list[Tuple[int, int]]:
        """Return the ``(cell_x, cell_z)`` of every cell holding a tile."""

        xs, zs = np.nonzero(self.markers)
        return [(int(x), int(z)) for x, z in zip(xs, zs)]
