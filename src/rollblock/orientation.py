"""Block orientations and roll directions.

The block is a 1x1x2 cuboid.  It can rest in one of three poses: standing
upright on a single cell, or lying on its side across two cells along either
grid axis.  Each pose is described by its footprint (the cells it covers
relative to the block's anchor cell) and the extents of its box mesh.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

Footprint = List[Tuple[int, int]]
Extents = Tuple[float, float, float]


class Orientation(str, Enum):
    """Enumeration of the three resting poses of the block."""

    STANDING = "standing"
    LYING_X = "lying_x"
    LYING_Z = "lying_z"


class Direction(str, Enum):
    """Enumeration of the four roll directions."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def axis(self) -> str:
        """Return the grid axis (``"x"`` or ``"z"``) this direction moves along."""

        return "x" if self in (Direction.LEFT, Direction.RIGHT) else "z"

    @classmethod
    def from_letter(cls, letter: str) -> "Direction":
        """Return the direction for a single roll letter (``L``, ``R``, ``U``, ``D``).

        Raises:
            ValueError: If ``letter`` is not one of the four roll letters.
        """

        try:
            return _LETTERS[letter.upper()]
        except KeyError:
            raise ValueError(f"Unknown roll letter: {letter!r}") from None


_LETTERS: Dict[str, Direction] = {
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
    "U": Direction.UP,
    "D": Direction.DOWN,
}


# Cells covered by each pose, as (dx, dz) offsets from the anchor cell.  The
# pose lying along Z extends towards world +Z, which is decreasing ``cell_z``.
_FOOTPRINTS: Dict[Orientation, Footprint] = {
    Orientation.STANDING: [(0, 0)],
    Orientation.LYING_X: [(0, 0), (1, 0)],
    Orientation.LYING_Z: [(0, 0), (0, -1)],
}

# Box extents (x, y, z) in world units for the mesh drawn in each pose.
BLOCK_EXTENTS: Dict[Orientation, Extents] = {
    Orientation.STANDING: (1.0, 2.0, 1.0),
    Orientation.LYING_X: (2.0, 1.0, 1.0),
    Orientation.LYING_Z: (1.0, 1.0, 2.0),
}


def footprint(orientation: Orientation) -> Footprint:
    """Return the ``(dx, dz)`` cell offsets covered by ``orientation``."""

    return list(_FOOTPRINTS[orientation])


def height(orientation: Orientation) -> int:
    """Return the height of the block in ``orientation`` in world units."""

    return int(BLOCK_EXTENTS[orientation][1])


def footprint_cells(orientation: Orientation, cell_x: int, cell_z: int) -> Footprint:
    """Return the absolute grid cells covered by a block anchored at ``(cell_x, cell_z)``."""

    return [(cell_x + dx, cell_z + dz) for dx, dz in _FOOTPRINTS[orientation]]
