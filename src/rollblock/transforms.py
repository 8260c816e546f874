"""4x4 matrix helpers.

All matrices are ``float32`` arrays in column-vector convention: a point ``p``
is transformed as ``M @ [x, y, z, 1]``.  The camera helpers follow the usual
OpenGL conventions (right-handed view space looking down -Z, clip space
``[-1, 1]`` on every axis).
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

Matrix = NDArray[np.float32]


def translation(offset: Sequence[float]) -> Matrix:
    """Return a matrix translating by ``offset``."""

    mat = np.eye(4, dtype=np.float32)
    mat[:3, 3] = np.asarray(offset, dtype=np.float32)
    return mat


def rotation(angle_degrees: float, axis: Sequence[float]) -> Matrix:
    """Return a matrix rotating by ``angle_degrees`` about ``axis`` through the origin.

    Positive angles rotate counter-clockwise when looking down ``axis``
    towards the origin.  ``axis`` is normalised first.

    Raises:
        ValueError: If ``axis`` has zero length.
    """

    ax = np.asarray(axis, dtype=np.float64)
    norm = np.linalg.norm(ax)
    if norm == 0:
        raise ValueError("Rotation axis must be non-zero")
    x, y, z = ax / norm
    theta = math.radians(angle_degrees)
    c = math.cos(theta)
    s = math.sin(theta)
    t = 1.0 - c
    mat = np.eye(4, dtype=np.float32)
    mat[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return mat


def look_at(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> Matrix:
    """Return a view matrix for a camera at ``eye`` looking at ``target``."""

    eye = np.asarray(eye, dtype=np.float32)
    target = np.asarray(target, dtype=np.float32)
    up = np.asarray(up, dtype=np.float32)
    fwd = eye - target
    fwd /= np.linalg.norm(fwd)
    right = np.cross(up, fwd)
    right /= np.linalg.norm(right)
    true_up = np.cross(fwd, right)
    rot = np.eye(4, dtype=np.float32)
    rot[0, :3] = right
    rot[1, :3] = true_up
    rot[2, :3] = fwd
    return rot @ translation(-eye)


def perspective(fov_degrees: float, aspect_ratio: float, near: float, far: float) -> Matrix:
    """Return a perspective projection matrix."""

    f = 1.0 / math.tan(math.radians(fov_degrees) / 2.0)
    return np.array(
        [
            [f / aspect_ratio, 0, 0, 0],
            [0, f, 0, 0],
            [0, 0, (far + near) / (near - far), (2 * far * near) / (near - far)],
            [0, 0, -1, 0],
        ],
        dtype=np.float32,
    )


def transform_points(mat: Matrix, points: NDArray[np.float32]) -> NDArray[np.float32]:
    """Apply ``mat`` to an ``(N, 3)`` array of points, returning homogeneous ``(N, 4)``."""

    pts = np.asarray(points, dtype=np.float32)
    homogeneous = np.hstack((pts, np.ones((pts.shape[0], 1), dtype=np.float32)))
    return homogeneous @ mat.T
