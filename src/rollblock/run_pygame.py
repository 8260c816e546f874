"""Simple pygame front-end for the rolling-block engine.

The engine hands this module one model matrix per drawable each frame.  The
meshes are pushed through the fixed camera with numpy and the visible faces
are drawn as flat-shaded polygons, far to near, so no OpenGL context is
needed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Tuple

import numpy as np
import pygame

from .game_state import GameState
from .meshes import TILE_MESH, Mesh
from .orientation import Direction
from .pose import (
    WINDOW_SIZE,
    block_transform,
    current_block_mesh,
    model_view_projection,
    tile_transforms,
    view_projection,
)
from .scheduler import RollScheduler
from .transforms import Matrix, transform_points

# Frames per second to run the game loop at
FPS = 60

BACKGROUND_COLOR = (255, 255, 255)
OUTLINE_COLOR = (60, 60, 60)

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

# Clip-space w below which a corner is treated as behind the camera.
MIN_W = 1e-4

LOGGER = logging.getLogger(__name__)

Polygon = Tuple[float, List[Tuple[float, float]], Tuple[int, int, int]]


def project_mesh(mesh: Mesh, mvp: Matrix, size: Tuple[int, int]) -> List[Polygon]:
    """Return the front-facing faces of ``mesh`` as ``(depth, points, colour)``.

    ``points`` are in screen pixels and ``depth`` is the mean normalised
    device depth of the face's corners (larger is farther away).
    """

    width, height = size
    clip = transform_points(mvp, mesh.corners)
    w = clip[:, 3]
    if np.any(w < MIN_W):
        return []
    ndc = clip[:, :3] / w[:, None]
    screen_x = (ndc[:, 0] + 1.0) * (width / 2.0)
    screen_y = height - (ndc[:, 1] + 1.0) * (height / 2.0)

    polygons: List[Polygon] = []
    for face, color in zip(mesh.faces, mesh.face_colors()):
        idx = list(face)
        xs = ndc[idx, 0]
        ys = ndc[idx, 1]
        # Counter-clockwise in device space means the face points at the camera.
        area = float(np.dot(xs, np.roll(ys, -1)) - np.dot(ys, np.roll(xs, -1)))
        if area <= 0:
            continue
        points = [(float(screen_x[i]), float(screen_y[i])) for i in idx]
        polygons.append((float(ndc[idx, 2].mean()), points, color))
    return polygons


def draw_polygons(screen: pygame.Surface, polygons: List[Polygon], outline: bool = True) -> None:
    """Draw ``polygons`` far to near."""

    for _, points, color in sorted(polygons, key=lambda p: p[0], reverse=True):
        pygame.draw.polygon(screen, color, points)
        if outline:
            pygame.draw.polygon(screen, OUTLINE_COLOR, points, 1)


def draw_tiles(screen: pygame.Surface, state: GameState, vp: Matrix) -> None:
    """Render the floor tiles."""

    size = screen.get_size()
    polygons: List[Polygon] = []
    for _, model in tile_transforms(state.grid):
        polygons.extend(project_mesh(TILE_MESH, model_view_projection(model, vp), size))
    draw_polygons(screen, polygons)


def draw_block(screen: pygame.Surface, state: GameState, vp: Matrix) -> None:
    """Render the block on top of the floor."""

    mvp = model_view_projection(block_transform(state), vp)
    draw_polygons(screen, project_mesh(current_block_mesh(state), mvp, screen.get_size()))


def handle_key(event: pygame.event.Event, state: GameState) -> None:
    """Latch roll intents and quit requests from a key-down event."""

    if event.key in QUIT_KEYS:
        state.latch.request_quit()
        return
    direction = KEY_DIRECTIONS.get(event.key)
    if direction is not None:
        state.latch.press(direction)


def handle_event(event: pygame.event.Event, state: GameState) -> None:
    """Feed one pygame event into ``state``'s input latch."""

    if event.type == pygame.QUIT:
        state.latch.request_quit()
    elif event.type == pygame.KEYDOWN:
        handle_key(event, state)
    elif event.type == pygame.KEYUP:
        direction = KEY_DIRECTIONS.get(event.key)
        if direction is not None:
            state.latch.release(direction)


class GameRunner:
    """Manage the game loop started by :meth:`start` and ended by a quit request."""

    def __init__(self, scheduler: RollScheduler | None = None) -> None:
        self._running = False
        self._task: asyncio.Task | None = None
        self._screen: pygame.Surface | None = None
        self._state: GameState | None = None
        self._clock: pygame.time.Clock | None = None
        self._scheduler = scheduler or RollScheduler()

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> GameState | None:
        return self._state

    def tick(self, events: List[pygame.event.Event], elapsed_seconds: float) -> None:
        """Run one frame of game logic: input first, then the scheduler."""

        if self._state is None:
            return
        for event in events:
            handle_event(event, self._state)
        if self._state.latch.quit_requested:
            LOGGER.info("Quit requested")
            self._running = False
            return
        self._scheduler.tick(self._state, elapsed_seconds)

    def _draw(self, vp: Matrix) -> None:
        if self._screen is None or self._state is None:
            return
        self._screen.fill(BACKGROUND_COLOR)
        draw_tiles(self._screen, self._state, vp)
        draw_block(self._screen, self._state, vp)
        block = self._state.block
        pygame.display.set_caption(
            f"Rolling block - {block.orientation.value} at ({block.cell_x}, {block.cell_z})"
        )
        pygame.display.flip()

    async def _run_loop(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Rolling block")
        self._clock = pygame.time.Clock()
        vp = view_projection(*WINDOW_SIZE)

        self._state = GameState()
        self._state.reset_game()
        LOGGER.info("Game started")

        self._running = True
        try:
            while self._running:
                dt = self._clock.tick(FPS) if self._clock else 0
                self.tick(pygame.event.get(), dt / 1000.0)
                if self._running:
                    self._draw(vp)
                # Yield to the host event loop to keep it responsive
                await asyncio.sleep(0)
        finally:
            self._running = False
            pygame.quit()
            LOGGER.info("Game stopped")

    def start(self) -> None:
        if self._task and not self._task.done():
            LOGGER.info("Game already running")
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop (plain Python); run synchronously
            asyncio.run(self._run_loop())
        else:
            self._task = loop.create_task(self._run_loop())


def main(scheduler: RollScheduler | None = None) -> None:
    """Open the window and play until the player quits."""

    GameRunner(scheduler).start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
