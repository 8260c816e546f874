"""Roll scheduling and animation.

The scheduler is a two-state machine over a :class:`GameState`:

* **Idle**: no roll is animating.  Each tick the highest-priority pending
  intent (Left, Right, Down, Up) starts a new roll.
* **Rolling**: the roll's angle advances with elapsed time.  Pending intents
  are left untouched.  Once the angle reaches 90 degrees the transition is
  committed and the scheduler is Idle again.

Roll speed is expressed in degrees per second so the animation takes the same
time regardless of the display's refresh rate.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .game_state import GameState, RollInProgress
from .orientation import Direction
from .transitions import ROLL_DEGREES, lookup_transition
from .utils import DEGREES_PER_FRAME, DEGREES_PER_SECOND, can_roll, roll_step_degrees


LOGGER = logging.getLogger(__name__)

# Tolerance for float accumulation when comparing against a full roll.
ANGLE_EPSILON = 1e-6


class RollScheduler:
    """Advance the block's rolls on a :class:`GameState`."""

    def __init__(
        self,
        *,
        step_per_second: float = DEGREES_PER_SECOND,
        enforce_bounds: bool = False,
    ) -> None:
        if step_per_second <= 0:
            raise ValueError("step_per_second must be positive")
        self.step_per_second = step_per_second
        self.enforce_bounds = enforce_bounds

    def tick(self, state: GameState, elapsed_seconds: float) -> Optional[Direction]:
        """Advance ``state`` by ``elapsed_seconds``.

        Returns the direction of the roll committed during this tick, if any.
        """

        return self.advance(state, roll_step_degrees(elapsed_seconds, self.step_per_second))

    def step(self, state: GameState) -> Optional[Direction]:
        """Advance ``state`` by one 60 Hz frame (2 degrees)."""

        return self.advance(state, DEGREES_PER_FRAME)

    def advance(self, state: GameState, degrees: float) -> Optional[Direction]:
        """Advance the current roll by ``degrees``, starting one first if Idle."""

        roll = state.roll or self._start_roll(state)
        if roll is None:
            return None
        roll.angle_degrees = min(ROLL_DEGREES, roll.angle_degrees + max(0.0, degrees))
        if roll.angle_degrees >= ROLL_DEGREES - ANGLE_EPSILON:
            roll.angle_degrees = ROLL_DEGREES
            self._commit(state, roll)
            return roll.direction
        return None

    # Internal helpers -------------------------------------------------
    def _start_roll(self, state: GameState) -> Optional[RollInProgress]:
        direction = state.latch.next_intent()
        if direction is None:
            return None
        block = state.block
        if self.enforce_bounds and not can_roll(state.grid, block, direction):
            LOGGER.info(
                "Refused %s roll off the grid from (%d, %d)",
                direction.value,
                block.cell_x,
                block.cell_z,
            )
            state.latch.clear(direction)
            return None
        transition = lookup_transition(block.orientation, direction)
        state.roll = RollInProgress(direction=direction, transition=transition)
        LOGGER.debug(
            "Rolling %s from %s at (%d, %d)",
            direction.value,
            block.orientation.value,
            block.cell_x,
            block.cell_z,
        )
        return state.roll

    def _commit(self, state: GameState, roll: RollInProgress) -> None:
        block = state.block
        dx, dz = roll.transition.delta
        block.orientation = roll.transition.target
        block.cell_x += dx
        block.cell_z += dz
        state.latch.clear(roll.direction)
        state.roll = None
        state.rolls_completed += 1
        LOGGER.debug(
            "Committed %s roll: %s at (%d, %d)",
            roll.direction.value,
            block.orientation.value,
            block.cell_x,
            block.cell_z,
        )


def run_rolls(
    state: GameState,
    directions: Iterable[Direction],
    scheduler: Optional[RollScheduler] = None,
) -> GameState:
    """Play ``directions`` one after another to completion and return ``state``.

    Each direction is latched only after the previous roll has committed, so
    the rolls happen in the given order rather than by priority.

    Raises:
        ValueError: If ``state`` is already rolling or has a pending intent.
    """

    if state.rolling or state.latch.next_intent() is not None:
        raise ValueError("run_rolls needs an idle state with no pending intents")
    scheduler = scheduler or RollScheduler()
    for direction in directions:
        state.latch.press(direction)
        while state.rolling or state.latch.next_intent() is not None:
            scheduler.step(state)
    return state
