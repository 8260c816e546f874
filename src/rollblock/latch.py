"""Sticky input intents.

A key press latches an intent to roll in that direction.  The intent stays
set across frames until the roll it triggered has finished, so pressing the
key again (or holding it) has no further effect.  Releasing a key does
nothing.  Quitting travels on its own channel and is never latched as a roll.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from .orientation import Direction

# Order in which simultaneous intents are serviced.
PRIORITY = (Direction.LEFT, Direction.RIGHT, Direction.DOWN, Direction.UP)


@dataclass
class InputLatch:
    """Per-direction roll intents plus the quit request."""

    intents: Dict[Direction, bool] = field(
        default_factory=lambda: {d: False for d in Direction}
    )
    quit_requested: bool = False

    def press(self, direction: Direction) -> None:
        """Latch an intent to roll towards ``direction``."""

        self.intents[Direction(direction)] = True

    def release(self, direction: Direction) -> None:
        """Handle a key release.  Intents are only cleared by a finished roll."""

        return None

    def is_pending(self, direction: Direction) -> bool:
        return self.intents[Direction(direction)]

    def next_intent(self) -> Optional[Direction]:
        """Return the highest-priority pending direction, or ``None``."""

        for direction in PRIORITY:
            if self.intents[direction]:
                return direction
        return None

    def clear(self, direction: Direction) -> None:
        """Drop the intent for ``direction``."""

        self.intents[Direction(direction)] = False

    def request_quit(self) -> None:
        self.quit_requested = True

    def reset(self) -> None:
        """Clear every intent and the quit request."""

        for direction in self.intents:
            self.intents[direction] = False
        self.quit_requested = False
