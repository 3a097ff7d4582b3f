"""Motion configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class MotionConfig:
    """Immutable configuration for the motion core.

    Attributes:
        emit_events: Publish named lifecycle events to the manager's
            event channel. Handlers on components fire regardless.
        full_turn: One revolution in the rotation unit. ``2*pi`` for
            radians, ``360.0`` for degrees.
    """

    emit_events: bool = True
    full_turn: float = 2 * math.pi

    def __post_init__(self) -> None:
        if self.full_turn <= 0:
            raise ValueError("full_turn must be positive")

    @property
    def half_turn(self) -> float:
        return self.full_turn / 2
