"""Handler interfaces notified by the motion system.

Subclass and override only the methods you care about; the defaults do
nothing.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick import EntityId, World


class Axis(Enum):
    """Axis whose terminal speed was reached."""

    X = "x"
    Y = "y"


class TweenHandler:
    """Completion and cancellation notifications for move-to / rotate-to."""

    def on_complete(self, world: World, eid: EntityId) -> None:
        pass

    def on_cancel(self, world: World, eid: EntityId) -> None:
        pass


class CallbackHandler(TweenHandler):
    """TweenHandler backed by plain callables taking (world, eid)."""

    def __init__(
        self,
        on_complete: Callable[[World, EntityId], None] | None = None,
        on_cancel: Callable[[World, EntityId], None] | None = None,
    ) -> None:
        self._on_complete = on_complete
        self._on_cancel = on_cancel

    def on_complete(self, world: World, eid: EntityId) -> None:
        if self._on_complete is not None:
            self._on_complete(world, eid)

    def on_cancel(self, world: World, eid: EntityId) -> None:
        if self._on_cancel is not None:
            self._on_cancel(world, eid)


class TerminalHandler:
    """Notified when a rate is snapped to its terminal limit."""

    def on_terminal_speed(self, world: World, eid: EntityId, axis: Axis) -> None:
        pass

    def on_terminal_velocity(self, world: World, eid: EntityId) -> None:
        pass

    def on_terminal_angular_velocity(self, world: World, eid: EntityId) -> None:
        pass
