"""Named motion events and the listener table that dispatches them."""
from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick import EntityId


class MotionEvent(Enum):
    """Lifecycle events emitted by the motion core."""

    REACH_TERMINAL_SPEED_X = "onReachTerminalSpeedX"
    REACH_TERMINAL_SPEED_Y = "onReachTerminalSpeedY"
    REACH_TERMINAL_VELOCITY = "onReachTerminalVelocity"
    REACH_TERMINAL_ANGULAR_VELOCITY = "onReachTerminalAngularVelocity"
    MOVE_TO_COMPLETE = "onMoveToComplete"
    MOVE_TO_CANCEL = "onMoveToCancel"
    ROTATE_TO_COMPLETE = "onRotateToComplete"
    ROTATE_TO_CANCEL = "onRotateToCancel"


Listener = Callable[[MotionEvent, "EntityId"], None]


class MotionEvents:
    """Per-event listener lists, dispatched synchronously by ``emit``.

    Listeners run in connection order before ``emit`` returns. An event
    nobody listens to is dropped.
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[MotionEvent, list[Listener]] = defaultdict(list)

    def connect(self, event: MotionEvent, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def disconnect(self, event: MotionEvent, listener: Listener) -> None:
        """Remove one registration of ``listener``. Unknown listeners are ignored."""
        listeners = self._listeners.get(event)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def has_listeners(self, event: MotionEvent) -> bool:
        return bool(self._listeners.get(event))

    def emit(self, event: MotionEvent, eid: EntityId) -> None:
        # Copy so a listener may connect or disconnect while being called.
        for listener in tuple(self._listeners.get(event, ())):
            listener(event, eid)
