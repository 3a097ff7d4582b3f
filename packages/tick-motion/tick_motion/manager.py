"""MotionManager - starts, cancels and stops tweens on motion entities."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from tick_motion.components import (
    Kinematics,
    MoveTo,
    RotateDirection,
    RotateTo,
    Transform,
)
from tick_motion.config import MotionConfig
from tick_motion.events import MotionEvent, MotionEvents

if TYPE_CHECKING:
    from tick import Clock, EntityId, World

    from tick_motion.handlers import TerminalHandler, TweenHandler

logger = logging.getLogger(__name__)


def resolve_direction(
    rotation: float, target: float, config: MotionConfig
) -> tuple[RotateDirection, float]:
    """Pick a sweep direction for an AUTOMATIC rotate-to.

    ``rotation`` must already be normalized into ``[0, full_turn)``.
    Returns the direction and the start angle to interpolate from, which
    is shifted up by a full turn when the sweep runs backward through
    zero.
    """
    half = config.half_turn
    if rotation > half:
        if target > half:
            if target > rotation:
                return RotateDirection.ANTI_CLOCKWISE, rotation
            return RotateDirection.CLOCKWISE, rotation
        if target > rotation - half:
            return RotateDirection.ANTI_CLOCKWISE, rotation
        return RotateDirection.CLOCKWISE, rotation
    if target > half:
        if target > rotation + half:
            return RotateDirection.ANTI_CLOCKWISE, rotation + config.full_turn
        return RotateDirection.CLOCKWISE, rotation
    if target > rotation:
        return RotateDirection.CLOCKWISE, rotation
    return RotateDirection.ANTI_CLOCKWISE, rotation


class MotionManager:
    """Entry point for tween operations and named-event publication.

    The clock supplies the tick number that move-to and rotate-to record
    as their start. The same manager is handed to ``make_motion_system``.
    """

    def __init__(
        self,
        clock: Clock,
        events: MotionEvents | None = None,
        config: MotionConfig | None = None,
    ) -> None:
        self._clock = clock
        self._events = events
        self._config = config if config is not None else MotionConfig()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def events(self) -> MotionEvents | None:
        return self._events

    @property
    def config(self) -> MotionConfig:
        return self._config

    def emit(self, event: MotionEvent, eid: EntityId) -> None:
        """Dispatch a named event now if a channel is attached and enabled."""
        if self._events is not None and self._config.emit_events:
            self._events.emit(event, eid)

    # --- Setup ---

    def add_body(
        self,
        world: World,
        eid: EntityId,
        x: float = 0.0,
        y: float = 0.0,
        rotation: float = 0.0,
        terminal_handler: TerminalHandler | None = None,
    ) -> Kinematics:
        """Attach Transform and Kinematics to an entity. Returns the Kinematics."""
        world.attach(eid, Transform(x=x, y=y, rotation=rotation))
        kin = Kinematics(terminal_handler=terminal_handler)
        world.attach(eid, kin)
        return kin

    # --- Move-to ---

    def move_to(
        self,
        world: World,
        eid: EntityId,
        x: float,
        y: float,
        duration: int,
        easing: str = "linear",
        handler: TweenHandler | None = None,
        callback: Callable[[], None] | None = None,
    ) -> MoveTo:
        """Interpolate position to (x, y) over ``duration`` ticks.

        Cancels a running move-to first and clears linear kinematics.
        ``duration <= 0`` completes on the next tick.
        """
        transform = world.get(eid, Transform)
        self.cancel_move_to(world, eid)

        kin = world.find(eid, Kinematics)
        if kin is not None:
            kin.reset_linear()

        move = MoveTo(
            start_x=transform.x,
            start_y=transform.y,
            target_x=x,
            target_y=y,
            start_tick=self._clock.tick_number,
            duration=duration,
            easing=easing,
            handler=handler,
            callback=callback,
        )
        world.attach(eid, move)
        logger.debug(
            "entity %d move-to (%s, %s) -> (%s, %s) over %d ticks",
            eid, move.start_x, move.start_y, x, y, duration,
        )
        return move

    def cancel_move_to(self, world: World, eid: EntityId) -> bool:
        """Cancel a running move-to, notifying its handler. False if none ran."""
        move = world.find(eid, MoveTo)
        if move is None:
            return False
        handler = move.handler
        world.detach(eid, MoveTo)
        logger.debug("entity %d move-to cancelled", eid)
        self.emit(MotionEvent.MOVE_TO_CANCEL, eid)
        if handler is not None:
            handler.on_cancel(world, eid)
        return True

    def is_moving_to(self, world: World, eid: EntityId) -> bool:
        return world.has(eid, MoveTo)

    # --- Rotate-to ---

    def rotate_to(
        self,
        world: World,
        eid: EntityId,
        angle: float,
        duration: int,
        direction: RotateDirection = RotateDirection.AUTOMATIC,
        easing: str = "linear",
        handler: TweenHandler | None = None,
    ) -> RotateTo:
        """Interpolate rotation to ``angle`` over ``duration`` ticks.

        Cancels a running rotate-to first and clears angular kinematics.
        The current rotation is normalized into one turn before the
        direction is resolved.
        """
        transform = world.get(eid, Transform)
        self.cancel_rotate_to(world, eid)

        kin = world.find(eid, Kinematics)
        if kin is not None:
            kin.reset_angular()

        transform.rotation %= self._config.full_turn
        start = transform.rotation
        if direction is RotateDirection.AUTOMATIC:
            direction, start = resolve_direction(start, angle, self._config)

        rotate = RotateTo(
            start_angle=start,
            target_angle=angle,
            direction=direction,
            start_tick=self._clock.tick_number,
            duration=duration,
            easing=easing,
            handler=handler,
        )
        world.attach(eid, rotate)
        logger.debug(
            "entity %d rotate-to %s -> %s %s over %d ticks",
            eid, start, angle, direction.value, duration,
        )
        return rotate

    def cancel_rotate_to(self, world: World, eid: EntityId) -> bool:
        """Cancel a running rotate-to, notifying its handler. False if none ran."""
        rotate = world.find(eid, RotateTo)
        if rotate is None:
            return False
        handler = rotate.handler
        world.detach(eid, RotateTo)
        logger.debug("entity %d rotate-to cancelled", eid)
        self.emit(MotionEvent.ROTATE_TO_CANCEL, eid)
        if handler is not None:
            handler.on_cancel(world, eid)
        return True

    def is_rotating_to(self, world: World, eid: EntityId) -> bool:
        return world.has(eid, RotateTo)

    # --- Stop / release ---

    def stop(self, world: World, eid: EntityId) -> None:
        """Halt all motion. Running tweens are dropped without notification."""
        world.detach(eid, MoveTo)
        world.detach(eid, RotateTo)
        kin = world.find(eid, Kinematics)
        if kin is not None:
            kin.reset()
        logger.debug("entity %d stopped", eid)

    def release(self, world: World, eid: EntityId) -> None:
        """Drop every handler reference held by the entity's motion components."""
        for ctype in (Kinematics, MoveTo, RotateTo):
            component = world.find(eid, ctype)
            if component is not None:
                _release_component(world, eid, component)

    def install_release_hooks(self, world: World) -> None:
        """Release handler references whenever a motion component is detached."""
        for ctype in (Kinematics, MoveTo, RotateTo):
            world.on_detach(ctype, _release_component)


def _release_component(world: World, eid: EntityId, component: Any) -> None:
    if isinstance(component, Kinematics):
        component.terminal_handler = None
    elif isinstance(component, MoveTo):
        component.handler = None
        component.callback = None
    elif isinstance(component, RotateTo):
        component.handler = None
