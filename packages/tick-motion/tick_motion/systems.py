"""System factory for per-tick motion: tweens, then kinematic integration."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tick_motion.components import (
    Kinematics,
    MoveTo,
    RotateDirection,
    RotateTo,
    Transform,
)
from tick_motion.easing import ease
from tick_motion.events import MotionEvent
from tick_motion.handlers import Axis

if TYPE_CHECKING:
    from tick import EntityId, TickContext, World

    from tick_motion.manager import MotionManager

logger = logging.getLogger(__name__)


def crossed_limit(acceleration: float, rate: float, limit: float) -> bool:
    """True once ``rate`` has overshot ``limit`` in the direction of travel.

    Equality is not a crossing.
    """
    return (acceleration > 0 and rate > limit) or (acceleration < 0 and rate < limit)


def make_motion_system(
    manager: MotionManager,
) -> Callable[[World, TickContext], None]:
    """Return the per-tick motion system.

    Tick execution order, per entity:
    1. Advance an active move-to
    2. Advance an active rotate-to
    3. Axis accelerations -> speeds -> position
    4. Vector acceleration -> velocity -> position
    5. Angular acceleration -> angular velocity -> rotation

    A tween finishing on the same tick that kinematics are nonzero can
    apply both to position in that tick.
    """

    def motion_system(world: World, ctx: TickContext) -> None:
        for eid, (move, transform) in world.query(MoveTo, Transform):
            _advance_move_to(manager, world, ctx, eid, transform, move)

        for eid, (rotate, transform) in world.query(RotateTo, Transform):
            _advance_rotate_to(manager, world, ctx, eid, transform, rotate)

        for eid, (transform, kin) in world.query(Transform, Kinematics):
            _integrate_axes(manager, world, ctx.dt, eid, transform, kin)
            _integrate_vector(manager, world, ctx.dt, eid, transform, kin)
            _integrate_angular(manager, world, ctx.dt, eid, transform, kin)

    return motion_system


def _advance_move_to(
    manager: MotionManager,
    world: World,
    ctx: TickContext,
    eid: EntityId,
    transform: Transform,
    move: MoveTo,
) -> None:
    progress = move.progress(ctx.tick_number)
    if progress >= 1:
        transform.x = move.target_x
        transform.y = move.target_y
        handler, callback = move.handler, move.callback
        world.detach(eid, MoveTo)
        logger.debug("entity %d move-to complete at tick %d", eid, ctx.tick_number)
        if handler is not None:
            handler.on_complete(world, eid)
        if callback is not None:
            callback()
        manager.emit(MotionEvent.MOVE_TO_COMPLETE, eid)
        kin = world.find(eid, Kinematics)
        if kin is not None:
            kin.reset_linear()
        return

    factor = ease(move.easing, progress)
    transform.x = move.start_x + (move.target_x - move.start_x) * factor
    transform.y = move.start_y + (move.target_y - move.start_y) * factor


def _advance_rotate_to(
    manager: MotionManager,
    world: World,
    ctx: TickContext,
    eid: EntityId,
    transform: Transform,
    rotate: RotateTo,
) -> None:
    progress = rotate.progress(ctx.tick_number)
    if progress >= 1:
        transform.rotation = rotate.target_angle
        handler = rotate.handler
        world.detach(eid, RotateTo)
        logger.debug("entity %d rotate-to complete at tick %d", eid, ctx.tick_number)
        if handler is not None:
            handler.on_complete(world, eid)
        manager.emit(MotionEvent.ROTATE_TO_COMPLETE, eid)
        kin = world.find(eid, Kinematics)
        if kin is not None:
            kin.reset_angular()
        return

    factor = ease(rotate.easing, progress)
    start, target = rotate.start_angle, rotate.target_angle
    if rotate.direction is RotateDirection.CLOCKWISE:
        transform.rotation = start + (target - start) * factor
    else:
        transform.rotation = start - (start - target) * factor


def _integrate_axes(
    manager: MotionManager,
    world: World,
    dt: float,
    eid: EntityId,
    transform: Transform,
    kin: Kinematics,
) -> None:
    if kin.acceleration_x != 0:
        kin.speed_x += kin.acceleration_x * dt
        if kin.use_terminal_speed_x and crossed_limit(
            kin.acceleration_x, kin.speed_x, kin.terminal_speed_x
        ):
            kin.acceleration_x = 0.0
            kin.speed_x = kin.terminal_speed_x
            _terminal_speed_reached(manager, world, eid, kin, Axis.X)
    if kin.acceleration_y != 0:
        kin.speed_y += kin.acceleration_y * dt
        if kin.use_terminal_speed_y and crossed_limit(
            kin.acceleration_y, kin.speed_y, kin.terminal_speed_y
        ):
            kin.acceleration_y = 0.0
            kin.speed_y = kin.terminal_speed_y
            _terminal_speed_reached(manager, world, eid, kin, Axis.Y)
    if kin.speed_x != 0:
        transform.x += kin.speed_x * dt
    if kin.speed_y != 0:
        transform.y += kin.speed_y * dt


def _terminal_speed_reached(
    manager: MotionManager,
    world: World,
    eid: EntityId,
    kin: Kinematics,
    axis: Axis,
) -> None:
    logger.debug("entity %d reached terminal speed on %s", eid, axis.value)
    if kin.terminal_handler is not None:
        kin.terminal_handler.on_terminal_speed(world, eid, axis)
    if axis is Axis.X:
        manager.emit(MotionEvent.REACH_TERMINAL_SPEED_X, eid)
    else:
        manager.emit(MotionEvent.REACH_TERMINAL_SPEED_Y, eid)


def _integrate_vector(
    manager: MotionManager,
    world: World,
    dt: float,
    eid: EntityId,
    transform: Transform,
    kin: Kinematics,
) -> None:
    if kin.acceleration != 0:
        kin.velocity += kin.acceleration * dt
        if kin.use_terminal_velocity and crossed_limit(
            kin.acceleration, kin.velocity, kin.terminal_velocity
        ):
            kin.acceleration = 0.0
            kin.velocity = kin.terminal_velocity
            logger.debug("entity %d reached terminal velocity", eid)
            if kin.terminal_handler is not None:
                kin.terminal_handler.on_terminal_velocity(world, eid)
            manager.emit(MotionEvent.REACH_TERMINAL_VELOCITY, eid)
    if kin.velocity != 0:
        step = kin.velocity * dt
        transform.x += kin.velocity_x_factor * step
        transform.y += kin.velocity_y_factor * step


def _integrate_angular(
    manager: MotionManager,
    world: World,
    dt: float,
    eid: EntityId,
    transform: Transform,
    kin: Kinematics,
) -> None:
    if kin.angular_acceleration != 0:
        kin.angular_velocity += kin.angular_acceleration * dt
        if kin.use_terminal_angular_velocity and crossed_limit(
            kin.angular_acceleration,
            kin.angular_velocity,
            kin.terminal_angular_velocity,
        ):
            kin.angular_acceleration = 0.0
            kin.angular_velocity = kin.terminal_angular_velocity
            logger.debug("entity %d reached terminal angular velocity", eid)
            if kin.terminal_handler is not None:
                kin.terminal_handler.on_terminal_angular_velocity(world, eid)
            manager.emit(MotionEvent.REACH_TERMINAL_ANGULAR_VELOCITY, eid)
    if kin.angular_velocity != 0:
        transform.rotation += kin.angular_velocity * dt
