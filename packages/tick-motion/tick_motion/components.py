"""Motion components: transform, kinematic state, and active tweens."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from tick_motion.handlers import TerminalHandler, TweenHandler


@dataclass
class Transform:
    """Position and rotation of an entity. Rotation is not normalized."""

    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0


@dataclass
class Kinematics:
    """Continuous motion state integrated by the motion system each tick.

    Two independent linear models add to position: axis-based
    (``speed_x``/``speed_y``) and vector-based (``velocity`` along
    ``velocity_angle``, measured from north so the x factor is ``sin`` and
    the y factor is ``cos``). Mixing them works but is hard to reason about.

    Terminal setters enable their limit; the ``stop_using_*`` methods
    disable it without clearing the stored value.
    """

    acceleration_x: float = 0.0
    acceleration_y: float = 0.0
    speed_x: float = 0.0
    speed_y: float = 0.0
    terminal_speed_x: float = 0.0
    terminal_speed_y: float = 0.0
    use_terminal_speed_x: bool = False
    use_terminal_speed_y: bool = False

    acceleration: float = 0.0
    velocity: float = 0.0
    velocity_angle: float = 0.0
    velocity_x_factor: float = 0.0
    velocity_y_factor: float = 1.0
    terminal_velocity: float = 0.0
    use_terminal_velocity: bool = False

    angular_velocity: float = 0.0
    angular_acceleration: float = 0.0
    terminal_angular_velocity: float = 0.0
    use_terminal_angular_velocity: bool = False

    terminal_handler: TerminalHandler | None = field(
        default=None, repr=False, compare=False
    )

    # --- Axis-based ---

    def set_speed_x(self, speed: float) -> None:
        self.speed_x = speed

    def set_speed_y(self, speed: float) -> None:
        self.speed_y = speed

    def set_speed(self, x: float, y: float) -> None:
        self.speed_x = x
        self.speed_y = y

    def accelerate_x(
        self, acceleration: float, terminal_speed: float | None = None
    ) -> None:
        self.acceleration_x = acceleration
        if terminal_speed is not None:
            self.set_terminal_speed_x(terminal_speed)

    def accelerate_y(
        self, acceleration: float, terminal_speed: float | None = None
    ) -> None:
        self.acceleration_y = acceleration
        if terminal_speed is not None:
            self.set_terminal_speed_y(terminal_speed)

    def set_terminal_speed_x(self, terminal_speed: float) -> None:
        self.terminal_speed_x = terminal_speed
        self.use_terminal_speed_x = True

    def set_terminal_speed_y(self, terminal_speed: float) -> None:
        self.terminal_speed_y = terminal_speed
        self.use_terminal_speed_y = True

    def set_terminal_speed(self, x: float, y: float) -> None:
        self.set_terminal_speed_x(x)
        self.set_terminal_speed_y(y)

    def stop_using_terminal_speed_x(self) -> None:
        self.use_terminal_speed_x = False

    def stop_using_terminal_speed_y(self) -> None:
        self.use_terminal_speed_y = False

    def stop_using_terminal_speed(self) -> None:
        self.use_terminal_speed_x = False
        self.use_terminal_speed_y = False

    # --- Vector-based ---

    def set_velocity_angle(self, angle: float) -> None:
        self.velocity_angle = angle
        self.velocity_x_factor = math.sin(angle)
        self.velocity_y_factor = math.cos(angle)

    def set_velocity(self, velocity: float, angle: float | None = None) -> None:
        """Set velocity magnitude, optionally changing its direction."""
        self.velocity = velocity
        if angle is not None:
            self.set_velocity_angle(angle)

    def accelerate(
        self,
        acceleration: float,
        angle: float,
        terminal_velocity: float | None = None,
    ) -> None:
        self.acceleration = acceleration
        self.set_velocity_angle(angle)
        if terminal_velocity is not None:
            self.set_terminal_velocity(terminal_velocity)

    def set_terminal_velocity(self, terminal_velocity: float) -> None:
        self.terminal_velocity = terminal_velocity
        self.use_terminal_velocity = True

    def stop_using_terminal_velocity(self) -> None:
        self.use_terminal_velocity = False

    # --- Angular ---

    def set_angular_velocity(self, angular_velocity: float) -> None:
        self.angular_velocity = angular_velocity

    def set_angular_acceleration(
        self,
        angular_acceleration: float,
        terminal_angular_velocity: float | None = None,
    ) -> None:
        self.angular_acceleration = angular_acceleration
        if terminal_angular_velocity is not None:
            self.set_terminal_angular_velocity(terminal_angular_velocity)

    def set_terminal_angular_velocity(self, terminal_angular_velocity: float) -> None:
        self.terminal_angular_velocity = terminal_angular_velocity
        self.use_terminal_angular_velocity = True

    def stop_using_terminal_angular_velocity(self) -> None:
        self.use_terminal_angular_velocity = False

    # --- Queries ---

    @property
    def is_moving(self) -> bool:
        return any(
            (
                self.acceleration_x,
                self.acceleration_y,
                self.speed_x,
                self.speed_y,
                self.acceleration,
                self.velocity,
                self.angular_acceleration,
                self.angular_velocity,
            )
        )

    # --- Resets ---

    def reset_linear(self) -> None:
        """Zero linear accumulators, rates, direction and terminal values."""
        self.acceleration_x = 0.0
        self.acceleration_y = 0.0
        self.speed_x = 0.0
        self.speed_y = 0.0
        self.terminal_speed_x = 0.0
        self.terminal_speed_y = 0.0
        self.acceleration = 0.0
        self.velocity = 0.0
        self.terminal_velocity = 0.0
        self.set_velocity_angle(0.0)

    def reset_angular(self) -> None:
        self.angular_velocity = 0.0
        self.angular_acceleration = 0.0
        self.terminal_angular_velocity = 0.0

    def reset(self) -> None:
        # Enable flags survive; only values are cleared.
        self.reset_linear()
        self.reset_angular()


class RotateDirection(Enum):
    """Sweep direction for rotate-to. AUTOMATIC is resolved when started."""

    AUTOMATIC = "automatic"
    CLOCKWISE = "clockwise"
    ANTI_CLOCKWISE = "anti_clockwise"


@dataclass
class MoveTo:
    """Active move-to tween. Attached while running, detached when done."""

    start_x: float
    start_y: float
    target_x: float
    target_y: float
    start_tick: int
    duration: int
    easing: str = "linear"
    handler: TweenHandler | None = field(default=None, repr=False, compare=False)
    callback: Callable[[], None] | None = field(
        default=None, repr=False, compare=False
    )

    def progress(self, now: int) -> float:
        if self.duration <= 0:
            return 1.0
        return (now - self.start_tick) / self.duration


@dataclass
class RotateTo:
    """Active rotate-to tween. ``direction`` is never AUTOMATIC once stored."""

    start_angle: float
    target_angle: float
    direction: RotateDirection
    start_tick: int
    duration: int
    easing: str = "linear"
    handler: TweenHandler | None = field(default=None, repr=False, compare=False)

    def progress(self, now: int) -> float:
        if self.duration <= 0:
            return 1.0
        return (now - self.start_tick) / self.duration
