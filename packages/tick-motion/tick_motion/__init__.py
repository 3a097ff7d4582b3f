"""tick-motion - Kinematics and move-to / rotate-to tweens for the tick engine."""
from __future__ import annotations

from tick_motion.components import (
    Kinematics,
    MoveTo,
    RotateDirection,
    RotateTo,
    Transform,
)
from tick_motion.config import MotionConfig
from tick_motion.easing import EASINGS, UnknownEasingError, ease
from tick_motion.events import MotionEvent, MotionEvents
from tick_motion.handlers import Axis, CallbackHandler, TerminalHandler, TweenHandler
from tick_motion.manager import MotionManager, resolve_direction
from tick_motion.systems import crossed_limit, make_motion_system

__all__ = [
    "Axis",
    "CallbackHandler",
    "EASINGS",
    "Kinematics",
    "MotionConfig",
    "MotionEvent",
    "MotionEvents",
    "MotionManager",
    "MoveTo",
    "RotateDirection",
    "RotateTo",
    "TerminalHandler",
    "Transform",
    "TweenHandler",
    "UnknownEasingError",
    "crossed_limit",
    "ease",
    "make_motion_system",
    "resolve_direction",
]
