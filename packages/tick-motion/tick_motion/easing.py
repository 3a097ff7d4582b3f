"""Easing functions for move-to and rotate-to interpolation.

Every function maps progress in [0, 1] to an eased factor with
f(0) == 0 and f(1) == 1.
"""
from __future__ import annotations

from typing import Callable


class UnknownEasingError(KeyError):
    """Raised when a tween names an easing kind missing from EASINGS."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unknown easing kind {kind!r}")


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def smooth(t: float) -> float:
    return t * t * (3 - 2 * t)


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "smooth": smooth,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
}


def ease(kind: str, t: float) -> float:
    """Apply the easing named ``kind`` to progress ``t``."""
    try:
        fn = EASINGS[kind]
    except KeyError:
        raise UnknownEasingError(kind) from None
    return fn(t)
