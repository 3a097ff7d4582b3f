"""Clock and TickContext: the tick source for the engine."""

from typing import Callable

from tick.types import TickContext


class Clock:
    """Monotonic tick counter plus the fraction of time each tick covers.

    The nominal fraction is ``1 / tps``. A caller driving the engine from
    real frame times may pass an explicit fraction to ``advance``.
    """

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._tick_fraction = self._dt
        self._elapsed = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        """Nominal tick fraction."""
        return self._dt

    @property
    def tick_fraction(self) -> float:
        """Fraction used by the most recent tick."""
        return self._tick_fraction

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> int:
        if dt is None:
            dt = self._dt
        elif dt <= 0:
            raise ValueError("tick fraction must be positive")
        self._tick_number += 1
        self._tick_fraction = dt
        self._elapsed += dt
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._tick_fraction,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._tick_fraction = self._dt
        self._elapsed = tick_number * self._dt
