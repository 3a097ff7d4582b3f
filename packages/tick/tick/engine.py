"""Engine - core loop, pacing, and lifecycle hooks."""

import time
from typing import Callable

from tick.clock import Clock
from tick.types import System, TickContext
from tick.world import World


class Engine:
    def __init__(self, tps: int = 20) -> None:
        self._clock = Clock(tps)
        self._world = World()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[World, TickContext], None]] = []
        self._stop_hooks: list[Callable[[World, TickContext], None]] = []
        self._stop_requested: bool = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[World, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[World, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float | None = None) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Callable[[World, TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._world, ctx)

    def step(self, dt: float | None = None) -> None:
        """Run a single tick. ``dt`` overrides the nominal tick fraction."""
        self._stop_requested = False
        self._tick(dt)

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        self._fire(self._stop_hooks)

    def run_forever(self) -> None:
        """Run in real time, feeding measured frame times as tick fractions."""
        self._stop_requested = False
        self._fire(self._start_hooks)

        dt = self._clock.dt
        last = time.monotonic()
        while not self._stop_requested:
            now = time.monotonic()
            self._tick(max(now - last, dt))
            last = now
            if self._stop_requested:
                break
            sleep_time = dt - (time.monotonic() - now)
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._fire(self._stop_hooks)
