"""Engine - frame loop, pacing, and lifecycle hooks."""

import time
from typing import Callable

from tilt.clock import Clock
from tilt.context import SimulationContext
from tilt.types import System, TickContext

Hook = Callable[[SimulationContext, TickContext], None]


class Engine:
    def __init__(self, context: SimulationContext, fps: int = 60) -> None:
        self._clock = Clock(fps)
        self._context = context
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

    @property
    def context(self) -> SimulationContext:
        return self._context

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float | None = None) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._context, ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Hook]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._context, ctx)

    def step(self, dt: float | None = None) -> None:
        """Run one frame without hooks.

        ``dt`` is the measured frame duration in seconds. Hosts that pace
        themselves pass it so time-based systems follow the wall clock.
        """
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
        self._stop_requested = False
        self._fire(self._start_hooks)

        target = self._clock.nominal_dt
        frame_dt: float | None = None
        while not self._stop_requested:
            start = time.monotonic()
            self._tick(frame_dt)
            if self._stop_requested:
                break
            sleep_time = target - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)
            frame_dt = time.monotonic() - start

        self._fire(self._stop_hooks)
