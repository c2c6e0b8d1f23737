"""Wall-clock timer and frame timestep."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures time since creation or the last :meth:`reset`."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()

    def reset(self) -> None:
        self._start = self._clock()

    def elapsed(self) -> float:
        """Seconds since the start point."""
        return self._clock() - self._start

    def elapsed_millis(self) -> float:
        """Milliseconds since the start point."""
        return self.elapsed() * 1000.0


class Timestep(float):
    """A duration in seconds that behaves as a float."""

    def __new__(cls, time_seconds: float = 0.0) -> "Timestep":
        return super().__new__(cls, time_seconds)

    def seconds(self) -> float:
        return float(self)

    def milliseconds(self) -> float:
        return float(self) * 1000.0

    def __repr__(self) -> str:
        return f"Timestep({float(self)!r})"