"""A restartable stopwatch measuring seconds."""

from __future__ import annotations

from time import perf_counter


class Clock:
    """Measures the time elapsed since creation or the last restart."""

    def __init__(self) -> None:
        self._last = perf_counter()

    def restart(self) -> float:
        """Reset the clock and return the seconds elapsed before the reset."""
        now = perf_counter()
        elapsed = now - self._last
        self._last = now
        return elapsed

    def elapsed(self) -> float:
        """Seconds elapsed since creation or the last restart."""
        return perf_counter() - self._last