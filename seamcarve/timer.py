"""A simple stopwatch for measuring elapsed time in seconds."""

from __future__ import annotations

import time


class Timer:
    """Stopwatch that starts on creation; ``stop`` returns elapsed seconds."""

    def __init__(self) -> None:
        self.running = False
        self._last = 0
        self.start()

    def start(self) -> None:
        """Start (or restart) timing from now."""
        self.running = True
        self._last = time.perf_counter_ns()

    def stop(self) -> float:
        """Stop timing and return seconds since the last start, to the microsecond."""
        self.running = False
        micros = (time.perf_counter_ns() - self._last) // 1000
        return micros / 1_000_000.0