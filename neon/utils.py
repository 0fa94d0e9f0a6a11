"""A pausable timer and a thread-safe console progress bar."""

from __future__ import annotations

import sys
import threading
import time
from typing import Callable, Optional, TextIO

_UNITS = {"ns": 1e9, "us": 1e6, "ms": 1e3, "s": 1.0}


class Timer:
    """A stopwatch that can be started, paused, resumed and reset."""

    def __init__(self, start: bool = False, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._started = False
        self._paused = False
        self._reference = clock()
        self._accumulated = 0.0
        if start:
            self.start()

    def start(self) -> None:
        """Start the timer, or resume it when paused."""
        if not self._started:
            self._started = True
            self._paused = False
            self._accumulated = 0.0
            self._reference = self._clock()
        elif self._paused:
            self._reference = self._clock()
            self._paused = False

    def stop(self) -> None:
        """Pause the timer, keeping the time elapsed so far."""
        if self._started and not self._paused:
            self._accumulated += self._clock() - self._reference
            self._paused = True

    def reset(self) -> None:
        """Return the timer to its unstarted state."""
        if self._started:
            self._started = False
            self._paused = False
            self._reference = self._clock()
            self._accumulated = 0.0

    def count(self, unit: str = "ms") -> int:
        """Elapsed time in whole ``unit`` (ns, us, ms or s), truncated."""
        try:
            factor = _UNITS[unit]
        except KeyError:
            raise ValueError(f"unknown time unit: {unit!r}") from None
        if not self._started:
            return 0
        seconds = self._accumulated
        if not self._paused:
            seconds += self._clock() - self._reference
        return int(seconds * factor)


class Progressbar:
    """A text progress bar that several threads may advance at once."""

    _display_lock = threading.Lock()
    complete_char = "="
    incomplete_char = " "

    def __init__(
        self,
        total: int,
        width: int = 60,
        stream: Optional[TextIO] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.total = total
        self.width = width
        self._stream = stream
        self._ticks = 0
        self._lock = threading.Lock()
        self._timer = Timer(clock=clock)

    @property
    def ticks(self) -> int:
        return self._ticks

    def increment(self) -> int:
        """Add one tick and return the count before it."""
        with self._lock:
            previous = self._ticks
            self._ticks += 1
            return previous

    def increase(self, t: int) -> int:
        """Add ``t`` ticks and return the new count."""
        with self._lock:
            self._ticks += t
            return self._ticks

    def render_line(self) -> str:
        """The bar, percentage and elapsed seconds as one line."""
        progress = self._ticks / self.total if self.total else 1.0
        pos = int(self.width * progress)
        bar = "".join(
            self.complete_char if i < pos else ">" if i == pos else self.incomplete_char
            for i in range(self.width)
        )
        seconds = self._timer.count("ms") / 1000.0
        return f"[{bar}] {int(progress * 100.0)}% {seconds:g}s"

    def display(self) -> None:
        """Redraw the bar in place on the output stream."""
        stream = self._stream or sys.stdout
        with self._display_lock:
            stream.write(self.render_line() + "\r")
            stream.flush()

    def end(self) -> None:
        """Draw the bar one last time and move to a new line."""
        self.display()
        stream = self._stream or sys.stdout
        stream.write("\n")
        stream.flush()

    def reset(self) -> None:
        """Clear the ticks and the timer."""
        with self._lock:
            self._ticks = 0
        self._timer.reset()

    def start(self) -> None:
        """Start timing."""
        self._timer.start()