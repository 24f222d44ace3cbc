"""
Time sources for the game loop and playback scheduling
"""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Abstract monotonic time source, in seconds"""

    @abstractmethod
    def now(self) -> float:
        """Current time in seconds"""
        pass

    def now_ms(self) -> float:
        """Current time in milliseconds"""
        return self.now() * 1000.0


class SystemClock(Clock):
    """Wall clock backed by time.monotonic()"""

    def now(self) -> float:
        return time.monotonic()


class ManualClock(Clock):
    """
    Virtual clock that only moves when told to.

    Lets playback schedules run without real delays:

        clock = ManualClock()
        scheduler = PlaybackScheduler(clock, logger)
        clock.advance_ms(1000)
        scheduler.update()
    """

    def __init__(self, start: float = 0.0):
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError(f"Cannot move a clock backwards ({seconds}s)")
        self._now += seconds

    def advance_ms(self, milliseconds: float) -> None:
        self.advance(milliseconds / 1000.0)
