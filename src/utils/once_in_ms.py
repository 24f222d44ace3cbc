"""
Timing utility for throttling execution in game loops
"""

from typing import Optional

from .clock import Clock, SystemClock


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    Use this to limit how often periodic work runs in the game loop,
    even though the loop itself runs every frame (e.g., 20ms).

    Example:
        # In __init__:
        self._status_monitor = OnceInMs(60000)  # Once per minute

        # In update loop (runs every 20ms):
        if self._status_monitor.should_execute():
            self._log_status()  # Only executes once per minute
    """

    def __init__(self, interval_ms: int, clock: Optional[Clock] = None):
        """
        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Time source (SystemClock when omitted)
        """
        self.interval_ms = interval_ms
        self.clock = clock or SystemClock()
        self.last_execution: Optional[float] = None

    def should_execute(self) -> bool:
        """
        Check if enough time has passed and update timer if so.

        The first call always returns True.
        """
        current = self.clock.now_ms()
        if self.last_execution is None or current - self.last_execution >= self.interval_ms:
            self.last_execution = current
            return True
        return False

    def reset(self) -> None:
        """Force next should_execute() call to return True"""
        self.last_execution = None

    def remaining_ms(self) -> float:
        """Milliseconds until next execution (negative if overdue, 0 before the first one)"""
        if self.last_execution is None:
            return 0.0
        return self.interval_ms - (self.clock.now_ms() - self.last_execution)
