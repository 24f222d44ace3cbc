"""
Playback scheduler - cancellable sequence of delayed actions driven by the game loop
"""

from typing import Callable, List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from utils.clock import Clock


class PlaybackScheduler:
    """
    Runs a list of actions one after another with a fixed delay between them.

    Non-blocking: nothing happens until update() is called from the game
    loop. The first action fires on the first update() after schedule(),
    every following action fires delay_ms after the previous one actually
    fired, and the schedule finishes delay_ms after the last action.

    At most one action fires per update(), so a stalled frame delays the
    remaining steps instead of firing them back to back.

    Example:
        scheduler = PlaybackScheduler(clock, logger)
        scheduler.schedule([lambda: bank.play(0), lambda: bank.play(1)], delay_ms=1000)
        while not scheduler.is_finished():
            scheduler.update()
    """

    def __init__(self, clock: 'Clock', logger):
        """
        Args:
            clock: Time source (ManualClock in tests)
            logger: ClassLogger instance for logging
        """
        self.clock = clock
        self.logger = logger
        self._actions: List[Callable[[], None]] = []
        self._next_index = 0
        self._delay_ms = 0.0
        self._next_due_ms: Optional[float] = None
        self._active = False
        self._finished = False

    def schedule(self, actions: Sequence[Callable[[], None]], delay_ms: float) -> None:
        """
        Replace any current schedule with a new one.

        Args:
            actions: Callables to run in order
            delay_ms: Delay between consecutive actions, and after the last one
        """
        if delay_ms <= 0:
            raise ValueError(f"Delay must be positive, got {delay_ms}")
        if self._active:
            self.logger.warning(f"Replacing active schedule with {self.pending_count()} pending steps")

        self._actions = list(actions)
        self._next_index = 0
        self._delay_ms = float(delay_ms)
        self._next_due_ms = self.clock.now_ms()
        self._active = True
        self._finished = False
        self.logger.debug(f"Scheduled {len(self._actions)} steps, {delay_ms}ms apart")

    def update(self) -> bool:
        """
        Fire the next action or finish the schedule if it is due.

        Returns:
            True if an action fired or the schedule finished on this call
        """
        if not self._active:
            return False

        now_ms = self.clock.now_ms()
        if now_ms < self._next_due_ms:
            return False

        if self._next_index < len(self._actions):
            action = self._actions[self._next_index]
            self._next_index += 1
            self._next_due_ms = now_ms + self._delay_ms
            action()
            return True

        self._active = False
        self._finished = True
        self._actions = []
        self.logger.debug("Schedule finished")
        return True

    def cancel(self) -> None:
        """Drop all pending steps; the schedule will never report finished"""
        if self._active:
            self.logger.debug(f"Schedule cancelled with {self.pending_count()} pending steps")
        self._actions = []
        self._next_index = 0
        self._next_due_ms = None
        self._active = False
        self._finished = False

    def is_active(self) -> bool:
        return self._active

    def is_finished(self) -> bool:
        """True once every step ran and the final delay elapsed"""
        return self._finished

    def pending_count(self) -> int:
        """Steps that have not fired yet"""
        return len(self._actions) - self._next_index if self._active else 0
