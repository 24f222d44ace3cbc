"""
Sequence game engine - owns the game state and drives generate → playback → input → verify
"""

import random
from typing import List, Optional, TYPE_CHECKING

from audio_system.errors import validate_index
from utils.clock import Clock, SystemClock

from .models import GameSnapshot, GameState, GameOverReport, Phase
from .scheduler import PlaybackScheduler
from .states import IdleState, PhaseState

if TYPE_CHECKING:
    from audio_system.interfaces import ISoundPlayer
    from game_system.config import GameConfig
    from game_system.interfaces import IGameListener
    from utils.hybrid_logger import ClassLogger


class SequenceGameEngine:
    """
    Simon-says game engine.

    Single writer of GameState. Everything runs on the caller's thread:
    start() and tap() are the player's intents, update() must be called
    every frame to advance playback. Listeners get immutable snapshots.

    Example:
        engine = SequenceGameEngine(sound_bank, logger)
        engine.add_listener(view)
        engine.start()
        while running:
            engine.update()
    """

    def __init__(self,
                 sound_player: 'ISoundPlayer',
                 logger: 'ClassLogger',
                 clock: Optional[Clock] = None,
                 step_delay_ms: int = 1000,
                 rng: Optional[random.Random] = None,
                 auto_restart: bool = False,
                 scheduler_logger: Optional['ClassLogger'] = None):
        """
        Args:
            sound_player: Playback capability (SoundBank or MockSoundBank)
            logger: ClassLogger instance for logging
            clock: Time source for playback (SystemClock when omitted)
            step_delay_ms: Delay between played sounds
            rng: Random source for new sequence symbols
            auto_restart: Start a new game right after game over
            scheduler_logger: Separate logger for the playback scheduler
        """
        self.sound_player = sound_player
        self.sound_count = sound_player.get_sound_count()
        if self.sound_count < 2:
            raise ValueError(f"At least 2 sounds are required, got {self.sound_count}")

        self.logger = logger
        self.clock = clock or SystemClock()
        self.step_delay_ms = step_delay_ms
        self.rng = rng or random.Random()
        self.auto_restart = auto_restart
        self.scheduler = PlaybackScheduler(self.clock, scheduler_logger or logger)

        self.game = GameState()
        self._listeners: List['IGameListener'] = []
        self._released = False

        self.current_state: PhaseState = IdleState(self)
        self.current_state.on_enter()

        self.logger.info(f"SequenceGameEngine initialized: {self.sound_count} sounds, {step_delay_ms}ms step delay")

    @classmethod
    def from_config(cls, config: 'GameConfig', sound_player: 'ISoundPlayer', logger: 'ClassLogger',
                    clock: Optional[Clock] = None,
                    scheduler_logger: Optional['ClassLogger'] = None) -> 'SequenceGameEngine':
        return cls(
            sound_player,
            logger,
            clock=clock,
            step_delay_ms=config.step_delay_ms,
            rng=random.Random(config.seed),
            auto_restart=config.auto_restart,
            scheduler_logger=scheduler_logger,
        )

    # Player intents

    def start(self) -> bool:
        """
        Start a new game (also restarts after game over or mid-input).

        Ignored during playback. Refused while sounds are not ready, in which
        case listeners get on_not_ready().

        Returns:
            True if a new game started
        """
        if self._released:
            self.logger.debug("start() after release ignored")
            return False

        new_state = self.current_state.handle_start()
        if new_state:
            self._transition_to_state(new_state)
            return True
        return False

    def tap(self, index: int) -> None:
        """
        Player pressed sound button `index`.

        Raises:
            InvalidIndexError: If index is outside [0, sound_count)
        """
        validate_index(index, self.sound_count)
        if self._released:
            self.logger.debug(f"Tap {index} after release ignored")
            return

        new_state = self.current_state.handle_tap(index)
        if new_state:
            self._transition_to_state(new_state)

    def update(self) -> None:
        """Advance playback and time-based transitions (call once per frame)"""
        if self._released:
            return

        self.scheduler.update()
        new_state = self.current_state.update()
        if new_state:
            self._transition_to_state(new_state)

    def release(self) -> None:
        """Cancel pending playback and stop reacting to anything (idempotent)"""
        if self._released:
            return
        self._released = True
        self.scheduler.cancel()
        self._listeners.clear()
        self.logger.info("SequenceGameEngine released")

    # Read side

    @property
    def phase(self) -> Phase:
        return self.game.phase

    @property
    def is_released(self) -> bool:
        return self._released

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.of(self.game)

    def add_listener(self, listener: 'IGameListener') -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: 'IGameListener') -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # Helpers used by the phase states

    def extend_sequence(self) -> int:
        """Append one uniformly random sound index to the sequence"""
        index = self.rng.randrange(self.sound_count)
        self.game.sequence.append(index)
        self.logger.debug(f"Sequence extended to length {len(self.game.sequence)}")
        return index

    def play_sound(self, index: int) -> None:
        """Fire-and-forget playback; failures go to listeners and never change state"""
        result = self.sound_player.play(index)
        if not result.success:
            for listener in list(self._listeners):
                listener.on_playback_error(result)

    def notify_not_ready(self) -> None:
        error = self.sound_player.get_load_error()
        for listener in list(self._listeners):
            listener.on_not_ready(error)

    def notify_score_changed(self) -> None:
        for listener in list(self._listeners):
            listener.on_score_changed(self.game.score)

    def notify_game_over(self, report: GameOverReport) -> None:
        for listener in list(self._listeners):
            listener.on_game_over(report)

    def _transition_to_state(self, new_state: PhaseState) -> None:
        """
        Exit the current state, switch, publish the new phase, enter the new state.

        The phase is published before on_enter so the UI disables input
        before the first playback sound.
        """
        self.current_state.on_exit()

        old_state_name = self.current_state.__class__.__name__
        new_state_name = new_state.__class__.__name__
        self.logger.info(f"State transition: {old_state_name} → {new_state_name}")

        self.current_state = new_state
        self.game.phase = new_state.phase

        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener.on_phase_changed(snapshot)

        self.current_state.on_enter()

    def get_current_state_name(self) -> str:
        return self.current_state.__class__.__name__
