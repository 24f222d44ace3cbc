"""
Main game manager - owns the sound bank, reads buttons and drives the engine every frame
"""

import time
from typing import Optional, TYPE_CHECKING

from utils import OnceInMs

if TYPE_CHECKING:
    from audio_system.interfaces import ISoundBank
    from button_system.interfaces import IButtonReader
    from game_system.engine import SequenceGameEngine
    from utils import ClassLogger, Clock


class GameManager:
    """
    Hosts the memory game, like a screen hosting its widgets.

    Responsibilities:
    - Start loading the sound bank and report the outcome once
    - Map button presses to player intents (sound buttons → tap, start button → start)
    - Advance the engine every frame with consistent frame timing
    - Release engine, sounds and input exactly once on stop()
    """

    def __init__(self,
                 button_reader: 'IButtonReader',
                 sound_bank: 'ISoundBank',
                 engine: 'SequenceGameEngine',
                 logger: 'ClassLogger',
                 start_button_index: Optional[int] = None,
                 frame_duration_ms: int = 20,
                 status_log_interval_ms: int = 60000,
                 clock: Optional['Clock'] = None):
        """
        Args:
            button_reader: Interface for reading button states
            sound_bank: Sound bank owned by this manager (released on stop)
            engine: Game engine playing through sound_bank
            logger: Logger for debugging and monitoring
            start_button_index: Button that starts a game (defaults to the one after the sound buttons)
            frame_duration_ms: Target frame duration in milliseconds
            status_log_interval_ms: How often to log the game status
            clock: Time source for status logging
        """
        self.button_reader = button_reader
        self.sound_bank = sound_bank
        self.engine = engine
        self.logger = logger
        self.start_button_index = (
            start_button_index if start_button_index is not None else sound_bank.get_sound_count()
        )
        self.target_frame_duration = frame_duration_ms / 1000.0
        self.running = True
        self._stopped = False

        self._status_monitor = OnceInMs(status_log_interval_ms, clock)
        self._load_reported = False
        self._load_future = self.sound_bank.load()

        self.logger.info(f"GameManager initialized: {frame_duration_ms}ms frame duration, "
                         f"{sound_bank.get_sound_count()} sound buttons, start button {self.start_button_index}")

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Call this from your main() function for automatic frame management.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration * 1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.monotonic()

                self.update()

                frame_duration = time.monotonic() - frame_start
                sleep_time = self.target_frame_duration - frame_duration

                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user")
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """
        One frame: sound loading status → button intents → engine update.
        """
        self._check_sound_loading()

        if self._status_monitor.should_execute():
            self.logger.info(f"Status: {self.engine.snapshot()}, sounds ready={self.sound_bank.is_ready()}")

        button_state = self.button_reader.read_buttons()
        for index in button_state.presses:
            if index == self.start_button_index:
                self.engine.start()
            elif index < self.sound_bank.get_sound_count():
                self.engine.tap(index)

        self.engine.update()

    def _check_sound_loading(self) -> None:
        """Log the sound bank's load outcome once, when it becomes known"""
        if self._load_reported or not self._load_future.done():
            return
        self._load_reported = True

        if self._load_future.cancelled():
            self.logger.warning("Sound loading was cancelled")
        elif self._load_future.result():
            self.logger.info("✅ Sounds ready - press start to play")
        else:
            error = self.sound_bank.get_load_error()
            self.logger.error(f"Sounds not available, game cannot start: {error}")

    def stop(self) -> None:
        """Stop the game and release everything (idempotent)"""
        self.running = False
        if self._stopped:
            return
        self._stopped = True

        self.engine.release()
        self.sound_bank.release()
        self.button_reader.cleanup()

        self.logger.info("Game stopped")

    def get_current_state_name(self) -> str:
        return self.engine.get_current_state_name()
