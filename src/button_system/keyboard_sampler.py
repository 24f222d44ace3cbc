"""
Terminal keyboard sampler - plays the game from a terminal without button hardware
"""

import sys
import select
import termios
import tty
from typing import List, Set

from .interfaces import IButtonSampler

QUIT_KEYS = ('q', 'Q', '\x03')  # '\x03' is Ctrl+C in raw mode


class KeyboardSampler(IButtonSampler):
    """
    Keyboard sampler reporting key presses as events.

    Digit keys 0..sound_count-1 are the sound buttons and start_key is the
    start button (button index sound_count). A terminal has no "held" key,
    so every key press is its own press event (drain_presses), even when the
    same key is typed twice in one frame or on consecutive frames.
    read_button() only shows which keys were typed during the last frame.

    Works over SSH using stdin in raw mode (non-blocking select).
    Press 'q' or Ctrl+C to quit: sample() raises KeyboardInterrupt, which
    the game loop handles as a normal shutdown.
    """

    def __init__(self,
                 sound_count: int,
                 start_key: str,
                 logger):
        """
        Args:
            sound_count: Number of sound buttons (max 10 for digit keys 0-9)
            start_key: Key acting as the start button
            logger: ClassLogger instance for logging
        """
        if sound_count > 10:
            raise ValueError("KeyboardSampler supports max 10 sound buttons (digit keys 0-9)")

        self._sound_count = sound_count
        self._start_key = start_key.lower()
        self._logger = logger
        self._pressed: Set[int] = set()
        self._presses: List[int] = []

        self._original_terminal_settings = None
        self._raw_mode_enabled = False

    def get_button_count(self) -> int:
        """Sound buttons plus the start button"""
        return self._sound_count + 1

    def setup(self) -> None:
        """Switch the terminal to raw mode for immediate key capture"""
        if not sys.stdin.isatty():
            self._logger.error("❌ Keyboard input not available (stdin is not a TTY)")
            raise RuntimeError("Keyboard input not available")

        try:
            self._original_terminal_settings = termios.tcgetattr(sys.stdin)
            tty.setraw(sys.stdin.fileno())
            self._raw_mode_enabled = True
        except termios.error as e:
            self._logger.error(f"❌ Could not enable raw terminal mode: {e}")
            raise RuntimeError("Failed to enable raw terminal mode") from e

        self._logger.info("🎮 Keyboard sampler initialized")
        self._logger.info(f"   Keys 0-{self._sound_count - 1} play sounds, '{self._start_key}' starts a game, 'q' quits")

    def sample(self) -> None:
        """Drain pending key presses into this frame's press events"""
        self._pressed = set()
        self._presses = []
        if not self._raw_mode_enabled:
            return

        while select.select([sys.stdin], [], [], 0) == ([sys.stdin], [], []):
            key = sys.stdin.read(1)

            if key in QUIT_KEYS:
                self._logger.info("Keyboard: quit key pressed")
                raise KeyboardInterrupt

            if key.lower() == self._start_key:
                self._presses.append(self._sound_count)
            elif key.isdigit() and int(key) < self._sound_count:
                self._presses.append(int(key))
            else:
                self._logger.debug(f"Keyboard: unmapped key {key!r}")

        self._pressed = set(self._presses)

    def drain_presses(self) -> List[int]:
        """Every key press of the last sample(), repeats included, in typing order"""
        presses, self._presses = self._presses, []
        return presses

    def read_button(self, button_index: int) -> bool:
        return button_index in self._pressed

    def cleanup(self) -> None:
        """Restore terminal settings"""
        if self._raw_mode_enabled and self._original_terminal_settings:
            termios.tcsetattr(
                sys.stdin.fileno(),
                termios.TCSADRAIN,
                self._original_terminal_settings
            )
            self._raw_mode_enabled = False
            self._logger.info("Keyboard sampler cleaned up")
        self._pressed = set()
