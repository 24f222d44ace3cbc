"""
Game system configuration
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_SOUND_FILES = ["explosion.mp3", "fart.mp3"]


@dataclass
class GameConfig:
    """Main game system configuration"""

    # Audio configuration
    sound_files: List[str] = field(default_factory=lambda: list(DEFAULT_SOUND_FILES))
    sounds_folder: str = "sounds"

    # Timing configuration
    step_delay_ms: int = 1000       # Between playback steps, measured from play-issue time
    frame_duration_ms: int = 20     # Game loop frame (50 FPS)
    status_log_interval_ms: int = 60000

    # Game rules
    auto_restart: bool = False      # Start a new game right after game over
    seed: Optional[int] = None      # Fixed RNG seed for reproducible sequences

    # Input configuration
    start_key: str = "s"

    @property
    def sound_count(self) -> int:
        """Number of sound buttons (N)"""
        return len(self.sound_files)

    @property
    def sound_paths(self) -> List[str]:
        """Sound file paths resolved against sounds_folder"""
        return [os.path.join(self.sounds_folder, name) for name in self.sound_files]

    @property
    def start_button_index(self) -> int:
        """The start button sits right after the sound buttons"""
        return self.sound_count

    @property
    def target_fps(self) -> float:
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if len(self.sound_files) < 2:
            raise ValueError(f"At least 2 sounds must be configured, got {len(self.sound_files)}")

        # Keyboard input maps sound buttons to digit keys 0-9
        if len(self.sound_files) > 10:
            raise ValueError(f"At most 10 sounds are supported, got {len(self.sound_files)}")

        if len(set(self.sound_files)) != len(self.sound_files):
            raise ValueError(f"Duplicate sound files configured: {self.sound_files}")

        if self.step_delay_ms <= 0:
            raise ValueError(f"Step delay must be positive, got {self.step_delay_ms}")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        if self.status_log_interval_ms <= 0:
            raise ValueError("Status log interval must be positive")

        if len(self.start_key) != 1 or self.start_key.isdigit():
            raise ValueError(f"Start key must be a single non-digit character, got '{self.start_key}'")
