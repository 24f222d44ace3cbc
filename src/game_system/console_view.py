"""
Console presentation of the memory game
"""

from typing import Optional, TYPE_CHECKING

from .interfaces import IGameListener
from .models import Phase

if TYPE_CHECKING:
    from audio_system.errors import AssetLoadError, PlayResult
    from game_system.models import GameOverReport, GameSnapshot


class ConsoleGameView(IGameListener):
    """Writes player-facing game messages to the log"""

    def __init__(self, logger):
        self.logger = logger
        self.last_snapshot: Optional['GameSnapshot'] = None
        self.score = 0

    def on_phase_changed(self, snapshot: 'GameSnapshot') -> None:
        self.last_snapshot = snapshot
        if snapshot.phase is Phase.PLAYING:
            self.logger.info(f"🔊 Listen... ({snapshot.sequence_length} sounds)")
        elif snapshot.phase is Phase.AWAITING_INPUT:
            self.logger.info(f"🎮 Your turn! Repeat {snapshot.sequence_length} sounds")

    def on_score_changed(self, score: int) -> None:
        self.score = score
        self.logger.info(f"Score: {score}")

    def on_game_over(self, report: 'GameOverReport') -> None:
        self.logger.info(f"❌ Wrong! Final score: {report.final_score}")

    def on_not_ready(self, error: Optional['AssetLoadError']) -> None:
        if error is None:
            self.logger.warning("⏳ Please wait, the sounds are still loading.")
        else:
            self.logger.error(f"Sounds failed to load, the game cannot start: {error}")

    def on_playback_error(self, result: 'PlayResult') -> None:
        self.logger.warning(f"Playback error: {result.error}")
