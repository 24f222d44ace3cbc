"""
Abstract interface for engine observers (the presentation layer)
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from audio_system.errors import AssetLoadError, PlayResult
    from game_system.models import GameOverReport, GameSnapshot


class IGameListener(ABC):
    """
    Receives engine notifications.

    Listeners only ever see immutable snapshots and reports; they talk back
    to the engine through start() and tap().
    """

    @abstractmethod
    def on_phase_changed(self, snapshot: 'GameSnapshot') -> None:
        """Engine entered a new phase (enable/disable tap acceptance here)"""
        pass

    @abstractmethod
    def on_score_changed(self, score: int) -> None:
        """Score changed (round won or new game)"""
        pass

    @abstractmethod
    def on_game_over(self, report: 'GameOverReport') -> None:
        """Player input mismatched; report carries the final score"""
        pass

    @abstractmethod
    def on_not_ready(self, error: Optional['AssetLoadError']) -> None:
        """start() was refused because the sounds are not ready"""
        pass

    @abstractmethod
    def on_playback_error(self, result: 'PlayResult') -> None:
        """A play request failed (non-fatal)"""
        pass
