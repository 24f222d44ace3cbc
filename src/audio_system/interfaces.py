"""
Abstract interfaces for sound playback
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Optional, Tuple

from .errors import AssetLoadError, PlayResult


class ISoundPlayer(ABC):
    """
    Playback capability handed to the game engine.

    The engine never owns the sounds: it only asks whether they are ready
    and plays them by index.
    """

    @abstractmethod
    def is_ready(self) -> bool:
        """True only when every sound asset is loaded"""
        pass

    @abstractmethod
    def play(self, index: int) -> PlayResult:
        """
        Fire-and-forget playback of one sound.

        Args:
            index: Sound index in [0, get_sound_count())

        Returns:
            PlayResult describing success or the PlaybackError

        Raises:
            InvalidIndexError: If index is out of range
        """
        pass

    @abstractmethod
    def get_sound_count(self) -> int:
        """Number of sounds (N)"""
        pass

    def get_load_error(self) -> Optional[AssetLoadError]:
        """Why the sounds are not ready, if a load failed (None otherwise)"""
        return None


class ISoundBank(ISoundPlayer):
    """Sound player that also owns loading and releasing its assets"""

    @property
    @abstractmethod
    def asset_names(self) -> Tuple[str, ...]:
        """Configured asset identifiers, in index order"""
        pass

    @abstractmethod
    def load(self) -> 'Future[bool]':
        """Start loading all assets; the future resolves to overall readiness"""
        pass

    @abstractmethod
    def release(self) -> None:
        """Release all resources; safe to call more than once"""
        pass
