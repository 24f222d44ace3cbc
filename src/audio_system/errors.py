"""
Error types and playback results for the sound bank
"""

from dataclasses import dataclass
from typing import Optional


class AssetLoadError(Exception):
    """A sound asset could not be loaded; the bank stays not-ready"""

    def __init__(self, asset: str, cause: Optional[BaseException] = None):
        self.asset = asset
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to load sound asset '{asset}'{detail}")


class PlaybackError(Exception):
    """A single play attempt failed (non-fatal)"""

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"Playback of sound {index} failed: {reason}")


class InvalidIndexError(ValueError):
    """Sound index outside [0, sound_count)"""

    def __init__(self, index: int, sound_count: int):
        self.index = index
        self.sound_count = sound_count
        super().__init__(f"Sound index {index} out of range (0-{sound_count - 1})")


@dataclass(frozen=True)
class PlayResult:
    """Outcome of one fire-and-forget play request"""
    index: int
    success: bool
    error: Optional[PlaybackError] = None

    @classmethod
    def ok(cls, index: int) -> 'PlayResult':
        return cls(index=index, success=True)

    @classmethod
    def failed(cls, index: int, reason: str) -> 'PlayResult':
        return cls(index=index, success=False, error=PlaybackError(index, reason))


def validate_index(index: int, sound_count: int) -> None:
    """Raise InvalidIndexError unless 0 <= index < sound_count"""
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidIndexError(index, sound_count)
    if not (0 <= index < sound_count):
        raise InvalidIndexError(index, sound_count)
