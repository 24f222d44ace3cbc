"""
Audio System Module

Loads the memory game's sound assets and plays them by index.
"""

from .errors import AssetLoadError, PlaybackError, InvalidIndexError, PlayResult, validate_index
from .interfaces import ISoundPlayer, ISoundBank
from .sound_bank import SoundBank
from .mock_sound_bank import MockSoundBank

__all__ = [
    'AssetLoadError',
    'PlaybackError',
    'InvalidIndexError',
    'PlayResult',
    'validate_index',
    'ISoundPlayer',
    'ISoundBank',
    'SoundBank',
    'MockSoundBank'
]
