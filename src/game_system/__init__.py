"""
Game System - State machine based sequence memory game

This module provides the engine of a Simon-says style game: it generates a
growing random sequence of sounds, plays it back, and verifies the player's
re-entry.
"""

from .models import Phase, GameState, GameSnapshot, GameOverReport
from .states import PhaseState, IdleState, PlayingState, AwaitingInputState, GameOverState
from .scheduler import PlaybackScheduler
from .engine import SequenceGameEngine
from .interfaces import IGameListener
from .console_view import ConsoleGameView
from .game_manager import GameManager
from .config import GameConfig, DEFAULT_SOUND_FILES

__all__ = [
    # Data
    "Phase",
    "GameState",
    "GameSnapshot",
    "GameOverReport",
    # States
    "PhaseState",
    "IdleState",
    "PlayingState",
    "AwaitingInputState",
    "GameOverState",
    # Engine
    "PlaybackScheduler",
    "SequenceGameEngine",
    "IGameListener",
    "ConsoleGameView",
    "GameManager",
    # Configuration
    "GameConfig",
    "DEFAULT_SOUND_FILES"
]
