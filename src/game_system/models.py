"""
Game data: the engine-owned GameState and the read-only views handed out of it
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class Phase(enum.Enum):
    """Engine phase as seen by the presentation layer"""
    IDLE = "idle"
    PLAYING = "playing"                 # generating and playing the sequence back
    AWAITING_INPUT = "awaiting_input"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """
    Mutable game data, owned and written only by SequenceGameEngine.

    Invariants:
    - len(player_input) <= len(sequence)
    - sequence only grows, except for reset()
    """
    sequence: List[int] = field(default_factory=list)
    player_input: List[int] = field(default_factory=list)
    score: int = 0
    phase: Phase = Phase.IDLE

    def reset(self) -> None:
        """Fresh game: empty sequence and input, score back to 0"""
        self.sequence.clear()
        self.player_input.clear()
        self.score = 0

    def is_input_complete(self) -> bool:
        return len(self.player_input) == len(self.sequence)

    def first_mismatch(self) -> Optional[int]:
        """Index of the first tap that differs from the sequence, None when all entered taps match"""
        for position, (entered, expected) in enumerate(zip(self.player_input, self.sequence)):
            if entered != expected:
                return position
        return None


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable snapshot of the engine for the presentation layer.

    The sequence itself is never included, only its length.
    """
    phase: Phase
    sequence_length: int
    input_length: int
    score: int

    @property
    def accepting_input(self) -> bool:
        return self.phase is Phase.AWAITING_INPUT

    @classmethod
    def of(cls, state: GameState) -> 'GameSnapshot':
        return cls(
            phase=state.phase,
            sequence_length=len(state.sequence),
            input_length=len(state.player_input),
            score=state.score,
        )

    def __str__(self) -> str:
        return (
            f"GameSnapshot("
            f"phase={self.phase.name}, "
            f"input={self.input_length}/{self.sequence_length}, "
            f"score={self.score}"
            f")"
        )


@dataclass(frozen=True)
class GameOverReport:
    """Final report of a lost game, emitted once when the input mismatches"""
    final_score: int
    expected: Tuple[int, ...]
    entered: Tuple[int, ...]
    mismatch_position: int
