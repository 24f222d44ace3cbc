"""
Phase states of the sequence memory game
"""

from abc import ABC
from functools import partial
from typing import Optional, TYPE_CHECKING

from .models import GameOverReport, Phase

if TYPE_CHECKING:
    from game_system.engine import SequenceGameEngine


class PhaseState(ABC):
    """
    Base class for all engine phases.

    Each phase decides how it reacts to the two player intents (start, tap)
    and to the passage of time (update). Handlers return the next state, or
    None to stay; the engine performs the actual transition.
    """

    phase: Phase

    def __init__(self, engine: 'SequenceGameEngine'):
        self.engine: 'SequenceGameEngine' = engine

    def on_enter(self) -> None:
        """Called when entering this state"""
        self.custom_on_enter()

    def on_exit(self) -> None:
        """Called when exiting this state"""
        self.custom_on_exit()

    def custom_on_enter(self) -> None:
        pass

    def custom_on_exit(self) -> None:
        pass

    def handle_start(self) -> Optional['PhaseState']:
        """Start (or restart) a game; phases that forbid it override this"""
        return self._start_new_game()

    def handle_tap(self, index: int) -> Optional['PhaseState']:
        """Taps are ignored unless a phase accepts them"""
        self.engine.logger.debug(f"Tap {index} ignored in {self.phase.name}")
        return None

    def update(self) -> Optional['PhaseState']:
        """Called every frame after the playback scheduler"""
        return None

    def _start_new_game(self) -> Optional['PhaseState']:
        """Reset the game and generate the first round, if the sounds are ready"""
        engine = self.engine
        if not engine.sound_player.is_ready():
            engine.logger.warning("Cannot start: sounds are not loaded yet")
            engine.notify_not_ready()
            return None

        engine.game.reset()
        engine.notify_score_changed()
        engine.extend_sequence()
        engine.logger.info("New game started")
        return PlayingState(engine)


class IdleState(PhaseState):
    """
    Before the first game.

    Transitions:
    - start() with sounds ready → PlayingState
    """

    phase = Phase.IDLE


class PlayingState(PhaseState):
    """
    Plays the whole sequence back, one sound per step_delay_ms.

    Taps and start requests are discarded, not queued.

    Transitions:
    - Schedule finished → AwaitingInputState
    """

    phase = Phase.PLAYING

    def custom_on_enter(self) -> None:
        engine = self.engine
        steps = [partial(engine.play_sound, index) for index in engine.game.sequence]
        engine.scheduler.schedule(steps, engine.step_delay_ms)
        # First step plays right away
        engine.scheduler.update()

    def custom_on_exit(self) -> None:
        self.engine.scheduler.cancel()

    def handle_start(self) -> Optional[PhaseState]:
        self.engine.logger.debug("Start ignored during playback")
        return None

    def handle_tap(self, index: int) -> Optional[PhaseState]:
        self.engine.logger.debug(f"Tap {index} dropped during playback")
        return None

    def update(self) -> Optional[PhaseState]:
        if self.engine.scheduler.is_finished():
            return AwaitingInputState(self.engine)
        return None


class AwaitingInputState(PhaseState):
    """
    Collects the player's taps and checks them once enough were entered.

    A wrong tap is only detected when the input is as long as the sequence.

    Transitions:
    - Full match → PlayingState (sequence extended by one)
    - Mismatch → GameOverState
    - start() → PlayingState (explicit restart)
    """

    phase = Phase.AWAITING_INPUT

    def handle_tap(self, index: int) -> Optional[PhaseState]:
        engine = self.engine
        game = engine.game

        game.player_input.append(index)
        engine.play_sound(index)

        if not game.is_input_complete():
            return None

        mismatch = game.first_mismatch()
        if mismatch is None:
            game.score += 1
            game.player_input.clear()
            engine.logger.info(f"Round complete, score {game.score}")
            engine.notify_score_changed()
            engine.extend_sequence()
            return PlayingState(engine)

        report = GameOverReport(
            final_score=game.score,
            expected=tuple(game.sequence),
            entered=tuple(game.player_input),
            mismatch_position=mismatch,
        )
        game.sequence.clear()
        game.player_input.clear()
        return GameOverState(engine, report)


class GameOverState(PhaseState):
    """
    The player missed; the final score stays visible until the next start.

    Transitions:
    - start() with sounds ready → PlayingState
    - auto_restart → PlayingState on the next update
    """

    phase = Phase.GAME_OVER

    def __init__(self, engine: 'SequenceGameEngine', report: GameOverReport):
        super().__init__(engine)
        self.report = report
        self._auto_restart_tried = False

    def custom_on_enter(self) -> None:
        self.engine.logger.info(
            f"Game over at position {self.report.mismatch_position}, final score {self.report.final_score}"
        )
        self.engine.notify_game_over(self.report)

    def update(self) -> Optional[PhaseState]:
        if not self.engine.auto_restart or self._auto_restart_tried:
            return None
        # One attempt only, so a missing sound bank is reported once
        self._auto_restart_tried = True
        return self._start_new_game()
