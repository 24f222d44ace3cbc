import logging
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
SRC_ROOT = Path(__file__).resolve().parent.parent
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from audio_system import MockSoundBank
from game_system import IGameListener, SequenceGameEngine
from utils import HybridLogger, ManualClock


STEP_DELAY_MS = 1000


class RecordingListener(IGameListener):
    """Collects every engine notification in order"""

    def __init__(self):
        self.events = []

    def on_phase_changed(self, snapshot):
        self.events.append(("phase", snapshot))

    def on_score_changed(self, score):
        self.events.append(("score", score))

    def on_game_over(self, report):
        self.events.append(("game_over", report))

    def on_not_ready(self, error):
        self.events.append(("not_ready", error))

    def on_playback_error(self, result):
        self.events.append(("playback_error", result))

    def of_kind(self, kind):
        return [payload for event_kind, payload in self.events if event_kind == kind]


class FixedRandom(random.Random):
    """Random source returning a scripted list of indexes from randrange()"""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def randrange(self, *args, **kwargs):
        if not self._values:
            raise AssertionError("FixedRandom ran out of scripted values")
        return self._values.pop(0)


@pytest.fixture()
def hybrid_logger():
    main_logger = HybridLogger("musical_memory_tests", log_dir=None, use_colors=False)
    yield main_logger
    main_logger.cleanup()


@pytest.fixture()
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture()
def clock():
    return ManualClock()


@pytest.fixture()
def sound_bank(logger):
    bank = MockSoundBank(["explosion.mp3", "fart.mp3"], logger)
    bank.load()
    return bank


@pytest.fixture()
def listener():
    return RecordingListener()


@pytest.fixture()
def make_engine(sound_bank, logger, clock, listener):
    """Factory: engine over the mock bank with a scripted random sequence"""
    def factory(values=(), bank=None, auto_restart=False):
        engine = SequenceGameEngine(
            bank or sound_bank,
            logger,
            clock=clock,
            step_delay_ms=STEP_DELAY_MS,
            rng=FixedRandom(values),
            auto_restart=auto_restart,
        )
        engine.add_listener(listener)
        return engine
    return factory


def finish_playback(engine, clock):
    """Advance the virtual clock through the whole playback of the current sequence"""
    for _ in range(engine.snapshot().sequence_length):
        clock.advance_ms(STEP_DELAY_MS)
        engine.update()
