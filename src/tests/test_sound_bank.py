import threading

import pygame
import pytest

from audio_system import AssetLoadError, InvalidIndexError, MockSoundBank, SoundBank

LOAD_TIMEOUT = 5


class FakeSound:
    def __init__(self, path, channel=object()):
        self.path = path
        self.channel = channel
        self.play_count = 0
        self.stop_count = 0

    def play(self):
        self.play_count += 1
        return self.channel

    def stop(self):
        self.stop_count += 1


class FakeLoader:
    """Loader producing FakeSounds; selected paths fail or block until released"""

    def __init__(self, failing=(), blocking=()):
        self.failing = set(failing)
        self.blocking = set(blocking)
        self.unblock = threading.Event()
        self.entered_block = threading.Event()
        self.sounds = []

    def __call__(self, path):
        if path in self.blocking:
            self.entered_block.set()
            self.unblock.wait(LOAD_TIMEOUT)
        if path in self.failing:
            raise FileNotFoundError(f"Sound file not found: {path}")
        sound = FakeSound(path)
        self.sounds.append(sound)
        return sound


PATHS = ["sounds/explosion.mp3", "sounds/fart.mp3", "sounds/bell.mp3"]


@pytest.fixture()
def make_bank(logger):
    banks = []

    def factory(loader, paths=PATHS, on_load_failed=None):
        bank = SoundBank(paths, logger, loader=loader, on_load_failed=on_load_failed)
        banks.append(bank)
        return bank

    yield factory
    for bank in banks:
        bank.release()


def test_requires_at_least_two_sounds(logger):
    with pytest.raises(ValueError):
        SoundBank(["sounds/only.mp3"], logger, loader=FakeLoader())


def test_not_ready_before_load(make_bank):
    bank = make_bank(FakeLoader())
    assert not bank.is_ready()
    assert bank.get_sound_count() == 3
    assert bank.asset_names == tuple(PATHS)


def test_load_all_assets(make_bank):
    loader = FakeLoader()
    bank = make_bank(loader)

    assert bank.load().result(timeout=LOAD_TIMEOUT) is True
    assert bank.is_ready()
    assert [sound.path for sound in loader.sounds] == PATHS
    assert bank.get_load_error() is None


def test_failed_asset_blocks_readiness_and_names_the_asset(make_bank):
    failures = []
    loader = FakeLoader(failing={PATHS[1]})
    bank = make_bank(loader, on_load_failed=failures.append)

    assert bank.load().result(timeout=LOAD_TIMEOUT) is False
    assert not bank.is_ready()

    error = bank.get_load_error()
    assert isinstance(error, AssetLoadError)
    assert error.asset == PATHS[1]
    assert failures == [error]
    # The sound that did load is not kept
    assert loader.sounds[0].stop_count == 1


def test_unexpected_loader_error_is_reported_as_asset_failure(make_bank):
    failures = []

    def broken_loader(path):
        raise ValueError(f"unsupported format: {path}")

    bank = make_bank(broken_loader, on_load_failed=failures.append)

    assert bank.load().result(timeout=LOAD_TIMEOUT) is False
    error = bank.get_load_error()
    assert error.asset == PATHS[0]
    assert isinstance(error.cause, ValueError)
    assert failures == [error]


def test_load_can_be_retried_after_failure(make_bank):
    loader = FakeLoader(failing={PATHS[2]})
    bank = make_bank(loader)
    assert bank.load().result(timeout=LOAD_TIMEOUT) is False

    loader.failing.clear()
    assert bank.load().result(timeout=LOAD_TIMEOUT) is True
    assert bank.is_ready()
    assert bank.get_load_error() is None


def test_play_valid_index(make_bank):
    loader = FakeLoader()
    bank = make_bank(loader)
    bank.load().result(timeout=LOAD_TIMEOUT)

    result = bank.play(2)
    assert result.success
    assert result.index == 2
    assert loader.sounds[2].play_count == 1


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_play_rejects_out_of_range_index(make_bank, index):
    bank = make_bank(FakeLoader())
    bank.load().result(timeout=LOAD_TIMEOUT)

    with pytest.raises(InvalidIndexError):
        bank.play(index)


def test_play_before_load_reports_failure(make_bank):
    bank = make_bank(FakeLoader())
    result = bank.play(0)
    assert not result.success
    assert result.error.index == 0


def test_play_without_free_channel_reports_failure(make_bank):
    loader = FakeLoader()
    bank = make_bank(loader)
    bank.load().result(timeout=LOAD_TIMEOUT)
    loader.sounds[1].channel = None

    result = bank.play(1)
    assert not result.success
    assert "channel" in result.error.reason


def test_play_pygame_error_reports_failure(make_bank):
    loader = FakeLoader()
    bank = make_bank(loader)
    bank.load().result(timeout=LOAD_TIMEOUT)

    def broken_play():
        raise pygame.error("mixer not initialized")
    loader.sounds[0].play = broken_play

    result = bank.play(0)
    assert not result.success
    assert "mixer" in result.error.reason
    assert bank.is_ready()


def test_release_is_idempotent(make_bank):
    loader = FakeLoader()
    bank = make_bank(loader)
    bank.load().result(timeout=LOAD_TIMEOUT)

    bank.release()
    bank.release()

    assert bank.is_released
    assert not bank.is_ready()
    assert [sound.stop_count for sound in loader.sounds] == [1, 1, 1]


def test_load_after_release_is_refused(make_bank):
    bank = make_bank(FakeLoader())
    bank.release()
    with pytest.raises(RuntimeError):
        bank.load()


def test_release_mid_load_cancels_and_discards(make_bank):
    loader = FakeLoader(blocking={PATHS[1]})
    bank = make_bank(loader)
    future = bank.load()
    assert loader.entered_block.wait(LOAD_TIMEOUT)

    bank.release()
    loader.unblock.set()

    assert future.result(timeout=LOAD_TIMEOUT) is False
    assert not bank.is_ready()
    # Asset 2 was never requested; both loaded sounds were stopped once
    assert [sound.path for sound in loader.sounds] == PATHS[:2]
    assert [sound.stop_count for sound in loader.sounds] == [1, 1]


def test_load_while_loading_returns_same_future(make_bank):
    loader = FakeLoader(blocking={PATHS[0]})
    bank = make_bank(loader)
    first = bank.load()
    assert loader.entered_block.wait(LOAD_TIMEOUT)

    assert bank.load() is first
    loader.unblock.set()
    assert first.result(timeout=LOAD_TIMEOUT) is True


class FakeMixer:
    def __init__(self):
        self.initialized = False
        self.init_count = 0
        self.quit_count = 0

    def get_init(self):
        return (44100, -16, 2) if self.initialized else None

    def init(self):
        self.initialized = True
        self.init_count += 1

    def quit(self):
        self.initialized = False
        self.quit_count += 1


class TestPygameLoader:
    @pytest.fixture()
    def mixer(self, monkeypatch):
        mixer = FakeMixer()
        monkeypatch.setattr(pygame.mixer, "get_init", mixer.get_init)
        monkeypatch.setattr(pygame.mixer, "init", mixer.init)
        monkeypatch.setattr(pygame.mixer, "quit", mixer.quit)
        monkeypatch.setattr(pygame.mixer, "Sound", FakeSound)
        return mixer

    @pytest.fixture()
    def sound_files(self, tmp_path):
        paths = []
        for name in ("explosion.mp3", "fart.mp3"):
            path = tmp_path / name
            path.write_bytes(b"")
            paths.append(str(path))
        return paths

    def test_opens_mixer_once_and_closes_it_on_release(self, logger, mixer, sound_files):
        bank = SoundBank(sound_files, logger)
        assert bank.load().result(timeout=LOAD_TIMEOUT) is True
        assert mixer.init_count == 1

        bank.release()
        assert mixer.quit_count == 1

    def test_missing_file_fails_before_opening_mixer(self, logger, mixer, sound_files, tmp_path):
        bank = SoundBank([str(tmp_path / "missing.mp3")] + sound_files, logger)
        try:
            assert bank.load().result(timeout=LOAD_TIMEOUT) is False
            assert isinstance(bank.get_load_error().cause, FileNotFoundError)
            assert mixer.init_count == 0
        finally:
            bank.release()

    def test_released_bank_never_reopens_mixer(self, logger, mixer, sound_files):
        bank = SoundBank(sound_files, logger)
        bank.release()

        # A worker that passed its cancel check before release() must not reopen the mixer
        with pytest.raises(pygame.error):
            bank._load_with_pygame(sound_files[0])
        assert mixer.init_count == 0
        assert not mixer.initialized


class TestMockSoundBank:
    def test_records_played_sounds(self, logger):
        bank = MockSoundBank(["a", "b"], logger)
        assert bank.load().result() is True
        bank.play(1)
        bank.play(0)
        assert bank.played == [1, 0]

    def test_failing_asset(self, logger):
        bank = MockSoundBank(["a", "b"], logger, failing_assets={0})
        assert bank.load().result() is False
        assert bank.get_load_error().asset == "a"

    def test_release_counts_once(self, logger):
        bank = MockSoundBank(["a", "b"], logger)
        bank.release()
        bank.release()
        assert bank.release_count == 1
