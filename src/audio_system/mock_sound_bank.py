"""
Mock Sound Bank - No-op implementation for running without audio hardware
"""

from concurrent.futures import Future
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .errors import AssetLoadError, PlayResult, validate_index
from .interfaces import ISoundBank
from .sound_bank import MIN_SOUND_COUNT


class MockSoundBank(ISoundBank):
    """
    Mock implementation of SoundBank that performs no audio operations.

    Loading completes synchronously. Individual assets or playback indexes
    can be made to fail, and every play request is recorded in `played`.
    """

    def __init__(self,
                 sound_names: Sequence[str],
                 logger,
                 failing_assets: Iterable[int] = (),
                 failing_playback: Iterable[int] = ()):
        """
        Args:
            sound_names: Asset identifiers (at least 2)
            logger: ClassLogger instance for logging
            failing_assets: Asset indexes whose load fails
            failing_playback: Sound indexes whose playback fails
        """
        if len(sound_names) < MIN_SOUND_COUNT:
            raise ValueError(f"At least {MIN_SOUND_COUNT} sounds are required, got {len(sound_names)}")

        self._assets: Tuple[str, ...] = tuple(sound_names)
        self.logger = logger
        self.failing_assets: Set[int] = set(failing_assets)
        self.failing_playback: Set[int] = set(failing_playback)

        self.played: List[int] = []
        self.release_count = 0
        self._ready = False
        self._released = False
        self._load_error: Optional[AssetLoadError] = None

        self.logger.info("🔇 MockSoundBank initialized (audio disabled)")

    @property
    def asset_names(self) -> Tuple[str, ...]:
        return self._assets

    def get_sound_count(self) -> int:
        return len(self._assets)

    def is_ready(self) -> bool:
        return self._ready

    def get_load_error(self) -> Optional[AssetLoadError]:
        return self._load_error

    def load(self) -> 'Future[bool]':
        """Mock: 'load' every asset immediately, honouring failing_assets"""
        if self._released:
            raise RuntimeError("SoundBank was released and cannot load again")

        self._ready = False
        self._load_error = None
        for index, asset in enumerate(self._assets):
            if index in self.failing_assets:
                self._load_error = AssetLoadError(asset, OSError("mock load failure"))
                self.logger.error(f"Mock: Failed to load sound {index} ({asset})")
                break
        else:
            self._ready = True
            self.logger.info(f"Mock: Loaded {len(self._assets)} sounds")

        future: 'Future[bool]' = Future()
        future.set_result(self._ready)
        return future

    def play(self, index: int) -> PlayResult:
        """Mock: record the request, fail if index is in failing_playback"""
        validate_index(index, len(self._assets))
        self.played.append(index)

        if not self._ready:
            result = PlayResult.failed(index, "sounds are not loaded")
        elif index in self.failing_playback:
            result = PlayResult.failed(index, "mock playback failure")
        else:
            result = PlayResult.ok(index)

        if result.success:
            self.logger.debug(f"Mock: Playing sound {index}")
        else:
            self.logger.warning(f"Mock: {result.error}")
        return result

    def release(self) -> None:
        """Mock: mark released (idempotent)"""
        if self._released:
            return
        self._released = True
        self._ready = False
        self.release_count += 1
        self.logger.info("Mock: SoundBank released")
