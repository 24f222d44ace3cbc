"""
Sound Bank - Loads the game's sound assets and plays them by index
"""

import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence, Tuple

import pygame

from .errors import AssetLoadError, PlayResult, validate_index
from .interfaces import ISoundBank


MIN_SOUND_COUNT = 2


class SoundBank(ISoundBank):
    """
    Owns the sound assets used by the memory game.

    Assets are loaded on a single background worker, one at a time, so the
    game loop keeps running while sounds load. Readiness is the AND of every
    individual load; the first failure is kept in load_error and reported to
    on_load_failed (called from the loader thread).

    release() may be called at any time, including mid-load: the worker
    notices the cancellation between assets and throws away whatever it
    had loaded.
    """

    def __init__(self,
                 sound_paths: Sequence[str],
                 logger,
                 loader: Optional[Callable[[str], Any]] = None,
                 on_load_failed: Optional[Callable[[AssetLoadError], None]] = None):
        """
        Args:
            sound_paths: Sound file paths, in button order (at least 2)
            logger: ClassLogger instance for logging
            loader: Callable turning a path into a playable sound
                    (defaults to pygame.mixer.Sound)
            on_load_failed: Optional callback receiving the AssetLoadError

        Raises:
            ValueError: If fewer than 2 sounds are configured
        """
        if len(sound_paths) < MIN_SOUND_COUNT:
            raise ValueError(f"At least {MIN_SOUND_COUNT} sounds are required, got {len(sound_paths)}")

        self._assets: Tuple[str, ...] = tuple(sound_paths)
        self.logger = logger
        self._loader = loader or self._load_with_pygame
        self._on_load_failed = on_load_failed

        self._lock = threading.Lock()
        self._cancel_event = threading.Event()
        self._sounds: List[Any] = []
        self._ready = False
        self._released = False
        self._owns_mixer = False
        self._load_error: Optional[AssetLoadError] = None
        self._executor: Optional[ThreadPoolExecutor] = None
        self._load_future: Optional['Future[bool]'] = None

    @property
    def asset_names(self) -> Tuple[str, ...]:
        return self._assets

    @property
    def is_released(self) -> bool:
        return self._released

    def get_sound_count(self) -> int:
        return len(self._assets)

    def is_ready(self) -> bool:
        with self._lock:
            return self._ready

    def get_load_error(self) -> Optional[AssetLoadError]:
        with self._lock:
            return self._load_error

    def load(self) -> 'Future[bool]':
        """
        Start loading every asset in the background.

        A load that is already running is returned as-is; a new call after a
        failed load retries all assets from scratch.

        Returns:
            Future resolving to True when all assets loaded, False otherwise

        Raises:
            RuntimeError: If the bank was already released
        """
        with self._lock:
            if self._released:
                raise RuntimeError("SoundBank was released and cannot load again")
            if self._load_future is not None and not self._load_future.done():
                return self._load_future

            stale_sounds, self._sounds = self._sounds, []
            self._ready = False
            self._load_error = None
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="SoundBankLoader")
            self._load_future = self._executor.submit(self._load_all)
            future = self._load_future

        self._stop_sounds(stale_sounds)
        self.logger.info(f"Loading {len(self._assets)} sounds")
        return future

    def _load_all(self) -> bool:
        """Worker body: load assets in order, stop at the first failure or on cancel"""
        loaded: List[Any] = []
        for index, asset in enumerate(self._assets):
            if self._cancel_event.is_set():
                self.logger.info(f"Sound loading cancelled after {index}/{len(self._assets)} assets")
                self._stop_sounds(loaded)
                return False

            try:
                sound = self._loader(asset)
            except Exception as e:
                self._stop_sounds(loaded)
                if self._cancel_event.is_set():
                    self.logger.info(f"Sound loading cancelled while loading {asset}")
                    return False

                error = AssetLoadError(asset, e)
                self.logger.error(f"Failed to load sound {index} ({asset}): {e}")
                with self._lock:
                    self._load_error = error
                if self._on_load_failed:
                    self._on_load_failed(error)
                return False

            self.logger.debug(f"Sound {index} loaded successfully ({asset})")
            loaded.append(sound)

        with self._lock:
            if not self._cancel_event.is_set():
                self._sounds = loaded
                self._ready = True
                loaded = []

        if loaded:
            self.logger.info("Sound loading cancelled after all assets were read")
            self._stop_sounds(loaded)
            return False

        self.logger.info(f"All {len(self._assets)} sounds loaded")
        return True

    def _load_with_pygame(self, path: str) -> 'pygame.mixer.Sound':
        """Default loader: open the mixer on first use and load one sound file"""
        if not os.path.exists(path):
            raise FileNotFoundError(f"Sound file not found: {path}")
        # Under the lock so release() either sees _owns_mixer or stops us here
        with self._lock:
            if self._cancel_event.is_set():
                raise pygame.error("Sound bank released, mixer not opened")
            if not pygame.mixer.get_init():
                pygame.mixer.init()
                self._owns_mixer = True
        return pygame.mixer.Sound(path)

    def play(self, index: int) -> PlayResult:
        """
        Play one sound without waiting for it to finish.

        Failures are logged and returned, never raised.

        Raises:
            InvalidIndexError: If index is out of range
        """
        validate_index(index, len(self._assets))

        with self._lock:
            sound = self._sounds[index] if self._ready else None

        if sound is None:
            result = PlayResult.failed(index, "sounds are not loaded")
        else:
            try:
                channel = sound.play()
            except pygame.error as e:
                result = PlayResult.failed(index, str(e))
            else:
                if channel is None:
                    result = PlayResult.failed(index, "no free mixer channel")
                else:
                    result = PlayResult.ok(index)

        if result.success:
            self.logger.debug(f"Sound {index} played successfully")
        else:
            self.logger.warning(str(result.error))
        return result

    def release(self) -> None:
        """Cancel any in-flight load and release loaded sounds (idempotent)"""
        with self._lock:
            if self._released:
                return
            self._released = True
            self._ready = False
            self._cancel_event.set()
            sounds, self._sounds = self._sounds, []
            executor, self._executor = self._executor, None

        self._stop_sounds(sounds)
        if executor is not None:
            executor.shutdown(wait=False, cancel_futures=True)
        if self._owns_mixer and pygame.mixer.get_init():
            pygame.mixer.quit()
            self._owns_mixer = False

        self.logger.info(f"SoundBank released ({len(sounds)} sounds)")

    def _stop_sounds(self, sounds: List[Any]) -> None:
        for sound in sounds:
            try:
                sound.stop()
            except pygame.error as e:
                self.logger.warning(f"Failed to stop sound during release: {e}")
