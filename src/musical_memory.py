#!/usr/bin/env python3
"""
Musical Memory

Simon-says style sound memory game: listen to a growing sequence of sounds
and repeat it on the buttons. Runs in a terminal (digit keys are the sound
buttons, 's' starts a game, 'q' quits) with pygame audio.
"""

import argparse
import logging
import signal
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from audio_system import SoundBank, MockSoundBank
from button_system import ButtonReader, KeyboardSampler
from game_system import ConsoleGameView, GameConfig, GameManager, SequenceGameEngine
from utils import HybridLogger

# Global logger reference for signal handlers
_global_logger = None


def emergency_flush_and_exit(sig=None, frame=None):
    """SIGTERM/SIGHUP handler - flush logs, then unwind through the game loop's finally"""
    if _global_logger:
        _global_logger.critical(f"⚠️  SIGNAL RECEIVED: {sig} - Process terminating")
    sys.exit(1)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sound sequence memory game",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--mock-audio',
        action='store_true',
        help='Run without audio hardware'
    )
    parser.add_argument(
        '--sounds-folder',
        default='sounds',
        help='Folder containing the sound files (default: sounds)'
    )
    parser.add_argument(
        '--sound',
        action='append',
        dest='sounds',
        metavar='FILE',
        help='Sound file name inside the sounds folder, one per button (repeatable)'
    )
    parser.add_argument(
        '--step-delay-ms',
        type=int,
        default=1000,
        help='Delay between sounds during playback (default: 1000)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for reproducible sequences'
    )
    parser.add_argument(
        '--auto-restart',
        action='store_true',
        help='Start a new game right after a wrong answer'
    )
    parser.add_argument(
        '--log-dir',
        default='logs',
        help='Directory for log files (default: logs)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Debug logging'
    )
    return parser.parse_args(argv)


def create_config(args: argparse.Namespace) -> GameConfig:
    """Build and validate the game configuration from command line options"""
    config = GameConfig(
        sounds_folder=args.sounds_folder,
        step_delay_ms=args.step_delay_ms,
        auto_restart=args.auto_restart,
        seed=args.seed
    )
    if args.sounds:
        config.sound_files = list(args.sounds)
    config.validate()
    return config


def create_game_system(config: GameConfig, main_logger: HybridLogger, use_mock_audio: bool,
                       level: int) -> GameManager:
    """Wire sound bank, engine, view and keyboard input into a GameManager"""
    app_logger = main_logger.get_class_logger("MusicalMemory", level)

    if use_mock_audio:
        sound_bank = MockSoundBank(config.sound_files, main_logger.get_class_logger("MockSoundBank", level))
    else:
        sound_bank = SoundBank(config.sound_paths, main_logger.get_class_logger("SoundBank", level))

    try:
        engine = SequenceGameEngine.from_config(
            config,
            sound_bank,
            main_logger.get_class_logger("Engine", level),
            scheduler_logger=main_logger.get_class_logger("Scheduler", level)
        )
        engine.add_listener(ConsoleGameView(main_logger.get_class_logger("Game", logging.INFO)))

        sampler = KeyboardSampler(
            sound_count=config.sound_count,
            start_key=config.start_key,
            logger=main_logger.get_class_logger("KeyboardSampler", level)
        )
        button_reader = ButtonReader(sampler, main_logger.get_class_logger("ButtonReader", level))

        return GameManager(
            button_reader=button_reader,
            sound_bank=sound_bank,
            engine=engine,
            logger=main_logger.get_class_logger("GameManager", level),
            start_button_index=config.start_button_index,
            frame_duration_ms=config.frame_duration_ms,
            status_log_interval_ms=config.status_log_interval_ms
        )
    except Exception as e:
        app_logger.error(f"Failed to initialize the game: {e}", exception=e)
        sound_bank.release()
        raise


def main(argv=None) -> int:
    """Set up and run the game"""
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO

    main_logger = HybridLogger("MusicalMemory", log_dir=args.log_dir)
    app_logger = main_logger.get_class_logger("MusicalMemory", level)

    global _global_logger
    _global_logger = app_logger
    signal.signal(signal.SIGTERM, emergency_flush_and_exit)
    signal.signal(signal.SIGHUP, emergency_flush_and_exit)

    app_logger.info("🎵 MUSICAL MEMORY")

    try:
        config = create_config(args)
    except ValueError as e:
        app_logger.error(f"Invalid configuration: {e}")
        main_logger.cleanup()
        return 2

    app_logger.info(f"Sounds: {config.sound_files} from '{config.sounds_folder}'")
    app_logger.info(f"Game settings: {config.step_delay_ms}ms step delay, "
                    f"{config.frame_duration_ms}ms frame duration ({config.target_fps:.1f} FPS)")

    try:
        game_manager = create_game_system(config, main_logger, args.mock_audio, level)
        game_manager.run_game_loop()
        return 0
    except Exception as e:
        app_logger.error(f"Musical memory error: {e}", exception=e)
        raise
    finally:
        app_logger.info("✅ Musical memory shut down")
        main_logger.cleanup()


if __name__ == "__main__":
    sys.exit(main())
