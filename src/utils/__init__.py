"""
Utilities package - Logging and timing helpers shared by the game packages
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .clock import Clock, SystemClock, ManualClock
from .once_in_ms import OnceInMs

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'Clock',
    'SystemClock',
    'ManualClock',
    'OnceInMs'
]
