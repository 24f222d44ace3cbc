"""
Button System Package

Reads the game's sound and start buttons with edge detection.
"""

from .button_state import ButtonState
from .interfaces import IButtonReader, IButtonSampler
from .button_reader import ButtonReader
from .keyboard_sampler import KeyboardSampler

__all__ = [
    "ButtonState",
    "IButtonReader",
    "IButtonSampler",
    "ButtonReader",
    "KeyboardSampler"
]
