"""
Abstract interfaces for button reading systems
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .button_state import ButtonState

class IButtonSampler(ABC):
    """
    Abstract interface for sampling individual button states.

    Separates reading the input device from button state management, so the
    game can run on a terminal keyboard, a test script, or real buttons.
    """

    def sample(self) -> None:
        """Capture device input for the coming frame (called once before read_button)"""
        pass

    def drain_presses(self) -> Optional[List[int]]:
        """
        Ordered press events captured by the last sample().

        Returns None for devices read by level only; ButtonReader then
        derives presses from rising edges.
        """
        return None

    @abstractmethod
    def read_button(self, button_index: int) -> bool:
        """True if the button is currently pressed"""
        pass

    @abstractmethod
    def get_button_count(self) -> int:
        pass

    @abstractmethod
    def setup(self) -> None:
        """Initialize the sampler resources"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Cleanup sampler resources"""
        pass


class IButtonReader(ABC):
    """Abstract interface for button reading systems"""

    @abstractmethod
    def read_buttons(self) -> ButtonState:
        """
        Read all buttons once per frame.

        Returns:
            ButtonState: Current state with edge detection
        """
        pass

    @abstractmethod
    def get_button_count(self) -> int:
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release input resources (safe to call more than once)"""
        pass
