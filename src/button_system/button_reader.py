"""
Button reader implementation with state management and edge detection
"""

from typing import List

from .interfaces import IButtonReader, IButtonSampler
from .button_state import ButtonState

class ButtonReader(IButtonReader):
    """
    Button reader with edge detection on top of an IButtonSampler.

    Example:
        logger = main_logger.get_class_logger("ButtonReader", logging.INFO)
        sampler = KeyboardSampler(sound_count=2, start_key="s", logger=logger)
        reader = ButtonReader(sampler, logger)

        while True:
            state = reader.read_buttons()
            for index in state.presses:
                ...
    """

    def __init__(self,
                 sampler: IButtonSampler,
                 logger):
        """
        Args:
            sampler: IButtonSampler instance for reading the input device
            logger: ClassLogger instance from HybridLogger.get_class_logger()
        """
        self._sampler = sampler
        self._logger = logger
        self._previous_state: List[bool] = [False] * sampler.get_button_count()
        self._cleaned_up = False

        self._sampler.setup()

        self._logger.info(f"ButtonReader initialized with {sampler.get_button_count()} buttons")

    def read_buttons(self) -> ButtonState:
        """
        Sample every button once and compare with the previous frame.

        Returns:
            ButtonState: Current/previous values and edge detection
        """
        self._sampler.sample()
        current_state = [
            self._sampler.read_button(i)
            for i in range(self._sampler.get_button_count())
        ]

        state = ButtonState(
            for_button=current_state,
            previous_state_of=self._previous_state,
            presses=self._sampler.drain_presses()
        )
        self._previous_state = current_state

        for i in state.presses:
            self._logger.debug(f"Button {i} pressed")

        return state

    def get_button_count(self) -> int:
        return self._sampler.get_button_count()

    def cleanup(self) -> None:
        """Cleanup sampler resources (idempotent)"""
        if self._cleaned_up:
            return
        self._cleaned_up = True
        self._sampler.cleanup()
        self._logger.info("ButtonReader cleaned up")
