"""
ButtonState - Immutable button snapshot with edge detection
"""

from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class ButtonState:
    """
    Snapshot of button states for one frame, with rising/falling edges.

    presses lists this frame's presses in the order they happened. Buttons
    read by level get one press per rising edge; event devices such as a
    keyboard report every key press, including repeats of the same key.

    Usage:
        state = ButtonState([True, False], [False, False])
        state.just_pressed()   # [0]
        state.presses          # [0]
    """
    for_button: List[bool]           # Current state: [button0, button1, ...]
    previous_state_of: List[bool]    # Previous frame: [button0_prev, button1_prev, ...]
    presses: Optional[List[int]] = None

    # Calculated fields
    was_changed: List[bool] = field(init=False)
    total_buttons_pressed: int = field(init=False)
    any_changed: bool = field(init=False)

    def __post_init__(self):
        if len(self.for_button) != len(self.previous_state_of):
            raise ValueError(
                f"State lists must have same length: "
                f"for_button={len(self.for_button)}, previous_state_of={len(self.previous_state_of)}"
            )

        self.was_changed = [
            previous != current
            for previous, current in zip(self.previous_state_of, self.for_button)
        ]
        self.total_buttons_pressed = sum(self.for_button)
        self.any_changed = any(self.was_changed)
        if self.presses is None:
            self.presses = self.just_pressed()

    def get_button_count(self) -> int:
        return len(self.for_button)

    def was_pressed(self, button_index: int) -> bool:
        """Rising edge on this button (released → pressed)"""
        return self.was_changed[button_index] and self.for_button[button_index]

    def just_pressed(self) -> List[int]:
        """Indexes of all buttons with a rising edge, in index order"""
        return [i for i in range(len(self.for_button)) if self.was_pressed(i)]

    def __str__(self) -> str:
        pressed_buttons = [i for i, pressed in enumerate(self.for_button) if pressed]
        return (
            f"ButtonState("
            f"pressed={pressed_buttons}, "
            f"presses={self.presses}, "
            f"total_pressed={self.total_buttons_pressed}"
            f")"
        )
