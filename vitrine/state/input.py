"""Input state - pointer drag tracking for swipes, keyboard focus."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import SWIPE_THRESHOLD


@dataclass
class InputState:
    """State for input handling."""
    is_dragging: bool = False
    drag_start: Tuple[float, float] = (0.0, 0.0)
    focus_index: int = -1
    hover_index: int = -1

    def start_drag(self, x: float, y: float) -> None:
        """Start tracking a pointer drag."""
        self.is_dragging = True
        self.drag_start = (x, y)

    def end_drag(self, x: float, y: float,
                 threshold: float = SWIPE_THRESHOLD) -> Optional[int]:
        """End a drag and classify it.

        Returns -1 for a swipe in the negative x direction, +1 for the
        positive direction, None if the drag was not a swipe.
        """
        if not self.is_dragging:
            return None
        self.is_dragging = False
        dx = x - self.drag_start[0]
        dy = y - self.drag_start[1]
        if abs(dx) <= threshold or abs(dx) < abs(dy):
            return None
        return -1 if dx < 0 else 1

    def cancel_drag(self) -> None:
        self.is_dragging = False

    def move_focus(self, step: int, count: int, current_index: int) -> int:
        """Move keyboard focus circularly. Starts from current_index."""
        if count <= 0:
            self.focus_index = -1
            return -1
        base = self.focus_index if 0 <= self.focus_index < count else current_index
        self.focus_index = (base + step + count) % count
        return self.focus_index
