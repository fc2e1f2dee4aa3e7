"""Zoom overlay state - independent of the active index."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class OverlayState:
    """State for the zoom overlay."""
    is_open: bool = False
    opened_index: int = -1

    def open(self, index: int) -> bool:
        """Open the overlay on index. Returns False if already open."""
        if self.is_open:
            return False
        self.is_open = True
        self.opened_index = index
        return True

    def close(self) -> bool:
        """Close the overlay. Returns True if it was open."""
        was_open = self.is_open
        self.is_open = False
        self.opened_index = -1
        return was_open
