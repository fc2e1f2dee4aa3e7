"""Main application state - composes the sub-states the app loop needs."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..navigator import GalleryNavigator
    from ..variants import VariantSync

from .input import InputState
from .overlay import OverlayState
from ..config import WINDOW_WIDTH, WINDOW_HEIGHT
from ..types import Variant


@dataclass
class AppState:
    """Per-window state around a single gallery navigator.

    The active index lives in the navigator, not here.
    """
    navigator: Optional["GalleryNavigator"] = None
    variant_sync: Optional["VariantSync"] = None
    screenW: int = WINDOW_WIDTH
    screenH: int = WINDOW_HEIGHT
    input: InputState = field(default_factory=InputState)
    overlay: OverlayState = field(default_factory=OverlayState)
    variant_cursor: int = -1

    @property
    def index(self) -> int:
        """Active image index, -1 without a navigator."""
        return self.navigator.current_index if self.navigator else -1

    @property
    def count(self) -> int:
        return self.navigator.image_count if self.navigator else 0

    @property
    def variants(self) -> List[Variant]:
        return self.variant_sync.variants if self.variant_sync else []

    @property
    def available_variants(self) -> List[Variant]:
        return [v for v in self.variants if v.available]

    def cycle_variant(self) -> Optional[Variant]:
        """Advance to the next available variant (circular)."""
        avail = self.available_variants
        if not avail:
            self.variant_cursor = -1
            return None
        self.variant_cursor = (self.variant_cursor + 1) % len(avail)
        return avail[self.variant_cursor]
