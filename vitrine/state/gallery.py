"""Gallery state - ordered images and the active index."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..errors import InvalidIndex
from ..types import Image


@dataclass
class GalleryState:
    """Images (fixed after init) and the current index.

    current_index is -1 only when the gallery is empty.
    """
    images: Sequence[Image] = field(default_factory=tuple)
    current_index: int = -1

    def __post_init__(self):
        self.images = tuple(self.images)
        if not self.images:
            self.current_index = -1
        elif not self.is_valid(self.current_index):
            self.current_index = 0

    @property
    def count(self) -> int:
        """Total number of images."""
        return len(self.images)

    @property
    def is_empty(self) -> bool:
        return not self.images

    @property
    def current_image(self) -> Optional[Image]:
        """Get current image or None."""
        return self.get(self.current_index)

    def is_valid(self, idx: int) -> bool:
        """True for an int (not bool) inside [0, count-1]."""
        return (isinstance(idx, int) and not isinstance(idx, bool)
                and 0 <= idx < len(self.images))

    def validate_index(self, idx: int) -> int:
        """Return idx if in range, else raise InvalidIndex."""
        if not self.is_valid(idx):
            raise InvalidIndex(idx, len(self.images))
        return idx

    def get(self, idx: int) -> Optional[Image]:
        """Get image at index or None."""
        if self.is_valid(idx):
            return self.images[idx]
        return None
