"""Gallery error types.

None of these cross the navigator boundary: the navigator and the app
catch them, log, and fall back to a no-op or a disabled feature.
"""

from __future__ import annotations
from typing import Mapping, Optional


class GalleryError(Exception):
    """Base class for gallery errors."""


class InvalidIndex(GalleryError):
    """Requested index is outside [0, count-1]."""

    def __init__(self, index: int, count: int):
        super().__init__(f"index {index} out of range for {count} images")
        self.index = index
        self.count = count


class NoMatchingVariant(GalleryError):
    """No available variant (with an image) matches the selected options."""

    def __init__(self, selected_options: Optional[Mapping[str, str]] = None):
        super().__init__(f"no variant matches {dict(selected_options or {})!r}")
        self.selected_options = dict(selected_options or {})


class MissingHostElement(GalleryError):
    """A host element required by a feature is absent."""

    def __init__(self, element: str):
        super().__init__(f"host element missing: {element}")
        self.element = element
