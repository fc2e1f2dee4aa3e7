"""Host element model - the panes, thumbnails and containers a gallery drives.

The navigator never draws anything. It flips flags on these elements and the
renderer (or a test) reads them back.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import THUMB_SIZE, THUMB_SPACING
from .errors import MissingHostElement
from .logging import log
from .math_utils import clamp
from .types import Image, Rect


@dataclass
class ImagePane:
    """Main image slot."""
    media_id: str
    rect: Rect = field(default_factory=Rect)
    active: bool = False
    visible: bool = False


@dataclass
class Thumbnail:
    """Thumbnail slot. rect is in scroll-content coordinates."""
    index: int
    rect: Rect = field(default_factory=Rect)
    active: bool = False
    aria_selected: bool = False
    tab_index: int = -1


@dataclass
class MediaPair:
    """An image with its pane and thumbnail."""
    image: Image
    pane: ImagePane
    thumbnail: Thumbnail

    @property
    def is_active(self) -> bool:
        return self.pane.active or self.thumbnail.active

    def set_active(self, active: bool) -> None:
        """Apply active/inactive flags to both elements. Idempotent."""
        self.pane.active = active
        self.pane.visible = active
        self.thumbnail.active = active
        self.thumbnail.aria_selected = active
        self.thumbnail.tab_index = 0 if active else -1


@dataclass
class ScrollContainer:
    """Scrollable viewport around the thumbnail strip."""
    viewport: Rect
    content_width: float = 0.0
    content_height: float = 0.0
    scroll_x: float = 0.0
    scroll_y: float = 0.0

    @property
    def visible_rect(self) -> Rect:
        """Visible region in content coordinates."""
        return Rect(self.scroll_x, self.scroll_y,
                    self.viewport.width, self.viewport.height)

    def is_fully_visible(self, rect: Rect) -> bool:
        return self.visible_rect.contains(rect)

    def to_screen(self, rect: Rect) -> Rect:
        """Convert a content rect to screen coordinates."""
        return rect.moved(self.viewport.x - self.scroll_x,
                          self.viewport.y - self.scroll_y)

    def to_content(self, x: float, y: float) -> tuple:
        """Convert a screen point to content coordinates."""
        return (x - self.viewport.x + self.scroll_x,
                y - self.viewport.y + self.scroll_y)

    def scroll_into_view(self, rect: Rect) -> bool:
        """Scroll the minimum distance to show rect fully.

        Returns True if the scroll offset changed.
        """
        if self.is_fully_visible(rect):
            return False
        vis = self.visible_rect
        sx, sy = self.scroll_x, self.scroll_y
        if rect.x < vis.x:
            sx = rect.x
        elif rect.right > vis.right:
            sx = rect.right - vis.width
        if rect.y < vis.y:
            sy = rect.y
        elif rect.bottom > vis.bottom:
            sy = rect.bottom - vis.height
        max_x = max(0.0, self.content_width - self.viewport.width)
        max_y = max(0.0, self.content_height - self.viewport.height)
        sx = clamp(sx, 0.0, max_x)
        sy = clamp(sy, 0.0, max_y)
        changed = (sx, sy) != (self.scroll_x, self.scroll_y)
        self.scroll_x, self.scroll_y = sx, sy
        return changed

    def scroll_by(self, dy: float) -> None:
        max_y = max(0.0, self.content_height - self.viewport.height)
        self.scroll_y = clamp(self.scroll_y + dy, 0.0, max_y)


@dataclass
class OptionSwatch:
    """A selectable option value (e.g. color: red)."""
    option: str
    value: str
    hidden: bool = False
    unavailable: bool = False
    rect: Rect = field(default_factory=Rect)


@dataclass
class GalleryHost:
    """Everything a navigator needs from the page."""
    pairs: List[MediaPair] = field(default_factory=list)
    scroll_container: Optional[ScrollContainer] = None
    swatches: List[OptionSwatch] = field(default_factory=list)

    @property
    def images(self) -> List[Image]:
        return [p.image for p in self.pairs]

    def pair(self, index: int) -> MediaPair:
        """Get pair at index or raise MissingHostElement."""
        if not 0 <= index < len(self.pairs):
            raise MissingHostElement(f"media pair #{index}")
        return self.pairs[index]

    def require_scroll_container(self) -> ScrollContainer:
        if self.scroll_container is None:
            raise MissingHostElement("thumbnail scroll container")
        return self.scroll_container

    def marked_active(self) -> Optional[int]:
        """Index of the first pair the host already marks active."""
        for i, p in enumerate(self.pairs):
            if p.is_active:
                return i
        return None

    def active_indices(self) -> List[int]:
        return [i for i, p in enumerate(self.pairs) if p.is_active]

    def thumbnail_at(self, x: float, y: float) -> int:
        """Thumbnail index under a screen point, or -1."""
        sc = self.scroll_container
        if sc is None:
            for i, p in enumerate(self.pairs):
                if p.thumbnail.rect.contains_point(x, y):
                    return i
            return -1
        if not sc.viewport.contains_point(x, y):
            return -1
        cx, cy = sc.to_content(x, y)
        for i, p in enumerate(self.pairs):
            if p.thumbnail.rect.contains_point(cx, cy):
                return i
        return -1

    def swatch_at(self, x: float, y: float) -> int:
        """Visible swatch index under a screen point, or -1."""
        for i, s in enumerate(self.swatches):
            if not s.hidden and s.rect.contains_point(x, y):
                return i
        return -1


def build_host(images: Sequence[Image], main_rect: Rect,
               strip_rect: Optional[Rect] = None,
               thumb_size: int = THUMB_SIZE,
               spacing: int = THUMB_SPACING) -> GalleryHost:
    """Lay out a vertical thumbnail strip and main panes for images.

    Without strip_rect the host has no scroll container.
    """
    pairs = []
    y = float(spacing)
    x = 0.0
    if strip_rect is not None:
        x = max(0.0, (strip_rect.width - thumb_size) / 2.0)
    for i, img in enumerate(images):
        thumb = Thumbnail(index=i, rect=Rect(x, y, thumb_size, thumb_size))
        pane = ImagePane(media_id=img.media_id, rect=main_rect)
        pairs.append(MediaPair(image=img, pane=pane, thumbnail=thumb))
        y += thumb_size + spacing

    container = None
    if strip_rect is not None:
        container = ScrollContainer(viewport=strip_rect,
                                    content_width=strip_rect.width,
                                    content_height=y)
    log(f"[HOST] Built host: {len(pairs)} pairs, scroll_container={container is not None}")
    return GalleryHost(pairs=pairs, scroll_container=container)


def layout_swatches(swatches: Sequence[OptionSwatch], bar: Rect,
                    width: float = 96.0, spacing: float = 8.0) -> None:
    """Place visible swatches left to right inside bar."""
    x = bar.x
    for swatch in swatches:
        if swatch.hidden:
            swatch.rect = Rect()
            continue
        swatch.rect = Rect(x, bar.y, width, bar.height)
        x += width + spacing
