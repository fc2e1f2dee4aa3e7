"""Gallery navigator - the active-index controller.

One navigator per gallery. It owns a GalleryState, drives the host's
image/thumbnail pairs, and notifies observers through its own EventBus.
Out-of-range requests and missing host elements are absorbed here and never
raised to callers.
"""

from __future__ import annotations
from typing import Callable, List, Optional

from . import config as cfg
from .errors import InvalidIndex, MissingHostElement
from .events import EventBus, IMAGE_CHANGED
from .host import GalleryHost
from .logging import log
from .math_utils import wrap_index
from .state import GalleryState
from .types import Image, ImageChanged


class GalleryNavigator:
    """Stateful controller over an ordered list of images."""

    def __init__(self, host: GalleryHost, bus: Optional[EventBus] = None):
        self.host = host
        self.bus = bus if bus is not None else EventBus()
        self.state = GalleryState(images=host.images,
                                  current_index=self._initial_index(host))

        try:
            host.require_scroll_container()
            self.scroll_enabled = True
        except MissingHostElement as e:
            log(f"[NAV][WARN] {e}; scroll-into-view disabled")
            self.scroll_enabled = False

        if not self.state.is_empty:
            self._apply(self.state.current_index)
            self._ensure_thumbnail_visible(self.state.current_index)
        log(f"[NAV] Init: {self.image_count} images, index={self.state.current_index}")

    @staticmethod
    def _initial_index(host: GalleryHost) -> int:
        marked = host.marked_active()
        return marked if marked is not None else 0

    # ═══════════════════════════════════════════════════════════════════════
    # Accessors
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def current_index(self) -> int:
        return self.state.current_index

    @property
    def image_count(self) -> int:
        return self.state.count

    @property
    def current_image(self) -> Optional[Image]:
        return self.state.current_image

    # ═══════════════════════════════════════════════════════════════════════
    # Transitions
    # ═══════════════════════════════════════════════════════════════════════

    def switch_to(self, index: int) -> bool:
        """Make index the active image. Returns True if the index changed.

        Same index and out-of-range requests are silent no-ops.
        """
        try:
            self.state.validate_index(index)
        except InvalidIndex as e:
            log(f"[NAV] switch_to ignored: {e}")
            return False
        if index == self.state.current_index:
            return False

        previous = self.state.current_index
        self._apply(index, previous)
        self.state.current_index = index
        self._ensure_thumbnail_visible(index)

        log(f"[NAV] {previous} -> {index}")
        self.bus.emit(IMAGE_CHANGED, ImageChanged(
            previous_index=previous,
            current_index=index,
            image=self.state.current_image,
        ))
        if cfg.DEBUG_VERIFY:
            for problem in self.verify():
                log(f"[DIAG][WARN] {problem}")
        return True

    def next(self) -> bool:
        if self.state.is_empty:
            return False
        return self.switch_to(wrap_index(self.state.current_index + 1, self.state.count))

    def prev(self) -> bool:
        if self.state.is_empty:
            return False
        return self.switch_to(wrap_index(self.state.current_index - 1, self.state.count))

    def go_to_first(self) -> bool:
        return self.switch_to(0)

    def go_to_last(self) -> bool:
        return self.switch_to(self.state.count - 1)

    # ═══════════════════════════════════════════════════════════════════════
    # Host updates
    # ═══════════════════════════════════════════════════════════════════════

    def _apply(self, index: int, previous: Optional[int] = None) -> None:
        """Deactivate previous (or every other) pair and activate index."""
        pairs = self.host.pairs
        if previous is None:
            for i, pair in enumerate(pairs):
                pair.set_active(i == index)
            return
        try:
            self.host.pair(previous).set_active(False)
            self.host.pair(index).set_active(True)
        except MissingHostElement as e:
            log(f"[NAV][ERR] {e}; re-normalizing host")
            for i, pair in enumerate(pairs):
                pair.set_active(i == index)

    def _ensure_thumbnail_visible(self, index: int) -> None:
        if not self.scroll_enabled:
            return
        container = self.host.scroll_container
        if container is None:
            return
        try:
            thumb = self.host.pair(index).thumbnail
        except MissingHostElement as e:
            log(f"[NAV][WARN] {e}")
            return
        if container.scroll_into_view(thumb.rect):
            log(f"[NAV] Scrolled thumbnail {index} into view "
                f"(scroll=({container.scroll_x:.0f}, {container.scroll_y:.0f}))")

    # ═══════════════════════════════════════════════════════════════════════
    # Observers & diagnostics
    # ═══════════════════════════════════════════════════════════════════════

    def subscribe(self, callback: Callable[[ImageChanged], None]) -> Callable[[], None]:
        """Observe image_changed. Returns an unsubscribe function."""
        return self.bus.subscribe(IMAGE_CHANGED, callback)

    def verify(self) -> List[str]:
        """Check gallery invariants now. Empty list means consistent."""
        from .diagnostics import verify_gallery
        return verify_gallery(self)

    def teardown(self) -> None:
        """Drop observers. The navigator must not be used afterwards."""
        self.bus.clear()
        log("[NAV] Teardown")
