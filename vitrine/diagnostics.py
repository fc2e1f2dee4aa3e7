"""Synchronous gallery checks.

verify_gallery() inspects navigator and host together and reports every
broken invariant. The layout helpers measure how much of the available width
the main image uses, the whitespace check from the storefront debug scripts.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .navigator import GalleryNavigator

from .config import IMAGE_FILL_MIN, MAIN_UTILIZATION_MIN
from .logging import log
from .math_utils import fit_box, ratio
from .types import Image, Rect


def verify_gallery(nav: "GalleryNavigator") -> List[str]:
    """Return a list of human readable problems; empty when consistent."""
    problems: List[str] = []
    state = nav.state
    host = nav.host

    if len(host.pairs) != state.count:
        problems.append(f"host has {len(host.pairs)} pairs for {state.count} images")

    active = host.active_indices()
    if state.is_empty:
        if state.current_index != -1:
            problems.append(f"empty gallery has current_index={state.current_index}")
        if active:
            problems.append(f"empty gallery has active pairs {active}")
        return problems

    if not state.is_valid(state.current_index):
        problems.append(f"current_index {state.current_index} out of range")
    if active != [state.current_index]:
        problems.append(f"active pairs {active}, expected [{state.current_index}]")

    for i, pair in enumerate(host.pairs):
        want = i == state.current_index
        thumb = pair.thumbnail
        if pair.pane.visible != want:
            problems.append(f"pane {i} visible={pair.pane.visible}")
        if thumb.aria_selected != want:
            problems.append(f"thumbnail {i} aria_selected={thumb.aria_selected}")
        if thumb.tab_index != (0 if want else -1):
            problems.append(f"thumbnail {i} tab_index={thumb.tab_index}")

    container = host.scroll_container
    if nav.scroll_enabled and container is not None and state.is_valid(state.current_index):
        rect = host.pairs[state.current_index].thumbnail.rect
        if not container.is_fully_visible(rect):
            problems.append(f"active thumbnail {state.current_index} not fully visible")
    return problems


@dataclass(frozen=True)
class SpaceReport:
    """Main image width against the space left beside the thumbnails."""
    media_width: float
    thumbnails_width: float
    main_width: float

    @property
    def available(self) -> float:
        return self.media_width - self.thumbnails_width

    @property
    def utilization(self) -> float:
        return ratio(self.main_width, self.available)

    @property
    def whitespace(self) -> bool:
        return self.main_width < self.available * MAIN_UTILIZATION_MIN

    def describe(self) -> str:
        verdict = "WHITESPACE" if self.whitespace else "OK"
        return (f"media={self.media_width:.0f}px thumbs={self.thumbnails_width:.0f}px "
                f"available={self.available:.0f}px main={self.main_width:.0f}px "
                f"utilization={self.utilization * 100:.0f}% {verdict}")


def measure_space(media_width: float, thumbnails_width: float,
                  main_width: float) -> SpaceReport:
    return SpaceReport(media_width, thumbnails_width, main_width)


def image_fill(image_rect: Rect, parent_rect: Rect) -> float:
    """Fraction of the parent's width an image occupies."""
    return ratio(image_rect.width, parent_rect.width)


def image_fills_width(image_rect: Rect, parent_rect: Rect,
                      minimum: float = IMAGE_FILL_MIN) -> bool:
    return image_fill(image_rect, parent_rect) >= minimum


def displayed_rect(image: Image, box: Rect, frac: float = 1.0) -> Rect:
    """Where an image lands when fitted into box."""
    if image.width <= 0 or image.height <= 0:
        return box
    return Rect(*fit_box(image.width, image.height,
                         box.x, box.y, box.width, box.height, frac))


def check_layout(nav: "GalleryNavigator", media_rect: Rect) -> Optional[SpaceReport]:
    """Measure the active image against the media area and log the result.

    Returns None if there is no active image or no thumbnail strip.
    """
    image = nav.current_image
    container = nav.host.scroll_container
    if image is None or container is None:
        log("[DIAG] Layout check skipped: no active image or thumbnail strip")
        return None
    pane = nav.host.pairs[nav.current_index].pane
    shown = displayed_rect(image, pane.rect)
    report = measure_space(media_rect.width, container.viewport.width, shown.width)
    log(f"[DIAG] {report.describe()}")
    return report
