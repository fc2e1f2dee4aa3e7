"""Gallery loading - image files and variants to a ready AppState."""

from __future__ import annotations
from typing import Sequence

from . import config as cfg
from .config import (
    WINDOW_WIDTH, WINDOW_HEIGHT,
    LAYOUT_PADDING, THUMB_STRIP_WIDTH, SWATCH_BAR_HEIGHT,
)
from .diagnostics import check_layout
from .host import build_host, layout_swatches
from .image_utils import load_gallery_images
from .navigator import GalleryNavigator
from .state import AppState
from .types import ImageChanged, Rect, Variant
from .variants import VariantSync, build_swatches, derive_image_availability


def compute_layout(screen_w: int, screen_h: int) -> tuple:
    """(main_rect, strip_rect, swatch_bar) for a window size."""
    pad = LAYOUT_PADDING
    body_h = screen_h - 3 * pad - SWATCH_BAR_HEIGHT
    strip = Rect(pad, pad, THUMB_STRIP_WIDTH, body_h)
    main = Rect(2 * pad + THUMB_STRIP_WIDTH, pad,
                screen_w - 3 * pad - THUMB_STRIP_WIDTH, body_h)
    bar = Rect(main.x, pad * 2 + body_h, main.width, SWATCH_BAR_HEIGHT)
    return main, strip, bar


def build_state(image_paths: Sequence[str], variants: Sequence[Variant],
                start_index: int = 0,
                screen_w: int = WINDOW_WIDTH, screen_h: int = WINDOW_HEIGHT) -> AppState:
    """Create host, navigator and variant sync for a set of images.

    start_index is marked active on the host; the navigator adopts it.
    """
    images = derive_image_availability(load_gallery_images(image_paths), variants)
    main, strip, bar = compute_layout(screen_w, screen_h)
    host = build_host(images, main, strip)
    host.swatches = build_swatches(variants)
    if 0 <= start_index < len(host.pairs):
        host.pairs[start_index].set_active(True)

    nav = GalleryNavigator(host)
    sync = VariantSync(nav, variants).attach()
    layout_swatches(host.swatches, bar)

    state = AppState(navigator=nav, variant_sync=sync, screenW=screen_w, screenH=screen_h)
    media = Rect(strip.x, main.y, main.right - strip.x, main.height)

    def on_image_changed(event: ImageChanged) -> None:
        state.input.focus_index = event.current_index
        if cfg.DEBUG_VERIFY:
            check_layout(nav, media)

    nav.subscribe(on_image_changed)
    return state
