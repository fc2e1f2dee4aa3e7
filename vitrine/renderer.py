"""Renderer - handles all drawing operations.

The Renderer only reads navigator/host state and draws it. Textures are
loaded on first use and kept until unload_all().
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import (
    rl, RL_WHITE,
    rect_of, make_rect, make_vec2, make_color,
    draw_text, measure_text, load_texture, is_texture_valid,
)
from .config import (
    OVERLAY_BG_ALPHA, OVERLAY_FIT_SCALE,
    THUMB_HOVER_SCALE, THUMB_UNAVAILABLE_ALPHA,
)
from .image_utils import build_thumbnail
from .logging import log
from .math_utils import fit_box
from .types import Image, Rect, ThumbTexture


@dataclass
class TextureStore:
    """Lazily loaded main and thumbnail textures, keyed by media id."""
    main: Dict[str, Any] = field(default_factory=dict)
    thumbs: Dict[str, ThumbTexture] = field(default_factory=dict)

    def get_main(self, image: Image) -> Optional[Any]:
        tex = self.main.get(image.media_id)
        if tex is None and image.path:
            tex = load_texture(image.path)
            if not is_texture_valid(tex):
                log(f"[TEX][ERR] Failed to load {image.media_id}")
            self.main[image.media_id] = tex
        return tex if is_texture_valid(tex) else None

    def get_thumb(self, image: Image) -> Optional[Any]:
        thumb = self.thumbs.get(image.media_id)
        if thumb is None:
            thumb = ThumbTexture(src_path=image.path)
            path = build_thumbnail(image.path) if image.path else None
            if path:
                thumb.texture = load_texture(path)
                thumb.ready = is_texture_valid(thumb.texture)
                if thumb.ready:
                    thumb.size = (thumb.texture.width, thumb.texture.height)
            self.thumbs[image.media_id] = thumb
        return thumb.texture if thumb.ready else None

    def unload_all(self) -> None:
        for tex in self.main.values():
            if is_texture_valid(tex):
                rl.UnloadTexture(tex)
        for thumb in self.thumbs.values():
            if thumb.ready:
                rl.UnloadTexture(thumb.texture)
        self.main.clear()
        self.thumbs.clear()


@dataclass
class Renderer:
    """
    Draws one frame of the gallery.

    Usage:
        renderer = Renderer()
        renderer.draw_frame(state)
    """
    textures: TextureStore = field(default_factory=TextureStore)

    def draw_frame(self, state: "AppState") -> None:
        rl.BeginDrawing()
        rl.ClearBackground(make_color(24, 24, 28, 255))
        if state.navigator is None or state.navigator.image_count == 0:
            draw_text("No images found", 40, 40, 28, rl.GRAY)
        else:
            self.draw_main(state)
            self.draw_strip(state)
            self.draw_swatches(state)
            self.draw_hud(state)
            if state.overlay.is_open:
                self.draw_overlay(state)
        rl.EndDrawing()

    def draw_texture_fitted(self, tex: Any, box: Rect, alpha: float = 1.0,
                            frac: float = 1.0) -> None:
        x, y, w, h = fit_box(tex.width, tex.height, box.x, box.y, box.width, box.height, frac)
        rl.DrawTexturePro(
            tex,
            make_rect(0, 0, tex.width, tex.height),
            make_rect(x, y, w, h),
            make_vec2(0, 0),
            0.0,
            rl.Fade(rl.WHITE, float(alpha)),
        )

    # ═══════════════════════════════════════════════════════════════════════
    # Main image
    # ═══════════════════════════════════════════════════════════════════════

    def draw_main(self, state: "AppState") -> None:
        for pair in state.navigator.host.pairs:
            if not pair.pane.visible:
                continue
            tex = self.textures.get_main(pair.image)
            if tex is not None:
                self.draw_texture_fitted(tex, pair.pane.rect)
            else:
                rl.DrawRectangleLinesEx(rect_of(pair.pane.rect), 1.0, rl.DARKGRAY)

    # ═══════════════════════════════════════════════════════════════════════
    # Thumbnail strip
    # ═══════════════════════════════════════════════════════════════════════

    def draw_strip(self, state: "AppState") -> None:
        host = state.navigator.host
        sc = host.scroll_container
        if sc is None:
            return
        vp = sc.viewport
        rl.DrawRectangleRec(rect_of(vp), make_color(36, 36, 42, 255))
        rl.BeginScissorMode(int(vp.x), int(vp.y), int(vp.width), int(vp.height))
        for i, pair in enumerate(host.pairs):
            r = sc.to_screen(pair.thumbnail.rect)
            if r.bottom < vp.y or r.y > vp.bottom:
                continue
            if i == state.input.hover_index:
                r = r.scaled_about_center(THUMB_HOVER_SCALE)
            alpha = 1.0 if pair.image.available else THUMB_UNAVAILABLE_ALPHA
            tex = self.textures.get_thumb(pair.image)
            if tex is not None:
                self.draw_texture_fitted(tex, r, alpha)
            if pair.thumbnail.active:
                rl.DrawRectangleLinesEx(rect_of(r), 3.0, rl.GOLD)
            elif i == state.input.focus_index:
                rl.DrawRectangleLinesEx(rect_of(r), 2.0, rl.SKYBLUE)
        rl.EndScissorMode()

    # ═══════════════════════════════════════════════════════════════════════
    # Option swatches, HUD, overlay
    # ═══════════════════════════════════════════════════════════════════════

    def draw_swatches(self, state: "AppState") -> None:
        sync = state.variant_sync
        selected = sync.selected if sync else {}
        for swatch in state.navigator.host.swatches:
            if swatch.hidden:
                continue
            r = swatch.rect
            chosen = selected.get(swatch.option) == swatch.value
            rl.DrawRectangleRec(rect_of(r), make_color(50, 50, 58, 255))
            if chosen:
                rl.DrawRectangleLinesEx(rect_of(r), 2.0, rl.GOLD)
            label = f"{swatch.value}"
            tw = measure_text(label, 18)
            draw_text(label, int(r.x + (r.width - tw) / 2), int(r.y + (r.height - 18) / 2), 18, RL_WHITE)

    def draw_hud(self, state: "AppState") -> None:
        nav = state.navigator
        text = f"{nav.current_index + 1} / {nav.image_count}"
        image = nav.current_image
        if image is not None:
            text += f"  {image.media_id}"
            if not image.available:
                text += "  (unavailable)"
        sync = state.variant_sync
        if sync is not None and sync.last_variant is not None:
            text += f"  [{sync.last_variant.title or dict(sync.last_variant.options)}]"
        draw_text(text, 16, state.screenH - 28, 18, rl.LIGHTGRAY)

    def draw_overlay(self, state: "AppState") -> None:
        rl.DrawRectangle(0, 0, state.screenW, state.screenH,
                         make_color(0, 0, 0, int(255 * OVERLAY_BG_ALPHA)))
        image = state.navigator.current_image
        if image is None:
            return
        tex = self.textures.get_main(image)
        if tex is not None:
            self.draw_texture_fitted(tex, Rect(0, 0, state.screenW, state.screenH),
                                     frac=OVERLAY_FIT_SCALE)
