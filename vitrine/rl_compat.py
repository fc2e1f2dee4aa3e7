"""Raylib helpers - struct construction and bytes/str handling for python-raylib."""

from __future__ import annotations
from typing import Any

import raylib as rl

from .types import Rect

RL_WHITE = getattr(rl, "RAYWHITE", rl.WHITE)


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle."""
    r = rl.ffi.new("Rectangle *")
    r[0].x = float(x)
    r[0].y = float(y)
    r[0].width = float(w)
    r[0].height = float(h)
    return r[0]


def rect_of(rect: Rect) -> Any:
    """Convert a vitrine Rect to a raylib Rectangle."""
    return make_rect(rect.x, rect.y, rect.width, rect.height)


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2."""
    v = rl.ffi.new("Vector2 *")
    v[0].x = float(x)
    v[0].y = float(y)
    return v[0]


def make_color(r: int, g: int, b: int, a: int) -> Any:
    """Create a raylib Color."""
    c = rl.ffi.new("Color *")
    c[0].r = int(r) & 0xFF
    c[0].g = int(g) & 0xFF
    c[0].b = int(b) & 0xFF
    c[0].a = max(0, min(255, int(a)))
    return c[0]


def _b(text: str) -> bytes:
    return text.encode('utf-8')


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    rl.DrawText(_b(text), int(x), int(y), int(size), color)


def measure_text(text: str, size: int) -> int:
    return rl.MeasureText(_b(text), int(size))


def init_window(w: int, h: int, title: str) -> None:
    rl.InitWindow(int(w), int(h), _b(title))


def load_texture(path: str) -> Any:
    """Load a texture from an image file."""
    return rl.LoadTexture(_b(path))


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def is_texture_valid(tex: Any) -> bool:
    """Check if texture is valid and loaded."""
    return get_texture_id(tex) > 0


__all__ = [
    'rl',
    'RL_WHITE',
    'make_rect',
    'rect_of',
    'make_vec2',
    'make_color',
    'draw_text',
    'measure_text',
    'init_window',
    'load_texture',
    'get_texture_id',
    'is_texture_valid',
]
