"""Pure math utilities - no external dependencies."""

from __future__ import annotations


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def wrap_index(i: int, n: int) -> int:
    """Wrap index i into [0, n) circularly. n must be positive."""
    return (i % n + n) % n


def fit_scale(w: float, h: float, box_w: float, box_h: float, frac: float = 1.0) -> float:
    """Scale that fits a w x h image inside a box_w x box_h box."""
    if w <= 0 or h <= 0:
        return 1.0
    return min(box_w * frac / w, box_h * frac / h)


def ratio(part: float, whole: float) -> float:
    """part / whole, 0.0 when whole is not positive."""
    if whole <= 0:
        return 0.0
    return part / whole


def fit_box(w: float, h: float, bx: float, by: float, bw: float, bh: float,
            frac: float = 1.0) -> tuple:
    """Centered (x, y, w, h) of a w x h image fitted into a box."""
    s = fit_scale(w, h, bw, bh, frac)
    fw, fh = w * s, h * s
    return (bx + (bw - fw) / 2.0, by + (bh - fh) / 2.0, fw, fh)
