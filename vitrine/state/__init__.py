"""State management submodules for Vitrine."""

from .gallery import GalleryState
from .input import InputState
from .overlay import OverlayState
from .app_state import AppState

__all__ = [
    'GalleryState',
    'InputState',
    'OverlayState',
    'AppState',
]
