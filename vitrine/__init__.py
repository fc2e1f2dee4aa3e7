"""Vitrine - product thumbnail gallery navigator."""

from .events import EventBus, IMAGE_CHANGED, VARIANT_CHANGED
from .host import GalleryHost, MediaPair, ImagePane, Thumbnail, ScrollContainer, build_host
from .navigator import GalleryNavigator
from .types import Image, ImageChanged, Rect, Variant, VariantChanged
from .variants import VariantSync, resolve_variant_index

__all__ = [
    'EventBus',
    'IMAGE_CHANGED',
    'VARIANT_CHANGED',
    'GalleryHost',
    'MediaPair',
    'ImagePane',
    'Thumbnail',
    'ScrollContainer',
    'build_host',
    'GalleryNavigator',
    'Image',
    'ImageChanged',
    'Rect',
    'Variant',
    'VariantChanged',
    'VariantSync',
    'resolve_variant_index',
]
