"""Variant resolution - selected options to image index, option availability."""

from __future__ import annotations
import json
from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional, Sequence, Set

if TYPE_CHECKING:
    from .navigator import GalleryNavigator

from .errors import NoMatchingVariant
from .events import VARIANT_CHANGED
from .host import OptionSwatch
from .logging import log
from .types import Image, Variant, VariantChanged


def find_variant(selected_options: Mapping[str, str],
                 variants: Sequence[Variant]) -> Optional[Variant]:
    """First available variant whose options match every selected option."""
    for variant in variants:
        if variant.available and variant.matches(selected_options):
            return variant
    return None


def image_index_for(variant: Optional[Variant], images: Sequence[Image]) -> Optional[int]:
    """Index of the image a variant references, or None."""
    if variant is None:
        return None
    for i, img in enumerate(images):
        if variant.refers_to(img):
            return i
    return None


def resolve_variant_index(selected_options: Mapping[str, str],
                          variants: Sequence[Variant],
                          images: Sequence[Image]) -> Optional[int]:
    """Resolve selected options to an image index.

    Returns None when no available variant matches, or the matching variant
    has no image in this gallery. None is never the same as index 0.
    """
    return image_index_for(find_variant(selected_options, variants), images)


def require_variant_index(selected_options: Mapping[str, str],
                          variants: Sequence[Variant],
                          images: Sequence[Image]) -> int:
    """Like resolve_variant_index but raises NoMatchingVariant."""
    index = resolve_variant_index(selected_options, variants, images)
    if index is None:
        raise NoMatchingVariant(selected_options)
    return index


def available_option_values(variants: Sequence[Variant]) -> Dict[str, Set[str]]:
    """Option name -> values offered by at least one available variant."""
    result: Dict[str, Set[str]] = {}
    for variant in variants:
        if not variant.available:
            continue
        for name, value in variant.options.items():
            result.setdefault(name, set()).add(value)
    return result


def update_option_visibility(swatches: Sequence[OptionSwatch],
                             variants: Sequence[Variant]) -> int:
    """Hide swatches whose value no available variant offers.

    Returns the number of hidden swatches.
    """
    offered = available_option_values(variants)
    hidden = 0
    for swatch in swatches:
        ok = swatch.value in offered.get(swatch.option, ())
        swatch.hidden = not ok
        swatch.unavailable = not ok
        if not ok:
            hidden += 1
    return hidden


def build_swatches(variants: Sequence[Variant]) -> List[OptionSwatch]:
    """One swatch per distinct (option, value) across all variants, in order."""
    seen = set()
    swatches = []
    for variant in variants:
        for name, value in variant.options.items():
            if (name, value) not in seen:
                seen.add((name, value))
                swatches.append(OptionSwatch(option=name, value=value))
    return swatches


def derive_image_availability(images: Sequence[Image],
                              variants: Sequence[Variant]) -> List[Image]:
    """Images with the availability flag derived from variant membership.

    An image referenced by variants is available if any of them is;
    unreferenced images stay available.
    """
    result = []
    for img in images:
        refs = [v for v in variants if v.refers_to(img)]
        available = any(v.available for v in refs) if refs else True
        result.append(replace(img, available=available))
    return result


class VariantSync:
    """Feeds host variant_changed events into a navigator.

    A payload that resolves to no image leaves the gallery unchanged.
    """

    def __init__(self, navigator: "GalleryNavigator", variants: Sequence[Variant]):
        self.navigator = navigator
        self.variants = list(variants)
        self.selected: Dict[str, str] = {}
        self.last_variant: Optional[Variant] = None
        self._unsubscribe: Optional[Callable[[], None]] = None
        update_option_visibility(navigator.host.swatches, self.variants)

    def attach(self) -> "VariantSync":
        """Subscribe to the navigator's bus."""
        if self._unsubscribe is None:
            self._unsubscribe = self.navigator.bus.subscribe(VARIANT_CHANGED, self.handle)
        return self

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def dispatch(self, event: VariantChanged) -> int:
        """Publish a variant_changed event on the navigator's bus."""
        return self.navigator.bus.emit(VARIANT_CHANGED, event)

    def select_option(self, option: str, value: str) -> bool:
        """Record an option choice and sync the gallery."""
        self.selected[option] = value
        return self.handle(VariantChanged(selected_options=dict(self.selected)))

    def handle(self, event: VariantChanged) -> bool:
        """Apply a variant change. Returns True if the active image changed."""
        images = self.navigator.state.images
        if event.variant is not None:
            variant = event.variant
            self.selected = dict(variant.options)
        elif event.selected_options is not None:
            variant = find_variant(event.selected_options, self.variants)
        else:
            return False

        update_option_visibility(self.navigator.host.swatches, self.variants)
        index = image_index_for(variant, images)
        if index is None:
            log(f"[VARIANT] No image for {event!r}; gallery unchanged")
            return False
        self.last_variant = variant
        log(f"[VARIANT] {variant.title or dict(variant.options)!r} -> image {index}")
        return self.navigator.switch_to(index)


def load_variants(path: str) -> List[Variant]:
    """Read a JSON list of variant objects.

    Returns [] if the file cannot be read or is not a list. Items that do not
    parse are logged and skipped.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log(f"[VARIANT][ERR] Cannot read {path}: {e!r}")
        return []
    if not isinstance(data, list):
        log(f"[VARIANT][ERR] {path}: expected a list, got {type(data).__name__}")
        return []
    variants = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            log(f"[VARIANT][ERR] {path}: item {i} is not an object; skipped")
            continue
        try:
            variants.append(Variant.from_dict(item))
        except (TypeError, ValueError) as e:
            log(f"[VARIANT][ERR] {path}: item {i}: {e}; skipped")
    log(f"[VARIANT] Loaded {len(variants)} variants from {path}")
    return variants
