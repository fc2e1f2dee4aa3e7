"""Core data types for Vitrine."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixels."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, other: Rect) -> bool:
        """True if other lies fully inside this rectangle."""
        return (other.x >= self.x and other.y >= self.y and
                other.right <= self.right and other.bottom <= self.bottom)

    def contains_point(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def moved(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def scaled_about_center(self, factor: float) -> Rect:
        w = self.width * factor
        h = self.height * factor
        return Rect(self.x - (w - self.width) / 2.0,
                    self.y - (h - self.height) / 2.0, w, h)


@dataclass(frozen=True)
class Image:
    """A gallery image. Immutable after load."""
    media_id: str
    position: int
    available: bool = True
    path: str = ""
    width: int = 0
    height: int = 0


def _parse_options(raw: Any) -> Dict[str, str]:
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        return {str(k): str(v) for k, v in raw.items()}
    if isinstance(raw, (list, tuple)):
        return {f"option{i}": str(v) for i, v in enumerate(raw, 1)}
    raise ValueError(f"variant options must be a mapping or list, got {type(raw).__name__}")


@dataclass(frozen=True)
class Variant:
    """A purchasable product configuration, optionally tied to an image."""
    options: Mapping[str, str] = field(default_factory=dict)
    available: bool = True
    media_id: Optional[str] = None
    id: Optional[str] = None
    title: str = ""
    # storefront featured-image id; matched as a substring of the file name
    featured_image_id: Optional[str] = None

    def refers_to(self, image: Image) -> bool:
        """True if this variant displays image."""
        if self.media_id is not None:
            return image.media_id == self.media_id
        if self.featured_image_id:
            return self.featured_image_id in image.media_id
        return False

    def matches(self, selected: Mapping[str, str]) -> bool:
        """True if every selected option equals this variant's value."""
        return all(self.options.get(k) == v for k, v in selected.items())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Variant:
        """Build a Variant from a JSON-style mapping.

        options may be a mapping or a positional list; list values are named
        option1, option2, ... Raises ValueError for any other options type.
        """
        media = data.get("media_id")
        featured = None
        if isinstance(data.get("featured_image"), dict):
            fid = data["featured_image"].get("id")
            featured = str(fid) if fid is not None else None
        return cls(
            options=_parse_options(data.get("options")),
            available=bool(data.get("available", True)),
            media_id=str(media) if media is not None else None,
            id=str(data["id"]) if data.get("id") is not None else None,
            title=str(data.get("title", "")),
            featured_image_id=featured,
        )


@dataclass(frozen=True)
class ImageChanged:
    """Payload of the image_changed notification."""
    previous_index: int
    current_index: int
    image: Optional[Image]


@dataclass(frozen=True)
class VariantChanged:
    """Payload of a host-dispatched variant_changed event.

    Carries either selected_options or a variant, never both required.
    """
    selected_options: Optional[Mapping[str, str]] = None
    variant: Optional[Variant] = None


@dataclass
class ThumbTexture:
    """A thumbnail texture for the strip."""
    texture: Optional[Any] = None  # rl Texture2D
    size: Tuple[int, int] = (0, 0)
    src_path: str = ""
    ready: bool = False
