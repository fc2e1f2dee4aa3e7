"""Image utilities - listing, probing and thumbnail caching with Pillow."""

from __future__ import annotations
import os
import hashlib
from typing import List, Optional, Sequence, Tuple

from PIL import Image as PILImage, UnidentifiedImageError

from .config import IMG_EXTS, THUMB_CACHE_DIR, THUMB_SIZE
from .logging import log
from .types import Image


def is_supported_image(filepath: str) -> bool:
    """Check if file has a supported image extension."""
    ext = os.path.splitext(filepath)[1].lower()
    return ext in IMG_EXTS


def list_images(dirpath: str) -> List[str]:
    """List all supported image files in directory, sorted by name.

    Args:
        dirpath: Directory path to scan.

    Returns:
        List of full paths to image files.
    """
    try:
        names = sorted(os.listdir(dirpath))
    except OSError as e:
        log(f"[IMG][ERR] Cannot list {dirpath}: {e!r}")
        return []

    result = []
    for name in names:
        path = os.path.join(dirpath, name)
        if os.path.isfile(path) and is_supported_image(name):
            result.append(path)
    return result


def probe_image_size(filepath: str) -> Optional[Tuple[int, int]]:
    """Read image dimensions from the file header without decoding pixels.

    Returns:
        Tuple of (width, height) or None if the file is not a readable image.
    """
    try:
        with PILImage.open(filepath) as img:
            return img.size
    except (OSError, UnidentifiedImageError) as e:
        log(f"[IMG][ERR] Probe failed for {os.path.basename(filepath)}: {e!r}")
        return None


def load_gallery_images(paths: Sequence[str]) -> List[Image]:
    """Build gallery Images from files. Unreadable files are skipped.

    The media id of each image is its file name.
    """
    images: List[Image] = []
    for path in paths:
        size = probe_image_size(path)
        if size is None:
            continue
        images.append(Image(
            media_id=os.path.basename(path),
            position=len(images),
            path=path,
            width=size[0],
            height=size[1],
        ))
    log(f"[IMG] Loaded {len(images)} of {len(paths)} images")
    return images


def get_thumb_cache_path(filepath: str, cache_dir: str = THUMB_CACHE_DIR) -> str:
    """Generate cache path for thumbnail based on file path and modification time."""
    try:
        stat = os.stat(filepath)
        key_data = f"{filepath}|{stat.st_mtime_ns}|{stat.st_size}".encode('utf-8')
    except OSError:
        key_data = filepath.encode('utf-8')

    cache_key = hashlib.sha1(key_data).hexdigest()
    os.makedirs(cache_dir, exist_ok=True)
    return os.path.join(cache_dir, f"{cache_key}_thumb.png")


def build_thumbnail(filepath: str, size: int = THUMB_SIZE,
                    cache_dir: str = THUMB_CACHE_DIR) -> Optional[str]:
    """Write (or reuse) a square-bounded PNG thumbnail. Returns its path."""
    out = get_thumb_cache_path(filepath, cache_dir)
    if os.path.isfile(out):
        return out
    try:
        with PILImage.open(filepath) as img:
            thumb = img.convert("RGBA")
            thumb.thumbnail((size, size), PILImage.Resampling.LANCZOS)
            thumb.save(out, format="PNG", optimize=True)
        return out
    except (OSError, UnidentifiedImageError) as e:
        log(f"[THUMB][ERR] {os.path.basename(filepath)}: {e!r}")
        return None
