from __future__ import annotations

import os

from PIL import Image as PILImage

from vitrine.image_utils import (
    build_thumbnail, get_thumb_cache_path, is_supported_image,
    list_images, load_gallery_images, probe_image_size,
)


def write_png(path, size=(300, 150), color=(200, 40, 40)):
    PILImage.new("RGB", size, color).save(path)
    return str(path)


def test_supported_extensions():
    assert is_supported_image("a.PNG")
    assert is_supported_image("photo.jpeg")
    assert not is_supported_image("notes.txt")
    assert not is_supported_image("noext")


def test_list_images_filters_and_sorts(tmp_path):
    write_png(tmp_path / "b.png")
    write_png(tmp_path / "a.jpg")
    (tmp_path / "readme.txt").write_text("x")
    (tmp_path / "sub.png").mkdir()
    names = [os.path.basename(p) for p in list_images(str(tmp_path))]
    assert names == ["a.jpg", "b.png"]


def test_list_images_missing_dir(tmp_path):
    assert list_images(str(tmp_path / "nope")) == []


def test_image_size_and_bad_file(tmp_path):
    good = write_png(tmp_path / "good.png", size=(64, 32))
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    assert probe_image_size(good) == (64, 32)
    assert probe_image_size(str(bad)) is None


def test_load_gallery_images_skips_unreadable(tmp_path):
    a = write_png(tmp_path / "a.png", size=(10, 20))
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"\x00")
    c = write_png(tmp_path / "c.png")
    images = load_gallery_images([a, str(bad), c])
    assert [img.media_id for img in images] == ["a.png", "c.png"]
    assert [img.position for img in images] == [0, 1]
    assert (images[0].width, images[0].height) == (10, 20)


def test_build_thumbnail_bounded_and_cached(tmp_path):
    src = write_png(tmp_path / "wide.png", size=(300, 150))
    cache = str(tmp_path / "cache")
    out = build_thumbnail(src, size=96, cache_dir=cache)
    assert out == get_thumb_cache_path(src, cache)
    with PILImage.open(out) as thumb:
        assert thumb.size == (96, 48)
    mtime = os.stat(out).st_mtime_ns
    assert build_thumbnail(src, size=96, cache_dir=cache) == out
    assert os.stat(out).st_mtime_ns == mtime


def test_build_thumbnail_bad_source(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"nope")
    assert build_thumbnail(str(bad), cache_dir=str(tmp_path / "cache")) is None
