from __future__ import annotations

from vitrine.diagnostics import (
    check_layout, displayed_rect, image_fill, image_fills_width, measure_space,
)
from vitrine.navigator import GalleryNavigator
from vitrine.types import Image, Rect

from conftest import make_host


def test_space_report_flags_whitespace():
    report = measure_space(1000, 200, 700)
    assert report.available == 800
    assert report.utilization == 0.875
    assert report.whitespace
    assert "WHITESPACE" in report.describe()


def test_space_report_ok_above_threshold():
    report = measure_space(1000, 200, 790)
    assert not report.whitespace
    assert report.describe().endswith("OK")


def test_space_report_without_room():
    report = measure_space(200, 200, 0)
    assert report.utilization == 0.0


def test_image_fill():
    parent = Rect(0, 0, 100, 50)
    assert image_fill(Rect(0, 0, 50, 50), parent) == 0.5
    assert image_fills_width(Rect(0, 0, 99, 50), parent)
    assert not image_fills_width(Rect(0, 0, 97, 50), parent)


def test_displayed_rect_letterboxes():
    img = Image(media_id="a", position=0, width=200, height=100)
    assert displayed_rect(img, Rect(0, 0, 400, 400)) == Rect(0, 100, 400, 200)
    unknown = Image(media_id="b", position=1)
    assert displayed_rect(unknown, Rect(0, 0, 400, 400)) == Rect(0, 0, 400, 400)


def test_check_layout_measures_active_image():
    # 400x300 images in a 600x400 pane -> 533px wide
    nav = GalleryNavigator(make_host(2))
    report = check_layout(nav, Rect(0, 0, 800, 400))
    assert report.available == 680
    assert round(report.main_width) == 533
    assert report.whitespace


def test_check_layout_skipped_without_strip():
    nav = GalleryNavigator(make_host(2, strip_rect=None))
    assert check_layout(nav, Rect(0, 0, 800, 400)) is None


def test_verify_reports_tampered_host(nav4):
    assert nav4.verify() == []
    nav4.host.pairs[3].pane.active = True
    nav4.host.pairs[2].thumbnail.tab_index = 0
    problems = nav4.verify()
    assert "active pairs [0, 3], expected [0]" in problems
    assert "thumbnail 2 tab_index=0" in problems


def test_verify_reports_hidden_active_thumbnail(nav4):
    nav4.host.scroll_container.scroll_y = 300
    assert nav4.verify() == ["active thumbnail 0 not fully visible"]


def test_debug_verify_logs_after_switch(nav4, monkeypatch):
    from vitrine import config as cfg
    calls = []
    monkeypatch.setattr(cfg, "DEBUG_VERIFY", True)
    monkeypatch.setattr(nav4, "verify", lambda: calls.append(1) or [])
    nav4.next()
    assert calls == [1]
