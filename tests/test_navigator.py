from __future__ import annotations

import pytest

from vitrine.events import EventBus, IMAGE_CHANGED
from vitrine.host import GalleryHost
from vitrine.navigator import GalleryNavigator
from vitrine.types import Rect

from conftest import make_host


def test_switch_to_sets_index_and_emits_once(nav4, events):
    assert nav4.switch_to(2) is True
    assert nav4.current_index == 2
    assert len(events) == 1
    assert (events[0].previous_index, events[0].current_index) == (0, 2)
    assert events[0].image.media_id == "m2"


def test_switch_to_same_index_is_silent(nav4, events):
    nav4.switch_to(1)
    assert nav4.switch_to(1) is False
    assert nav4.current_index == 1
    assert len(events) == 1


@pytest.mark.parametrize("index", [-1, 4, 99, 1.5, "2", None, True])
def test_switch_to_out_of_range_is_noop(nav4, events, index):
    assert nav4.switch_to(index) is False
    assert nav4.current_index == 0
    assert events == []
    assert nav4.verify() == []


def test_next_sequence_wraps_around(nav4):
    seen = []
    for _ in range(4):
        nav4.next()
        seen.append(nav4.current_index)
    assert seen == [1, 2, 3, 0]


@pytest.mark.parametrize("start", range(5))
def test_next_len_times_returns_to_start(start):
    nav = GalleryNavigator(make_host(5))
    nav.switch_to(start)
    for _ in range(nav.image_count):
        nav.next()
    assert nav.current_index == start


@pytest.mark.parametrize("start", range(4))
def test_prev_undoes_next(nav4, start):
    nav4.switch_to(start)
    nav4.next()
    nav4.prev()
    assert nav4.current_index == start


def test_prev_from_first_wraps_to_last(nav4, events):
    nav4.prev()
    assert nav4.current_index == 3
    assert (events[-1].previous_index, events[-1].current_index) == (0, 3)


def test_go_to_first_and_last(nav4):
    assert nav4.go_to_last() is True
    assert nav4.current_index == 3
    assert nav4.go_to_last() is False
    assert nav4.go_to_first() is True
    assert nav4.current_index == 0


def test_single_image_navigation_is_noop():
    nav = GalleryNavigator(make_host(1))
    assert nav.next() is False
    assert nav.prev() is False
    assert nav.current_index == 0


def test_empty_gallery():
    nav = GalleryNavigator(GalleryHost())
    assert nav.image_count == 0
    assert nav.current_index == -1
    assert nav.current_image is None
    assert nav.next() is False
    assert nav.prev() is False
    assert nav.go_to_first() is False
    assert nav.go_to_last() is False
    assert nav.verify() == []


def test_adopts_index_marked_active_by_host():
    host = make_host(4)
    host.pairs[2].thumbnail.active = True
    nav = GalleryNavigator(host)
    assert nav.current_index == 2
    assert host.active_indices() == [2]
    assert host.pairs[2].pane.visible
    assert nav.verify() == []


def test_multiple_marked_active_adopts_first_and_normalizes():
    host = make_host(4)
    host.pairs[1].pane.active = True
    host.pairs[3].set_active(True)
    nav = GalleryNavigator(host)
    assert nav.current_index == 1
    assert host.active_indices() == [1]


def test_defaults_to_zero_and_activates_pair(nav4):
    host = nav4.host
    assert nav4.current_index == 0
    assert host.active_indices() == [0]
    assert host.pairs[0].thumbnail.aria_selected
    assert host.pairs[0].thumbnail.tab_index == 0
    assert [p.thumbnail.tab_index for p in host.pairs[1:]] == [-1, -1, -1]


def test_switch_moves_exactly_one_active_pair(nav4):
    nav4.switch_to(3)
    host = nav4.host
    assert host.active_indices() == [3]
    assert not host.pairs[0].pane.visible
    assert host.pairs[3].pane.visible
    assert nav4.verify() == []


def test_thumbnail_scrolled_into_view_only_when_needed():
    # thumbnails at y = 12 + 108 * i, 96px tall; viewport 250px tall
    nav = GalleryNavigator(make_host(6, Rect(0, 0, 120, 250)))
    sc = nav.host.scroll_container
    assert sc.scroll_y == 0

    nav.switch_to(2)
    assert sc.scroll_y == 74
    nav.switch_to(1)
    assert sc.scroll_y == 74
    nav.switch_to(0)
    assert sc.scroll_y == 12
    nav.go_to_last()
    assert sc.scroll_y == 398
    assert nav.verify() == []


def test_missing_scroll_container_does_not_block_switch():
    nav = GalleryNavigator(make_host(4, strip_rect=None))
    assert nav.scroll_enabled is False
    assert nav.switch_to(3) is True
    assert nav.current_index == 3


def test_failing_observer_does_not_break_transition(nav4):
    received = []

    def broken(event):
        raise RuntimeError("observer failure")

    nav4.subscribe(broken)
    nav4.subscribe(received.append)
    assert nav4.switch_to(2) is True
    assert nav4.current_index == 2
    assert len(received) == 1


def test_unsubscribe_and_teardown(nav4):
    received = []
    unsubscribe = nav4.subscribe(received.append)
    nav4.next()
    unsubscribe()
    nav4.next()
    assert len(received) == 1

    nav4.subscribe(received.append)
    nav4.teardown()
    assert nav4.bus.observer_count(IMAGE_CHANGED) == 0


def test_navigators_do_not_share_state():
    a = GalleryNavigator(make_host(3))
    b = GalleryNavigator(make_host(3))
    got_a, got_b = [], []
    a.subscribe(got_a.append)
    b.subscribe(got_b.append)
    a.switch_to(2)
    assert b.current_index == 0
    assert got_b == []
    assert a.bus is not b.bus


def test_shared_bus_can_be_injected():
    bus = EventBus()
    nav = GalleryNavigator(make_host(3), bus=bus)
    received = []
    bus.subscribe(IMAGE_CHANGED, received.append)
    nav.next()
    assert received[0].current_index == 1
