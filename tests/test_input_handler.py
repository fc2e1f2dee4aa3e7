from __future__ import annotations

import pytest

from vitrine.commands import (
    ActivateFocused, CloseApp, CloseOverlay, CommandQueue, CycleVariant,
    FocusThumbnail, GoToFirst, GoToLast, NavigateNext, NavigatePrev,
    OpenOverlay, ScrollStrip, SwitchTo,
)
from vitrine.config import (
    KEY_ACTIVATE, KEY_CLOSE, KEY_CYCLE_VARIANT, KEY_FIRST_IMAGE, KEY_FOCUS_NEXT,
    KEY_LAST_IMAGE, KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT, KEY_PREV_IMAGE,
    KEY_PREV_IMAGE_ALT, KEY_TOGGLE_ZOOM,
)
from vitrine.input_handler import InputHandler, InputSnapshot


def run(state, *snaps, handler=None):
    handler = handler or InputHandler()
    queue = CommandQueue()
    produced = []
    for snap in snaps:
        for cmd in handler.translate(state, snap):
            produced.append(cmd)
            queue.execute(cmd, state)
    return produced


def keys(*codes, shift=False):
    return InputSnapshot(x=-1, y=-1, keys=frozenset(codes), shift=shift)


@pytest.mark.parametrize("code,cls", [
    (KEY_NEXT_IMAGE, NavigateNext),
    (KEY_NEXT_IMAGE_ALT, NavigateNext),
    (KEY_PREV_IMAGE, NavigatePrev),
    (KEY_PREV_IMAGE_ALT, NavigatePrev),
    (KEY_FIRST_IMAGE, GoToFirst),
    (KEY_LAST_IMAGE, GoToLast),
    (KEY_TOGGLE_ZOOM, OpenOverlay),
    (KEY_CYCLE_VARIANT, CycleVariant),
])
def test_key_mapping(app_state, code, cls):
    commands = InputHandler().translate(app_state, keys(code))
    assert [type(c) for c in commands] == [cls]


def test_arrow_keys_navigate_circularly(app_state):
    run(app_state, keys(KEY_PREV_IMAGE))
    assert app_state.index == 3
    run(app_state, keys(KEY_NEXT_IMAGE), keys(KEY_NEXT_IMAGE_ALT))
    assert app_state.index == 1


def test_home_end(app_state):
    run(app_state, keys(KEY_LAST_IMAGE))
    assert app_state.index == 3
    run(app_state, keys(KEY_FIRST_IMAGE))
    assert app_state.index == 0


def test_click_on_thumbnail_switches(app_state):
    # thumbnails are 96px squares at x=12, y = 12 + 108 * i
    commands = run(app_state, InputSnapshot(x=50, y=150, left_pressed=True))
    assert commands == [SwitchTo(target_index=1)]
    assert app_state.index == 1


def test_click_on_active_thumbnail_is_noop(app_state, events):
    run(app_state, InputSnapshot(x=50, y=50, left_pressed=True))
    assert app_state.index == 0
    assert events == []


def test_hover_tracks_thumbnail(app_state):
    run(app_state, InputSnapshot(x=50, y=250))
    assert app_state.input.hover_index == 2
    run(app_state, InputSnapshot(x=500, y=250))
    assert app_state.input.hover_index == -1


def test_swipe_negative_direction_goes_next(app_state):
    run(app_state,
        InputSnapshot(x=500, y=200, left_pressed=True),
        InputSnapshot(x=430, y=205, left_released=True))
    assert app_state.index == 1


def test_swipe_positive_direction_goes_prev(app_state):
    run(app_state,
        InputSnapshot(x=500, y=200, left_pressed=True),
        InputSnapshot(x=570, y=200, left_released=True))
    assert app_state.index == 3


def test_short_drag_is_a_click_that_opens_overlay(app_state):
    commands = run(app_state,
                   InputSnapshot(x=500, y=200, left_pressed=True),
                   InputSnapshot(x=470, y=200, left_released=True))
    assert [type(c) for c in commands] == [OpenOverlay]
    assert app_state.index == 0
    assert app_state.overlay.is_open


@pytest.mark.parametrize("end_x", [450, 550])
def test_drag_of_exactly_threshold_is_not_a_swipe(app_state, end_x):
    commands = run(app_state,
                   InputSnapshot(x=500, y=200, left_pressed=True),
                   InputSnapshot(x=end_x, y=200, left_released=True))
    assert [type(c) for c in commands] == [OpenOverlay]
    assert app_state.index == 0
    assert app_state.overlay.is_open


def test_swipe_threshold_is_configurable(app_state):
    handler = InputHandler(swipe_threshold=20.0)
    run(app_state,
        InputSnapshot(x=500, y=200, left_pressed=True),
        InputSnapshot(x=470, y=200, left_released=True),
        handler=handler)
    assert app_state.index == 1


def test_mostly_vertical_drag_is_not_a_swipe(app_state):
    run(app_state,
        InputSnapshot(x=500, y=100, left_pressed=True),
        InputSnapshot(x=440, y=380, left_released=True))
    assert app_state.index == 0


def test_escape_closes_overlay_then_app(app_state):
    run(app_state, keys(KEY_TOGGLE_ZOOM))
    assert app_state.overlay.is_open
    commands = run(app_state, keys(KEY_CLOSE))
    assert [type(c) for c in commands] == [CloseOverlay]
    assert not app_state.overlay.is_open
    commands = InputHandler().translate(app_state, keys(KEY_CLOSE))
    assert [type(c) for c in commands] == [CloseApp]


def test_overlay_blocks_navigation(app_state):
    run(app_state, keys(KEY_TOGGLE_ZOOM))
    commands = run(app_state, keys(KEY_NEXT_IMAGE))
    assert commands == []
    assert app_state.index == 0
    commands = run(app_state, InputSnapshot(x=10, y=10, left_pressed=True))
    assert [type(c) for c in commands] == [CloseOverlay]
    assert not app_state.overlay.is_open


def test_tab_focus_and_enter_activate(app_state):
    run(app_state, keys(KEY_FOCUS_NEXT), keys(KEY_FOCUS_NEXT))
    assert app_state.input.focus_index == 2
    assert app_state.index == 0
    run(app_state, keys(KEY_ACTIVATE))
    assert app_state.index == 2
    run(app_state, keys(KEY_FOCUS_NEXT, shift=True))
    assert app_state.input.focus_index == 1


def test_shift_tab_wraps_from_current(app_state):
    commands = run(app_state, keys(KEY_FOCUS_NEXT, shift=True))
    assert commands == [FocusThumbnail(step=-1)]
    assert app_state.input.focus_index == 3


def test_activate_without_focus_does_nothing(app_state):
    commands = InputHandler().translate(app_state, keys(KEY_ACTIVATE))
    assert [type(c) for c in commands] == [ActivateFocused]
    assert CommandQueue().execute(commands[0], app_state) is False


def test_wheel_over_strip_scrolls(app_state):
    sc = app_state.navigator.host.scroll_container
    commands = run(app_state, InputSnapshot(x=50, y=200, wheel=-0.5))
    assert commands == [ScrollStrip(delta=-0.5)]
    assert sc.scroll_y == 20.0
    run(app_state, InputSnapshot(x=500, y=200, wheel=-0.5))
    assert sc.scroll_y == 20.0
    # content is 444px tall in a 400px viewport
    run(app_state, InputSnapshot(x=50, y=200, wheel=-5.0))
    assert sc.scroll_y == 44.0
