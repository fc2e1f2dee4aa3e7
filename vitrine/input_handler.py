"""Input Handler - maps raw input snapshots to commands.

The app polls raylib once per frame into an InputSnapshot; translate() turns
that snapshot into commands. Keeping translate() free of raylib calls lets
the mapping run headless.

Swipe convention: a horizontal drag in the negative x direction (content
pushed left) shows the next image, a positive drag shows the previous one.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, List, Optional

if TYPE_CHECKING:
    from .state import AppState

from .commands import (
    Command,
    NavigateNext, NavigatePrev, SwitchTo, GoToFirst, GoToLast,
    FocusThumbnail, ActivateFocused, ScrollStrip,
    OpenOverlay, CloseOverlay,
    CycleVariant, SelectOption,
    CloseApp,
)
from .config import (
    SWIPE_THRESHOLD,
    KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT,
    KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT,
    KEY_FIRST_IMAGE, KEY_LAST_IMAGE,
    KEY_FOCUS_NEXT, KEY_ACTIVATE, KEY_ACTIVATE_ALT,
    KEY_TOGGLE_ZOOM, KEY_CYCLE_VARIANT, KEY_CLOSE,
)
from .types import Rect


@dataclass(frozen=True)
class InputSnapshot:
    """Input gathered for one frame."""
    x: float = 0.0
    y: float = 0.0
    left_pressed: bool = False
    left_released: bool = False
    wheel: float = 0.0
    keys: FrozenSet[int] = frozenset()
    shift: bool = False


@dataclass
class InputHandler:
    """Translates input snapshots into commands."""

    # Key bindings (raylib key codes, can be customized)
    key_next: List[int] = field(default_factory=lambda: [KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT])
    key_prev: List[int] = field(default_factory=lambda: [KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT])
    key_first: int = KEY_FIRST_IMAGE
    key_last: int = KEY_LAST_IMAGE
    key_focus: int = KEY_FOCUS_NEXT
    key_activate: List[int] = field(default_factory=lambda: [KEY_ACTIVATE, KEY_ACTIVATE_ALT])
    key_zoom: int = KEY_TOGGLE_ZOOM
    key_variant: int = KEY_CYCLE_VARIANT
    key_close: int = KEY_CLOSE
    swipe_threshold: float = SWIPE_THRESHOLD

    def main_rect(self, state: "AppState") -> Optional[Rect]:
        """Rect of the active main image pane."""
        nav = state.navigator
        if nav is None or nav.image_count == 0:
            return None
        return nav.host.pairs[nav.current_index].pane.rect

    def translate_keys(self, state: "AppState", snap: InputSnapshot) -> List[Command]:
        """Keyboard part of translate()."""
        keys = snap.keys
        commands: List[Command] = []

        if any(k in keys for k in self.key_next):
            commands.append(NavigateNext())
        elif any(k in keys for k in self.key_prev):
            commands.append(NavigatePrev())

        if self.key_first in keys:
            commands.append(GoToFirst())
        elif self.key_last in keys:
            commands.append(GoToLast())

        if self.key_focus in keys:
            commands.append(FocusThumbnail(step=-1 if snap.shift else 1))
        if any(k in keys for k in self.key_activate):
            commands.append(ActivateFocused())

        if self.key_zoom in keys:
            commands.append(OpenOverlay())
        if self.key_variant in keys:
            commands.append(CycleVariant())
        return commands

    def translate_pointer(self, state: "AppState", snap: InputSnapshot) -> List[Command]:
        """Pointer part of translate(): clicks, swipes, wheel."""
        commands: List[Command] = []
        nav = state.navigator
        if nav is None:
            return commands
        host = nav.host
        main = self.main_rect(state)

        state.input.hover_index = host.thumbnail_at(snap.x, snap.y)

        if snap.wheel != 0.0 and host.scroll_container is not None:
            if host.scroll_container.viewport.contains_point(snap.x, snap.y):
                commands.append(ScrollStrip(delta=snap.wheel))

        if snap.left_pressed:
            if state.input.hover_index >= 0:
                commands.append(SwitchTo(target_index=state.input.hover_index))
                return commands
            swatch = host.swatch_at(snap.x, snap.y)
            if swatch >= 0:
                s = host.swatches[swatch]
                commands.append(SelectOption(option=s.option, value=s.value))
                return commands
            if main is not None and main.contains_point(snap.x, snap.y):
                state.input.start_drag(snap.x, snap.y)

        if snap.left_released and state.input.is_dragging:
            direction = state.input.end_drag(snap.x, snap.y, self.swipe_threshold)
            if direction == -1:
                commands.append(NavigateNext())
            elif direction == 1:
                commands.append(NavigatePrev())
            elif main is not None and main.contains_point(snap.x, snap.y):
                commands.append(OpenOverlay())

        return commands

    def translate(self, state: "AppState", snap: InputSnapshot) -> List[Command]:
        """Translate one frame of input into commands."""
        if self.key_close in snap.keys:
            if state.overlay.is_open:
                return [CloseOverlay()]
            return [CloseApp()]

        if state.overlay.is_open:
            state.input.cancel_drag()
            if snap.left_pressed:
                return [CloseOverlay()]
            return []

        return self.translate_keys(state, snap) + self.translate_pointer(state, snap)
