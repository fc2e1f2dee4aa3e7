"""Gallery commands.

InputHandler turns raw input into these; CommandQueue runs them against an
AppState. can_execute() guards keep navigation inert while the zoom overlay
is open.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from collections import deque
from typing import TYPE_CHECKING, Deque, List, NamedTuple

if TYPE_CHECKING:
    from .state import AppState

from .config import STRIP_WHEEL_STEP
from .logging import log
from .types import VariantChanged


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, state: "AppState") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, state: "AppState") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


def _has_images(state: "AppState") -> bool:
    return state.navigator is not None and state.navigator.image_count > 0


# ═══════════════════════════════════════════════════════════════════════════
# Navigation Commands
# ═══════════════════════════════════════════════════════════════════════════

class NavigateNext(Command):
    """Navigate to next image (wraps around)."""

    def can_execute(self, state: "AppState") -> bool:
        return _has_images(state) and not state.overlay.is_open

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] NavigateNext from {state.index}")
        return state.navigator.next()


class NavigatePrev(Command):
    """Navigate to previous image (wraps around)."""

    def can_execute(self, state: "AppState") -> bool:
        return _has_images(state) and not state.overlay.is_open

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] NavigatePrev from {state.index}")
        return state.navigator.prev()


@dataclass
class SwitchTo(Command):
    """Navigate to specific index (e.g., from thumbnail click)."""
    target_index: int

    def can_execute(self, state: "AppState") -> bool:
        return (_has_images(state) and
                not state.overlay.is_open and
                state.navigator.state.is_valid(self.target_index) and
                self.target_index != state.index)

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] SwitchTo: {state.index} -> {self.target_index}")
        return state.navigator.switch_to(self.target_index)


class GoToFirst(Command):
    """Jump to the first image."""

    def can_execute(self, state: "AppState") -> bool:
        return _has_images(state) and not state.overlay.is_open

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log("[CMD] GoToFirst")
        return state.navigator.go_to_first()


class GoToLast(Command):
    """Jump to the last image."""

    def can_execute(self, state: "AppState") -> bool:
        return _has_images(state) and not state.overlay.is_open

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log("[CMD] GoToLast")
        return state.navigator.go_to_last()


# ═══════════════════════════════════════════════════════════════════════════
# Keyboard Focus Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class FocusThumbnail(Command):
    """Move keyboard focus between thumbnails without switching images."""
    step: int = 1

    def can_execute(self, state: "AppState") -> bool:
        return _has_images(state) and not state.overlay.is_open

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        idx = state.input.move_focus(self.step, state.count, state.index)
        log(f"[CMD] FocusThumbnail: focus={idx}")
        return True


class ActivateFocused(Command):
    """Switch to the keyboard-focused thumbnail."""

    def can_execute(self, state: "AppState") -> bool:
        return (_has_images(state) and
                not state.overlay.is_open and
                0 <= state.input.focus_index < state.count)

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] ActivateFocused: {state.input.focus_index}")
        return state.navigator.switch_to(state.input.focus_index)


@dataclass
class ScrollStrip(Command):
    """Scroll the thumbnail strip with the wheel."""
    delta: float  # Positive = scroll up

    def can_execute(self, state: "AppState") -> bool:
        return (state.navigator is not None and
                state.navigator.host.scroll_container is not None)

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.navigator.host.scroll_container.scroll_by(-self.delta * STRIP_WHEEL_STEP)
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Overlay Commands
# ═══════════════════════════════════════════════════════════════════════════

class OpenOverlay(Command):
    """Open the zoom overlay on the active image."""

    def can_execute(self, state: "AppState") -> bool:
        return _has_images(state) and not state.overlay.is_open

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] OpenOverlay on {state.index}")
        return state.overlay.open(state.index)


class CloseOverlay(Command):
    """Close the zoom overlay."""

    def can_execute(self, state: "AppState") -> bool:
        return state.overlay.is_open

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log("[CMD] CloseOverlay")
        return state.overlay.close()


# ═══════════════════════════════════════════════════════════════════════════
# Variant Commands
# ═══════════════════════════════════════════════════════════════════════════

class CycleVariant(Command):
    """Select the next available variant, as a product form would."""

    def can_execute(self, state: "AppState") -> bool:
        return state.variant_sync is not None and bool(state.available_variants)

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        variant = state.cycle_variant()
        log(f"[CMD] CycleVariant: {variant.title or dict(variant.options)!r}")
        state.variant_sync.dispatch(VariantChanged(variant=variant))
        return True


@dataclass
class SelectOption(Command):
    """Pick one option value (swatch click)."""
    option: str
    value: str

    def can_execute(self, state: "AppState") -> bool:
        return state.variant_sync is not None

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] SelectOption: {self.option}={self.value}")
        state.variant_sync.select_option(self.option, self.value)
        return True


# ═══════════════════════════════════════════════════════════════════════════
# App Control Commands
# ═══════════════════════════════════════════════════════════════════════════

class CloseApp(Command):
    """Close the application."""

    def execute(self, state: "AppState") -> bool:
        log("[CMD] CloseApp")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Command Queue
# ═══════════════════════════════════════════════════════════════════════════

class HistoryEntry(NamedTuple):
    """A command that acted, with the active index around it."""
    command: Command
    previous_index: int
    current_index: int

    @property
    def moved(self) -> bool:
        return self.previous_index != self.current_index


class CommandQueue:
    """Runs commands against an AppState.

    Commands that act are recorded with the active index before and after,
    so the gallery path a user took can be replayed or logged.
    """

    def __init__(self, max_history: int = 100):
        self._history: Deque[HistoryEntry] = deque(maxlen=max(0, max_history))

    def execute(self, command: Command, state: "AppState") -> bool:
        if not command.can_execute(state):
            return False
        before = state.index
        acted = command.execute(state)
        if acted:
            self._history.append(HistoryEntry(command, before, state.index))
        return acted

    @property
    def history(self) -> List[HistoryEntry]:
        return list(self._history)

    def visited(self) -> List[int]:
        """Indices navigated to, oldest first. Non-moving commands are skipped."""
        return [e.current_index for e in self._history if e.moved]

    def clear_history(self) -> None:
        self._history.clear()
