"""Application - main loop orchestrator.

The Application class coordinates:
- Input polling (raylib) -> InputSnapshot -> commands (via InputHandler)
- Command execution against the navigator
- Rendering (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import os
import sys
import traceback

from .state import AppState
from .renderer import Renderer
from .input_handler import InputHandler, InputSnapshot
from .commands import Command, CloseApp, CommandQueue
from .config import TARGET_FPS, WINDOW_TITLE, KEY_SHIFT_LEFT, KEY_SHIFT_RIGHT
from . import config as cfg
from .image_utils import list_images
from .loader import build_state
from .logging import log, increment_frame
from .rl_compat import rl, init_window
from .variants import load_variants


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application(state=build_state(paths, variants))
        app.run()
    """

    state: AppState = field(default_factory=AppState)
    renderer: Renderer = field(default_factory=Renderer)
    input_handler: InputHandler = field(default_factory=InputHandler)
    queue: CommandQueue = field(default_factory=CommandQueue)
    running: bool = False

    def initialize(self) -> bool:
        """Open the window. Returns True if initialization successful."""
        try:
            init_window(self.state.screenW, self.state.screenH, WINDOW_TITLE)
            rl.SetTargetFPS(TARGET_FPS)
        except Exception as e:
            log(f"[INIT][CRITICAL] Failed to initialize window: {e!r}")
            return False
        log("[APP] Application initialized")
        return True

    def run(self) -> None:
        """Run the main loop until the window closes or CloseApp."""
        self.running = True
        log("[APP] Starting main loop")

        try:
            while self.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
        finally:
            self._cleanup()

    def poll_input(self) -> InputSnapshot:
        """Read this frame's input from raylib."""
        pos = rl.GetMousePosition()
        keys = set()
        key = rl.GetKeyPressed()
        while key:
            keys.add(key)
            key = rl.GetKeyPressed()
        return InputSnapshot(
            x=pos.x,
            y=pos.y,
            left_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
            left_released=rl.IsMouseButtonReleased(rl.MOUSE_BUTTON_LEFT),
            wheel=rl.GetMouseWheelMove(),
            keys=frozenset(keys),
            shift=rl.IsKeyDown(KEY_SHIFT_LEFT) or rl.IsKeyDown(KEY_SHIFT_RIGHT),
        )

    def _frame(self) -> None:
        """Execute a single frame."""
        if rl.WindowShouldClose():
            self.running = False
            return

        commands = self.input_handler.translate(self.state, self.poll_input())
        self.execute(commands)
        if not self.running:
            return

        self.renderer.draw_frame(self.state)
        increment_frame()

    def execute(self, commands: List[Command]) -> None:
        """Run commands in order; CloseApp stops the loop."""
        for cmd in commands:
            if isinstance(cmd, CloseApp):
                cmd.execute(self.state)
                self.running = False
                return
            self.queue.execute(cmd, self.state)

    def _cleanup(self) -> None:
        log("[APP] Starting cleanup")
        self.renderer.textures.unload_all()
        if self.state.variant_sync is not None:
            self.state.variant_sync.detach()
        if self.state.navigator is not None:
            self.state.navigator.teardown()
        rl.CloseWindow()
        log("[APP] Cleanup complete")

def parse_args(argv: Sequence[str]) -> dict:
    """Parse [DIR] [--variants FILE] [--start N] [--verify]."""
    opts = {"path": None, "variants": None, "start": 0, "verify": False}
    it = iter(argv)
    for a in it:
        if a == "--variants":
            opts["variants"] = next(it, None)
        elif a == "--start":
            try:
                opts["start"] = int(next(it, "0"))
            except ValueError:
                log("[ARGS][WARN] --start expects an integer; using 0")
        elif a == "--verify":
            opts["verify"] = True
        elif opts["path"] is None:
            opts["path"] = a
    return opts


def main(argv: Optional[Sequence[str]] = None) -> int:
    log("[MAIN] Starting application")
    opts = parse_args(sys.argv[1:] if argv is None else argv)

    dirpath = os.path.abspath(opts["path"] or os.getcwd())
    if not os.path.isdir(dirpath):
        dirpath = os.path.dirname(dirpath)
    paths = list_images(dirpath)
    log(f"[DIR] Found {len(paths)} images in {dirpath}")

    variants = load_variants(opts["variants"]) if opts["variants"] else []
    if opts["verify"]:
        cfg.DEBUG_VERIFY = True

    app = Application(state=build_state(paths, variants, opts["start"]))
    if not app.initialize():
        return 1
    app.run()
    return 0
