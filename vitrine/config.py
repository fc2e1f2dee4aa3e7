"""Application configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 60

# Window
WINDOW_TITLE = "vitrine"
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 800

# Layout (pixels)
LAYOUT_PADDING = 24
THUMB_STRIP_WIDTH = 132
THUMB_SIZE = 96
THUMB_SPACING = 12
THUMB_HOVER_SCALE = 1.05
THUMB_UNAVAILABLE_ALPHA = 0.35
SWATCH_BAR_HEIGHT = 48

# Input
SWIPE_THRESHOLD = 50.0
STRIP_WHEEL_STEP = 40.0

# Layout diagnostics
MAIN_UTILIZATION_MIN = 0.95
IMAGE_FILL_MIN = 0.98

# Overlay
OVERLAY_BG_ALPHA = 0.85
OVERLAY_FIT_SCALE = 0.92

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_NEXT_IMAGE = 262        # KEY_RIGHT
KEY_NEXT_IMAGE_ALT = 264    # KEY_DOWN
KEY_PREV_IMAGE = 263        # KEY_LEFT
KEY_PREV_IMAGE_ALT = 265    # KEY_UP
KEY_FIRST_IMAGE = 268       # KEY_HOME
KEY_LAST_IMAGE = 269        # KEY_END
KEY_FOCUS_NEXT = 258        # KEY_TAB
KEY_ACTIVATE = 257          # KEY_ENTER
KEY_ACTIVATE_ALT = 32       # KEY_SPACE
KEY_SHIFT_LEFT = 340        # KEY_LEFT_SHIFT
KEY_SHIFT_RIGHT = 344       # KEY_RIGHT_SHIFT
KEY_TOGGLE_ZOOM = 70        # KEY_F
KEY_CYCLE_VARIANT = 86      # KEY_V
KEY_CLOSE = 256             # KEY_ESCAPE

# Thumbnails
THUMB_CACHE_DIR = ".vitrine_cache"

# Supported image extensions
IMG_EXTS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp"})

# Verify gallery invariants after every switch (logs [DIAG] lines)
DEBUG_VERIFY = False

# Log tags to suppress, e.g. {"HOST", "EVENT"}
LOG_MUTED_TAGS = frozenset()
