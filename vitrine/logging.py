"""Frame-stamped log lines with per-tag muting.

Every message starts with a bracketed tag ("[NAV]", "[VARIANT][ERR]").
The first tag decides whether the line is written at all.
"""

from __future__ import annotations
import re
import sys
import time
from typing import Iterable, Optional, TextIO

from .config import LOG_MUTED_TAGS

_TAG_RE = re.compile(r"^\[([A-Z_]+)\]")


def tag_of(msg: str) -> Optional[str]:
    """Leading tag of a message ("NAV" for "[NAV][WARN] ..."), or None."""
    m = _TAG_RE.match(msg)
    return m.group(1) if m else None


class Logger:
    """Writes "[elapsed F frame] msg" lines to a stream, stderr as fallback."""

    def __init__(self, stream: Optional[TextIO] = None,
                 muted: Iterable[str] = LOG_MUTED_TAGS):
        self._start = time.perf_counter()
        self.frame = 0
        self.stream = stream
        self.muted = set(muted)

    def increment_frame(self) -> None:
        self.frame += 1

    def mute(self, *tags: str) -> None:
        self.muted.update(tags)

    def unmute(self, *tags: str) -> None:
        self.muted.difference_update(tags)

    def format(self, msg: str) -> str:
        elapsed = time.perf_counter() - self._start
        return f"[{elapsed:7.3f}s F{self.frame:06d}] {msg}\n"

    def log(self, msg: str) -> bool:
        """Write msg unless its tag is muted. Returns True if written."""
        if tag_of(msg) in self.muted:
            return False
        line = self.format(msg)
        out = self.stream if self.stream is not None else sys.stdout
        try:
            out.write(line)
            out.flush()
        except (OSError, ValueError):
            # closed or detached stdout (pythonw, redirected pipe)
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except (OSError, ValueError):
                return False
        return True


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def increment_frame() -> None:
    get_logger().increment_frame()
