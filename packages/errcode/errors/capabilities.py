"""Injectable identity and stack-capture capabilities for error construction.

Error factories call ``new_id`` and ``capture_trace`` instead of reaching for
concrete implementations so hosts can swap them (for example to disable stack
capture in hot paths). Swapping is a single reference assignment.
"""

from __future__ import annotations

import os
import traceback
from typing import Callable

from packages.errcode.ids import generate_ulid_str

IdGenerator = Callable[[], str]
TraceCapturer = Callable[[], str]

STACK_HEADER = "Stack (most recent call last):\n"

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


def capture_stack_trace(*, limit: int | None = None) -> str:
    """Return the current call stack as text, excluding this package's frames.

    ``limit`` keeps only the innermost ``limit`` caller frames. The result
    always ends with a newline.
    """
    frames = [
        frame
        for frame in traceback.extract_stack()
        if not os.path.abspath(frame.filename).startswith(_PACKAGE_DIR)
    ]
    if limit is not None:
        frames = frames[-limit:] if limit > 0 else []
    return STACK_HEADER + "".join(traceback.format_list(frames))


def no_stack_trace() -> str:
    """Trace capturer used when stack capture is disabled."""
    return ""


_id_generator: IdGenerator = generate_ulid_str
_trace_capturer: TraceCapturer = capture_stack_trace


def new_id() -> str:
    """Return a fresh globally unique error identifier."""
    return _id_generator()


def capture_trace() -> str:
    """Return the diagnostic stack text for an error being constructed."""
    return _trace_capturer()


def set_id_generator(generator: IdGenerator | None) -> None:
    """Install ``generator`` for new error ids; ``None`` restores ULIDs."""
    global _id_generator
    _id_generator = generator if generator is not None else generate_ulid_str


def set_trace_capturer(capturer: TraceCapturer | None) -> None:
    """Install ``capturer`` for new error traces; ``None`` restores the default."""
    global _trace_capturer
    _trace_capturer = capturer if capturer is not None else capture_stack_trace
