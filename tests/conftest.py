"""Shared fixtures for errcode tests."""

from __future__ import annotations

import logging
from itertools import count
from typing import Iterator

import pytest

from packages.errcode.errors import set_id_generator, set_trace_capturer

FIXED_TRACE = "frame-a\nframe-b\n"


@pytest.fixture
def fixed_trace() -> Iterator[str]:
    """Make every constructed error carry the same two-line stack text."""
    set_trace_capturer(lambda: FIXED_TRACE)
    yield FIXED_TRACE
    set_trace_capturer(None)


@pytest.fixture
def sequential_ids() -> Iterator[None]:
    """Assign ids ``id-1``, ``id-2``, ... in construction order."""
    counter = count(1)
    set_id_generator(lambda: f"id-{next(counter)}")
    yield
    set_id_generator(None)


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
