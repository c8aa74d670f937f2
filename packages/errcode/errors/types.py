"""Canonical error identity types shared across service boundaries.

``ErrorCode`` classifies an error; the protocols describe what rendering and
envelope builders need from an error without tying them to concrete classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class ErrorCode:
    """Immutable ``(code, title)`` pair identifying an error category."""

    code: str
    title: str


@runtime_checkable
class ErrCodeErr(Protocol):
    """Classification-bearing error with a stable identity."""

    @property
    def id(self) -> str:
        """Globally unique identifier assigned at construction."""

    @property
    def error_code(self) -> ErrorCode:
        """Classification of this error."""

    @property
    def detail(self) -> str:
        """Optional human-readable elaboration."""

    def render_stack_trace(self) -> str:
        """Render this error and its causal chain for diagnostic logs."""


@runtime_checkable
class MultiCauseErr(ErrCodeErr, Protocol):
    """Classification-bearing error composed of independent causes."""

    @property
    def causes(self) -> Sequence[BaseException]:
        """Ordered independent causes."""
