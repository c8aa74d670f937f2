"""Errors reconstructed from envelopes produced by other processes.

Remote errors keep the sender's id and carry no local stack or cause; the
stack that produced them lives in the remote process logs. ``meta`` is a
read-only view over a private copy of the envelope metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .model import ErrCodeError, render_causes
from .types import ErrorCode


@dataclass(eq=False, kw_only=True)
class RemoteErrCodeError(ErrCodeError):
    """Error decoded from a remote envelope with transport metadata."""

    status: int | None = None
    source: Any = None
    meta: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__post_init__()
        Exception.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    def _field_values(self) -> dict[str, Any]:
        values = super()._field_values()
        values["meta"] = dict(self.meta)
        return values


@dataclass(eq=False, kw_only=True)
class RemoteMultiCauseError(RemoteErrCodeError):
    """Remote error whose envelope listed independent nested errors."""

    causes: tuple[RemoteErrCodeError, ...] = ()

    def render_stack_trace(self) -> str:
        return render_causes(str(self), self.causes)


def new_remote_err_code_error(
    id: str,
    code: ErrorCode,
    detail: str,
    meta: Mapping[str, Any],
    status: int | None = None,
    source: Any = None,
) -> RemoteErrCodeError:
    """Create a remote error preserving the identity assigned by the sender."""
    return RemoteErrCodeError(
        id=id,
        error_code=code,
        detail=detail,
        status=status,
        source=source,
        meta=meta,
    )


def new_remote_multi_cause_error(
    id: str,
    code: ErrorCode,
    detail: str,
    meta: Mapping[str, Any],
    status: int | None,
    source: Any,
    causes: Iterable[RemoteErrCodeError],
) -> RemoteMultiCauseError:
    """Create a remote multi-cause error with leaf remote causes."""
    return RemoteMultiCauseError(
        id=id,
        error_code=code,
        detail=detail,
        status=status,
        source=source,
        meta=meta,
        causes=tuple(causes),
    )
