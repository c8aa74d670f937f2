"""Correlation fields carried by every log line a process emits.

Two layers are kept in one ``contextvars`` variable: the service identity
bound once at startup, and the identity of the error currently being handled.
``error_scope`` nests, restoring the outer error on exit, so log lines written
while handling a cause still correlate with the error that wrapped it.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

from packages.errcode.errors import ErrCodeErr

from . import fields

_LOG_CONTEXT: ContextVar[Mapping[str, str]] = ContextVar(
    "errcode_log_context", default=MappingProxyType({})
)


def get_context() -> dict[str, str]:
    """Return a copy of the correlation fields bound in the current context."""
    return dict(_LOG_CONTEXT.get())


def bind_service(*, service: str | None = None, environment: str | None = None) -> None:
    """Bind the emitting service identity; empty values are skipped."""
    current = dict(_LOG_CONTEXT.get())
    if service:
        current[fields.SERVICE] = service
    if environment:
        current[fields.ENVIRONMENT] = environment
    _LOG_CONTEXT.set(MappingProxyType(current))


@contextmanager
def error_scope(err: ErrCodeErr) -> Iterator[None]:
    """Tag log lines emitted inside the block with ``err``'s code and id."""
    current = dict(_LOG_CONTEXT.get())
    current[fields.ERROR_CODE] = err.error_code.code
    current[fields.ERROR_ID] = err.id
    token = _LOG_CONTEXT.set(MappingProxyType(current))
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def clear_context() -> None:
    """Drop every bound correlation field."""
    _LOG_CONTEXT.set(MappingProxyType({}))
