"""Stdout logging that keeps error identity correlated across log lines."""

from .config import (
    ErrorContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
)
from .context import bind_service, clear_context, error_scope, get_context
from .errors import log_error

__all__ = [
    "ErrorContextFilter",
    "JsonFormatter",
    "PlainFormatter",
    "bind_service",
    "clear_context",
    "configure_logging",
    "error_scope",
    "get_context",
    "get_logger",
    "log_error",
]
