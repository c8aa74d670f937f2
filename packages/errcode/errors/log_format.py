"""Log-line rendering for classification-bearing errors."""

from __future__ import annotations

from .types import ErrCodeErr

ERROR_LOG_TEMPLATE = "[error_code=%s] [error_id=%s] %s"


def to_log_format(err: ErrCodeErr) -> str:
    """Render ``err`` with its full causal stack trace."""
    return ERROR_LOG_TEMPLATE % (err.error_code.code, err.id, err.render_stack_trace())


def to_log_format_without_stack_trace(err: ErrCodeErr) -> str:
    """Render ``err`` as a single line safe for end-user facing logs."""
    return ERROR_LOG_TEMPLATE % (err.error_code.code, err.id, str(err))
