"""Logging helpers for classification-bearing errors."""

from __future__ import annotations

import logging

from packages.errcode.errors import (
    ErrCodeErr,
    to_log_format,
    to_log_format_without_stack_trace,
)

from . import fields


def log_error(
    logger: logging.Logger,
    err: ErrCodeErr,
    *,
    with_stack_trace: bool = True,
    level: int = logging.ERROR,
) -> None:
    """Log ``err`` in the shared error line format.

    The record also carries ``error_code`` and ``error_id`` as attributes so
    formatters emit them as separate fields. The one-line form omits raw
    stack text and is the one to use where logs may reach end users.
    """
    line = to_log_format(err) if with_stack_trace else to_log_format_without_stack_trace(err)
    logger.log(
        level,
        line,
        extra={fields.ERROR_CODE: err.error_code.code, fields.ERROR_ID: err.id},
    )
