"""Exception normalization into classification-bearing errors."""

from __future__ import annotations

from . import codes
from .model import describe_exception, new_error
from .types import ErrCodeErr, ErrorCode

# Checked in order; the first matching type wins.
_EXCEPTION_CODES: tuple[tuple[type[BaseException], ErrorCode], ...] = (
    (PermissionError, codes.PERMISSION_DENIED),
    (TimeoutError, codes.DEPENDENCY_TIMEOUT),
    (ConnectionError, codes.DEPENDENCY_UNAVAILABLE),
    (ValueError, codes.INVALID_ARGUMENT),
    (KeyError, codes.RESOURCE_NOT_FOUND),
)


def exception_to_error(exc: BaseException) -> ErrCodeErr:
    """Wrap a plain Python exception in an ``ErrCodeError``.

    The original exception becomes the cause so it still shows up in the
    rendered stack trace. Errors that already carry a classification are
    returned unchanged.
    """
    if isinstance(exc, ErrCodeErr):
        return exc
    return new_error(_code_for(exc), describe_exception(exc), exc)


def _code_for(exc: BaseException) -> ErrorCode:
    for exc_type, code in _EXCEPTION_CODES:
        if isinstance(exc, exc_type):
            return code
    return codes.UNEXPECTED_EXCEPTION
