"""Conversion of received error envelopes back into remote error models."""

from __future__ import annotations

import re
import warnings
from typing import Any, Protocol

from packages.errcode.errors import (
    ErrCodeErr,
    ErrorCode,
    MultiCauseErr,
    RemoteErrCodeError,
    exception_to_error,
    new_remote_err_code_error,
    new_remote_multi_cause_error,
)
from packages.errcode.logging import fields, get_logger

from .models import TYPE_V1_0, Error, Response

logger = get_logger(__name__)

_STATUS_PATTERN = re.compile(r"[+-]?[0-9]+")


class Converter(Protocol):
    """Strategy turning a decoded envelope into an error-model instance."""

    def build_err_code_error(self, response: Response) -> RemoteErrCodeError:
        """Reconstruct the remote error described by ``response``."""


class DefaultConverter:
    """Mirror of the response builders for the receiving side.

    Nested envelope entries never carry their own ``errors`` list, so causes
    of a ``RemoteMultiCauseError`` are always leaf ``RemoteErrCodeError``s.
    """

    def build_err_code_error(self, response: Response) -> RemoteErrCodeError:
        code = ErrorCode(code=response.code, title=response.reason)
        status = _parse_status(response.status, error_id=response.id)
        meta = _meta_or_empty(response.meta)
        if response.errors:
            causes = [_build_cause(item) for item in response.errors]
            return new_remote_multi_cause_error(
                response.id, code, response.message, meta, status, response.source, causes
            )
        return new_remote_err_code_error(
            response.id, code, response.message, meta, status, response.source
        )


def _build_cause(item: Error) -> RemoteErrCodeError:
    return new_remote_err_code_error(
        item.id,
        ErrorCode(code=item.code, title=item.reason),
        item.message if item.message is not None else "",
        _meta_or_empty(item.meta),
        _parse_status(item.status, error_id=item.id),
        item.source,
    )


def _parse_status(raw: str | None, *, error_id: str) -> int | None:
    """Parse a decimal wire status; anything else is logged and treated as absent.

    Only an optional sign followed by ASCII digits is accepted, so padded,
    underscored or non-ASCII numerals are rejected.
    """
    if raw is None:
        return None
    if _STATUS_PATTERN.fullmatch(raw) is None:
        logger.warning(
            "Ignoring unparsable envelope status %r for error_id=%s",
            raw,
            error_id,
            extra={fields.ERROR_ID: error_id},
        )
        return None
    return int(raw)


def _meta_or_empty(meta: dict[str, Any] | None) -> dict[str, Any]:
    return dict(meta) if meta is not None else {}


def err_to_response(err: ErrCodeErr, status: int) -> Response:
    """Build a response envelope for ``err`` in one call (deprecated).

    Causes of multi-cause errors are projected generically; ``to_tmf_error``
    hooks are not consulted.
    """
    warnings.warn(
        "err_to_response is deprecated; use new_response_builder() and "
        "new_error_builder() instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    causes: list[Error] | None = None
    if isinstance(err, MultiCauseErr):
        causes = []
        for item in err.causes:
            cause = exception_to_error(item)
            causes.append(
                Error(
                    id=cause.id,
                    code=cause.error_code.code,
                    reason=cause.error_code.title,
                    message=cause.detail,
                )
            )
    return Response(
        id=err.id,
        code=err.error_code.code,
        reason=err.error_code.title,
        message=err.detail,
        status=str(status),
        errors=causes,
        type=TYPE_V1_0,
    )
