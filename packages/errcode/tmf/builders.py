"""Fluent builders projecting error-model instances into envelope models."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from packages.errcode.errors import ErrCodeErr, MultiCauseErr, exception_to_error

from .models import TYPE_V1_0, Error, Response


@runtime_checkable
class TmfErrorConvertible(Protocol):
    """Error variant that controls its own nested envelope projection."""

    def to_tmf_error(self) -> Error:
        """Return this error as one nested envelope entry."""


class ResponseBuilder:
    """Accumulates top-level envelope fields; every setter returns ``self``."""

    def __init__(
        self,
        *,
        id: str = "",
        code: str = "",
        reason: str = "",
        message: str = "",
        errors: list[Error] | None = None,
        schema_type: str = TYPE_V1_0,
    ) -> None:
        self._id = id
        self._code = code
        self._reason = reason
        self._message = message
        self._reference_error: str | None = None
        self._status: str | None = None
        self._source: Any = None
        self._meta: dict[str, Any] | None = None
        self._errors = errors
        self._schema_type = schema_type
        self._schema_location: str | None = None

    def id(self, id: str) -> ResponseBuilder:
        self._id = id
        return self

    def code(self, code: str) -> ResponseBuilder:
        self._code = code
        return self

    def reason(self, reason: str) -> ResponseBuilder:
        self._reason = reason
        return self

    def message(self, message: str) -> ResponseBuilder:
        self._message = message
        return self

    def reference_error(self, reference_error: str) -> ResponseBuilder:
        self._reference_error = reference_error
        return self

    def status(self, status: int) -> ResponseBuilder:
        """Set the HTTP-like status; stored in its string wire form."""
        self._status = str(status)
        return self

    def source(self, source: Any) -> ResponseBuilder:
        self._source = source
        return self

    def meta(self, meta: Mapping[str, Any]) -> ResponseBuilder:
        self._meta = dict(meta)
        return self

    def errors(self, *errors: Error) -> ResponseBuilder:
        """Replace the nested error list."""
        self._errors = list(errors)
        return self

    def type(self, schema_type: str) -> ResponseBuilder:
        self._schema_type = schema_type
        return self

    def schema_location(self, schema_location: str) -> ResponseBuilder:
        self._schema_location = schema_location
        return self

    def build(self) -> Response:
        """Assemble an immutable ``Response`` snapshot of the builder state."""
        return Response(
            id=self._id,
            code=self._code,
            reason=self._reason,
            message=self._message,
            reference_error=self._reference_error,
            status=self._status,
            source=self._source,
            meta=self._meta,
            errors=list(self._errors) if self._errors is not None else None,
            type=self._schema_type,
            schema_location=self._schema_location,
        )


class ErrorBuilder:
    """Accumulates nested envelope error fields; every setter returns ``self``."""

    def __init__(
        self,
        *,
        id: str = "",
        code: str = "",
        reason: str = "",
        message: str | None = None,
    ) -> None:
        self._id = id
        self._code = code
        self._reason = reason
        self._message = message
        self._reference_error: str | None = None
        self._status: str | None = None
        self._source: Any = None
        self._meta: dict[str, Any] | None = None

    def id(self, id: str) -> ErrorBuilder:
        self._id = id
        return self

    def code(self, code: str) -> ErrorBuilder:
        self._code = code
        return self

    def reason(self, reason: str) -> ErrorBuilder:
        self._reason = reason
        return self

    def message(self, message: str) -> ErrorBuilder:
        self._message = message
        return self

    def reference_error(self, reference_error: str) -> ErrorBuilder:
        self._reference_error = reference_error
        return self

    def status(self, status: int) -> ErrorBuilder:
        self._status = str(status)
        return self

    def source(self, source: Any) -> ErrorBuilder:
        self._source = source
        return self

    def meta(self, meta: Mapping[str, Any]) -> ErrorBuilder:
        self._meta = dict(meta)
        return self

    def build(self) -> Error:
        return Error(
            id=self._id,
            code=self._code,
            reason=self._reason,
            message=self._message,
            reference_error=self._reference_error,
            status=self._status,
            source=self._source,
            meta=self._meta,
        )


def new_response_builder(err: ErrCodeErr) -> ResponseBuilder:
    """Seed a ``ResponseBuilder`` from ``err``.

    Multi-cause errors have their causes converted to nested entries up front.
    A cause implementing ``to_tmf_error`` decides its own projection; others
    go through ``new_error_builder``. Plain exceptions among the causes are
    normalized with ``exception_to_error`` first.
    """
    causes: list[Error] | None = None
    if isinstance(err, MultiCauseErr):
        causes = [_cause_to_error(cause) for cause in err.causes]
    return ResponseBuilder(
        id=err.id,
        code=err.error_code.code,
        reason=err.error_code.title,
        message=err.detail,
        errors=causes,
    )


def new_error_builder(err: ErrCodeErr) -> ErrorBuilder:
    """Seed an ``ErrorBuilder`` from ``err`` with its detail as message."""
    return ErrorBuilder(
        id=err.id,
        code=err.error_code.code,
        reason=err.error_code.title,
        message=err.detail,
    )


def _cause_to_error(cause: BaseException) -> Error:
    if isinstance(cause, TmfErrorConvertible):
        return cause.to_tmf_error()
    return new_error_builder(exception_to_error(cause)).build()
