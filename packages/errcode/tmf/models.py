"""TMF-style error envelope models exchanged between services.

Optional fields are omitted from serialized output when absent instead of
being emitted as ``null``. ``Response.message`` is always present. Status is
carried as a string on the wire.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)

TYPE_V1_0 = "NC.TMFErrorResponse.v1.0"


class _EnvelopeModel(BaseModel):
    """Base for envelope models that drop unset optional fields on dump."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    _omit_when_none: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Remove optional keys whose value is ``None``."""
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if not (value is None and key in self._omit_when_none)
        }


class Error(_EnvelopeModel):
    """One nested error entry of an error envelope."""

    _omit_when_none: ClassVar[frozenset[str]] = frozenset(
        {"message", "reference_error", "referenceError", "status", "source", "meta"}
    )

    id: str
    code: str
    reason: str
    message: str | None = None
    reference_error: str | None = Field(default=None, alias="referenceError")
    status: str | None = None
    source: Any = None
    meta: dict[str, Any] | None = None


class Response(_EnvelopeModel):
    """Top-level error envelope returned across a service boundary."""

    _omit_when_none: ClassVar[frozenset[str]] = frozenset(
        {
            "reference_error",
            "referenceError",
            "status",
            "source",
            "meta",
            "errors",
            "schema_location",
            "@schemaLocation",
        }
    )

    id: str
    code: str
    reason: str
    message: str
    reference_error: str | None = Field(default=None, alias="referenceError")
    status: str | None = None
    source: Any = None
    meta: dict[str, Any] | None = None
    errors: list[Error] | None = None
    type: str = Field(default=TYPE_V1_0, alias="@type")
    schema_location: str | None = Field(default=None, alias="@schemaLocation")
