"""JSON encoding and decoding of error envelopes using wire field names."""

from __future__ import annotations

from .models import Error, Response


def response_to_json(response: Response) -> str:
    """Serialize ``response`` with wire aliases and absent optionals omitted."""
    return response.model_dump_json(by_alias=True)


def error_to_json(error: Error) -> str:
    return error.model_dump_json(by_alias=True)


def response_from_json(raw: str | bytes) -> Response:
    """Decode a received envelope; raises ``pydantic.ValidationError`` if malformed."""
    return Response.model_validate_json(raw)


def error_from_json(raw: str | bytes) -> Error:
    return Error.model_validate_json(raw)
