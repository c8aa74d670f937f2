"""Public TMF error envelope API: models, builders, converter, JSON codec."""

from .builders import (
    ErrorBuilder,
    ResponseBuilder,
    TmfErrorConvertible,
    new_error_builder,
    new_response_builder,
)
from .codec import error_from_json, error_to_json, response_from_json, response_to_json
from .converter import Converter, DefaultConverter, err_to_response
from .models import TYPE_V1_0, Error, Response

__all__ = [
    "TYPE_V1_0",
    "Converter",
    "DefaultConverter",
    "Error",
    "ErrorBuilder",
    "Response",
    "ResponseBuilder",
    "TmfErrorConvertible",
    "err_to_response",
    "error_from_json",
    "error_to_json",
    "new_error_builder",
    "new_response_builder",
    "response_from_json",
    "response_to_json",
]
