"""Public error model API: identity, causal chains, and rendering."""

from . import codes
from .capabilities import (
    capture_stack_trace,
    capture_trace,
    new_id,
    no_stack_trace,
    set_id_generator,
    set_trace_capturer,
)
from .log_format import (
    ERROR_LOG_TEMPLATE,
    to_log_format,
    to_log_format_without_stack_trace,
)
from .model import (
    DEFAULT_ERROR_NAME,
    MULTI_CAUSE_ERROR_NAME,
    ErrCodeError,
    MultiCauseError,
    describe_exception,
    new,
    new_default_multi_cause_error,
    new_error,
    new_multi_cause_error,
)
from .normalize import exception_to_error
from .remote import (
    RemoteErrCodeError,
    RemoteMultiCauseError,
    new_remote_err_code_error,
    new_remote_multi_cause_error,
)
from .types import ErrCodeErr, ErrorCode, MultiCauseErr

__all__ = [
    "DEFAULT_ERROR_NAME",
    "ERROR_LOG_TEMPLATE",
    "MULTI_CAUSE_ERROR_NAME",
    "ErrCodeErr",
    "ErrCodeError",
    "ErrorCode",
    "MultiCauseErr",
    "MultiCauseError",
    "RemoteErrCodeError",
    "RemoteMultiCauseError",
    "capture_stack_trace",
    "capture_trace",
    "codes",
    "describe_exception",
    "exception_to_error",
    "new",
    "new_default_multi_cause_error",
    "new_error",
    "new_id",
    "new_multi_cause_error",
    "new_remote_err_code_error",
    "new_remote_multi_cause_error",
    "no_stack_trace",
    "set_id_generator",
    "set_trace_capturer",
    "to_log_format",
    "to_log_format_without_stack_trace",
]
