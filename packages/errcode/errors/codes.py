"""Shared error code constants.

These classifications are domain-agnostic. Services should declare their own
``ErrorCode`` values in local modules rather than extending this set.
"""

from .types import ErrorCode

# Composition
MULTI_CAUSE = ErrorCode("NC-COMMON-2100", "multi-cause error")
MULTI_CAUSE_DETAIL = "multiple independent errors have happened"

# Normalized plain exceptions
INVALID_ARGUMENT = ErrorCode("INVALID_ARGUMENT", "invalid argument")
RESOURCE_NOT_FOUND = ErrorCode("RESOURCE_NOT_FOUND", "resource not found")
PERMISSION_DENIED = ErrorCode("PERMISSION_DENIED", "permission denied")
DEPENDENCY_TIMEOUT = ErrorCode("DEPENDENCY_TIMEOUT", "dependency timeout")
DEPENDENCY_UNAVAILABLE = ErrorCode("DEPENDENCY_UNAVAILABLE", "dependency unavailable")
UNEXPECTED_EXCEPTION = ErrorCode("UNEXPECTED_EXCEPTION", "unexpected exception")
