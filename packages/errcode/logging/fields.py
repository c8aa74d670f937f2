"""Canonical logging field names for cross-service consistency.

These constants define a stable key set for structured logs and context
propagation so services reading each other's logs agree on names.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Error identity fields.
ERROR_CODE = "error_code"
ERROR_ID = "error_id"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
