"""Stdout logging for services that log errcode errors.

Every line carries the error identity fields (``error_code``, ``error_id``)
as first-class keys whenever they are known, taken from the record's
``extra`` first and from an enclosing ``error_scope`` otherwise. Service
identity bound at startup is appended after them.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from . import fields
from .context import bind_service, get_context

_ERROR_FIELDS = (fields.ERROR_CODE, fields.ERROR_ID)


class ErrorContextFilter(logging.Filter):
    """Resolve correlation fields onto the record before formatting."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_context()
        for key in _ERROR_FIELDS:
            # Explicit ``extra`` wins over an enclosing error scope.
            if getattr(record, key, None) is None and key in context:
                setattr(record, key, context[key])
        record.service_context = {
            key: value for key, value in context.items() if key not in _ERROR_FIELDS
        }
        return True


def _error_fields(record: logging.LogRecord) -> dict[str, str]:
    output: dict[str, str] = {}
    for key in _ERROR_FIELDS:
        value = getattr(record, key, None)
        if value is not None:
            output[key] = str(value)
    return output


def _service_fields(record: logging.LogRecord) -> dict[str, str]:
    context = getattr(record, "service_context", None)
    return dict(context) if isinstance(context, dict) else {}


class JsonFormatter(logging.Formatter):
    """One JSON object per line; error identity keys follow the message."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        payload.update(_error_fields(record))
        payload.update(_service_fields(record))
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Text lines with ``key=value`` correlation fields appended."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        pairs = list(_error_fields(record).items())
        pairs.extend(sorted(_service_fields(record).items()))
        if not pairs:
            return message
        return message + " " + " ".join(f"{key}={value}" for key, value in pairs)


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Install a single stdout handler on the root logger.

    Existing root handlers are replaced. ``service`` and ``environment`` are
    bound for every subsequent line.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.addFilter(ErrorContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    bind_service(service=service, environment=environment)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name)
