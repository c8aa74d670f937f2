"""Settings loading and application for errcode.

The cascade is always:
1) CLI / init params
2) Environment variables (``ERRCODE_`` prefix, ``__`` between nested keys,
   e.g. ``ERRCODE_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``)
3) YAML config file (``~/.config/errcode/errcode.yaml`` by default)
4) Built-in model defaults
"""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Any, ClassVar, Mapping

from packages.errcode.errors import (
    capture_stack_trace,
    no_stack_trace,
    set_trace_capturer,
)
from packages.errcode.logging import configure_logging

from .models import DEFAULT_CONFIG_PATH, ErrcodeSettings, ErrorsSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ErrcodeSettings:
    """Resolve settings from params, environment, and the YAML file."""
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    class _PathBoundSettings(ErrcodeSettings):
        _config_path: ClassVar[Path] = resolved

    return _PathBoundSettings(**dict(cli_params or {}))


def apply_settings(settings: ErrcodeSettings) -> None:
    """Configure logging and stack capture from ``settings``."""
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )
    configure_errors(settings.errors)


def configure_errors(settings: ErrorsSettings) -> None:
    """Install the trace capturer matching ``settings``."""
    if not settings.capture_stack_traces:
        set_trace_capturer(no_stack_trace)
        return
    set_trace_capturer(partial(capture_stack_trace, limit=settings.stack_trace_limit))
