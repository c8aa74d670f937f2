"""Tests for pydantic-settings-backed errcode configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest
from pydantic import ValidationError

from packages.errcode.config import (
    ErrcodeSettings,
    ErrorsSettings,
    apply_settings,
    configure_errors,
    load_settings,
)
from packages.errcode.errors import ErrorCode, new_error, set_trace_capturer
from packages.errcode.logging import clear_context, get_context

_CODE = ErrorCode(code="TEST-1001", title="Test 1001")


@pytest.fixture
def restore_trace_capturer() -> Iterator[None]:
    yield
    set_trace_capturer(None)


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to model defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "errcode.yaml")

    assert isinstance(settings, ErrcodeSettings)
    assert settings.logging.level == "INFO"
    assert settings.logging.json_output is True
    assert settings.logging.service == "errcode"
    assert settings.errors.capture_stack_traces is True
    assert settings.errors.stack_trace_limit is None


def test_load_settings_uses_precedence_cascade(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Init params should override env, env should override YAML, then defaults."""
    config_file = tmp_path / "errcode.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "  service: billing",
                "errors:",
                "  stack_trace_limit: 3",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("ERRCODE_LOGGING__LEVEL", "ERROR")
    monkeypatch.setenv("ERRCODE_ERRORS__STACK_TRACE_LIMIT", "7")

    settings = load_settings(
        cli_params={"logging": {"level": "DEBUG"}},
        config_path=config_file,
    )

    assert settings.logging.level == "DEBUG"
    assert settings.logging.service == "billing"
    assert settings.errors.stack_trace_limit == 7


def test_load_settings_rejects_invalid_values(tmp_path: Path) -> None:
    """Invalid levels fail validation instead of being silently accepted."""
    with pytest.raises(ValidationError):
        load_settings(
            cli_params={"logging": {"level": "LOUD"}},
            config_path=tmp_path / "errcode.yaml",
        )


def test_configure_errors_can_disable_stack_capture(restore_trace_capturer: None) -> None:
    """Disabling capture leaves new errors without stack text."""
    configure_errors(ErrorsSettings(capture_stack_traces=False))

    assert new_error(_CODE, "detail").stack_trace == ""


def test_configure_errors_applies_stack_limit(restore_trace_capturer: None) -> None:
    """A stack limit keeps only that many caller frames."""
    configure_errors(ErrorsSettings(stack_trace_limit=1))

    stack_trace = new_error(_CODE, "detail").stack_trace

    assert stack_trace.count('File "') == 1
    assert "test_configure_errors_applies_stack_limit" in stack_trace


def test_apply_settings_configures_logging_and_errors(
    tmp_path: Path,
    restore_root_logging: None,
    restore_trace_capturer: None,
) -> None:
    """apply_settings wires the root logger level and the trace capturer."""
    clear_context()
    settings = load_settings(
        cli_params={
            "logging": {"level": "WARNING", "json_output": False},
            "errors": {"capture_stack_traces": False},
        },
        config_path=tmp_path / "errcode.yaml",
    )

    apply_settings(settings)

    assert logging.getLogger().level == logging.WARNING
    assert new_error(_CODE, "detail").stack_trace == ""
    assert get_context() == {"service": "errcode", "environment": "dev"}
    clear_context()


@pytest.mark.parametrize("document", ["42\n", "- a\n- b\n", "just text\n"])
def test_load_settings_rejects_non_mapping_yaml(tmp_path: Path, document: str) -> None:
    """A YAML document that is not a mapping is reported, not merged."""
    config_file = tmp_path / "errcode.yaml"
    config_file.write_text(document, encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        load_settings(config_path=config_file)


def test_load_settings_treats_empty_yaml_as_no_settings(tmp_path: Path) -> None:
    """An empty config file leaves every value at its default."""
    config_file = tmp_path / "errcode.yaml"
    config_file.write_text("", encoding="utf-8")

    settings = load_settings(config_path=config_file)

    assert settings.logging.level == "INFO"
