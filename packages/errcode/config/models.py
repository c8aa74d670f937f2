"""Typed configuration models for errcode runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)
import yaml

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "errcode" / "errcode.yaml"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "errcode"
    environment: str = "dev"


class ErrorsSettings(BaseModel):
    """Error construction settings."""

    capture_stack_traces: bool = True
    # Innermost caller frames kept per captured stack; ``None`` keeps all.
    stack_trace_limit: int | None = Field(default=None, ge=0)


class MappingYamlSettingsSource(YamlConfigSettingsSource):
    """YAML source that requires the document to be a top-level mapping.

    An empty file counts as no settings.
    """

    def _read_file(self, file_path: Path) -> dict[str, Any]:
        with open(file_path, encoding=self.yaml_file_encoding) as handle:
            parsed = yaml.safe_load(handle)
        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ValueError(f"Config file must contain a top-level mapping: {file_path}")
        return parsed


class ErrcodeSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="ERRCODE_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    errors: ErrorsSettings = Field(default_factory=ErrorsSettings)

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            MappingYamlSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            ),
        )
