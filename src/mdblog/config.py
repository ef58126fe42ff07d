"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from mdblog.core.models import ContentFormat
from mdblog.errors import ConfigurationError


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDBLOG_"


class Settings(BaseModel):
    posts_directory: str = Field(..., min_length=1, description="Directory holding the content files")
    page_size:       int = Field(default=10, ge=1, description="Items per listing page")
    formats:         list[ContentFormat] = Field(
        default_factory=lambda: list(ContentFormat),
        min_length=1,
        description="Recognized formats in resolution priority order",
    )
    default_date:    str = Field(default="now", pattern="^(now|epoch)$", description="Sort date for undated items")
    markdown_preset: str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    page_template:   Optional[str] = Field(default=None, description="Template file for a listing page")
    post_template:   Optional[str] = Field(default=None, description="Template file for a single item")
    host:            str = Field(default="localhost", description="Bind address for serve")
    port:            int = Field(default=3000, ge=1, le=65535, description="Port for serve")

    @field_validator("formats", mode="before")
    @classmethod
    def _split_formats(cls, value: Any) -> Any:
        """Accept 'md,pug' strings (env vars) as well as lists."""
        if isinstance(value, str):
            return [v.strip().lower().lstrip(".") for v in value.split(",") if v.strip()]
        return value


def load_config(overrides: dict[str, Any] = None, config_file: str | Path = CONFIG_FILE) -> Settings:
    """Load Settings from config.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    path = Path(config_file)
    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid {path.name}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid {path.name}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    if not data.get("posts_directory"):
        raise ConfigurationError(
            f"posts_directory is required (set it in {path.name}, {ENV_PREFIX}POSTS_DIRECTORY or --posts-dir)"
        )
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
