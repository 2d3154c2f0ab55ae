"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    content_dir:      str = Field(default="src/blog", description="Directory holding the post files")
    file_extension:   str = Field(default=".mdx", pattern=r"^\.[A-Za-z0-9]+$", description="Post file extension")
    parser_config:    str = Field(default="commonmark", pattern="^(commonmark|gfm-like|default|zero|js-default)$", description="MarkdownIt parser preset name")
    anchor_min_level: int = Field(default=1, ge=1, le=6, description="Lowest heading level given an anchor id")
    anchor_max_level: int = Field(default=6, ge=1, le=6, description="Highest heading level given an anchor id")

    @model_validator(mode="after")
    def _check_anchor_levels(self) -> "Settings":
        if self.anchor_min_level > self.anchor_max_level:
            raise ValueError("anchor_min_level must not exceed anchor_max_level")
        return self


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOG_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
