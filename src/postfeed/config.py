"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "POSTFEED_"


class Settings(BaseModel):
    content_dir:       str = Field(default="content/posts", description="Directory of markdown posts")
    output_path:       str = Field(default="src/routes/blog/_posts.json", description="Feed JSON artifact path")
    content_extension: str = Field(default=".md", pattern=r"^\.\w+$", description="Suffix of content files")
    parser_config:     str = Field(
        default="gfm-like",
        pattern="^(commonmark|default|gfm-like|js-default)$",
        description="MarkdownIt parser preset name",
    )
    excerpt_length:    int = Field(default=250, ge=1, description="Max characters of excerpt HTML")
    excerpt_ellipsis:  str = Field(default="…", description="Appended where an excerpt is cut")
    excerpt_marker:    str = Field(default="<!-- more -->", description="Explicit excerpt break comment")
    max_workers:       int = Field(default=1, ge=1, description="Ingestion threads; 1 = sequential")
    json_indent:       int = Field(default=2, ge=0, description="Feed JSON indent; 0 = compact")

    @model_validator(mode="after")
    def _ellipsis_fits(self) -> "Settings":
        if len(self.excerpt_ellipsis) > self.excerpt_length:
            raise ValueError("excerpt_ellipsis is longer than excerpt_length")
        return self


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then POSTFEED_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
