"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    output_dir:    str = Field(default="_site",    description="Directory for rendered HTML pages")
    parser_config: str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    stylesheet:    Optional[str] = Field(default=None, description="Custom admonition CSS; None uses the bundled one")
    minify_css:    bool = Field(default=True,  description="Minify the stylesheet before injection")
    standalone:    bool = Field(default=True,  description="Wrap rendered pages in a full HTML document")
    jobs:          int = Field(default=1, ge=1, description="Worker threads for the rewrite phase")
    log_level:     str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then GFMA_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"GFMA_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
