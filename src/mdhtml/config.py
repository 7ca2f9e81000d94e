"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:    str = "mdhtml"
    input_path:  str = Field(default="input/in.md", description="Markdown source file")
    output_dir:  str = Field(default="output",      description="Directory the HTML file is written to")
    output_file: str = Field(default="out.html", pattern=r"^[^/\\]+\.html?$", description="Output file name")
    log_level:   str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Logging level")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Parse a YAML settings file into a mapping of Settings fields."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _env_values() -> dict[str, str]:
    """Collect non-empty MDHTML_<FIELD> environment variables."""
    values = {}
    for name in Settings.model_fields:
        if val := os.getenv(f"MDHTML_{name.upper()}"):
            values[name] = val
    return values


def load_config(overrides: dict[str, Any] = None, config_path: str = None) -> Settings:
    """Layer settings: YAML file, then MDHTML_<FIELD> env vars, then non-None CLI overrides.

    Without config_path, ./config.yaml is read when present. An explicit
    config_path must point at an existing file.
    """
    path = Path(config_path or CONFIG_FILE)
    if config_path and not path.is_file():
        raise ValueError(f"Config file not found: {path}")

    data = _read_config_file(path) if path.exists() else {}
    data.update(_env_values())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
