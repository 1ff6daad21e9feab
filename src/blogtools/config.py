"""Application configuration: settings schema and blogtools.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "blogtools.yaml"

DEFAULT_NOTES_TEMPLATE = """\
---
title: "{{ title }}"
date: "{{ date }}"
---

"""


class Settings(BaseModel):
    notes_directory: str = Field(default="notes", description="Root directory for new notes")
    notes_template:  str = Field(default=DEFAULT_NOTES_TEMPLATE, description="Jinja2 template for a new note")
    video_extensions: str = Field(default="avi,mkv,mp4", description="Comma-separated extensions for mv-files")
    min_size:        str = Field(default="100M", description="mv-files size threshold")
    frontmatter_extension: str = Field(default="md", min_length=1, description="File extension for adapt-frontmatter")


def default_locations(file_name: str = CONFIG_FILE) -> list[Path]:
    """Candidate config files, most specific first: working directory, then user config dir."""
    return [
        Path.cwd() / file_name,
        Path.home() / ".config" / "blogtools" / file_name,
    ]


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def load_config(config_file: str = None, overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from the first config file found, then BLOGTOOLS_<FIELD> env vars, then non-None CLI overrides."""
    if config_file and not Path(config_file).is_file():
        raise ValueError(f"Config file '{config_file}' does not exist.")

    locations = default_locations()
    if config_file:
        locations.insert(0, Path(config_file))

    data: dict[str, Any] = {}
    for path in locations:
        if path.is_file():
            data = _read_yaml(path)
            break

    for name in Settings.model_fields:
        if val := os.getenv(f"BLOGTOOLS_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
