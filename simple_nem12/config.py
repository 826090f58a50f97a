"""
Configuration model and YAML I/O for simple-nem12.

Key model:
- ParserConfig: separator used to split each line, and the text encoding
  used when the parser opens a file itself.

Key functions:
- load_config(path) -> ParserConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

The separator is applied literally (``str.split``): there is no quoting
or escaping, so a separator inside a field always splits it.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from simple_nem12.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ","


class ParserConfig(BaseModel):
    """Settings for reading a Simple NEM12 file."""

    separator: str = Field(
        DEFAULT_SEPARATOR, description="Literal field delimiter for every line"
    )
    encoding: str = Field(
        "utf-8", description="Text encoding used when opening a file by path"
    )

    @field_validator("separator")
    @classmethod
    def _check_separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("separator must be a non-empty string")
        return value


def load_config(path: str | Path) -> ParserConfig:
    """Load and validate a YAML config file into a ParserConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return ParserConfig.model_validate(raw)


def save_config(config: ParserConfig, path: str | Path) -> None:
    """Serialize a ParserConfig to YAML, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# simple-nem12 parser configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
