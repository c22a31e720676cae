from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from revql import log
from revql.search import DEFAULT_ROOT_TYPES


class ColorConfig(BaseModel):
    """Rich styles used when printing paths."""

    model_config = ConfigDict(extra="forbid")

    target: str = "red"
    type: str = "green"
    field: str = "white"


class RevqlConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    root_types: list[str] = Field(default_factory=lambda: list(DEFAULT_ROOT_TYPES), alias="rootTypes")
    show_relay: bool = Field(False, alias="showRelay")
    colors: ColorConfig = Field(default_factory=ColorConfig)

    @field_validator("root_types")
    @classmethod
    def validate_root_types(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("At least one root type is required")
        if any(not name.strip() for name in value):
            raise ValueError("Root type names cannot be empty")
        return value


def load_config(config_path: Path | None) -> RevqlConfig:
    """
    Load and validate a revql configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file, or None for defaults.

    Returns:
        A validated RevqlConfig.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against RevqlConfig fails.
    """
    if config_path is None:
        log.debug("No config provided, using defaults")
        return RevqlConfig()

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug("Loaded config from %s", config_path)

    # Empty file or explicit YAML null means defaults
    if raw is None or raw == {}:
        return RevqlConfig()

    if not isinstance(raw, dict):
        raise TypeError(f"Config root must be a mapping (YAML object), got {type(raw).__name__}")

    return RevqlConfig.model_validate(cast(dict[str, Any], raw))
