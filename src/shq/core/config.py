"""Configuration parsing for shq.yaml"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, StrictInt, StrictStr, ValidationError, confloat

from shq.exceptions import ConfigError

log = logging.getLogger(__name__)

CONFIG_FILENAME = "shq.yaml"

# Same rules as atoms: no bools, no NaN or infinity
Scalar = Union[StrictStr, StrictInt, confloat(strict=True, allow_inf_nan=False)]


class ShqConfig(BaseModel):
    """Full shq.yaml configuration"""

    style: Literal["minimal", "always"] = "minimal"
    vars: dict[str, Union[Scalar, list[Scalar]]] = {}
    templates: dict[str, str] = {}

    model_config = {"extra": "forbid"}

    @classmethod
    def load(cls, path: Path) -> "ShqConfig":
        """Load config from yaml file, or defaults if it does not exist"""
        if not path.exists():
            log.debug("No config at %s, using defaults", path)
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(path, str(e)) from e

        if not isinstance(data, dict):
            raise ConfigError(path, "top level must be a mapping")

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(path, str(e)) from e

        log.debug(
            "Loaded %s: %d vars, %d templates",
            path,
            len(config.vars),
            len(config.templates),
        )
        return config

    def get_template(self, name: str) -> Optional[str]:
        """Get a named template source, or None"""
        return self.templates.get(name)

    def get_vars(self) -> dict[str, Any]:
        """Variables as a plain dict, for use as an expansion context"""
        return dict(self.vars)


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find shq.yaml in the start directory or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None
