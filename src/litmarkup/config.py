"""Configuration for litmarkup.

Settings come from (lowest to highest priority):
- model defaults
- a YAML settings file (Settings.load)
- LITMARKUP_* environment variables (Settings.from_env)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from litmarkup.exceptions import ConfigError

ENV_PREFIX = "LITMARKUP_"


class Settings(BaseModel):
    """Engine settings."""

    model_config = {"extra": "forbid", "frozen": True}

    cache_size: int = Field(
        default=512, gt=0, description="Max entries in a content-keyed template cache"
    )
    missing_substitution: Literal["error", "empty"] = Field(
        default="error",
        description="What to do when a marker index has no substitution value",
    )
    comments: Literal["drop", "error"] = Field(
        default="drop", description="How comment nodes in markup are handled"
    )

    @classmethod
    def load(cls, path: Path, env: dict[str, str] | None = None) -> "Settings":
        """Load settings from a YAML file, then apply env overrides.

        A missing file yields the defaults (plus env overrides).
        """
        data: dict[str, Any] = {}
        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"Failed to parse settings file {path}: {exc}") from exc
            if not isinstance(data, dict):
                raise ConfigError(f"Settings file {path} must contain a mapping")

        data.update(_env_overrides(os.environ if env is None else env))
        return cls._validate(data, source=str(path))

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None) -> "Settings":
        """Build settings from LITMARKUP_* environment variables."""
        data = _env_overrides(os.environ if env is None else env)
        return cls._validate(data, source="environment")

    @classmethod
    def _validate(cls, data: dict[str, Any], source: str) -> "Settings":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid settings from {source}: {exc}") from exc


def _env_overrides(env: Any) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for name in Settings.model_fields:
        key = ENV_PREFIX + name.upper()
        if key in env:
            overrides[name] = env[key]
    return overrides


_default_settings: Settings | None = None


def get_settings() -> Settings:
    """Process-wide default settings (read from the environment once)."""
    global _default_settings
    if _default_settings is None:
        _default_settings = Settings.from_env()
    return _default_settings
