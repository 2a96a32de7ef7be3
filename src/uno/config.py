from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_NAME = "{method}({args}) == {expected}"


class Settings(BaseModel):
    """Default options applied to every check run by an evaluator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    group: str = "Uno"
    name: str = DEFAULT_NAME
    verbose: bool = False

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name template must not be empty")
        return v

    def merged(self, **options: Any) -> Settings:
        """Return a copy with *options* applied on top of the current values."""
        return Settings(**{**self.model_dump(), **options})


def _expand(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return expandvars(value, nounset=True)
        except Exception as exc:
            raise ValueError(f"Unset environment variable in {value!r}") from exc
    return value


def load_settings(path: Path) -> Settings:
    """Load and validate evaluator settings from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Expected a mapping of settings in {path}")

    return Settings(**{key: _expand(value) for key, value in raw.items()})
