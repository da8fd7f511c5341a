"""Project configuration loaded from ``pyproject.toml``."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from strata.types import Lifecycle

LIFECYCLE_ENV_VAR = "STRATA_DEFAULT_LIFECYCLE"


class StrataConfig(BaseModel):
    """Settings read from the ``[tool.strata]`` table.

    Attributes
    ----------
    test_paths:
        Files or directories searched when no path is given on the command line.
    default_lifecycle:
        Lifecycle for test classes that do not declare one.
    reporters:
        Reporter names or import strings used by the CLI.
    verbosity:
        Baseline output level, adjusted by ``-v``/``-q``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    test_paths: list[str] = Field(default_factory=lambda: ["."])
    default_lifecycle: Lifecycle = Lifecycle.PER_TEST
    reporters: list[str] = Field(default_factory=lambda: ["ConsoleReporter"])
    verbosity: int = 0

    @field_validator("default_lifecycle", mode="before")
    @classmethod
    def _normalize_lifecycle(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower().replace("-", "_")
        return value


DEFAULT_CONFIG = StrataConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> StrataConfig:
    """Load configuration for the project containing ``start``.

    The ``STRATA_DEFAULT_LIFECYCLE`` environment variable, when set, wins
    over the file.

    Raises:
        pydantic.ValidationError: If the table holds unknown keys or values.
    """
    data: dict[str, Any] = {}
    pyproject = find_pyproject(start)
    if pyproject is not None:
        with pyproject.open("rb") as fh:
            data = dict(tomllib.load(fh).get("tool", {}).get("strata", {}))

    env_lifecycle = os.environ.get(LIFECYCLE_ENV_VAR)
    if env_lifecycle:
        data["default_lifecycle"] = env_lifecycle

    # TOML keys use dashes by convention.
    data = {key.replace("-", "_"): value for key, value in data.items()}
    return StrataConfig.model_validate(data)


__all__ = ["DEFAULT_CONFIG", "LIFECYCLE_ENV_VAR", "StrataConfig", "find_pyproject", "load_config"]
