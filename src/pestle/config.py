"""Project configuration for pestle sessions.

Settings come from ``[tool.pestle]`` in the nearest ``pyproject.toml`` and can
be overridden by ``PESTLE_*`` variables, either in the environment or in a
``.env`` file next to ``pyproject.toml``:

    [tool.pestle]
    name = ["Add*"]
    include_tags = ["fast"]
    exclude_tags = ["wip"]
    test_drive_root = ".pestle/drives"
    reporters = ["ConsoleReporter"]
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pestle.errors import ConfigError

ENV_NAME = "PESTLE_NAME"
ENV_TAGS = "PESTLE_TAGS"
ENV_EXCLUDE_TAGS = "PESTLE_EXCLUDE_TAGS"


class PestleConfig(BaseModel):
    """Validated ``[tool.pestle]`` settings."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name_filter: list[str] = Field(
        default_factory=list, alias="name", description="Glob patterns matched against block names"
    )
    include_tags: list[str] = Field(
        default_factory=list, description="A block must carry at least one of these tags"
    )
    exclude_tags: list[str] = Field(
        default_factory=list, description="Blocks carrying any of these tags are skipped"
    )
    test_drive_root: Path | None = Field(
        default=None, description="Directory test drives are created under"
    )
    reporters: list[str] = Field(
        default_factory=lambda: ["ConsoleReporter"],
        description="Reporter registry names or import paths",
    )
    reporter_options: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Keyword arguments per reporter name"
    )
    verbosity: int = Field(default=0, strict=True, description="Default reporter verbosity")

    @field_validator("name_filter", "include_tags", "exclude_tags", "reporters", mode="before")
    @classmethod
    def _wrap_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


DEFAULT_CONFIG = PestleConfig()


def find_project_root(start: Path | None = None) -> Path:
    """Nearest directory at or above ``start`` holding a ``pyproject.toml``."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / "pyproject.toml").is_file():
            return candidate
    return current


def _split_env(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _describe_errors(exc: ValidationError) -> str:
    unknown = [str(e["loc"][0]) for e in exc.errors() if e["type"] == "extra_forbidden"]
    details = [
        f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}"
        for e in exc.errors()
        if e["type"] != "extra_forbidden"
    ]
    if unknown:
        details.insert(0, f"unknown key(s): {', '.join(sorted(unknown))}")
    return "; ".join(details)


def _from_table(table: Mapping[str, Any], root: Path, source: str) -> PestleConfig:
    try:
        config = PestleConfig.model_validate(table)
    except ValidationError as exc:
        raise ConfigError(source, _describe_errors(exc)) from exc

    drive_root = config.test_drive_root
    if drive_root is not None and not drive_root.is_absolute():
        config = config.model_copy(update={"test_drive_root": root / drive_root})
    return config


def _apply_env(config: PestleConfig, env: Mapping[str, str | None]) -> PestleConfig:
    updates: dict[str, list[str]] = {}
    if env.get(ENV_NAME):
        updates["name_filter"] = _split_env(env[ENV_NAME] or "")
    if env.get(ENV_TAGS):
        updates["include_tags"] = _split_env(env[ENV_TAGS] or "")
    if env.get(ENV_EXCLUDE_TAGS):
        updates["exclude_tags"] = _split_env(env[ENV_EXCLUDE_TAGS] or "")
    return config.model_copy(update=updates) if updates else config


def load_config(start: Path | None = None, env: Mapping[str, str] | None = None) -> PestleConfig:
    """Load configuration for the project containing ``start``.

    Args:
        start: Directory to search from. Defaults to the working directory.
        env: Environment to read overrides from. Defaults to ``os.environ``.

    Raises:
        ConfigError: If ``pyproject.toml`` is unreadable or ``[tool.pestle]``
            holds invalid values.
    """
    root = find_project_root(start)
    pyproject = root / "pyproject.toml"

    config = DEFAULT_CONFIG
    if pyproject.is_file():
        try:
            with pyproject.open("rb") as fh:
                data = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(str(pyproject), str(exc)) from exc
        table = data.get("tool", {}).get("pestle")
        if table is not None:
            if not isinstance(table, dict):
                raise ConfigError(str(pyproject), "[tool.pestle] must be a table")
            config = _from_table(table, root, str(pyproject))

    merged: dict[str, str | None] = {}
    dotenv_path = root / ".env"
    if dotenv_path.is_file():
        merged.update(dotenv_values(dotenv_path))
    merged.update(os.environ if env is None else env)
    return _apply_env(config, merged)


__all__ = ["DEFAULT_CONFIG", "PestleConfig", "find_project_root", "load_config"]
