# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and ``pyproject.toml`` loading for yamlreview."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.errors import ConfigError
from .reporting.router import ReportMode
from .reporting.sinks import SinkKind

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "yamlreview"


class LintConfig(BaseModel):
    """Settings controlling how yamllint is run and how findings are reported."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    fail_on_error: bool = True
    mode: ReportMode = ReportMode.AGGREGATE
    paths: tuple[str, ...] = Field(default=(".",))
    config_file: Path | None = None
    strict: bool = False
    sink: SinkKind = SinkKind.CONSOLE

    @field_validator("paths", mode="before")
    @classmethod
    def _coerce_paths(cls, value: Any) -> Any:
        """Accept a single path string where a list is expected."""

        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("paths")
    @classmethod
    def _require_paths(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Fall back to the current directory when no path is configured."""

        return value or (".",)

    @property
    def inline(self) -> bool:
        """Return ``True`` when findings are reported as inline annotations."""

        return self.mode is ReportMode.INLINE

    def with_overrides(self, **overrides: Any) -> LintConfig:
        """Return a copy with every non-``None`` override applied.

        Args:
            **overrides: Field values, typically collected from CLI options.

        Returns:
            LintConfig: Validated configuration including the overrides.

        Raises:
            ConfigError: If an override names an unknown field or fails validation.
        """

        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return build_config({**self.model_dump(), **updates}, source="overrides")


def _normalise_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in payload.items()}


def build_config(payload: Mapping[str, Any], *, source: str = "configuration") -> LintConfig:
    """Validate ``payload`` into a :class:`LintConfig`.

    Args:
        payload: Raw mapping, keys may use hyphens or underscores.
        source: Description of the payload origin used in error messages.

    Returns:
        LintConfig: Validated configuration.

    Raises:
        ConfigError: If validation fails.
    """

    try:
        return LintConfig.model_validate(_normalise_keys(payload))
    except ValidationError as exc:
        raise ConfigError(f"Invalid yamlreview settings in {source}: {exc}") from exc


def load_config(project_root: Path) -> LintConfig:
    """Load ``[tool.yamlreview]`` from ``project_root/pyproject.toml``.

    A missing file or table yields the defaults.

    Args:
        project_root: Directory containing the project's ``pyproject.toml``.

    Returns:
        LintConfig: Validated configuration.

    Raises:
        ConfigError: If the file cannot be parsed or the table is invalid.
    """

    pyproject = project_root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return LintConfig()
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read {pyproject}: {exc}") from exc

    section = data.get(PYPROJECT_TOOL_KEY, {}).get(PYPROJECT_SECTION_KEY)
    if section is None:
        return LintConfig()
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {pyproject} must be a table")
    config = build_config(section, source=str(pyproject))
    if config.config_file is not None and not config.config_file.is_absolute():
        config = config.model_copy(update={"config_file": project_root / config.config_file})
    return config


__all__ = [
    "LintConfig",
    "PYPROJECT_SECTION_KEY",
    "build_config",
    "load_config",
]
