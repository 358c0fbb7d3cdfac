# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering yamlreview configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from yamlreview.config import LintConfig, build_config, load_config
from yamlreview.core.errors import ConfigError
from yamlreview.reporting.router import ReportMode
from yamlreview.reporting.sinks import SinkKind


def _write_pyproject(root: Path, body: str) -> None:
    (root / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults_without_pyproject(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == LintConfig()
    assert config.fail_on_error is True
    assert config.mode is ReportMode.AGGREGATE
    assert config.paths == (".",)
    assert config.sink is SinkKind.CONSOLE
    assert not config.inline


def test_defaults_without_tool_table(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[project]\nname = "demo"\n')

    assert load_config(tmp_path) == LintConfig()


def test_loads_tool_table_with_hyphenated_keys(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        """
[tool.yamlreview]
fail-on-error = false
mode = "inline"
paths = "configs"
config-file = ".yamllint.yml"
strict = true
sink = "github"
""",
    )

    config = load_config(tmp_path)

    assert config.fail_on_error is False
    assert config.inline
    assert config.paths == ("configs",)
    assert config.config_file == tmp_path / ".yamllint.yml"
    assert config.strict is True
    assert config.sink is SinkKind.GITHUB


@pytest.mark.parametrize(
    "body",
    [
        '[tool.yamlreview]\nmode = "sideways"\n',
        "[tool.yamlreview]\nunknown = 1\n",
        'tool = { yamlreview = "nope" }\n',
        "[tool.yamlreview\n",
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, body: str) -> None:
    _write_pyproject(tmp_path, body)

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_with_overrides_ignores_unset_values() -> None:
    base = build_config({"fail-on-error": False, "paths": ["a.yml", "b.yml"]})

    assert base.with_overrides(mode=None, strict=None) is base

    updated = base.with_overrides(mode=ReportMode.INLINE, paths=("c.yml",))

    assert updated.mode is ReportMode.INLINE
    assert updated.paths == ("c.yml",)
    assert updated.fail_on_error is False


def test_with_overrides_validates_values() -> None:
    with pytest.raises(ConfigError):
        LintConfig().with_overrides(sink="pager")


def test_empty_paths_fall_back_to_current_directory() -> None:
    assert build_config({"paths": []}).paths == (".",)
