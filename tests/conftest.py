# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from yamlreview.core.models import Finding, ResultSet
from yamlreview.core.severity import Severity

SAMPLE_OUTPUT = "\n".join(
    [
        "src/app.yml:12:5: [warning] too many spaces inside braces (braces)",
        "src/app.yml:20:1: [error] wrong indentation: expected 2 but found 4 (indentation)",
        "config/ci.yaml:1:1: [warning] missing document start \"---\" (document-start)",
        "config/ci.yaml:7:81: [error] line too long (95 > 80 characters) (line-length)",
    ],
)


@pytest.fixture
def sample_output() -> str:
    """Return yamllint parsable output mixing warnings and errors."""
    return SAMPLE_OUTPUT


@pytest.fixture
def warning_finding() -> Finding:
    return Finding(
        file="src/app.yml",
        line="12",
        character="5",
        severity=Severity.WARNING,
        rule="braces",
        message="too many spaces inside braces",
    )


@pytest.fixture
def error_finding() -> Finding:
    return Finding(
        file="src/app.yml",
        line="20",
        character="1",
        severity=Severity.ERROR,
        rule="indentation",
        message="wrong indentation: expected 2 but found 4",
    )


@pytest.fixture
def mixed_results(warning_finding: Finding, error_finding: Finding) -> ResultSet:
    """Return a result set holding one warning followed by one error."""
    return ResultSet.from_findings([warning_finding, error_finding])
