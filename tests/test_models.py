# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

import pytest
from pydantic import ValidationError

from yamlreview.core.models import Finding, ResultSet


def test_finding_is_immutable(warning_finding: Finding) -> None:
    with pytest.raises(ValidationError):
        warning_finding.message = "changed"  # type: ignore[misc]


def test_finding_location(warning_finding: Finding) -> None:
    assert warning_finding.location == "src/app.yml:12:5"
    assert warning_finding.is_warning


def test_finding_keeps_positions_as_text() -> None:
    finding = Finding(file="a.yml", line="?", character="end", severity="error", rule="r", message="m")

    assert finding.line == "?"
    assert finding.character == "end"
    assert not finding.is_warning


def test_from_findings_classifies_in_order(warning_finding: Finding, error_finding: Finding) -> None:
    results = ResultSet.from_findings([error_finding, warning_finding, error_finding])

    assert results.all == (error_finding, warning_finding, error_finding)
    assert results.warnings == (warning_finding,)
    assert results.errors == (error_finding, error_finding)
    assert len(results) == 3
    assert results


def test_result_set_rejects_misfiled_findings(warning_finding: Finding) -> None:
    with pytest.raises(ValidationError):
        ResultSet(errors=(warning_finding,), all=(warning_finding,))


def test_result_set_rejects_inconsistent_all(warning_finding: Finding, error_finding: Finding) -> None:
    with pytest.raises(ValidationError):
        ResultSet(warnings=(warning_finding,), errors=(error_finding,), all=(warning_finding,))


def test_empty_result_set_is_falsy() -> None:
    results = ResultSet()

    assert not results
    assert results.all == results.warnings == results.errors == ()
