# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for routing findings to aggregated or inline actions."""

from __future__ import annotations

import pytest

from yamlreview.core.models import Finding, ResultSet
from yamlreview.parsers import parse
from yamlreview.reporting.actions import ActionKind
from yamlreview.reporting.router import AGGREGATE_HEADER, ReportMode, format_entry, format_report, route


@pytest.mark.parametrize("mode", list(ReportMode))
@pytest.mark.parametrize("fail_on_error", [True, False])
def test_route_clean_run_produces_nothing(mode: ReportMode, fail_on_error: bool) -> None:
    assert route(ResultSet(), mode, fail_on_error) == []


def test_format_entry_matches_review_layout(warning_finding: Finding) -> None:
    assert format_entry(warning_finding) == (
        "- ⚠️ **Too many spaces inside braces** at src/app.yml:12:5 **(braces)**"
    )


def test_format_entry_marks_errors(error_finding: Finding) -> None:
    entry = format_entry(error_finding)

    assert entry.startswith("- 🛑 **Wrong indentation: expected 2 but found 4**")
    assert entry.endswith("at src/app.yml:20:1 **(indentation)**")


def test_format_report_lists_findings_in_encounter_order(sample_output: str) -> None:
    report = format_report(parse(sample_output))
    lines = report.splitlines()

    assert lines[0] == "### Resources"
    assert lines[1] == ""
    assert [line.rsplit(" ", 1)[-1] for line in lines[2:]] == [
        "**(braces)**",
        "**(indentation)**",
        "**(document-start)**",
        "**(line-length)**",
    ]
    assert report.endswith("\n")


def test_route_aggregate_fails_when_requested(mixed_results: ResultSet) -> None:
    header, report = route(mixed_results, ReportMode.AGGREGATE, fail_on_error=True)

    assert header.kind is ActionKind.FAILURE
    assert header.message == AGGREGATE_HEADER
    assert header.sticky is False
    assert header.file is None and header.line is None
    assert report.kind is ActionKind.MARKDOWN
    assert report.message == format_report(mixed_results)


def test_route_aggregate_warns_without_fail_on_error(mixed_results: ResultSet) -> None:
    actions = route(mixed_results, ReportMode.AGGREGATE, fail_on_error=False)

    assert [action.kind for action in actions] == [ActionKind.WARNING, ActionKind.MARKDOWN]
    assert not any(action.blocking for action in actions)


def test_route_aggregate_severity_ignores_finding_severity(warning_finding: Finding) -> None:
    results = ResultSet.from_findings([warning_finding])

    header, _ = route(results, ReportMode.AGGREGATE, fail_on_error=True)

    assert header.blocking


def test_route_inline_escalates_only_errors(mixed_results: ResultSet) -> None:
    warning_action, error_action = route(mixed_results, ReportMode.INLINE, fail_on_error=True)

    assert warning_action.kind is ActionKind.WARNING
    assert (warning_action.file, warning_action.line) == ("src/app.yml", "12")
    assert warning_action.message == "too many spaces inside braces"
    assert error_action.kind is ActionKind.FAILURE
    assert (error_action.file, error_action.line) == ("src/app.yml", "20")


def test_route_inline_without_fail_on_error_never_blocks(mixed_results: ResultSet) -> None:
    actions = route(mixed_results, ReportMode.INLINE, fail_on_error=False)

    assert [action.kind for action in actions] == [ActionKind.WARNING, ActionKind.WARNING]


def test_route_inline_emits_warnings_before_errors(sample_output: str) -> None:
    actions = route(parse(sample_output), "inline", True)

    assert [(action.file, action.line, action.kind) for action in actions] == [
        ("src/app.yml", "12", ActionKind.WARNING),
        ("config/ci.yaml", "1", ActionKind.WARNING),
        ("src/app.yml", "20", ActionKind.FAILURE),
        ("config/ci.yaml", "7", ActionKind.FAILURE),
    ]


def test_route_rejects_unknown_mode(mixed_results: ResultSet) -> None:
    with pytest.raises(ValueError):
        route(mixed_results, "sideways", True)
