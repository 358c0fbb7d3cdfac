# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Route parsed findings to aggregated or inline review actions."""

from __future__ import annotations

from enum import Enum
from typing import Final

from ..core.models import Finding, ResultSet
from .actions import ActionKind, RenderedAction

AGGREGATE_HEADER: Final[str] = "YamlLint found issues:"
REPORT_TITLE: Final[str] = "### Resources"
WARNING_ICON: Final[str] = "⚠️"
ERROR_ICON: Final[str] = "🛑"


class ReportMode(str, Enum):
    """Enumerate the rendering strategies supported by :func:`route`."""

    AGGREGATE = "aggregate"
    INLINE = "inline"


def format_entry(finding: Finding) -> str:
    """Render a single finding as one Markdown bullet.

    Args:
        finding: Finding to render.

    Returns:
        str: Bullet line carrying severity icon, message, location and rule.
    """

    icon = WARNING_ICON if finding.is_warning else ERROR_ICON
    return f"- {icon} **{finding.message.capitalize()}** at {finding.location} **({finding.rule})**"


def format_report(results: ResultSet) -> str:
    """Render every finding of ``results`` as a Markdown report."""

    lines = [f"{REPORT_TITLE}\n"]
    lines.extend(format_entry(finding) for finding in results.all)
    return "\n".join(lines) + "\n"


def _severity_kind(*, blocking: bool) -> ActionKind:
    return ActionKind.FAILURE if blocking else ActionKind.WARNING


def _aggregate_actions(results: ResultSet, fail_on_error: bool) -> list[RenderedAction]:
    header = RenderedAction(
        kind=_severity_kind(blocking=fail_on_error),
        message=AGGREGATE_HEADER,
        sticky=False,
    )
    report = RenderedAction(kind=ActionKind.MARKDOWN, message=format_report(results))
    return [header, report]


def _inline_actions(results: ResultSet, fail_on_error: bool) -> list[RenderedAction]:
    actions = [
        RenderedAction(kind=ActionKind.WARNING, message=finding.message, file=finding.file, line=finding.line)
        for finding in results.warnings
    ]
    error_kind = _severity_kind(blocking=fail_on_error)
    actions.extend(
        RenderedAction(kind=error_kind, message=finding.message, file=finding.file, line=finding.line)
        for finding in results.errors
    )
    return actions


def route(
    results: ResultSet,
    mode: ReportMode | str = ReportMode.AGGREGATE,
    fail_on_error: bool = True,
) -> list[RenderedAction]:
    """Translate ``results`` into the actions an annotation sink should run.

    Aggregate mode yields one run-level header, failing or warning depending
    only on ``fail_on_error``, followed by a Markdown report of every finding.
    Inline mode yields one positioned action per finding; only error findings
    are escalated to failures, and only when ``fail_on_error`` is set.

    Args:
        results: Findings parsed from one yamllint run.
        mode: Rendering strategy to apply.
        fail_on_error: Whether issues should block the review.

    Returns:
        list[RenderedAction]: Actions in emission order; empty for a clean run.
    """

    if not results.all:
        return []
    if ReportMode(mode) is ReportMode.INLINE:
        return _inline_actions(results, fail_on_error)
    return _aggregate_actions(results, fail_on_error)


__all__ = [
    "AGGREGATE_HEADER",
    "ERROR_ICON",
    "REPORT_TITLE",
    "ReportMode",
    "WARNING_ICON",
    "format_entry",
    "format_report",
    "route",
]
