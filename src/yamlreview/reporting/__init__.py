# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Routing and delivery of yamllint findings to review sinks."""

from __future__ import annotations

from .actions import ActionKind, RenderedAction
from .router import AGGREGATE_HEADER, ReportMode, format_entry, format_report, route
from .sinks import AnnotationSink, ConsoleSink, GitHubActionsSink, MemorySink, SinkKind, build_sink, emit

__all__ = [
    "AGGREGATE_HEADER",
    "ActionKind",
    "AnnotationSink",
    "ConsoleSink",
    "GitHubActionsSink",
    "MemorySink",
    "RenderedAction",
    "ReportMode",
    "SinkKind",
    "build_sink",
    "emit",
    "format_entry",
    "format_report",
    "route",
]
