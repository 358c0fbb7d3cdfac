# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn yamllint output into review reports and inline annotations."""

from __future__ import annotations

from .core.models import Finding, ResultSet
from .core.severity import Severity
from .parsers import parse
from .reporting.actions import ActionKind, RenderedAction
from .reporting.router import ReportMode, route

__all__ = [
    "ActionKind",
    "Finding",
    "RenderedAction",
    "ReportMode",
    "ResultSet",
    "Severity",
    "parse",
    "route",
]
