# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels reported by yamllint."""

    ERROR = "error"
    WARNING = "warning"


_WARNING_TOKEN: Final[str] = "warning"


def severity_from_token(token: str | None) -> Severity:
    """Map a yamllint bracket token onto :class:`Severity`.

    Only the exact token ``warning`` (surrounding whitespace ignored) is a
    warning. Everything else, including differently cased spellings and an
    empty token, is treated as an error.

    Args:
        token: Raw text found between the square brackets of a diagnostic line.

    Returns:
        Severity: ``Severity.WARNING`` for the warning token, otherwise ``Severity.ERROR``.
    """

    if token is not None and token.strip() == _WARNING_TOKEN:
        return Severity.WARNING
    return Severity.ERROR


__all__ = ["Severity", "severity_from_token"]
