# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse ``yamllint -f parsable`` output into findings."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from typing import Final

from .core.models import Finding, ResultSet
from .core.severity import severity_from_token

LOGGER = logging.getLogger(__name__)

# file, line and character are greedy so paths such as ``C:/cfg.yml`` keep
# their colons; the rule is the content of the last trailing parentheses.
YAMLLINT_PARSABLE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<file>.*):(?P<line>.*):(?P<character>.*): "
    r"\[(?P<level>[^\]]*)\](?P<message>.*)\((?P<rule>.*)\)$",
)
_REQUIRED_FIELDS: Final[tuple[str, ...]] = ("file", "line", "character", "rule")


def _decode(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _ensure_lines(value: str | bytes | Iterable[str | bytes]) -> list[str]:
    """Normalise text or byte output into a list of decoded lines."""

    if isinstance(value, (str, bytes)):
        return _decode(value).splitlines()
    return [_decode(item) for item in value]


def iter_pattern_matches(
    lines: Iterable[str],
    pattern: re.Pattern[str],
    *,
    skip_blank: bool = True,
) -> Iterator[re.Match[str]]:
    """Yield the first match of ``pattern`` found anywhere in each line.

    Args:
        lines: Raw lines emitted by the linter.
        pattern: Compiled regular expression describing a diagnostic line.
        skip_blank: When ``True`` blank lines are ignored.

    Yields:
        re.Match[str]: Match objects produced by ``pattern``.
    """

    for raw_line in lines:
        line = raw_line.strip()
        if skip_blank and not line:
            continue
        match = pattern.search(line)
        if match:
            yield match


def finding_from_match(match: re.Match[str]) -> Finding | None:
    """Build a :class:`Finding` from a parsable-format match.

    Args:
        match: Match produced by :data:`YAMLLINT_PARSABLE_PATTERN`.

    Returns:
        Finding | None: The finding, or ``None`` when a required field is blank.
    """

    fields = {name: (match.group(name) or "").strip() for name in match.re.groupindex}
    if any(not fields[name] for name in _REQUIRED_FIELDS):
        return None
    return Finding(
        file=fields["file"],
        line=fields["line"],
        character=fields["character"],
        severity=severity_from_token(fields["level"]),
        rule=fields["rule"],
        message=fields["message"],
    )


def parse(raw_text: str | bytes | Iterable[str | bytes]) -> ResultSet:
    """Parse yamllint ``parsable`` output into a :class:`ResultSet`.

    Lines that do not look like a diagnostic are skipped; the parser never
    raises on malformed text.

    Args:
        raw_text: Captured stdout, as one string or as separate lines. Bytes
            are decoded as UTF-8 with undecodable bytes replaced.

    Returns:
        ResultSet: Findings classified by severity, in encounter order.
    """

    findings: list[Finding] = []
    for match in iter_pattern_matches(_ensure_lines(raw_text), YAMLLINT_PARSABLE_PATTERN):
        finding = finding_from_match(match)
        if finding is not None:
            findings.append(finding)
    results = ResultSet.from_findings(findings)
    LOGGER.debug(
        "parsed %d yamllint finding(s): %d warning(s), %d error(s)",
        len(results),
        len(results.warnings),
        len(results.errors),
    )
    return results


__all__ = [
    "YAMLLINT_PARSABLE_PATTERN",
    "finding_from_match",
    "iter_pattern_matches",
    "parse",
]
