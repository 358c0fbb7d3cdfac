# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the yamlreview package."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .severity import Severity


class Finding(BaseModel):
    """Describe one diagnostic line emitted by yamllint.

    ``line`` and ``character`` keep the text reported by the linter so that
    non-numeric positions survive untouched.
    """

    model_config = ConfigDict(frozen=True)

    file: str
    line: str
    character: str
    severity: Severity
    rule: str
    message: str

    @property
    def is_warning(self) -> bool:
        """Return ``True`` when the finding carries warning severity."""

        return self.severity is Severity.WARNING

    @property
    def location(self) -> str:
        """Return the ``file:line:character`` triple used in reports."""

        return f"{self.file}:{self.line}:{self.character}"


class ResultSet(BaseModel):
    """Classify the findings of a single yamllint invocation.

    ``all`` keeps the encounter order of the source text while ``warnings``
    and ``errors`` hold the same findings split by severity.
    """

    model_config = ConfigDict(frozen=True)

    warnings: tuple[Finding, ...] = Field(default_factory=tuple)
    errors: tuple[Finding, ...] = Field(default_factory=tuple)
    all: tuple[Finding, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _check_partition(self) -> ResultSet:
        """Reject result sets whose buckets disagree with ``all``.

        Returns:
            ResultSet: The validated instance.

        Raises:
            ValueError: If a bucket holds the wrong severity or ``all`` is not
                the in-order merge of both buckets.
        """

        if any(not finding.is_warning for finding in self.warnings):
            raise ValueError("warnings bucket contains a non-warning finding")
        if any(finding.is_warning for finding in self.errors):
            raise ValueError("errors bucket contains a warning finding")
        merged_warnings = tuple(finding for finding in self.all if finding.is_warning)
        merged_errors = tuple(finding for finding in self.all if not finding.is_warning)
        if merged_warnings != self.warnings or merged_errors != self.errors:
            raise ValueError("all must be the in-order merge of warnings and errors")
        return self

    @classmethod
    def from_findings(cls, findings: Iterable[Finding]) -> ResultSet:
        """Build a result set from findings listed in encounter order.

        Args:
            findings: Findings in the order their lines appeared.

        Returns:
            ResultSet: Findings classified into severity buckets.
        """

        ordered = tuple(findings)
        return cls(
            warnings=tuple(finding for finding in ordered if finding.is_warning),
            errors=tuple(finding for finding in ordered if not finding.is_warning),
            all=ordered,
        )

    def __len__(self) -> int:
        return len(self.all)

    def __bool__(self) -> bool:
        return bool(self.all)


__all__ = ["Finding", "ResultSet"]
