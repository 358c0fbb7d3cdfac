# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Actions produced by the report router for an annotation sink to execute."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ActionKind(str, Enum):
    """Enumerate the kinds of output an annotation sink understands."""

    FAILURE = "failure"
    WARNING = "warning"
    MARKDOWN = "markdown"


class RenderedAction(BaseModel):
    """Describe one message to hand to an annotation sink.

    ``file`` and ``line`` are set for inline annotations and left empty for
    run-level messages and the aggregated report.
    """

    model_config = ConfigDict(frozen=True)

    kind: ActionKind
    message: str
    file: str | None = None
    line: str | None = None
    sticky: bool = False

    @property
    def blocking(self) -> bool:
        """Return ``True`` when executing the action should fail the check."""

        return self.kind is ActionKind.FAILURE


__all__ = ["ActionKind", "RenderedAction"]
