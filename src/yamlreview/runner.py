# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run yamllint and deliver its findings to an annotation sink."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from .config import LintConfig
from .core.errors import LinterNotFoundError
from .core.models import ResultSet
from .parsers import parse
from .process_utils import resolve_executable, run_command
from .reporting.actions import ActionKind, RenderedAction
from .reporting.router import route
from .reporting.sinks import AnnotationSink, emit

LOGGER = logging.getLogger(__name__)

YAMLLINT_EXECUTABLE: Final[str] = "yamllint"
MISSING_LINTER_MESSAGE: Final[str] = "Couldn't find yamllint command. Please install it first."


def yamllint_exists() -> bool:
    """Return ``True`` when the yamllint executable is available on ``PATH``."""

    return resolve_executable(YAMLLINT_EXECUTABLE) is not None


def build_command(
    paths: Sequence[str] = (".",),
    *,
    config_file: Path | None = None,
    strict: bool = False,
) -> list[str]:
    """Return the yamllint command line producing ``parsable`` output."""

    command = [YAMLLINT_EXECUTABLE, "-f", "parsable"]
    if config_file is not None:
        command.extend(["-c", str(config_file)])
    if strict:
        command.append("--strict")
    command.extend(paths or (".",))
    return command


def run_yamllint(
    root: Path,
    paths: Sequence[str] = (".",),
    *,
    config_file: Path | None = None,
    strict: bool = False,
    timeout: float | None = None,
) -> str:
    """Invoke yamllint inside ``root`` and return its raw stdout.

    yamllint exits non-zero whenever it reports problems, so the exit status
    is logged rather than treated as a failure.

    Args:
        root: Working directory for the linter.
        paths: Files or directories to lint, relative to ``root``.
        config_file: Optional yamllint configuration file.
        strict: Forward ``--strict`` so warnings also produce a failing exit.
        timeout: Seconds before the linter is abandoned.

    Returns:
        str: Captured stdout in ``parsable`` format.

    Raises:
        LinterNotFoundError: If yamllint is not installed.
    """

    if not yamllint_exists():
        raise LinterNotFoundError(MISSING_LINTER_MESSAGE)
    command = build_command(paths, config_file=config_file, strict=strict)
    LOGGER.debug("running %s in %s", " ".join(command), root)
    completed = run_command(command, cwd=root, check=False, timeout=timeout)
    LOGGER.debug("yamllint exited with status %d", completed.returncode)
    if completed.stderr:
        LOGGER.debug("yamllint stderr: %s", completed.stderr.strip())
    return completed.stdout or ""


@dataclass(slots=True)
class LintOutcome:
    """Summarise one lint run after its actions were delivered."""

    results: ResultSet
    actions: list[RenderedAction] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """Return ``True`` when any delivered action was blocking."""

        return any(action.blocking for action in self.actions)


def report(raw_text: str, config: LintConfig, sink: AnnotationSink) -> LintOutcome:
    """Parse ``raw_text`` and deliver the routed actions to ``sink``.

    Args:
        raw_text: yamllint ``parsable`` output.
        config: Settings selecting the mode and failure policy.
        sink: Destination for the rendered actions.

    Returns:
        LintOutcome: Parsed findings and the actions delivered.
    """

    results = parse(raw_text)
    actions = route(results, config.mode, config.fail_on_error)
    emit(actions, sink)
    return LintOutcome(results=results, actions=actions)


def lint(root: Path, config: LintConfig, sink: AnnotationSink) -> LintOutcome:
    """Run yamllint over ``root`` and report its findings to ``sink``.

    When yamllint is missing a single blocking failure is delivered and
    nothing is parsed.

    Args:
        root: Project directory to lint.
        config: Lint and reporting settings.
        sink: Destination for the rendered actions.

    Returns:
        LintOutcome: Parsed findings and the actions delivered.
    """

    try:
        raw_text = run_yamllint(root, config.paths, config_file=config.config_file, strict=config.strict)
    except LinterNotFoundError as exc:
        LOGGER.debug("yamllint not found on PATH")
        failure = RenderedAction(kind=ActionKind.FAILURE, message=str(exc))
        emit([failure], sink)
        return LintOutcome(results=ResultSet(), actions=[failure])
    return report(raw_text, config, sink)


__all__ = [
    "LintOutcome",
    "MISSING_LINTER_MESSAGE",
    "YAMLLINT_EXECUTABLE",
    "build_command",
    "lint",
    "report",
    "run_yamllint",
    "yamllint_exists",
]
