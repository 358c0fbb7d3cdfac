# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrapper around ``subprocess`` for running the linter."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; commands are argument lists and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from typing import Final

TIMEOUT_RETURNCODE: Final[int] = 124


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str | None) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr


def resolve_executable(name: str) -> str | None:
    """Return the absolute path of ``name`` on ``PATH`` or ``None`` when missing."""

    return shutil.which(name)


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        raise ValueError("subprocess command requires at least one argument")
    head, *rest = args
    if Path(head).is_absolute():
        return [head, *rest]
    resolved = resolve_executable(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute ``args`` with captured text output.

    Args:
        args: Command and arguments; the executable is resolved on ``PATH``.
        cwd: Working directory for the child process.
        check: Raise :class:`SubprocessExecutionError` on a non-zero exit.
        timeout: Seconds before the child is abandoned.

    Returns:
        subprocess.CompletedProcess[str]: Completed process whose output is decoded
        as UTF-8, undecodable bytes replaced.
        A timeout is reported as return code ``124`` with a note on stderr.

    Raises:
        FileNotFoundError: If the executable cannot be resolved.
        SubprocessExecutionError: If ``check`` is true and the command fails.
    """

    normalized = _normalize_args(args)
    try:
        completed = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stdout = exc.stdout.decode("utf-8", errors="replace") if isinstance(exc.stdout, bytes) else exc.stdout or ""
        completed = subprocess.CompletedProcess(
            args=normalized,
            returncode=TIMEOUT_RETURNCODE,
            stdout=stdout,
            stderr=f"Command timed out after {timeout:.1f}s",
        )

    if check and completed.returncode != 0:
        raise SubprocessExecutionError(normalized, completed.returncode, completed.stderr)
    return completed


__all__ = ["SubprocessExecutionError", "resolve_executable", "run_command"]
