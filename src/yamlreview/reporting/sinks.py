# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Annotation sinks executing rendered actions against a review surface."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final, Protocol, TextIO, runtime_checkable

from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text

from .actions import ActionKind, RenderedAction
from .router import ERROR_ICON, WARNING_ICON

STEP_SUMMARY_ENV: Final[str] = "GITHUB_STEP_SUMMARY"

# Plain-text stand-ins for the report icons when emoji output is disabled.
_PLAIN_ICONS: Final[dict[str, str]] = {WARNING_ICON: "[warning]", ERROR_ICON: "[error]"}


class SinkKind(str, Enum):
    """Enumerate the built-in annotation sinks."""

    CONSOLE = "console"
    GITHUB = "github"


@runtime_checkable
class AnnotationSink(Protocol):
    """Receive failures, warnings and Markdown reports from a lint run."""

    def fail(
        self,
        message: str,
        *,
        file: str | None = None,
        line: str | None = None,
        sticky: bool = False,
    ) -> None:
        """Deliver a blocking failure, optionally anchored to ``file``/``line``."""
        ...

    def warn(
        self,
        message: str,
        *,
        file: str | None = None,
        line: str | None = None,
        sticky: bool = False,
    ) -> None:
        """Deliver a non-blocking warning, optionally anchored to ``file``/``line``."""
        ...

    def markdown(self, text: str) -> None:
        """Deliver a free-form Markdown report."""
        ...


def emit(actions: Iterable[RenderedAction], sink: AnnotationSink) -> None:
    """Execute ``actions`` against ``sink`` in order.

    Args:
        actions: Actions produced by the report router.
        sink: Destination receiving the actions.
    """

    for action in actions:
        if action.kind is ActionKind.MARKDOWN:
            sink.markdown(action.message)
        elif action.kind is ActionKind.FAILURE:
            sink.fail(action.message, file=action.file, line=action.line, sticky=action.sticky)
        else:
            sink.warn(action.message, file=action.file, line=action.line, sticky=action.sticky)


@dataclass(slots=True)
class MemorySink:
    """Record every delivered action; useful for embedding and tests."""

    actions: list[RenderedAction] = field(default_factory=list)

    @property
    def markdowns(self) -> list[str]:
        return [action.message for action in self.actions if action.kind is ActionKind.MARKDOWN]

    def fail(self, message: str, *, file: str | None = None, line: str | None = None, sticky: bool = False) -> None:
        self.actions.append(
            RenderedAction(kind=ActionKind.FAILURE, message=message, file=file, line=line, sticky=sticky),
        )

    def warn(self, message: str, *, file: str | None = None, line: str | None = None, sticky: bool = False) -> None:
        self.actions.append(
            RenderedAction(kind=ActionKind.WARNING, message=message, file=file, line=line, sticky=sticky),
        )

    def markdown(self, text: str) -> None:
        self.actions.append(RenderedAction(kind=ActionKind.MARKDOWN, message=text))


@dataclass(slots=True)
class ConsoleSink:
    """Print actions to the terminal with rich.

    ``use_color`` of ``None`` lets rich decide from the output stream. With
    ``use_emoji`` off, message prefixes are dropped and the report icons are
    replaced by bracketed severity labels.
    """

    use_color: bool | None = None
    use_emoji: bool = True
    console: Console | None = None

    def fail(self, message: str, *, file: str | None = None, line: str | None = None, sticky: bool = False) -> None:
        del sticky
        self._line("❌ ", _with_position(message, file, line), style="bold red")

    def warn(self, message: str, *, file: str | None = None, line: str | None = None, sticky: bool = False) -> None:
        del sticky
        self._line("⚠️ ", _with_position(message, file, line), style="yellow")

    def ok(self, message: str) -> None:
        """Report a clean run."""

        self._line("✅ ", message, style="green")

    def markdown(self, text: str) -> None:
        if not self.use_emoji:
            for icon, label in _PLAIN_ICONS.items():
                text = text.replace(icon, label)
        console = self._console()
        if self._colored(console):
            console.print(Markdown(text))
        else:
            console.print(Text(text.rstrip("\n")))

    def _line(self, prefix: str, message: str, *, style: str) -> None:
        console = self._console()
        text = Text(f"{prefix if self.use_emoji else ''}{message}")
        if self._colored(console):
            text.stylize(style)
        console.print(text)

    def _colored(self, console: Console) -> bool:
        if self.use_color is None:
            return console.is_terminal
        return self.use_color

    def _console(self) -> Console:
        # Bound lazily and without a fixed file so output follows the current sys.stdout.
        if self.console is None:
            self.console = Console(
                no_color=self.use_color is False,
                emoji=False,
                highlight=False,
                soft_wrap=True,
            )
        return self.console


def _with_position(message: str, file: str | None, line: str | None) -> str:
    if file is None:
        return message
    if line is None:
        return f"{file}: {message}"
    return f"{file}:{line}: {message}"


def _gha_escape(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _gha_escape_property(value: str) -> str:
    return _gha_escape(value).replace(":", "%3A").replace(",", "%2C")


@dataclass(slots=True)
class GitHubActionsSink:
    """Emit GitHub Actions workflow commands and a job summary.

    Failures and warnings become ``::error``/``::warning`` commands so GitHub
    attaches them to the pull request diff. Markdown reports are appended to
    the job summary file when ``GITHUB_STEP_SUMMARY`` is set, otherwise they
    are written to the output stream.
    """

    stream: TextIO | None = None
    env: Mapping[str, str] | None = None

    def fail(self, message: str, *, file: str | None = None, line: str | None = None, sticky: bool = False) -> None:
        del sticky
        self._command("error", message, file=file, line=line)

    def warn(self, message: str, *, file: str | None = None, line: str | None = None, sticky: bool = False) -> None:
        del sticky
        self._command("warning", message, file=file, line=line)

    def markdown(self, text: str) -> None:
        environ = self.env if self.env is not None else os.environ
        summary_path = environ.get(STEP_SUMMARY_ENV)
        if summary_path:
            with Path(summary_path).open("a", encoding="utf-8") as handle:
                handle.write(text)
                if not text.endswith("\n"):
                    handle.write("\n")
            return
        self._write(text.rstrip("\n"))

    def _command(self, kind: str, message: str, *, file: str | None, line: str | None) -> None:
        props: list[str] = []
        if file:
            props.append(f"file={_gha_escape_property(file)}")
        if line:
            props.append(f"line={_gha_escape_property(line)}")
        head = f"::{kind} {','.join(props)}" if props else f"::{kind}"
        self._write(f"{head}::{_gha_escape(message)}")

    def _write(self, text: str) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(f"{text}\n")


def build_sink(kind: SinkKind | str, *, use_color: bool | None = None, use_emoji: bool = True) -> AnnotationSink:
    """Instantiate the built-in sink named by ``kind``.

    Args:
        kind: Sink identifier.
        use_color: Colour preference forwarded to the console sink.
        use_emoji: Emoji preference forwarded to the console sink.

    Returns:
        AnnotationSink: Fresh sink instance.
    """

    if SinkKind(kind) is SinkKind.GITHUB:
        return GitHubActionsSink()
    return ConsoleSink(use_color=use_color, use_emoji=use_emoji)


__all__ = [
    "AnnotationSink",
    "ConsoleSink",
    "GitHubActionsSink",
    "MemorySink",
    "STEP_SUMMARY_ENV",
    "SinkKind",
    "build_sink",
    "emit",
]
