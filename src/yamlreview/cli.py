# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for linting YAML and reporting the findings."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from .config import load_config
from .core.errors import ConfigError
from .reporting.router import ReportMode
from .reporting.sinks import ConsoleSink, SinkKind, build_sink
from .runner import lint, report

app = typer.Typer(
    name="yamlreview",
    help="Lint YAML with yamllint and report findings for code review.",
    no_args_is_help=True,
    add_completion=False,
)

STDIN_MARKER = "-"


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Log diagnostic details to stderr."),
) -> None:
    """Lint YAML with yamllint and report findings for code review."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        )


def _read_input(source: str) -> str:
    if source == STDIN_MARKER:
        return typer.get_binary_stream("stdin").read().decode("utf-8", errors="replace")
    path = Path(source).expanduser()
    if not path.is_file():
        raise typer.BadParameter(f"yamllint output file not found: {path}", param_hint="--input")
    return path.read_text(encoding="utf-8", errors="replace")


@app.command("lint")
def lint_command(
    paths: list[str] | None = typer.Argument(None, help="Files or directories to lint."),
    root: Path = typer.Option(Path.cwd(), "--root", "-r", help="Project root to lint."),
    mode: ReportMode | None = typer.Option(
        None,
        "--mode",
        "-m",
        help="Post one aggregated report or annotate each finding inline.",
    ),
    warn_only: bool = typer.Option(False, "--warn-only", help="Report issues as warnings without failing."),
    sink: SinkKind | None = typer.Option(None, "--sink", help="Where to deliver the findings."),
    config_file: Path | None = typer.Option(None, "--config-file", "-c", help="yamllint configuration file."),
    strict: bool = typer.Option(False, "--strict", help="Run yamllint in strict mode."),
    input_file: str | None = typer.Option(
        None,
        "--input",
        "-i",
        help="Parse saved yamllint parsable output instead of running yamllint ('-' reads stdin).",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji output."),
) -> None:
    """Run yamllint and deliver its findings to the selected sink."""
    project_root = root.expanduser().resolve()
    try:
        config = load_config(project_root).with_overrides(
            fail_on_error=False if warn_only else None,
            mode=mode,
            paths=tuple(paths) if paths else None,
            config_file=config_file.expanduser().resolve() if config_file else None,
            strict=True if strict else None,
            sink=sink,
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    use_color = False if no_color else None
    target = build_sink(config.sink, use_color=use_color, use_emoji=not no_emoji)
    if input_file is not None:
        outcome = report(_read_input(input_file), config, target)
    else:
        outcome = lint(project_root, config, target)

    if not outcome.actions and isinstance(target, ConsoleSink):
        target.ok("No yamllint issues found")
    raise typer.Exit(code=1 if outcome.failed else 0)


__all__ = ["app", "lint_command", "main"]
