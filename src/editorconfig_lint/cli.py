"""editorconfig-lint CLI: Typer application with check, show-config, and fix commands."""

from __future__ import annotations

import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from editorconfig_lint import __version__

app = typer.Typer(
    name="editorconfig-lint",
    help="Check files against the rules in their .editorconfig.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

REPORT_FORMATS = ("text", "terminal", "json", "sarif")
CONFIG_FORMATS = ("ini", "json", "yaml")


def _load_config_or_exit(path: str):
    """Resolve the Config for *path*, exit 2 on failure."""
    from editorconfig_lint.config.loader import load_config
    from editorconfig_lint.config.schema import ConfigError

    try:
        return load_config(Path(path))
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    paths: List[str] = typer.Argument(..., help="Files to check"),
    format: str = typer.Option("text", "--format", "-f", help="Output format: text | terminal | json | sarif"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Check files and print every editorconfig violation."""
    from editorconfig_lint.findings.models import CheckResult
    from editorconfig_lint.output import json_report, sarif, terminal, text
    from editorconfig_lint.scanner.engine import check_file

    if format not in REPORT_FORMATS:
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)

    results: List[CheckResult] = []
    for path in paths:
        cfg = _load_config_or_exit(path)
        if verbose or debug:
            settings = ", ".join(f"{k}={v}" for k, v in cfg.to_dict().items()) or "none"
            console.print(f"[dim]{path}: {settings}[/dim]")

        start = time.perf_counter()
        try:
            diagnoses = check_file(path, cfg)
        except OSError as exc:
            console.print(f"[bold red]I/O error:[/bold red] {path}: {exc}")
            raise typer.Exit(code=2) from exc
        elapsed = (time.perf_counter() - start) * 1000

        if debug:
            console.print(f"[dim]{path}: checked in {elapsed:.1f}ms[/dim]")
        results.append(CheckResult(file=path, diagnoses=diagnoses, duration_ms=round(elapsed, 2)))

    # --- Output ---
    report_text: Optional[str] = None

    if format == "text":
        report_text = text.render(results)
        print(report_text, end="")
    elif format == "terminal":
        terminal.render(results, show_summary=verbose or debug)
    elif format == "json":
        report_text = json_report.render(results)
        print(report_text)
    elif format == "sarif":
        report_text = sarif.render(results)
        print(report_text)

    # --- Write to file ---
    if output:
        if report_text is None:
            # Terminal output has no file form; fall back to JSON.
            report_text = json_report.render(results)
        Path(output).write_text(report_text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    # Diagnoses are findings, not failures.
    raise typer.Exit(code=0)


# ── show-config ───────────────────────────────────────────────────────────────


@app.command("show-config")
def show_config(
    path: str = typer.Argument(..., help="File whose configuration to resolve"),
    format: str = typer.Option("ini", "--format", "-f", help="Output format: ini | json | yaml"),
) -> None:
    """Print the editorconfig properties that apply to a file."""
    from editorconfig_lint.output import config_report

    if format not in CONFIG_FORMATS:
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)

    cfg = _load_config_or_exit(path)
    print(config_report.render(cfg, format), end="")


# ── fix ───────────────────────────────────────────────────────────────────────


@app.command()
def fix() -> None:
    """Rewrite files to satisfy their .editorconfig (not available yet)."""
    console.print("[bold red]Error:[/bold red] fix is not implemented yet")
    raise typer.Exit(code=2)


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"editorconfig-lint {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """editorconfig-lint: check files against the rules in their .editorconfig."""
