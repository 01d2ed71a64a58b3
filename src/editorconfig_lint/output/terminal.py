"""Rich terminal reporter: a table of diagnoses per run."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from editorconfig_lint.findings.models import CheckResult, Reason

_REASON_STYLE = {
    Reason.INVALID_CHARACTER: "bold white on red",
    Reason.BOM_NOT_FOUND: "bold white on red",
    Reason.END_OF_LINE_MISMATCH: "bold white on dark_orange",
    Reason.INDENT_STYLE: "bold black on yellow",
    Reason.INDENT_SIZE_MISMATCH: "bold black on yellow",
    Reason.TRAILING_WHITESPACES: "bold black on bright_cyan",
    Reason.NO_FINAL_NEWLINE: "bold black on bright_cyan",
}


def _reason_pill(reason: Reason, text: str) -> Text:
    return Text(f" {text} ", style=_REASON_STYLE.get(reason, ""))


def render(
    results: List[CheckResult],
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print check results to the terminal using Rich."""
    console = console or Console(stderr=True)
    total = sum(r.total_diagnoses for r in results)

    if total == 0:
        console.print()
        console.print("[bold green]No editorconfig violations found.[/bold green]")
        if show_summary:
            _print_summary(console, results)
        return

    console.print()
    table = Table(
        title="editorconfig-lint diagnoses",
        show_lines=False,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Reason", min_width=20)
    table.add_column("File", style="magenta")
    table.add_column("Line", justify="right", style="green")
    table.add_column("Columns", justify="right", style="cyan")

    for result in results:
        for d in result.diagnoses:
            table.add_row(
                _reason_pill(d.reason, d.reason_text),
                result.file,
                str(d.line),
                d.range_text,
            )

    console.print(table)

    if show_summary:
        _print_summary(console, results)


def _print_summary(console: Console, results: List[CheckResult]) -> None:
    console.print()
    console.print(f"[dim]Files checked:[/dim]  {len(results)}")
    console.print(f"[dim]Clean files:[/dim]    {sum(1 for r in results if r.clean)}")
    console.print(f"[dim]Diagnoses:[/dim]      {sum(r.total_diagnoses for r in results)}")
    console.print(f"[dim]Duration:[/dim]       {sum(r.duration_ms for r in results):.0f}ms")
