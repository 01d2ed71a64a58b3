"""Plain text reporter: one ``error: ...`` line per diagnosis."""

from __future__ import annotations

from typing import List

from editorconfig_lint.findings.models import CheckResult


def render_lines(results: List[CheckResult]) -> List[str]:
    lines: List[str] = []
    for result in results:
        lines.extend(d.format(result.file) for d in result.diagnoses)
    return lines


def render(results: List[CheckResult]) -> str:
    """Return the report text; empty when every file is clean."""
    lines = render_lines(results)
    return "\n".join(lines) + "\n" if lines else ""
