"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from editorconfig_lint.findings.models import CheckResult


def to_dict(results: List[CheckResult]) -> Dict[str, Any]:
    """Convert check results to a JSON-serialisable dict."""
    files: List[Dict[str, Any]] = []
    for result in results:
        diagnoses: List[Dict[str, Any]] = []
        for d in result.diagnoses:
            diagnoses.append({
                "line": d.line,
                "start": d.start,
                "end": d.end,
                "reason": d.reason.value,
                "message": d.format(result.file),
                **({"indent_len": d.indent_len} if d.indent_len is not None else {}),
            })
        files.append({
            "file": result.file,
            "total_diagnoses": result.total_diagnoses,
            "diagnoses": diagnoses,
            "duration_ms": result.duration_ms,
        })

    return {
        "version": "1.0",
        "checked_files": len(results),
        "total_diagnoses": sum(r.total_diagnoses for r in results),
        "files": files,
    }


def render(results: List[CheckResult]) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(results), indent=2)
