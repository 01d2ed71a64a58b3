"""SARIF v2.1.0 reporter for GitHub Code Scanning."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from editorconfig_lint import __version__
from editorconfig_lint.findings.models import CheckResult, Reason

_RULE_TEXT = {
    Reason.INDENT_STYLE: "Indentation uses the wrong indent style",
    Reason.INDENT_SIZE_MISMATCH: "Indentation is not a multiple of indent_size",
    Reason.END_OF_LINE_MISMATCH: "Line terminator does not match end_of_line",
    Reason.TRAILING_WHITESPACES: "Line has trailing whitespace",
    Reason.NO_FINAL_NEWLINE: "File does not end with a newline",
    Reason.BOM_NOT_FOUND: "File does not start with a byte-order mark",
    Reason.INVALID_CHARACTER: "Byte sequence is invalid in the configured charset",
}


def to_dict(results: List[CheckResult]) -> Dict[str, Any]:
    """Convert check results to a SARIF v2.1.0 dict."""
    rules: List[Dict[str, Any]] = []
    seen_rules: set[str] = set()
    sarif_results: List[Dict[str, Any]] = []

    for result in results:
        for d in result.diagnoses:
            rule_id = d.reason.value
            if rule_id not in seen_rules:
                seen_rules.add(rule_id)
                rules.append({
                    "id": rule_id,
                    "name": rule_id,
                    "shortDescription": {"text": _RULE_TEXT[d.reason]},
                    "defaultConfiguration": {"level": "error"},
                })

            # SARIF columns are 1-based; BomNotFound sits at column 0.
            sarif_results.append({
                "ruleId": rule_id,
                "level": "error",
                "message": {"text": f"{d.reason_text}: {_RULE_TEXT[d.reason]}"},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": result.file},
                            "region": {
                                "startLine": d.line,
                                "startColumn": max(d.start, 1),
                                "endColumn": max(d.end, 1),
                            },
                        }
                    }
                ],
            })

    return {
        "$schema": "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/main/sarif-2.1/schema/sarif-schema-2.1.0.json",
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "editorconfig-lint",
                        "version": __version__,
                        "rules": rules,
                    }
                },
                "results": sarif_results,
            }
        ],
    }


def render(results: List[CheckResult]) -> str:
    """Return SARIF JSON string."""
    return json.dumps(to_dict(results), indent=2)
