"""Diagnosis models."""

from editorconfig_lint.findings.models import CheckResult, Diagnosis, Reason

__all__ = ["CheckResult", "Diagnosis", "Reason"]
