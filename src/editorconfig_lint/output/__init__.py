"""Reporters: text, terminal, JSON, SARIF, and show-config renderers."""
