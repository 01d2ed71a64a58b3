"""Renderers for ``show-config``."""

from __future__ import annotations

import json

import yaml

from editorconfig_lint.config.schema import Config


def _ini_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_ini(config: Config) -> str:
    """Return ``key = value`` lines for every option that is set."""
    return "".join(f"{k} = {_ini_value(v)}\n" for k, v in config.to_dict().items())


def render_json(config: Config) -> str:
    return json.dumps(config.to_dict(), indent=2) + "\n"


def render_yaml(config: Config) -> str:
    return yaml.safe_dump(config.to_dict(), sort_keys=False, default_flow_style=False)


RENDERERS = {
    "ini": render_ini,
    "json": render_json,
    "yaml": render_yaml,
}


def render(config: Config, fmt: str = "ini") -> str:
    return RENDERERS[fmt](config)
