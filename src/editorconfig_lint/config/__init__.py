"""Configuration schema, .editorconfig parsing, and glob matching."""

from editorconfig_lint.config.loader import (
    CONFIG_FILENAME,
    EditorConfigFile,
    Section,
    find_config_files,
    load_config,
    parse_editorconfig,
    resolve_properties,
)
from editorconfig_lint.config.schema import (
    Charset,
    Config,
    ConfigError,
    EndOfLine,
    IndentStyle,
)

__all__ = [
    "CONFIG_FILENAME",
    "Charset",
    "Config",
    "ConfigError",
    "EditorConfigFile",
    "EndOfLine",
    "IndentStyle",
    "Section",
    "find_config_files",
    "load_config",
    "parse_editorconfig",
    "resolve_properties",
]
