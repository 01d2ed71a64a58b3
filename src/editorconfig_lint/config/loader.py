"""Locate, parse and merge the .editorconfig files that apply to a path."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from editorconfig_lint.config.globs import section_matches
from editorconfig_lint.config.schema import Config, ConfigError

CONFIG_FILENAME = ".editorconfig"


@dataclass
class Section:
    """One ``[glob]`` block and its raw properties, in file order."""

    name: str
    line_no: int
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class EditorConfigFile:
    """A parsed .editorconfig file."""

    path: Path
    root: bool = False
    sections: List[Section] = field(default_factory=list)

    @property
    def directory(self) -> Path:
        return self.path.parent


def parse_editorconfig_text(text: str, path: Path) -> EditorConfigFile:
    """Parse INI-style editorconfig *text*; *path* is used for anchoring and errors."""
    parsed = EditorConfigFile(path=path)
    current: Optional[Section] = None

    for line_no, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if line_no == 1:
            line = line.lstrip("\ufeff")
        if not line or line.startswith("#") or line.startswith(";"):
            continue

        if line.startswith("["):
            end = line.rfind("]")
            if end <= 0:
                raise ConfigError(f"Failed to parse {path}:{line_no}: unterminated section header")
            current = Section(name=line[1:end], line_no=line_no)
            parsed.sections.append(current)
            continue

        eq = line.find("=")
        colon = line.find(":")
        candidates = [i for i in (eq, colon) if i != -1]
        if not candidates:
            raise ConfigError(f"Failed to parse {path}:{line_no}: expected 'key = value'")
        sep = min(candidates)
        key = line[:sep].strip().lower()
        value = line[sep + 1:].strip()
        if not key:
            raise ConfigError(f"Failed to parse {path}:{line_no}: missing key")

        if key == "root":
            parsed.root = value.lower() == "true"
            continue
        if current is None:
            # Preamble keys other than root carry no meaning.
            continue
        current.properties[key] = value

    return parsed


def parse_editorconfig(path: Path) -> EditorConfigFile:
    """Read and parse the .editorconfig at *path*."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to open config file at {path}: {exc}") from exc
    return parse_editorconfig_text(text, path)


def find_config_files(path: Path, filename: str = CONFIG_FILENAME) -> List[EditorConfigFile]:
    """Collect config files from *path*'s directory upward, nearest first.

    The walk stops after the first file declaring ``root = true``.
    """
    found: List[EditorConfigFile] = []
    for directory in path.parents:
        candidate = directory / filename
        if not candidate.is_file():
            continue
        parsed = parse_editorconfig(candidate)
        found.append(parsed)
        if parsed.root:
            break
    return found


def _resolve(path: Path) -> Path:
    try:
        return Path(path).resolve(strict=True)
    except OSError as exc:
        raise ConfigError(f"Failed to canonicalize given path {path}: {exc}") from exc


def resolve_properties(path: Path, filename: str = CONFIG_FILENAME) -> Dict[str, str]:
    """Merge raw properties of every section matching *path*.

    Files are applied farthest first and sections in file order, so nearer
    files and later sections win key by key. Raises ConfigError when no
    section matches.
    """
    target = _resolve(path)
    merged: Dict[str, str] = {}
    matched = False

    for config_file in reversed(find_config_files(target, filename)):
        relative = target.relative_to(config_file.directory).as_posix()
        for section in config_file.sections:
            if section_matches(section.name, relative):
                matched = True
                for key, value in section.properties.items():
                    merged[key.lower()] = value

    if not matched:
        raise ConfigError(f"Failed to find matched config for {path}")
    return merged


def load_config(path: Path, filename: str = CONFIG_FILENAME) -> Config:
    """Load, validate, and return the Config in force for *path*."""
    return Config.from_mapping(resolve_properties(path, filename))
