"""Configuration schema: enums and the immutable Config for a single file."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Mapping, Optional


class ConfigError(Exception):
    """Raised when a .editorconfig is missing, malformed, or unreadable."""


class IndentStyle(str, Enum):
    SPACE = "space"
    TAB = "tab"


class EndOfLine(str, Enum):
    LF = "lf"
    CRLF = "crlf"
    CR = "cr"


class Charset(str, Enum):
    LATIN1 = "latin1"
    UTF8 = "utf-8"
    UTF8_BOM = "utf-8-bom"
    UTF16_BE = "utf-16be"
    UTF16_LE = "utf-16le"


# Keys the checker understands; anything else in a section is ignored.
KNOWN_KEYS = (
    "indent_style",
    "indent_size",
    "tab_width",
    "end_of_line",
    "charset",
    "trim_trailing_whitespace",
    "insert_final_newline",
)

UNSET = "unset"


def _parse_enum(key: str, value: str, cls: type):
    try:
        return cls(value)
    except ValueError:
        choices = " | ".join(m.value for m in cls)
        raise ConfigError(f"Invalid value for {key}: {value!r} (expected {choices})") from None


def _parse_positive_int(key: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ConfigError(f"Invalid value for {key}: {value!r} (expected an integer)") from None
    if number <= 0:
        raise ConfigError(f"Invalid value for {key}: {value!r} (must be positive)")
    return number


def _parse_bool(key: str, value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ConfigError(f"Invalid value for {key}: {value!r} (expected true | false)")


@dataclass(frozen=True)
class Config:
    """Rules in force for one file. ``None`` means the option is not set."""

    indent_style: Optional[IndentStyle] = None
    indent_size: Optional[int] = None
    tab_width: Optional[int] = None
    end_of_line: Optional[EndOfLine] = None
    charset: Optional[Charset] = None
    trim_trailing_whitespace: Optional[bool] = None
    insert_final_newline: Optional[bool] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, str]) -> "Config":
        """Build a Config from raw (already merged) editorconfig properties.

        Keys and values are compared lower-cased. ``unset`` clears a key and
        ``indent_size = tab`` resolves to ``tab_width`` when one is given.
        """
        values: Dict[str, str] = {}
        for key, value in raw.items():
            key = key.strip().lower()
            if key not in KNOWN_KEYS:
                continue
            value = value.strip().lower()
            if value == UNSET:
                values.pop(key, None)
            else:
                values[key] = value

        kwargs: Dict[str, object] = {}
        if "indent_style" in values:
            kwargs["indent_style"] = _parse_enum("indent_style", values["indent_style"], IndentStyle)
        if "end_of_line" in values:
            kwargs["end_of_line"] = _parse_enum("end_of_line", values["end_of_line"], EndOfLine)
        if "charset" in values:
            kwargs["charset"] = _parse_enum("charset", values["charset"], Charset)
        if "tab_width" in values:
            kwargs["tab_width"] = _parse_positive_int("tab_width", values["tab_width"])
        if "indent_size" in values:
            if values["indent_size"] == "tab":
                kwargs["indent_size"] = kwargs.get("tab_width")
            else:
                kwargs["indent_size"] = _parse_positive_int("indent_size", values["indent_size"])
        for key in ("trim_trailing_whitespace", "insert_final_newline"):
            if key in values:
                kwargs[key] = _parse_bool(key, values[key])

        return cls(**kwargs)  # type: ignore[arg-type]

    def to_dict(self) -> Dict[str, object]:
        """Return the options that are set, as plain editorconfig values."""
        out: Dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.name] = value.value if isinstance(value, Enum) else value
        return out

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()
