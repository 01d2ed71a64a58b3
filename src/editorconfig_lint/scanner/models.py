"""Character tokens produced by the readers, and the checker's line states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class NewLineChar(str, Enum):
    CR = "cr"
    LF = "lf"


class IndentChar(str, Enum):
    SPACE = "space"
    TAB = "tab"


@dataclass(frozen=True, slots=True)
class Bom:
    """A byte-order mark at the current position."""


@dataclass(frozen=True, slots=True)
class NewLine:
    kind: NewLineChar


@dataclass(frozen=True, slots=True)
class Indent:
    kind: IndentChar


@dataclass(frozen=True, slots=True)
class Valid:
    """A decoded code point other than whitespace or a line terminator."""

    data: bytes


@dataclass(frozen=True, slots=True)
class Invalid:
    """A byte sequence that failed to decode under the active charset."""

    data: bytes


Character = Union[Bom, NewLine, Indent, Valid, Invalid]


# --- Line states of the check engine ---


@dataclass(frozen=True, slots=True)
class IndentRun:
    """Still inside the leading whitespace of the line."""

    length: int = 0
    style_error: bool = False


@dataclass(frozen=True, slots=True)
class NonWhitespace:
    """At least one non-whitespace token has appeared on the line."""


@dataclass(frozen=True, slots=True)
class TrailingRun:
    """Whitespace seen after a non-whitespace token."""

    length: int


LineState = Union[IndentRun, NonWhitespace, TrailingRun]
