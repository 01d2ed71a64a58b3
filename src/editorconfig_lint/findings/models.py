"""Diagnosis data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Reason(str, Enum):
    INDENT_STYLE = "IndentStyle"
    INDENT_SIZE_MISMATCH = "IndentSizeMismatch"
    END_OF_LINE_MISMATCH = "EndOfLineMismatch"
    TRAILING_WHITESPACES = "TrailingWhiteSpaces"
    NO_FINAL_NEWLINE = "NoFinalNewline"
    BOM_NOT_FOUND = "BomNotFound"
    INVALID_CHARACTER = "InvalidCharacter"


@dataclass(frozen=True)
class Diagnosis:
    """A single rule violation.

    ``range`` is a 1-based, inclusive-exclusive column span on ``line``;
    ``start == end`` denotes a point. ``indent_len`` is only set for
    ``IndentSizeMismatch`` and holds the observed indent length.
    """

    line: int
    range: Tuple[int, int]
    reason: Reason
    indent_len: Optional[int] = None

    @property
    def start(self) -> int:
        return self.range[0]

    @property
    def end(self) -> int:
        return self.range[1]

    @property
    def reason_text(self) -> str:
        if self.reason is Reason.INDENT_SIZE_MISMATCH:
            return f"{self.reason.value}({self.indent_len})"
        return self.reason.value

    @property
    def range_text(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start},{self.end}"

    def format(self, file_name: object) -> str:
        """Render as ``error: <REASON> at <file>:<line>:<range>``."""
        return f"error: {self.reason_text} at {file_name}:{self.line}:{self.range_text}"


@dataclass
class CheckResult:
    """Outcome of checking one file."""

    file: str
    diagnoses: List[Diagnosis] = field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def total_diagnoses(self) -> int:
        return len(self.diagnoses)

    @property
    def clean(self) -> bool:
        return not self.diagnoses
