"""Scanner: charset readers and the check engine."""

from editorconfig_lint.scanner.engine import CheckState, check, check_bytes, check_file
from editorconfig_lint.scanner.models import (
    Bom,
    Character,
    Indent,
    IndentChar,
    Invalid,
    NewLine,
    NewLineChar,
    Valid,
)
from editorconfig_lint.scanner.reader import (
    CharacterReader,
    Latin1Reader,
    UncheckedReader,
    Utf8Reader,
    Utf16BeReader,
    Utf16LeReader,
    open_reader,
)

__all__ = [
    "Bom",
    "Character",
    "CharacterReader",
    "CheckState",
    "Indent",
    "IndentChar",
    "Invalid",
    "Latin1Reader",
    "NewLine",
    "NewLineChar",
    "UncheckedReader",
    "Utf16BeReader",
    "Utf16LeReader",
    "Utf8Reader",
    "Valid",
    "check",
    "check_bytes",
    "check_file",
    "open_reader",
]
