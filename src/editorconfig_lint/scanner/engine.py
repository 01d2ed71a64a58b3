"""Check engine: a line-oriented state machine over Character tokens.

The engine pulls tokens from the charset reader, keeps a (line, column)
cursor and emits Diagnosis records in the order their triggering token is
consumed. Columns count every non-newline token on the line.

Line terminators are resolved lazily: a single CR or LF stays pending until
the next token shows whether it was a CRLF pair, another terminator, or the
first character of a new line.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from editorconfig_lint.config.schema import Charset, Config, EndOfLine, IndentStyle
from editorconfig_lint.findings.models import Diagnosis, Reason
from editorconfig_lint.scanner.models import (
    Bom,
    Character,
    Indent,
    IndentChar,
    IndentRun,
    Invalid,
    LineState,
    NewLine,
    NewLineChar,
    NonWhitespace,
    TrailingRun,
    Valid,
)
from editorconfig_lint.scanner.reader import open_reader

_BARE_ENDING = {
    NewLineChar.CR: EndOfLine.CR,
    NewLineChar.LF: EndOfLine.LF,
}

_WRONG_INDENT = {
    IndentStyle.SPACE: IndentChar.TAB,
    IndentStyle.TAB: IndentChar.SPACE,
}


class CheckState:
    """Mutable cursor and line state for one check run."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.line = 1
        self.col = 1
        self.state: LineState = IndentRun()
        self.prev_newline: Optional[NewLineChar] = None
        self.last: Optional[Character] = None
        self.diagnoses: List[Diagnosis] = []

    # ---- helpers ----

    def _push(self, start: int, end: int, reason: Reason, indent_len: Optional[int] = None) -> None:
        self.diagnoses.append(
            Diagnosis(line=self.line, range=(start, end), reason=reason, indent_len=indent_len)
        )

    def _eol_mismatch(self) -> None:
        # The terminator occupies the column right after the last token.
        self._push(self.col, self.col + 1, Reason.END_OF_LINE_MISMATCH)

    def _expects(self, ending: EndOfLine) -> bool:
        """True when an end_of_line rule is set and differs from *ending*."""
        return self.config.end_of_line is not None and self.config.end_of_line is not ending

    def _advance_line(self) -> None:
        self.line += 1
        self.col = 1

    def _resolve_pending_newline(self) -> None:
        """Settle a lone CR/LF once the next line's first token arrives."""
        if self.prev_newline is None:
            return
        if self._expects(_BARE_ENDING[self.prev_newline]):
            self._eol_mismatch()
        self.prev_newline = None
        self._advance_line()

    def _finish_indent(self, run: IndentRun) -> None:
        if run.style_error:
            self._push(self.col - run.length, self.col, Reason.INDENT_STYLE)
        elif self.config.indent_size is not None and run.length % self.config.indent_size != 0:
            self._push(
                self.col - run.length,
                self.col,
                Reason.INDENT_SIZE_MISMATCH,
                indent_len=run.length,
            )

    # ---- token handlers ----

    def _on_indent(self, ch: Indent) -> None:
        state = self.state
        if isinstance(state, NonWhitespace):
            self.state = TrailingRun(1)
        elif isinstance(state, IndentRun):
            if state.length == 0:
                self._resolve_pending_newline()
            style = self.config.indent_style
            wrong = style is not None and ch.kind is _WRONG_INDENT[style]
            self.state = IndentRun(state.length + 1, state.style_error or wrong)
        elif isinstance(state, TrailingRun):
            self.state = TrailingRun(state.length + 1)
        self.col += 1
        self.prev_newline = None

    def _on_newline(self, ch: NewLine) -> None:
        state = self.state
        trailing = 0
        if isinstance(state, TrailingRun):
            trailing = state.length
        elif isinstance(state, IndentRun):
            if state.style_error:
                self._push(self.col - state.length, self.col, Reason.INDENT_STYLE)
            trailing = state.length
        if trailing and self.config.trim_trailing_whitespace:
            self._push(self.col - trailing, self.col, Reason.TRAILING_WHITESPACES)

        self.state = IndentRun()

        prev = self.prev_newline
        if prev is None:
            self.prev_newline = ch.kind
            return

        if prev is NewLineChar.CR and ch.kind is NewLineChar.LF:
            if self._expects(EndOfLine.CRLF):
                self._eol_mismatch()
            self.prev_newline = None
        elif prev is NewLineChar.LF and ch.kind is NewLineChar.CR:
            # LF CR matches no convention, whichever one is configured.
            if self.config.end_of_line is not None:
                self._eol_mismatch()
            self.prev_newline = NewLineChar.CR
        else:
            if self._expects(_BARE_ENDING[prev]):
                self._eol_mismatch()
            self.prev_newline = ch.kind
        self._advance_line()

    def _on_content(self, ch: Union[Valid, Invalid, Bom]) -> None:
        state = self.state
        if isinstance(state, IndentRun):
            self._resolve_pending_newline()
            self._finish_indent(state)
        if not isinstance(ch, Valid):
            self._push(self.col, self.col + 1, Reason.INVALID_CHARACTER)
        self.state = NonWhitespace()
        self.col += 1

    def feed(self, ch: Character) -> None:
        """Consume one token."""
        if isinstance(ch, Indent):
            self._on_indent(ch)
        elif isinstance(ch, NewLine):
            self._on_newline(ch)
        else:
            self._on_content(ch)
        self.last = ch

    def finish(self) -> List[Diagnosis]:
        """Run end-of-input checks and return the diagnoses."""
        if (
            self.config.insert_final_newline
            and self.last is not None
            and not isinstance(self.last, NewLine)
        ):
            self._push(self.col, self.col, Reason.NO_FINAL_NEWLINE)
        return self.diagnoses


def check(source: BinaryIO, config: Config) -> List[Diagnosis]:
    """Check the bytes of *source* against *config* and return every diagnosis.

    *source* is any binary file-like object; it is read once, left to right.
    ``OSError`` from the source propagates and discards partial results.
    """
    state = CheckState(config)
    reader = open_reader(source, config.charset)

    if config.charset is Charset.UTF8_BOM:
        first = reader.next()
        if not isinstance(first, Bom):
            state.diagnoses.append(Diagnosis(line=1, range=(0, 0), reason=Reason.BOM_NOT_FOUND))
            if first is not None:
                state.feed(first)
    elif config.charset in (Charset.UTF16_BE, Charset.UTF16_LE):
        first = reader.next()
        if first is not None and not isinstance(first, Bom):
            state.feed(first)

    for ch in reader:
        state.feed(ch)

    return state.finish()


def check_bytes(data: bytes, config: Config) -> List[Diagnosis]:
    """Check an in-memory buffer."""
    return check(io.BytesIO(data), config)


def check_file(path: Union[str, Path], config: Config) -> List[Diagnosis]:
    """Open *path* in binary mode and check it."""
    with open(path, "rb") as f:
        return check(f, config)
