"""Character readers: one decoder per charset.

Each reader owns a binary stream and turns it into Character tokens, one
per ``next()`` call, returning ``None`` at end of input. Readers never
backtrack: bytes consumed while composing a multi-byte sequence are part of
the token even when the sequence turns out to be invalid.
"""

from __future__ import annotations

from typing import BinaryIO, Dict, Iterator, Optional

from editorconfig_lint.config.schema import Charset
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

_SPECIALS: Dict[int, Character] = {
    0x0D: NewLine(NewLineChar.CR),
    0x0A: NewLine(NewLineChar.LF),
    0x20: Indent(IndentChar.SPACE),
    0x09: Indent(IndentChar.TAB),
}

_UTF8_BOM = "\ufeff"


class CharacterReader:
    """Base for the charset readers; holds the byte source."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def _read(self, size: int) -> bytes:
        """Read up to *size* bytes, retrying short reads until EOF."""
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self._stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def next(self) -> Optional[Character]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Character]:
        while True:
            ch = self.next()
            if ch is None:
                return
            yield ch


class Utf8Reader(CharacterReader):
    def next(self) -> Optional[Character]:
        head = self._read(1)
        if not head:
            return None
        byte = head[0]
        if byte in _SPECIALS:
            return _SPECIALS[byte]
        if byte < 0x80:
            return Valid(head)

        if byte & 0xF8 == 0xF0:
            size = 4
        elif byte & 0xF0 == 0xE0:
            size = 3
        elif byte & 0xE0 == 0xC0:
            size = 2
        else:
            return Invalid(head)

        data = head + self._read(size - 1)
        if len(data) == size:
            try:
                decoded = data.decode("utf-8")
            except UnicodeDecodeError:
                return Invalid(data)
            if decoded == _UTF8_BOM:
                return Bom()
            return Valid(data)
        return Invalid(data)


class Latin1Reader(CharacterReader):
    def next(self) -> Optional[Character]:
        head = self._read(1)
        if not head:
            return None
        byte = head[0]
        if byte in _SPECIALS:
            return _SPECIALS[byte]
        # DEL and the C1 control band (plus NBSP) are rejected.
        if 0x7F <= byte <= 0xA0:
            return Invalid(head)
        return Valid(head)


class _Utf16Reader(CharacterReader):
    """Shared UTF-16 logic; subclasses say where the high byte sits."""

    bom: bytes = b""
    high: int = 0  # index of the high-order byte within a code unit

    def next(self) -> Optional[Character]:
        unit = self._read(2)
        if not unit:
            return None
        if len(unit) == 1:
            return Invalid(unit)
        if unit == self.bom:
            return Bom()

        high, low = unit[self.high], unit[1 - self.high]
        if high == 0x00 and low in _SPECIALS:
            return _SPECIALS[low]

        if 0xD8 <= high <= 0xDB:
            trail = self._read(2)
            data = unit + trail
            if len(trail) == 2 and 0xDC <= trail[self.high] <= 0xDF:
                return Valid(data)
            return Invalid(data)

        return Valid(unit)


class Utf16LeReader(_Utf16Reader):
    bom = b"\xff\xfe"
    high = 1


class Utf16BeReader(_Utf16Reader):
    bom = b"\xfe\xff"
    high = 0


class UncheckedReader(CharacterReader):
    """Byte-transparent reader used when no charset is configured."""

    def next(self) -> Optional[Character]:
        head = self._read(1)
        if not head:
            return None
        return _SPECIALS.get(head[0]) or Valid(head)


def open_reader(stream: BinaryIO, charset: Optional[Charset]) -> CharacterReader:
    """Return the reader for *charset* over *stream*."""
    if charset is None:
        return UncheckedReader(stream)
    if charset is Charset.LATIN1:
        return Latin1Reader(stream)
    if charset in (Charset.UTF8, Charset.UTF8_BOM):
        return Utf8Reader(stream)
    if charset is Charset.UTF16_BE:
        return Utf16BeReader(stream)
    if charset is Charset.UTF16_LE:
        return Utf16LeReader(stream)
    raise ValueError(f"Unsupported charset: {charset!r}")
