"""Tests for the charset readers."""

import io

import pytest

from editorconfig_lint.config.schema import Charset
from editorconfig_lint.scanner.models import (
    Bom,
    Indent,
    IndentChar,
    Invalid,
    NewLine,
    NewLineChar,
    Valid,
)
from editorconfig_lint.scanner.reader import (
    Latin1Reader,
    UncheckedReader,
    Utf8Reader,
    Utf16BeReader,
    Utf16LeReader,
    open_reader,
)

CR = NewLine(NewLineChar.CR)
LF = NewLine(NewLineChar.LF)
SPACE = Indent(IndentChar.SPACE)
TAB = Indent(IndentChar.TAB)


def _tokens(reader_cls, data: bytes):
    return list(reader_cls(io.BytesIO(data)))


class TestOpenReader:
    @pytest.mark.parametrize(
        "charset, expected",
        [
            (None, UncheckedReader),
            (Charset.LATIN1, Latin1Reader),
            (Charset.UTF8, Utf8Reader),
            (Charset.UTF8_BOM, Utf8Reader),
            (Charset.UTF16_BE, Utf16BeReader),
            (Charset.UTF16_LE, Utf16LeReader),
        ],
    )
    def test_dispatch(self, charset, expected):
        assert type(open_reader(io.BytesIO(b""), charset)) is expected

    def test_end_of_input(self):
        reader = open_reader(io.BytesIO(b""), Charset.UTF8)
        assert reader.next() is None
        assert reader.next() is None


class TestUtf8Reader:
    def test_specials_and_ascii(self):
        assert _tokens(Utf8Reader, b"a \t\r\n") == [Valid(b"a"), SPACE, TAB, CR, LF]

    @pytest.mark.parametrize("text", ["é", "€", "😀"])
    def test_multibyte_sequences(self, text):
        data = text.encode("utf-8")
        assert _tokens(Utf8Reader, data) == [Valid(data)]

    def test_bom(self):
        assert _tokens(Utf8Reader, b"\xef\xbb\xbfa") == [Bom(), Valid(b"a")]

    @pytest.mark.parametrize("byte", [b"\x80", b"\xbf", b"\xf8", b"\xff"])
    def test_bad_leading_byte(self, byte):
        assert _tokens(Utf8Reader, byte) == [Invalid(byte)]

    def test_truncated_sequence(self):
        assert _tokens(Utf8Reader, b"\xe2\x82") == [Invalid(b"\xe2\x82")]

    def test_bad_continuation_consumes_bytes(self):
        # The ASCII byte after the lead is swallowed into the invalid token.
        assert _tokens(Utf8Reader, b"\xc3Ab") == [Invalid(b"\xc3A"), Valid(b"b")]

    def test_overlong_encoding_is_invalid(self):
        assert _tokens(Utf8Reader, b"\xc0\xaf") == [Invalid(b"\xc0\xaf")]

    def test_encoded_surrogate_is_invalid(self):
        assert _tokens(Utf8Reader, b"\xed\xa0\x80") == [Invalid(b"\xed\xa0\x80")]

    def test_short_reads_are_retried(self, chunked_stream):
        reader = Utf8Reader(chunked_stream("€\n".encode("utf-8")))
        assert list(reader) == [Valid("€".encode("utf-8")), LF]

    def test_io_error_propagates(self, failing_stream):
        reader = Utf8Reader(failing_stream(b"abc", ok_bytes=1))
        assert reader.next() == Valid(b"a")
        with pytest.raises(OSError):
            reader.next()


class TestLatin1Reader:
    def test_printable_bytes_are_valid(self):
        assert _tokens(Latin1Reader, b"A\xa1\xff") == [
            Valid(b"A"), Valid(b"\xa1"), Valid(b"\xff"),
        ]

    @pytest.mark.parametrize("byte", [b"\x7f", b"\x80", b"\x9f", b"\xa0"])
    def test_control_band_is_invalid(self, byte):
        assert _tokens(Latin1Reader, byte) == [Invalid(byte)]

    def test_c0_controls_outside_band_are_valid(self):
        assert _tokens(Latin1Reader, b"\x01\x1f") == [Valid(b"\x01"), Valid(b"\x1f")]

    def test_specials(self):
        assert _tokens(Latin1Reader, b" \t\r\n") == [SPACE, TAB, CR, LF]


class TestUtf16LeReader:
    def test_specials_and_text(self):
        data = "a \t\r\n".encode("utf-16-le")
        assert _tokens(Utf16LeReader, data) == [Valid(b"a\x00"), SPACE, TAB, CR, LF]

    def test_bom(self):
        assert _tokens(Utf16LeReader, b"\xff\xfe") == [Bom()]

    def test_big_endian_bom_is_plain_text(self):
        assert _tokens(Utf16LeReader, b"\xfe\xff") == [Valid(b"\xfe\xff")]

    def test_surrogate_pair(self):
        data = "😀".encode("utf-16-le")
        assert _tokens(Utf16LeReader, data) == [Valid(data)]

    def test_lone_high_surrogate(self):
        assert _tokens(Utf16LeReader, b"\x3d\xd8a\x00") == [Invalid(b"\x3d\xd8a\x00")]

    def test_high_surrogate_at_eof(self):
        assert _tokens(Utf16LeReader, b"\x3d\xd8") == [Invalid(b"\x3d\xd8")]

    def test_odd_trailing_byte(self):
        assert _tokens(Utf16LeReader, b"a\x00b") == [Valid(b"a\x00"), Invalid(b"b")]

    def test_non_ascii_code_unit(self):
        data = "é".encode("utf-16-le")
        assert _tokens(Utf16LeReader, data) == [Valid(data)]


class TestUtf16BeReader:
    def test_specials_and_text(self):
        data = "a \t\r\n".encode("utf-16-be")
        assert _tokens(Utf16BeReader, data) == [Valid(b"\x00a"), SPACE, TAB, CR, LF]

    def test_bom(self):
        assert _tokens(Utf16BeReader, b"\xfe\xff") == [Bom()]

    def test_surrogate_pair(self):
        data = "😀".encode("utf-16-be")
        assert _tokens(Utf16BeReader, data) == [Valid(data)]

    def test_lone_high_surrogate(self):
        assert _tokens(Utf16BeReader, b"\xd8\x3d\x00a") == [Invalid(b"\xd8\x3d\x00a")]

    def test_odd_trailing_byte(self):
        assert _tokens(Utf16BeReader, b"\x00") == [Invalid(b"\x00")]


class TestUncheckedReader:
    def test_every_other_byte_is_valid(self):
        assert _tokens(UncheckedReader, b"\xff\x00\x80") == [
            Valid(b"\xff"), Valid(b"\x00"), Valid(b"\x80"),
        ]

    def test_bom_is_not_recognised(self):
        assert _tokens(UncheckedReader, b"\xef\xbb\xbf") == [
            Valid(b"\xef"), Valid(b"\xbb"), Valid(b"\xbf"),
        ]

    def test_specials(self):
        assert _tokens(UncheckedReader, b" \t\r\n") == [SPACE, TAB, CR, LF]
