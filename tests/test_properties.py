from __future__ import annotations

import dataclasses

from hypothesis import given
from hypothesis import strategies as st

from editorconfig_lint.config.schema import Charset, Config, EndOfLine, IndentStyle
from editorconfig_lint.findings.models import Reason
from editorconfig_lint.scanner.engine import check_bytes

# Bytes biased towards whitespace, terminators and a few multi-byte leads.
interesting_bytes = st.lists(
    st.sampled_from([b" ", b"\t", b"\r", b"\n", b"a", b"\xc3", b"\xa9", b"\x7f", b"\xef\xbb\xbf", b"\x00"]),
    max_size=60,
).map(b"".join)

any_bytes = st.one_of(st.binary(max_size=80), interesting_bytes)

configs = st.builds(
    Config,
    indent_style=st.none() | st.sampled_from(list(IndentStyle)),
    indent_size=st.none() | st.integers(min_value=1, max_value=8),
    end_of_line=st.none() | st.sampled_from(list(EndOfLine)),
    charset=st.none() | st.sampled_from(list(Charset)),
    trim_trailing_whitespace=st.none() | st.booleans(),
    insert_final_newline=st.none() | st.booleans(),
)


@given(any_bytes)
def test_empty_config_reports_nothing(data: bytes):
    assert check_bytes(data, Config()) == []


@given(any_bytes, st.sampled_from([Charset.LATIN1, Charset.UTF8, Charset.UTF16_BE, Charset.UTF16_LE]))
def test_charset_only_reports_invalid_characters(data: bytes, charset: Charset):
    diagnoses = check_bytes(data, Config(charset=charset))
    assert all(d.reason is Reason.INVALID_CHARACTER for d in diagnoses)


@given(any_bytes, configs)
def test_unchecked_charset_never_reports_invalid(data: bytes, config: Config):
    config = dataclasses.replace(config, charset=None)
    diagnoses = check_bytes(data, config)
    assert not any(d.reason is Reason.INVALID_CHARACTER for d in diagnoses)


@given(any_bytes, configs)
def test_ranges_are_well_formed(data: bytes, config: Config):
    for d in check_bytes(data, config):
        if d.reason is Reason.BOM_NOT_FOUND:
            assert (d.line, d.range) == (1, (0, 0))
            continue
        assert 1 <= d.start <= d.end
        assert d.line >= 1


@given(any_bytes, configs)
def test_source_order(data: bytes, config: Config):
    diagnoses = check_bytes(data, config)
    for prev, cur in zip(diagnoses, diagnoses[1:]):
        assert prev.line <= cur.line
        if prev.line == cur.line:
            assert prev.start <= cur.start


@given(any_bytes, configs)
def test_idempotent(data: bytes, config: Config):
    assert check_bytes(data, config) == check_bytes(data, config)


@given(
    st.lists(st.text(alphabet="ab \t", max_size=8), max_size=10),
    st.sampled_from(list(EndOfLine)),
)
def test_consistent_line_endings_never_mismatch(lines, ending: EndOfLine):
    terminator = {EndOfLine.LF: "\n", EndOfLine.CRLF: "\r\n", EndOfLine.CR: "\r"}[ending]
    data = "".join(line + terminator for line in lines).encode("ascii")
    diagnoses = check_bytes(data, Config(end_of_line=ending))
    assert not any(d.reason is Reason.END_OF_LINE_MISMATCH for d in diagnoses)
