"""Shared test fixtures: sample .editorconfig files and temp projects."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def sample_editorconfig() -> str:
    """A root .editorconfig with a catch-all and a language section."""
    return textwrap.dedent("""\
        # top-most EditorConfig file
        root = true

        [*]
        end_of_line = lf
        charset = utf-8
        trim_trailing_whitespace = true
        insert_final_newline = true

        [*.py]
        indent_style = space
        indent_size = 4

        [Makefile]
        indent_style = tab
    """)


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing an .editorconfig plus one file into *tmp_path*.

    Usage::

        path = make_project(editorconfig_text, "src/app.py", b"x = 1\\n")
    """

    def _make(editorconfig: str, relative: str, content: bytes) -> Path:
        (tmp_path / ".editorconfig").write_text(editorconfig, encoding="utf-8")
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        return target

    return _make


class ChunkedStream:
    """Binary stream returning at most one byte per read() call."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def read(self, size: int = -1) -> bytes:
        if self._pos >= len(self._data) or size == 0:
            return b""
        chunk = self._data[self._pos:self._pos + 1]
        self._pos += 1
        return chunk


class FailingStream:
    """Binary stream that raises after *ok_bytes* bytes."""

    def __init__(self, data: bytes, ok_bytes: int) -> None:
        self._data = data
        self._pos = 0
        self._ok = ok_bytes

    def read(self, size: int = -1) -> bytes:
        if self._pos >= self._ok:
            raise OSError("device went away")
        chunk = self._data[self._pos:self._pos + 1]
        self._pos += 1
        return chunk


@pytest.fixture
def chunked_stream() -> type:
    return ChunkedStream


@pytest.fixture
def failing_stream() -> type:
    return FailingStream
