"""EditorConfig section globs: brace expansion and glob-to-regex translation.

Supported syntax:
  - ``*`` matches any run of characters except ``/``; ``**`` matches anything.
  - ``?`` matches one character except ``/``.
  - ``[seq]`` / ``[!seq]`` character classes.
  - ``{a,b,c}`` alternation (may nest) and ``{n..m}`` integer ranges.
  - ``\\`` escapes the next character.

A section without ``/`` matches the file's basename at any depth; one that
contains ``/`` is anchored at the directory holding the ``.editorconfig``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Optional, Tuple

from editorconfig_lint.config.schema import ConfigError

_RANGE_RE = re.compile(r"^([+-]?\d+)\.\.([+-]?\d+)$")


def _find_closing_brace(pattern: str, start: int) -> Optional[int]:
    """Return the index of the ``}`` matching the ``{`` at *start*."""
    depth = 0
    idx = start
    while idx < len(pattern):
        ch = pattern[idx]
        if ch == "\\":
            idx += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return idx
        idx += 1
    return None


def _split_alternatives(inner: str) -> List[str]:
    """Split brace contents on top-level commas."""
    parts: List[str] = []
    depth = 0
    current = []
    idx = 0
    while idx < len(inner):
        ch = inner[idx]
        if ch == "\\" and idx + 1 < len(inner):
            current.append(inner[idx:idx + 2])
            idx += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
            idx += 1
            continue
        current.append(ch)
        idx += 1
    parts.append("".join(current))
    return parts


def _find_open_brace(pattern: str) -> Optional[int]:
    idx = 0
    while idx < len(pattern):
        ch = pattern[idx]
        if ch == "\\":
            idx += 2
            continue
        if ch == "{":
            return idx
        idx += 1
    return None


def expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternations and ``{n..m}`` ranges into plain globs.

    A brace group without a comma or range (``{single}``) is kept literally.
    Raises ConfigError when a ``{`` has no matching ``}``.
    """
    begin = _find_open_brace(pattern)
    if begin is None:
        return [pattern]

    end = _find_closing_brace(pattern, begin)
    if end is None:
        raise ConfigError(f"Unmatched '{{' in section pattern: {pattern!r}")

    prefix = pattern[:begin]
    inner = pattern[begin + 1:end]
    suffix = pattern[end + 1:]

    range_match = _RANGE_RE.match(inner)
    if range_match:
        low, high = int(range_match.group(1)), int(range_match.group(2))
        if low > high:
            low, high = high, low
        alternatives = [str(n) for n in range(low, high + 1)]
    else:
        parts = _split_alternatives(inner)
        if len(parts) == 1:
            alternatives = ["\\{" + inner + "\\}"]
        else:
            alternatives = parts

    expanded: List[str] = []
    tails = expand_braces(suffix)
    for alt in alternatives:
        for head in expand_braces(alt):
            for tail in tails:
                expanded.append(prefix + head + tail)
    return expanded


def _translate_class(glob: str, idx: int) -> Tuple[Optional[str], int]:
    """Translate a ``[...]`` class starting at *idx*; returns (regex, next index)."""
    end = glob.find("]", idx + 1)
    if end == -1:
        return None, idx + 1
    body = glob[idx + 1:end]
    negate = body.startswith("!") or body.startswith("^")
    if negate:
        body = body[1:]
    if not body:
        return None, idx + 1
    chars = []
    for ch in body:
        chars.append("-" if ch == "-" else re.escape(ch))
    if negate:
        return "[^/" + "".join(chars) + "]", end + 1
    return "[" + "".join(chars) + "]", end + 1


def translate(glob: str) -> str:
    """Translate one brace-free editorconfig glob into a regex body."""
    out: List[str] = []
    idx = 0
    n = len(glob)
    while idx < n:
        ch = glob[idx]
        if ch == "\\" and idx + 1 < n:
            out.append(re.escape(glob[idx + 1]))
            idx += 2
        elif ch == "/" and glob.startswith("/**/", idx):
            out.append("(?:/|/.*/)")
            idx += 4
        elif ch == "*":
            if idx + 1 < n and glob[idx + 1] == "*":
                out.append(".*")
                idx += 2
            else:
                out.append("[^/]*")
                idx += 1
        elif ch == "?":
            out.append("[^/]")
            idx += 1
        elif ch == "[":
            regex, idx = _translate_class(glob, idx)
            out.append(regex if regex is not None else re.escape("["))
        else:
            out.append(re.escape(ch))
            idx += 1
    return "".join(out)


@lru_cache(maxsize=256)
def compile_section(section: str) -> Tuple["re.Pattern[str]", ...]:
    """Compile a section header into the regexes it stands for."""
    if "/" in section:
        anchor = ""
        if section.startswith("/"):
            section = section[1:]
    else:
        anchor = "(?:.*/)?"
    if section.startswith("**/"):
        anchor = "(?:.*/)?"
        section = section[3:]
    return tuple(
        re.compile(anchor + translate(glob) + r"\Z", re.DOTALL)
        for glob in expand_braces(section)
    )


def section_matches(section: str, relative_path: str) -> bool:
    """Return True if *relative_path* (posix, relative to the config dir) matches."""
    return any(p.match(relative_path) for p in compile_section(section))
