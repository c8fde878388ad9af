"""Small text helpers: trimming, splitting and reading checklist source files."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from itertools import dropwhile
from pathlib import Path
from typing import Iterator

# Whitespace and control characters, as classified in the C locale.
_TRIM_CHARS = "".join(chr(code) for code in range(33)) + "\x7f"

# Longest chunk a single read returns; longer lines arrive as several lines.
_MAX_CHUNK = 2047

_UTF8_BOM = b"\xef\xbb\xbf"


@dataclass
class Line:
    """One line of a text file, trimmed, with its tokens when split."""

    line: str = ""
    tokens: list[str] = field(default_factory=list)


def trim(text: str) -> str:
    """Strip leading and trailing whitespace and control characters."""
    return text.strip(_TRIM_CHARS)


def split_string(line: str, split_char: str) -> list[str]:
    """Split on ``split_char``, dropping empty segments and trimming the rest."""
    return [trim(part) for part in line.split(split_char) if part]


def join_to_end(parts: list[str], start: int) -> str:
    """Join ``parts[start:]`` with spaces, ignoring leading empty parts."""
    return " ".join(dropwhile(lambda part: not part, parts[start:]))


def _chunks(raw: bytes) -> Iterator[bytes]:
    while raw:
        yield raw[:_MAX_CHUNK]
        raw = raw[_MAX_CHUNK:]


def read_text_file(path: str | Path, split: bool) -> list[Line]:
    """Read a file into trimmed lines, optionally split into ``:`` tokens.

    A file that cannot be opened is reported on stderr and yields no lines.
    """
    try:
        handle = open(path, "rb")
    except OSError:
        print(f"readTextFile: Failed to open file {path}", file=sys.stderr)
        return []

    result: list[Line] = []
    with handle:
        for raw_line in handle:
            for chunk in _chunks(raw_line):
                if chunk.startswith(_UTF8_BOM):
                    chunk = chunk[len(_UTF8_BOM):]
                text = trim(chunk.decode("utf-8", errors="replace"))
                tokens = split_string(text, ":") if split else []
                result.append(Line(line=text, tokens=tokens))
    return result