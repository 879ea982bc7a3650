"""Small string helpers shared by the translation and graph tools."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from typing import TextIO

_ASCII_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_CONTROL_CHARS = re.compile("[\x00-\x1f\x7f]")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_C_WHITESPACE = " \t\n\v\f\r"


def get_filename(path: str) -> str:
    """Return the file name of ``path`` without directory and extension.

    The extension is cut at the last dot of the whole path before the
    directory part is removed.
    """
    if os.sep == "\\":
        path = path.replace("\\", "/")
    dot = path.rfind(".")
    if dot != -1:
        path = path[:dot]
    return path.rsplit("/", 1)[-1]


def has_ext(path: str, ext: str) -> bool:
    """Tell whether ``path`` ends in ``ext``, ignoring ASCII case of ``path``.

    ``ext`` itself is compared as given and should be lower case.
    """
    if len(path) < len(ext):
        return False
    if not ext:
        return True
    return lower_case(path[-len(ext):]) == ext


def join(lines: Iterable[str], join_char: str = "\n") -> str:
    """Join ``lines`` with ``join_char`` between them."""
    return join_char.join(lines)


def split(line: str, split_char: str = "\n") -> list[str]:
    """Split ``line`` at every ``split_char``; an empty line gives ``[""]``."""
    return line.split(split_char)


def lower_case(text: str) -> str:
    """Lower-case the ASCII letters of ``text`` and leave all others alone."""
    return text.translate(_ASCII_UPPER_TO_LOWER)


def remove_control_chars(text: str) -> str:
    """Drop the characters 0x00-0x1F and 0x7F, which messages ignore."""
    return _CONTROL_CHARS.sub("", text)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` without their endings.

    ``\\n``, ``\\r`` and ``\\r\\n`` all end a line. A last line without an
    ending is yielded only when it is not empty. Open files with
    ``newline=""`` so that carriage returns reach this function.
    """
    data = stream.read()
    pos = 0
    for match in _LINE_BREAK.finditer(data):
        yield data[pos:match.start()]
        pos = match.end()
    if pos < len(data):
        yield data[pos:]


def trim_whitespace(text: str) -> str:
    """Strip leading and trailing C-locale whitespace."""
    return text.strip(_C_WHITESPACE)


def escape(text: str) -> str:
    """Escape backslashes and double quotes for a PO string."""
    return text.replace("\\", "\\\\").replace('"', '\\"')