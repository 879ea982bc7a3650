"""A single translatable message of a PO catalogue."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from lcftools.textutils import escape


def _write_lines(out: TextIO, lines: Sequence[str], prefix: str) -> None:
    if len(lines) <= 1:
        first_line = escape(lines[0]) if lines else ""
        out.write(f'{prefix} "{first_line}"\n')
        return

    out.write(f'{prefix} ""\n')
    out.write('\\n"\n'.join(f'"{escape(line)}' for line in lines))
    out.write('"\n')


@dataclass
class Entry:
    """One message: its original lines, translation lines and metadata."""

    original: list[str] = field(default_factory=list)
    translation: list[str] = field(default_factory=list)
    context: str = ""
    info: list[str] = field(default_factory=list)
    location: str = ""
    fuzzy: bool = False

    def write(self, out: TextIO) -> None:
        """Write the msgctxt, msgid and msgstr lines of this entry."""
        if self.context:
            out.write(f'msgctxt "{self.context}"\n')
        _write_lines(out, self.original, "msgid")
        _write_lines(out, self.translation, "msgstr")

    def has_translation(self) -> bool:
        """Tell whether the entry carries a non-empty translation."""
        return bool(self.translation) and self.translation != [""]