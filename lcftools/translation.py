"""A catalogue of translatable messages with PO reading and writing."""

from __future__ import annotations

import copy
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from typing import TextIO

from lcftools.entry import Entry
from lcftools.textutils import join, read_lines, split, trim_whitespace

_PO_HEADER = (
    'msgid ""',
    'msgstr ""',
    '"Project-Id-Version: GAME_NAME 1.0\\n"',
    '"Language-Team: YOUR NAME <[email]>\\n"',
    '"Language: \\n"',
    '"MIME-Version: 1.0\\n"',
    '"Content-Type: text/plain; charset=UTF-8\\n"',
    '"Content-Transfer-Encoding: 8bit\\n"',
    '"X-CreatedBy: LcfTrans"',
)
_LINE_NUMBER = re.compile(r"Line [0-9]+")
_KEY_SEPARATOR = "\x01"


def _is_location_id(info: str) -> bool:
    return info.startswith("ID ")


@dataclass
class Translation:
    """An ordered list of entries that can be written as a PO file."""

    entries: list[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def write(self, out: TextIO) -> None:
        """Write the PO header followed by all entries."""
        self.write_header(out)
        out.write("\n")
        self.write_entries(out)

    def write_header(self, out: TextIO) -> None:
        """Write the fixed PO header block."""
        for line in _PO_HEADER:
            out.write(line + "\n")

    def write_entries(self, out: TextIO) -> None:
        """Write the entries, merging those with equal context and msgid.

        Groups keep the order in which their first entry appears; the
        comments of every entry of a group precede the single message.
        """
        groups: dict[str, list[Entry]] = {}
        for entry in self.entries:
            key = entry.context + _KEY_SEPARATOR + join(entry.original)
            groups.setdefault(key, []).append(entry)

        for group in groups.values():
            for entry in group:
                if entry.location:
                    out.write(f"#: {entry.location}\n")
                for info in entry.info:
                    out.write(f"#. {info}\n")
                if entry.fuzzy:
                    out.write("#, fuzzy\n")
            group[0].write(out)
            out.write("\n")

    def add_entry(self, entry: Entry) -> bool:
        """Store a copy of ``entry`` unless all of its original lines are empty."""
        if all(not line for line in entry.original):
            return False
        self.entries.append(copy.deepcopy(entry))
        return True

    def merge(self, other: Translation) -> Translation:
        """Copy translations from ``other`` into entries with the same msgid.

        Entries of ``other`` without a translation are ignored. Returns the
        translated entries of ``other`` that match nothing here.
        """
        stale = Translation()
        for source in other.entries:
            if not source.has_translation():
                continue
            found = False
            for target in self.entries:
                if source.original == target.original:
                    target.translation = list(source.translation)
                    found = True
            if not found:
                stale.add_entry(source)
        return stale

    def match(self, other: Translation) -> tuple[Translation, int]:
        """Use the msgids of ``other`` as translations of matching entries here.

        Entries are matched by context (and location id, when it has one),
        or by location id exactly, or by location id ignoring line numbers,
        in which case the match is marked fuzzy. Only untranslated entries
        are candidates. Returns the unmatched entries of ``other`` and the
        number of matches.
        """
        matches = 0
        stale = Translation()

        for source in other.entries:
            found = False
            info = join(source.info)
            if source.context:
                for target in self.entries:
                    if target.has_translation() or source.context != target.context:
                        continue
                    if _is_location_id(info) and info != join(target.info):
                        continue
                    target.translation = list(source.original)
                    matches += 1
                    found = True
                    break
            elif _is_location_id(info):
                for target in self.entries:
                    if target.has_translation():
                        continue
                    if info == join(target.info):
                        target.translation = list(source.original)
                        matches += 1
                        found = True
                        break
                if not found:
                    loose_info = _LINE_NUMBER.sub("", info)
                    for target in self.entries:
                        if target.has_translation():
                            continue
                        if loose_info == _LINE_NUMBER.sub("", join(target.info)):
                            target.translation = list(source.original)
                            target.fuzzy = True
                            matches += 1
                            found = True
                            break

            if not found:
                stale.add_entry(source)

        return stale, matches

    @classmethod
    def from_po(cls, path: str | PathLike[str]) -> Translation:
        """Read a PO file; see :meth:`parse_po`."""
        with open(path, encoding="utf-8", newline="") as stream:
            return cls.parse_po(stream)

    @classmethod
    def parse_po(cls, stream: TextIO) -> Translation:
        """Parse PO text, reading only msgctxt, msgid, msgstr and ``#.`` lines.

        Everything up to the header's msgstr is skipped. Malformed lines are
        reported on standard error and parsing goes on.
        """
        translation = cls()
        _PoParser(stream, translation).run()
        return translation


class _PoParser:
    def __init__(self, stream: TextIO, translation: Translation) -> None:
        self._lines = read_lines(stream)
        self._translation = translation
        self._line = ""
        self._view = ""
        self._line_number = 0
        self._entry = Entry()
        self._parse_item = False

    def _advance(self) -> bool:
        line = next(self._lines, None)
        if line is None:
            return False
        self._line = line
        self._view = trim_whitespace(line)
        self._line_number += 1
        return True

    def _error(self, message: str) -> None:
        print(f"Parse error (Line {self._line_number}){message}", file=sys.stderr)

    def _extract_string(self, offset: int) -> str:
        if offset >= len(self._view):
            self._error(" is empty")
            return ""

        out: list[str] = []
        slash = False
        first_quote = False
        for char in self._view[offset:]:
            if not first_quote:
                if char == " ":
                    continue
                if char == '"':
                    first_quote = True
                    continue
                self._error(f': Expected ", got {char}: {self._line}')
                return ""

            if not slash and char == "\\":
                slash = True
            elif slash:
                slash = False
                if char == "\\":
                    out.append("\\")
                elif char == "n":
                    out.append("\n")
                elif char == '"':
                    out.append('"')
                else:
                    self._error(
                        f': Expected \\, \\n or ", got {char}: {self._line}'
                    )
            elif char == '"':
                return "".join(out)
            else:
                out.append(char)

        self._error(f": Unterminated line: {self._line}")
        return "".join(out)

    def _read_msgctxt(self) -> None:
        self._entry.context = self._extract_string(7)

    def _read_msgstr(self) -> None:
        msgstr = self._extract_string(6)
        while self._advance():
            if not self._view or self._view.startswith("#"):
                break
            msgstr += self._extract_string(0)

        self._parse_item = False
        self._entry.translation = split(msgstr)
        self._translation.add_entry(self._entry)
        self._entry = Entry()

    def _read_msgid(self) -> None:
        msgid = self._extract_string(5)
        while self._advance():
            if not self._view or self._view.startswith("msgstr"):
                self._entry.original = split(msgid)
                self._read_msgstr()
                return
            msgid += self._extract_string(0)
        self._entry.original = split(msgid)

    def _read_info(self) -> None:
        if len(self._line) <= 3:
            return
        self._entry.info.append(self._line[3:])

        while self._advance():
            if (
                not self._line
                or self._view.startswith("msgctx")
                or self._view.startswith("msgid")
            ):
                if self._view.startswith("msgctx"):
                    self._read_msgctxt()
                elif self._view.startswith("msgid"):
                    self._read_msgid()
                return
            if self._view.startswith("#."):
                if len(self._line) > 3:
                    self._entry.info.append(self._line[3:])
            else:
                self._error(
                    f" {self._line} ({self._line}). Expected #., msgctx or msgid"
                )
                return

    def run(self) -> None:
        found_header = False
        while self._advance():
            if not found_header:
                if self._view.startswith("msgstr"):
                    found_header = True
                continue

            if not self._parse_item:
                if self._view.startswith("#."):
                    self._parse_item = True
                    self._read_info()
                elif self._view.startswith("msgctxt"):
                    self._read_msgctxt()
                    self._parse_item = True
                elif self._view.startswith("msgid"):
                    self._parse_item = True
                    self._read_msgid()
            elif self._view.startswith("msgid"):
                self._read_msgid()
            elif self._view.startswith("msgstr"):
                self._read_msgstr()