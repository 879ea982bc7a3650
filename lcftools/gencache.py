"""Generate a JSON index of a game directory for web-based players."""

from __future__ import annotations

import json
import os
import re
import sys
import time
import unicodedata
from collections.abc import Sequence
from typing import Any

_RESERVED_KEY = "_dirname"
_KEPT_EXTENSIONS = (".ini", ".po")
_CACHE_VERSION = 2
_DEFAULT_DEPTH = 4
_DEFAULT_OUTPUT = "index.json"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def strip_ext(name: str) -> str:
    """Return ``name`` without the part from its last dot on."""
    dot = name.rfind(".")
    return name if dot == -1 else name[:dot]


def basename(path: str) -> str:
    """Return the part of ``path`` after its last slash."""
    return path.rsplit("/", 1)[-1]


def _normalized_key(name: str) -> str:
    return unicodedata.normalize("NFKC", name.lower())


def parse_dir_recursive(path: str, depth: int, first: bool = False) -> dict[str, Any]:
    """Map the lower-cased, NFKC-normalised names under ``path`` to real names.

    Subdirectories become nested mappings holding their real name under
    ``"_dirname"``. Outside the top level (``first``), file keys lose their
    extension unless it is ``.ini`` or ``.po``. An unreadable directory or a
    depth of zero gives an empty mapping.
    """
    result: dict[str, Any] = {}
    if depth == 0:
        return result

    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return result

    if not first:
        result[_RESERVED_KEY] = basename(path)

    for entry in entries:
        name = entry.name
        key = _normalized_key(name)

        if name == _RESERVED_KEY:
            print(
                "Skipping _dirname: File conflicts with reserved keyword!",
                file=sys.stderr,
            )
            continue

        if entry.is_dir(follow_symlinks=False) and name not in (".", ".."):
            sub = parse_dir_recursive(f"{path}/{name}", depth - 1)
            if sub:
                result[key] = sub

        if entry.is_file(follow_symlinks=False) or entry.is_symlink():
            if first or key.endswith(_KEPT_EXTENSIONS):
                # ExFont in the main directory is looked up without extension
                if strip_ext(key) == "exfont":
                    key = "exfont"
                result[key] = name
            else:
                result[strip_ext(key)] = name

    return result


def build_document(cache: dict[str, Any], date: str) -> dict[str, Any]:
    """Wrap ``cache`` with the metadata block; an empty cache becomes null."""
    return {
        "metadata": {"version": _CACHE_VERSION, "date": date},
        "cache": cache or None,
    }


def _print_help(output: str, depth: int) -> None:
    print("gencache - JSON cache generator for EasyRPG Player ports")
    print()
    print("Usage: gencache [ Options ] [ Directory ]")
    print("Options:")
    print("  -h, --help             This usage message")
    print("  -p, --pretty           Pretty print the JSON contents")
    print(f'  -o, --output <file>    Output file name (default: "{output}")')
    print(f"  -r, --recurse <depth>  Recursion depth (default: {depth})")
    print()
    print("It uses the current directory if not given as argument.")


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the cache generator; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    depth = _DEFAULT_DEPTH
    pretty = False
    path = "."
    output = _DEFAULT_OUTPUT

    remaining = iter(args)
    for arg in remaining:
        if arg in ("--help", "-h"):
            _print_help(output, depth)
            return 0
        if arg in ("--pretty", "-p"):
            pretty = True
        elif arg in ("--output", "-o"):
            value = next(remaining, None)
            if value is None:
                return _error("--output without file name argument.")
            output = value
        elif arg in ("--recurse", "-r"):
            value = next(remaining, None)
            if value is None:
                return _error("--recurse without depth argument.")
            match = _LEADING_INT.match(value)
            if match is None:
                return _error("--recurse option needs a number argument.")
            depth = int(match.group(1))
        elif path == ".":
            try:
                is_dir = os.path.isdir(arg) if os.stat(arg) else False
            except OSError:
                return _error(f'Cannot access directory: "{arg}"')
            if not is_dir:
                return _error(f'Not a directory: "{arg}"')
            path = arg
        else:
            print(f'Skipping additional argument: "{arg}"...', file=sys.stderr)

    cache = parse_dir_recursive(path, depth, True)
    date = time.strftime("%Y-%m-%d", time.localtime())
    document = build_document(cache, date)

    if pretty:
        text = json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)
    else:
        text = json.dumps(
            document, separators=(",", ":"), sort_keys=True, ensure_ascii=False
        )

    with open(output, "w", encoding="utf-8") as handle:
        handle.write(text)
    print(f'JSON cache has been written to "{output}".')
    return 0