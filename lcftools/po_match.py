"""Match PO catalogues of two game versions to recover existing translations.

When a game ships with its translation baked into the game files, the
catalogue extracted from the translated game holds the translated text as
msgids. Matching it against the catalogue of the original game turns those
msgids into msgstrs of the original catalogue.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from os import PathLike

from lcftools.textutils import lower_case
from lcftools.translation import Translation

StrPath = str | PathLike[str]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one catalogue."""

    name: str
    matched: int
    fuzzy: int
    unmatched: int


def list_directory(path: StrPath) -> list[tuple[str, str]]:
    """Return ``(name, ascii_lower_name)`` pairs for the entries of ``path``, sorted by name."""
    return sorted((name, lower_case(name)) for name in os.listdir(path))


def _count_line(count: int, outcome: str) -> str:
    """Build a report line such as `` 3 terms are unmatched``."""
    verb = "term is" if count == 1 else "terms are"
    return f" {count} {verb} {outcome}"


def _write_po(path: str, translation: Translation) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        translation.write(handle)


def match_directories(
    indir: StrPath,
    merge_indir: StrPath,
    outdir: StrPath,
    report: Callable[[str], object] | None = None,
) -> list[MatchResult]:
    """Match every PO file of ``indir`` with the same-named one in ``merge_indir``.

    Names are compared ignoring ASCII case. The msgids of the catalogue in
    ``merge_indir`` become the translations of the catalogue in ``indir``;
    the result is written to ``outdir`` under the ``indir`` name, and the
    entries that matched nothing go to ``<name>.unmatched.po``. Progress
    lines are passed to ``report`` (``print`` by default).
    """
    if report is None:
        report = print
    if os.fspath(outdir) == os.fspath(merge_indir):
        raise ValueError("the output directory must differ from the merge input directory")

    # The output directory must be readable before anything is written.
    list_directory(outdir)
    targets = list_directory(indir)
    sources = list_directory(merge_indir)

    results: list[MatchResult] = []
    for source_name, source_lower in sources:
        if not source_lower.endswith(".po"):
            continue

        for target_name, target_lower in targets:
            if source_lower != target_lower:
                continue

            src_po = Translation.from_po(os.path.join(merge_indir, source_name))
            dst_po = Translation.from_po(os.path.join(indir, target_name))
            stale, matched = dst_po.match(src_po)

            report(f"Matching {target_name}")
            report(f" {matched} term{'s' if matched != 1 else ''} matched")

            fuzzy = sum(1 for entry in dst_po if entry.fuzzy)
            if fuzzy > 0:
                report(_count_line(fuzzy, "fuzzy matched"))

            if len(stale):
                report(_count_line(len(stale), "unmatched"))
                _write_po(
                    os.path.join(outdir, target_name[:-3] + ".unmatched.po"), stale
                )
            _write_po(os.path.join(outdir, target_name), dst_po)

            results.append(
                MatchResult(
                    name=target_name,
                    matched=matched,
                    fuzzy=fuzzy,
                    unmatched=len(stale),
                )
            )

    return results