"""Parsing utilities for declarative ``label=glyph,glyph`` classification lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

GLYPH_DELIMITER = ","
LEGACY_GLYPH_DELIMITER = "."


@dataclass(frozen=True)
class ClassificationEntry:
    """One inverted table record mapping a kana glyph or cluster to its class."""

    glyph: str
    label: str


def parse_table_line(line: str, delimiter: str = GLYPH_DELIMITER) -> list[ClassificationEntry]:
    """Invert one ``label=g1,g2,...`` line into glyph-keyed entries.

    Args:
        line: Declarative source line.
        delimiter: Separator between glyphs on the right-hand side. The legacy
            ``.`` delimiter keeps a comma-separated list together as one glyph.

    Returns:
        Entries in source order. Empty glyph tokens (for example from a trailing
        delimiter) are skipped; a line without ``=`` yields no entries.
    """

    label, sep, payload = line.strip().partition("=")
    if not sep or not label:
        return []

    return [
        ClassificationEntry(glyph=glyph, label=label)
        for glyph in (token.strip() for token in payload.split(delimiter))
        if glyph
    ]


def parse_table_lines(
    lines: Iterable[str],
    delimiter: str = GLYPH_DELIMITER,
) -> list[ClassificationEntry]:
    """Parse declarative lines into a flat entry list.

    Blank lines and ``#`` comments are ignored so table files can be annotated.

    Args:
        lines: Source lines in declaration order.
        delimiter: Glyph separator passed to :func:`parse_table_line`.

    Returns:
        Flat list of entries preserving line and glyph order.
    """

    entries: list[ClassificationEntry] = []
    for line in lines:
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        entries.extend(parse_table_line(line, delimiter=delimiter))
    return entries


def find_duplicate_glyphs(entries: Iterable[ClassificationEntry]) -> dict[str, tuple[str, ...]]:
    """Report glyphs declared under more than one label.

    Duplicates silently overwrite each other when a lookup is built, so table
    authors use this to keep each table a perfect mapping.

    Args:
        entries: Parsed entries for one table.

    Returns:
        Mapping of duplicated glyph to every label it was declared with.
    """

    seen: dict[str, list[str]] = {}
    for entry in entries:
        seen.setdefault(entry.glyph, []).append(entry.label)
    return {glyph: tuple(labels) for glyph, labels in seen.items() if len(labels) > 1}
