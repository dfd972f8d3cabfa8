"""Read-only classification lookups built from the declarative kana tables."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from substitutor_phonemizer.tables.data import CONSONANT_LINES, SUBSTITUTE_LINES, VOWEL_LINES
from substitutor_phonemizer.tables.parser import (
    GLYPH_DELIMITER,
    ClassificationEntry,
    parse_table_lines,
)


def build_lookup(entries: Iterable[ClassificationEntry]) -> Mapping[str, str]:
    """Freeze parsed entries into a glyph -> label mapping.

    Later entries overwrite earlier ones for the same glyph.

    Args:
        entries: Parsed table entries.

    Returns:
        Read-only mapping proxy.
    """

    return MappingProxyType({entry.glyph: entry.label for entry in entries})


@dataclass(frozen=True)
class ClassificationTables:
    """Vowel, consonant and bare-vowel substitute lookups.

    Instances are built once and never mutated, so a single instance can be
    shared by every note resolution without locking.
    """

    vowels: Mapping[str, str]
    consonants: Mapping[str, str]
    substitutes: Mapping[str, str]

    @classmethod
    def from_lines(
        cls,
        vowel_lines: Iterable[str] = VOWEL_LINES,
        consonant_lines: Iterable[str] = CONSONANT_LINES,
        substitute_lines: Iterable[str] = SUBSTITUTE_LINES,
        delimiter: str = GLYPH_DELIMITER,
    ) -> ClassificationTables:
        """Build tables from declarative ``label=g1,g2`` lines.

        Args:
            vowel_lines: Trailing-vowel class lines.
            consonant_lines: Leading-consonant class lines.
            substitute_lines: Bare-vowel substitute lines.
            delimiter: Glyph separator for the consonant and substitute tables.
                The vowel table is always split on ``,``.

        Returns:
            Frozen tables instance.
        """

        return cls(
            vowels=build_lookup(parse_table_lines(vowel_lines)),
            consonants=build_lookup(parse_table_lines(consonant_lines, delimiter=delimiter)),
            substitutes=build_lookup(parse_table_lines(substitute_lines, delimiter=delimiter)),
        )

    def classify_vowel(self, glyph: str) -> str | None:
        """Return the trailing vowel class of ``glyph`` or ``None``."""

        return self.vowels.get(glyph)

    def classify_consonant(self, cluster: str) -> str | None:
        """Return the leading consonant class of ``cluster`` or ``None``."""

        return self.consonants.get(cluster)

    def substitute_bare_vowel(self, glyph: str) -> str | None:
        """Return the bare-vowel substitute for ``glyph`` or ``None``."""

        return self.substitutes.get(glyph)


DEFAULT_TABLES = ClassificationTables.from_lines()


def classify_vowel(glyph: str) -> str | None:
    """Classify ``glyph`` against the default vowel table."""

    return DEFAULT_TABLES.classify_vowel(glyph)


def classify_consonant(cluster: str) -> str | None:
    """Classify ``cluster`` against the default consonant table."""

    return DEFAULT_TABLES.classify_consonant(cluster)


def substitute_bare_vowel(glyph: str) -> str | None:
    """Look up ``glyph`` in the default bare-vowel substitute table."""

    return DEFAULT_TABLES.substitute_bare_vowel(glyph)
