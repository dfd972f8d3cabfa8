"""Candidate construction for oto lookups.

Candidates are ordered most specific first:

- ``V あ`` and ``* あ`` when the previous neighbour ends in vowel ``V`` (VCV),
- ``あ`` and ``- あ`` otherwise, with ``- `` marking an utterance-initial sample.

A lyric with no plain sample may be rewritten to the bare-vowel kana of its
trailing vowel before the VCV prefix is applied.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Sequence

import regex

from substitutor_phonemizer.models import CandidateSet, Note, SampleMatch
from substitutor_phonemizer.tables.repository import DEFAULT_TABLES, ClassificationTables

GRAPHEME_RE = regex.compile(r"\X")

Probe = Callable[[Sequence[str]], SampleMatch | None]


def normalize(text: str) -> str:
    """Return ``text`` in NFC form."""

    return unicodedata.normalize("NFC", text)


def graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""

    return GRAPHEME_RE.findall(text)


def last_grapheme(text: str) -> str:
    """Return the last grapheme cluster of ``text``, or ``""`` when empty."""

    clusters = graphemes(text)
    return clusters[-1] if clusters else ""


def plain_candidates(lyric: str) -> tuple[str, ...]:
    """Return the utterance-initial and bare candidates for ``lyric``."""

    return (f"- {lyric}", lyric)


def vcv_candidates(vowel: str, lyric: str) -> tuple[str, ...]:
    """Return VCV, wildcard, bare and utterance-initial candidates for ``lyric``."""

    return (f"{vowel} {lyric}", f"* {lyric}", lyric, f"- {lyric}")


def effective_lyric(note: Note) -> str:
    """Return the normalized hint of ``note`` if set, else its normalized lyric."""

    if note.phonetic_hint:
        return normalize(note.phonetic_hint)
    return normalize(note.lyric)


def trailing_vowel(text: str, tables: ClassificationTables = DEFAULT_TABLES) -> str | None:
    """Classify the vowel ``text`` ends with, e.g. ``a`` for ``きゃ``."""

    return tables.classify_vowel(last_grapheme(text))


def bare_vowel_substitute(
    lyric: str,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> str | None:
    """Find the bare-vowel substitute for ``lyric``.

    The trailing vowel class of the lyric is looked up first; the last cluster
    of that class string is then looked up in the substitute table.

    Args:
        lyric: Normalized current lyric.
        tables: Classification tables to consult.

    Returns:
        Normalized substitute, or ``None`` when either lookup misses.
    """

    vowel = trailing_vowel(lyric, tables)
    if vowel is None:
        return None
    substitute = tables.substitute_bare_vowel(last_grapheme(vowel))
    if substitute is None:
        return None
    return normalize(substitute)


def build_candidates(
    lyric: str,
    prev_neighbour: Note | None,
    probe: Probe,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> CandidateSet:
    """Build the ordered candidate list for one note.

    Args:
        lyric: Normalized current lyric.
        prev_neighbour: Note sounding immediately before, if any.
        probe: Resolver callback used to check whether the plain candidates
            already have a sample before substitution is attempted.
        tables: Classification tables to consult.

    Returns:
        Candidate set whose ``candidates`` is never empty.
    """

    current = lyric
    candidates = plain_candidates(current)
    substituted_from = None

    if probe(candidates) is None:
        substitute = bare_vowel_substitute(current, tables)
        if substitute is not None:
            if substitute != current:
                substituted_from = current
            current = substitute
            candidates = plain_candidates(current)

    vowel = None
    if prev_neighbour is not None:
        vowel = trailing_vowel(effective_lyric(prev_neighbour), tables)
        if vowel is not None:
            candidates = vcv_candidates(vowel, current)

    return CandidateSet(
        lyric=current,
        candidates=candidates,
        substituted_from=substituted_from,
        vowel=vowel,
    )
