"""Top-level orchestration for phonemizing a note sequence."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from substitutor_phonemizer.io.tsv_io import read_notes_tsv, read_oto_library
from substitutor_phonemizer.models import (
    FallbackItem,
    HintMissItem,
    Note,
    NoteResolution,
    ResolutionReport,
    SubstitutedItem,
)
from substitutor_phonemizer.oto.library import OtoLibrary
from substitutor_phonemizer.phonemizer import BRANCH_FALLBACK, SubstitutorPhonemizer
from substitutor_phonemizer.tables.repository import DEFAULT_TABLES, ClassificationTables
from substitutor_phonemizer.validation import validate_notes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhonemizerResult:
    """Result bundle returned by :func:`phonemize_notes` and :func:`run_pipeline`.

    Attributes:
        resolutions: One resolution per input note, in input order.
        report: Hint misses, substitutions and fallbacks.
    """

    resolutions: tuple[NoteResolution, ...]
    report: ResolutionReport


def previous_neighbour(notes: Sequence[Note], index: int) -> Note | None:
    """Return the note touching ``notes[index]`` from the left, if any.

    A previous note is a neighbour only when it ends exactly where the current
    note starts; a rest between them breaks the VCV context.
    """

    if index <= 0:
        return None
    prev = notes[index - 1]
    if prev.end != notes[index].position:
        return None
    return prev


def build_resolution_report(resolutions: Sequence[NoteResolution]) -> ResolutionReport:
    """Collect report items from per-note resolutions.

    Args:
        resolutions: Resolutions in sequence order.

    Returns:
        Report with 1-based note indexes.
    """

    hint_misses: list[HintMissItem] = []
    substituted: list[SubstitutedItem] = []
    fallbacks: list[FallbackItem] = []

    for note_index, resolution in enumerate(resolutions, start=1):
        note = resolution.note
        if resolution.hint_missed:
            hint_misses.append(
                HintMissItem(
                    note_index=note_index,
                    lyric=note.lyric,
                    phonetic_hint=note.phonetic_hint or "",
                    phoneme=resolution.phoneme,
                )
            )
        if resolution.substituted_from is not None:
            substituted.append(
                SubstitutedItem(
                    note_index=note_index,
                    lyric=resolution.substituted_from,
                    substitute=resolution.lyric,
                    phoneme=resolution.phoneme,
                )
            )
        if resolution.branch == BRANCH_FALLBACK:
            fallbacks.append(
                FallbackItem(
                    note_index=note_index,
                    lyric=note.lyric,
                    candidates=resolution.candidates,
                )
            )

    return ResolutionReport(
        hint_misses=tuple(hint_misses),
        substituted=tuple(substituted),
        fallbacks=tuple(fallbacks),
    )


def phonemize_notes(
    notes: Sequence[Note],
    library: OtoLibrary,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> PhonemizerResult:
    """Resolve every note of a sequence independently.

    Args:
        notes: Notes in time order.
        library: Sample library to probe.
        tables: Classification tables to consult.

    Returns:
        ``PhonemizerResult`` with exactly one resolution per note.
    """

    phonemizer = SubstitutorPhonemizer(library, tables=tables)
    resolutions = tuple(
        phonemizer.process(note, previous_neighbour(notes, index))
        for index, note in enumerate(notes)
    )
    report = build_resolution_report(resolutions)
    logger.info(
        "Resolved %d notes: %d hint misses, %d substituted, %d fallbacks",
        len(resolutions),
        len(report.hint_misses),
        len(report.substituted),
        len(report.fallbacks),
    )
    return PhonemizerResult(resolutions=resolutions, report=report)


def run_pipeline(
    notes_path: Path,
    otos_path: Path,
    subbanks_path: Path | None = None,
    fail_on_fallback: bool = False,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> PhonemizerResult:
    """Load inputs, validate them and phonemize the note sequence.

    Args:
        notes_path: Notes TSV path.
        otos_path: Alias index TSV path.
        subbanks_path: Optional subbank TSV path.
        fail_on_fallback: Whether notes without any sample are an error.
        tables: Classification tables to consult.

    Returns:
        ``PhonemizerResult`` for the whole sequence.

    Raises:
        ValueError: If notes are invalid, or fallbacks exist and
            ``fail_on_fallback`` is set.
    """

    notes = read_notes_tsv(notes_path)
    validate_notes(notes)
    library = read_oto_library(otos_path, subbanks_path)

    result = phonemize_notes(notes, library, tables=tables)

    fallbacks = result.report.fallbacks
    if fallbacks and fail_on_fallback:
        preview = "\n".join(
            f"- note={item.note_index} lyric={item.lyric!r} candidates={', '.join(item.candidates)}"
            for item in fallbacks[:25]
        )
        remaining = len(fallbacks) - min(25, len(fallbacks))
        extra = f"\n- ... and {remaining} more" if remaining > 0 else ""
        raise ValueError(
            "Notes without any matching sample found. "
            "Add aliases to the index or drop --fail-on-fallback.\n"
            f"{preview}{extra}"
        )

    return result
