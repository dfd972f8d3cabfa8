"""Single-note phonemizer: hint check, candidate resolution, lyric fallback."""

from __future__ import annotations

import logging
from functools import partial

from substitutor_phonemizer.models import Note, NoteResolution
from substitutor_phonemizer.oto.library import OtoLibrary
from substitutor_phonemizer.resolution.candidates import build_candidates, normalize
from substitutor_phonemizer.resolution.resolver import OtoResolver
from substitutor_phonemizer.tables.repository import DEFAULT_TABLES, ClassificationTables

logger = logging.getLogger(__name__)

BRANCH_HINT = "hint"
BRANCH_VCV = "vcv"
BRANCH_PLAIN = "plain"
BRANCH_FALLBACK = "fallback"


class SubstitutorPhonemizer:
    """Resolve each note to exactly one oto alias.

    The phonemizer keeps no per-note state: the previous neighbour is read-only
    context and the classification tables are shared and immutable.
    """

    def __init__(
        self,
        library: OtoLibrary,
        tables: ClassificationTables = DEFAULT_TABLES,
    ) -> None:
        self.resolver = OtoResolver(library)
        self.tables = tables

    def process(self, note: Note, prev_neighbour: Note | None = None) -> NoteResolution:
        """Resolve ``note`` given the note sounding right before it.

        Resolution order:
        1) the phonetic hint alone, when set and it has a sample,
        2) VCV or plain candidates built from the (possibly substituted) lyric,
        3) the lyric text itself when no candidate has a sample.

        Args:
            note: Note to resolve.
            prev_neighbour: Previous note touching ``note``, if any.

        Returns:
            Resolution carrying the single phoneme alias and its branch.
        """

        lyric = normalize(note.lyric)
        hint_missed = False

        if note.phonetic_hint:
            hint = normalize(note.phonetic_hint)
            match = self.resolver.resolve_note(note, (hint,))
            if match is not None:
                return NoteResolution(
                    note=note,
                    phoneme=match.alias,
                    branch=BRANCH_HINT,
                    lyric=lyric,
                    candidates=(hint,),
                    match=match,
                )
            logger.debug("No sample for phonetic hint %r, resolving lyric %r", hint, lyric)
            hint_missed = True

        candidate_set = build_candidates(
            lyric,
            prev_neighbour,
            probe=partial(self.resolver.resolve_note, note),
            tables=self.tables,
        )
        match = self.resolver.resolve_note(note, candidate_set.candidates)

        if match is None:
            logger.warning(
                "No sample for lyric %r (candidates: %s); emitting lyric as phoneme",
                candidate_set.lyric,
                ", ".join(repr(c) for c in candidate_set.candidates),
            )
            return NoteResolution(
                note=note,
                phoneme=candidate_set.lyric,
                branch=BRANCH_FALLBACK,
                lyric=candidate_set.lyric,
                candidates=candidate_set.candidates,
                substituted_from=candidate_set.substituted_from,
                hint_missed=hint_missed,
            )

        branch = BRANCH_PLAIN
        if candidate_set.vowel is not None and match.candidate in candidate_set.candidates[:2]:
            branch = BRANCH_VCV

        return NoteResolution(
            note=note,
            phoneme=match.alias,
            branch=branch,
            lyric=candidate_set.lyric,
            candidates=candidate_set.candidates,
            match=match,
            substituted_from=candidate_set.substituted_from,
            hint_missed=hint_missed,
        )
