"""Probe the sample library with ordered candidates and pick one hit."""

from __future__ import annotations

import logging
from typing import Sequence

from substitutor_phonemizer.models import Note, SampleMatch
from substitutor_phonemizer.oto.library import OtoLibrary

logger = logging.getLogger(__name__)


def select_hit(hits: Sequence[SampleMatch], color: str) -> SampleMatch | None:
    """Choose among collected hits.

    The first hit whose colour equals ``color`` wins; without one, the first
    hit overall is returned. A missing colour on either side compares as ``""``.

    Args:
        hits: Hits in candidate order.
        color: Requested voice colour.

    Returns:
        Selected hit, or ``None`` when ``hits`` is empty.
    """

    for hit in hits:
        if (hit.color or "") == color:
            return hit
    return hits[0] if hits else None


class OtoResolver:
    """Resolve candidate lists against an :class:`OtoLibrary`."""

    def __init__(self, library: OtoLibrary) -> None:
        self.library = library

    def probe(
        self,
        candidate: str,
        tone: int,
        color: str,
        alternate: str | None = None,
    ) -> SampleMatch | None:
        """Probe one candidate, alternate-tagged form first.

        Args:
            candidate: Candidate alias text.
            tone: Pitch index, tone shift already applied.
            color: Requested voice colour.
            alternate: Alternate-sample tag appended to the candidate.

        Returns:
            Hit from the tagged probe, else from the plain probe, else ``None``.
        """

        if alternate:
            record = self.library.try_get_mapped_oto(candidate + alternate, tone, color)
            if record is not None:
                return SampleMatch(alias=record.alias, color=record.color, candidate=candidate)
        record = self.library.try_get_mapped_oto(candidate, tone, color)
        if record is not None:
            return SampleMatch(alias=record.alias, color=record.color, candidate=candidate)
        return None

    def collect(
        self,
        candidates: Sequence[str],
        tone: int,
        tone_shift: int = 0,
        color: str | None = None,
        alternate: str | None = None,
    ) -> list[SampleMatch]:
        """Probe every candidate and return all hits in candidate order."""

        pitch = tone + tone_shift
        color = color or ""
        hits: list[SampleMatch] = []
        for candidate in candidates:
            hit = self.probe(candidate, pitch, color, alternate)
            if hit is not None:
                hits.append(hit)
        return hits

    def resolve(
        self,
        candidates: Sequence[str],
        tone: int,
        tone_shift: int = 0,
        color: str | None = None,
        alternate: str | None = None,
    ) -> SampleMatch | None:
        """Resolve ``candidates`` to a single sample.

        Every candidate is probed before choosing, so a colour-exact hit on a
        later candidate beats an earlier hit in the wrong colour.

        Args:
            candidates: Probe strings, most specific first.
            tone: Note pitch index.
            tone_shift: Pitch offset from the note's phoneme attribute.
            color: Requested voice colour; ``None`` is treated as ``""``.
            alternate: Alternate-sample tag.

        Returns:
            Selected hit, or ``None`` when nothing matched.
        """

        hits = self.collect(candidates, tone, tone_shift, color, alternate)
        selected = select_hit(hits, color or "")
        logger.debug(
            "Probed %d candidates at tone %d: %d hits, selected %s",
            len(candidates),
            tone + tone_shift,
            len(hits),
            selected.alias if selected else None,
        )
        return selected

    def resolve_note(self, note: Note, candidates: Sequence[str]) -> SampleMatch | None:
        """Resolve ``candidates`` with the pitch and attributes of ``note``."""

        attr = note.attribute()
        return self.resolve(
            candidates,
            tone=note.tone,
            tone_shift=attr.tone_shift,
            color=attr.voice_color,
            alternate=attr.alternate,
        )
