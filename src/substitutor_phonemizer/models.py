"""Data models shared across phonemizer components.

Every record is an immutable dataclass so notes, probe hits and resolution
results can be passed between the candidate builder, the resolver and the
reporting layer without defensive copies.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PhonemeAttribute:
    """Per-phoneme voice attributes attached to a note.

    Only the attribute with ``index == 0`` is consulted when resolving a
    single-phoneme note.
    """

    index: int = 0
    voice_color: str | None = None
    tone_shift: int = 0
    alternate: str | None = None


DEFAULT_ATTRIBUTE = PhonemeAttribute()


@dataclass(frozen=True)
class Note:
    """One sung note as handed to the phonemizer.

    ``position`` and ``duration`` are in ticks and are only used to decide
    whether two consecutive notes touch (see :mod:`substitutor_phonemizer.pipeline`).
    """

    lyric: str
    tone: int
    phonetic_hint: str | None = None
    phoneme_attributes: tuple[PhonemeAttribute, ...] = field(default_factory=tuple)
    position: int = 0
    duration: int = 0

    @property
    def end(self) -> int:
        """Tick where the note stops sounding."""

        return self.position + self.duration

    def attribute(self) -> PhonemeAttribute:
        """Return the index-0 phoneme attribute, or an all-default one."""

        for attr in self.phoneme_attributes:
            if attr.index == 0:
                return attr
        return DEFAULT_ATTRIBUTE


@dataclass(frozen=True)
class OtoRecord:
    """One sample entry in a singer's library."""

    alias: str
    color: str | None = None


@dataclass(frozen=True)
class SampleMatch:
    """A successful library probe.

    ``candidate`` is the candidate string that produced the hit, before any
    alternate-tag suffix was appended.
    """

    alias: str
    color: str | None
    candidate: str


@dataclass(frozen=True)
class CandidateSet:
    """Ordered probe list for one note, most specific first.

    Attributes:
        lyric: Effective current lyric after any bare-vowel substitution.
        candidates: Probe strings in priority order; never empty.
        substituted_from: Original lyric when substitution rewrote it.
        vowel: Trailing vowel of the previous neighbour when a VCV candidate
            was prefixed.
    """

    lyric: str
    candidates: tuple[str, ...]
    substituted_from: str | None = None
    vowel: str | None = None


@dataclass(frozen=True)
class NoteResolution:
    """Exactly one phoneme alias for one note, plus how it was reached.

    ``lyric`` is the normalized lyric after any bare-vowel substitution.
    """

    note: Note
    phoneme: str
    branch: str
    lyric: str
    candidates: tuple[str, ...]
    match: SampleMatch | None = None
    substituted_from: str | None = None
    hint_missed: bool = False


@dataclass(frozen=True)
class HintMissItem:
    """Report item for notes whose phonetic hint had no sample."""

    note_index: int
    lyric: str
    phonetic_hint: str
    phoneme: str


@dataclass(frozen=True)
class SubstitutedItem:
    """Report item for notes rewritten to a bare-vowel substitute."""

    note_index: int
    lyric: str
    substitute: str
    phoneme: str


@dataclass(frozen=True)
class FallbackItem:
    """Report item for notes that matched no sample and emit their lyric."""

    note_index: int
    lyric: str
    candidates: tuple[str, ...]


@dataclass(frozen=True)
class ResolutionReport:
    """Diagnostics collected while phonemizing a note sequence."""

    hint_misses: tuple[HintMissItem, ...] = field(default_factory=tuple)
    substituted: tuple[SubstitutedItem, ...] = field(default_factory=tuple)
    fallbacks: tuple[FallbackItem, ...] = field(default_factory=tuple)
