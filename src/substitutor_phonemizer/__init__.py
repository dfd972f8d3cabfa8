"""Substitutor Japanese phonemizer: kana lyric notes to sample aliases."""

from .models import (
    CandidateSet,
    Note,
    NoteResolution,
    OtoRecord,
    PhonemeAttribute,
    ResolutionReport,
    SampleMatch,
)
from .phonemizer import SubstitutorPhonemizer

__all__ = [
    "Note",
    "PhonemeAttribute",
    "OtoRecord",
    "SampleMatch",
    "CandidateSet",
    "NoteResolution",
    "ResolutionReport",
    "SubstitutorPhonemizer",
]
