"""Unit tests for note validation and result counters."""

from __future__ import annotations

import pytest

from substitutor_phonemizer.models import Note, NoteResolution, PhonemeAttribute, SampleMatch
from substitutor_phonemizer.validation import (
    collect_branch_counts,
    collect_color_counts,
    validate_notes,
)


def _resolution(branch: str, color: str | None = None, matched: bool = True) -> NoteResolution:
    return NoteResolution(
        note=Note("な", 60),
        phoneme="な",
        branch=branch,
        lyric="な",
        candidates=("- な", "な"),
        match=SampleMatch("な", color, "な") if matched else None,
    )


def test_validate_notes_accepts_touching_and_gapped_notes() -> None:
    validate_notes(
        [
            Note("か", 60, position=0, duration=480),
            Note("な", 60, position=480, duration=480),
            Note("", 127, position=1920, duration=0),
        ]
    )


def test_validate_notes_rejects_out_of_range_tone() -> None:
    with pytest.raises(ValueError, match="Note 1: tone 128 outside 0-127"):
        validate_notes([Note("か", 128)])


def test_validate_notes_rejects_unordered_positions() -> None:
    with pytest.raises(ValueError, match="Note 2: position 0 before previous note"):
        validate_notes([Note("か", 60, position=480), Note("な", 60, position=0)])


def test_validate_notes_rejects_duplicate_attribute_index() -> None:
    note = Note("か", 60, phoneme_attributes=(PhonemeAttribute(index=0), PhonemeAttribute(index=0)))

    with pytest.raises(ValueError, match="duplicate phoneme attribute index"):
        validate_notes([note])


def test_validate_notes_previews_first_25_errors() -> None:
    with pytest.raises(ValueError, match=r"30 errors:[\s\S]*\.\.\. and 5 more"):
        validate_notes([Note("か", -1) for _ in range(30)])


def test_collect_counts() -> None:
    resolutions = [
        _resolution("vcv", "power"),
        _resolution("vcv"),
        _resolution("plain"),
        _resolution("fallback", matched=False),
    ]

    assert collect_branch_counts(resolutions) == {"vcv": 2, "plain": 1, "fallback": 1}
    assert collect_color_counts(resolutions) == {"power": 1, "": 2}


def test_validate_notes_rejects_tab_or_line_break_in_text() -> None:
    notes = [Note("か\tな", 60), Note("な", 60, phonetic_hint="na\n")]

    with pytest.raises(ValueError, match="Note 1: lyric .* contains a tab or line break") as excinfo:
        validate_notes(notes)

    assert "Note 2: phonetic_hint" in str(excinfo.value)
