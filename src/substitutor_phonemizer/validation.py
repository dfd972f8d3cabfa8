"""Validation helpers for phonemizer inputs and results."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from substitutor_phonemizer.models import Note, NoteResolution

MIN_TONE = 0
MAX_TONE = 127
TSV_CONTROL_CHARS = ("\t", "\r", "\n")


def _raise_if_errors(label: str, errors: list[str]) -> None:
    """Raise one ``ValueError`` previewing the first 25 errors."""

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_notes(notes: Sequence[Note]) -> None:
    """Validate note rows for pitch, timing, attribute and text constraints.

    Args:
        notes: Notes in sequence order.

    Raises:
        ValueError: If any note violates the expected shape.
    """

    errors: list[str] = []
    prev_position: int | None = None
    for idx, note in enumerate(notes, start=1):
        if not MIN_TONE <= note.tone <= MAX_TONE:
            errors.append(f"Note {idx}: tone {note.tone} outside {MIN_TONE}-{MAX_TONE}")
        if note.position < 0:
            errors.append(f"Note {idx}: negative position {note.position}")
        if note.duration < 0:
            errors.append(f"Note {idx}: negative duration {note.duration}")
        if prev_position is not None and note.position < prev_position:
            errors.append(f"Note {idx}: position {note.position} before previous note")
        indexes = [attr.index for attr in note.phoneme_attributes]
        if len(indexes) != len(set(indexes)):
            errors.append(f"Note {idx}: duplicate phoneme attribute index in {indexes}")
        for column, value in (("lyric", note.lyric), ("phonetic_hint", note.phonetic_hint or "")):
            if any(char in value for char in TSV_CONTROL_CHARS):
                errors.append(f"Note {idx}: {column} {value!r} contains a tab or line break")
        prev_position = note.position

    _raise_if_errors("Note", errors)


def collect_branch_counts(resolutions: Sequence[NoteResolution]) -> dict[str, int]:
    """Count resolutions by branch.

    Args:
        resolutions: Per-note resolutions.

    Returns:
        Dictionary of branch name to note count.
    """

    counter: Counter[str] = Counter()
    for resolution in resolutions:
        counter[resolution.branch] += 1
    return dict(counter)


def collect_color_counts(resolutions: Sequence[NoteResolution]) -> dict[str, int]:
    """Count matched samples by their colour; ``""`` for uncoloured samples.

    Fallback resolutions have no sample and are not counted.
    """

    counter: Counter[str] = Counter()
    for resolution in resolutions:
        if resolution.match is not None:
            counter[resolution.match.color or ""] += 1
    return dict(counter)
