"""TSV read/write helpers for note input, sample index input and phoneme output."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from substitutor_phonemizer.models import Note, NoteResolution, PhonemeAttribute
from substitutor_phonemizer.oto.library import InMemoryOtoLibrary
from substitutor_phonemizer.oto.parser import parse_oto_index_lines, parse_subbank_lines

NOTES_TSV_HEADER = [
    "position",
    "duration",
    "tone",
    "lyric",
    "phonetic_hint",
    "voice_color",
    "tone_shift",
    "alternate",
]

PHONEMES_TSV_HEADER = [
    "position",
    "lyric",
    "phonetic_hint",
    "phoneme",
    "branch",
    "color",
]

REQUIRED_NOTE_COLUMNS = {"tone", "lyric"}


def _parse_int(value: str, column: str, row_number: int, default: int = 0) -> int:
    """Parse an integer cell, treating empty cells as ``default``.

    Raises:
        ValueError: If the cell is not an integer.
    """

    value = value.strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Notes row {row_number}: invalid {column} '{value}'") from None


def parse_note_lines(lines: Iterable[str]) -> list[Note]:
    """Parse note rows from TSV lines with a mandatory header.

    Only ``tone`` and ``lyric`` columns are required; the remaining
    :data:`NOTES_TSV_HEADER` columns default to empty/zero. Lyric cells are kept
    verbatim (including an empty lyric) apart from the line terminator.

    Args:
        lines: Raw TSV lines, header first.

    Returns:
        Notes in file order.

    Raises:
        ValueError: If required columns are missing or integer cells are malformed.
    """

    raw_lines = [line.rstrip("\r\n") for line in lines]
    data = [line for line in raw_lines if line and not line.startswith("#")]
    if not data:
        return []

    header = [cell.strip() for cell in data[0].split("\t")]
    missing = REQUIRED_NOTE_COLUMNS - set(header)
    if missing:
        raise ValueError(f"Notes TSV header is missing columns: {', '.join(sorted(missing))}")

    notes: list[Note] = []
    for row_number, line in enumerate(data[1:], start=1):
        cells = line.split("\t")
        row = {column: cells[idx] if idx < len(cells) else "" for idx, column in enumerate(header)}

        voice_color = row.get("voice_color", "").strip() or None
        tone_shift = _parse_int(row.get("tone_shift", ""), "tone_shift", row_number)
        alternate = row.get("alternate", "").strip() or None
        attributes: tuple[PhonemeAttribute, ...] = ()
        if voice_color or tone_shift or alternate:
            attributes = (
                PhonemeAttribute(
                    index=0,
                    voice_color=voice_color,
                    tone_shift=tone_shift,
                    alternate=alternate,
                ),
            )

        notes.append(
            Note(
                lyric=row["lyric"],
                tone=_parse_int(row["tone"], "tone", row_number),
                phonetic_hint=row.get("phonetic_hint", "").strip() or None,
                phoneme_attributes=attributes,
                position=_parse_int(row.get("position", ""), "position", row_number),
                duration=_parse_int(row.get("duration", ""), "duration", row_number),
            )
        )
    return notes


def read_notes_tsv(path: Path) -> list[Note]:
    """Read notes from a TSV file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """

    if not path.exists():
        raise FileNotFoundError(f"Notes file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return parse_note_lines(handle)


def read_oto_library(otos_path: Path, subbanks_path: Path | None = None) -> InMemoryOtoLibrary:
    """Load an in-memory library from an alias index and optional subbank table.

    Raises:
        FileNotFoundError: If a configured path does not exist.
    """

    if not otos_path.exists():
        raise FileNotFoundError(f"Alias index file not found: {otos_path}")
    with otos_path.open("r", encoding="utf-8") as handle:
        records = parse_oto_index_lines(handle)

    subbanks = []
    if subbanks_path is not None:
        if not subbanks_path.exists():
            raise FileNotFoundError(f"Subbank file not found: {subbanks_path}")
        with subbanks_path.open("r", encoding="utf-8") as handle:
            subbanks = parse_subbank_lines(handle)

    return InMemoryOtoLibrary(records=tuple(records), subbanks=tuple(subbanks))


def write_phonemes_tsv(
    resolutions: Sequence[NoteResolution],
    output_path: Path,
    include_header: bool = True,
) -> None:
    """Write one row per resolved note using the canonical column order.

    Args:
        resolutions: Per-note resolutions in sequence order.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(PHONEMES_TSV_HEADER))
            handle.write("\n")
        for resolution in resolutions:
            note = resolution.note
            handle.write(
                "\t".join(
                    [
                        str(note.position),
                        note.lyric,
                        note.phonetic_hint or "",
                        resolution.phoneme,
                        resolution.branch,
                        (resolution.match.color or "") if resolution.match else "",
                    ]
                )
            )
            handle.write("\n")
