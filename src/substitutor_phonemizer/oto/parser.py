"""Parsing utilities for tab-separated alias index and subbank tables."""

from __future__ import annotations

import re
from typing import Iterable

from substitutor_phonemizer.models import OtoRecord
from substitutor_phonemizer.oto.library import Subbank

TONE_RANGE_RE = re.compile(r"^(\d+)(?:-(\d+))?$")


def _data_lines(lines: Iterable[str]) -> list[str]:
    """Drop blank and ``#`` comment lines, keeping tabs intact."""

    raw_lines = [line.rstrip("\r\n") for line in lines]
    return [line for line in raw_lines if line.strip() and not line.lstrip().startswith("#")]


def parse_tone_set(payload: str) -> frozenset[int]:
    """Parse a tone list such as ``36-59,61`` into a set of pitch indexes.

    Args:
        payload: Comma-separated single tones or inclusive ``low-high`` ranges.

    Returns:
        Frozen set of tones.

    Raises:
        ValueError: If a token is malformed or a range is reversed.
    """

    tones: set[int] = set()
    for token in payload.split(","):
        token = token.strip()
        if not token:
            continue
        match = TONE_RANGE_RE.fullmatch(token)
        if not match:
            raise ValueError(f"Invalid tone token '{token}' in '{payload}'.")
        low = int(match.group(1))
        high = int(match.group(2)) if match.group(2) else low
        if high < low:
            raise ValueError(f"Reversed tone range '{token}' in '{payload}'.")
        tones.update(range(low, high + 1))
    return frozenset(tones)


def parse_oto_index_lines(lines: Iterable[str]) -> list[OtoRecord]:
    """Parse alias index rows into sample records.

    The parser accepts either a header row containing ``alias`` (and optionally
    ``color``) or plain rows with alias in the first column and colour in the
    second. Rows with an empty alias are skipped.

    Args:
        lines: Raw TSV lines.

    Returns:
        Records in file order.
    """

    data = _data_lines(lines)
    if not data:
        return []

    header_cells = [cell.strip() for cell in data[0].split("\t")]
    if "alias" in header_cells:
        idx_alias = header_cells.index("alias")
        idx_color = header_cells.index("color") if "color" in header_cells else None
        data = data[1:]
    else:
        idx_alias = 0
        idx_color = 1

    records: list[OtoRecord] = []
    for line in data:
        cells = line.split("\t")
        if len(cells) <= idx_alias:
            continue
        alias = cells[idx_alias].strip()
        if not alias:
            continue
        color = None
        if idx_color is not None and len(cells) > idx_color:
            color = cells[idx_color].strip() or None
        records.append(OtoRecord(alias=alias, color=color))
    return records


def parse_subbank_lines(lines: Iterable[str]) -> list[Subbank]:
    """Parse subbank rows with ``color``, ``prefix``, ``suffix`` and ``tones``.

    A header row naming those columns is optional; without it the columns are
    read in that order. Empty colour/prefix/suffix cells are allowed.

    Args:
        lines: Raw TSV lines.

    Returns:
        Subbanks in declaration order.

    Raises:
        ValueError: If a row has too few columns or a malformed tone list.
    """

    data = _data_lines(lines)
    if not data:
        return []

    columns = ("color", "prefix", "suffix", "tones")
    header_cells = [cell.strip() for cell in data[0].split("\t")]
    if set(columns).issubset(header_cells):
        indexes = [header_cells.index(column) for column in columns]
        data = data[1:]
    else:
        indexes = [0, 1, 2, 3]

    subbanks: list[Subbank] = []
    for number, line in enumerate(data, start=1):
        cells = [cell.strip() for cell in line.split("\t")]
        if len(cells) <= max(indexes):
            raise ValueError(f"Subbank row {number}: expected {len(columns)} columns, got {len(cells)}")
        color, prefix, suffix, tones = (cells[idx] for idx in indexes)
        subbanks.append(
            Subbank(color=color, prefix=prefix, suffix=suffix, tones=parse_tone_set(tones))
        )
    return subbanks
