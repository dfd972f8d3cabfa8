"""Markdown report generation for phonemizer run summaries."""

from __future__ import annotations

from typing import Iterable, Sequence

from substitutor_phonemizer.models import NoteResolution, ResolutionReport
from substitutor_phonemizer.phonemizer import (
    BRANCH_FALLBACK,
    BRANCH_HINT,
    BRANCH_PLAIN,
    BRANCH_VCV,
)
from substitutor_phonemizer.validation import collect_branch_counts, collect_color_counts

BRANCH_ORDER = (BRANCH_HINT, BRANCH_VCV, BRANCH_PLAIN, BRANCH_FALLBACK)


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def _cell(text: str) -> str:
    """Make a value safe and visible inside a markdown table cell."""

    if not text:
        return "(empty)"
    return text.replace("|", "\\|")


def build_report_md(resolutions: Sequence[NoteResolution], report: ResolutionReport) -> str:
    """Build the markdown report for one phonemizer run.

    Args:
        resolutions: Per-note resolutions.
        report: Diagnostics collected for the run.

    Returns:
        Full markdown content with summary tables.
    """

    branch_counts = collect_branch_counts(resolutions)
    branch_rows = [(branch, str(branch_counts.get(branch, 0))) for branch in BRANCH_ORDER]

    color_counts = collect_color_counts(resolutions)
    color_rows = [
        (_cell(color), str(count))
        for color, count in sorted(color_counts.items(), key=lambda item: (-item[1], item[0]))
    ]

    hint_rows = [
        (str(item.note_index), _cell(item.lyric), _cell(item.phonetic_hint), _cell(item.phoneme))
        for item in report.hint_misses
    ]

    substituted_rows = [
        (str(item.note_index), _cell(item.lyric), _cell(item.substitute), _cell(item.phoneme))
        for item in report.substituted
    ]

    fallback_rows = [
        (
            str(item.note_index),
            _cell(item.lyric),
            ", ".join(_cell(candidate) for candidate in item.candidates),
        )
        for item in report.fallbacks
    ]

    sections = [
        "# Phonemizer Report",
        "",
        "## Notes per resolution branch",
        _markdown_table(["branch", "note_count"], branch_rows),
        "",
        "## Matched samples per voice color",
        _markdown_table(["color", "note_count"], color_rows),
        "",
        "## Phonetic hints without a sample",
        _markdown_table(["note", "lyric", "phonetic_hint", "phoneme"], hint_rows),
        "",
        "## Bare-vowel substitutions",
        _markdown_table(["note", "lyric", "substitute", "phoneme"], substituted_rows),
        "",
        "## No matching sample",
        _markdown_table(["note", "lyric", "candidates"], fallback_rows),
    ]

    return "\n".join(sections) + "\n"
