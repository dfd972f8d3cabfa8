"""CLI entrypoint for phonemizing a note sequence against an alias index."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from substitutor_phonemizer.io.tsv_io import write_phonemes_tsv
from substitutor_phonemizer.pipeline import PhonemizerResult, run_pipeline
from substitutor_phonemizer.reporting.report_md import BRANCH_ORDER, build_report_md
from substitutor_phonemizer.tables.data import SUBSTITUTE_LINES, VOWEL_KANA_SUBSTITUTE_LINES
from substitutor_phonemizer.tables.repository import ClassificationTables
from substitutor_phonemizer.validation import collect_branch_counts

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

SUBSTITUTE_TABLES = {
    "romanized": SUBSTITUTE_LINES,
    "kana": VOWEL_KANA_SUBSTITUTE_LINES,
}


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the phonemize command.
    """

    parser = argparse.ArgumentParser(
        description="Resolve kana lyric notes to sample aliases and write them as TSV."
    )
    parser.add_argument("--notes", required=True, type=Path, help="Path to notes TSV.")
    parser.add_argument("--otos", required=True, type=Path, help="Path to alias index TSV.")
    parser.add_argument(
        "--subbanks",
        type=Path,
        default=None,
        help="Optional subbank TSV (color, prefix, suffix, tones).",
    )
    parser.add_argument("--output", required=True, type=Path, help="Destination TSV output path.")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Markdown report output path (default: report.md next to TSV).",
    )
    parser.add_argument(
        "--fail-on-fallback",
        action="store_true",
        help="Fail when a note matches no sample instead of emitting its lyric.",
    )
    parser.add_argument(
        "--substitutes",
        choices=sorted(SUBSTITUTE_TABLES),
        default="romanized",
        help=(
            "Bare-vowel substitute table: 'kana' rewrites a lyric without a sample to its "
            "bare-vowel kana (default: romanized)."
        ),
    )
    parser.add_argument("--no-header", action="store_true", help="Do not write TSV header.")
    parser.add_argument("--verbose", action="store_true", help="Log every probe at DEBUG level.")
    return parser


def _print_summary(result: PhonemizerResult) -> None:
    """Print branch counts for a finished run."""

    branch_counts = collect_branch_counts(result.resolutions)
    rows = [[branch, str(branch_counts.get(branch, 0))] for branch in BRANCH_ORDER]
    print("\nNotes per resolution branch:")
    print(_format_table(["branch", "note_count"], rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Args:
        argv: Argument list; ``None`` reads ``sys.argv``.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    inputs = (("Notes", args.notes), ("Alias index", args.otos), ("Subbank", args.subbanks))
    for label, path in inputs:
        if path is not None and not path.exists():
            raise SystemExit(f"{label} file not found: {path}")

    tables = ClassificationTables.from_lines(substitute_lines=SUBSTITUTE_TABLES[args.substitutes])
    result = run_pipeline(
        notes_path=args.notes,
        otos_path=args.otos,
        subbanks_path=args.subbanks,
        fail_on_fallback=args.fail_on_fallback,
        tables=tables,
    )

    args.output.parent.mkdir(parents=True, exist_ok=True)
    write_phonemes_tsv(result.resolutions, output_path=args.output, include_header=not args.no_header)

    report_path = args.report or args.output.with_name("report.md")
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(build_report_md(result.resolutions, result.report), encoding="utf-8")

    print(f"Wrote {len(result.resolutions)} phonemes to {args.output}")
    print(f"Wrote report to {report_path}")
    _print_summary(result)
    print(
        "\nResolution summary: "
        f"hint_misses={len(result.report.hint_misses)}, "
        f"substituted={len(result.report.substituted)}, "
        f"fallbacks={len(result.report.fallbacks)}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
