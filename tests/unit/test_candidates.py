"""Unit tests for grapheme helpers and candidate construction."""

from __future__ import annotations

from substitutor_phonemizer.models import Note, SampleMatch
from substitutor_phonemizer.resolution.candidates import (
    bare_vowel_substitute,
    build_candidates,
    effective_lyric,
    graphemes,
    last_grapheme,
    plain_candidates,
    trailing_vowel,
    vcv_candidates,
)
from substitutor_phonemizer.tables.data import VOWEL_KANA_SUBSTITUTE_LINES
from substitutor_phonemizer.tables.repository import ClassificationTables

VOWEL_KANA_TABLES = ClassificationTables.from_lines(substitute_lines=VOWEL_KANA_SUBSTITUTE_LINES)


def _hit(candidates):
    return SampleMatch(alias=candidates[0], color=None, candidate=candidates[0])


def _miss(candidates):
    return None


def test_graphemes_keep_combining_marks_with_their_base() -> None:
    assert graphemes("きゃ") == ["き", "ゃ"]
    assert graphemes("\u304b\u3099") == ["\u304b\u3099"]
    assert last_grapheme("- きゃ") == "ゃ"
    assert last_grapheme("") == ""


def test_plain_and_vcv_candidate_order() -> None:
    assert plain_candidates("な") == ("- な", "な")
    assert vcv_candidates("a", "な") == ("a な", "* な", "な", "- な")


def test_effective_lyric_prefers_normalized_hint() -> None:
    assert effective_lyric(Note("か", 60)) == "か"
    assert effective_lyric(Note("か", 60, phonetic_hint="が")) == "が"
    assert effective_lyric(Note("か", 60, phonetic_hint="")) == "か"
    assert effective_lyric(Note("か", 60, phonetic_hint="\u304b\u3099")) == "\u304c"


def test_trailing_vowel_uses_last_cluster() -> None:
    assert trailing_vowel("きゃ") == "a"
    assert trailing_vowel("- しょ") == "o"
    assert trailing_vowel("") is None


def test_bare_vowel_substitute_uses_trailing_vowel_class() -> None:
    assert bare_vowel_substitute("か", VOWEL_KANA_TABLES) == "あ"
    assert bare_vowel_substitute("きゅ", VOWEL_KANA_TABLES) == "う"
    assert bare_vowel_substitute("ン", VOWEL_KANA_TABLES) is None
    assert bare_vowel_substitute("", VOWEL_KANA_TABLES) is None


def test_bare_vowel_substitute_default_table_is_keyed_by_kana() -> None:
    assert bare_vowel_substitute("か") is None
    assert bare_vowel_substitute("あ") is None


def test_build_candidates_prefixes_previous_trailing_vowel() -> None:
    candidate_set = build_candidates("な", Note("ゃ", 60), probe=_hit)

    assert candidate_set.candidates == ("a な", "* な", "な", "- な")
    assert candidate_set.vowel == "a"
    assert candidate_set.substituted_from is None


def test_build_candidates_default_tables_keep_lyric_when_plain_forms_miss() -> None:
    candidate_set = build_candidates("な", Note("ゃ", 60), probe=_miss)

    assert candidate_set.candidates == ("a な", "* な", "な", "- な")
    assert candidate_set.substituted_from is None


def test_build_candidates_reads_previous_hint_over_lyric() -> None:
    candidate_set = build_candidates("な", Note("か", 60, phonetic_hint="ん"), probe=_hit)

    assert candidate_set.candidates[0] == "n な"


def test_build_candidates_unclassifiable_neighbour_keeps_plain_forms() -> None:
    candidate_set = build_candidates("な", Note("ー", 60), probe=_hit)

    assert candidate_set.candidates == ("- な", "な")
    assert candidate_set.vowel is None


def test_build_candidates_substitutes_bare_vowel_when_plain_forms_miss() -> None:
    candidate_set = build_candidates("か", None, probe=_miss, tables=VOWEL_KANA_TABLES)

    assert candidate_set.lyric == "あ"
    assert candidate_set.candidates == ("- あ", "あ")
    assert candidate_set.substituted_from == "か"


def test_build_candidates_skips_substitution_when_plain_forms_hit() -> None:
    candidate_set = build_candidates("か", None, probe=_hit, tables=VOWEL_KANA_TABLES)

    assert candidate_set.lyric == "か"
    assert candidate_set.substituted_from is None


def test_build_candidates_applies_vcv_to_substituted_lyric() -> None:
    candidate_set = build_candidates("さ", Note("こ", 60), probe=_miss, tables=VOWEL_KANA_TABLES)

    assert candidate_set.candidates == ("o あ", "* あ", "あ", "- あ")


def test_build_candidates_with_romanized_substitute_table() -> None:
    tables = ClassificationTables.from_lines(substitute_lines=["a=a"])

    candidate_set = build_candidates("あ", None, probe=_miss, tables=tables)

    assert candidate_set.lyric == "a"
    assert candidate_set.candidates == ("- a", "a")
    assert candidate_set.substituted_from == "あ"


def test_build_candidates_empty_lyric_keeps_plain_forms() -> None:
    candidate_set = build_candidates("", None, probe=_miss)

    assert candidate_set.candidates == ("- ", "")
    assert candidate_set.lyric == ""


def test_build_candidates_is_deterministic() -> None:
    first = build_candidates("な", Note("きゃ", 60), probe=_miss)
    second = build_candidates("な", Note("きゃ", 60), probe=_miss)

    assert first == second
