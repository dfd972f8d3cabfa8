"""Unit tests for oto probing and colour tie-break."""

from __future__ import annotations

from substitutor_phonemizer.models import Note, OtoRecord, PhonemeAttribute
from substitutor_phonemizer.oto.library import InMemoryOtoLibrary, Subbank
from substitutor_phonemizer.resolution.resolver import OtoResolver


class RecordingLibrary:
    """Alias-only library that records every probe."""

    def __init__(self, *records: OtoRecord) -> None:
        self.records = {record.alias: record for record in records}
        self.calls: list[tuple[str, int, str]] = []

    def try_get_mapped_oto(self, alias: str, tone: int, color: str) -> OtoRecord | None:
        self.calls.append((alias, tone, color))
        return self.records.get(alias)


def test_resolve_prefers_color_exact_hit_over_earlier_candidate() -> None:
    library = RecordingLibrary(OtoRecord("x", "power"), OtoRecord("y", "normal"))

    match = OtoResolver(library).resolve(["x", "y"], tone=60, color="normal")

    assert match is not None
    assert match.alias == "y"
    assert match.candidate == "y"


def test_resolve_returns_first_hit_without_color_match() -> None:
    library = RecordingLibrary(OtoRecord("x", "power"), OtoRecord("y", "soft"))

    match = OtoResolver(library).resolve(["x", "y"], tone=60, color="normal")

    assert match is not None
    assert match.alias == "x"


def test_resolve_treats_missing_color_as_empty() -> None:
    library = RecordingLibrary(OtoRecord("x", "power"), OtoRecord("y", None))

    match = OtoResolver(library).resolve(["x", "y"], tone=60, color=None)

    assert match is not None
    assert match.alias == "y"
    assert library.calls == [("x", 60, ""), ("y", 60, "")]


def test_resolve_probes_every_candidate() -> None:
    library = RecordingLibrary(OtoRecord("a な"), OtoRecord("な"))

    OtoResolver(library).resolve(["a な", "* な", "な", "- な"], tone=60)

    assert [call[0] for call in library.calls] == ["a な", "* な", "な", "- な"]


def test_resolve_alternate_probe_short_circuits_plain_probe() -> None:
    library = RecordingLibrary(OtoRecord("な2"), OtoRecord("な"), OtoRecord("- な"))

    match = OtoResolver(library).resolve(["な", "- な"], tone=60, alternate="2")

    assert match is not None
    assert match.alias == "な2"
    assert match.candidate == "な"
    assert [call[0] for call in library.calls] == ["な2", "- な2", "- な"]


def test_resolve_applies_tone_shift() -> None:
    library = RecordingLibrary(OtoRecord("な"))

    OtoResolver(library).resolve(["な"], tone=60, tone_shift=-12)

    assert library.calls == [("な", 48, "")]


def test_resolve_returns_none_when_nothing_matches() -> None:
    assert OtoResolver(RecordingLibrary()).resolve(["- な", "な"], tone=60) is None


def test_resolve_note_uses_index_zero_attribute() -> None:
    library = RecordingLibrary(OtoRecord("な_P", "power"), OtoRecord("な", None))
    note = Note(
        "な",
        60,
        phoneme_attributes=(
            PhonemeAttribute(index=1, voice_color="soft"),
            PhonemeAttribute(index=0, voice_color="power", tone_shift=2, alternate="_P"),
        ),
    )

    match = OtoResolver(library).resolve_note(note, ("な",))

    assert match is not None
    assert match.alias == "な_P"
    assert library.calls == [("な_P", 62, "power")]


def test_resolve_through_subbank_reports_subbank_sample_color() -> None:
    library = InMemoryOtoLibrary(
        records=(OtoRecord("な"), OtoRecord("なP", "power")),
        subbanks=(Subbank(color="power", suffix="P", tones=frozenset(range(48, 72))),),
    )

    power = OtoResolver(library).resolve(["な"], tone=60, color="power")
    plain = OtoResolver(library).resolve(["な"], tone=60)

    assert power is not None and power.alias == "なP" and power.color == "power"
    assert plain is not None and plain.alias == "な" and plain.color is None
