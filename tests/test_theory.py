import pytest
from pychord import QualityManager

from chord_lab.theory import (
    QUALITY_NAMES,
    QUALITY_TO_INTERVALS,
    PychordBackend,
    canonical_symbol,
    normalize_chord_name,
    table_quality,
)


@pytest.fixture
def backend():
    return PychordBackend()


class TestNormalizeChordName:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("CM", "C"),
            ("Cmaj", "C"),
            ("CMajor", "C"),
            ("CM/E", "C/E"),
            ("FMaj7", "Fmaj7"),
            ("Bbm7-5", "Bbm7b5"),
            ("Caug7", "C7+5"),
            ("C7#5", "C7+5"),
            ("c", "C"),
            ("Gm7", "Gm7"),
            ("Hello", "Hello"),
        ],
    )
    def test_normalize(self, name, expected):
        assert normalize_chord_name(name) == expected

    def test_canonical_symbol(self):
        assert canonical_symbol("") == "M"
        assert canonical_symbol("sus4") == "sus4"

    def test_table_quality(self):
        assert table_quality("M7") == "maj7"
        assert table_quality("7+5") == "aug7"
        assert table_quality("m7") == "m7"


class TestResolveChord:
    def test_major_seventh_with_flat_root(self, backend):
        info = backend.resolve_chord("Abmaj7")
        assert not info.empty
        assert info.tonic == "Ab"
        assert info.symbol == "Abmaj7"
        assert info.intervals == ("1P", "3M", "5P", "7M")
        assert info.notes == ("Ab", "C", "Eb", "G")
        assert info.name == "Major 7th"

    def test_plain_major(self, backend):
        info = backend.resolve_chord("C")
        assert info.symbol == "CM"
        assert info.quality == ""
        assert info.name == "Major"
        assert info.bass is None

    def test_major_alias(self, backend):
        assert backend.resolve_chord("CM").intervals == backend.resolve_chord("C").intervals

    def test_half_diminished(self, backend):
        info = backend.resolve_chord("Bm7b5")
        assert info.quality == "m7b5"
        assert info.intervals == ("1P", "3m", "5d", "7m")

    def test_augmented_seventh(self, backend):
        info = backend.resolve_chord("Caug7")
        assert info.symbol == "Caug7"
        assert info.intervals == ("1P", "3M", "5A", "7m")
        assert info.notes == ("C", "E", "G#", "Bb")
        assert info.name == "Augmented 7th"

    def test_slash_chord(self, backend):
        info = backend.resolve_chord("C/E")
        assert info.tonic == "C"
        assert info.bass == "E"
        assert info.symbol == "CM/E"

    @pytest.mark.parametrize("name", ["", "   ", "Hello", "H7", "Cxyz"])
    def test_unknown_is_empty(self, backend, name):
        assert backend.resolve_chord(name).empty

    def test_table_intervals_are_well_formed(self, backend):
        for intervals in QUALITY_TO_INTERVALS.values():
            for interval in intervals:
                assert backend.transpose("C4", interval)

    def test_every_named_quality_has_intervals(self):
        assert set(QUALITY_NAMES) == set(QUALITY_TO_INTERVALS)


class TestQualityTable:
    @pytest.mark.parametrize("quality", list(QUALITY_TO_INTERVALS))
    def test_table_quality_resolves(self, backend, quality):
        info = backend.resolve_chord(f"C{canonical_symbol(quality)}")
        assert not info.empty
        assert info.quality == quality
        assert info.intervals == QUALITY_TO_INTERVALS[quality]
        assert len(info.notes) == len(info.intervals)

    @pytest.mark.parametrize("quality", list(QualityManager().get_qualities()))
    def test_every_pychord_quality_resolves(self, backend, quality):
        info = backend.resolve_chord(f"C{canonical_symbol(table_quality(quality))}")
        assert not info.empty
        assert info.intervals
        assert len(info.notes) == len(info.intervals)


class TestNoteOperations:
    def test_to_midi(self, backend):
        assert backend.to_midi("C4") == 60
        assert backend.to_midi("C") is None
        assert backend.to_midi("foo") is None

    def test_transpose_invalid_note_is_empty(self, backend):
        assert backend.transpose("H", "3M") == ""

    def test_transpose_malformed_interval_raises(self, backend):
        with pytest.raises(ValueError):
            backend.transpose("C", "3X")

    def test_distance(self, backend):
        assert backend.distance("E", "D#") == "7M"
        assert backend.distance("E", "nope") == ""

    def test_enharmonic(self, backend):
        assert backend.enharmonic("Gb") == "F#"
        assert backend.enharmonic("nope") == ""


class TestDetectChords:
    def test_major_triad(self, backend):
        assert backend.detect_chords(["C", "E", "G"]) == ["CM"]

    def test_octaves_are_ignored(self, backend):
        assert backend.detect_chords(["C4", "E4", "G4", "C5"]) == ["CM"]

    def test_ambiguous_set_lists_root_position_first(self, backend):
        assert backend.detect_chords(["A", "C", "E", "G"]) == ["Am7", "C6/A"]

    def test_inversion_becomes_slash_chord(self, backend):
        assert backend.detect_chords(["E", "G", "C"]) == ["CM/E"]

    def test_spelling_follows_input(self, backend):
        assert backend.detect_chords(["Eb", "G", "Bb"]) == ["EbM"]

    def test_pychord_synonyms_use_table_names(self, backend):
        assert backend.detect_chords(["C", "E", "G", "B"]) == ["Cmaj7"]
        assert backend.detect_chords(["C", "E", "G#", "Bb"]) == ["Caug7"]

    def test_stacked_ninth(self, backend):
        assert backend.detect_chords(["C", "E", "G", "Bb", "D"]) == ["C9"]

    def test_open_spacing_falls_back_to_close_position(self, backend):
        assert backend.detect_chords(["C", "G", "E"]) == ["CM"]

    def test_detected_names_resolve(self, backend):
        for notes in (["C", "E", "G#", "Bb"], ["A", "C", "E", "G"], ["B", "D", "F", "A"], ["C", "Eb", "Gb", "A"]):
            for name in backend.detect_chords(notes):
                assert not backend.resolve_chord(name).empty, name

    @pytest.mark.parametrize("notes", [[], ["C"], ["C", "D", "F#"], ["nope"]])
    def test_no_match(self, backend, notes):
        assert backend.detect_chords(notes) == []


class TestExpandRomanNumerals:
    def test_degrees_ignore_case(self, backend):
        assert backend.expand_roman_numerals("C", ["I", "vi", "bVII", "V7"]) == ["C", "A", "Bb", "G7"]

    def test_sharp_degree(self, backend):
        assert backend.expand_roman_numerals("C", ["#IVdim"]) == ["F#dim"]

    def test_minor_key_tonic(self, backend):
        assert backend.expand_roman_numerals("A", ["i", "bVII", "bVI", "V"]) == ["A", "G", "F", "E"]

    @pytest.mark.parametrize(
        "numeral,expected",
        [("vii°", "Bdim"), ("viio", "Bdim"), ("viio7", "Bdim7"), ("viiø", "Bm7b5"), ("viiø7", "Bm7b5")],
    )
    def test_quality_marks(self, backend, numeral, expected):
        assert backend.expand_roman_numerals("C", [numeral]) == [expected]

    def test_invalid_numeral_is_empty(self, backend):
        assert backend.expand_roman_numerals("C", ["I", "X"]) == ["C", ""]

    def test_invalid_key(self, backend):
        assert backend.expand_roman_numerals("H", ["I", "V"]) == ["", ""]
