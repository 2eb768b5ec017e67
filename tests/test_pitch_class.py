"""Tests for note, MIDI and interval arithmetic."""

import pytest

from chord_lab.pitch_class import (
    NoteName,
    enharmonic_note,
    interval_between,
    interval_number,
    interval_semitones,
    is_note,
    note_to_midi,
    note_to_pc,
    parse_note,
    strip_octave,
    transpose_note,
)


class TestParseNote:
    """Test note name parsing."""

    def test_pitch_class_only(self) -> None:
        assert parse_note("F#") == NoteName(letter="F", alteration=1, octave=None)

    def test_with_octave(self) -> None:
        assert parse_note("Eb4") == NoteName(letter="E", alteration=-1, octave=4)

    def test_lowercase_letter(self) -> None:
        note = parse_note("bb3")
        assert note.pitch_class == "Bb"
        assert note.octave == 3

    def test_double_sharp(self) -> None:
        assert parse_note("C##").alteration == 2

    @pytest.mark.parametrize("text", ["", "H", "hello", "C#b", "4", "Cm7"])
    def test_invalid_raises(self, text: str) -> None:
        with pytest.raises(ValueError, match="Unknown note"):
            parse_note(text)

    @pytest.mark.parametrize("text,expected", [("C", True), ("g#5", True), ("X", False), ("", False)])
    def test_is_note(self, text: str, expected: bool) -> None:
        assert is_note(text) is expected


class TestPitchNumbers:
    """Test pitch class and MIDI conversion."""

    @pytest.mark.parametrize("note,pc", [("C", 0), ("F#", 6), ("Gb", 6), ("Bb3", 10), ("Cb", 11), ("B#", 0)])
    def test_note_to_pc(self, note: str, pc: int) -> None:
        assert note_to_pc(note) == pc

    @pytest.mark.parametrize(
        "note,midi",
        [("C4", 60), ("A4", 69), ("C-1", 0), ("Cb4", 59), ("B#3", 60), ("E2", 40)],
    )
    def test_note_to_midi(self, note: str, midi: int) -> None:
        assert note_to_midi(note) == midi

    def test_midi_without_octave_is_none(self) -> None:
        assert note_to_midi("C") is None

    def test_strip_octave(self) -> None:
        assert strip_octave("D#4") == "D#"
        assert strip_octave("E") == "E"


class TestIntervals:
    """Test interval sizes and numbers."""

    @pytest.mark.parametrize(
        "interval,semitones",
        [
            ("1P", 0),
            ("2m", 1),
            ("3m", 3),
            ("3M", 4),
            ("4P", 5),
            ("5d", 6),
            ("5P", 7),
            ("5A", 8),
            ("7d", 9),
            ("7m", 10),
            ("7M", 11),
            ("8P", 12),
            ("9M", 14),
            ("10M", 16),
            ("11P", 17),
            ("13M", 21),
        ],
    )
    def test_semitones(self, interval: str, semitones: int) -> None:
        assert interval_semitones(interval) == semitones

    @pytest.mark.parametrize("interval", ["5M", "3P", "x", "0P", "", "M3"])
    def test_invalid_interval_raises(self, interval: str) -> None:
        with pytest.raises(ValueError):
            interval_semitones(interval)

    def test_interval_number(self) -> None:
        assert interval_number("7m") == 7
        assert interval_number("11P") == 11


class TestTranspose:
    """Test spelled transposition."""

    @pytest.mark.parametrize(
        "note,interval,expected",
        [
            ("C4", "3M", "E4"),
            ("A3", "3m", "C4"),
            ("G", "4P", "C"),
            ("Gb", "4P", "Cb"),
            ("Eb", "7M", "D"),
            ("B3", "2m", "C4"),
            ("C4", "10M", "E5"),
            ("E", "5A", "B#"),
            ("C", "7d", "Bbb"),
            ("F3", "9M", "G4"),
            ("D4", "8P", "D5"),
        ],
    )
    def test_transpose(self, note: str, interval: str, expected: str) -> None:
        assert transpose_note(note, interval) == expected

    def test_transpose_invalid_note_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown note"):
            transpose_note("H", "3M")


class TestIntervalBetween:
    """Test pitch-class distance."""

    @pytest.mark.parametrize(
        "start,end,expected",
        [
            ("C", "C", "1P"),
            ("E", "G", "3m"),
            ("E", "D#", "7M"),
            ("E3", "F#4", "2M"),
            ("C", "Gb", "5d"),
            ("B", "C", "2m"),
            ("A", "E", "5P"),
        ],
    )
    def test_interval_between(self, start: str, end: str, expected: str) -> None:
        assert interval_between(start, end) == expected


class TestEnharmonic:
    """Test enharmonic respelling."""

    @pytest.mark.parametrize(
        "note,expected",
        [("Gb", "F#"), ("C#", "Db"), ("E#", "F"), ("Cb", "B"), ("C", "C"), ("Cb4", "B3"), ("B#3", "C4")],
    )
    def test_enharmonic(self, note: str, expected: str) -> None:
        assert enharmonic_note(note) == expected
