"""Tests that every catalogue entry builds into a chord."""

from itertools import product

import pytest

from chord_lab.builder import build_chord_data, build_featured_chord_data, parse_chord_name
from chord_lab.catalogue import (
    ALL_ROOT_NOTES,
    CHORD_TYPES,
    FEATURED_CHORDS,
    ROOT_NOTES,
    ChordCategory,
    find_featured_chord,
    find_progression,
)
from chord_lab.pitch_class import note_to_midi


class TestChordTypes:
    """Test building every root x chord type."""

    def test_root_sets(self) -> None:
        assert len(ROOT_NOTES) == 13
        assert len(ALL_ROOT_NOTES) == 17
        assert set(ROOT_NOTES) <= set(ALL_ROOT_NOTES)

    def test_every_category_is_used(self) -> None:
        assert {c.category for c in CHORD_TYPES} == set(ChordCategory)

    @pytest.mark.parametrize(
        "root,chord_type",
        list(product(ALL_ROOT_NOTES, CHORD_TYPES)),
        ids=lambda v: v if isinstance(v, str) else (v.symbol or "major"),
    )
    def test_builds(self, root, chord_type) -> None:
        chord = build_chord_data(root, chord_type.symbol)
        assert chord is not None
        assert chord.root == root
        assert chord.symbol == chord_type.symbol
        assert chord.name == chord_type.name
        assert len(chord.notes) == len(chord.intervals)
        midis = [note_to_midi(n) for n in chord.notes]
        assert midis == sorted(midis)

    @pytest.mark.parametrize("root", ROOT_NOTES)
    def test_parse_round_trip(self, root: str) -> None:
        for chord_type in CHORD_TYPES:
            parsed = parse_chord_name(f"{root}{chord_type.symbol}")
            assert parsed is not None
            assert parsed.root == root
            assert parsed.symbol == chord_type.symbol


class TestFeaturedChords:
    """Test the showcase chords."""

    @pytest.mark.parametrize("featured", FEATURED_CHORDS, ids=lambda f: f.id)
    def test_builds(self, featured) -> None:
        chord = build_featured_chord_data(featured)
        assert chord is not None
        if featured.custom_notes:
            assert chord.notes == featured.custom_notes
            assert len(chord.intervals) == len(featured.custom_notes)
        else:
            assert chord.root == featured.root

    def test_find_featured_chord(self) -> None:
        assert find_featured_chord("so-what") is not None
        assert find_featured_chord("missing") is None


class TestProgressions:
    """Test progression lookup."""

    def test_find_is_case_insensitive(self) -> None:
        progression = find_progression("pop axis")
        assert progression is not None
        assert progression.numerals == ("I", "V", "vi", "IV")

    def test_find_missing(self) -> None:
        assert find_progression("nope") is None
