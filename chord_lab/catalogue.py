"""Curated catalogue of roots, chord types, progressions and showcase chords."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chord_lab.models import FeaturedChord

# Roots offered for selection (one spelling per pitch class, plus C#/Db)
ROOT_NOTES: tuple[str, ...] = (
    "C",
    "C#",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "F#",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Every root spelling the catalogue knows about
ALL_ROOT_NOTES: tuple[str, ...] = (
    "C",
    "C#",
    "Db",
    "D",
    "D#",
    "Eb",
    "E",
    "F",
    "F#",
    "Gb",
    "G",
    "G#",
    "Ab",
    "A",
    "A#",
    "Bb",
    "B",
)


class ChordCategory(str, Enum):
    TRIAD = "Triads"
    SEVENTH = "Sevenths"
    NINTH = "Ninths"
    SUSPENDED = "Suspended"


@dataclass(frozen=True)
class ChordDefinition:
    """A selectable chord type.

    Parameters
    ----------
    symbol : str
        Quality symbol appended to the root (e.g., "m7").
    name : str
        Display name (e.g., "Minor 7th").
    category : ChordCategory
        Grouping for display.
    """

    symbol: str
    name: str
    category: ChordCategory


@dataclass(frozen=True)
class ProgressionDefinition:
    """A named roman-numeral progression."""

    name: str
    numerals: tuple[str, ...]


CHORD_TYPES: tuple[ChordDefinition, ...] = (
    # Triads
    ChordDefinition("", "Major", ChordCategory.TRIAD),
    ChordDefinition("m", "Minor", ChordCategory.TRIAD),
    ChordDefinition("aug", "Augmented", ChordCategory.TRIAD),
    ChordDefinition("dim", "Diminished", ChordCategory.TRIAD),
    # Sevenths
    ChordDefinition("maj7", "Major 7th", ChordCategory.SEVENTH),
    ChordDefinition("m7", "Minor 7th", ChordCategory.SEVENTH),
    ChordDefinition("7", "Dominant 7th", ChordCategory.SEVENTH),
    ChordDefinition("m7b5", "Half Diminished", ChordCategory.SEVENTH),
    ChordDefinition("dim7", "Diminished 7th", ChordCategory.SEVENTH),
    # Ninths
    ChordDefinition("9", "Dominant 9th", ChordCategory.NINTH),
    ChordDefinition("maj9", "Major 9th", ChordCategory.NINTH),
    ChordDefinition("add9", "Add 9", ChordCategory.NINTH),
    # Suspended
    ChordDefinition("sus4", "Suspended 4th", ChordCategory.SUSPENDED),
    ChordDefinition("sus2", "Suspended 2nd", ChordCategory.SUSPENDED),
)

PROGRESSIONS: tuple[ProgressionDefinition, ...] = (
    ProgressionDefinition("Pop Axis", ("I", "V", "vi", "IV")),
    ProgressionDefinition("Jazz ii-V-I", ("ii7", "V7", "Imaj7")),
    ProgressionDefinition("Doo-Wop", ("I", "vi", "IV", "V")),
    ProgressionDefinition("Andalusian Cadence", ("i", "bVII", "bVI", "V")),
    ProgressionDefinition("Minor Plagal", ("I", "IV", "iv", "I")),
    ProgressionDefinition("Mixolydian Vamp", ("I", "bVII", "IV", "I")),
    ProgressionDefinition("Circle of Fifths", ("vi7", "ii7", "V7", "Imaj7")),
    ProgressionDefinition("Royal Road", ("IVmaj7", "V7", "iii7", "vi")),
)

FEATURED_CHORDS: tuple[FeaturedChord, ...] = (
    FeaturedChord(
        id="hendrix",
        display_name="The Hendrix Chord",
        root="E",
        symbol="7#9",
        description="A dominant seventh with a sharp ninth on top, equal parts bluesy and abrasive.",
        tags=("rock", "blues", "dominant"),
        custom_notes=("E3", "G#3", "D4", "G4"),
    ),
    FeaturedChord(
        id="minor-major-ninth",
        display_name="The Bond Chord",
        root="E",
        symbol="m(maj9)",
        description="Minor triad, major seventh and ninth: the sound of spy-film title cards.",
        tags=("film", "minor", "tension"),
        custom_notes=("E3", "G3", "B3", "D#4", "F#4"),
    ),
    FeaturedChord(
        id="so-what",
        display_name="The So What Chord",
        root="E",
        symbol="m11",
        description="Three stacked fourths capped by a major third.",
        tags=("jazz", "quartal", "modal"),
        custom_notes=("E3", "A3", "D4", "G4", "B4"),
    ),
    FeaturedChord(
        id="major-ninth",
        display_name="Major Ninth",
        root="F",
        symbol="maj9",
        description="Lush and open, a staple of neo-soul keys.",
        tags=("neo-soul", "major", "extended"),
    ),
    FeaturedChord(
        id="half-diminished",
        display_name="Half Diminished",
        root="B",
        symbol="m7b5",
        description="The ii chord of a minor ii-V, restless and unresolved.",
        tags=("jazz", "minor", "dissonant"),
    ),
    FeaturedChord(
        id="suspended-fourth",
        display_name="Suspended Fourth",
        root="D",
        symbol="sus4",
        description="Neither major nor minor, waiting to fall onto the third.",
        tags=("pop", "suspended"),
    ),
)


def find_progression(name: str) -> ProgressionDefinition | None:
    """Look up a catalogue progression by name (case-insensitive)."""
    wanted = name.strip().lower()
    for progression in PROGRESSIONS:
        if progression.name.lower() == wanted:
            return progression
    return None


def find_featured_chord(chord_id: str) -> FeaturedChord | None:
    """Look up a featured chord by id."""
    for featured in FEATURED_CHORDS:
        if featured.id == chord_id:
            return featured
    return None
