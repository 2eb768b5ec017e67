"""Chord voicing, detection and resolution helpers.

This library turns chord identities (root + quality symbol) into
octave-assigned notes for display and playback, detects chords from raw
note input, cleans up chord symbols and suggests harmonic resolutions.

Examples
--------
>>> from chord_lab import build_chord_data, detect, resolve, realize

>>> # Build a chord for display
>>> chord = build_chord_data("C", "maj7")
>>> chord.notes
('C4', 'E4', 'G4', 'B4')

>>> # Detect a chord from notes
>>> [c.label for c in detect("A C E G")]
['Am7', 'C6/A']

>>> # Suggest resolutions
>>> resolve("G", "7")
['C', 'Cm']

>>> # Realize a progression
>>> realize("A", ["i", "bVII", "bVI", "V"])
['Am', 'G', 'F', 'E']
"""

from chord_lab.builder import (
    build_chord_data,
    build_featured_chord_data,
    get_progression_voicings,
    get_voicing,
    parse_chord_name,
)
from chord_lab.detector import detect
from chord_lab.models import ChordData, ChordInfo, FeaturedChord, ParsedChord
from chord_lab.progression import realize, realize_progression
from chord_lab.resolution import resolve
from chord_lab.symbols import sanitize_symbol
from chord_lab.theory import PychordBackend, TheoryBackend, default_backend
from chord_lab.voicing import (
    VoicingStrategy,
    natural_voicing,
    spread_voicing,
    standard_voicing,
    voice,
)

__all__ = [
    "ChordData",
    "ChordInfo",
    "FeaturedChord",
    "ParsedChord",
    "PychordBackend",
    "TheoryBackend",
    "VoicingStrategy",
    "build_chord_data",
    "build_featured_chord_data",
    "default_backend",
    "detect",
    "get_progression_voicings",
    "get_voicing",
    "natural_voicing",
    "parse_chord_name",
    "realize",
    "realize_progression",
    "resolve",
    "sanitize_symbol",
    "spread_voicing",
    "standard_voicing",
    "voice",
]
