"""
chord_lab.constants
~~~~~~~~~~~~~~~~~~~

Shared constants for voicing, symbol cleanup and note parsing.
Centralises the register choices and alias tables so every
submodule reads them from one place.
"""

import re
from typing import Final

# ── Registers ───────────────────────────────────────────────────────
STANDARD_OCTAVE: Final[int] = 4
"""Anchor octave for closed voicings (treble-clef readable)."""

SPREAD_OCTAVE: Final[int] = 3
"""Anchor octave for the root of open/shell voicings."""

LOW_ROOT_BASS_OCTAVE: Final[int] = 2
LOW_ROOT_CHORD_OCTAVE: Final[int] = 3
HIGH_ROOT_BASS_OCTAVE: Final[int] = 3
HIGH_ROOT_CHORD_OCTAVE: Final[int] = 4

LOW_ROOT_MIN_PC: Final[int] = 4
"""Roots from E (pitch class 4) up to B are voiced an octave lower."""

# ── Symbols ─────────────────────────────────────────────────────────
MAJOR_ALIASES: Final[frozenset[str]] = frozenset({"M", "major", "Major", "Maj", "maj"})
"""Quality spellings that all mean a plain major triad."""

DETECTED_MAJOR_ALIASES: Final[frozenset[str]] = frozenset({"M", "Major", "major"})
"""Major spellings blanked by the detector's own cleanup rules."""

DETECTED_MAJOR_SLASH_RE: Final[re.Pattern[str]] = re.compile(r"^(?:M|Major)(?=/)")

ACCIDENTALS: Final[str] = "#b"

# ── Notes ───────────────────────────────────────────────────────────
LEADING_ROOT_RE: Final[re.Pattern[str]] = re.compile(r"^[A-G][#b]?")
"""Root extraction fallback for chord names the backend cannot parse."""

OCTAVE_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]")
