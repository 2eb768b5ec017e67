"""Pitch, note and interval arithmetic.

This module provides the spelled-pitch operations the rest of the package
relies on: parsing note names (with or without an octave), MIDI numbers,
interval sizes in ``"3M"``/``"5P"``/``"7m"`` notation, transposition that
keeps correct letter spelling, and enharmonic respelling.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

LETTERS = "CDEFGAB"

# Natural note name to pitch class (0-11, where C=0)
LETTER_TO_PC: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

# Pitch class to note name (sharp and flat spellings)
SHARP_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
FLAT_NAMES = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

# Semitones of each simple degree in the major scale (unison..seventh)
MAJOR_SCALE_STEPS = (0, 2, 4, 5, 7, 9, 11)

# Simple degrees (0-indexed) that take perfect rather than major/minor quality
PERFECT_DEGREES = frozenset({0, 3, 4})

PERFECT_QUALITY_OFFSETS: dict[str, int] = {"dd": -2, "d": -1, "P": 0, "A": 1, "AA": 2}
MAJOR_QUALITY_OFFSETS: dict[str, int] = {"dd": -3, "d": -2, "m": -1, "M": 0, "A": 1, "AA": 2}

NOTE_RE = re.compile(r"^([A-Ga-g])(#+|b+)?(-?\d+)?$")
INTERVAL_RE = re.compile(r"^(\d+)(dd|d|m|M|P|AA|A)$")


@dataclass(frozen=True)
class NoteName:
    """A parsed note name.

    Parameters
    ----------
    letter : str
        Natural letter name, upper case ("C".."B").
    alteration : int
        Accidental offset in semitones (+1 per "#", -1 per "b").
    octave : int | None
        Scientific octave number, or None for a bare pitch class.
    """

    letter: str
    alteration: int
    octave: int | None = None

    @property
    def pitch_class(self) -> str:
        """Return the note name without its octave (e.g., "F#")."""
        return format_note(self.letter, self.alteration)

    @property
    def chroma(self) -> int:
        """Return the pitch class number (0-11)."""
        return (LETTER_TO_PC[self.letter] + self.alteration) % 12

    @property
    def midi(self) -> int | None:
        """Return the MIDI number, or None when the note has no octave."""
        if self.octave is None:
            return None
        return (self.octave + 1) * 12 + LETTER_TO_PC[self.letter] + self.alteration

    def __str__(self) -> str:
        return format_note(self.letter, self.alteration, self.octave)


def format_note(letter: str, alteration: int, octave: int | None = None) -> str:
    """Build a note name from its parts.

    Examples
    --------
    >>> format_note("F", 1, 4)
    'F#4'
    >>> format_note("B", -1)
    'Bb'
    """
    accidental = "#" * alteration if alteration > 0 else "b" * -alteration
    suffix = "" if octave is None else str(octave)
    return f"{letter}{accidental}{suffix}"


def parse_note(note: str) -> NoteName:
    """Parse a note name such as "C", "Eb4" or "f#3".

    Parameters
    ----------
    note : str
        Note name with optional accidentals and octave.

    Returns
    -------
    NoteName
        The parsed note.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> parse_note("Eb4")
    NoteName(letter='E', alteration=-1, octave=4)
    >>> parse_note("G").octave is None
    True
    """
    match = NOTE_RE.match(note.strip()) if note else None
    if match is None:
        msg = f"Unknown note: {note}"
        raise ValueError(msg)
    letter, accidentals, octave = match.groups()
    alteration = 0
    if accidentals:
        alteration = len(accidentals) if accidentals[0] == "#" else -len(accidentals)
    return NoteName(
        letter=letter.upper(),
        alteration=alteration,
        octave=int(octave) if octave is not None else None,
    )


def is_note(note: str) -> bool:
    """Check whether a string is a valid note name."""
    try:
        parse_note(note)
    except ValueError:
        return False
    return True


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb3")
    10
    """
    return parse_note(note).chroma


def note_to_midi(note: str) -> int | None:
    """Convert a note name to its MIDI number.

    Returns None for a pitch class without octave.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_midi("C4")
    60
    >>> note_to_midi("A4")
    69
    >>> note_to_midi("C") is None
    True
    """
    return parse_note(note).midi


def strip_octave(note: str) -> str:
    """Remove any octave digits from a note name ("D#4" -> "D#")."""
    return re.sub(r"-?\d+$", "", note.strip())


def _parse_interval(interval: str) -> tuple[int, str]:
    match = INTERVAL_RE.match(interval or "")
    if match is None:
        msg = f"Unknown interval: {interval}"
        raise ValueError(msg)
    number = int(match.group(1))
    if number < 1:
        msg = f"Unknown interval: {interval}"
        raise ValueError(msg)
    return number, match.group(2)


def interval_number(interval: str) -> int:
    """Return the degree number of an interval ("7m" -> 7, "11P" -> 11)."""
    return _parse_interval(interval)[0]


def interval_semitones(interval: str) -> int:
    """Return the size of an interval in semitones.

    Raises
    ------
    ValueError
        If the interval is malformed or its quality does not fit its degree
        (e.g., "5M").

    Examples
    --------
    >>> interval_semitones("3M")
    4
    >>> interval_semitones("5d")
    6
    >>> interval_semitones("9M")
    14
    """
    number, quality = _parse_interval(interval)
    degree = (number - 1) % 7
    octaves = (number - 1) // 7
    offsets = PERFECT_QUALITY_OFFSETS if degree in PERFECT_DEGREES else MAJOR_QUALITY_OFFSETS
    if quality not in offsets:
        msg = f"Invalid quality for interval: {interval}"
        raise ValueError(msg)
    return MAJOR_SCALE_STEPS[degree] + offsets[quality] + 12 * octaves


def transpose_note(note: str, interval: str) -> str:
    """Transpose a note upwards by an interval, keeping correct spelling.

    The result keeps an octave only if the input had one.

    Raises
    ------
    ValueError
        If the note or the interval is not recognized.

    Examples
    --------
    >>> transpose_note("C4", "3M")
    'E4'
    >>> transpose_note("A3", "3m")
    'C4'
    >>> transpose_note("Gb", "4P")
    'Cb'
    """
    parsed = parse_note(note)
    number = interval_number(interval)
    semitones = interval_semitones(interval)

    letter_index = LETTERS.index(parsed.letter) + number - 1
    letter = LETTERS[letter_index % 7]
    octave_shift = letter_index // 7

    target = LETTER_TO_PC[parsed.letter] + parsed.alteration + semitones
    alteration = target - (LETTER_TO_PC[letter] + 12 * octave_shift)
    octave = None if parsed.octave is None else parsed.octave + octave_shift
    return format_note(letter, alteration, octave)


def interval_between(from_note: str, to_note: str) -> str:
    """Return the ascending simple interval between two pitch classes.

    Octaves are ignored, so the result always lies within one octave.

    Examples
    --------
    >>> interval_between("E", "D#")
    '7M'
    >>> interval_between("E3", "G3")
    '3m'
    """
    start = parse_note(from_note)
    end = parse_note(to_note)
    steps = (LETTERS.index(end.letter) - LETTERS.index(start.letter)) % 7
    semitones = (end.chroma - start.chroma) % 12

    diff = semitones - MAJOR_SCALE_STEPS[steps]
    if diff > 6:
        diff -= 12
    elif diff < -6:
        diff += 12

    offsets = PERFECT_QUALITY_OFFSETS if steps in PERFECT_DEGREES else MAJOR_QUALITY_OFFSETS
    for quality, offset in offsets.items():
        if offset == diff:
            return f"{steps + 1}{quality}"
    msg = f"No interval from {from_note} to {to_note}"
    raise ValueError(msg)


def enharmonic_note(note: str) -> str:
    """Respell an altered note with the opposite accidental.

    Sharps become flats and flats become sharps; naturals are returned
    unchanged. The octave follows the sounding pitch ("Cb4" -> "B3").

    Examples
    --------
    >>> enharmonic_note("Gb")
    'F#'
    >>> enharmonic_note("C#")
    'Db'
    >>> enharmonic_note("E#")
    'F'
    """
    parsed = parse_note(note)
    if parsed.alteration == 0:
        return str(parsed)

    absolute = LETTER_TO_PC[parsed.letter] + parsed.alteration
    names = FLAT_NAMES if parsed.alteration > 0 else SHARP_NAMES
    name = names[absolute % 12]
    if parsed.octave is None:
        return name
    return f"{name}{parsed.octave + absolute // 12}"
