"""Music-theory backend used by the voicing, detection and resolution code.

The rest of the package only talks to a narrow ``TheoryBackend`` protocol:
chord resolution by name, note validation, MIDI conversion, transposition,
enharmonic lookup, chord detection from a note set and roman-numeral
expansion. ``PychordBackend`` implements it with pychord for chord-name
parsing and the spelled-pitch arithmetic in ``chord_lab.pitch_class``.

Every operation returns an empty sentinel ("", None, [] or
``ChordInfo.empty_chord()``) for unknown input instead of raising, except
``transpose`` which raises ``ValueError`` for a malformed interval.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from chord_lab.models import ChordInfo
from chord_lab.pitch_class import (
    enharmonic_note,
    format_note,
    interval_between,
    is_note,
    parse_note,
    transpose_note,
)

logger = logging.getLogger(__name__)

# Quality spellings normalised before and after pychord parsing
QUALITY_ALIASES: dict[str, str] = {
    "M": "",
    "maj": "",
    "Maj": "",
    "major": "",
    "Major": "",
    "min": "m",
    "-": "m",
    "+": "aug",
    "M7": "maj7",
    "Maj7": "maj7",
    "min7": "m7",
    "-7": "m7",
    "m7-5": "m7b5",
    "mM7": "mmaj7",
    "M9": "maj9",
    "Maj9": "maj9",
    "sus": "sus4",
    "7+5": "aug7",
    "7#5": "aug7",
    "+7": "aug7",
}

# Table qualities pychord only knows under another name
PYCHORD_SPELLINGS: dict[str, str] = {
    "aug7": "7+5",
}

# Quality marks written after a roman numeral ("vii°", "viiø7")
NUMERAL_SUFFIX_ALIASES: dict[str, str] = {
    "°": "dim",
    "o": "dim",
    "°7": "dim7",
    "o7": "dim7",
    "ø": "m7b5",
    "ø7": "m7b5",
}

# Quality (pychord notation) to intervals from the root
QUALITY_TO_INTERVALS: dict[str, tuple[str, ...]] = {
    # Triads
    "": ("1P", "3M", "5P"),
    "m": ("1P", "3m", "5P"),
    "dim": ("1P", "3m", "5d"),
    "aug": ("1P", "3M", "5A"),
    # Suspended
    "sus2": ("1P", "2M", "5P"),
    "sus4": ("1P", "4P", "5P"),
    # Power chord
    "5": ("1P", "5P"),
    # Sixth chords
    "6": ("1P", "3M", "5P", "6M"),
    "m6": ("1P", "3m", "5P", "6M"),
    # Seventh chords
    "7": ("1P", "3M", "5P", "7m"),
    "maj7": ("1P", "3M", "5P", "7M"),
    "m7": ("1P", "3m", "5P", "7m"),
    "dim7": ("1P", "3m", "5d", "7d"),
    "m7b5": ("1P", "3m", "5d", "7m"),
    "mmaj7": ("1P", "3m", "5P", "7M"),
    "aug7": ("1P", "3M", "5A", "7m"),
    # Suspended seventh
    "7sus4": ("1P", "4P", "5P", "7m"),
    # Ninth chords
    "9": ("1P", "3M", "5P", "7m", "9M"),
    "maj9": ("1P", "3M", "5P", "7M", "9M"),
    "m9": ("1P", "3m", "5P", "7m", "9M"),
    "add9": ("1P", "3M", "5P", "9M"),
    "madd9": ("1P", "3m", "5P", "9M"),
    # Eleventh chords
    "11": ("1P", "3M", "5P", "7m", "9M", "11P"),
    "m11": ("1P", "3m", "5P", "7m", "9M", "11P"),
    # Thirteenth chords
    "13": ("1P", "3M", "5P", "7m", "9M", "13M"),
    "maj13": ("1P", "3M", "5P", "7M", "9M", "13M"),
}

QUALITY_NAMES: dict[str, str] = {
    "": "Major",
    "m": "Minor",
    "dim": "Diminished",
    "aug": "Augmented",
    "sus2": "Suspended 2nd",
    "sus4": "Suspended 4th",
    "5": "Power Chord",
    "6": "Major 6th",
    "m6": "Minor 6th",
    "7": "Dominant 7th",
    "maj7": "Major 7th",
    "m7": "Minor 7th",
    "dim7": "Diminished 7th",
    "m7b5": "Half Diminished",
    "mmaj7": "Minor Major 7th",
    "aug7": "Augmented 7th",
    "7sus4": "Dominant 7th Suspended 4th",
    "9": "Dominant 9th",
    "maj9": "Major 9th",
    "m9": "Minor 9th",
    "add9": "Add 9",
    "madd9": "Minor Add 9",
    "11": "Dominant 11th",
    "m11": "Minor 11th",
    "13": "Dominant 13th",
    "maj13": "Major 13th",
}

# Used when pychord knows a quality the table above does not
SEMITONE_TO_INTERVAL: dict[int, str] = {
    0: "1P",
    1: "2m",
    2: "2M",
    3: "3m",
    4: "3M",
    5: "4P",
    6: "5d",
    7: "5P",
    8: "5A",
    9: "6M",
    10: "7m",
    11: "7M",
    12: "8P",
    13: "9m",
    14: "9M",
    15: "9A",
    17: "11P",
    18: "11A",
    20: "13m",
    21: "13M",
}

ROMAN_DEGREE_INTERVALS: dict[str, str] = {
    "I": "1P",
    "II": "2M",
    "III": "3M",
    "IV": "4P",
    "V": "5P",
    "VI": "6M",
    "VII": "7M",
}

CHORD_NAME_RE = re.compile(r"^([A-Ga-g][#b]*)([^/]*)(?:/(.+))?$")
ROMAN_RE = re.compile(r"^([#b]*)(VII|VI|V|IV|III|II|I|vii|vi|v|iv|iii|ii|i)(.*)$")


def canonical_symbol(quality: str) -> str:
    """Return the symbol suffix written after the tonic ("" -> "M").

    Examples
    --------
    >>> canonical_symbol("")
    'M'
    >>> canonical_symbol("m7")
    'm7'
    """
    return quality if quality else "M"


def table_quality(quality: str) -> str:
    """Map a quality spelling (ours or pychord's) to its table key.

    Examples
    --------
    >>> table_quality("M7")
    'maj7'
    >>> table_quality("7+5")
    'aug7'
    """
    return QUALITY_ALIASES.get(quality, quality)


def normalize_chord_name(name: str) -> str:
    """Rewrite quality aliases into the spelling pychord expects.

    Examples
    --------
    >>> normalize_chord_name("CM/E")
    'C/E'
    >>> normalize_chord_name("FMaj7")
    'Fmaj7'
    >>> normalize_chord_name("Caug7")
    'C7+5'
    """
    match = CHORD_NAME_RE.match(name)
    if match is None:
        return name
    root, quality, bass = match.groups()
    quality = table_quality(quality)
    result = root[0].upper() + root[1:] + PYCHORD_SPELLINGS.get(quality, quality)
    if bass:
        result = f"{result}/{bass}"
    return result


class TheoryBackend(Protocol):
    """Capabilities the chord logic needs from a music-theory library."""

    def resolve_chord(self, name: str) -> ChordInfo: ...

    def is_note(self, note: str) -> bool: ...

    def to_midi(self, note: str) -> int | None: ...

    def transpose(self, note: str, interval: str) -> str: ...

    def distance(self, from_note: str, to_note: str) -> str: ...

    def enharmonic(self, note: str) -> str: ...

    def detect_chords(self, notes: list[str]) -> list[str]: ...

    def expand_roman_numerals(self, key: str, numerals: list[str]) -> list[str]: ...


class PychordBackend:
    """Theory backend built on pychord and ``chord_lab.pitch_class``.

    The backend holds no state; one instance can be shared freely.

    Examples
    --------
    >>> backend = PychordBackend()
    >>> backend.resolve_chord("Abmaj7").intervals
    ('1P', '3M', '5P', '7M')
    >>> backend.detect_chords(["C", "E", "G"])
    ['CM']
    """

    def resolve_chord(self, name: str) -> ChordInfo:
        """Resolve a chord name into root, symbol, intervals and notes."""
        from pychord import Chord as PyChord

        if not name or not name.strip():
            return ChordInfo.empty_chord()

        try:
            pc = PyChord(normalize_chord_name(name.strip()))
        except Exception:  # pychord raises a mix of error types on bad input
            logger.debug("Unparseable chord name: %r", name)
            return ChordInfo.empty_chord()

        quality = table_quality(str(pc.quality))
        intervals = QUALITY_TO_INTERVALS.get(quality) or _intervals_from_components(pc)
        root = pc.root
        bass = pc.on or None

        symbol = f"{root}{canonical_symbol(quality)}"
        if bass:
            symbol = f"{symbol}/{bass}"

        return ChordInfo(
            empty=False,
            name=QUALITY_NAMES.get(quality, ""),
            tonic=root,
            symbol=symbol,
            quality=quality,
            bass=bass,
            intervals=tuple(intervals),
            notes=tuple(transpose_note(root, interval) for interval in intervals),
        )

    def is_note(self, note: str) -> bool:
        return is_note(note)

    def to_midi(self, note: str) -> int | None:
        if not is_note(note):
            return None
        return parse_note(note).midi

    def transpose(self, note: str, interval: str) -> str:
        """Transpose a note; "" if the note is invalid.

        Raises
        ------
        ValueError
            If the interval is malformed.
        """
        if not is_note(note):
            return ""
        return transpose_note(note, interval)

    def distance(self, from_note: str, to_note: str) -> str:
        if not is_note(from_note) or not is_note(to_note):
            return ""
        return interval_between(from_note, to_note)

    def enharmonic(self, note: str) -> str:
        if not is_note(note):
            return ""
        return enharmonic_note(note)

    def detect_chords(self, notes: list[str]) -> list[str]:
        """Name the chords pychord finds in a note set.

        The first note is the bass and the rest are stacked upwards in the
        order given. When that stacking matches nothing, the same notes are
        tried again in close position above the bass. A candidate rooted on
        the bass comes first; other roots follow as slash chords over it.
        """
        from pychord import find_chords_from_notes

        pitch_classes = [parse_note(note).pitch_class for note in notes if is_note(note)]
        if not pitch_classes:
            return []

        for stacking in (pitch_classes, _close_position(pitch_classes)):
            try:
                chords = find_chords_from_notes(stacking)
            except ValueError:
                logger.debug("pychord rejected notes: %s", stacking)
                return []
            if chords:
                return [_detected_name(chord) for chord in chords]
        return []

    def expand_roman_numerals(self, key: str, numerals: list[str]) -> list[str]:
        """Turn roman numerals into chord names in a key.

        Only the degree, its accidentals and any literal chord-type suffix
        are used; the numeral's case does not change the quality
        ("vi" in C gives "A", "ii7" gives "D7").

        Examples
        --------
        >>> PychordBackend().expand_roman_numerals("C", ["I", "vi", "bVII", "V7"])
        ['C', 'A', 'Bb', 'G7']
        """
        if not is_note(key):
            return ["" for _ in numerals]
        tonic = parse_note(key).pitch_class
        return [_expand_numeral(tonic, numeral) for numeral in numerals]


def _expand_numeral(tonic: str, numeral: str) -> str:
    match = ROMAN_RE.match(numeral.strip())
    if match is None:
        return ""
    accidentals, roman, chord_type = match.groups()
    degree = parse_note(transpose_note(tonic, ROMAN_DEGREE_INTERVALS[roman.upper()]))
    shift = accidentals.count("#") - accidentals.count("b")
    root = format_note(degree.letter, degree.alteration + shift)
    chord_type = NUMERAL_SUFFIX_ALIASES.get(chord_type, chord_type)
    return f"{root}{chord_type}"


def _close_position(pitch_classes: list[str]) -> list[str]:
    bass = parse_note(pitch_classes[0]).chroma
    return sorted(pitch_classes, key=lambda pc: (parse_note(pc).chroma - bass) % 12)


def _detected_name(chord) -> str:
    name = f"{chord.root}{canonical_symbol(table_quality(str(chord.quality)))}"
    if chord.on:
        name = f"{name}/{chord.on}"
    return name


def _intervals_from_components(pc) -> tuple[str, ...]:
    try:
        semitones = pc.quality.get_components(root="C", visible=False)
    except (AttributeError, TypeError, ValueError):
        return ()
    return tuple(SEMITONE_TO_INTERVAL[s] for s in semitones if s in SEMITONE_TO_INTERVAL)


_DEFAULT_BACKEND = PychordBackend()


def default_backend() -> TheoryBackend:
    """Return the shared stateless backend."""
    return _DEFAULT_BACKEND
