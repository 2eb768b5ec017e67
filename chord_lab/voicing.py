"""Octave assignment strategies.

Each strategy maps a root pitch class and an interval list to a concrete,
octave-qualified note sequence:

- ``standard_voicing``: closed position from octave 4, sorted ascending.
  Used for static chord display.
- ``spread_voicing``: open shell from octave 3 with the third and the first
  extension lifted an octave. Used for progression playback.
- ``natural_voicing``: a bass note under a block chord, with the register
  chosen from the root. Used for click-to-play.

All three return ``[]`` for an empty or invalid root.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from chord_lab.constants import (
    HIGH_ROOT_BASS_OCTAVE,
    HIGH_ROOT_CHORD_OCTAVE,
    LOW_ROOT_BASS_OCTAVE,
    LOW_ROOT_CHORD_OCTAVE,
    LOW_ROOT_MIN_PC,
    SPREAD_OCTAVE,
    STANDARD_OCTAVE,
)
from chord_lab.pitch_class import interval_number, parse_note, strip_octave
from chord_lab.theory import TheoryBackend, default_backend

VoicingFn = Callable[..., list[str]]


class VoicingStrategy(str, Enum):
    """Available octave assignment strategies."""

    STANDARD = "standard"
    SPREAD = "spread"
    NATURAL = "natural"


def _root_pitch_class(root: str | None, backend: TheoryBackend) -> str | None:
    if not root:
        return None
    pitch_class = strip_octave(root)
    if not backend.is_note(pitch_class):
        return None
    return pitch_class


def _midi(note: str, backend: TheoryBackend) -> int:
    midi = backend.to_midi(note)
    return midi if midi is not None else 0


def _find(intervals: Sequence[str], *numbers: int) -> str | None:
    """Return the first interval whose number matches, trying numbers in order."""
    for number in numbers:
        for interval in intervals:
            if interval_number(interval) == number:
                return interval
    return None


def standard_voicing(
    root: str | None,
    intervals: Sequence[str],
    backend: TheoryBackend | None = None,
) -> list[str]:
    """Closed voicing anchored at octave 4.

    Examples
    --------
    >>> standard_voicing("C", ["1P", "3M", "5P"])
    ['C4', 'E4', 'G4']
    >>> standard_voicing("A", ["1P", "3m", "5P", "7m"])
    ['A4', 'C5', 'E5', 'G5']
    """
    backend = backend or default_backend()
    pitch_class = _root_pitch_class(root, backend)
    if pitch_class is None:
        return []

    anchor = f"{pitch_class}{STANDARD_OCTAVE}"
    notes = [backend.transpose(anchor, interval) for interval in intervals]
    return sorted(notes, key=lambda note: _midi(note, backend))


def spread_voicing(
    root: str | None,
    intervals: Sequence[str],
    backend: TheoryBackend | None = None,
) -> list[str]:
    """Open shell voicing starting from the root at octave 3.

    Root, fifth, seventh (or sixth) stay low; the third (or second/fourth
    for suspended chords) and the first extension above the seventh are
    lifted by an octave.

    Examples
    --------
    >>> spread_voicing("C", ["1P", "3M", "5P", "7M"])
    ['C3', 'G3', 'B3', 'E4']
    >>> spread_voicing("C", ["1P"])
    ['C3']
    """
    backend = backend or default_backend()
    pitch_class = _root_pitch_class(root, backend)
    if pitch_class is None:
        return []

    low_root = f"{pitch_class}{SPREAD_OCTAVE}"
    notes = [low_root]

    fifth = _find(intervals, 5)
    if fifth:
        notes.append(backend.transpose(low_root, fifth))

    seventh = _find(intervals, 7, 6)
    if seventh:
        notes.append(backend.transpose(low_root, seventh))

    third = _find(intervals, 3, 2, 4)
    if third:
        notes.append(backend.transpose(backend.transpose(low_root, third), "8P"))

    extension = next((i for i in intervals if interval_number(i) > 7), None)
    if extension:
        notes.append(backend.transpose(backend.transpose(low_root, extension), "8P"))

    return sorted(notes, key=lambda note: _midi(note, backend))


def natural_voicing(
    root: str | None,
    intervals: Sequence[str],
    backend: TheoryBackend | None = None,
) -> list[str]:
    """Bass note plus a block chord, registered by the root.

    Roots from E to B take the bass in octave 2 and the chord in octave 3;
    C to D#/Eb take octaves 3 and 4. A major-seventh chord gets a fixed
    five-note stack with the third on top; other chords are the bass
    followed by every interval from the chord root, unsorted.

    Examples
    --------
    >>> natural_voicing("C", ["1P", "3M", "5P", "7M"])
    ['C3', 'C4', 'G4', 'B4', 'E5']
    >>> natural_voicing("A", ["1P", "3m", "5P"])
    ['A2', 'A3', 'C4', 'E4']
    """
    backend = backend or default_backend()
    pitch_class = _root_pitch_class(root, backend)
    if pitch_class is None:
        return []

    if parse_note(pitch_class).chroma >= LOW_ROOT_MIN_PC:
        bass_octave, chord_octave = LOW_ROOT_BASS_OCTAVE, LOW_ROOT_CHORD_OCTAVE
    else:
        bass_octave, chord_octave = HIGH_ROOT_BASS_OCTAVE, HIGH_ROOT_CHORD_OCTAVE

    bass = f"{pitch_class}{bass_octave}"
    chord_root = f"{pitch_class}{chord_octave}"

    if "3M" in intervals and "7M" in intervals:
        fifth = _find(intervals, 5) or "5P"
        return [
            bass,
            chord_root,
            backend.transpose(chord_root, fifth),
            backend.transpose(chord_root, "7M"),
            backend.transpose(chord_root, "10M"),
        ]

    return [bass] + [backend.transpose(chord_root, interval) for interval in intervals]


VOICINGS: dict[VoicingStrategy, VoicingFn] = {
    VoicingStrategy.STANDARD: standard_voicing,
    VoicingStrategy.SPREAD: spread_voicing,
    VoicingStrategy.NATURAL: natural_voicing,
}


def voice(
    root: str | None,
    intervals: Sequence[str],
    strategy: VoicingStrategy | str = VoicingStrategy.STANDARD,
    backend: TheoryBackend | None = None,
) -> list[str]:
    """Apply the named voicing strategy.

    Raises
    ------
    ValueError
        If the strategy name is unknown.
    """
    return VOICINGS[VoicingStrategy(strategy)](root, intervals, backend)
