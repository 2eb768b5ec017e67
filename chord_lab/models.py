"""Chord data models for chord-lab.

This module provides the records produced and consumed by the voicing,
detection and resolution functions. All of them are immutable and freshly
derived on every call.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ChordData:
    """A chord ready for display and playback.

    Parameters
    ----------
    root : str
        The root pitch class (e.g., "C", "F#", "Bb").
    symbol : str
        The sanitized quality symbol (e.g., "", "m7", "sus4", "/E").
    notes : tuple[str, ...]
        Octave-qualified notes (e.g., ("C4", "E4", "G4")).
    intervals : tuple[str, ...]
        Intervals from the root (e.g., ("1P", "3M", "5P")).
    name : str | None
        Descriptive name (e.g., "major seventh").

    Examples
    --------
    >>> chord = ChordData(root="G", symbol="m7", notes=("G4",), intervals=("1P",))
    >>> chord.label
    'Gm7'
    """

    root: str
    symbol: str
    notes: tuple[str, ...]
    intervals: tuple[str, ...]
    name: str | None = None

    @property
    def label(self) -> str:
        """Return the display label (root followed by symbol)."""
        return f"{self.root}{self.symbol}"

    def to_dict(self) -> dict:
        """Convert to a JSON-serialisable dictionary."""
        data = asdict(self)
        data["notes"] = list(self.notes)
        data["intervals"] = list(self.intervals)
        return data

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class FeaturedChord:
    """A curated showcase chord.

    When ``custom_notes`` is non-empty it is the authoritative voicing:
    intervals are recomputed from it and nothing is re-sorted.
    """

    id: str
    display_name: str
    root: str
    symbol: str
    description: str = ""
    tags: tuple[str, ...] = ()
    custom_notes: tuple[str, ...] = ()


@dataclass(frozen=True)
class ChordInfo:
    """A chord as resolved by the theory backend.

    ``symbol`` carries the tonic (e.g., "Cmaj7", "CM/E"), ``quality`` is the
    bare quality key (e.g., "maj7", ""). An unparseable name resolves to
    ``ChordInfo.empty_chord()``.
    """

    empty: bool
    name: str = ""
    tonic: str = ""
    symbol: str = ""
    quality: str = ""
    bass: str | None = None
    intervals: tuple[str, ...] = ()
    notes: tuple[str, ...] = ()

    @classmethod
    def empty_chord(cls) -> ChordInfo:
        """Return the sentinel for an unknown chord."""
        return cls(empty=True)


@dataclass(frozen=True)
class ParsedChord:
    """A chord name split into a supported root and a sanitized symbol."""

    root: str
    symbol: str
