"""Build display and playback records for chords.

This module combines the theory backend, the symbol sanitizer and a
voicing strategy into ``ChordData`` records, and provides the playback
helpers that only need note lists.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chord_lab.catalogue import ROOT_NOTES
from chord_lab.models import ChordData, FeaturedChord, ParsedChord
from chord_lab.pitch_class import strip_octave
from chord_lab.symbols import sanitize_symbol
from chord_lab.theory import TheoryBackend, default_backend
from chord_lab.voicing import VoicingStrategy, voice

logger = logging.getLogger(__name__)


def build_chord_data(
    root: str,
    symbol: str,
    *,
    strategy: VoicingStrategy | str = VoicingStrategy.STANDARD,
    backend: TheoryBackend | None = None,
) -> ChordData | None:
    """Build the chord record for a root and quality symbol.

    Parameters
    ----------
    root : str
        Root pitch class (e.g., "C", "F#").
    symbol : str
        Quality symbol (e.g., "", "m7", "sus4", "M").
    strategy : VoicingStrategy | str
        Voicing used for ``notes``. Defaults to closed voicing.
    backend : TheoryBackend | None
        Theory backend, or None for the default.

    Returns
    -------
    ChordData | None
        The chord, or None when the backend cannot resolve it.

    Examples
    --------
    >>> chord = build_chord_data("C", "maj7")
    >>> chord.notes
    ('C4', 'E4', 'G4', 'B4')
    >>> build_chord_data("C", "M").symbol
    ''
    """
    backend = backend or default_backend()
    info = backend.resolve_chord(f"{root}{symbol or ''}")
    if info.empty:
        logger.debug("No chord for root=%r symbol=%r", root, symbol)
        return None

    tonic = info.tonic or root
    return ChordData(
        root=tonic,
        symbol=sanitize_symbol(info.symbol, tonic),
        notes=tuple(voice(tonic, info.intervals, strategy, backend)),
        intervals=info.intervals,
        name=info.name or None,
    )


def build_featured_chord_data(
    featured: FeaturedChord,
    *,
    strategy: VoicingStrategy | str = VoicingStrategy.SPREAD,
    backend: TheoryBackend | None = None,
) -> ChordData | None:
    """Build the chord record for a showcase chord.

    Custom notes, when present, are used verbatim and the intervals are
    recomputed from them; the symbol and display name are kept as given.
    Otherwise the chord is resolved normally with a spread voicing.
    """
    backend = backend or default_backend()
    if featured.custom_notes:
        intervals = tuple(
            backend.distance(featured.root, strip_octave(note)) for note in featured.custom_notes
        )
        return ChordData(
            root=featured.root,
            symbol=featured.symbol,
            notes=tuple(featured.custom_notes),
            intervals=intervals,
            name=featured.display_name,
        )

    return build_chord_data(featured.root, featured.symbol, strategy=strategy, backend=backend)


def get_voicing(
    chord_name: str,
    *,
    strategy: VoicingStrategy | str = VoicingStrategy.NATURAL,
    backend: TheoryBackend | None = None,
) -> list[str]:
    """Return playable notes for a single chord name, or [] if unknown.

    Examples
    --------
    >>> get_voicing("Am")
    ['A2', 'A3', 'C4', 'E4']
    """
    backend = backend or default_backend()
    info = backend.resolve_chord(chord_name)
    if info.empty:
        return []
    return voice(info.tonic, info.intervals, strategy, backend)


def get_progression_voicings(
    chord_names: Sequence[str],
    *,
    strategy: VoicingStrategy | str = VoicingStrategy.SPREAD,
    backend: TheoryBackend | None = None,
) -> list[list[str]]:
    """Return one note list per chord name; unknown chords give []."""
    return [get_voicing(name, strategy=strategy, backend=backend) for name in chord_names]


def parse_chord_name(
    chord_name: str,
    roots: Sequence[str] = ROOT_NOTES,
    *,
    backend: TheoryBackend | None = None,
) -> ParsedChord | None:
    """Split a chord name into a supported root and a sanitized symbol.

    The root is matched against ``roots`` directly, then through its
    enharmonic spelling; if neither is supported the backend's root is
    returned as is.

    Examples
    --------
    >>> parse_chord_name("G7")
    ParsedChord(root='G', symbol='7')
    >>> parse_chord_name("Gbm")
    ParsedChord(root='F#', symbol='m')
    """
    backend = backend or default_backend()
    info = backend.resolve_chord(chord_name)
    if info.empty:
        return None

    root = info.tonic
    symbol = sanitize_symbol(info.symbol, root)

    if root in roots:
        return ParsedChord(root=root, symbol=symbol)

    enharmonic = backend.enharmonic(root)
    if enharmonic in roots:
        return ParsedChord(root=enharmonic, symbol=symbol)

    return ParsedChord(root=root, symbol=symbol)
