"""Chord detection from free-form note input.

This module turns text such as ``"C E G"`` or ``"E3, G3, B3, D4"`` into
candidate ``ChordData`` records, one per chord name the theory backend
matches against the note set.
"""

from __future__ import annotations

import logging
import re

from chord_lab.constants import LEADING_ROOT_RE
from chord_lab.models import ChordData
from chord_lab.symbols import clean_detected_symbol
from chord_lab.theory import TheoryBackend, default_backend
from chord_lab.voicing import standard_voicing

logger = logging.getLogger(__name__)

OCTAVE_RE = re.compile(r"\d")


def tokenize_notes(text: str) -> list[str]:
    """Split note input on commas and whitespace.

    Examples
    --------
    >>> tokenize_notes("C, E  G,")
    ['C', 'E', 'G']
    """
    return [token for token in text.replace(",", " ").split() if token]


def sort_by_pitch(tokens: list[str], backend: TheoryBackend | None = None) -> list[str]:
    """Order notes with an octave by MIDI number.

    Tokens without a resolvable pitch keep their positions; only the
    pitched tokens are reordered among the slots they occupy.

    Examples
    --------
    >>> sort_by_pitch(["G4", "C4", "E4"])
    ['C4', 'E4', 'G4']
    >>> sort_by_pitch(["G4", "D", "C4"])
    ['C4', 'D', 'G4']
    """
    backend = backend or default_backend()
    midis = [backend.to_midi(token) for token in tokens]
    slots = [i for i, midi in enumerate(midis) if midi is not None]
    pitched = sorted((tokens[i] for i in slots), key=backend.to_midi)

    result = list(tokens)
    for slot, token in zip(slots, pitched):
        result[slot] = token
    return result


def detect(text: str | None, backend: TheoryBackend | None = None) -> list[ChordData]:
    """Detect candidate chords from free-form note input.

    Parameters
    ----------
    text : str | None
        Note names separated by spaces and/or commas, with or without
        octaves (e.g., "C E G", "C4, E4, G4").
    backend : TheoryBackend | None
        Theory backend, or None for the default.

    Returns
    -------
    list[ChordData]
        Candidates in the order the backend produced them; empty when no
        valid note was given or nothing matched.

    Examples
    --------
    >>> [c.label for c in detect("C E G")]
    ['C']
    >>> detect("C4 E4 G4")[0].notes
    ('C4', 'E4', 'G4')
    >>> detect("hello")
    []
    """
    backend = backend or default_backend()

    tokens = tokenize_notes(text or "")
    valid = [token for token in tokens if backend.is_note(token)]
    if len(valid) != len(tokens):
        logger.debug("Discarded invalid note tokens: %s", [t for t in tokens if t not in valid])
    if not valid:
        return []

    ordered = sort_by_pitch(valid, backend)
    candidates = backend.detect_chords(ordered)
    if not candidates:
        return []

    keep_voicing = any(OCTAVE_RE.search(token) for token in ordered)
    return [_candidate_data(candidate, ordered, keep_voicing, backend) for candidate in candidates]


def _candidate_data(
    candidate: str,
    ordered: list[str],
    keep_voicing: bool,
    backend: TheoryBackend,
) -> ChordData:
    info = backend.resolve_chord(candidate)

    root = info.tonic
    if not root:
        match = LEADING_ROOT_RE.match(candidate)
        root = match.group(0) if match else ""

    symbol = clean_detected_symbol(candidate, root, info.symbol)
    intervals = info.intervals if info.intervals else ()
    notes = tuple(ordered) if keep_voicing else tuple(standard_voicing(root, intervals, backend))

    return ChordData(
        root=root,
        symbol=symbol,
        notes=notes,
        intervals=intervals,
        name=info.name or candidate,
    )
