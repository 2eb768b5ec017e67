"""Roman-numeral progression realization.

The backend expands numerals by degree only, so a lowercase numeral can
come back as a major chord. ``realize`` rewrites those to minor.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chord_lab.catalogue import ProgressionDefinition
from chord_lab.symbols import strip_root_prefix
from chord_lab.theory import TheoryBackend, default_backend

logger = logging.getLogger(__name__)

# Major-quality suffixes and their minor counterparts
MINOR_REWRITES: dict[str, str] = {
    "": "m",
    "M": "m",
    "7": "m7",
    "maj7": "m7",
}


def is_lowercase_numeral(numeral: str) -> bool:
    """Check whether a roman numeral denotes minor by its case.

    Examples
    --------
    >>> is_lowercase_numeral("bvii")
    True
    >>> is_lowercase_numeral("bVII")
    False
    """
    body = numeral.strip().lstrip("b#")
    return bool(body) and body[0].islower()


def realize(key: str, numerals: Sequence[str], backend: TheoryBackend | None = None) -> list[str]:
    """Expand roman numerals in a key into chord names.

    Parameters
    ----------
    key : str
        Key tonic (e.g., "C", "A").
    numerals : Sequence[str]
        Roman numerals (e.g., ["ii7", "V7", "Imaj7"]).
    backend : TheoryBackend | None
        Theory backend, or None for the default.

    Returns
    -------
    list[str]
        One chord name per numeral; "" where a numeral is not understood.

    Examples
    --------
    >>> realize("C", ["I", "vi", "IV", "V"])
    ['C', 'Am', 'F', 'G']
    >>> realize("C", ["ii7", "V7", "Imaj7"])
    ['Dm7', 'G7', 'Cmaj7']
    """
    backend = backend or default_backend()
    chords = backend.expand_roman_numerals(key, list(numerals))
    return [
        _as_minor(chord, backend) if is_lowercase_numeral(numeral) else chord
        for numeral, chord in zip(numerals, chords)
    ]


def realize_progression(
    key: str,
    progression: ProgressionDefinition,
    backend: TheoryBackend | None = None,
) -> list[str]:
    """Realize a catalogue progression in a key."""
    return realize(key, progression.numerals, backend)


def _as_minor(chord: str, backend: TheoryBackend) -> str:
    info = backend.resolve_chord(chord)
    if info.empty or "3M" not in info.intervals:
        return chord

    suffix = strip_root_prefix(chord, info.tonic)
    if suffix is None or suffix not in MINOR_REWRITES:
        return chord

    minor = f"{info.tonic}{MINOR_REWRITES[suffix]}"
    logger.debug("Rewrote %r to %r for a lowercase numeral", chord, minor)
    return minor
