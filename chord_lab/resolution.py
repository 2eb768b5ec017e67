"""Harmonic resolution suggestions.

A fixed table of tonal-function rules proposes where a chord is likely to
move next. Rules are tried top to bottom and the first match wins, so the
specific cases (suspended, dominant, half-diminished) must stay ahead of
the general minor and major families.
"""

from __future__ import annotations

import logging
import re

from chord_lab.constants import OCTAVE_DIGITS_RE
from chord_lab.theory import TheoryBackend, default_backend

logger = logging.getLogger(__name__)

DOMINANT_RE = re.compile(r"^(7|9|11|13)")


def _is_dominant(quality: str) -> bool:
    return (
        DOMINANT_RE.match(quality) is not None
        and "maj" not in quality
        and "min" not in quality
        and "m" not in quality
    )


def resolve(root: str | None, symbol: str | None, backend: TheoryBackend | None = None) -> list[str]:
    """Suggest chords that ``root`` + ``symbol`` may resolve to.

    Parameters
    ----------
    root : str | None
        Chord root; an octave, if present, is ignored.
    symbol : str | None
        Sanitized chord symbol; anything after "/" is ignored.
    backend : TheoryBackend | None
        Theory backend, or None for the default.

    Returns
    -------
    list[str]
        Up to three chord names, or [] for an empty root or when a
        transposition fails.

    Examples
    --------
    >>> resolve("G", "7")
    ['C', 'Cm']
    >>> resolve("G", "m7b5")
    ['C7']
    >>> resolve("C", "")
    ['F', 'G', 'Am']
    """
    if not root:
        return []
    backend = backend or default_backend()

    r = OCTAVE_DIGITS_RE.sub("", root)
    s = symbol.split("/")[0] if symbol else ""

    try:
        return _apply_rules(r, s, backend)
    except ValueError as exc:
        logger.warning("Could not compute resolutions for %r %r: %s", root, symbol, exc)
        return []


def _apply_rules(r: str, s: str, backend: TheoryBackend) -> list[str]:
    # Suspended: fall onto the major or minor third
    if "sus" in s:
        return [r, f"{r}m"]

    # Dominant: V7 -> I
    if _is_dominant(s):
        target = backend.transpose(r, "4P")
        return [target, f"{target}m"] if target else []

    # Half-diminished: ii -> V7
    if s == "m7b5":
        target = backend.transpose(r, "4P")
        return [f"{target}7"] if target else []

    # Minor: relative major, iv, V
    if s.startswith("m") and "maj" not in s:
        result = []
        relative_major = backend.transpose(r, "3m")
        if relative_major:
            result.append(relative_major)
        subdominant = backend.transpose(r, "4P")
        if subdominant:
            result.append(f"{subdominant}m")
        dominant = backend.transpose(r, "5P")
        if dominant:
            result.append(dominant)
        return result

    # Diminished: leading tone up a semitone
    if "dim" in s:
        target = backend.transpose(r, "2m")
        return [target, f"{target}m"] if target else []

    # Augmented: V+ -> I
    if "aug" in s:
        target = backend.transpose(r, "4P")
        return [target] if target else []

    # Major family: IV, V, vi
    result = []
    subdominant = backend.transpose(r, "4P")
    if subdominant:
        result.append(subdominant)
    dominant = backend.transpose(r, "5P")
    if dominant:
        result.append(dominant)
    submediant = backend.transpose(r, "6M")
    if submediant:
        result.append(f"{submediant}m")
    return result
