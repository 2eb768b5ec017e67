"""Chord symbol cleanup for display.

Two rule sets live here. ``sanitize_symbol`` produces the minimal quality
string shown next to a known root. ``clean_detected_symbol`` is the
detector's own cleanup of a detected chord name; it blanks a narrower set
of major spellings and is kept separate on purpose.
"""

from __future__ import annotations

from chord_lab.constants import (
    ACCIDENTALS,
    DETECTED_MAJOR_ALIASES,
    DETECTED_MAJOR_SLASH_RE,
    MAJOR_ALIASES,
)


def _has_accidental(root: str) -> bool:
    return any(c in root for c in ACCIDENTALS)


def strip_root_prefix(symbol: str, root: str) -> str | None:
    """Strip ``root`` from the start of ``symbol``.

    Returns None when ``symbol`` does not start with ``root``, or when the
    root has no accidental and the next character is one: "A" is not a
    prefix of the pitch class "Ab".

    Examples
    --------
    >>> strip_root_prefix("Gsus4", "G")
    'sus4'
    >>> strip_root_prefix("Abmaj7", "A") is None
    True
    >>> strip_root_prefix("Abmaj7", "Ab")
    'maj7'
    """
    if not root or not symbol.startswith(root):
        return None
    rest = symbol[len(root) :]
    if not _has_accidental(root) and rest[:1] in ("#", "b"):
        return None
    return rest


def sanitize_symbol(raw_symbol: str | None, root: str | None) -> str:
    """Reduce a raw chord symbol to its minimal display form.

    Parameters
    ----------
    raw_symbol : str | None
        The symbol as produced by the theory backend (e.g., "Gsus4", "CM").
    root : str | None
        The chord root.

    Returns
    -------
    str
        The cleaned symbol: "" for a plain major triad, "/E" for a major
        slash chord, otherwise the quality with the root removed.

    Examples
    --------
    >>> sanitize_symbol("Gsus4", "G")
    'sus4'
    >>> sanitize_symbol("CM", "C")
    ''
    >>> sanitize_symbol("CM/E", "C")
    '/E'
    >>> sanitize_symbol("Abmaj7", "A")
    'Abmaj7'
    """
    symbol = raw_symbol or ""

    # Repeat so that a second pass never finds another prefix to strip
    stripped = strip_root_prefix(symbol, root or "")
    while stripped is not None:
        symbol = stripped
        stripped = strip_root_prefix(symbol, root or "")

    if symbol in MAJOR_ALIASES:
        return ""

    if "/" in symbol:
        quality, _, bass = symbol.partition("/")
        if quality in MAJOR_ALIASES:
            return f"/{bass}"

    return symbol


def clean_detected_symbol(candidate: str, root: str, fallback: str) -> str:
    """Derive the display symbol for a detected chord name.

    Parameters
    ----------
    candidate : str
        The full detected chord name (e.g., "Am/E", "CM").
    root : str
        The resolved root of the candidate.
    fallback : str
        Symbol to use when the root is not a literal prefix of the name.

    Examples
    --------
    >>> clean_detected_symbol("CM", "C", "CM")
    ''
    >>> clean_detected_symbol("CM/E", "C", "CM/E")
    '/E'
    >>> clean_detected_symbol("Am/C", "A", "Am/C")
    'm/C'
    """
    stripped = strip_root_prefix(candidate, root)
    symbol = stripped if stripped is not None else (fallback or "")

    if symbol in DETECTED_MAJOR_ALIASES:
        return ""
    return DETECTED_MAJOR_SLASH_RE.sub("", symbol)
