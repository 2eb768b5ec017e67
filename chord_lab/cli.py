"""Command-line interface for chord-lab."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from chord_lab.builder import build_chord_data, build_featured_chord_data, get_voicing
from chord_lab.catalogue import CHORD_TYPES, FEATURED_CHORDS, PROGRESSIONS, find_progression
from chord_lab.detector import detect
from chord_lab.models import ChordData
from chord_lab.progression import realize
from chord_lab.resolution import resolve
from chord_lab.voicing import VoicingStrategy


def _print_chord(chord: ChordData) -> None:
    print(f"{chord.label}  ({chord.name or '?'})")
    print(f"  notes:     {' '.join(chord.notes)}")
    print(f"  intervals: {' '.join(chord.intervals)}")


def _emit(args: argparse.Namespace, payload: object, text_fn) -> None:
    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        text_fn()


def cmd_chord(args: argparse.Namespace) -> int:
    chord = build_chord_data(args.root, args.symbol, strategy=args.strategy)
    if chord is None:
        print(f"Unknown chord: {args.root}{args.symbol}", file=sys.stderr)
        return 1
    _emit(args, chord.to_dict(), lambda: _print_chord(chord))
    return 0


def cmd_detect(args: argparse.Namespace) -> int:
    candidates = detect(" ".join(args.notes))
    if not candidates:
        print("No chord detected", file=sys.stderr)
        return 1

    def text() -> None:
        for chord in candidates:
            _print_chord(chord)

    _emit(args, [c.to_dict() for c in candidates], text)
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    targets = resolve(args.root, args.symbol)
    _emit(args, targets, lambda: print(" ".join(targets)))
    return 0 if targets else 1


def cmd_progression(args: argparse.Namespace) -> int:
    numerals = list(args.numerals)
    if args.name:
        progression = find_progression(args.name)
        if progression is None:
            print(f"Unknown progression: {args.name}", file=sys.stderr)
            return 1
        numerals = list(progression.numerals)
    if not numerals:
        print("No numerals given", file=sys.stderr)
        return 1

    chords = realize(args.key, numerals)
    voicings = [get_voicing(chord, strategy=args.strategy) for chord in chords]
    payload = [
        {"numeral": n, "chord": c, "notes": v} for n, c, v in zip(numerals, chords, voicings)
    ]

    def text() -> None:
        for numeral, chord, notes in zip(numerals, chords, voicings):
            print(f"{numeral:>8}  {chord or '?':<8} {' '.join(notes)}")

    _emit(args, payload, text)
    return 0


def cmd_voicing(args: argparse.Namespace) -> int:
    notes = get_voicing(args.chord, strategy=args.strategy)
    if not notes:
        print(f"Unknown chord: {args.chord}", file=sys.stderr)
        return 1
    _emit(args, notes, lambda: print(" ".join(notes)))
    return 0


def cmd_catalogue(args: argparse.Namespace) -> int:
    payload = {
        "chord_types": [{"symbol": c.symbol, "name": c.name, "category": c.category.value} for c in CHORD_TYPES],
        "progressions": [{"name": p.name, "numerals": list(p.numerals)} for p in PROGRESSIONS],
        "featured": [],
    }
    for featured in FEATURED_CHORDS:
        chord = build_featured_chord_data(featured)
        payload["featured"].append({"id": featured.id, "chord": chord.to_dict() if chord else None})

    def text() -> None:
        for c in CHORD_TYPES:
            print(f"{c.category.value:<10} {c.symbol or '(major)':<8} {c.name}")
        print()
        for p in PROGRESSIONS:
            print(f"{p.name:<20} {' '.join(p.numerals)}")
        print()
        for entry in payload["featured"]:
            chord = entry["chord"]
            notes = " ".join(chord["notes"]) if chord else "?"
            print(f"{entry['id']:<20} {notes}")

    _emit(args, payload, text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chord-lab",
        description="Chord voicing, detection and resolution helper",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    sub = parser.add_subparsers(dest="command", required=True)

    strategies = [s.value for s in VoicingStrategy]

    p = sub.add_parser("chord", help="Build a chord from a root and symbol")
    p.add_argument("root", help="Root note, e.g. C or F#")
    p.add_argument("symbol", nargs="?", default="", help="Quality symbol, e.g. m7")
    p.add_argument("--strategy", choices=strategies, default=VoicingStrategy.STANDARD.value)
    p.set_defaults(func=cmd_chord)

    p = sub.add_parser("detect", help="Detect chords from notes")
    p.add_argument("notes", nargs="+", help="Note names, e.g. C E G or C4 E4 G4")
    p.set_defaults(func=cmd_detect)

    p = sub.add_parser("resolve", help="Suggest resolutions for a chord")
    p.add_argument("root", help="Root note")
    p.add_argument("symbol", nargs="?", default="", help="Sanitized chord symbol")
    p.set_defaults(func=cmd_resolve)

    p = sub.add_parser("progression", help="Realize roman numerals in a key")
    p.add_argument("key", help="Key tonic, e.g. C or A")
    p.add_argument("numerals", nargs="*", help="Roman numerals, e.g. ii7 V7 Imaj7")
    p.add_argument("--name", help="Name of a catalogue progression")
    p.add_argument("--strategy", choices=strategies, default=VoicingStrategy.SPREAD.value)
    p.set_defaults(func=cmd_progression)

    p = sub.add_parser("voicing", help="Playable notes for a chord name")
    p.add_argument("chord", help="Chord name, e.g. Cmaj7")
    p.add_argument("--strategy", choices=strategies, default=VoicingStrategy.NATURAL.value)
    p.set_defaults(func=cmd_voicing)

    p = sub.add_parser("catalogue", help="List chord types, progressions and featured chords")
    p.set_defaults(func=cmd_catalogue)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
