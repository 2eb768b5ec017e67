#!/usr/bin/env python3
"""Generate a catalogue of every supported root x chord type and write it to JSON.

Each entry is the closed-voicing ChordData record the library produces, so
the file can be diffed to spot changes in voicing or symbol cleanup.
"""

from __future__ import annotations

import argparse
import json
import sys
from itertools import product
from pathlib import Path

from chord_lab.builder import build_chord_data
from chord_lab.catalogue import ALL_ROOT_NOTES, CHORD_TYPES, ROOT_NOTES
from chord_lab.voicing import VoicingStrategy


def generate(roots: tuple[str, ...], strategy: VoicingStrategy) -> tuple[list[dict], list[str]]:
    """Build every root x chord type.

    Returns
    -------
    tuple[list[dict], list[str]]
        Catalogue entries, and the chord names that could not be built.
    """
    entries: list[dict] = []
    failed: list[str] = []
    for root, chord_type in product(roots, CHORD_TYPES):
        chord = build_chord_data(root, chord_type.symbol, strategy=strategy)
        if chord is None:
            failed.append(f"{root}{chord_type.symbol}")
            continue
        entry = chord.to_dict()
        entry["category"] = chord_type.category.value
        entries.append(entry)
    return entries, failed


def main() -> None:
    """Run the catalogue generator."""
    parser = argparse.ArgumentParser(description="Generate the chord catalogue JSON")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("testdata/chord_catalogue.json"),
        help="Path of the JSON file to write",
    )
    parser.add_argument(
        "--all-roots",
        action="store_true",
        help="Use all 17 root spellings instead of the 13 supported roots",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in VoicingStrategy],
        default=VoicingStrategy.STANDARD.value,
        help="Voicing strategy for the notes",
    )
    args = parser.parse_args()

    roots = ALL_ROOT_NOTES if args.all_roots else ROOT_NOTES
    entries, failed = generate(roots, VoicingStrategy(args.strategy))

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(json.dumps({"count": len(entries), "chords": entries}, indent=2))
    print(f"Wrote {len(entries)} chords to {args.output}")

    if failed:
        print(f"Could not build {len(failed)} chords: {', '.join(failed)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
