import sys

from chord_lab import build_chord_data, detect, get_progression_voicings, realize, resolve

# Build a chord for display
chord = build_chord_data("F#", "m7")
sys.stdout.write(f"{chord.label}: {' '.join(chord.notes)}\n")  # "F#m7: F#4 A4 C#5 E5"

# Detect chords from notes
for candidate in detect("E3 G3 C4"):
    sys.stdout.write(f"{candidate.label} ({candidate.name})\n")  # "C/E (Major)"

# Where might it go next?
sys.stdout.write(" ".join(resolve("G", "7")) + "\n")  # "C Cm"

# Realize and voice a progression
chords = realize("A", ["i", "bVII", "bVI", "V"])
for name, notes in zip(chords, get_progression_voicings(chords)):
    sys.stdout.write(f"{name:<4} {' '.join(notes)}\n")
