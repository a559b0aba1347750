#!/usr/bin/env python3
"""
Example: Spelling chords and scales.

Prints the major and minor triad on every common root, a few scales, and a
reverse lookup, showing that tones are spelled by letter (D major is D F# A).

Usage:
    python examples/print_chords.py
"""

from chuk_mcp_theory.core import (
    Chord,
    ChordQuality,
    SpellingError,
    chord_notes,
    find_matching_chords,
    parse_note,
    parse_scale,
    scale_notes,
    sort_chords,
)

ROOTS = [
    "C", "C#", "Db", "D", "Eb", "E", "F", "F#",
    "Gb", "G", "Ab", "A", "Bb", "B", "Cb",
]  # fmt: skip


def main() -> None:
    """Demonstrate chord and scale spelling."""
    print("CHUK Theory Demo")
    print("=" * 40)
    print()

    print("Triads:")
    for name in ROOTS:
        root = parse_note(name)
        if root is None:
            continue
        for quality in (ChordQuality.MAJOR, ChordQuality.MINOR):
            chord = Chord(root, quality)
            try:
                print(f"  {name}{quality.symbol}: {', '.join(chord_notes(chord))}")
            except SpellingError:
                print(f"  {name}{quality.symbol}: (needs a double accidental)")
    print()

    print("Scales:")
    for name in ["C major", "A major", "A minor", "Eb major", "F# minor"]:
        scale = parse_scale(name)
        if scale is None:
            continue
        print(f"  {scale}: {' '.join(scale_notes(scale))}")
    print()

    print("Chords containing A, C, E:")
    notes = [parse_note(n) for n in ("A", "C", "E")]
    for chord in sort_chords(find_matching_chords(n for n in notes if n is not None)):
        print(f"  {chord}: {', '.join(chord_notes(chord))}")


if __name__ == "__main__":
    main()
