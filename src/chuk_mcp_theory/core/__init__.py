"""
Core theory primitives.

These are the building blocks everything else calls into:
- WhiteNote: The 7 letter names and their uneven semitone positions
- PitchClass: A spelled pitch (letter + accidental), 21 spellings on 12 pitches
- Interval: Quality + diatonic number, sized in semitones
- ChordQuality: Interval stacks defining chord types
- Chord: Concrete chord with root and quality
- ScaleType: Intervals of each degree above the root
- Scale: Root + scale type

Entry points for callers that work with text:
- parse_note, parse_chord, parse_scale return None for unparseable input
- chord_notes, scale_notes return spelled note names
- find_matching_chords finds every chord containing a set of notes
"""

from chuk_mcp_theory.core.chord import (
    Chord,
    ChordQuality,
    chord_notes,
    find_matching_chords,
    parse_chord,
    sort_chords,
)
from chuk_mcp_theory.core.interval import Interval, IntervalQuality
from chuk_mcp_theory.core.pitch import (
    Accidental,
    PitchClass,
    SpellingError,
    WhiteNote,
    parse_note,
)
from chuk_mcp_theory.core.scale import Scale, ScaleType, parse_scale, scale_notes

__all__ = [
    # Pitch
    "WhiteNote",
    "Accidental",
    "PitchClass",
    "SpellingError",
    "parse_note",
    # Interval
    "IntervalQuality",
    "Interval",
    # Chord
    "ChordQuality",
    "Chord",
    "parse_chord",
    "chord_notes",
    "find_matching_chords",
    "sort_chords",
    # Scale
    "ScaleType",
    "Scale",
    "parse_scale",
    "scale_notes",
]
