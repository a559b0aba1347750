"""
Chord primitives - ChordQuality, Chord, reverse chord lookup.

Chords are stacks of intervals above a root. Every chord tone is spelled with
PitchClass.up_interval, so D major comes out as D F# A rather than D Gb A.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .interval import Interval
from .pitch import Accidental, PitchClass, SpellingError

logger = logging.getLogger(__name__)

# Root, then the longest quality suffix; maj7 must be tried before m7 and m
_CHORD_PATTERN = re.compile(r"([A-G][#b]?)(maj7|m7|7|m)?")


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals above the root.

    Intervals are measured from the root, not stacked, and kept in ascending
    order. The root itself is implied.
    For example, a major triad is root + M3 + P5.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str
    symbol: str  # Suffix after the root: "", "m", "7", "maj7", "m7"

    # Supported chord qualities (defined after class)
    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """
        Get all pitch classes of this quality built on a root.

        Args:
            root: The root pitch class

        Returns:
            Root first, then one spelled pitch per interval
        """
        return [root] + [root.up_interval(interval) for interval in self.intervals]

    @classmethod
    def all(cls) -> list[ChordQuality]:
        """All supported qualities."""
        return [cls.MAJOR, cls.MINOR, cls.DOMINANT_7, cls.MAJOR_7, cls.MINOR_7]

    @classmethod
    def from_symbol(cls, symbol: str) -> ChordQuality | None:
        """Look up a quality by its chord-symbol suffix."""
        for quality in cls.all():
            if quality.symbol == symbol:
                return quality
        return None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ChordQuality.{self.name.upper().replace(' ', '_')}"


# Define chord qualities
ChordQuality.MAJOR = ChordQuality((Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH), "major", "")
ChordQuality.MINOR = ChordQuality((Interval.MINOR_THIRD, Interval.PERFECT_FIFTH), "minor", "m")
ChordQuality.DOMINANT_7 = ChordQuality(
    (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH),
    "dominant 7",
    "7",
)
ChordQuality.MAJOR_7 = ChordQuality(
    (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.MAJOR_SEVENTH),
    "major 7",
    "maj7",
)
ChordQuality.MINOR_7 = ChordQuality(
    (Interval.MINOR_THIRD, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH),
    "minor 7",
    "m7",
)


@dataclass(frozen=True, eq=False)
class Chord:
    """
    A concrete chord with a root pitch and quality.

    Chords compare by the root's spelling, not its sound: C#m and Dbm are
    different chords even though their roots are equal pitch classes.
    """

    root: PitchClass
    quality: ChordQuality

    @property
    def key(self) -> tuple[str, ChordQuality]:
        """Identity used for equality and hashing."""
        return (self.root.name, self.quality)

    @property
    def name(self) -> str:
        """The literal chord symbol, e.g. 'Fbmaj7' (str() would give 'Emaj7')."""
        return f"{self.root.name}{self.quality.symbol}"

    def get_notes(self) -> list[PitchClass]:
        """Get the chord tones, root first, ascending by interval."""
        return self.quality.get_pitches(self.root)

    def contains(self, notes: Iterable[PitchClass]) -> bool:
        """True if every given note sounds in this chord."""
        chord_notes = self.get_notes()
        return all(note in chord_notes for note in notes)

    @classmethod
    def parse(cls, text: str) -> Chord | None:
        """
        Parse a chord symbol like 'C', 'F#m', 'Bb7', 'Cmaj7', 'Ebm7'.

        Anything after the root that is not a known suffix is ignored and the
        chord is read as major, so 'Cx' parses as C major.

        Returns None if the text does not start with a note name.
        """
        match = _CHORD_PATTERN.match(text.strip())
        if match is None:
            return None
        root = PitchClass.parse(match.group(1))
        if root is None:
            return None
        quality = ChordQuality.from_symbol(match.group(2) or "")
        return cls(root, quality or ChordQuality.MAJOR)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chord):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.root.spell()}{self.quality.symbol}"

    def __repr__(self) -> str:
        return f"Chord({self.root.name}, {self.quality!r})"


def parse_chord(text: str) -> Chord | None:
    """Parse a chord symbol; None if it does not start with a note name."""
    return Chord.parse(text)


def chord_notes(chord: Chord) -> list[str]:
    """Spelled note names of a chord, root first."""
    return [note.spell() for note in chord.get_notes()]


def find_matching_chords(notes: Iterable[PitchClass]) -> set[Chord]:
    """
    Find every chord that contains all of the given notes.

    Brute force over all 21 spellable roots and every quality. The chord may
    have more notes than were given. Roots are not deduplicated by sound, so
    C#m7 and Dbm7 can both match.

    Candidates whose tones would need a double accidental (D# major needs F##)
    cannot be built and are skipped.

    Args:
        notes: The notes to match, in any order

    Returns:
        Set of matching chords
    """
    wanted = list(notes)
    matches: set[Chord] = set()
    for root in PitchClass.all():
        for quality in ChordQuality.all():
            chord = Chord(root, quality)
            try:
                if chord.contains(wanted):
                    matches.add(chord)
            except SpellingError as e:
                logger.debug(f"Skipping {chord!r}: {e}")
    return matches


def sort_chords(chords: Iterable[Chord]) -> list[Chord]:
    """Order chords by root letter, accidental, then quality."""
    qualities = ChordQuality.all()
    accidentals = list(Accidental)
    return sorted(
        chords,
        key=lambda c: (
            c.root.letter,
            accidentals.index(c.root.accidental),
            qualities.index(c.quality),
        ),
    )
