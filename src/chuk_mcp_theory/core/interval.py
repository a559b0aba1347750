"""
Interval primitives - IntervalQuality and Interval.

An interval is a quality plus a diatonic number (1-8). The number says how many
letter names the interval spans; the quality refines its exact size in
semitones. Both are needed to spell the upper note correctly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

# Semitone sizes of the base qualities
_PERFECT_SEMITONES: dict[int, int] = {1: 0, 4: 5, 5: 7, 8: 12}
_MAJOR_SEMITONES: dict[int, int] = {2: 2, 3: 4, 6: 9, 7: 11}


class IntervalQuality(str, Enum):
    """Interval qualities."""

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    AUGMENTED = "A"
    DIMINISHED = "d"


def _semitones(quality: IntervalQuality, number: int) -> int:
    """
    Semitone size of an interval.

    Minor, augmented and diminished are derived from the major and perfect
    tables, so a number added to those tables is picked up everywhere.
    """
    if quality is IntervalQuality.PERFECT:
        if number not in _PERFECT_SEMITONES:
            raise ValueError(f"No perfect interval with number {number}")
        return _PERFECT_SEMITONES[number]
    if quality is IntervalQuality.MAJOR:
        if number not in _MAJOR_SEMITONES:
            raise ValueError(f"No major interval with number {number}")
        return _MAJOR_SEMITONES[number]
    if quality is IntervalQuality.MINOR:
        return _semitones(IntervalQuality.MAJOR, number) - 1
    if quality is IntervalQuality.AUGMENTED:
        return _semitones(IntervalQuality.PERFECT, number) + 1
    if quality is IntervalQuality.DIMINISHED:
        return _semitones(IntervalQuality.PERFECT, number) - 1
    raise ValueError(f"Unknown interval quality: {quality!r}")


@dataclass(frozen=True)
class Interval:
    """
    A theoretical interval: quality + diatonic number.

    Only combinations that exist in conventional theory can be constructed.
    Anything else is a programming error and raises ValueError.

    Examples:
        Interval(IntervalQuality.MAJOR, 3) = major third (4 semitones)
        Interval(IntervalQuality.PERFECT, 5) = perfect fifth (7 semitones)
        Interval(IntervalQuality.MINOR, 7) = minor seventh (10 semitones)

    Immutable and hashable.
    """

    quality: IntervalQuality
    number: int  # 1-8

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __post_init__(self) -> None:
        if not 1 <= self.number <= 8:
            raise ValueError(f"Interval number must be 1-8, got {self.number}")
        # Raises for combinations like a major fifth or a perfect third
        if _semitones(self.quality, self.number) < 0:
            raise ValueError("A diminished unison is not a valid interval")

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return _semitones(self.quality, self.number)

    @property
    def letter_steps(self) -> int:
        """Number of letter names above the lower note (a third spans 2)."""
        return self.number - 1

    def __str__(self) -> str:
        return f"{self.quality.value}{self.number}"

    def __repr__(self) -> str:
        return f"Interval({self.quality.name}, {self.number})"


# Initialize class constants after class is defined
Interval.UNISON = Interval(IntervalQuality.PERFECT, 1)
Interval.MINOR_SECOND = Interval(IntervalQuality.MINOR, 2)
Interval.MAJOR_SECOND = Interval(IntervalQuality.MAJOR, 2)
Interval.MINOR_THIRD = Interval(IntervalQuality.MINOR, 3)
Interval.MAJOR_THIRD = Interval(IntervalQuality.MAJOR, 3)
Interval.PERFECT_FOURTH = Interval(IntervalQuality.PERFECT, 4)
Interval.AUGMENTED_FOURTH = Interval(IntervalQuality.AUGMENTED, 4)
Interval.DIMINISHED_FIFTH = Interval(IntervalQuality.DIMINISHED, 5)
Interval.PERFECT_FIFTH = Interval(IntervalQuality.PERFECT, 5)
Interval.MINOR_SIXTH = Interval(IntervalQuality.MINOR, 6)
Interval.MAJOR_SIXTH = Interval(IntervalQuality.MAJOR, 6)
Interval.MINOR_SEVENTH = Interval(IntervalQuality.MINOR, 7)
Interval.MAJOR_SEVENTH = Interval(IntervalQuality.MAJOR, 7)
Interval.OCTAVE = Interval(IntervalQuality.PERFECT, 8)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE
