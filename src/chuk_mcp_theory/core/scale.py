"""
Scale primitives - ScaleType, Scale.

A scale type is a list of intervals measured from the root, one per degree.
A scale is a scale type applied to a root pitch. Each degree is spelled with
PitchClass.up_interval, so every letter name appears exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .interval import Interval
from .pitch import PitchClass


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by the intervals of degrees 2-7 above the root.

    Intervals are cumulative from the root, not step to step.
    A major scale is: M2 M3 P4 P5 M6 M7.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""

    # Supported scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        numbers = [i.number for i in self.intervals]
        if numbers != list(range(2, 8)):
            raise ValueError(f"Scale intervals must cover degrees 2-7 in order, got {numbers}")

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """
        Get all pitch classes in this scale starting from root.

        Returns 7 pitches (the octave is not included).
        """
        return [root] + [root.up_interval(interval) for interval in self.intervals]

    def __str__(self) -> str:
        return self.name or f"ScaleType({self.intervals})"

    def __repr__(self) -> str:
        if self.name:
            return f"ScaleType.{self.name.upper().replace(' ', '_')}"
        return f"ScaleType({self.intervals!r})"


ScaleType.MAJOR = ScaleType(
    (
        Interval.MAJOR_SECOND,
        Interval.MAJOR_THIRD,
        Interval.PERFECT_FOURTH,
        Interval.PERFECT_FIFTH,
        Interval.MAJOR_SIXTH,
        Interval.MAJOR_SEVENTH,
    ),
    "major",
)
ScaleType.NATURAL_MINOR = ScaleType(
    (
        Interval.MAJOR_SECOND,
        Interval.MINOR_THIRD,
        Interval.PERFECT_FOURTH,
        Interval.PERFECT_FIFTH,
        Interval.MINOR_SIXTH,
        Interval.MINOR_SEVENTH,
    ),
    "natural minor",
)

# Words accepted after the root when parsing
_SCALE_WORDS: dict[str, ScaleType] = {
    "major": ScaleType.MAJOR,
    "minor": ScaleType.NATURAL_MINOR,
}


@dataclass(frozen=True)
class Scale:
    """
    A root pitch class plus a scale type.

    Examples:
        Scale(PitchClass.natural(WhiteNote.C), ScaleType.MAJOR) = C major
        Scale(PitchClass.natural(WhiteNote.A), ScaleType.NATURAL_MINOR) = A minor
    """

    root: PitchClass
    scale_type: ScaleType

    def get_notes(self) -> list[PitchClass]:
        """Get the 7 spelled notes, root first."""
        return self.scale_type.get_pitches(self.root)

    def __str__(self) -> str:
        word = "major" if self.scale_type == ScaleType.MAJOR else "minor"
        return f"{self.root.spell()} {word}"

    def __repr__(self) -> str:
        return f"Scale({self.root!r}, {self.scale_type!r})"

    @classmethod
    def parse(cls, text: str) -> Scale | None:
        """
        Parse a scale from a string like 'C major', 'F# minor', 'Bb major'.

        The root must be a complete note name and the second word 'major' or
        'minor' (any case).

        Returns None if the text is not in that form.
        """
        parts = text.split()
        if len(parts) != 2:
            return None
        root_text, word = parts
        root = PitchClass.parse(root_text)
        if root is None or root.name != root_text:
            return None
        scale_type = _SCALE_WORDS.get(word.lower())
        if scale_type is None:
            return None
        return cls(root, scale_type)


def parse_scale(text: str) -> Scale | None:
    """Parse a scale name; None if it is not one."""
    return Scale.parse(text)


def scale_notes(scale: Scale) -> list[str]:
    """Spelled note names of a scale, root first."""
    return [note.spell() for note in scale.get_notes()]
