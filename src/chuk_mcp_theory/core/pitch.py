"""
Pitch primitives - WhiteNote, Accidental, PitchClass.

A PitchClass is spelled: a letter name plus an accidental, not a bare semitone
number. C# and Db sound the same (and compare equal) but are different
spellings, and only the spelling tells you which one a chord needs.

The spelling algorithm lives in PitchClass.up_interval: it works out the
target letter from the interval number and the target pitch from the interval
size independently, then reconciles the two.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering

from .interval import Interval


class SpellingError(ValueError):
    """A pitch cannot be spelled on the requested letter with a single accidental."""


class WhiteNote(IntEnum):
    """
    The 7 natural letter names.

    The value is the position in the letter cycle (C=0 .. B=6). The semitone
    position is a separate table, and it is not evenly spaced: E-F and B-C are
    half steps, every other neighbouring pair is a whole step.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @property
    def semitones(self) -> int:
        """Semitone position of the natural note (C=0 .. B=11)."""
        return _WHITE_SEMITONES[self]

    def successor(self, steps: int) -> WhiteNote:
        """The letter `steps` names above this one, wrapping B -> C."""
        return WhiteNote((self.value + steps) % 7)


# Module level to avoid IntEnum member issues
_WHITE_SEMITONES: dict[WhiteNote, int] = {
    WhiteNote.C: 0,
    WhiteNote.D: 2,
    WhiteNote.E: 4,
    WhiteNote.F: 5,
    WhiteNote.G: 7,
    WhiteNote.A: 9,
    WhiteNote.B: 11,
}


class Accidental(str, Enum):
    """Accidentals. The value is the symbol used when parsing and spelling."""

    NATURAL = ""
    SHARP = "#"
    FLAT = "b"

    @property
    def offset(self) -> int:
        """Semitone adjustment applied to the letter."""
        return _ACCIDENTAL_OFFSETS[self]


_ACCIDENTAL_OFFSETS: dict[Accidental, int] = {
    Accidental.NATURAL: 0,
    Accidental.SHARP: 1,
    Accidental.FLAT: -1,
}

# Reconciliation offsets (mod 12) from the natural target letter
_OFFSET_ACCIDENTALS: dict[int, Accidental] = {
    0: Accidental.NATURAL,
    1: Accidental.SHARP,
    11: Accidental.FLAT,
}

_N, _S, _F = Accidental.NATURAL, Accidental.SHARP, Accidental.FLAT
_W = WhiteNote

# One semitone up, for every representable spelling.
# Naturals gain a sharp, flats lose theirs, sharps move to the next letter.
# E# and B# have no natural one semitone above them, so they stay sharp.
_UP_SEMITONE: dict[tuple[WhiteNote, Accidental], tuple[WhiteNote, Accidental]] = {
    (_W.C, _N): (_W.C, _S),
    (_W.D, _N): (_W.D, _S),
    (_W.E, _N): (_W.E, _S),
    (_W.F, _N): (_W.F, _S),
    (_W.G, _N): (_W.G, _S),
    (_W.A, _N): (_W.A, _S),
    (_W.B, _N): (_W.B, _S),
    (_W.C, _S): (_W.D, _N),
    (_W.D, _S): (_W.E, _N),
    (_W.E, _S): (_W.F, _S),
    (_W.F, _S): (_W.G, _N),
    (_W.G, _S): (_W.A, _N),
    (_W.A, _S): (_W.B, _N),
    (_W.B, _S): (_W.C, _S),
    (_W.C, _F): (_W.C, _N),
    (_W.D, _F): (_W.D, _N),
    (_W.E, _F): (_W.E, _N),
    (_W.F, _F): (_W.F, _N),
    (_W.G, _F): (_W.G, _N),
    (_W.A, _F): (_W.A, _N),
    (_W.B, _F): (_W.B, _N),
}

# One semitone down, the mirror image of _UP_SEMITONE.
_DOWN_SEMITONE: dict[tuple[WhiteNote, Accidental], tuple[WhiteNote, Accidental]] = {
    (_W.C, _N): (_W.C, _F),
    (_W.D, _N): (_W.D, _F),
    (_W.E, _N): (_W.E, _F),
    (_W.F, _N): (_W.F, _F),
    (_W.G, _N): (_W.G, _F),
    (_W.A, _N): (_W.A, _F),
    (_W.B, _N): (_W.B, _F),
    (_W.C, _F): (_W.B, _F),
    (_W.D, _F): (_W.C, _N),
    (_W.E, _F): (_W.D, _N),
    (_W.F, _F): (_W.E, _F),
    (_W.G, _F): (_W.F, _N),
    (_W.A, _F): (_W.G, _N),
    (_W.B, _F): (_W.A, _N),
    (_W.C, _S): (_W.C, _N),
    (_W.D, _S): (_W.D, _N),
    (_W.E, _S): (_W.E, _N),
    (_W.F, _S): (_W.F, _N),
    (_W.G, _S): (_W.G, _N),
    (_W.A, _S): (_W.A, _N),
    (_W.B, _S): (_W.B, _N),
}

# No black key between E-F and B-C, so these spell as the neighbouring white key
_SHARP_DISPLAY_EXCEPTIONS: dict[WhiteNote, str] = {WhiteNote.B: "C", WhiteNote.E: "F"}
_FLAT_DISPLAY_EXCEPTIONS: dict[WhiteNote, str] = {WhiteNote.C: "B", WhiteNote.F: "E"}


@total_ordering
@dataclass(frozen=True, eq=False)
class PitchClass:
    """
    A spelled pitch class: letter + accidental, octave-independent.

    21 spellings map onto 12 semitone positions. Equality, hashing and
    ordering use the semitone value, so PitchClass.sharp(C) == PitchClass.flat(D).
    Use `name` (or compare letter/accidental) when the spelling matters.

    Immutable and hashable.
    """

    letter: WhiteNote
    accidental: Accidental = Accidental.NATURAL

    @classmethod
    def natural(cls, letter: WhiteNote) -> PitchClass:
        return cls(letter, Accidental.NATURAL)

    @classmethod
    def sharp(cls, letter: WhiteNote) -> PitchClass:
        return cls(letter, Accidental.SHARP)

    @classmethod
    def flat(cls, letter: WhiteNote) -> PitchClass:
        return cls(letter, Accidental.FLAT)

    @classmethod
    def all(cls) -> list[PitchClass]:
        """All 21 representable spellings, natural/sharp/flat per letter."""
        return [
            cls(letter, accidental)
            for letter in WhiteNote
            for accidental in (Accidental.NATURAL, Accidental.SHARP, Accidental.FLAT)
        ]

    @property
    def semitones(self) -> int:
        """Semitone value 0-11 (Cb is 11, B# is 0)."""
        return (self.letter.semitones + self.accidental.offset) % 12

    @property
    def name(self) -> str:
        """The literal spelling, e.g. 'B#' (spell() would give 'C')."""
        return f"{self.letter.name}{self.accidental.value}"

    def up_semitone(self) -> PitchClass:
        """One semitone higher, from the fixed transition table."""
        return PitchClass(*_UP_SEMITONE[(self.letter, self.accidental)])

    def down_semitone(self) -> PitchClass:
        """One semitone lower, from the fixed transition table."""
        return PitchClass(*_DOWN_SEMITONE[(self.letter, self.accidental)])

    def up_semitones(self, semitones: int) -> PitchClass:
        """Walk up a number of semitones, one table step at a time."""
        pitch = self
        for _ in range(semitones):
            pitch = pitch.up_semitone()
        return pitch

    def up_interval(self, interval: Interval) -> PitchClass:
        """
        The correctly spelled pitch class an interval above this one.

        The letter comes from the interval number, the pitch from the interval
        size. The walked pitch is then respelled on the target letter:
        natural, sharp or flat, whichever lands on the right semitone.

        Args:
            interval: The interval to move up by

        Returns:
            The spelled pitch class

        Raises:
            SpellingError: If the result would need a double accidental
                (e.g. the major third above D# is F##)
        """
        target = self.letter.successor(interval.letter_steps)
        walked = self.up_semitones(interval.semitones)
        offset = (walked.semitones - target.semitones) % 12
        accidental = _OFFSET_ACCIDENTALS.get(offset)
        if accidental is None:
            raise SpellingError(
                f"Cannot spell the {interval} above {self.name} on {target.name} "
                f"with a single accidental"
            )
        return PitchClass(target, accidental)

    def spell(self) -> str:
        """
        Get human-readable name.

        B# and E# display as C and F, Cb and Fb as B and E.
        """
        if self.accidental is Accidental.SHARP:
            return _SHARP_DISPLAY_EXCEPTIONS.get(self.letter, f"{self.letter.name}#")
        if self.accidental is Accidental.FLAT:
            return _FLAT_DISPLAY_EXCEPTIONS.get(self.letter, f"{self.letter.name}b")
        return self.letter.name

    @classmethod
    def parse(cls, text: str) -> PitchClass | None:
        """
        Parse a pitch class from the start of a string like 'C', 'F#', 'Bb'.

        The letter must be uppercase A-G. An optional '#' or 'b' follows.
        Anything after that is ignored; callers parsing chord or scale names
        handle the rest.

        Returns None if the text does not start with a note name.
        """
        if not text or text[0] not in WhiteNote.__members__:
            return None
        letter = WhiteNote[text[0]]
        symbol = text[1:2]
        if symbol in (Accidental.SHARP.value, Accidental.FLAT.value):
            return cls(letter, Accidental(symbol))
        return cls(letter, Accidental.NATURAL)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.semitones == other.semitones

    def __lt__(self, other: PitchClass) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.semitones < other.semitones

    def __hash__(self) -> int:
        return hash(self.semitones)

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        return f"PitchClass({self.name})"


def parse_note(text: str) -> PitchClass | None:
    """Parse a note name; None if it is not one."""
    return PitchClass.parse(text)
