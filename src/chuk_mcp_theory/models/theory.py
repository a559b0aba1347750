"""
Theory result models - serializable views of notes, chords and scales.

The core types are plain frozen dataclasses. These models are what the tools
hand back to clients: spelled strings and simple values only.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_theory.core import Chord, PitchClass, Scale, chord_notes, scale_notes


class NoteInfo(BaseModel):
    """A single spelled pitch class."""

    name: str = Field(description="Display spelling (B# shows as C)")
    spelling: str = Field(description="Literal letter + accidental, e.g. 'B#'")
    letter: str = Field(description="Letter name A-G")
    accidental: str = Field(description="'natural', 'sharp' or 'flat'")
    semitone: int = Field(ge=0, le=11, description="Semitone value, C=0")

    model_config = {"frozen": True}

    @classmethod
    def from_pitch(cls, pitch: PitchClass) -> NoteInfo:
        return cls(
            name=pitch.spell(),
            spelling=pitch.name,
            letter=pitch.letter.name,
            accidental=pitch.accidental.name.lower(),
            semitone=pitch.semitones,
        )


class ChordInfo(BaseModel):
    """A chord and its spelled tones."""

    symbol: str = Field(description="Display chord symbol (a Fb root shows as E)")
    spelling: str = Field(description="Literal chord symbol, e.g. 'Fbmaj7'")
    root: str = Field(description="Root spelling")
    quality: str = Field(description="Quality name, e.g. 'minor 7'")
    notes: list[str] = Field(default_factory=list, description="Tones, root first")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordInfo:
        return cls(
            symbol=str(chord),
            spelling=chord.name,
            root=chord.root.spell(),
            quality=chord.quality.name,
            notes=chord_notes(chord),
        )


class ScaleInfo(BaseModel):
    """A scale and its spelled degrees."""

    name: str = Field(description="Scale name, e.g. 'A minor'")
    root: str = Field(description="Root spelling")
    scale_type: str = Field(description="'major' or 'natural minor'")
    notes: list[str] = Field(default_factory=list, description="Degrees 1-7")

    model_config = {"frozen": True}

    @classmethod
    def from_scale(cls, scale: Scale) -> ScaleInfo:
        return cls(
            name=str(scale),
            root=scale.root.spell(),
            scale_type=scale.scale_type.name,
            notes=scale_notes(scale),
        )


class ChordMatches(BaseModel):
    """Result of a reverse chord lookup."""

    notes: list[str] = Field(default_factory=list, description="The notes searched for")
    chords: list[ChordInfo] = Field(default_factory=list, description="Chords containing them")

    model_config = {"frozen": True}

    @property
    def count(self) -> int:
        return len(self.chords)
