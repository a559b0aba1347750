"""
Tests for theory result models.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_theory.core import Chord, ChordQuality, PitchClass, Scale, ScaleType, WhiteNote
from chuk_mcp_theory.models import ChordInfo, ChordMatches, NoteInfo, ScaleInfo


class TestNoteInfo:
    """Tests for NoteInfo model."""

    def test_from_pitch(self) -> None:
        """Build from a pitch class."""
        info = NoteInfo.from_pitch(PitchClass.flat(WhiteNote.E))
        assert info.name == "Eb"
        assert info.spelling == "Eb"
        assert info.letter == "E"
        assert info.accidental == "flat"
        assert info.semitone == 3

    def test_natural(self) -> None:
        """Naturals report 'natural'."""
        info = NoteInfo.from_pitch(PitchClass.natural(WhiteNote.G))
        assert info.accidental == "natural"

    def test_frozen(self) -> None:
        """Models are immutable."""
        info = NoteInfo.from_pitch(PitchClass.natural(WhiteNote.C))
        with pytest.raises(ValidationError):
            info.name = "D"

    def test_semitone_range(self) -> None:
        """Semitone must be 0-11."""
        with pytest.raises(ValidationError):
            NoteInfo(name="C", spelling="C", letter="C", accidental="natural", semitone=12)


class TestChordInfo:
    """Tests for ChordInfo model."""

    def test_from_chord(self) -> None:
        """Build from a chord."""
        chord = Chord(PitchClass.natural(WhiteNote.G), ChordQuality.DOMINANT_7)
        info = ChordInfo.from_chord(chord)
        assert info.symbol == "G7"
        assert info.spelling == "G7"
        assert info.root == "G"
        assert info.quality == "dominant 7"
        assert info.notes == ["G", "B", "D", "F"]

    def test_spelling_keeps_root_letter(self) -> None:
        """An Fb chord displays as E but keeps its literal spelling."""
        chord = Chord(PitchClass.flat(WhiteNote.F), ChordQuality.MAJOR_7)
        info = ChordInfo.from_chord(chord)
        assert info.symbol == "Emaj7"
        assert info.spelling == "Fbmaj7"
        assert info.root == "E"


class TestScaleInfo:
    """Tests for ScaleInfo model."""

    def test_from_scale(self) -> None:
        """Build from a scale."""
        scale = Scale(PitchClass.natural(WhiteNote.F), ScaleType.MAJOR)
        info = ScaleInfo.from_scale(scale)
        assert info.name == "F major"
        assert info.scale_type == "major"
        assert info.notes == ["F", "G", "A", "Bb", "C", "D", "E"]


class TestChordMatches:
    """Tests for ChordMatches model."""

    def test_count(self) -> None:
        """Count reflects the number of chords."""
        chord = Chord(PitchClass.natural(WhiteNote.C), ChordQuality.MAJOR)
        matches = ChordMatches(notes=["C"], chords=[ChordInfo.from_chord(chord)])
        assert matches.count == 1
        assert matches.model_dump()["chords"][0]["symbol"] == "C"

    def test_empty(self) -> None:
        """Defaults to no chords."""
        assert ChordMatches().count == 0
