"""
Pydantic models for the theory tools.

This module provides:
- NoteInfo: A spelled pitch class
- ChordInfo: A chord with its spelled tones
- ScaleInfo: A scale with its spelled degrees
- ChordMatches: Result of a reverse chord lookup
"""

from chuk_mcp_theory.models.theory import ChordInfo, ChordMatches, NoteInfo, ScaleInfo

__all__ = [
    "ChordInfo",
    "ChordMatches",
    "NoteInfo",
    "ScaleInfo",
]
