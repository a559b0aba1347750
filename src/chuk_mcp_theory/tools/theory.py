"""
Theory tools - MCP tools for spelling notes, chords and scales.

Tools for describing a note, listing the tones of a chord or the degrees of a
scale, and finding which chords contain a set of notes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core import (
    find_matching_chords,
    parse_chord,
    parse_note,
    parse_scale,
    sort_chords,
)
from chuk_mcp_theory.models import ChordInfo, ChordMatches, NoteInfo, ScaleInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register theory tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_note(note: str) -> str:
        """
        Describe a single note.

        Args:
            note: Note name, e.g. 'C', 'F#', 'Bb'

        Returns:
            JSON string with the spelling, letter, accidental and semitone

        Example:
            music_describe_note(note="F#")
        """
        try:
            pitch = parse_note(note)
            if pitch is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=note)}
                )

            return json.dumps(
                {"status": "success", "note": NoteInfo.from_pitch(pitch).model_dump()}
            )
        except Exception as e:
            logger.exception("Failed to describe note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_describe_note"] = music_describe_note

    @mcp.tool  # type: ignore[arg-type]
    async def music_chord_notes(chord: str) -> str:
        """
        Spell the tones of a chord.

        Supported qualities: major (''), minor ('m'), dominant 7 ('7'),
        major 7 ('maj7') and minor 7 ('m7').

        Args:
            chord: Chord symbol, e.g. 'D', 'Cm', 'G7', 'Fmaj7', 'Am7'

        Returns:
            JSON string with the chord symbol, quality and tones (root first)

        Example:
            music_chord_notes(chord="Dmaj7")
        """
        try:
            parsed = parse_chord(chord)
            if parsed is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_CHORD.format(chord=chord)}
                )

            return json.dumps(
                {"status": "success", "chord": ChordInfo.from_chord(parsed).model_dump()}
            )
        except Exception as e:
            logger.exception("Failed to spell chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_chord_notes"] = music_chord_notes

    @mcp.tool  # type: ignore[arg-type]
    async def music_scale_notes(scale: str) -> str:
        """
        Spell the degrees of a major or natural minor scale.

        Args:
            scale: Scale name, e.g. 'C major', 'F# minor'

        Returns:
            JSON string with the scale name and its 7 notes

        Example:
            music_scale_notes(scale="A major")
        """
        try:
            parsed = parse_scale(scale)
            if parsed is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_SCALE.format(scale=scale)}
                )

            return json.dumps(
                {"status": "success", "scale": ScaleInfo.from_scale(parsed).model_dump()}
            )
        except Exception as e:
            logger.exception("Failed to spell scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_scale_notes"] = music_scale_notes

    @mcp.tool  # type: ignore[arg-type]
    async def music_identify_chords(notes: list[str]) -> str:
        """
        Find every chord that contains the given notes.

        The chords may contain more notes than given. Enharmonic roots are
        listed separately (C#m and Dbm can both appear).
        Each entry carries its literal `spelling` (Fbmaj7) next to the display
        `symbol` (Emaj7), so enharmonic roots stay distinguishable.

        Args:
            notes: Note names in any order, e.g. ['C', 'E', 'G']

        Returns:
            JSON string with matching chords and their tones

        Example:
            music_identify_chords(notes=["A", "C", "E"])
        """
        try:
            if not notes:
                return json.dumps({"status": "error", "message": ErrorMessages.NO_NOTES})

            pitches = []
            for name in notes:
                pitch = parse_note(name)
                if pitch is None:
                    return json.dumps(
                        {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=name)}
                    )
                pitches.append(pitch)

            chords = sort_chords(find_matching_chords(pitches))
            matches = ChordMatches(
                notes=[p.spell() for p in pitches],
                chords=[ChordInfo.from_chord(c) for c in chords],
            )
            logger.debug(f"Identified {matches.count} chords for {notes}")

            return json.dumps(
                {
                    "status": "success",
                    **matches.model_dump(),
                    "count": matches.count,
                }
            )
        except Exception as e:
            logger.exception("Failed to identify chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_identify_chords"] = music_identify_chords

    return tools
