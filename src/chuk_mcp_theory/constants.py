"""
Constants for the theory server.

No magic strings - tool names and messages live here.
"""

SERVER_NAME = "chuk-mcp-theory"

DEFAULT_TRANSPORT = "stdio"
DEFAULT_HTTP_PORT = 8000

# Tool name -> one-line summary, in registration order
THEORY_TOOLS = {
    "music_describe_note": "spelling, letter, accidental and semitone of a note",
    "music_chord_notes": "spelled tones of a chord symbol like 'F#m7'",
    "music_scale_notes": "degrees of a major or natural minor scale",
    "music_identify_chords": "every chord containing a set of notes",
}


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{note}'. Expected a letter A-G with optional '#' or 'b'."
    INVALID_CHORD = "Invalid chord: '{chord}'. Expected a symbol like 'C', 'F#m' or 'Bbmaj7'."
    INVALID_SCALE = "Invalid scale: '{scale}'. Expected a name like 'C major' or 'F# minor'."
    NO_NOTES = "No notes given. Provide at least one note name."
