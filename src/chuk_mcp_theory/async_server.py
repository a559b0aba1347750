#!/usr/bin/env python3
"""
Async Theory MCP Server using chuk-mcp-server

This server provides MCP tools for spelling chords and scales correctly:
the major third above D is F#, never Gb.

The server provides tools for:
- Describing a note (spelling, letter, accidental, semitone)
- Spelling the tones of major, minor and seventh chords
- Spelling major and natural minor scales
- Identifying which chords contain a set of notes
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.constants import SERVER_NAME
from chuk_mcp_theory.tools import register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(SERVER_NAME)

# Register all tools
theory_tools = register_theory_tools(mcp)

# Export tool functions for direct access
music_describe_note = theory_tools["music_describe_note"]
music_chord_notes = theory_tools["music_chord_notes"]
music_scale_notes = theory_tools["music_scale_notes"]
music_identify_chords = theory_tools["music_identify_chords"]

logger.info("CHUK Theory MCP Server initialized")
logger.info(f"  Tools: {', '.join(sorted(theory_tools))}")
