"""
MCP tool implementations.

Tools are organized by domain:
- theory - Note, chord and scale spelling, reverse chord lookup
"""

from chuk_mcp_theory.tools.theory import register_theory_tools

__all__ = [
    "register_theory_tools",
]
