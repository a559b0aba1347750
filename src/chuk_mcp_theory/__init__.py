"""
CHUK Theory - spelled chords and scales over MCP.

The core package does the theory; tools and the server expose it.
"""

__version__ = "0.1.0"
