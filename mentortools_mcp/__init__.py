"""
Mentortools MCP server: the Mentortools public API exposed as MCP tools.
"""

__version__ = "1.0.0"
