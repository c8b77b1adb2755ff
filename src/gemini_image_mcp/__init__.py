"""
Gemini image MCP server - image generation and analysis tools.
"""

__version__ = "1.0.0"
