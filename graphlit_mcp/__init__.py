"""
graphlit-mcp - MCP tool server for the Graphlit platform
"""

__version__ = "0.4.0"
__logo__ = "🧭"
