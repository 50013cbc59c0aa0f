"""
Entry point for running graphlit-mcp as a module: python -m graphlit_mcp
"""

from graphlit_mcp.cli.commands import app

if __name__ == "__main__":
    app()
