"""CLI module for graphlit-mcp."""
