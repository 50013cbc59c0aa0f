"""Graphlit platform access: auth tokens, GraphQL documents and the client."""

from graphlit_mcp.remote.auth import TokenProvider
from graphlit_mcp.remote.client import GraphlitClient

__all__ = ["GraphlitClient", "TokenProvider"]
