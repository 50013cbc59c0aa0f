"""Configuration module for graphlit-mcp."""

from graphlit_mcp.config.loader import load_config, require_platform_identity
from graphlit_mcp.config.schema import Config, ConnectorCredentials, PlatformConfig, ServerConfig

__all__ = [
    "Config",
    "PlatformConfig",
    "ConnectorCredentials",
    "ServerConfig",
    "load_config",
    "require_platform_identity",
]
