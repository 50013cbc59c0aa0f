"""Configuration loading utilities."""

from pathlib import Path

from graphlit_mcp.config.schema import Config, ConnectorCredentials, PlatformConfig, ServerConfig
from graphlit_mcp.utils.exceptions import ConfigurationError


def get_env_file() -> Path:
    """Default dotenv file, looked up in the working directory."""
    return Path.cwd() / ".env"


def load_config(env_file: Path | None = None) -> Config:
    """
    Read every settings group from the environment.

    Args:
        env_file: Optional dotenv file. Uses ``./.env`` when it exists.

    Returns:
        Loaded configuration object.
    """
    path = env_file or get_env_file()
    dotenv = str(path) if path.exists() else None
    try:
        return Config(
            platform=PlatformConfig(_env_file=dotenv),
            credentials=ConnectorCredentials(_env_file=dotenv),
            server=ServerConfig(_env_file=dotenv),
        )
    except ValueError as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e


def require_platform_identity(config: Config) -> None:
    """Raise when the Graphlit organization, environment or secret is missing."""
    missing = config.platform.missing()
    if missing:
        raise ConfigurationError(
            "Graphlit platform identity is not configured: " + ", ".join(missing),
            missing=missing,
        )


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)
