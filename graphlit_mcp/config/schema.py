"""Configuration schema using Pydantic.

Three settings groups are read from the process environment (and an optional
``.env`` file) once at start-up: the platform identity, the per-connector
credentials, and the server's own behaviour switches.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://data-scus.graphlit.io/api/v1/graphql"


class PlatformConfig(BaseSettings):
    """Graphlit project identity used to mint API tokens."""
    organization_id: str = ""
    environment_id: str = ""
    jwt_secret: str = ""
    api_url: str = DEFAULT_API_URL
    token_ttl_seconds: int = 3600

    model_config = SettingsConfigDict(env_prefix="GRAPHLIT_", extra="ignore")

    def missing(self) -> list[str]:
        """Environment names of identity values that are still empty."""
        required = {
            "GRAPHLIT_ORGANIZATION_ID": self.organization_id,
            "GRAPHLIT_ENVIRONMENT_ID": self.environment_id,
            "GRAPHLIT_JWT_SECRET": self.jwt_secret,
        }
        return [name for name, value in required.items() if not value.strip()]


class ConnectorCredentials(BaseSettings):
    """Third-party credentials, one field per environment variable."""
    # Microsoft SharePoint / OneDrive
    sharepoint_account_name: str | None = None
    sharepoint_client_id: str | None = None
    sharepoint_client_secret: str | None = None
    sharepoint_refresh_token: str | None = None
    onedrive_client_id: str | None = None
    onedrive_client_secret: str | None = None
    onedrive_refresh_token: str | None = None
    # Google Drive: service account JSON wins over the OAuth triple
    google_drive_service_account_json: str | None = None
    google_drive_client_id: str | None = None
    google_drive_client_secret: str | None = None
    google_drive_refresh_token: str | None = None
    dropbox_app_key: str | None = None
    dropbox_app_secret: str | None = None
    dropbox_refresh_token: str | None = None
    box_client_id: str | None = None
    box_client_secret: str | None = None
    box_redirect_uri: str | None = None
    box_refresh_token: str | None = None
    github_personal_access_token: str | None = None
    notion_api_key: str | None = None
    microsoft_teams_client_id: str | None = None
    microsoft_teams_client_secret: str | None = None
    microsoft_teams_refresh_token: str | None = None
    slack_bot_token: str | None = None
    discord_bot_token: str | None = None
    twitter_token: str | None = None
    google_email_client_id: str | None = None
    google_email_client_secret: str | None = None
    google_email_refresh_token: str | None = None
    microsoft_email_client_id: str | None = None
    microsoft_email_client_secret: str | None = None
    microsoft_email_refresh_token: str | None = None
    linear_api_key: str | None = None
    jira_email: str | None = None
    jira_token: str | None = None
    # Calendars share the generic Google / Microsoft OAuth apps
    google_client_id: str | None = None
    google_client_secret: str | None = None
    google_refresh_token: str | None = None
    microsoft_client_id: str | None = None
    microsoft_client_secret: str | None = None
    microsoft_refresh_token: str | None = None
    # Outbound notifications
    twitter_consumer_api_key: str | None = None
    twitter_consumer_api_secret: str | None = None
    twitter_access_token_key: str | None = None
    twitter_access_token_secret: str | None = None
    from_email_address: str | None = None

    model_config = SettingsConfigDict(extra="ignore")

    def as_lookup(self) -> dict[str, str]:
        """Non-empty values keyed by their environment variable name."""
        return {
            name.upper(): value
            for name, value in self.model_dump().items()
            if isinstance(value, str) and value.strip()
        }


class ServerConfig(BaseSettings):
    """Behaviour of the MCP server itself."""
    log_level: str = "INFO"
    log_file: str | None = None
    request_timeout: float = 60.0
    usage_page_limit: int = Field(default=1000, ge=1)
    usage_max_pages: int = Field(default=1000, ge=1)
    enforce_schedule_floor: bool = True
    exit_on_missing_credentials: bool = False

    model_config = SettingsConfigDict(env_prefix="GRAPHLIT_MCP_", extra="ignore")


class Config(BaseModel):
    """Root configuration for graphlit-mcp."""
    platform: PlatformConfig = Field(default_factory=PlatformConfig)
    credentials: ConnectorCredentials = Field(default_factory=ConnectorCredentials)
    server: ServerConfig = Field(default_factory=ServerConfig)
