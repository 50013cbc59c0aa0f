"""Credential lookup for connectors.

Each connector declares which environment values it needs as one or more
alternative forms; the first form whose values are all present wins. The
resolver works on a snapshot taken at start-up and never logs values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from loguru import logger

from graphlit_mcp.config.schema import ConnectorCredentials
from graphlit_mcp.utils.exceptions import MissingCredentialError


@dataclass(frozen=True)
class CredentialForm:
    name: str
    keys: tuple[str, ...]


@dataclass(frozen=True)
class CredentialRequirement:
    connector: str
    forms: tuple[CredentialForm, ...]

    @classmethod
    def single(cls, connector: str, *keys: str) -> CredentialRequirement:
        return cls(connector, (CredentialForm("default", tuple(keys)),))


@dataclass(frozen=True)
class ResolvedCredentials:
    connector: str
    form: str
    values: Mapping[str, str]

    def __getitem__(self, key: str) -> str:
        return self.values[key]

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.values.get(key, default)

    def __repr__(self) -> str:
        return f"ResolvedCredentials(connector={self.connector!r}, form={self.form!r}, keys={sorted(self.values)})"


NO_CREDENTIALS = CredentialRequirement("public source", ())

CREDENTIALS: dict[str, CredentialRequirement] = {
    "sharepoint": CredentialRequirement.single(
        "SharePoint",
        "SHAREPOINT_ACCOUNT_NAME",
        "SHAREPOINT_CLIENT_ID",
        "SHAREPOINT_CLIENT_SECRET",
        "SHAREPOINT_REFRESH_TOKEN",
    ),
    "sharepoint_listing": CredentialRequirement.single(
        "SharePoint",
        "SHAREPOINT_CLIENT_ID",
        "SHAREPOINT_CLIENT_SECRET",
        "SHAREPOINT_REFRESH_TOKEN",
    ),
    "onedrive": CredentialRequirement.single(
        "OneDrive", "ONEDRIVE_CLIENT_ID", "ONEDRIVE_CLIENT_SECRET", "ONEDRIVE_REFRESH_TOKEN"
    ),
    "google_drive": CredentialRequirement(
        "Google Drive",
        (
            CredentialForm("service_account", ("GOOGLE_DRIVE_SERVICE_ACCOUNT_JSON",)),
            CredentialForm(
                "user",
                ("GOOGLE_DRIVE_CLIENT_ID", "GOOGLE_DRIVE_CLIENT_SECRET", "GOOGLE_DRIVE_REFRESH_TOKEN"),
            ),
        ),
    ),
    "dropbox": CredentialRequirement.single(
        "Dropbox", "DROPBOX_APP_KEY", "DROPBOX_APP_SECRET", "DROPBOX_REFRESH_TOKEN"
    ),
    "box": CredentialRequirement.single(
        "Box", "BOX_CLIENT_ID", "BOX_CLIENT_SECRET", "BOX_REDIRECT_URI", "BOX_REFRESH_TOKEN"
    ),
    "box_listing": CredentialRequirement.single(
        "Box", "BOX_CLIENT_ID", "BOX_CLIENT_SECRET", "BOX_REFRESH_TOKEN"
    ),
    "github": CredentialRequirement.single("GitHub", "GITHUB_PERSONAL_ACCESS_TOKEN"),
    "notion": CredentialRequirement.single("Notion", "NOTION_API_KEY"),
    "microsoft_teams": CredentialRequirement.single(
        "Microsoft Teams",
        "MICROSOFT_TEAMS_CLIENT_ID",
        "MICROSOFT_TEAMS_CLIENT_SECRET",
        "MICROSOFT_TEAMS_REFRESH_TOKEN",
    ),
    "slack": CredentialRequirement.single("Slack", "SLACK_BOT_TOKEN"),
    "discord": CredentialRequirement.single("Discord", "DISCORD_BOT_TOKEN"),
    "twitter": CredentialRequirement.single("Twitter", "TWITTER_TOKEN"),
    "google_email": CredentialRequirement.single(
        "Google Email",
        "GOOGLE_EMAIL_CLIENT_ID",
        "GOOGLE_EMAIL_CLIENT_SECRET",
        "GOOGLE_EMAIL_REFRESH_TOKEN",
    ),
    "microsoft_email": CredentialRequirement.single(
        "Microsoft Email",
        "MICROSOFT_EMAIL_CLIENT_ID",
        "MICROSOFT_EMAIL_CLIENT_SECRET",
        "MICROSOFT_EMAIL_REFRESH_TOKEN",
    ),
    "linear": CredentialRequirement.single("Linear", "LINEAR_API_KEY"),
    "jira": CredentialRequirement.single("Jira", "JIRA_EMAIL", "JIRA_TOKEN"),
    "google_calendar": CredentialRequirement.single(
        "Google Calendar", "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN"
    ),
    "microsoft_calendar": CredentialRequirement.single(
        "Microsoft Calendar", "MICROSOFT_CLIENT_ID", "MICROSOFT_CLIENT_SECRET", "MICROSOFT_REFRESH_TOKEN"
    ),
    "twitter_notification": CredentialRequirement.single(
        "Twitter",
        "TWITTER_CONSUMER_API_KEY",
        "TWITTER_CONSUMER_API_SECRET",
        "TWITTER_ACCESS_TOKEN_KEY",
        "TWITTER_ACCESS_TOKEN_SECRET",
    ),
    "email_notification": CredentialRequirement.single("Email", "FROM_EMAIL_ADDRESS"),
    "public": NO_CREDENTIALS,
}


class CredentialResolver:
    """Resolve connector credentials from a read-only snapshot."""

    def __init__(self, lookup: Mapping[str, str | None]):
        self._lookup: dict[str, str] = {
            key: value for key, value in lookup.items() if isinstance(value, str) and value.strip()
        }

    @classmethod
    def from_settings(cls, credentials: ConnectorCredentials) -> CredentialResolver:
        return cls(credentials.as_lookup())

    def resolve(self, requirement: CredentialRequirement | str) -> ResolvedCredentials:
        """
        Return the first complete credential form of a requirement.

        Raises:
            MissingCredentialError: if no form is complete. The error names the
                missing values of the last form and the alternatives to it.
        """
        req = CREDENTIALS[requirement] if isinstance(requirement, str) else requirement
        if not req.forms:
            return ResolvedCredentials(req.connector, "none", {})
        for form in req.forms:
            if all(key in self._lookup for key in form.keys):
                return ResolvedCredentials(
                    req.connector, form.name, {key: self._lookup[key] for key in form.keys}
                )
        fallback = req.forms[-1]
        missing = [key for key in fallback.keys if key not in self._lookup]
        alternatives = [key for form in req.forms[:-1] for key in form.keys]
        logger.debug(f"Credentials for {req.connector} incomplete; missing {missing}")
        raise MissingCredentialError(req.connector, missing, alternatives=alternatives or None)

    def is_configured(self, requirement: CredentialRequirement | str) -> bool:
        req = CREDENTIALS[requirement] if isinstance(requirement, str) else requirement
        if not req.forms:
            return True
        return any(all(key in self._lookup for key in form.keys) for form in req.forms)

    def status(self) -> dict[str, bool]:
        """Configured/unconfigured flag for every known requirement key."""
        return {key: self.is_configured(req) for key, req in CREDENTIALS.items()}
