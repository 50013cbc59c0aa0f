"""Feed construction: credentials, per-connector builders, schedules and polling."""

from graphlit_mcp.ingestion.builders import CONNECTORS, ConnectorDefinition, build_connector_config
from graphlit_mcp.ingestion.credentials import (
    CREDENTIALS,
    CredentialRequirement,
    CredentialResolver,
    ResolvedCredentials,
)
from graphlit_mcp.ingestion.polling import CompletionState, completion_state, poll_until_done
from graphlit_mcp.ingestion.schedule import build_schedule_policy
from graphlit_mcp.ingestion.types import ConnectorConfig, ConnectorKind, SchedulePolicy, to_feed_input

__all__ = [
    "CONNECTORS",
    "ConnectorDefinition",
    "build_connector_config",
    "CREDENTIALS",
    "CredentialRequirement",
    "CredentialResolver",
    "ResolvedCredentials",
    "CompletionState",
    "completion_state",
    "poll_until_done",
    "build_schedule_policy",
    "ConnectorConfig",
    "ConnectorKind",
    "SchedulePolicy",
    "to_feed_input",
]
