"""Bearer tokens for the Graphlit data API."""

from __future__ import annotations

import time
from typing import Any

import jwt

from graphlit_mcp.config.schema import PlatformConfig

TOKEN_ISSUER = "graphlit"
TOKEN_AUDIENCE = "https://portal.graphlit.io"
CLAIMS_NAMESPACE = "https://graphlit.io/jwt/claims"
DEFAULT_ROLE = "Owner"
_REFRESH_MARGIN_SECONDS = 60


def build_claims(config: PlatformConfig, *, now: float | None = None) -> dict[str, Any]:
    issued_at = int(now if now is not None else time.time())
    return {
        CLAIMS_NAMESPACE: {
            "x-graphlit-environment-id": config.environment_id,
            "x-graphlit-organization-id": config.organization_id,
            "x-graphlit-role": DEFAULT_ROLE,
        },
        "iss": TOKEN_ISSUER,
        "aud": TOKEN_AUDIENCE,
        "iat": issued_at,
        "exp": issued_at + config.token_ttl_seconds,
    }


class TokenProvider:
    """Mint an HS256 token from the project secret and reuse it until near expiry."""

    def __init__(self, config: PlatformConfig, clock=time.time):
        self._config = config
        self._clock = clock
        self._token: str | None = None
        self._expires_at = 0.0

    def token(self) -> str:
        now = self._clock()
        if self._token is None or now >= self._expires_at - _REFRESH_MARGIN_SECONDS:
            claims = build_claims(self._config, now=now)
            self._token = jwt.encode(claims, self._config.jwt_secret, algorithm="HS256")
            self._expires_at = float(claims["exp"])
        return self._token
