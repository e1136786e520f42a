"""Static configuration consumed by the client factory.

The factory reads a finished :class:`ClientConfig` once and never mutates it.
Validation of the values is the caller's job; :meth:`ClientConfig.from_env`
only parses environment variables.

Environment variables (default prefix ``OIDC_``)
------------------------------------------------
ISSUER_BASE_URL, CLIENT_ID
    Required; ``from_env`` returns ``None`` when either is missing.
CLIENT_SECRET
    Optional client secret.
ID_TOKEN_SIGNING_ALG, RESPONSE_TYPE, RESPONSE_MODE
    Authorization parameters.  An empty RESPONSE_MODE disables it.
CLOCK_TOLERANCE
    Accepted clock skew in seconds.
ENABLE_TELEMETRY, IDP_LOGOUT, AUTH0_LOGOUT
    Boolean flags (``true``, ``1``, ``yes``, ``y``, ``on``).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

logger = logging.getLogger("oidc-session.config")

_TRUTHY: Final[tuple[str, ...]] = ("true", "1", "yes", "y", "on")


def _truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Settings for one identity-provider client."""

    issuer_base_url: str
    client_id: str
    client_secret: str | None = None
    id_token_signing_alg: str = "RS256"
    response_type: str = "id_token"
    response_mode: str | None = "form_post"
    # seconds of skew accepted when validating token timestamps
    clock_tolerance: int = 60
    enable_telemetry: bool = True
    idp_logout: bool = False
    auth0_logout: bool = False

    @classmethod
    def from_env(cls, prefix: str = "OIDC_") -> ClientConfig | None:
        """Build a config from ``{prefix}*`` environment variables.

        Returns ``None`` if the issuer or client id is not set.
        """
        issuer = os.getenv(f"{prefix}ISSUER_BASE_URL", "").strip()
        client_id = os.getenv(f"{prefix}CLIENT_ID", "").strip()
        if not issuer or not client_id:
            logger.debug(
                "%sISSUER_BASE_URL or %sCLIENT_ID not set; no client config",
                prefix,
                prefix,
            )
            return None

        kwargs: dict[str, object] = {}
        alg = os.getenv(f"{prefix}ID_TOKEN_SIGNING_ALG")
        if alg:
            kwargs["id_token_signing_alg"] = alg
        response_type = os.getenv(f"{prefix}RESPONSE_TYPE")
        if response_type:
            kwargs["response_type"] = response_type
        response_mode = os.getenv(f"{prefix}RESPONSE_MODE")
        if response_mode is not None:
            kwargs["response_mode"] = response_mode or None
        tolerance = os.getenv(f"{prefix}CLOCK_TOLERANCE")
        if tolerance:
            kwargs["clock_tolerance"] = int(tolerance)
        telemetry = os.getenv(f"{prefix}ENABLE_TELEMETRY")
        if telemetry is not None:
            kwargs["enable_telemetry"] = _truthy(telemetry)

        return cls(
            issuer_base_url=issuer,
            client_id=client_id,
            client_secret=os.getenv(f"{prefix}CLIENT_SECRET") or None,
            idp_logout=_truthy(os.getenv(f"{prefix}IDP_LOGOUT")),
            auth0_logout=_truthy(os.getenv(f"{prefix}AUTH0_LOGOUT")),
            **kwargs,  # type: ignore[arg-type]
        )
