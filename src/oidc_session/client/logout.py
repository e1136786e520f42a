"""Logout compatibility shim for Auth0 tenants.

Auth0 does not advertise an ``end_session_endpoint`` in its discovery
document but exposes a proprietary logout route.  When IdP logout is requested
and the provider is (or is declared to be) an Auth0 tenant, the shim installs
an ``end_session_url`` on the client that targets that route.
"""

from __future__ import annotations

import logging
from typing import Any, Final
from urllib.parse import urlencode, urlsplit

from oidc_session.client.handle import Client
from oidc_session.config import ClientConfig

VENDOR_LOGOUT_PATH: Final[str] = "/v2/logout"
VENDOR_DOMAIN_SUFFIX: Final[str] = ".auth0.com"


def is_vendor_issuer(issuer_url: str) -> bool:
    """Return *True* if the issuer is hosted on the vendor domain."""
    hostname = urlsplit(issuer_url).hostname or ""
    return hostname.endswith(VENDOR_DOMAIN_SUFFIX)


def vendor_end_session_url(
    issuer_url: str, client_id: str, post_logout_redirect_uri: str | None
) -> str:
    """Build the vendor logout URL below *issuer_url*."""
    base = issuer_url.rstrip("/") + "/" + VENDOR_LOGOUT_PATH.lstrip("/")
    query: dict[str, str] = {}
    if post_logout_redirect_uri is not None:
        query["returnTo"] = post_logout_redirect_uri
    query["client_id"] = client_id
    return f"{base}?{urlencode(query)}"


def install_logout_shim(
    client: Client, config: ClientConfig, log: logging.LoggerAdapter
) -> bool:
    """Give *client* an ``end_session_url`` if its provider needs the shim.

    Returns *True* when the shim was installed.
    """
    metadata = client.issuer.metadata
    if not config.idp_logout or metadata.end_session_endpoint:
        return False

    if not (config.auth0_logout or is_vendor_issuer(metadata.issuer)):
        log.debug(
            "LogoutUnsupported: the issuer does not support RP-Initiated Logout",
            extra={"capability": "end_session_endpoint"},
        )
        return False

    def end_session_url(
        post_logout_redirect_uri: str | None = None, **_: Any
    ) -> str:
        return vendor_end_session_url(
            metadata.issuer, config.client_id, post_logout_redirect_uri
        )

    client.end_session_url = end_session_url
    return True
