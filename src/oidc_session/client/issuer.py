"""Provider discovery.

:meth:`Issuer.discover` fetches the well-known configuration document once and
wraps it in an :class:`Issuer`, which in turn builds :class:`Client` handles.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from oidc_session.client.errors import DiscoveryError
from oidc_session.client.handle import Client
from oidc_session.client.http_options import HttpOptions
from oidc_session.client.models import ProviderMetadata

_LOG = logging.getLogger("oidc-session.client.issuer")

WELL_KNOWN_PATH = "/.well-known/openid-configuration"


def well_known_url(issuer_base_url: str) -> str:
    """Return the discovery document URL for *issuer_base_url*."""
    if "/.well-known/" in issuer_base_url:
        return issuer_base_url
    return issuer_base_url.rstrip("/") + WELL_KNOWN_PATH


class Issuer:
    """A discovered identity provider."""

    def __init__(
        self,
        metadata: ProviderMetadata,
        *,
        http_options: HttpOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.metadata = metadata
        self.transport = transport
        self.http_options = http_options

    def __repr__(self) -> str:
        return f"Issuer({self.metadata.issuer!r})"

    @property
    def issuer(self) -> str:
        return self.metadata.issuer

    @classmethod
    async def discover(
        cls,
        issuer_base_url: str,
        *,
        http_options: HttpOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Issuer:
        """Fetch and parse the discovery document for *issuer_base_url*.

        Parameters
        ----------
        issuer_base_url:
            Issuer URL, or the full ``/.well-known/...`` document URL.
        http_options:
            Request-options hook applied to the discovery request.
        transport:
            Optional httpx transport, kept for requests made via the issuer.

        Raises
        ------
        DiscoveryError
            If the URL is invalid, the request fails, or the document is not
            a JSON object naming an issuer.
        """
        options: dict[str, Any] = {"headers": {"Accept": "application/json"}}
        if http_options is not None:
            options = http_options(options)

        url = well_known_url(issuer_base_url)
        _LOG.debug("Fetching discovery document %s", url)
        try:
            async with httpx.AsyncClient(
                transport=transport, follow_redirects=True
            ) as http:
                resp = await http.get(url, **options)
                resp.raise_for_status()
                document = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DiscoveryError(
                issuer_base_url=issuer_base_url, reason=str(exc) or type(exc).__name__
            ) from exc
        except ValueError as exc:
            raise DiscoveryError(
                issuer_base_url=issuer_base_url, reason="response is not valid JSON"
            ) from exc

        if not isinstance(document, dict):
            raise DiscoveryError(
                issuer_base_url=issuer_base_url, reason="document is not a JSON object"
            )
        try:
            metadata = ProviderMetadata.from_document(document)
        except ValueError as exc:
            raise DiscoveryError(issuer_base_url=issuer_base_url, reason=str(exc)) from exc

        _LOG.debug("Discovered issuer %s", metadata.issuer)
        return cls(metadata, http_options=http_options, transport=transport)

    def client(
        self,
        *,
        client_id: str,
        client_secret: str | None = None,
        id_token_signed_response_alg: str = "RS256",
    ) -> Client:
        """Return a new client handle registered with this issuer."""
        return Client(
            self,
            client_id=client_id,
            client_secret=client_secret,
            id_token_signed_response_alg=id_token_signed_response_alg,
        )
