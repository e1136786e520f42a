"""ClientFactory – lazily built, memoized identity-provider client.

The first :meth:`ClientFactory.get_client` call discovers the provider,
negotiates capabilities, builds the :class:`~oidc_session.client.handle.Client`
and caches it on the factory instance.  Every later call returns the cached
handle without touching the network.

Concurrent first calls are coalesced: they all await the same in-flight task,
so at most one discovery runs per factory.  A failed discovery leaves the
cache empty and the next call starts over.

A factory is bound to the event loop that first awaits it.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from oidc_session.client.handle import Client
from oidc_session.client.http_options import apply_http_options, build_http_options
from oidc_session.client.issuer import Issuer
from oidc_session.client.log_utils import get_client_logger
from oidc_session.client.logout import install_logout_shim
from oidc_session.client.negotiation import negotiate_capabilities
from oidc_session.config import ClientConfig

_LOGGER_NAME = "oidc-session.client.factory"


class ClientFactory:
    """Build one :class:`Client` for *config* and hand out the same instance."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._transport = transport
        self._http_options = build_http_options(config)
        self._client: Client | None = None
        self._inflight: asyncio.Task[Client] | None = None
        self._log = get_client_logger(
            base_logger_name=_LOGGER_NAME,
            issuer=config.issuer_base_url,
            client_id=config.client_id,
        )

    @property
    def is_ready(self) -> bool:
        """*True* once a client has been built and cached."""
        return self._client is not None

    async def get_client(self) -> Client:
        """Return the cached client, building it on first use.

        Raises
        ------
        DiscoveryError
            If the provider's discovery document cannot be loaded.
        """
        if self._client is not None:
            return self._client
        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._build())
            self._inflight.add_done_callback(self._log_outcome)
        # shield: a cancelled caller must not cancel the shared build
        return await asyncio.shield(self._inflight)

    __call__ = get_client

    def _log_outcome(self, task: asyncio.Task[Client]) -> None:
        # retrieve the outcome even when every caller was cancelled
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._log.debug("Client build failed: %s", exc)

    async def _build(self) -> Client:
        try:
            client = await self._construct()
            self._client = client
            return client
        finally:
            self._inflight = None

    async def _construct(self) -> Client:
        config = self.config
        log = self._log

        issuer = await Issuer.discover(
            config.issuer_base_url,
            http_options=self._http_options,
            transport=self._transport,
        )
        apply_http_options(issuer, self._http_options)

        for mismatch in negotiate_capabilities(config, issuer.metadata):
            log.debug(
                "CapabilityMismatch: %s %r is not supported by the issuer. "
                "Supported values are: %r.",
                mismatch.capability,
                mismatch.configured,
                list(mismatch.supported),
                extra={
                    "capability": mismatch.capability,
                    "configured": mismatch.configured,
                    "supported": list(mismatch.supported),
                },
            )

        client = issuer.client(
            client_id=config.client_id,
            client_secret=config.client_secret,
            id_token_signed_response_alg=config.id_token_signing_alg,
        )
        apply_http_options(client, self._http_options)
        client.clock_tolerance = config.clock_tolerance

        install_logout_shim(client, config, log)

        log.debug("Client ready for issuer %s", issuer.issuer)
        return client


def get_client_factory(
    config: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None
) -> ClientFactory:
    """Return a new :class:`ClientFactory` for *config*."""
    return ClientFactory(config, transport=transport)
