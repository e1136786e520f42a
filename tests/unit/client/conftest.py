"""Fixtures faking an identity provider's discovery endpoint."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest

from oidc_session.config import ClientConfig

ISSUER = "https://login.example.com/"
CLIENT_ID = "abc123"
CLIENT_SECRET = "s3cr3t"


def _discovery_document(**overrides: Any) -> dict[str, Any]:
    """Return a compliant discovery document; ``None`` overrides drop a key."""
    doc: dict[str, Any] = {
        "issuer": ISSUER,
        "authorization_endpoint": f"{ISSUER}authorize",
        "token_endpoint": f"{ISSUER}oauth/token",
        "userinfo_endpoint": f"{ISSUER}userinfo",
        "jwks_uri": f"{ISSUER}.well-known/jwks.json",
        "id_token_signing_alg_values_supported": ["RS256", "HS256"],
        "response_types_supported": ["code", "id_token", "code id_token"],
        "response_modes_supported": ["query", "fragment", "form_post"],
    }
    doc.update(overrides)
    return {k: v for k, v in doc.items() if v is not None}


def _make_config(**overrides: Any) -> ClientConfig:
    kwargs: dict[str, Any] = {
        "issuer_base_url": ISSUER,
        "client_id": CLIENT_ID,
        "client_secret": CLIENT_SECRET,
    }
    kwargs.update(overrides)
    return ClientConfig(**kwargs)


class FakeProvider:
    """Serve a discovery document through :class:`httpx.MockTransport`."""

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        self.document: Any = document if document is not None else _discovery_document()
        self.status_code = 200
        self.body: bytes | None = None
        self.error: Exception | None = None
        self.delay = 0.0
        self.requests: list[httpx.Request] = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.document)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def discovery_document():
    """Builder for discovery documents; ``None`` overrides drop a key."""
    return _discovery_document


@pytest.fixture
def make_config():
    """Builder for a ClientConfig pointing at the fake provider."""
    return _make_config
