"""The client handle returned by the factory.

A :class:`Client` holds the registered credentials and the provider metadata.
Protocol work (authorization requests, token exchange, userinfo) is done by an
Authlib session obtained from :meth:`Client.oauth_session`.

``end_session_url`` is only present when the provider supports logout, either
through its advertised ``end_session_endpoint`` or through the vendor shim in
:mod:`oidc_session.client.logout`.  Use :func:`supports_logout` to check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from authlib.integrations.httpx_client import AsyncOAuth2Client

from oidc_session.client.http_options import HttpOptions

if TYPE_CHECKING:  # pragma: no cover
    from oidc_session.client.issuer import Issuer
    from oidc_session.client.models import ProviderMetadata


def supports_logout(client: Client) -> bool:
    """Return *True* if *client* can build a logout URL."""
    return callable(getattr(client, "end_session_url", None))


def _with_query(url: str, params: dict[str, Any]) -> str:
    parts = urlsplit(url)
    query = dict(parse_qsl(parts.query))
    query.update({k: v for k, v in params.items() if v is not None})
    return urlunsplit(parts._replace(query=urlencode(query)))


class Client:
    """Configured connection to one identity provider."""

    end_session_url: Callable[..., str]

    def __init__(
        self,
        issuer: Issuer,
        *,
        client_id: str,
        client_secret: str | None = None,
        id_token_signed_response_alg: str = "RS256",
    ) -> None:
        self.issuer = issuer
        self.client_id = client_id
        self.client_secret = client_secret
        self.id_token_signed_response_alg = id_token_signed_response_alg
        self.clock_tolerance: int = 0
        self.http_options: HttpOptions | None = issuer.http_options
        if issuer.metadata.end_session_endpoint:
            self.end_session_url = self._rp_initiated_logout_url

    def __repr__(self) -> str:
        return f"Client(issuer={self.issuer.issuer!r}, client_id={self.client_id!r})"

    @property
    def metadata(self) -> ProviderMetadata:
        return self.issuer.metadata

    def request_options(self, **options: Any) -> dict[str, Any]:
        """Return httpx request options passed through the transport hook."""
        if self.http_options is None:
            return options
        return self.http_options(options)

    def _rp_initiated_logout_url(
        self,
        post_logout_redirect_uri: str | None = None,
        *,
        id_token_hint: str | None = None,
        state: str | None = None,
        **extra: Any,
    ) -> str:
        return _with_query(
            self.issuer.metadata.end_session_endpoint or "",
            {
                **extra,
                "id_token_hint": id_token_hint,
                "post_logout_redirect_uri": post_logout_redirect_uri,
                "state": state,
                "client_id": self.client_id,
            },
        )

    def oauth_session(self, **kwargs: Any) -> AsyncOAuth2Client:
        """Return an Authlib session bound to this client's credentials.

        Extra keyword arguments (``scope``, ``redirect_uri``, ``token`` …) are
        forwarded to :class:`AsyncOAuth2Client`.  The caller owns the session
        and must close it.

        The session's ``leeway`` is the handle's clock tolerance, and the
        expected ID token algorithm and JWKS URI are recorded in its metadata.
        """
        kwargs.setdefault("leeway", self.clock_tolerance)
        if self.issuer.transport is not None:
            kwargs.setdefault("transport", self.issuer.transport)
        return AsyncOAuth2Client(
            client_id=self.client_id,
            client_secret=self.client_secret,
            token_endpoint=self.issuer.metadata.token_endpoint,
            jwks_uri=self.issuer.metadata.jwks_uri,
            id_token_signed_response_alg=self.id_token_signed_response_alg,
            **self.request_options(**kwargs),
        )
