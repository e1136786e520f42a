"""Typed, immutable records used by the client-factory core."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _str_tuple(value: Any) -> tuple[str, ...]:
    # Providers omit or mistype capability lists; both count as "none advertised".
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(v) for v in value)


def _opt_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


@dataclass(frozen=True, slots=True)
class ProviderMetadata:
    """Subset of the provider discovery document the core relies on."""

    issuer: str
    authorization_endpoint: str | None = None
    token_endpoint: str | None = None
    userinfo_endpoint: str | None = None
    jwks_uri: str | None = None
    end_session_endpoint: str | None = None
    id_token_signing_alg_values_supported: tuple[str, ...] = ()
    response_types_supported: tuple[str, ...] = ()
    response_modes_supported: tuple[str, ...] = ()
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> ProviderMetadata:
        """Build metadata from a decoded discovery document.

        Raises
        ------
        ValueError
            If the document carries no ``issuer`` string.
        """
        issuer = doc.get("issuer")
        if not isinstance(issuer, str) or not issuer:
            raise ValueError("discovery document has no issuer")
        return cls(
            issuer=issuer,
            authorization_endpoint=_opt_str(doc.get("authorization_endpoint")),
            token_endpoint=_opt_str(doc.get("token_endpoint")),
            userinfo_endpoint=_opt_str(doc.get("userinfo_endpoint")),
            jwks_uri=_opt_str(doc.get("jwks_uri")),
            end_session_endpoint=_opt_str(doc.get("end_session_endpoint")),
            id_token_signing_alg_values_supported=_str_tuple(
                doc.get("id_token_signing_alg_values_supported")
            ),
            response_types_supported=_str_tuple(doc.get("response_types_supported")),
            response_modes_supported=_str_tuple(doc.get("response_modes_supported")),
            raw=dict(doc),
        )


@dataclass(frozen=True, slots=True)
class CapabilityMismatch:
    """A configured parameter the provider does not advertise (never raised)."""

    capability: str
    configured: str
    supported: tuple[str, ...]
