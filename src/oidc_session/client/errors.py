"""Exception types raised by the client-factory core.

Only discovery failures are fatal.  Capability mismatches and missing logout
support are reported as log lines (see :mod:`oidc_session.client.negotiation`
and :mod:`oidc_session.client.logout`) and never surface as exceptions.
"""

from __future__ import annotations


class DiscoveryError(RuntimeError):
    """Raised when the provider's discovery document cannot be fetched or parsed."""

    def __init__(
        self,
        *,
        issuer_base_url: str,
        reason: str,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message or f"Discovery failed for {issuer_base_url}: {reason}"
        )
        self.issuer_base_url: str = issuer_base_url
        self.reason: str = reason

    def to_payload(self) -> dict[str, str]:
        """Return a JSON-serialisable payload **without secrets**."""
        return {
            "error": "discovery_failed",
            "issuer_base_url": self.issuer_base_url,
            "reason": self.reason,
            "message": str(self),
        }
