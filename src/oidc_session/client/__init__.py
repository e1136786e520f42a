"""Identity-provider client factory.

This namespace hosts the **HTTP-framework-agnostic** core that turns a static
:class:`~oidc_session.config.ClientConfig` into one ready-to-use client handle.

Sub-modules
-----------
factory
    Memoized, single-flight client construction.
issuer
    Discovery of the provider configuration document.
handle
    The client handle and its logout capability check.
negotiation
    Soft comparison of configuration against provider capabilities.
logout
    Logout URL shim for providers without an end-session endpoint.
http_options
    User-Agent, telemetry header and timeout for outbound requests.
models
    Immutable dataclasses for provider metadata and mismatch records.
errors
    Exception types raised by the core.
log_utils
    Structured logging helpers (thin wrapper around :pymod:`logging`).

All public objects are re-exported here for convenience.
"""

from __future__ import annotations

from .errors import DiscoveryError  # noqa: F401
from .handle import Client, supports_logout  # noqa: F401
from .http_options import build_http_options, decode_telemetry  # noqa: F401
from .issuer import Issuer, well_known_url  # noqa: F401
from .log_utils import get_client_logger  # noqa: F401
from .models import CapabilityMismatch, ProviderMetadata  # noqa: F401
from .negotiation import negotiate_capabilities, normalize_response_type  # noqa: F401
from .factory import ClientFactory, get_client_factory  # noqa: F401

__all__ = [
    # factory
    "ClientFactory",
    "get_client_factory",
    # discovery & handle
    "Issuer",
    "well_known_url",
    "Client",
    "supports_logout",
    # negotiation
    "negotiate_capabilities",
    "normalize_response_type",
    # transport
    "build_http_options",
    "decode_telemetry",
    # models
    "CapabilityMismatch",
    "ProviderMetadata",
    # errors
    "DiscoveryError",
    # logging helpers
    "get_client_logger",
]
