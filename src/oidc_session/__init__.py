"""Lazily discovered, memoized OpenID Connect client for web applications."""

from __future__ import annotations

from ._version import __version__  # noqa: F401
from .client import Client, ClientFactory, DiscoveryError, get_client_factory, supports_logout  # noqa: F401
from .config import ClientConfig  # noqa: F401

__all__ = [
    "__version__",
    "Client",
    "ClientConfig",
    "ClientFactory",
    "DiscoveryError",
    "get_client_factory",
    "supports_logout",
]
