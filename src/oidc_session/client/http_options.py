"""Transport customization for outbound provider calls.

Every request the core (or the returned client) sends to the identity provider
carries:

1. a fixed ``User-Agent`` of the form ``oidc-session/<version>``
2. the ``Auth0-Client`` telemetry header – base64 encoded JSON naming this
   library, its version and the Python runtime – **only** when telemetry is
   enabled in the configuration
3. a fixed 5 second request timeout

The hook is a plain callable that maps request options to request options so
it can be attached to the discovery mechanism, an issuer and a client without
any of them sharing mutable state.
"""

from __future__ import annotations

import base64
import json
import platform
from typing import Any, Callable, Final

from oidc_session._version import DIST_NAME, __version__
from oidc_session.config import ClientConfig

HttpOptions = Callable[[dict[str, Any]], dict[str, Any]]

USER_AGENT: Final[str] = f"{DIST_NAME}/{__version__}"
TELEMETRY_HEADER: Final[str] = "Auth0-Client"
REQUEST_TIMEOUT: Final[float] = 5.0  # seconds


def telemetry_payload() -> dict[str, Any]:
    """Return the telemetry document identifying this library and runtime."""
    return {
        "name": DIST_NAME,
        "version": __version__,
        "env": {"python": platform.python_version()},
    }


def encode_telemetry(payload: dict[str, Any]) -> str:
    raw = json.dumps(payload, separators=(",", ":"))
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_telemetry(value: str) -> dict[str, Any]:
    """Inverse of :func:`encode_telemetry`."""
    return json.loads(base64.b64decode(value).decode("utf-8"))


def build_http_options(config: ClientConfig) -> HttpOptions:
    """Return the request-options hook for *config*.

    The hook returns a new mapping; the caller's ``headers`` are kept and the
    library headers win on conflict.
    """
    library_headers = {"User-Agent": USER_AGENT}
    if config.enable_telemetry:
        library_headers[TELEMETRY_HEADER] = encode_telemetry(telemetry_payload())

    def http_options(options: dict[str, Any]) -> dict[str, Any]:
        merged = dict(options)
        merged["headers"] = {**(options.get("headers") or {}), **library_headers}
        merged["timeout"] = REQUEST_TIMEOUT
        return merged

    return http_options


def apply_http_options(target: Any, hook: HttpOptions) -> None:
    """Attach *hook* to a discovered issuer or a client.

    This is the only place the core sets the hook on an object it did not
    create itself.
    """
    target.http_options = hook
