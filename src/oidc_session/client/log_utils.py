"""Structured logging helpers for the client-factory core.

This module restricts **which** contextual attributes are attached to log
records so that credentials never leak into logs.  The helpers ONLY inject
the following *non-sensitive* fields:

- ``issuer``     – The configured issuer base URL
- ``client_id``  – The OAuth client identifier (first 4 chars kept)

Usage
-----
>>> from oidc_session.client.log_utils import get_client_logger
>>> log = get_client_logger(
...     base_logger_name="oidc-session.client.factory",
...     issuer="https://tenant.example.com/",
...     client_id="abc123",
... )
>>> log.debug("Discovered issuer")
DEBUG oidc-session.client.factory issuer=https://tenant.example.com/ client_id=abc1**** ...

The adapter is a thin wrapper around :class:`logging.LoggerAdapter`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping


def mask_sensitive(value: str | None, keep: int = 4) -> str:
    """Return *value* with everything after the first *keep* chars masked."""
    if not value:
        return "-"
    if len(value) <= keep:
        return "*" * len(value)
    return f"{value[:keep]}****"


class _ClientLoggerAdapter(logging.LoggerAdapter):
    """Inject whitelisted client context into log records."""

    extra_keys = ("issuer", "client_id")

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        extra_clean: MutableMapping[str, Any] = {}
        for k in self.extra_keys:
            if not extra or extra.get(k) is None:
                continue
            if k == "client_id":
                extra_clean[k] = mask_sensitive(str(extra[k]))
            else:
                extra_clean[k] = extra[k]
        super().__init__(logger, extra_clean)

    def process(self, msg: str, kwargs: MutableMapping[str, Any]):
        if "extra" not in kwargs or kwargs["extra"] is None:
            kwargs["extra"] = {}
        # merge but do not overwrite call-site provided extras
        for k, v in self.extra.items():
            kwargs["extra"].setdefault(k, v)
        return msg, kwargs


def get_client_logger(
    *,
    base_logger_name: str = "oidc-session.client",
    issuer: str | None = None,
    client_id: str | None = None,
) -> logging.LoggerAdapter:
    """Return a LoggerAdapter pre-filled with client context."""
    logger = logging.getLogger(base_logger_name)
    return _ClientLoggerAdapter(logger, {"issuer": issuer, "client_id": client_id})
