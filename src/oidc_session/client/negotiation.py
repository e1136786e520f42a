"""Capability negotiation between local configuration and provider metadata.

All checks are *soft*: providers frequently publish incomplete capability
lists, so a mismatch is reported and the client is built anyway.
"""

from __future__ import annotations

from oidc_session.client.models import CapabilityMismatch, ProviderMetadata
from oidc_session.config import ClientConfig


def normalize_response_type(value: str) -> str:
    """Return *value* with its space-delimited tokens sorted.

    >>> normalize_response_type("id_token  code")
    'code id_token'
    """
    return " ".join(sorted(value.split()))


def negotiate_capabilities(
    config: ClientConfig, metadata: ProviderMetadata
) -> list[CapabilityMismatch]:
    """Compare *config* with *metadata* and return every mismatch found."""
    mismatches: list[CapabilityMismatch] = []

    algs = metadata.id_token_signing_alg_values_supported
    if config.id_token_signing_alg not in algs:
        mismatches.append(
            CapabilityMismatch("id_token_signing_alg", config.id_token_signing_alg, algs)
        )

    response_type = normalize_response_type(config.response_type)
    response_types = tuple(
        normalize_response_type(rt) for rt in metadata.response_types_supported
    )
    if response_type not in response_types:
        mismatches.append(
            CapabilityMismatch("response_type", response_type, response_types)
        )

    modes = metadata.response_modes_supported
    if config.response_mode and config.response_mode not in modes:
        mismatches.append(
            CapabilityMismatch("response_mode", config.response_mode, modes)
        )

    return mismatches
