"""
Unit tests for the outbound transport hook.

Coverage:
* User-Agent and 5s timeout always applied
* Telemetry header gated by configuration and decodable to JSON
* Hook never mutates its input and can be reapplied safely
"""

from __future__ import annotations

import platform

from oidc_session._version import __version__
from oidc_session.client.http_options import (
    REQUEST_TIMEOUT,
    TELEMETRY_HEADER,
    USER_AGENT,
    apply_http_options,
    build_http_options,
    decode_telemetry,
)


def test_user_agent_and_timeout(make_config) -> None:
    hook = build_http_options(make_config())
    options = hook({})
    assert options["headers"]["User-Agent"] == USER_AGENT == f"oidc-session/{__version__}"
    assert options["timeout"] == REQUEST_TIMEOUT == 5.0


def test_telemetry_disabled_never_sends_header(make_config) -> None:
    hook = build_http_options(make_config(enable_telemetry=False))
    options = hook({"headers": {"Accept": "application/json"}})
    assert TELEMETRY_HEADER not in options["headers"]


def test_telemetry_header_decodes(make_config) -> None:
    hook = build_http_options(make_config(enable_telemetry=True))
    header = hook({})["headers"][TELEMETRY_HEADER]
    assert decode_telemetry(header) == {
        "name": "oidc-session",
        "version": __version__,
        "env": {"python": platform.python_version()},
    }


def test_caller_headers_are_merged_not_mutated(make_config) -> None:
    hook = build_http_options(make_config())
    original = {"headers": {"Accept": "application/json"}, "follow_redirects": True}
    options = hook(original)
    assert original == {"headers": {"Accept": "application/json"}, "follow_redirects": True}
    assert options["headers"]["Accept"] == "application/json"
    assert options["follow_redirects"] is True


def test_reapplying_is_idempotent(make_config) -> None:
    hook = build_http_options(make_config())
    once = hook({"headers": {"X-Trace": "1"}})
    assert hook(once) == once


def test_apply_sets_hook_per_target(make_config) -> None:
    class _Target:
        http_options = None

    hook_a = build_http_options(make_config(enable_telemetry=True))
    hook_b = build_http_options(make_config(enable_telemetry=False))
    first, second = _Target(), _Target()
    apply_http_options(first, hook_a)
    apply_http_options(second, hook_b)
    assert first.http_options is hook_a
    assert second.http_options is hook_b
    assert _Target.http_options is None
