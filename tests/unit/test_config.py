"""Tests for ClientConfig.from_env parsing."""

from __future__ import annotations

import pytest

from oidc_session.config import ClientConfig

_VARS = (
    "ISSUER_BASE_URL",
    "CLIENT_ID",
    "CLIENT_SECRET",
    "ID_TOKEN_SIGNING_ALG",
    "RESPONSE_TYPE",
    "RESPONSE_MODE",
    "CLOCK_TOLERANCE",
    "ENABLE_TELEMETRY",
    "IDP_LOGOUT",
    "AUTH0_LOGOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(f"OIDC_{name}", raising=False)


def test_missing_required_vars_returns_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OIDC_ISSUER_BASE_URL", "https://idp.example")
    assert ClientConfig.from_env() is None


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OIDC_ISSUER_BASE_URL", "https://idp.example")
    monkeypatch.setenv("OIDC_CLIENT_ID", "cid")

    cfg = ClientConfig.from_env()
    assert cfg == ClientConfig(issuer_base_url="https://idp.example", client_id="cid")
    assert cfg.response_mode == "form_post"
    assert cfg.enable_telemetry is True
    assert cfg.idp_logout is False


def test_all_fields(monkeypatch: pytest.MonkeyPatch) -> None:
    env = {
        "ISSUER_BASE_URL": "https://tenant.auth0.com",
        "CLIENT_ID": "cid",
        "CLIENT_SECRET": "sec",
        "ID_TOKEN_SIGNING_ALG": "HS256",
        "RESPONSE_TYPE": "id_token code",
        "RESPONSE_MODE": "",
        "CLOCK_TOLERANCE": "5",
        "ENABLE_TELEMETRY": "off",
        "IDP_LOGOUT": "yes",
        "AUTH0_LOGOUT": "1",
    }
    for key, value in env.items():
        monkeypatch.setenv(f"MYAPP_{key}", value)

    cfg = ClientConfig.from_env(prefix="MYAPP_")
    assert cfg is not None
    assert cfg.client_secret == "sec"
    assert cfg.id_token_signing_alg == "HS256"
    assert cfg.response_type == "id_token code"
    assert cfg.response_mode is None
    assert cfg.clock_tolerance == 5
    assert cfg.enable_telemetry is False
    assert cfg.idp_logout is True
    assert cfg.auth0_logout is True
