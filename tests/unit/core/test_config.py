"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import NftSyncConfig
from core.constants import DEFAULT_GATEWAY_URL_TEMPLATE, DEFAULT_PACING_SECONDS
from core.errors import NftSyncConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to the public gateway and default pacing."""
    monkeypatch.delenv("NFTSYNC_GATEWAY_URL", raising=False)
    monkeypatch.delenv("NFTSYNC_PACING_SECONDS", raising=False)
    monkeypatch.delenv("NFTSYNC_REQUEST_TIMEOUT", raising=False)

    config = NftSyncConfig.from_env()

    assert config.gateway_url_template == DEFAULT_GATEWAY_URL_TEMPLATE
    assert config.pacing_seconds == DEFAULT_PACING_SECONDS
    assert config.request_timeout_seconds is None


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read gateway, pacing, and timeout from environment."""
    monkeypatch.setenv("NFTSYNC_GATEWAY_URL", "https://gw.example/ipfs/{identifier}")
    monkeypatch.setenv("NFTSYNC_PACING_SECONDS", "0.5")
    monkeypatch.setenv("NFTSYNC_REQUEST_TIMEOUT", "12")

    config = NftSyncConfig.from_env()

    assert config.gateway_url_template == "https://gw.example/ipfs/{identifier}"
    assert config.pacing_seconds == 0.5
    assert config.request_timeout_seconds == 12.0


def test_from_env_raises_for_gateway_without_placeholder(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Config should reject gateway templates with no identifier slot."""
    monkeypatch.setenv("NFTSYNC_GATEWAY_URL", "https://gw.example/ipfs/")

    with pytest.raises(NftSyncConfigError):
        NftSyncConfig.from_env()


@pytest.mark.parametrize("raw_value", ["soon", "-1"])
def test_from_env_raises_for_invalid_pacing(
    monkeypatch: pytest.MonkeyPatch,
    raw_value: str,
) -> None:
    """Config should fail for non-numeric or negative pacing."""
    monkeypatch.setenv("NFTSYNC_PACING_SECONDS", raw_value)

    with pytest.raises(NftSyncConfigError):
        NftSyncConfig.from_env()


def test_from_env_raises_for_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail when a timeout is set to zero."""
    monkeypatch.setenv("NFTSYNC_REQUEST_TIMEOUT", "0")

    with pytest.raises(NftSyncConfigError):
        NftSyncConfig.from_env()
