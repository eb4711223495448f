"""Runtime configuration model for nftsync.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_GATEWAY_URL_TEMPLATE,
    DEFAULT_PACING_SECONDS,
    GATEWAY_IDENTIFIER_PLACEHOLDER,
)
from core.errors import NftSyncConfigError


@dataclass(frozen=True)
class NftSyncConfig:
    """Validated runtime configuration.

    Attributes:
        gateway_url_template: Gateway URL containing an ``{identifier}`` slot.
        pacing_seconds: Delay applied after each processed record.
        request_timeout_seconds: Optional HTTP timeout, ``None`` for no timeout.
    """

    gateway_url_template: str
    pacing_seconds: float
    request_timeout_seconds: float | None

    @classmethod
    def from_env(cls) -> "NftSyncConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            NftSyncConfigError: If environment values are invalid.
        """
        gateway_url_template = os.getenv("NFTSYNC_GATEWAY_URL", DEFAULT_GATEWAY_URL_TEMPLATE)
        pacing_value = os.getenv("NFTSYNC_PACING_SECONDS", str(DEFAULT_PACING_SECONDS))
        timeout_value = os.getenv("NFTSYNC_REQUEST_TIMEOUT")
        return cls(
            gateway_url_template=validate_gateway_url_template(gateway_url_template),
            pacing_seconds=parse_pacing_seconds(pacing_value),
            request_timeout_seconds=_parse_request_timeout(timeout_value),
        )


def validate_gateway_url_template(raw_value: str) -> str:
    """Check that a gateway URL template can receive an identifier.

    Args:
        raw_value: Template string from environment or CLI.

    Returns:
        The unchanged template.

    Raises:
        NftSyncConfigError: If the identifier placeholder is missing.
    """
    if GATEWAY_IDENTIFIER_PLACEHOLDER not in raw_value:
        raise NftSyncConfigError(
            f"Invalid gateway URL '{raw_value}': expected a "
            f"'{GATEWAY_IDENTIFIER_PLACEHOLDER}' placeholder, "
            "for example https://ipfs.io/ipfs/{identifier}."
        )
    return raw_value


def parse_pacing_seconds(raw_value: str) -> float:
    """Parse the pacing delay value.

    Args:
        raw_value: Raw string from environment or CLI.

    Returns:
        Non-negative delay in seconds.

    Raises:
        NftSyncConfigError: If value is not a non-negative number.
    """
    try:
        pacing_seconds = float(raw_value)
    except ValueError as error:
        raise NftSyncConfigError(
            f"Invalid NFTSYNC_PACING_SECONDS value '{raw_value}': expected a number."
        ) from error
    if pacing_seconds < 0:
        raise NftSyncConfigError(
            f"Invalid NFTSYNC_PACING_SECONDS value '{raw_value}': must be >= 0."
        )
    return pacing_seconds


def _parse_request_timeout(raw_value: str | None) -> float | None:
    """Parse the optional request timeout value."""
    if raw_value is None or not raw_value.strip():
        return None
    try:
        timeout_seconds = float(raw_value)
    except ValueError as error:
        raise NftSyncConfigError(
            f"Invalid NFTSYNC_REQUEST_TIMEOUT value '{raw_value}': expected a number."
        ) from error
    if timeout_seconds <= 0:
        raise NftSyncConfigError(
            f"Invalid NFTSYNC_REQUEST_TIMEOUT value '{raw_value}': must be > 0."
        )
    return timeout_seconds
