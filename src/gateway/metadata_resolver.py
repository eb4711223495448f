"""Metadata lookups against a content-addressed gateway.

This module fetches small JSON metadata documents by content identifier.
Failures are logged and reported as ``None`` so callers can keep going.
"""

from __future__ import annotations

from types import TracebackType
from typing import Protocol

import httpx

from core.config import NftSyncConfig
from core.constants import GATEWAY_IDENTIFIER_PLACEHOLDER
from core.logging_config import get_logger
from core.types import ResolvedMetadata

_LOGGER = get_logger(__name__)


class MetadataResolver(Protocol):
    """Anything that maps a content identifier to metadata."""

    def resolve(self, identifier: str) -> ResolvedMetadata | None:
        """Return metadata for ``identifier`` or ``None`` on failure."""
        ...


class GatewayMetadataResolver:
    """Resolve identifiers with one HTTP GET per lookup."""

    def __init__(self, config: NftSyncConfig, client: httpx.Client | None = None) -> None:
        self._url_template = config.gateway_url_template
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=config.request_timeout_seconds,
            follow_redirects=True,
        )

    def __enter__(self) -> "GatewayMetadataResolver":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client when this resolver created it."""
        if self._owns_client:
            self._client.close()

    def resolve(self, identifier: str) -> ResolvedMetadata | None:
        """Fetch and parse the metadata document for an identifier.

        Args:
            identifier: Content identifier substituted into the gateway URL.

        Returns:
            Parsed metadata, or ``None`` when the request or parsing fails.
        """
        url = build_metadata_url(self._url_template, identifier)
        _LOGGER.info("gateway_metadata_requested", identifier=identifier, url=url)
        try:
            response = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            _log_failure(identifier, f"request error: {error}")
            return None
        if not response.is_success:
            _log_failure(
                identifier,
                f"HTTP {response.status_code} {response.reason_phrase}",
            )
            return None
        try:
            payload = response.json()
        except ValueError as error:
            _log_failure(identifier, f"invalid JSON body: {error}")
            return None
        return _parse_metadata(identifier, payload)


def build_metadata_url(url_template: str, identifier: str) -> str:
    """Substitute an identifier verbatim into a gateway URL template.

    Args:
        url_template: Template containing ``{identifier}``.
        identifier: Content identifier, inserted without escaping.

    Returns:
        Request URL.
    """
    return url_template.replace(GATEWAY_IDENTIFIER_PLACEHOLDER, identifier)


def _parse_metadata(identifier: str, payload: object) -> ResolvedMetadata | None:
    """Validate the decoded metadata document shape."""
    if not isinstance(payload, dict):
        _log_failure(identifier, "metadata body is not a JSON object")
        return None
    image = payload.get("image")
    if not isinstance(image, str):
        _log_failure(identifier, "metadata has no string 'image' field")
        return None
    name = payload.get("name")
    return ResolvedMetadata(name=name if isinstance(name, str) else "", image=image)


def _log_failure(identifier: str, reason: str) -> None:
    _LOGGER.warning("gateway_metadata_failed", identifier=identifier, reason=reason)
