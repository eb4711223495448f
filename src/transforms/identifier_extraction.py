"""Content identifier helpers.

This module turns gateway image URIs into bare content identifiers.
"""

from __future__ import annotations

from core.constants import IPFS_SCHEME_PREFIX


def extract_bare_identifier(uri: str, prefix: str = IPFS_SCHEME_PREFIX) -> str:
    """Strip the content scheme prefix from a URI.

    Args:
        uri: Resolved image URI, e.g. ``ipfs://bafkrei...``.
        prefix: Scheme prefix to remove.

    Returns:
        The identifier without prefix, or ``uri`` unchanged when the
        prefix is absent.
    """
    return uri.removeprefix(prefix)
