"""nftsync exception hierarchy.

This module defines the errors raised by config parsing, dataset loading,
and persistence. Gateway lookups report failure by returning None instead.
"""

from __future__ import annotations


class NftSyncError(Exception):
    """Base exception for all nftsync failures."""


class NftSyncConfigError(NftSyncError):
    """Raised for invalid runtime configuration."""


class NftSyncDatasetError(NftSyncError):
    """Raised when the input dataset cannot be read or has the wrong shape."""


class NftSyncStoreError(NftSyncError):
    """Raised for invalid persistence requests."""
