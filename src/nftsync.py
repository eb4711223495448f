"""Public SDK surface for nftsync.

This module provides a stable import path for library users.
It re-exports the update pass, its building blocks, and typed models.
"""

from __future__ import annotations

from core.config import NftSyncConfig
from core.types import (
    ImageIdUpdateOptions,
    ImageIdUpdateResult,
    NftAttribute,
    NftRecord,
    ResolvedMetadata,
)
from gateway.metadata_resolver import GatewayMetadataResolver, MetadataResolver
from ingest.dataset_reader import read_nft_records
from ingest.pipeline import run_image_id_update, update_image_ids
from store.dataset_writer import save_nft_records
from transforms.identifier_extraction import extract_bare_identifier

__all__ = [
    "GatewayMetadataResolver",
    "ImageIdUpdateOptions",
    "ImageIdUpdateResult",
    "MetadataResolver",
    "NftAttribute",
    "NftRecord",
    "NftSyncConfig",
    "ResolvedMetadata",
    "extract_bare_identifier",
    "read_nft_records",
    "run_image_id_update",
    "save_nft_records",
    "update_image_ids",
]
