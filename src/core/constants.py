"""Core constants used across nftsync modules.

This module centralizes defaults and fixed names for the update pass.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_GATEWAY_URL_TEMPLATE = "https://ipfs.io/ipfs/{identifier}"
GATEWAY_IDENTIFIER_PLACEHOLDER = "{identifier}"
IPFS_SCHEME_PREFIX = "ipfs://"
DEFAULT_PACING_SECONDS = 0.1
DEFAULT_INPUT_PATH = Path("nftDatas.ts")
DEFAULT_OUTPUT_PATH = Path("nftDatas-updated.ts")
COLLECTION_EXPORT_NAME = "nftDatas"
ATTRIBUTE_TYPE_NAME = "NftAttribute"
RECORD_TYPE_NAME = "NftData"
TYPESCRIPT_FORMAT = "ts"
JSON_FORMAT = "json"
SUPPORTED_OUTPUT_FORMATS = (TYPESCRIPT_FORMAT, JSON_FORMAT)
SUPPORTED_DATASET_EXTENSIONS = (".ts", ".json")
SUMMARY_EXAMPLE_COUNT = 3
JSON_INDENT = 2
