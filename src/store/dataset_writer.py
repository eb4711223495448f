"""Dataset persistence for updated records.

This module renders records as a self-contained TypeScript dataset
module or a JSON document and writes the result in one pass.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.constants import (
    ATTRIBUTE_TYPE_NAME,
    COLLECTION_EXPORT_NAME,
    JSON_FORMAT,
    JSON_INDENT,
    RECORD_TYPE_NAME,
    SUPPORTED_OUTPUT_FORMATS,
    TYPESCRIPT_FORMAT,
)
from core.errors import NftSyncStoreError
from core.logging_config import get_logger
from core.types import NftRecord
from store.record_payload import nft_record_to_payload

_LOGGER = get_logger(__name__)

_TYPESCRIPT_HEADER = f"""interface {ATTRIBUTE_TYPE_NAME} {{
  type: string;
  value: string;
  rarity: number;
}}

export interface {RECORD_TYPE_NAME} {{
  id: number;
  imageId: string;
  rarity: number;
  attributes: {ATTRIBUTE_TYPE_NAME}[];
  percentage: number;
}}
"""


def render_typescript_module(records: Sequence[NftRecord]) -> str:
    """Render records as a drop-in TypeScript dataset module.

    Args:
        records: Records in output order.

    Returns:
        Module source declaring both types and the exported collection.
    """
    payloads = [_javascript_numbers(nft_record_to_payload(record)) for record in records]
    literal = json.dumps(payloads, indent=JSON_INDENT, ensure_ascii=False)
    return (
        f"{_TYPESCRIPT_HEADER}\n"
        f"export const {COLLECTION_EXPORT_NAME}: {RECORD_TYPE_NAME}[] = {literal};\n"
    )


def render_json_document(records: Sequence[NftRecord]) -> str:
    """Render records as an indented JSON array."""
    payloads = [nft_record_to_payload(record) for record in records]
    return json.dumps(payloads, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def save_nft_records(
    records: Sequence[NftRecord],
    output_path: Path,
    output_format: str = TYPESCRIPT_FORMAT,
) -> bool:
    """Write records to ``output_path``, replacing any previous content.

    Args:
        records: Records in output order.
        output_path: Destination file.
        output_format: ``ts`` or ``json``.

    Returns:
        True when the file was written, False when the write failed.

    Raises:
        NftSyncStoreError: If ``output_format`` is unsupported.
    """
    content = _render(records, output_format)
    try:
        Path(output_path).write_text(content, encoding="utf-8")
    except OSError as error:
        _LOGGER.error(
            "dataset_save_failed",
            output_path=str(output_path),
            error=str(error),
        )
        return False
    _LOGGER.info(
        "dataset_saved",
        output_path=str(output_path),
        output_format=output_format,
        record_count=len(records),
    )
    return True


def _render(records: Sequence[NftRecord], output_format: str) -> str:
    if output_format == TYPESCRIPT_FORMAT:
        return render_typescript_module(records)
    if output_format == JSON_FORMAT:
        return render_json_document(records)
    raise NftSyncStoreError(
        f"Unsupported output format '{output_format}'. "
        f"Use one of: {', '.join(SUPPORTED_OUTPUT_FORMATS)}."
    )


def _javascript_numbers(value: object) -> object:
    """Render integral floats as integers, as JavaScript prints them."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _javascript_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_javascript_numbers(item) for item in value]
    return value
