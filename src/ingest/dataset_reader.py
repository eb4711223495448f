"""Dataset readers for the record store.

This module loads NFT records from JSON documents or TypeScript
dataset modules and normalizes them into typed, read-only records.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import yaml

from core.constants import COLLECTION_EXPORT_NAME, SUPPORTED_DATASET_EXTENSIONS
from core.errors import NftSyncDatasetError
from core.types import NftRecord
from store.record_payload import nft_record_from_payload

_EXPORT_PATTERN = re.compile(
    rf"export\s+const\s+{COLLECTION_EXPORT_NAME}\s*(?::\s*[\w\[\]<>.]+\s*)?=\s*"
)
_CLOSING_BRACKETS = {"[": "]", "{": "}"}


def read_nft_records(dataset_path: Path) -> list[NftRecord]:
    """Load dataset records from a local file.

    Args:
        dataset_path: ``.json`` document or ``.ts`` dataset module.

    Returns:
        Ordered list of records.

    Raises:
        NftSyncDatasetError: If the file is missing, unreadable, or malformed.
    """
    source_path = Path(dataset_path).expanduser()
    suffix = source_path.suffix.lower()
    if suffix not in SUPPORTED_DATASET_EXTENSIONS:
        raise NftSyncDatasetError(
            f"Unsupported dataset file {source_path}: expected one of "
            f"{SUPPORTED_DATASET_EXTENSIONS}."
        )
    text = _read_text(source_path)
    if suffix == ".json":
        payload = _parse_json_document(source_path, text)
    else:
        payload = _parse_typescript_module(source_path, text)
    return _records_from_payload(source_path, payload)


def _read_text(source_path: Path) -> str:
    if not source_path.exists():
        raise NftSyncDatasetError(
            f"Failed to read dataset at {source_path}: path does not exist. "
            "Provide an existing dataset file."
        )
    try:
        return source_path.read_text(encoding="utf-8")
    except OSError as error:
        raise NftSyncDatasetError(
            f"Failed to read dataset at {source_path}: {error}."
        ) from error


def _parse_json_document(source_path: Path, text: str) -> object:
    """Parse a JSON dataset document.

    Accepts a bare array or an object holding the array under the
    collection export name.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise NftSyncDatasetError(
            f"Failed to parse JSON dataset at {source_path}: {error.msg} "
            f"(line {error.lineno}). Fix the JSON syntax and retry."
        ) from error
    if isinstance(payload, dict):
        return payload.get(COLLECTION_EXPORT_NAME)
    return payload


def _parse_typescript_module(source_path: Path, text: str) -> object:
    """Parse the exported collection literal of a TypeScript dataset module.

    Literals written as JSON are parsed strictly. Anything else is read
    with YAML flow syntax, which accepts the unquoted keys and trailing
    commas common in hand-written modules.
    """
    match = _EXPORT_PATTERN.search(text)
    if match is None:
        raise NftSyncDatasetError(
            f"Dataset module {source_path} does not export '{COLLECTION_EXPORT_NAME}'. "
            f"Declare 'export const {COLLECTION_EXPORT_NAME}: NftData[] = [...]'."
        )
    literal, has_single_quoted_escape = _extract_literal(source_path, text, match.end())
    try:
        return json.loads(literal)
    except json.JSONDecodeError:
        pass
    if has_single_quoted_escape:
        raise NftSyncDatasetError(
            f"Dataset module {source_path}: single-quoted strings with backslash escapes "
            "are not supported. Use double quotes for escaped values."
        )
    try:
        return yaml.safe_load(literal)
    except yaml.YAMLError as error:
        raise NftSyncDatasetError(
            f"Failed to parse '{COLLECTION_EXPORT_NAME}' literal in {source_path}: {error}"
        ) from error


def _extract_literal(source_path: Path, text: str, start: int) -> tuple[str, bool]:
    """Return the bracketed literal starting at ``start``.

    Brackets inside quoted strings are ignored. The flag reports whether a
    single-quoted string contains a backslash escape, which YAML would keep
    verbatim instead of decoding.
    """
    if start >= len(text) or text[start] not in _CLOSING_BRACKETS:
        raise NftSyncDatasetError(
            f"Dataset module {source_path}: '{COLLECTION_EXPORT_NAME}' must be an array literal."
        )
    expected_closers: list[str] = []
    quote: str | None = None
    escaped = False
    has_single_quoted_escape = False
    for index in range(start, len(text)):
        char = text[index]
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
                has_single_quoted_escape = has_single_quoted_escape or quote == "'"
            elif char == quote:
                quote = None
            continue
        if char in ("'", '"'):
            quote = char
        elif char in _CLOSING_BRACKETS:
            expected_closers.append(_CLOSING_BRACKETS[char])
        elif expected_closers and char == expected_closers[-1]:
            expected_closers.pop()
            if not expected_closers:
                return text[start : index + 1], has_single_quoted_escape
    raise NftSyncDatasetError(
        f"Dataset module {source_path}: unterminated '{COLLECTION_EXPORT_NAME}' literal."
    )


def _records_from_payload(source_path: Path, payload: object) -> list[NftRecord]:
    if not isinstance(payload, list):
        raise NftSyncDatasetError(
            f"Invalid dataset at {source_path}: expected a list of records "
            f"under '{COLLECTION_EXPORT_NAME}'."
        )
    records: list[NftRecord] = []
    for index, item in enumerate(payload):
        try:
            records.append(nft_record_from_payload(item))
        except ValueError as error:
            raise NftSyncDatasetError(
                f"Invalid record at {source_path}[{index}]: {error}."
            ) from error
    return records
