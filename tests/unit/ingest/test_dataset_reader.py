"""Unit tests for dataset reader module."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import NftSyncDatasetError
from core.types import NftAttribute
from ingest.dataset_reader import read_nft_records
from tests.fixture_paths import fixture_path


def test_read_nft_records_parses_typescript_module() -> None:
    """Reader should load a hand-written module with unquoted keys."""
    records = read_nft_records(fixture_path("datasets/nft_datas.ts"))

    assert [record.record_id for record in records] == [1, 2, 3]
    assert records[0].image_id == "bafkreimetadataone"
    assert records[0].attributes[0] == NftAttribute(
        attribute_type="Background", value="Blue [deep]", rarity=12
    )
    assert records[1].attributes == ()
    assert records[2].percentage == 2.5


def test_read_nft_records_parses_json_collection_object() -> None:
    """Reader should accept a JSON object keyed by the collection name."""
    records = read_nft_records(fixture_path("datasets/nft_datas.json"))

    assert [record.image_id for record in records] == ["bafkreijsonseven", "bafkreijsoneight"]


def test_read_nft_records_parses_bare_json_array(tmp_path: Path) -> None:
    """Reader should accept a top-level JSON array."""
    dataset_path = tmp_path / "records.json"
    dataset_path.write_text(
        '[{"id": 5, "imageId": "bafkreifive", "rarity": 5, '
        '"attributes": [], "percentage": 1.0}]',
        encoding="utf-8",
    )

    records = read_nft_records(dataset_path)

    assert len(records) == 1 and records[0].record_id == 5


def test_read_nft_records_raises_for_missing_path(tmp_path: Path) -> None:
    """Reader should fail when the dataset file is missing."""
    missing_path = tmp_path / "missing.ts"

    with pytest.raises(NftSyncDatasetError, match="does not exist"):
        read_nft_records(missing_path)


def test_read_nft_records_raises_for_unsupported_extension(tmp_path: Path) -> None:
    """Reader should reject file types it cannot parse."""
    dataset_path = tmp_path / "records.csv"
    dataset_path.write_text("id,imageId\n", encoding="utf-8")

    with pytest.raises(NftSyncDatasetError, match="Unsupported"):
        read_nft_records(dataset_path)


def test_read_nft_records_raises_for_module_without_export() -> None:
    """Reader should fail when the module does not export the collection."""
    with pytest.raises(NftSyncDatasetError, match="does not export"):
        read_nft_records(fixture_path("datasets/no_export.ts"))


def test_read_nft_records_raises_for_shape_mismatch() -> None:
    """Reader should name the offending record position and field."""
    with pytest.raises(NftSyncDatasetError, match=r"\[1\].*'id'"):
        read_nft_records(fixture_path("datasets/bad_shape.json"))


def test_read_nft_records_raises_for_unterminated_literal(tmp_path: Path) -> None:
    """Reader should fail for a truncated collection literal."""
    dataset_path = tmp_path / "truncated.ts"
    dataset_path.write_text(
        'export const nftDatas: NftData[] = [{"id": 1, "imageId": "x"',
        encoding="utf-8",
    )

    with pytest.raises(NftSyncDatasetError, match="unterminated"):
        read_nft_records(dataset_path)


def test_read_nft_records_rejects_single_quoted_escapes(tmp_path: Path) -> None:
    """Reader should refuse escapes that YAML would keep as literal backslashes."""
    dataset_path = tmp_path / "escaped.ts"
    dataset_path.write_text(
        "export const nftDatas: NftData[] = [\n"
        "  { id: 1, imageId: 'bafkrei', rarity: 1, percentage: 1,\n"
        "    attributes: [{ type: 'Note', value: 'a\\nb', rarity: 1 }] },\n"
        "];\n",
        encoding="utf-8",
    )

    with pytest.raises(NftSyncDatasetError, match="backslash escapes"):
        read_nft_records(dataset_path)


def test_read_nft_records_accepts_plain_single_quoted_strings(tmp_path: Path) -> None:
    """Reader should load single-quoted strings that carry no escapes."""
    dataset_path = tmp_path / "quoted.ts"
    dataset_path.write_text(
        "export const nftDatas: NftData[] = [\n"
        "  { id: 1, imageId: 'bafkrei', rarity: 1, percentage: 1,\n"
        "    attributes: [{ type: 'Note', value: 'path [a/b]', rarity: 1 }] },\n"
        "];\n",
        encoding="utf-8",
    )

    records = read_nft_records(dataset_path)

    assert records[0].image_id == "bafkrei"
    assert records[0].attributes[0].value == "path [a/b]"
