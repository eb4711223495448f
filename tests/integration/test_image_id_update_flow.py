"""Integration tests for the image id update workflow."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import httpx

from core.config import NftSyncConfig
from core.types import ImageIdUpdateOptions
from gateway.metadata_resolver import GatewayMetadataResolver
from ingest.dataset_reader import read_nft_records
from ingest.pipeline import run_image_id_update
from ingest.update_progress import UpdateProgressReporter
from tests.fixture_paths import fixture_path


def test_update_flow_resolves_through_gateway_and_reloads(tmp_path: Path) -> None:
    """End-to-end flow should resolve over HTTP and save a loadable module."""
    config = replace(
        NftSyncConfig.from_env(),
        gateway_url_template="https://gw.example/ipfs/{identifier}",
        pacing_seconds=0.0,
    )
    requested_paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested_paths.append(request.url.path)
        if request.url.path.endswith("two"):
            return httpx.Response(200, json={"name": "Two", "image": ""})
        return httpx.Response(200, json={"name": "Any", "image": "ipfs://bafkreiresolved"})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    source_path = fixture_path("datasets/nft_datas.ts")
    output_path = tmp_path / "nftDatas-updated.ts"
    lines: list[str] = []

    with GatewayMetadataResolver(config, client=client) as resolver:
        result = run_image_id_update(
            ImageIdUpdateOptions(input_path=source_path, output_path=output_path),
            config,
            resolver=resolver,
            reporter=UpdateProgressReporter(emit=lines.append),
        )

    original = read_nft_records(source_path)
    reloaded = read_nft_records(output_path)
    assert requested_paths == [
        "/ipfs/bafkreimetadataone",
        "/ipfs/bafkreimetadatatwo",
        "/ipfs/bafkreimetadatathree",
    ]
    assert [record.record_id for record in reloaded] == [1, 2, 3]
    assert reloaded[1] == original[1]
    assert reloaded[0] == replace(original[0], image_id="bafkreiresolved")
    assert result.updated_count == 2
    assert "✓ Updated data saved to " + str(output_path) in lines
