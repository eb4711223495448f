"""Shared typed models.

This module defines immutable data models used by the ingest, gateway,
transform, and store layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.constants import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, TYPESCRIPT_FORMAT


@dataclass(frozen=True)
class NftAttribute:
    """One trait attached to a dataset record.

    Attributes:
        attribute_type: Trait category, serialized as ``type``.
        value: Trait value.
        rarity: Trait rarity score.
    """

    attribute_type: str
    value: str
    rarity: float


@dataclass(frozen=True)
class NftRecord:
    """Dataset record whose image identifier is refreshed.

    Attributes:
        record_id: Stable record identity, serialized as ``id``.
        image_id: Content identifier, serialized as ``imageId``.
        rarity: Record rarity score.
        attributes: Ordered trait list.
        percentage: Rarity percentage.
    """

    record_id: int
    image_id: str
    rarity: float
    attributes: tuple[NftAttribute, ...]
    percentage: float


@dataclass(frozen=True)
class ResolvedMetadata:
    """Metadata document fetched from the content gateway."""

    name: str
    image: str


@dataclass(frozen=True)
class RecordUpdateOutcome:
    """Result of processing one record.

    Attributes:
        original: Input record.
        updated: Output record, identical to ``original`` on failure.
        resolved: Whether a new image identifier was applied.
    """

    original: NftRecord
    updated: NftRecord
    resolved: bool


@dataclass(frozen=True)
class ImageIdUpdateOptions:
    """Update command options.

    Attributes:
        input_path: Dataset file to read.
        output_path: File that receives the updated dataset.
        output_format: Output rendering, ``ts`` or ``json``.
    """

    input_path: Path = DEFAULT_INPUT_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH
    output_format: str = TYPESCRIPT_FORMAT


@dataclass(frozen=True)
class ImageIdUpdateResult:
    """Summary of one completed update pass.

    Attributes:
        records: Output records in input order.
        updated_count: Records that received a new image identifier.
        failed_count: Records kept unchanged.
        output_path: Path that was written.
        saved: Whether the output file was written successfully.
    """

    records: tuple[NftRecord, ...]
    updated_count: int
    failed_count: int
    output_path: Path
    saved: bool
