"""Console progress reporting for image id updates.

This module renders the operator-facing lines of an update pass:
start banners, per-record progress, outcomes, and the closing summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from core.constants import SUMMARY_EXAMPLE_COUNT
from core.types import NftRecord


@dataclass
class UpdateProgressReporter:
    """Emit human-readable progress lines for one update pass."""

    emit: Callable[[str], None] = print

    def run_started(self) -> None:
        self.emit("Starting NFT imageId update process...")

    def update_started(self, total: int) -> None:
        self.emit(f"Starting to update {total} NFT image IDs...")

    def record_started(self, record: NftRecord, position: int, total: int) -> None:
        """Log which record is being processed, with a one-based position."""
        self.emit(f"Processing NFT {record.record_id} ({position}/{total})...")

    def record_updated(self, original: NftRecord, updated: NftRecord) -> None:
        self.emit(
            f"✓ Updated NFT {original.record_id}: {original.image_id} → {updated.image_id}"
        )

    def record_kept(self, record: NftRecord) -> None:
        self.emit(f"✗ Failed to update NFT {record.record_id}, keeping original imageId")

    def summary(self, total: int) -> None:
        self.emit("\n=== Update Summary ===")
        self.emit(f"Total NFTs processed: {total}")

    def saved(self, output_path: Path) -> None:
        self.emit(f"✓ Updated data saved to {output_path}")

    def examples(
        self,
        originals: Sequence[NftRecord],
        updated: Sequence[NftRecord],
    ) -> None:
        """Show before/after image ids for the first few records."""
        self.emit(f"\n=== First {SUMMARY_EXAMPLE_COUNT} Examples ===")
        for original, current in list(zip(originals, updated))[:SUMMARY_EXAMPLE_COUNT]:
            self.emit(f"NFT {current.record_id}:")
            self.emit(f"  Original: {original.image_id}")
            self.emit(f"  Updated:  {current.image_id}")
            self.emit("")

    def completed(self) -> None:
        self.emit("Process completed successfully!")

    def failed(self, error: BaseException) -> None:
        self.emit(f"Error in main process: {error}")
