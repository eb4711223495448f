"""Image id update orchestration.

This module drives the sequential update pass: each record's image id
is resolved through the gateway, stripped to a bare identifier, and the
updated dataset is persisted once every record has been processed.
"""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Callable, Sequence

from core.config import NftSyncConfig
from core.logging_config import get_logger
from core.types import (
    ImageIdUpdateOptions,
    ImageIdUpdateResult,
    NftRecord,
    RecordUpdateOutcome,
)
from gateway.metadata_resolver import GatewayMetadataResolver, MetadataResolver
from ingest.dataset_reader import read_nft_records
from ingest.update_progress import UpdateProgressReporter
from store.dataset_writer import save_nft_records
from transforms.identifier_extraction import extract_bare_identifier

_LOGGER = get_logger(__name__)


class ImageIdUpdateRunner:
    """Runner for one full read, resolve, and save pass."""

    def __init__(
        self,
        options: ImageIdUpdateOptions,
        config: NftSyncConfig,
        reporter: UpdateProgressReporter | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._options = options
        self._config = config
        self._reporter = reporter or UpdateProgressReporter()
        self._sleep = sleep

    def run(self, resolver: MetadataResolver | None = None) -> ImageIdUpdateResult:
        """Execute the update pass and return its summary."""
        self._reporter.run_started()
        source_records = read_nft_records(self._options.input_path)
        if resolver is None:
            with GatewayMetadataResolver(self._config) as gateway_resolver:
                outcomes = self._update(source_records, gateway_resolver)
        else:
            outcomes = self._update(source_records, resolver)
        updated_records = [outcome.updated for outcome in outcomes]
        self._reporter.summary(len(updated_records))
        saved = self._save(updated_records)
        self._reporter.examples(source_records, updated_records)
        self._reporter.completed()
        result = ImageIdUpdateResult(
            records=tuple(updated_records),
            updated_count=sum(1 for outcome in outcomes if outcome.resolved),
            failed_count=sum(1 for outcome in outcomes if not outcome.resolved),
            output_path=self._options.output_path,
            saved=saved,
        )
        _log_update_completion(self._options, result)
        return result

    def _update(
        self,
        records: Sequence[NftRecord],
        resolver: MetadataResolver,
    ) -> list[RecordUpdateOutcome]:
        return update_image_ids_with_outcomes(
            records,
            resolver,
            self._config.pacing_seconds,
            reporter=self._reporter,
            sleep=self._sleep,
        )

    def _save(self, records: list[NftRecord]) -> bool:
        saved = save_nft_records(
            records,
            self._options.output_path,
            self._options.output_format,
        )
        if saved:
            try:
                self._reporter.saved(self._options.output_path)
            except Exception as error:
                _LOGGER.error(
                    "progress_report_failed",
                    output_path=str(self._options.output_path),
                    error=str(error),
                )
        return saved


def run_image_id_update(
    options: ImageIdUpdateOptions,
    config: NftSyncConfig,
    resolver: MetadataResolver | None = None,
    reporter: UpdateProgressReporter | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> ImageIdUpdateResult:
    """Run the image id update pass and persist the updated dataset.

    Args:
        options: Input/output options.
        config: Runtime configuration.
        resolver: Optional resolver; a gateway resolver is opened when omitted.
        reporter: Optional console reporter.
        sleep: Pacing function, ``time.sleep`` by default.

    Returns:
        Summary of the completed pass.

    Raises:
        NftSyncDatasetError: If the input dataset cannot be loaded.
        NftSyncStoreError: If the output format is unsupported.
    """
    runner = ImageIdUpdateRunner(options, config, reporter=reporter, sleep=sleep)
    return runner.run(resolver)


def update_image_ids(
    records: Sequence[NftRecord],
    resolver: MetadataResolver,
    pacing_seconds: float,
    reporter: UpdateProgressReporter | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[NftRecord]:
    """Return records with image ids replaced by resolved bare identifiers.

    Output has the same length and order as ``records``; records that
    fail to resolve are returned unchanged.
    """
    outcomes = update_image_ids_with_outcomes(
        records, resolver, pacing_seconds, reporter=reporter, sleep=sleep
    )
    return [outcome.updated for outcome in outcomes]


def update_image_ids_with_outcomes(
    records: Sequence[NftRecord],
    resolver: MetadataResolver,
    pacing_seconds: float,
    reporter: UpdateProgressReporter | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[RecordUpdateOutcome]:
    """Process records strictly in order, one lookup at a time.

    Args:
        records: Input records; never mutated.
        resolver: Metadata resolver.
        pacing_seconds: Delay after every record, including the last.
        reporter: Optional console reporter.
        sleep: Pacing function.

    Returns:
        One outcome per input record, in input order.
    """
    active_reporter = reporter or UpdateProgressReporter()
    total = len(records)
    active_reporter.update_started(total)
    outcomes: list[RecordUpdateOutcome] = []
    for position, record in enumerate(records, 1):
        _report_safely(record, active_reporter.record_started, record, position, total)
        outcome = _process_record(record, resolver)
        if outcome.resolved:
            _report_safely(
                record, active_reporter.record_updated, outcome.original, outcome.updated
            )
        else:
            _report_safely(record, active_reporter.record_kept, record)
        outcomes.append(outcome)
        sleep(pacing_seconds)
    return outcomes


def _report_safely(
    record: NftRecord,
    report: Callable[..., None],
    *args: object,
) -> None:
    """Emit one progress line; a console failure never stops the pass."""
    try:
        report(*args)
    except Exception as error:
        _log_record_failure(record, error)


def _process_record(record: NftRecord, resolver: MetadataResolver) -> RecordUpdateOutcome:
    """Resolve one record, falling back to the original on any error."""
    try:
        metadata = resolver.resolve(record.image_id)
        if metadata is None or not metadata.image:
            return RecordUpdateOutcome(original=record, updated=record, resolved=False)
        bare_identifier = extract_bare_identifier(metadata.image)
        updated = replace(record, image_id=bare_identifier)
    except Exception as error:
        _log_record_failure(record, error)
        return RecordUpdateOutcome(original=record, updated=record, resolved=False)
    return RecordUpdateOutcome(original=record, updated=updated, resolved=True)


def _log_record_failure(record: NftRecord, error: Exception) -> None:
    _LOGGER.error(
        "record_update_failed",
        record_id=record.record_id,
        image_id=record.image_id,
        error=str(error),
    )


def _log_update_completion(options: ImageIdUpdateOptions, result: ImageIdUpdateResult) -> None:
    """Log pass completion with contextual metadata."""
    _LOGGER.info(
        "image_id_update_completed",
        input_path=str(options.input_path),
        output_path=str(result.output_path),
        output_format=options.output_format,
        record_count=len(result.records),
        updated_count=result.updated_count,
        failed_count=result.failed_count,
        saved=result.saved,
    )
