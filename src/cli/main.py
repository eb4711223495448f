"""nftsync CLI entry points.
This module exposes the image id update pass and single gateway lookups.
It maps argparse commands onto pipeline calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import NftSyncConfig, parse_pacing_seconds, validate_gateway_url_template
from core.constants import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    SUPPORTED_OUTPUT_FORMATS,
    TYPESCRIPT_FORMAT,
)
from core.errors import NftSyncError
from core.logging_config import get_logger
from core.types import ImageIdUpdateOptions
from gateway.metadata_resolver import GatewayMetadataResolver
from ingest.pipeline import run_image_id_update
from ingest.update_progress import UpdateProgressReporter
from transforms.identifier_extraction import extract_bare_identifier

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="nftsync",
        description="Refresh dataset image ids from content gateway metadata",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_update_command(subparsers)
    _add_resolve_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the nftsync CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    reporter = UpdateProgressReporter()
    try:
        config = _build_config(args)
        if args.command == "update":
            return _run_update_command(config, args, reporter)
        if args.command == "resolve":
            return _run_resolve_command(config, args)
    except NftSyncError as error:
        _LOGGER.error("command_failed", command=args.command, error=str(error))
        reporter.failed(error)
        return 1
    except Exception as error:
        _LOGGER.exception("command_crashed", command=args.command)
        reporter.failed(error)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(args: argparse.Namespace) -> NftSyncConfig:
    """Build runtime config with CLI overrides applied."""
    config = NftSyncConfig.from_env()
    if args.gateway_url:
        config = replace(
            config,
            gateway_url_template=validate_gateway_url_template(args.gateway_url),
        )
    pacing_override = getattr(args, "pacing_seconds", None)
    if pacing_override is not None:
        config = replace(config, pacing_seconds=parse_pacing_seconds(pacing_override))
    return config


def _run_update_command(
    config: NftSyncConfig,
    args: argparse.Namespace,
    reporter: UpdateProgressReporter,
) -> int:
    """Handle update command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.
        reporter: Console reporter.

    Returns:
        Exit code.
    """
    options = ImageIdUpdateOptions(
        input_path=Path(args.input),
        output_path=Path(args.output),
        output_format=args.format,
    )
    result = run_image_id_update(options, config, reporter=reporter)
    return 0 if result.saved else 1


def _run_resolve_command(config: NftSyncConfig, args: argparse.Namespace) -> int:
    """Handle resolve command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    with GatewayMetadataResolver(config) as resolver:
        metadata = resolver.resolve(args.identifier)
    if metadata is None or not metadata.image:
        print(f"✗ Failed to resolve {args.identifier}")
        return 1
    print(extract_bare_identifier(metadata.image))
    return 0


def _add_update_command(subparsers: Any) -> None:
    """Register update subcommand."""
    parser = subparsers.add_parser("update", help="Resolve and rewrite every record image id")
    parser.add_argument(
        "--input",
        default=str(DEFAULT_INPUT_PATH),
        help="Dataset file to read (.ts module or .json document)",
    )
    parser.add_argument(
        "--output",
        default=str(DEFAULT_OUTPUT_PATH),
        help="File that receives the updated dataset; overwritten",
    )
    parser.add_argument(
        "--format",
        default=TYPESCRIPT_FORMAT,
        choices=SUPPORTED_OUTPUT_FORMATS,
        help="Output rendering",
    )
    parser.add_argument(
        "--pacing-seconds",
        help="Override NFTSYNC_PACING_SECONDS delay between records",
    )
    _add_gateway_url_argument(parser)


def _add_resolve_command(subparsers: Any) -> None:
    """Register resolve subcommand."""
    parser = subparsers.add_parser("resolve", help="Resolve one identifier and print its image id")
    parser.add_argument("identifier", help="Content identifier of the metadata document")
    _add_gateway_url_argument(parser)


def _add_gateway_url_argument(parser: argparse.ArgumentParser) -> None:
    """Register the gateway override shared by every subcommand."""
    parser.add_argument(
        "--gateway-url",
        help="Override NFTSYNC_GATEWAY_URL, e.g. https://ipfs.io/ipfs/{identifier}",
    )
