"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path


def fixture_path(relative_path: str) -> Path:
    """Resolve a dataset fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root, e.g. ``datasets/nft_datas.ts``.

    Returns:
        Absolute fixture path.
    """
    return Path(__file__).resolve().parent / "fixtures" / relative_path
