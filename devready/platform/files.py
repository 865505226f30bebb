"""Filesystem existence helpers."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

__all__ = ["exists", "all_exist"]


def exists(path: Path) -> bool:
    """Return True if path exists (file or directory).

    Unreadable parents or invalid names count as missing.
    """
    try:
        return path.exists()
    except (OSError, ValueError):
        return False


def all_exist(paths: Iterable[Path]) -> bool:
    """Return True if every path exists."""
    return all(exists(p) for p in paths)
