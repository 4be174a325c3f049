"""Chunk planning for batch requests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into contiguous slices of at most ``size`` elements.

    Every slice is non-empty and concatenating them gives back ``items`` in
    order. An empty input yields no slices.

    Args:
        items: Sequence to split
        size: Maximum slice length

    Returns:
        List of slices

    Raises:
        ValueError: If ``size`` is smaller than 1
    """
    if size < 1:
        raise ValueError(f"chunk size must be at least 1, got {size}")
    return [list(items[start : start + size]) for start in range(0, len(items), size)]
