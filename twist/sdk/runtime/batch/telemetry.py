"""Structured logging for batch operations.

This module provides telemetry hooks for the batch engine, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_batch_plan(*, total_items: int, total_chunks: int, chunk_size: int) -> None:
    """Log chunk plan creation.

    Args:
        total_items: Number of descriptors submitted
        total_chunks: Number of envelope calls planned
        chunk_size: Maximum descriptors per envelope
    """
    logger.debug(
        "batch_chunk_plan_created",
        extra={
            "total_items": total_items,
            "total_chunks": total_chunks,
            "chunk_size": chunk_size,
        },
    )


def log_chunk_completed(*, chunk_index: int, items: int, latency_ms: float | None = None) -> None:
    """Log completion of a single envelope call."""
    logger.debug(
        "batch_chunk_completed",
        extra={"chunk_index": chunk_index, "items": items, "latency_ms": latency_ms},
    )


def log_chunk_error(
    *,
    chunk_index: int,
    items: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a chunk whose envelope call failed.

    Args:
        chunk_index: Zero-based index of the chunk that failed
        items: Number of placeholders substituted
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "batch_chunk_error",
        extra={
            "chunk_index": chunk_index,
            "items": items,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_item_validation_failed(*, url: str, code: int, error_message: str) -> None:
    logger.warning(
        "batch_item_validation_failed",
        extra={"url": url, "code": code, "error_message": error_message},
    )


def log_length_mismatch(*, expected: int, received: int) -> None:
    logger.warning(
        "batch_response_length_mismatch",
        extra={"expected": expected, "received": received},
    )


def log_batch_execution_complete(
    *,
    total_items: int,
    chunks_used: int,
    failed_chunks: int,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a batch execution."""
    logger.info(
        "batch_execution_complete",
        extra={
            "total_items": total_items,
            "chunks_used": chunks_used,
            "failed_chunks": failed_chunks,
            "total_latency_ms": total_latency_ms,
        },
    )
