"""Batch execution: chunking, concurrent envelope calls and merging.

This module provides the BatchExecutor class that splits descriptors into
envelope-sized chunks, runs them concurrently and merges the per-item
results back into submission order.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from time import perf_counter
from typing import Any

from ...core.config import BATCH_CHUNK_SIZE
from .codec import EnvelopeCodec
from .definitions import BatchItemResult, RequestDescriptor
from .planners import chunk
from .telemetry import (
    log_batch_execution_complete,
    log_batch_plan,
    log_chunk_completed,
    log_chunk_error,
)


class BatchExecutor:
    """Executes descriptors through the batch endpoint.

    A chunk whose envelope call fails is replaced by placeholders
    (``code=500``, no headers, no data) so one failure never affects the
    results of other chunks.
    """

    def __init__(self, codec: EnvelopeCodec, chunk_size: int = BATCH_CHUNK_SIZE) -> None:
        """Initialize batch executor.

        Args:
            codec: Codec performing one envelope call per chunk
            chunk_size: Maximum descriptors per envelope
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        self._codec = codec
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    async def execute(
        self, descriptors: Sequence[RequestDescriptor[Any]]
    ) -> list[BatchItemResult[Any]]:
        """Execute descriptors and return one result per descriptor.

        Args:
            descriptors: Requests in the order results should be returned

        Returns:
            Results aligned with ``descriptors``
        """
        if not descriptors:
            return []

        started = perf_counter()
        chunks = chunk(descriptors, self._chunk_size)
        log_batch_plan(
            total_items=len(descriptors), total_chunks=len(chunks), chunk_size=self._chunk_size
        )

        if len(chunks) == 1:
            outcomes = [await self._run_chunk(0, chunks[0])]
        else:
            outcomes = await asyncio.gather(
                *(self._run_chunk(index, items) for index, items in enumerate(chunks))
            )

        results: list[BatchItemResult[Any]] = []
        failed_chunks = 0
        for chunk_results, failed in outcomes:
            results.extend(chunk_results)
            failed_chunks += failed

        log_batch_execution_complete(
            total_items=len(results),
            chunks_used=len(chunks),
            failed_chunks=failed_chunks,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return results

    async def _run_chunk(
        self, index: int, items: list[RequestDescriptor[Any]]
    ) -> tuple[list[BatchItemResult[Any]], bool]:
        chunk_start = perf_counter()
        try:
            chunk_results = await self._codec.execute_chunk(items)
        except Exception as e:
            log_chunk_error(
                chunk_index=index,
                items=len(items),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return [BatchItemResult.placeholder() for _ in items], True

        log_chunk_completed(
            chunk_index=index,
            items=len(chunk_results),
            latency_ms=(perf_counter() - chunk_start) * 1000.0,
        )
        return chunk_results, False
