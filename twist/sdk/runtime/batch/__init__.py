"""Batch execution engine.

Folds many independent API calls into as few HTTP round trips as possible.

Architecture:
    The batch layer consists of:
    - definitions.py: Request descriptors, envelopes and per-item results
    - planners.py: Positional chunking to the envelope size limit
    - codec.py: Envelope encoding and sub-response decoding
    - executors.py: Concurrent chunk execution and ordered merging
    - telemetry.py: Structured logging

Usage:
    Resource client methods called with ``batch=True`` return
    ``RequestDescriptor`` objects; ``TwistApi.batch`` hands them to a
    ``BatchExecutor`` and returns one ``BatchItemResult`` per descriptor.
"""

from __future__ import annotations

from .definitions import (
    PLACEHOLDER_CODE,
    BatchItemResult,
    Envelope,
    EnvelopeItem,
    RawSubResponse,
    RequestDescriptor,
)
from .codec import EnvelopeCodec, parse_headers
from .executors import BatchExecutor
from .planners import chunk

__all__ = [
    "BatchExecutor",
    "BatchItemResult",
    "Envelope",
    "EnvelopeCodec",
    "EnvelopeItem",
    "PLACEHOLDER_CODE",
    "RawSubResponse",
    "RequestDescriptor",
    "chunk",
    "parse_headers",
]
