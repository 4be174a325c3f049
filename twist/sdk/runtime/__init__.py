"""Runtime layer: single-request transport and the batch engine."""

from .batch import BatchExecutor, BatchItemResult, EnvelopeCodec, RequestDescriptor
from .rest import HTTPClient, RESTTransport, RestRunner

__all__ = [
    "BatchExecutor",
    "BatchItemResult",
    "EnvelopeCodec",
    "HTTPClient",
    "RESTTransport",
    "RequestDescriptor",
    "RestRunner",
]
