"""Batch request and result definitions.

This module defines the data structures that flow through the batch engine:
deferred request descriptors produced by the resource clients, the envelope
sent to the batch endpoint, and the per-item results handed back to callers.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ...core.enums import HttpMethod

T = TypeVar("T")

# Status reported for every item of a chunk whose envelope call failed
PLACEHOLDER_CODE = 500


@dataclass(frozen=True)
class RequestDescriptor(Generic[T]):
    """A deferred API call.

    Attributes:
        method: HTTP verb, GET or POST; other verbs raise ``ValueError``
        url: Endpoint path relative to the API base, e.g. ``"comments/getone"``
        params: Parameter bag in client naming, ``None`` when the call takes none
        response_validator: Callable turning the transformed payload into ``T``;
            ``None`` passes the payload through unchecked
    """

    method: HttpMethod
    url: str
    params: Mapping[str, Any] | None = None
    response_validator: Callable[[Any], T] | None = None

    def __post_init__(self) -> None:
        method = HttpMethod(self.method)
        if not method.is_batchable:
            raise ValueError(f"Unsupported request method {method.value}; use GET or POST")
        object.__setattr__(self, "method", method)


@dataclass(frozen=True)
class BatchItemResult(Generic[T]):
    """Outcome of one sub-request inside a batch.

    Attributes:
        code: Status of the sub-request (500 for a placeholder)
        headers: Response headers, empty when absent or unparseable
        data: Validated value, degraded transformed payload, or ``None``
        validation_error: Validator diagnostic when ``data`` is degraded
    """

    code: int
    headers: dict[str, str] = field(default_factory=dict)
    data: T | Any = None
    validation_error: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300

    @property
    def degraded(self) -> bool:
        return self.validation_error is not None

    @classmethod
    def placeholder(cls) -> BatchItemResult[Any]:
        """Result standing in for an item whose chunk failed as a whole."""
        return cls(code=PLACEHOLDER_CODE, headers={}, data=None)


@dataclass(frozen=True)
class EnvelopeItem:
    """One entry of the batch envelope."""

    method: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"method": self.method, "url": self.url}


@dataclass(frozen=True)
class Envelope:
    """Ordered sub-requests plus the parallel-execution flag."""

    items: list[EnvelopeItem]
    parallel: bool

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class RawSubResponse:
    """Undecoded sub-response as returned by the batch endpoint.

    ``headers`` and ``body`` are the server's strings; either may be missing.
    """

    code: int
    headers: str | None = None
    body: str | None = None

    @classmethod
    def from_wire(cls, raw: Any) -> RawSubResponse:
        if not isinstance(raw, Mapping):
            return cls(code=PLACEHOLDER_CODE)
        code = raw.get("code")
        if not isinstance(code, int) or isinstance(code, bool):
            code = PLACEHOLDER_CODE
        return cls(code=code, headers=raw.get("headers"), body=raw.get("body"))
