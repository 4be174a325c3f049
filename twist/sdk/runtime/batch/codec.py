"""Envelope encoding and decoding for the batch endpoint.

One chunk of descriptors becomes one form-encoded ``POST {base}/batch`` call;
the JSON array the endpoint returns is decoded back into one result per
descriptor, in submission order.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from ...core.config import DEFAULT_BASE_URL, ENDPOINT_BATCH
from ...core.enums import HttpMethod
from ...core.exceptions import TwistRequestError
from ..rest import parse_body
from ..rest.transport import RESTTransport, append_query, qualify_url, transform_response
from .definitions import (
    BatchItemResult,
    Envelope,
    EnvelopeItem,
    RawSubResponse,
    RequestDescriptor,
)
from .telemetry import log_item_validation_failed, log_length_mismatch


def parse_headers(blob: Any) -> dict[str, str]:
    """Parse a ``Key: value`` per line header blob.

    Lines without a separator are skipped; anything that is not a string
    yields an empty mapping.
    """
    if not isinstance(blob, str):
        return {}
    headers: dict[str, str] = {}
    for line in blob.splitlines():
        key, sep, value = line.partition(":")
        key = key.strip()
        if sep and key:
            headers[key] = value.strip()
    return headers


class EnvelopeCodec:
    """Builds batch envelopes and demultiplexes their responses."""

    def __init__(self, transport: RESTTransport, base_uri: str | None = None) -> None:
        """Initialize codec.

        Args:
            transport: Authenticated transport used for the envelope call
            base_uri: Versioned API root the sub-request URLs are qualified against
        """
        self._transport = transport
        self._base_uri = base_uri or f"{DEFAULT_BASE_URL}/api/v3/"

    @property
    def base_uri(self) -> str:
        return self._base_uri

    @property
    def endpoint_url(self) -> str:
        return qualify_url(self._base_uri, ENDPOINT_BATCH)

    def build_envelope(self, descriptors: Sequence[RequestDescriptor[Any]]) -> Envelope:
        """Encode descriptors as envelope items.

        GET parameters are snake_cased into the query string. POST parameters
        are not carried: the batch protocol only transmits method and URL.
        """
        items = []
        for descriptor in descriptors:
            url = qualify_url(self._base_uri, descriptor.url)
            if descriptor.method is HttpMethod.GET and descriptor.params:
                url = append_query(url, descriptor.params)
            items.append(EnvelopeItem(method=descriptor.method.value, url=url))
        parallel = all(item.method == HttpMethod.GET.value for item in items)
        return Envelope(items=items, parallel=parallel)

    def encode_form(self, envelope: Envelope) -> dict[str, str]:
        form = {
            "requests": json.dumps(
                [item.to_dict() for item in envelope.items], separators=(",", ":")
            )
        }
        if envelope.parallel:
            form["parallel"] = "true"
        return form

    async def execute_chunk(
        self, descriptors: Sequence[RequestDescriptor[Any]]
    ) -> list[BatchItemResult[Any]]:
        """Send one envelope and decode its sub-responses.

        Raises:
            TwistRequestError: The envelope call failed or did not return an array
        """
        envelope = self.build_envelope(descriptors)
        response = await self._transport.post_form(
            self.endpoint_url, self.encode_form(envelope), max_retries=0
        )
        if not isinstance(response.data, list):
            raise TwistRequestError(
                "Batch response is not an array",
                http_status_code=response.status,
                response_data=response.data,
            )
        return self.decode(descriptors, response.data)

    def decode(
        self, descriptors: Sequence[RequestDescriptor[Any]], raw_responses: Sequence[Any]
    ) -> list[BatchItemResult[Any]]:
        """Align raw sub-responses with their descriptors.

        Missing trailing responses become placeholders and surplus ones are
        dropped; both cases are logged.
        """
        if len(raw_responses) != len(descriptors):
            log_length_mismatch(expected=len(descriptors), received=len(raw_responses))

        results: list[BatchItemResult[Any]] = []
        for index, descriptor in enumerate(descriptors):
            if index >= len(raw_responses):
                results.append(BatchItemResult.placeholder())
                continue
            raw = RawSubResponse.from_wire(raw_responses[index])
            results.append(self._decode_item(descriptor, raw))
        return results

    def _decode_item(
        self, descriptor: RequestDescriptor[Any], raw: RawSubResponse
    ) -> BatchItemResult[Any]:
        body = parse_body(raw.body) if isinstance(raw.body, str) else raw.body

        validation_error = None
        try:
            data = transform_response(body)
        except Exception as e:
            # A failure here degrades this item only; siblings keep their results
            data = body
            validation_error = f"{type(e).__name__}: {e}"
            log_item_validation_failed(
                url=descriptor.url, code=raw.code, error_message=validation_error
            )

        if (
            validation_error is None
            and descriptor.response_validator is not None
            and 200 <= raw.code < 300
        ):
            try:
                data = descriptor.response_validator(data)
            except Exception as e:
                validation_error = str(e) or type(e).__name__
                log_item_validation_failed(
                    url=descriptor.url, code=raw.code, error_message=validation_error
                )

        return BatchItemResult(
            code=raw.code,
            headers=parse_headers(raw.headers),
            data=data,
            validation_error=validation_error,
        )
