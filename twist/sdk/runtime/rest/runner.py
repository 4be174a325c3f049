"""REST request runner executing request descriptors one at a time."""

from __future__ import annotations

from typing import TypeVar

import pydantic

from ...core.enums import HttpMethod
from ...core.exceptions import ValidationError
from ..batch.definitions import RequestDescriptor
from .transport import RESTTransport, qualify_url, transform_response

T = TypeVar("T")


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    @property
    def transport(self) -> RESTTransport:
        return self._t

    async def run(self, descriptor: RequestDescriptor[T], base_uri: str) -> T:
        url = qualify_url(base_uri, descriptor.url)
        if descriptor.method is HttpMethod.GET:
            response = await self._t.get(url, params=descriptor.params)
        else:
            response = await self._t.post(url, json_body=descriptor.params)

        data = transform_response(response.data)
        if descriptor.response_validator is None:
            return data
        try:
            return descriptor.response_validator(data)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid response from {descriptor.url}: {e}") from e
