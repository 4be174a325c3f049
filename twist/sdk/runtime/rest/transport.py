"""REST transport: authentication and wire encoding on top of HTTPClient."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from ...utils.case_conversion import camel_case_keys, snake_case_keys
from ...utils.timestamps import transform_timestamps
from .http_client import HTTPClient, HttpResponse


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return ",".join(_encode_value(item) for item in value)
    return str(value)


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Serialize parameters into a query string.

    Keys are snake_cased, ``None`` values dropped, lists comma-joined and
    booleans lowercased. Returns an empty string when nothing remains.
    """
    if not params:
        return ""
    wire = snake_case_keys(dict(params))
    pairs = [(key, _encode_value(value)) for key, value in wire.items() if value is not None]
    return urlencode(pairs)


def append_query(url: str, params: Mapping[str, Any] | None) -> str:
    query = encode_query(params)
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def qualify_url(base_uri: str, url: str) -> str:
    """Join a relative endpoint path onto a versioned base URI."""
    if url.startswith(("http://", "https://")):
        return url
    return f"{base_uri.rstrip('/')}/{url.lstrip('/')}"


def transform_response(data: Any) -> Any:
    """Apply the inbound key and timestamp conversion."""
    return transform_timestamps(camel_case_keys(data))


class RESTTransport:
    """Sends authenticated requests to fully qualified API URLs."""

    def __init__(
        self,
        http: HTTPClient,
        api_token: str,
        request_id: str | None = None,
    ) -> None:
        self._http = http
        self._api_token = api_token
        self._request_id = request_id

    @property
    def http(self) -> HTTPClient:
        return self._http

    def _headers(self) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._api_token}"}
        if self._request_id:
            headers["X-Request-Id"] = self._request_id
        return headers

    async def get(self, url: str, params: Mapping[str, Any] | None = None) -> HttpResponse:
        return await self._http.request("GET", append_query(url, params), headers=self._headers())

    async def post(self, url: str, json_body: Mapping[str, Any] | None = None) -> HttpResponse:
        body = None
        if json_body is not None:
            body = {k: v for k, v in snake_case_keys(dict(json_body)).items() if v is not None}
        return await self._http.request("POST", url, json=body, headers=self._headers())

    async def post_form(
        self, url: str, form: Mapping[str, str], max_retries: int = 0
    ) -> HttpResponse:
        """POST a form-encoded body; not retried unless asked."""
        return await self._http.request(
            "POST", url, data=dict(form), headers=self._headers(), max_retries=max_retries
        )
