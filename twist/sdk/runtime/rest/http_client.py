"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...core.config import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT
from ...core.exceptions import RateLimitError, TwistRequestError

logger = logging.getLogger(__name__)

# Delay before the first retry and before every later one
FIRST_RETRY_DELAY = 0.0
RETRY_DELAY = 0.5
DEFAULT_RETRY_AFTER = 1.0


@dataclass(frozen=True)
class HttpResponse:
    """Successful HTTP response.

    ``data`` is the parsed JSON body, the raw text when it is not JSON, or
    ``None`` for an empty body.
    """

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    data: Any = None


def parse_body(text: str) -> Any:
    """Decode a response body: JSON when possible, the raw text otherwise."""
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def _retry_after(headers: dict[str, str]) -> float:
    value = headers.get("Retry-After")
    if value is None:
        return DEFAULT_RETRY_AFTER
    try:
        return max(float(value), 0.0)
    except ValueError:
        return DEFAULT_RETRY_AFTER


class HTTPClient:
    """Async HTTP client wrapper with retries for network failures."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_retries = max_retries
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        max_retries: int | None = None,
    ) -> HttpResponse:
        """Send a request and return the parsed response.

        Args:
            method: HTTP verb
            url: Fully qualified URL
            params: Query parameters (already wire-encoded)
            json: JSON body
            data: Form body
            headers: Extra request headers
            max_retries: Override of the client's retry budget

        Returns:
            HttpResponse for a 2xx status

        Raises:
            RateLimitError: 429 persisted after all retries
            TwistRequestError: Non-2xx status, or network failure after all retries
        """
        retries = self.max_retries if max_retries is None else max_retries
        attempt = 0
        while True:
            try:
                async with self.session.request(
                    method, url, params=params, json=json, data=data, headers=headers
                ) as response:
                    text = await response.text()
                    response_headers = dict(response.headers)
                    status = response.status
            except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as e:
                if attempt >= retries:
                    raise TwistRequestError(
                        f"{method} {url} failed: {type(e).__name__}: {e}"
                    ) from e
                delay = FIRST_RETRY_DELAY if attempt == 0 else RETRY_DELAY
                attempt += 1
                logger.debug(
                    "http_retry",
                    extra={"url": url, "attempt": attempt, "error_type": type(e).__name__},
                )
                await asyncio.sleep(delay)
                continue

            body = parse_body(text)
            if status == 429:
                retry_after = _retry_after(response_headers)
                if attempt >= retries:
                    raise RateLimitError(
                        f"Rate limit exceeded for {method} {url}",
                        retry_after=retry_after,
                        response_data=body,
                    )
                attempt += 1
                logger.warning(
                    "http_rate_limited",
                    extra={"url": url, "attempt": attempt, "retry_after": retry_after},
                )
                await asyncio.sleep(retry_after)
                continue

            if not 200 <= status < 300:
                raise TwistRequestError(
                    f"{method} {url} returned HTTP {status}",
                    http_status_code=status,
                    response_data=body,
                )
            return HttpResponse(status=status, headers=response_headers, data=body)

    async def close(self) -> None:
        """Close session."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
