"""Shared plumbing for the resource clients.

Every client method builds a ``RequestDescriptor`` and hands it to
``_dispatch``: with ``batch=True`` the descriptor itself is returned for
``TwistApi.batch``, otherwise the call runs immediately through the REST
runner and an awaitable of the validated result is returned.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from datetime import datetime
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter

from ..core.config import get_api_base_uri
from ..core.enums import ApiVersion, HttpMethod
from ..runtime.batch.definitions import RequestDescriptor
from ..runtime.rest.runner import RestRunner
from ..utils.timestamps import datetime_to_timestamp

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@lru_cache(maxsize=None)
def _list_adapter(model: type[BaseModel]) -> TypeAdapter[Any]:
    return TypeAdapter(list[model])  # type: ignore[valid-type]


def list_of(model: type[M]) -> Callable[[Any], list[M]]:
    """Validator for a JSON array of ``model`` payloads."""
    return _list_adapter(model).validate_python


def field_of(key: str) -> Callable[[Any], Any]:
    """Validator extracting one key of an object payload."""

    def extract(data: Any) -> Any:
        if not isinstance(data, Mapping) or key not in data:
            raise ValueError(f"expected an object with a '{key}' field")
        return data[key]

    return extract


def compact(**params: Any) -> dict[str, Any]:
    """Drop unset optional parameters; datetimes become epoch seconds."""
    result: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, datetime):
            value = datetime_to_timestamp(value)
        result[key] = value
    return result


class BaseClient:
    """Base class holding the runner and the versioned base URI."""

    api_version: ApiVersion = ApiVersion.V3

    def __init__(
        self,
        runner: RestRunner,
        base_url: str | None = None,
        version: ApiVersion | str | None = None,
    ) -> None:
        self._runner = runner
        self._base_url = base_url
        if version is not None:
            self.api_version = ApiVersion(version)

    def get_base_uri(self, version: ApiVersion | str | None = None) -> str:
        """Return the versioned API root, always with a trailing slash."""
        return get_api_base_uri(self._base_url, version or self.api_version)

    def _dispatch(
        self, descriptor: RequestDescriptor[T], batch: bool
    ) -> RequestDescriptor[T] | Awaitable[T]:
        if batch:
            return descriptor
        return self._runner.run(descriptor, self.get_base_uri())

    def _get(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        validator: Callable[[Any], T] | None = None,
        *,
        batch: bool = False,
    ) -> Any:
        return self._dispatch(RequestDescriptor(HttpMethod.GET, url, params, validator), batch)

    def _post(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        validator: Callable[[Any], T] | None = None,
        *,
        batch: bool = False,
    ) -> Any:
        return self._dispatch(RequestDescriptor(HttpMethod.POST, url, params, validator), batch)
