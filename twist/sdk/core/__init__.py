"""Core components."""

from .config import (
    BATCH_CHUNK_SIZE,
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ClientConfig,
    get_api_base_uri,
)
from .enums import ApiVersion, HttpMethod, Permission, UserType, WorkspacePlan
from .exceptions import RateLimitError, TwistError, TwistRequestError, ValidationError

__all__ = [
    "ApiVersion",
    "BATCH_CHUNK_SIZE",
    "ClientConfig",
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "HttpMethod",
    "Permission",
    "RateLimitError",
    "TwistError",
    "TwistRequestError",
    "UserType",
    "ValidationError",
    "WorkspacePlan",
    "get_api_base_uri",
]
