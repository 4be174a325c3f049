"""Shared client constants and configuration.

This module centralizes URLs, endpoint names and limits used by the REST
runtime, the batch engine and the resource clients.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ApiVersion

DEFAULT_BASE_URL = "https://api.twist.com"
DEFAULT_OAUTH_BASE_URL = "https://twist.com"
DEFAULT_WEB_BASE_URL = "https://twist.com"
DEFAULT_API_VERSION = ApiVersion.V3

# Seconds; applied to the whole request through aiohttp.ClientTimeout
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3

# Documented server-side cap on sub-requests per batch call
BATCH_CHUNK_SIZE = 10

ENDPOINT_BATCH = "batch"
ENDPOINT_USERS = "users"
ENDPOINT_WORKSPACES = "workspaces"
ENDPOINT_WORKSPACE_USERS = "workspace_users"
ENDPOINT_CHANNELS = "channels"
ENDPOINT_THREADS = "threads"
ENDPOINT_GROUPS = "groups"
ENDPOINT_CONVERSATIONS = "conversations"
ENDPOINT_COMMENTS = "comments"
ENDPOINT_INBOX = "inbox"
ENDPOINT_REACTIONS = "reactions"
ENDPOINT_SEARCH = "search"
ENDPOINT_CONVERSATION_MESSAGES = "conversation_messages"


def get_api_base_uri(
    base_url: str | None = None, version: ApiVersion | str = DEFAULT_API_VERSION
) -> str:
    """Build the versioned API root, always ending with a slash.

    Args:
        base_url: Custom domain (e.g. a staging host). Defaults to the public API.
        version: API version segment

    Returns:
        Base URI such as ``https://api.twist.com/api/v3/``
    """
    domain = (base_url or DEFAULT_BASE_URL).rstrip("/")
    return f"{domain}/api/{ApiVersion(version).value}/"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings shared by every resource client.

    Attributes:
        api_token: Bearer token (personal token or OAuth access token)
        base_url: Optional custom API domain
        version: Default API version for clients that do not pin one
        timeout: Total per-request timeout in seconds
        max_retries: Retries on network failure for single requests
    """

    api_token: str
    base_url: str | None = None
    version: ApiVersion = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.api_token:
            raise ValueError("api_token must be a non-empty string")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        object.__setattr__(self, "version", ApiVersion(self.version))

    def base_uri(self, version: ApiVersion | str | None = None) -> str:
        return get_api_base_uri(self.base_url, version or self.version)
