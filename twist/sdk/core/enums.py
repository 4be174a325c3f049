"""Core enumerations shared across clients and models.

Architecture:
    String enums keep wire values and Python values identical, so they can be
    dropped into parameter bags and compared against raw payloads directly.

Key Types:
    - HttpMethod: Verbs understood by the transport (GET/POST are batchable)
    - ApiVersion: REST API versions served under ``/api/<version>/``
    - UserType: Workspace membership role
    - WorkspacePlan: Billing plan of a workspace
    - Permission: OAuth scopes
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs used by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def is_batchable(self) -> bool:
        """Whether the batch endpoint accepts this verb."""
        return self in (HttpMethod.GET, HttpMethod.POST)


class ApiVersion(str, Enum):
    """REST API versions."""

    V3 = "v3"
    V4 = "v4"


class UserType(str, Enum):
    """Role of a user within a workspace."""

    USER = "USER"
    GUEST = "GUEST"
    ADMIN = "ADMIN"


class WorkspacePlan(str, Enum):
    """Workspace billing plan."""

    FREE = "free"
    UNLIMITED = "unlimited"


class Permission(str, Enum):
    """OAuth permission scopes."""

    USER_READ = "user:read"
    USER_WRITE = "user:write"
    WORKSPACES_READ = "workspaces:read"
    WORKSPACES_WRITE = "workspaces:write"
    CHANNELS_READ = "channels:read"
    CHANNELS_WRITE = "channels:write"
    THREADS_READ = "threads:read"
    THREADS_WRITE = "threads:write"
    GROUPS_READ = "groups:read"
    GROUPS_WRITE = "groups:write"
    CONVERSATIONS_READ = "conversations:read"
    CONVERSATIONS_WRITE = "conversations:write"
