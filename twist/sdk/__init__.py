"""Twist SDK - Async client library for the Twist team-messaging API."""

from .api import (
    TwistApi,
    get_auth_state_parameter,
    get_auth_token,
    get_authorization_url,
    revoke_auth_token,
)
from .core import (
    BATCH_CHUNK_SIZE,
    ApiVersion,
    ClientConfig,
    HttpMethod,
    Permission,
    RateLimitError,
    TwistError,
    TwistRequestError,
    UserType,
    ValidationError,
    WorkspacePlan,
)
from .models import (
    AuthTokenResponse,
    Channel,
    Comment,
    Conversation,
    ConversationMessage,
    Group,
    InboxThread,
    SearchResponse,
    SearchResult,
    Thread,
    UnreadConversation,
    UnreadThread,
    User,
    Workspace,
    WorkspaceUser,
)
from .runtime import BatchExecutor, BatchItemResult, EnvelopeCodec, RequestDescriptor

__version__ = "0.1.0"

__all__ = [
    # API
    "TwistApi",
    "get_auth_state_parameter",
    "get_auth_token",
    "get_authorization_url",
    "revoke_auth_token",
    # Batch
    "BATCH_CHUNK_SIZE",
    "BatchExecutor",
    "BatchItemResult",
    "EnvelopeCodec",
    "RequestDescriptor",
    # Core
    "ApiVersion",
    "ClientConfig",
    "HttpMethod",
    "Permission",
    "UserType",
    "WorkspacePlan",
    # Exceptions
    "RateLimitError",
    "TwistError",
    "TwistRequestError",
    "ValidationError",
    # Models
    "AuthTokenResponse",
    "Channel",
    "Comment",
    "Conversation",
    "ConversationMessage",
    "Group",
    "InboxThread",
    "SearchResponse",
    "SearchResult",
    "Thread",
    "UnreadConversation",
    "UnreadThread",
    "User",
    "Workspace",
    "WorkspaceUser",
]
