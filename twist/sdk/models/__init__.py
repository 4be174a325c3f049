"""Data models for Twist API entities.

Architecture:
    This module exports the Pydantic v2 models used to validate API payloads.
    All models are immutable (frozen=True) and share ``TwistModel``, which
    maps snake_case attributes onto the camelCase keys produced by the
    response transform.

Design Decisions:
    - Pydantic v2: Type validation and serialization
    - Frozen models: Results handed to callers cannot be mutated in place
    - Aliases instead of renaming: Raw dicts and models describe the same payload
    - Computed ``url``: Web links derived from ids, never sent by the API

See Also:
    - twist.sdk.utils.case_conversion: Key conversion applied before validation
    - twist.sdk.utils.timestamps: ``...Ts`` to datetime conversion
"""

from .auth import AuthTokenResponse
from .base import TwistModel
from .channel import Channel
from .comment import Comment
from .conversation import Conversation, ConversationLastMessage, ConversationMessage
from .group import Group
from .inbox import InboxCount, InboxThread, UnreadConversation, UnreadThread
from .search import (
    SearchConversationResponse,
    SearchResponse,
    SearchResult,
    SearchThreadResponse,
)
from .thread import Thread, ThreadLastComment
from .user import AvatarUrls, AwayMode, User, WorkspaceUser
from .workspace import Workspace

__all__ = [
    "AuthTokenResponse",
    "AvatarUrls",
    "AwayMode",
    "Channel",
    "Comment",
    "Conversation",
    "ConversationLastMessage",
    "ConversationMessage",
    "Group",
    "InboxCount",
    "InboxThread",
    "SearchConversationResponse",
    "SearchResponse",
    "SearchResult",
    "SearchThreadResponse",
    "Thread",
    "ThreadLastComment",
    "TwistModel",
    "UnreadConversation",
    "UnreadThread",
    "User",
    "Workspace",
    "WorkspaceUser",
]
