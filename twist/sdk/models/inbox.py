"""Inbox data models."""

from datetime import datetime
from typing import Any

from pydantic import computed_field

from ..utils.url_helpers import get_full_twist_url
from .base import TwistModel
from .comment import Comment


class InboxThread(TwistModel):
    """A thread as listed in the inbox, with inbox metadata."""

    id: int
    title: str
    content: str
    creator: int
    creator_name: str | None = None
    channel_id: int
    workspace_id: int
    actions: list[Any] | None = None
    attachments: list[Any] | None = None
    comment_count: int
    direct_group_mentions: list[int] | None = None
    direct_mentions: list[int] | None = None
    groups: list[int] | None = None
    last_edited: datetime | None = None
    last_obj_index: int | None = None
    last_updated: datetime
    muted_until: datetime | None = None
    participants: list[int] | None = None
    pinned: bool
    pinned_date: datetime | None = None
    posted: datetime
    reactions: dict[str, list[int]] | None = None
    recipients: list[int] | None = None
    snippet: str
    snippet_creator: int
    snippet_mask_avatar_url: str | None = None
    snippet_mask_poster: int | None = None
    starred: bool
    system_message: Any = None
    is_archived: bool
    in_inbox: bool
    is_saved: bool | None = None
    closed: bool
    responders: list[int] | None = None
    last_comment: Comment | None = None
    to_emails: list[str] | None = None
    version: int | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """Web app link to the thread."""
        return get_full_twist_url(self.workspace_id, channel_id=self.channel_id, thread_id=self.id)


class InboxCount(TwistModel):
    """Unread inbox counter."""

    data: int
    version: int


class UnreadThread(TwistModel):
    """Reference to a thread with unread comments."""

    thread_id: int
    channel_id: int
    obj_index: int
    direct_mention: bool


class UnreadConversation(TwistModel):
    """Reference to a conversation with unread messages."""

    conversation_id: int
    obj_index: int
    direct_mention: bool
