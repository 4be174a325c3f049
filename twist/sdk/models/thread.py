"""Thread data models."""

from datetime import datetime
from typing import Any

from pydantic import computed_field

from ..utils.url_helpers import get_full_twist_url
from .base import TwistModel


class ThreadLastComment(TwistModel):
    """Latest comment embedded in a thread payload."""

    id: int
    content: str
    creator: int
    creator_name: str
    thread_id: int
    channel_id: int
    posted: datetime
    system_message: Any = None
    attachments: list[Any] | None = None
    reactions: dict[str, list[int]] | None = None
    actions: list[Any] | None = None
    obj_index: int
    last_edited: datetime | None = None
    deleted: bool
    deleted_by: int | None = None
    direct_group_mentions: list[int] | None = None
    direct_mentions: list[int] | None = None
    groups: list[int] | None = None
    recipients: list[int] | None = None
    to_emails: list[str] | None = None
    version: int
    workspace_id: int


class Thread(TwistModel):
    """A titled discussion inside a channel."""

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
    closed: bool | None = None
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
    reactions: dict[str, Any] | None = None
    recipients: list[int] | None = None
    responders: list[int] | None = None
    snippet: str
    snippet_creator: int
    snippet_mask_avatar_url: str | None = None
    snippet_mask_poster: int | str | None = None
    starred: bool
    system_message: Any = None
    to_emails: list[str] | None = None
    is_archived: bool
    is_saved: bool | None = None
    in_inbox: bool | None = None
    last_comment: ThreadLastComment | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """Web app link to the thread."""
        return get_full_twist_url(self.workspace_id, channel_id=self.channel_id, thread_id=self.id)
