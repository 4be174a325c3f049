"""Thread comment data model."""

from datetime import datetime
from typing import Any

from pydantic import computed_field

from ..utils.url_helpers import get_full_twist_url
from .base import TwistModel


class Comment(TwistModel):
    """A comment posted on a thread."""

    id: int
    content: str
    creator: int
    thread_id: int
    workspace_id: int
    channel_id: int
    conversation_id: int | None = None
    posted: datetime
    last_edited: datetime | None = None
    direct_mentions: list[int] | None = None
    direct_group_mentions: list[int] | None = None
    system_message: Any = None
    attachments: list[Any] | None = None
    reactions: dict[str, Any] | None = None
    obj_index: int | None = None
    creator_name: str | None = None
    recipients: list[int] | None = None
    groups: list[int] | None = None
    to_emails: list[str] | None = None
    deleted: bool | None = None
    deleted_by: int | None = None
    version: int | None = None
    actions: list[Any] | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """Web app link to the comment inside its thread."""
        return get_full_twist_url(
            self.workspace_id,
            channel_id=self.channel_id,
            thread_id=self.thread_id,
            comment_id=self.id,
        )
