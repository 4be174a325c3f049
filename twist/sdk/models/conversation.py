"""Conversation (direct message) data models."""

from datetime import datetime
from typing import Any

from pydantic import computed_field

from ..utils.url_helpers import get_full_twist_url
from .base import TwistModel


class ConversationMessage(TwistModel):
    """A message posted in a conversation."""

    id: int
    content: str
    creator: int
    conversation_id: int
    workspace_id: int
    posted: datetime
    system_message: Any = None
    attachments: list[Any] | None = None
    reactions: dict[str, list[int]] | None = None
    actions: list[Any] | None = None
    obj_index: int | None = None
    last_edited: datetime | None = None
    is_deleted: bool | None = None
    direct_group_mentions: list[int] | None = None
    direct_mentions: list[int] | None = None
    version: int | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """Web app link to the message."""
        return get_full_twist_url(
            self.workspace_id, conversation_id=self.conversation_id, message_id=self.id
        )


class ConversationLastMessage(TwistModel):
    """Latest message embedded in a conversation payload."""

    id: int
    content: str
    creator: int
    conversation_id: int
    posted: datetime
    system_message: Any = None
    attachments: list[Any] | None = None
    reactions: dict[str, list[int]] | None = None
    actions: list[Any] | None = None
    obj_index: int | None = None
    last_edited: datetime | None = None
    deleted: bool | None = None
    direct_group_mentions: list[int] | None = None
    direct_mentions: list[int] | None = None
    version: int | None = None
    workspace_id: int | None = None


class Conversation(TwistModel):
    """A direct-message conversation between workspace users."""

    id: int
    workspace_id: int
    user_ids: list[int]
    message_count: int | None = None
    last_obj_index: int
    snippet: str
    snippet_creators: list[int]
    last_active: datetime
    muted_until: datetime | None = None
    archived: bool
    created: datetime
    creator: int
    title: str | None = None
    private: bool | None = None
    last_message: ConversationLastMessage | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """Web app link to the conversation."""
        return get_full_twist_url(self.workspace_id, conversation_id=self.id)
