"""Search result data models."""

from datetime import datetime
from typing import Literal

from .base import TwistModel


class SearchResult(TwistModel):
    """A single search hit."""

    id: str
    type: Literal["thread", "comment", "message"]
    snippet: str
    snippet_creator_id: int
    snippet_last_updated: datetime
    thread_id: int | None = None
    conversation_id: int | None = None
    comment_id: int | None = None
    channel_id: int | None = None
    channel_name: str | None = None
    channel_color: int | None = None
    title: str | None = None
    closed: bool | None = None


class SearchResponse(TwistModel):
    """A page of workspace search results."""

    items: list[SearchResult]
    next_cursor_mark: str | None = None
    has_more: bool
    is_plan_restricted: bool


class SearchThreadResponse(TwistModel):
    """Ids of comments matching a query inside one thread."""

    comment_ids: list[int]


class SearchConversationResponse(TwistModel):
    """Ids of messages matching a query inside one conversation."""

    message_ids: list[int]
