"""Search endpoints."""

from __future__ import annotations

from typing import Any

from ..core.config import ENDPOINT_SEARCH
from ..models.search import SearchConversationResponse, SearchResponse, SearchThreadResponse
from .base import BaseClient, compact


class SearchClient(BaseClient):
    def search(
        self,
        query: str,
        workspace_id: int,
        *,
        channel_ids: list[int] | None = None,
        author_ids: list[int] | None = None,
        mention_self: bool | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: int | None = None,
        cursor: str | None = None,
        batch: bool = False,
    ) -> Any:
        """Search threads, comments and messages of a workspace.

        Args:
            query: Search terms
            workspace_id: Workspace to search
            channel_ids: Restrict to these channels
            author_ids: Restrict to these authors
            mention_self: Only results mentioning the current user
            date_from: Lower bound, ``YYYY-MM-DD``
            date_to: Upper bound, ``YYYY-MM-DD``
            limit: Page size
            cursor: ``next_cursor_mark`` of the previous page
            batch: Return a descriptor instead of executing
        """
        return self._get(
            ENDPOINT_SEARCH,
            compact(
                query=query,
                workspace_id=workspace_id,
                channel_ids=channel_ids,
                author_ids=author_ids,
                mention_self=mention_self,
                date_from=date_from,
                date_to=date_to,
                limit=limit,
                cursor=cursor,
            ),
            SearchResponse.model_validate,
            batch=batch,
        )

    def search_thread(
        self,
        query: str,
        thread_id: int,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        batch: bool = False,
    ) -> Any:
        return self._get(
            f"{ENDPOINT_SEARCH}/thread",
            compact(query=query, thread_id=thread_id, limit=limit, cursor=cursor),
            SearchThreadResponse.model_validate,
            batch=batch,
        )

    def search_conversation(
        self,
        query: str,
        conversation_id: int,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        batch: bool = False,
    ) -> Any:
        return self._get(
            f"{ENDPOINT_SEARCH}/conversation",
            compact(query=query, conversation_id=conversation_id, limit=limit, cursor=cursor),
            SearchConversationResponse.model_validate,
            batch=batch,
        )
