"""Thread comment endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..core.config import ENDPOINT_COMMENTS
from ..models.comment import Comment
from .base import BaseClient, compact, list_of


class CommentsClient(BaseClient):
    def get_comments(
        self,
        thread_id: int,
        *,
        from_date: datetime | None = None,
        limit: int | None = None,
        batch: bool = False,
    ) -> Any:
        """List comments of a thread.

        Args:
            thread_id: Thread to read
            from_date: Only comments posted at or after this instant
            limit: Maximum number of comments
            batch: Return a descriptor instead of executing
        """
        return self._get(
            f"{ENDPOINT_COMMENTS}/get",
            compact(thread_id=thread_id, **{"from": from_date}, limit=limit),
            list_of(Comment),
            batch=batch,
        )

    def get_comment(self, comment_id: int, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_COMMENTS}/getone", {"id": comment_id}, Comment.model_validate, batch=batch
        )

    def create_comment(
        self,
        thread_id: int,
        content: str,
        *,
        temp_id: int | None = None,
        recipients: list[int] | None = None,
        attachments: list[Any] | None = None,
        actions: list[Any] | None = None,
        send_as_integration: bool | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_COMMENTS}/add",
            compact(
                thread_id=thread_id,
                content=content,
                temp_id=temp_id,
                recipients=recipients,
                attachments=attachments,
                actions=actions,
                send_as_integration=send_as_integration,
            ),
            Comment.model_validate,
            batch=batch,
        )

    def update_comment(
        self,
        comment_id: int,
        content: str,
        *,
        attachments: list[Any] | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_COMMENTS}/update",
            compact(id=comment_id, content=content, attachments=attachments),
            Comment.model_validate,
            batch=batch,
        )

    def delete_comment(self, comment_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_COMMENTS}/remove", {"id": comment_id}, batch=batch)

    def mark_position(self, thread_id: int, comment_id: int, *, batch: bool = False) -> Any:
        """Record ``comment_id`` as the last read comment of the thread."""
        return self._post(
            f"{ENDPOINT_COMMENTS}/mark_position",
            {"thread_id": thread_id, "comment_id": comment_id},
            batch=batch,
        )
