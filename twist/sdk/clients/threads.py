"""Thread endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..core.config import ENDPOINT_THREADS
from ..models.thread import Thread
from .base import BaseClient, compact, list_of


class ThreadsClient(BaseClient):
    def get_threads(
        self,
        channel_id: int,
        *,
        workspace_id: int | None = None,
        archived: bool | None = None,
        newer_than: datetime | None = None,
        older_than: datetime | None = None,
        limit: int | None = None,
        batch: bool = False,
    ) -> Any:
        """List threads of a channel.

        ``newer_than`` and ``older_than`` are sent as epoch seconds.
        """
        return self._get(
            f"{ENDPOINT_THREADS}/get",
            compact(
                channel_id=channel_id,
                workspace_id=workspace_id,
                archived=archived,
                newer_than_ts=newer_than,
                older_than_ts=older_than,
                limit=limit,
            ),
            list_of(Thread),
            batch=batch,
        )

    def get_thread(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_THREADS}/getone", {"id": thread_id}, Thread.model_validate, batch=batch
        )

    def create_thread(
        self,
        channel_id: int,
        title: str,
        content: str,
        *,
        recipients: list[int] | None = None,
        groups: list[int] | None = None,
        attachments: list[Any] | None = None,
        temp_id: int | None = None,
        send_as_integration: bool | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_THREADS}/add",
            compact(
                channel_id=channel_id,
                title=title,
                content=content,
                recipients=recipients,
                groups=groups,
                attachments=attachments,
                temp_id=temp_id,
                send_as_integration=send_as_integration,
            ),
            Thread.model_validate,
            batch=batch,
        )

    def update_thread(
        self,
        thread_id: int,
        *,
        title: str | None = None,
        content: str | None = None,
        attachments: list[Any] | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_THREADS}/update",
            compact(id=thread_id, title=title, content=content, attachments=attachments),
            Thread.model_validate,
            batch=batch,
        )

    def delete_thread(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_THREADS}/remove", {"id": thread_id}, batch=batch)

    def archive_thread(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_THREADS}/archive", {"id": thread_id}, batch=batch)

    def unarchive_thread(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_THREADS}/unarchive", {"id": thread_id}, batch=batch)

    def star_thread(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_THREADS}/star", {"id": thread_id}, batch=batch)

    def unstar_thread(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_THREADS}/unstar", {"id": thread_id}, batch=batch)

    def mark_read(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_THREADS}/mark_read", {"id": thread_id}, batch=batch)

    def mark_all_read(self, workspace_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_THREADS}/mark_all_read", {"workspace_id": workspace_id}, batch=batch
        )

    def clear_unread(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_THREADS}/clear_unread", {"id": thread_id}, batch=batch)

    def get_unread(self, workspace_id: int, *, batch: bool = False) -> Any:
        """Return references to threads with unread comments."""
        return self._get(
            f"{ENDPOINT_THREADS}/get_unread", {"workspace_id": workspace_id}, batch=batch
        )
