"""Inbox endpoints.

``since`` and ``until`` are sent as epoch seconds in the
``*_ts_or_obj_idx`` parameters the inbox endpoints expect.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..core.config import ENDPOINT_INBOX
from ..models.inbox import InboxThread
from .base import BaseClient, compact, field_of, list_of


class InboxClient(BaseClient):
    def get_inbox(
        self,
        workspace_id: int,
        *,
        since: datetime | None = None,
        until: datetime | None = None,
        limit: int | None = None,
        cursor: str | None = None,
        batch: bool = False,
    ) -> Any:
        return self._get(
            f"{ENDPOINT_INBOX}/get",
            compact(
                workspace_id=workspace_id,
                since_ts_or_obj_idx=since,
                until_ts_or_obj_idx=until,
                limit=limit,
                cursor=cursor,
            ),
            list_of(InboxThread),
            batch=batch,
        )

    def get_count(self, workspace_id: int, *, batch: bool = False) -> Any:
        """Return the number of unread inbox threads."""
        return self._get(
            f"{ENDPOINT_INBOX}/get_count",
            {"workspace_id": workspace_id},
            field_of("data"),
            batch=batch,
        )

    def archive_thread(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_INBOX}/archive", {"id": thread_id}, batch=batch)

    def unarchive_thread(self, thread_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_INBOX}/unarchive", {"id": thread_id}, batch=batch)

    def mark_all_read(self, workspace_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_INBOX}/mark_all_read", {"workspace_id": workspace_id}, batch=batch
        )

    def archive_all(
        self,
        workspace_id: int,
        *,
        channel_ids: list[int] | None = None,
        since: datetime | None = None,
        until: datetime | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_INBOX}/archive_all",
            compact(
                workspace_id=workspace_id,
                channel_ids=channel_ids,
                since_ts_or_obj_idx=since,
                until_ts_or_obj_idx=until,
            ),
            batch=batch,
        )
