"""Conversation message endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..core.config import ENDPOINT_CONVERSATION_MESSAGES
from ..models.conversation import ConversationMessage
from .base import BaseClient, compact, list_of


class ConversationMessagesClient(BaseClient):
    def get_messages(
        self,
        conversation_id: int,
        *,
        newer_than: datetime | None = None,
        older_than: datetime | None = None,
        limit: int | None = None,
        cursor: str | None = None,
        batch: bool = False,
    ) -> Any:
        return self._get(
            f"{ENDPOINT_CONVERSATION_MESSAGES}/get",
            compact(
                conversation_id=conversation_id,
                newer_than_ts=newer_than,
                older_than_ts=older_than,
                limit=limit,
                cursor=cursor,
            ),
            list_of(ConversationMessage),
            batch=batch,
        )

    def get_message(self, message_id: int, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_CONVERSATION_MESSAGES}/getone",
            {"id": message_id},
            ConversationMessage.model_validate,
            batch=batch,
        )

    def create_message(
        self,
        conversation_id: int,
        content: str,
        *,
        attachments: list[Any] | None = None,
        actions: list[Any] | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_CONVERSATION_MESSAGES}/add",
            compact(
                conversation_id=conversation_id,
                content=content,
                attachments=attachments,
                actions=actions,
            ),
            ConversationMessage.model_validate,
            batch=batch,
        )

    def update_message(
        self,
        message_id: int,
        content: str,
        *,
        attachments: list[Any] | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_CONVERSATION_MESSAGES}/update",
            compact(id=message_id, content=content, attachments=attachments),
            ConversationMessage.model_validate,
            batch=batch,
        )

    def delete_message(self, message_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_CONVERSATION_MESSAGES}/remove", {"id": message_id}, batch=batch
        )
