"""Conversation (direct message) endpoints."""

from __future__ import annotations

from typing import Any

from ..core.config import ENDPOINT_CONVERSATIONS
from ..models.conversation import Conversation
from .base import BaseClient, compact, list_of


class ConversationsClient(BaseClient):
    def get_conversations(
        self, workspace_id: int, *, archived: bool | None = None, batch: bool = False
    ) -> Any:
        return self._get(
            f"{ENDPOINT_CONVERSATIONS}/get",
            compact(workspace_id=workspace_id, archived=archived),
            list_of(Conversation),
            batch=batch,
        )

    def get_conversation(self, conversation_id: int, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_CONVERSATIONS}/getone",
            {"id": conversation_id},
            Conversation.model_validate,
            batch=batch,
        )

    def get_or_create_conversation(
        self, workspace_id: int, user_ids: list[int], *, batch: bool = False
    ) -> Any:
        """Return the conversation between exactly ``user_ids``, creating it if needed."""
        return self._post(
            f"{ENDPOINT_CONVERSATIONS}/get_or_create",
            {"workspace_id": workspace_id, "user_ids": user_ids},
            Conversation.model_validate,
            batch=batch,
        )

    def archive_conversation(self, conversation_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_CONVERSATIONS}/archive", {"id": conversation_id}, batch=batch)

    def unarchive_conversation(self, conversation_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_CONVERSATIONS}/unarchive", {"id": conversation_id}, batch=batch
        )

    def add_user(self, conversation_id: int, user_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_CONVERSATIONS}/add_user",
            {"id": conversation_id, "user_id": user_id},
            batch=batch,
        )

    def remove_user(self, conversation_id: int, user_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_CONVERSATIONS}/remove_user",
            {"id": conversation_id, "user_id": user_id},
            batch=batch,
        )
