"""Emoji reaction endpoints."""

from __future__ import annotations

from typing import Any

from ..core.config import ENDPOINT_REACTIONS
from .base import BaseClient


def _reaction_params(
    emoji: str,
    thread_id: int | None,
    comment_id: int | None,
    conversation_message_id: int | None,
) -> dict[str, Any]:
    targets = {
        "thread_id": thread_id,
        "comment_id": comment_id,
        "conversation_message_id": conversation_message_id,
    }
    chosen = {key: value for key, value in targets.items() if value is not None}
    if len(chosen) != 1:
        raise ValueError(
            "Exactly one of thread_id, comment_id or conversation_message_id is required"
        )
    return {"emoji": emoji, **chosen}


class ReactionsClient(BaseClient):
    """Adds and removes reactions on a thread, comment or message."""

    def add(
        self,
        emoji: str,
        *,
        thread_id: int | None = None,
        comment_id: int | None = None,
        conversation_message_id: int | None = None,
        batch: bool = False,
    ) -> Any:
        """Add a reaction.

        Raises:
            ValueError: If not exactly one target id is given
        """
        params = _reaction_params(emoji, thread_id, comment_id, conversation_message_id)
        return self._post(f"{ENDPOINT_REACTIONS}/add", params, batch=batch)

    def remove(
        self,
        emoji: str,
        *,
        thread_id: int | None = None,
        comment_id: int | None = None,
        conversation_message_id: int | None = None,
        batch: bool = False,
    ) -> Any:
        params = _reaction_params(emoji, thread_id, comment_id, conversation_message_id)
        return self._post(f"{ENDPOINT_REACTIONS}/remove", params, batch=batch)
