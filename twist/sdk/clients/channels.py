"""Channel endpoints."""

from __future__ import annotations

from typing import Any

from ..core.config import ENDPOINT_CHANNELS
from ..models.channel import Channel
from .base import BaseClient, compact, list_of


class ChannelsClient(BaseClient):
    """Client for channel endpoints.

    Example:
        >>> channels = await api.channels.get_channels(123)
        >>> descriptor = api.channels.get_channel(42, batch=True)
    """

    def get_channels(
        self, workspace_id: int, *, archived: bool | None = None, batch: bool = False
    ) -> Any:
        return self._get(
            f"{ENDPOINT_CHANNELS}/get",
            compact(workspace_id=workspace_id, archived=archived),
            list_of(Channel),
            batch=batch,
        )

    def get_channel(self, channel_id: int, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_CHANNELS}/getone", {"id": channel_id}, Channel.model_validate, batch=batch
        )

    def create_channel(
        self,
        workspace_id: int,
        name: str,
        *,
        temp_id: int | None = None,
        user_ids: list[int] | None = None,
        color: int | None = None,
        public: bool | None = None,
        description: str | None = None,
        default_groups: list[int] | None = None,
        default_recipients: list[int] | None = None,
        is_favorited: bool | None = None,
        icon: int | None = None,
        batch: bool = False,
    ) -> Any:
        """Create a channel in a workspace.

        Args:
            workspace_id: Workspace the channel belongs to
            name: Channel name
            temp_id: Client-side id echoed back by the server
            user_ids: Initial members
            color: Color index
            public: Whether every workspace member can join
            description: Channel description
            default_groups: Groups notified by default in new threads
            default_recipients: Users notified by default in new threads
            is_favorited: Pin the channel for the creator
            icon: Icon index
            batch: Return a descriptor instead of executing
        """
        return self._post(
            f"{ENDPOINT_CHANNELS}/add",
            compact(
                workspace_id=workspace_id,
                name=name,
                temp_id=temp_id,
                user_ids=user_ids,
                color=color,
                public=public,
                description=description,
                default_groups=default_groups,
                default_recipients=default_recipients,
                is_favorited=is_favorited,
                icon=icon,
            ),
            Channel.model_validate,
            batch=batch,
        )

    def update_channel(
        self,
        channel_id: int,
        name: str,
        *,
        color: int | None = None,
        public: bool | None = None,
        description: str | None = None,
        default_groups: list[int] | None = None,
        default_recipients: list[int] | None = None,
        is_favorited: bool | None = None,
        icon: int | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_CHANNELS}/update",
            compact(
                id=channel_id,
                name=name,
                color=color,
                public=public,
                description=description,
                default_groups=default_groups,
                default_recipients=default_recipients,
                is_favorited=is_favorited,
                icon=icon,
            ),
            Channel.model_validate,
            batch=batch,
        )

    def delete_channel(self, channel_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_CHANNELS}/remove", {"id": channel_id}, batch=batch)

    def archive_channel(self, channel_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_CHANNELS}/archive", {"id": channel_id}, batch=batch)

    def unarchive_channel(self, channel_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_CHANNELS}/unarchive", {"id": channel_id}, batch=batch)

    def favorite_channel(self, channel_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_CHANNELS}/favorite", {"id": channel_id}, batch=batch)

    def unfavorite_channel(self, channel_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_CHANNELS}/unfavorite", {"id": channel_id}, batch=batch)

    def add_user(self, channel_id: int, user_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_CHANNELS}/add_user", {"id": channel_id, "user_id": user_id}, batch=batch
        )

    def add_users(self, channel_id: int, user_ids: list[int], *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_CHANNELS}/add_users",
            {"id": channel_id, "user_ids": user_ids},
            batch=batch,
        )

    def remove_user(self, channel_id: int, user_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_CHANNELS}/remove_user", {"id": channel_id, "user_id": user_id}, batch=batch
        )

    def remove_users(self, channel_id: int, user_ids: list[int], *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_CHANNELS}/remove_users",
            {"id": channel_id, "user_ids": user_ids},
            batch=batch,
        )
