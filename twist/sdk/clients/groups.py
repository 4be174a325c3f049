"""User group endpoints."""

from __future__ import annotations

from typing import Any

from ..core.config import ENDPOINT_GROUPS
from ..models.group import Group
from .base import BaseClient, compact, list_of


class GroupsClient(BaseClient):
    def get_groups(self, workspace_id: int, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_GROUPS}/get", {"workspace_id": workspace_id}, list_of(Group), batch=batch
        )

    def get_group(self, group_id: int, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_GROUPS}/getone", {"id": group_id}, Group.model_validate, batch=batch
        )

    def create_group(
        self,
        workspace_id: int,
        name: str,
        *,
        description: str | None = None,
        color: str | None = None,
        user_ids: list[int] | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_GROUPS}/add",
            compact(
                workspace_id=workspace_id,
                name=name,
                description=description,
                color=color,
                user_ids=user_ids,
            ),
            Group.model_validate,
            batch=batch,
        )

    def update_group(
        self,
        group_id: int,
        *,
        name: str | None = None,
        description: str | None = None,
        color: str | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_GROUPS}/update",
            compact(id=group_id, name=name, description=description, color=color),
            Group.model_validate,
            batch=batch,
        )

    def delete_group(self, group_id: int, *, batch: bool = False) -> Any:
        return self._post(f"{ENDPOINT_GROUPS}/remove", {"id": group_id}, batch=batch)

    def add_user(self, group_id: int, user_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_GROUPS}/add_user", {"id": group_id, "user_id": user_id}, batch=batch
        )

    def remove_user(self, group_id: int, user_id: int, *, batch: bool = False) -> Any:
        return self._post(
            f"{ENDPOINT_GROUPS}/remove_user", {"id": group_id, "user_id": user_id}, batch=batch
        )
