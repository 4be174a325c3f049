"""Workspace membership endpoints (served by API v4).

Workspace user calls identify the workspace with ``id`` and the member with
``user_id`` or ``email``.
"""

from __future__ import annotations

from typing import Any

from ..core.config import ENDPOINT_WORKSPACE_USERS
from ..core.enums import ApiVersion, UserType
from ..models.user import WorkspaceUser
from .base import BaseClient, compact, list_of


class WorkspaceUsersClient(BaseClient):
    api_version = ApiVersion.V4

    def get_workspace_users(
        self, workspace_id: int, *, archived: bool | None = None, batch: bool = False
    ) -> Any:
        """List members of a workspace.

        Args:
            workspace_id: Workspace to list
            archived: Restrict to removed (True) or active (False) members
            batch: Return a descriptor instead of executing
        """
        return self._get(
            f"{ENDPOINT_WORKSPACE_USERS}/get",
            compact(id=workspace_id, archived=archived),
            list_of(WorkspaceUser),
            batch=batch,
        )

    def get_workspace_user_ids(self, workspace_id: int, *, batch: bool = False) -> Any:
        return self._get(f"{ENDPOINT_WORKSPACE_USERS}/get_ids", {"id": workspace_id}, batch=batch)

    def get_user_by_id(self, workspace_id: int, user_id: int, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_WORKSPACE_USERS}/getone",
            {"id": workspace_id, "user_id": user_id},
            WorkspaceUser.model_validate,
            batch=batch,
        )

    def get_user_by_email(self, workspace_id: int, email: str, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_WORKSPACE_USERS}/get_by_email",
            {"id": workspace_id, "email": email},
            WorkspaceUser.model_validate,
            batch=batch,
        )

    def get_user_info(self, workspace_id: int, user_id: int, *, batch: bool = False) -> Any:
        """Return the member's info in the context of the workspace, unvalidated."""
        return self._get(
            f"{ENDPOINT_WORKSPACE_USERS}/get_info",
            {"id": workspace_id, "user_id": user_id},
            batch=batch,
        )

    def get_user_local_time(self, workspace_id: int, user_id: int, *, batch: bool = False) -> Any:
        """Return the member's local time, e.g. ``"2017-05-10 07:55:40"``."""
        return self._get(
            f"{ENDPOINT_WORKSPACE_USERS}/get_local_time",
            {"id": workspace_id, "user_id": user_id},
            batch=batch,
        )

    def add_user(
        self,
        workspace_id: int,
        email: str,
        *,
        name: str | None = None,
        user_type: UserType | None = None,
        channel_ids: list[int] | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_WORKSPACE_USERS}/add",
            compact(
                id=workspace_id,
                email=email,
                name=name,
                user_type=user_type.value if user_type else None,
                channel_ids=channel_ids,
            ),
            WorkspaceUser.model_validate,
            batch=batch,
        )

    def update_user(
        self,
        workspace_id: int,
        user_type: UserType,
        *,
        email: str | None = None,
        user_id: int | None = None,
        batch: bool = False,
    ) -> Any:
        """Change a member's role; identify them by ``email`` or ``user_id``."""
        return self._post(
            f"{ENDPOINT_WORKSPACE_USERS}/update",
            compact(
                id=workspace_id,
                user_type=UserType(user_type).value,
                email=email,
                user_id=user_id,
            ),
            WorkspaceUser.model_validate,
            batch=batch,
        )

    def remove_user(
        self,
        workspace_id: int,
        *,
        email: str | None = None,
        user_id: int | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_WORKSPACE_USERS}/remove",
            compact(id=workspace_id, email=email, user_id=user_id),
            batch=batch,
        )

    def resend_invite(
        self,
        workspace_id: int,
        email: str,
        *,
        user_id: int | None = None,
        batch: bool = False,
    ) -> Any:
        return self._post(
            f"{ENDPOINT_WORKSPACE_USERS}/resend_invite",
            compact(id=workspace_id, email=email, user_id=user_id),
            batch=batch,
        )
