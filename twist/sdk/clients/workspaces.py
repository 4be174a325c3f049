"""Workspace endpoints."""

from __future__ import annotations

from typing import Any

from ..core.config import ENDPOINT_WORKSPACES
from ..models.workspace import Workspace
from .base import BaseClient, list_of


class WorkspacesClient(BaseClient):
    def get_workspaces(self, *, batch: bool = False) -> Any:
        """List the workspaces the user belongs to."""
        return self._get(f"{ENDPOINT_WORKSPACES}/get", None, list_of(Workspace), batch=batch)

    def get_workspace(self, workspace_id: int, *, batch: bool = False) -> Any:
        return self._get(
            f"{ENDPOINT_WORKSPACES}/getone",
            {"id": workspace_id},
            Workspace.model_validate,
            batch=batch,
        )
