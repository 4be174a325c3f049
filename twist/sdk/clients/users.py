"""Session user endpoints."""

from __future__ import annotations

from typing import Any

from ..core.config import ENDPOINT_USERS
from ..models.user import User
from .base import BaseClient


class UsersClient(BaseClient):
    def get_session_user(self, *, batch: bool = False) -> Any:
        """Return the user the access token belongs to."""
        return self._get(
            f"{ENDPOINT_USERS}/get_session_user", None, User.model_validate, batch=batch
        )
