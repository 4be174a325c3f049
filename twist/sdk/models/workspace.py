"""Workspace data model."""

from datetime import datetime

from ..core.enums import WorkspacePlan
from .base import TwistModel
from .user import AvatarUrls


class Workspace(TwistModel):
    """A Twist workspace."""

    id: int
    name: str
    creator: int
    created: datetime
    default_channel: int | None = None
    default_conversation: int | None = None
    avatar_id: str | None = None
    avatar_urls: AvatarUrls | None = None
    plan: WorkspacePlan | None = None
