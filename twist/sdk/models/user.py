"""User data models."""

from ..core.enums import UserType
from .base import TwistModel


class AvatarUrls(TwistModel):
    """Avatar renditions keyed by pixel size."""

    s35: str
    s60: str
    s195: str
    s640: str


class AwayMode(TwistModel):
    """Out-of-office window."""

    date_from: str
    type: str
    date_to: str


class BaseUser(TwistModel):
    """Fields shared by session users and workspace users."""

    id: int
    name: str
    short_name: str
    first_name: str | None = None
    contact_info: str | None = None
    bot: bool
    profession: str | None = None
    timezone: str
    removed: bool
    avatar_id: str | None = None
    avatar_urls: AvatarUrls | None = None
    away_mode: AwayMode | None = None
    restricted: bool | None = None
    setup_pending: bool | int | None = None


class User(BaseUser):
    """The authenticated user."""

    email: str
    lang: str
    snooze_dnd_start: str | None = None
    snooze_dnd_end: str | None = None
    client_id: str | None = None
    comet_channel: str | None = None
    comet_server: str | None = None
    off_days: list[int] | None = None
    default_workspace: int | None = None
    token: str | None = None
    snoozed: bool | None = None
    snooze_until: int | None = None
    scheduled_banners: list[str] | None = None


class WorkspaceUser(BaseUser):
    """A user as seen from one workspace (v4 API)."""

    email: str | None = None
    user_type: UserType
    date_format: str | None = None
    feature_flags: list[str] | None = None
    theme: str | None = None
    time_format: str | None = None
    version: int
