"""Channel data model."""

from datetime import datetime

from pydantic import computed_field

from ..utils.url_helpers import get_full_twist_url
from .base import TwistModel


class Channel(TwistModel):
    """A channel grouping threads within a workspace."""

    id: int
    name: str
    description: str | None = None
    creator: int
    user_ids: list[int] | None = None
    color: int | None = None
    public: bool
    workspace_id: int
    archived: bool
    created: datetime
    use_default_recipients: bool | None = None
    default_groups: list[int] | None = None
    default_recipients: list[int] | None = None
    is_favorited: bool | None = None
    icon: int | None = None
    version: int
    filters: dict[str, str] | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """Web app link to the channel."""
        return get_full_twist_url(self.workspace_id, channel_id=self.id)
