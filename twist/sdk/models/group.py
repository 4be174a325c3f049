"""User group data model."""

from .base import TwistModel


class Group(TwistModel):
    """A named set of workspace users."""

    id: int
    name: str
    description: str | None = None
    workspace_id: int
    user_ids: list[int]
    version: int
