"""Unit tests for API entity models."""

from __future__ import annotations

from datetime import UTC, datetime

import pydantic
import pytest

from twist.sdk.core import UserType, WorkspacePlan
from twist.sdk.models import (
    Channel,
    Comment,
    Conversation,
    ConversationMessage,
    Group,
    InboxThread,
    SearchResponse,
    Thread,
    User,
    Workspace,
    WorkspaceUser,
)
from twist.sdk.runtime.rest import transform_response

POSTED = 1700000000
POSTED_DT = datetime.fromtimestamp(POSTED, tz=UTC)


def wire(payload: dict) -> dict:
    """Apply the inbound transform to a snake_case API payload."""
    return transform_response(payload)


class TestTwistModel:
    """Test shared model configuration."""

    def test_frozen(self):
        group = Group.model_validate(
            wire({"id": 1, "name": "g", "workspace_id": 2, "user_ids": [], "version": 0})
        )
        with pytest.raises(pydantic.ValidationError):
            group.name = "other"  # type: ignore[misc]

    def test_accepts_field_names(self):
        """Attribute names are accepted alongside camelCase aliases."""
        group = Group(id=1, name="g", workspace_id=2, user_ids=[3], version=0)
        assert group.workspace_id == 2

    def test_unknown_keys_ignored(self):
        group = Group.model_validate(
            {"id": 1, "name": "g", "workspaceId": 2, "userIds": [], "version": 0, "extra": 1}
        )
        assert not hasattr(group, "extra")


class TestUserModels:
    """Test user and workspace models."""

    def test_user(self):
        user = User.model_validate(
            wire(
                {
                    "id": 1,
                    "name": "Ann Lee",
                    "short_name": "Ann",
                    "bot": False,
                    "timezone": "Europe/Lisbon",
                    "removed": False,
                    "email": "ann@example.com",
                    "lang": "en",
                    "avatar_urls": {"s35": "a", "s60": "b", "s195": "c", "s640": "d"},
                    "away_mode": {
                        "date_from": "2024-01-01",
                        "type": "vacation",
                        "date_to": "2024-01-10",
                    },
                }
            )
        )
        assert user.short_name == "Ann"
        assert user.avatar_urls.s640 == "d"
        assert user.away_mode.date_to == "2024-01-10"

    def test_workspace_user(self):
        member = WorkspaceUser.model_validate(
            wire(
                {
                    "id": 2,
                    "name": "Bo",
                    "short_name": "Bo",
                    "bot": False,
                    "timezone": "UTC",
                    "removed": False,
                    "user_type": "ADMIN",
                    "version": 3,
                }
            )
        )
        assert member.user_type is UserType.ADMIN
        assert member.email is None

    def test_workspace(self):
        workspace = Workspace.model_validate(
            wire({"id": 1, "name": "Acme", "creator": 2, "created_ts": POSTED, "plan": "unlimited"})
        )
        assert workspace.created == POSTED_DT
        assert workspace.plan is WorkspacePlan.UNLIMITED


CHANNEL = {
    "id": 10,
    "name": "general",
    "creator": 1,
    "public": True,
    "workspace_id": 5,
    "archived": False,
    "created_ts": POSTED,
    "version": 1,
}

THREAD = {
    "id": 20,
    "title": "Launch",
    "content": "Plan",
    "creator": 1,
    "channel_id": 10,
    "workspace_id": 5,
    "comment_count": 2,
    "last_updated_ts": POSTED,
    "pinned": True,
    "pinned_ts": POSTED,
    "posted_ts": POSTED,
    "snippet": "Plan",
    "snippet_creator": 1,
    "starred": False,
    "is_archived": False,
}


class TestChannelAndThread:
    def test_channel_url(self):
        channel = Channel.model_validate(wire(CHANNEL))
        assert channel.created == POSTED_DT
        assert channel.url == "https://twist.com/a/5/ch/10/"

    def test_thread_timestamp_collision(self):
        """``pinned_ts`` lands in ``pinned_date`` because ``pinned`` is a flag."""
        thread = Thread.model_validate(wire(THREAD))
        assert thread.pinned is True
        assert thread.pinned_date == POSTED_DT
        assert thread.last_updated == POSTED_DT
        assert thread.url == "https://twist.com/a/5/ch/10/t/20/"

    def test_thread_missing_field(self):
        payload = dict(THREAD)
        del payload["snippet"]
        with pytest.raises(pydantic.ValidationError):
            Thread.model_validate(wire(payload))

    def test_inbox_thread(self):
        comment = {
            "id": 30,
            "content": "hi",
            "creator": 1,
            "thread_id": 20,
            "workspace_id": 5,
            "channel_id": 10,
            "posted_ts": POSTED,
        }
        inbox = InboxThread.model_validate(
            wire({**THREAD, "in_inbox": True, "closed": False, "last_comment": comment})
        )
        assert inbox.last_comment.posted == POSTED_DT
        assert inbox.url == "https://twist.com/a/5/ch/10/t/20/"


class TestCommentAndMessages:
    def test_comment_url(self):
        comment = Comment.model_validate(
            wire(
                {
                    "id": 30,
                    "content": "hi",
                    "creator": 1,
                    "thread_id": 20,
                    "workspace_id": 5,
                    "channel_id": 10,
                    "posted_ts": POSTED,
                }
            )
        )
        assert comment.url == "https://twist.com/a/5/ch/10/t/20/c/30"

    def test_conversation_and_message(self):
        conversation = Conversation.model_validate(
            wire(
                {
                    "id": 40,
                    "workspace_id": 5,
                    "user_ids": [1, 2],
                    "last_obj_index": 3,
                    "snippet": "yo",
                    "snippet_creators": [1],
                    "last_active_ts": POSTED,
                    "archived": False,
                    "created_ts": POSTED,
                    "creator": 1,
                }
            )
        )
        assert conversation.url == "https://twist.com/a/5/msg/40/"

        message = ConversationMessage.model_validate(
            wire(
                {
                    "id": 50,
                    "content": "yo",
                    "creator": 1,
                    "conversation_id": 40,
                    "workspace_id": 5,
                    "posted_ts": POSTED,
                }
            )
        )
        assert message.url == "https://twist.com/a/5/msg/40/m/50"


class TestSearch:
    def test_search_response(self):
        response = SearchResponse.model_validate(
            wire(
                {
                    "items": [
                        {
                            "id": "c-1",
                            "type": "comment",
                            "snippet": "found",
                            "snippet_creator_id": 1,
                            "snippet_last_updated_ts": POSTED,
                            "comment_id": 30,
                        }
                    ],
                    "next_cursor_mark": "abc",
                    "has_more": True,
                    "is_plan_restricted": False,
                }
            )
        )
        assert response.items[0].snippet_last_updated == POSTED_DT
        assert response.has_more

    def test_search_result_type_checked(self):
        with pytest.raises(pydantic.ValidationError):
            SearchResponse.model_validate(
                {
                    "items": [
                        {
                            "id": "x",
                            "type": "channel",
                            "snippet": "",
                            "snippetCreatorId": 1,
                            "snippetLastUpdated": POSTED_DT,
                        }
                    ],
                    "hasMore": False,
                    "isPlanRestricted": False,
                }
            )
